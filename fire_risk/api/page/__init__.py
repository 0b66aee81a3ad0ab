from fire_risk.api.page.page_routes import router as page_router

__all__ = ["page_router"]
