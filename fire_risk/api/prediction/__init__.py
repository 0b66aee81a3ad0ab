from fire_risk.api.prediction.prediction_routes import router as prediction_router

__all__ = ["prediction_router"]
