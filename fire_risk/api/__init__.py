from fire_risk.api.health import health_router
from fire_risk.api.page import page_router
from fire_risk.api.prediction import prediction_router

__all__ = ["health_router", "page_router", "prediction_router"]
