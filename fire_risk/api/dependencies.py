from fastapi import Request

from fire_risk.config import Config
from fire_risk.services.prediction_service import PredictionService


async def get_settings(request: Request) -> Config:
    """Settings the application was created with."""
    return request.app.state.settings


async def get_prediction_service(request: Request) -> PredictionService:
    """
    Prediction service shared by all requests.

    The instance is built once in create_app and stored on the app state;
    tests replace it through app.dependency_overrides.
    """
    return request.app.state.prediction_service
