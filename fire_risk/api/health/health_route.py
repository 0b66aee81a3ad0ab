from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from fire_risk import __version__
from fire_risk.api.dependencies import get_settings
from fire_risk.config import Config

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("", summary="API Health Check")
async def get_health(settings: Config = Depends(get_settings)):
    """Basic health check endpoint."""

    return {
        "message": "Fire Risk API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": __version__,
        "prediction_service_configured": settings.prediction_service_configured,
    }
