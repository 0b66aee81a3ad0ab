from fire_risk.exceptions.base import FireRiskError
from fire_risk.exceptions.prediction import (
    PredictionServiceError,
    UpstreamReadError,
    UpstreamUnavailableError,
)

__all__ = [
    "FireRiskError",
    "PredictionServiceError",
    "UpstreamReadError",
    "UpstreamUnavailableError",
]
