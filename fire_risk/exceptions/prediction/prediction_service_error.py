from fire_risk.exceptions.base import FireRiskError


class PredictionServiceError(FireRiskError):
    """Base exception for prediction service errors."""

    pass
