from fire_risk.exceptions.prediction.prediction_service_error import PredictionServiceError


class UpstreamUnavailableError(PredictionServiceError):
    """Exception for transport-level failures reaching the prediction service."""

    pass
