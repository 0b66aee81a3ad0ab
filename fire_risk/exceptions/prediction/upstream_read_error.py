from fire_risk.exceptions.prediction.prediction_service_error import PredictionServiceError


class UpstreamReadError(PredictionServiceError):
    """Exception for failures reading the prediction service response body."""

    pass
