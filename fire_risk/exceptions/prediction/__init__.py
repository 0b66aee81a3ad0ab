from fire_risk.exceptions.prediction.prediction_service_error import PredictionServiceError
from fire_risk.exceptions.prediction.upstream_read_error import UpstreamReadError
from fire_risk.exceptions.prediction.upstream_unavailable_error import UpstreamUnavailableError

__all__ = [
    "PredictionServiceError",
    "UpstreamReadError",
    "UpstreamUnavailableError",
]
