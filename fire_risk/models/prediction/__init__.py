from fire_risk.models.prediction.prediction_request import PredictionRequest
from fire_risk.models.prediction.prediction_response import PredictionResponse
from fire_risk.models.prediction.upstream_response import UpstreamResponse

__all__ = ["PredictionRequest", "PredictionResponse", "UpstreamResponse"]
