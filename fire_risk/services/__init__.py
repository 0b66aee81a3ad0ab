from fire_risk.services.prediction_service import PredictionService

__all__ = ["PredictionService"]
