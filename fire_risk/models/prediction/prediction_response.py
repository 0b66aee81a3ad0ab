from pydantic import BaseModel, Field


class PredictionResponse(BaseModel):
    """Body returned by the prediction service. Relayed unparsed."""

    probability: float = Field(..., description="Fire risk probability")
    message: str = Field(..., description="Human readable risk description")
