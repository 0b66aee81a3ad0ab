from pydantic import BaseModel, Field


class UpstreamResponse(BaseModel):
    """Status code and raw body received from the prediction service."""

    status_code: int = Field(..., ge=100, le=999, description="Upstream HTTP status code")
    content: bytes = Field(default=b"", description="Upstream response body, unmodified")
