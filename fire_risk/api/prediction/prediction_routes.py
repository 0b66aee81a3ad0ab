import structlog
from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from fire_risk.api.dependencies import get_prediction_service
from fire_risk.exceptions.prediction import PredictionServiceError
from fire_risk.models.prediction import PredictionRequest, PredictionResponse
from fire_risk.services.prediction_service import PredictionService

logger = structlog.get_logger(__name__)

# Create router
router = APIRouter(tags=["Prediction"])


@router.post(
    "/predict",
    summary="Predict Fire Risk",
    responses={
        200: {"model": PredictionResponse, "description": "Upstream response, relayed unchanged"},
        400: {"content": {"text/plain": {}}, "description": "Request body could not be decoded"},
        500: {"content": {"text/plain": {}}, "description": "Prediction service unreachable or unreadable"},
    },
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": PredictionRequest.model_json_schema()}},
            "required": True,
        }
    },
)
async def predict(request: Request, prediction_service: PredictionService = Depends(get_prediction_service)):
    """
    Forward an area of interest and date to the prediction service.

    The body is decoded, re-encoded and POSTed upstream. The upstream status
    code and body are relayed as-is with an application/json content type.

    Args:
        request: Incoming request carrying the JSON body.
        prediction_service: Client for the upstream prediction service.

    Returns:
        The upstream response, a 400 for undecodable bodies, or a 500 when
        the upstream cannot be reached or read.
    """
    body = await request.body()

    try:
        prediction_request = PredictionRequest.model_validate_json(body)
    except ValidationError as e:
        logger.info("Rejected prediction request", error_count=e.error_count())
        return PlainTextResponse("Invalid request", status_code=status.HTTP_400_BAD_REQUEST)

    try:
        upstream = await prediction_service.predict(prediction_request)
    except PredictionServiceError as e:
        return PlainTextResponse(
            f"Prediction service error: {e}",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return Response(
        content=upstream.content,
        status_code=upstream.status_code,
        media_type="application/json",
    )
