from typing import Any, Dict, Optional

import anyio
import httpx
import structlog

from fire_risk.config import Config
from fire_risk.exceptions.prediction import UpstreamReadError, UpstreamUnavailableError
from fire_risk.models.prediction import PredictionRequest, UpstreamResponse

logger = structlog.get_logger(__name__)


class PredictionService:
    """
    Client for the external fire risk prediction service.

    Forwards a decoded prediction request to the configured upstream URL and
    returns the upstream status code and body untouched. No retries are made;
    every call is bounded by the configured timeout.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        connect_timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the prediction service.

        Args:
            base_url: Upstream prediction endpoint; may be empty
            timeout: Overall request timeout in seconds
            connect_timeout: Connect timeout in seconds
            client: Shared HTTP client; one is created and owned if omitted
        """
        self.base_url = base_url
        self.deadline = timeout
        self.timeout = httpx.Timeout(timeout, connect=connect_timeout)

        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=self.timeout)

    @classmethod
    def from_config(cls, settings: Config, client: Optional[httpx.AsyncClient] = None) -> "PredictionService":
        return cls(
            base_url=settings.predict_api_url,
            timeout=settings.predict_timeout_seconds,
            connect_timeout=settings.predict_connect_timeout_seconds,
            client=client,
        )

    async def predict(self, request: PredictionRequest) -> UpstreamResponse:
        """
        POST a prediction request to the upstream service.

        The whole exchange, from connecting to reading the last body byte, is
        bounded by the overall timeout. The per-operation httpx timeouts still
        apply inside it.

        Args:
            request: Decoded area of interest and date

        Returns:
            UpstreamResponse with the upstream status code and raw body

        Raises:
            UpstreamUnavailableError: If the upstream cannot be reached or misses the deadline
            UpstreamReadError: If the upstream body cannot be read
        """
        payload = request.model_dump_json()

        logger.debug("Forwarding prediction request", url=self.base_url, date=request.date)

        try:
            with anyio.fail_after(self.deadline):
                return await self._exchange(payload)
        except TimeoutError as e:
            logger.error("Prediction service deadline exceeded", url=self.base_url, deadline=self.deadline)
            raise UpstreamUnavailableError(f"no complete response within {self.deadline} seconds") from e

    async def _exchange(self, payload: str) -> UpstreamResponse:
        try:
            upstream_request = self._client.build_request(
                "POST",
                self.base_url,
                content=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
            response = await self._client.send(upstream_request, stream=True)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.error("Prediction service request failed", url=self.base_url, error=str(e))
            raise UpstreamUnavailableError(str(e) or type(e).__name__) from e

        try:
            content = await response.aread()
        except httpx.HTTPError as e:
            logger.error(
                "Failed to read prediction service response",
                url=self.base_url,
                status_code=response.status_code,
                error=str(e),
            )
            raise UpstreamReadError(str(e) or type(e).__name__) from e
        finally:
            await response.aclose()

        logger.info(
            "Prediction service responded",
            status_code=response.status_code,
            content_length=len(content),
        )
        return UpstreamResponse(status_code=response.status_code, content=content)

    async def close(self):
        """Release the HTTP connection pool if this service created it."""
        if self._owns_client:
            await self._client.aclose()

    def get_status(self) -> Dict[str, Any]:
        return {
            "base_url": self.base_url,
            "configured": bool(self.base_url),
            "timeout_seconds": self.timeout.read,
            "connect_timeout_seconds": self.timeout.connect,
        }
