import logging

import httpx
import pytest
import structlog
from fastapi.testclient import TestClient

from fire_risk.config import Config
from fire_risk.services.prediction_service import PredictionService
from fire_risk.utils.logging_config import CustomFormatter
from main import create_app

UPSTREAM_URL = "http://prediction.test/predict"


class FailingStream(httpx.AsyncByteStream):
    """Response body stream that breaks after the headers were received."""

    async def __aiter__(self):
        yield b'{"probab'
        raise httpx.ReadError("Connection reset while reading body")

    async def aclose(self):
        pass


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers and structlog configuration installed by setup_logging."""
    yield
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if isinstance(handler.formatter, CustomFormatter):
            root_logger.removeHandler(handler)
            handler.close()
    structlog.reset_defaults()


@pytest.fixture
def settings():
    """Settings pointing at a fake upstream, isolated from any .env file."""
    return Config(
        _env_file=None,
        predict_api_url=UPSTREAM_URL,
        predict_timeout_seconds=5.0,
        predict_connect_timeout_seconds=2.0,
        log_level="DEBUG",
    )


@pytest.fixture
def sample_prediction_payload():
    """Polygon around a patch of East Kazakhstan and a summer date."""
    return {
        "aoi": [
            [
                [79.0, 50.0],
                [79.5, 50.0],
                [79.5, 50.4],
                [79.0, 50.4],
                [79.0, 50.0],
            ]
        ],
        "date": "2024-07-15",
    }


@pytest.fixture
def upstream_requests():
    """Requests received by the fake upstream, in order."""
    return []


@pytest.fixture
def prediction_service_factory(settings, upstream_requests):
    """Build a PredictionService whose HTTP client talks to a scripted handler."""

    def _factory(handler, base_url=UPSTREAM_URL):
        def recording_handler(request: httpx.Request):
            upstream_requests.append(request)
            return handler(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))
        return PredictionService(
            base_url=base_url,
            timeout=settings.predict_timeout_seconds,
            connect_timeout=settings.predict_connect_timeout_seconds,
            client=client,
        )

    return _factory


@pytest.fixture
def client_factory(settings, prediction_service_factory):
    """Build a TestClient for an app wired to a scripted upstream."""

    def _factory(handler):
        app = create_app(settings, prediction_service_factory(handler))
        return TestClient(app)

    return _factory
