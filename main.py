import sys
import time
from contextlib import asynccontextmanager
from typing import Optional

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from fire_risk import __version__
from fire_risk.api import health_router, page_router, prediction_router
from fire_risk.config import Config, config
from fire_risk.services.prediction_service import PredictionService
from fire_risk.utils.logging_config import setup_logging

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Reports the prediction service target on startup and releases its
    connection pool on shutdown.
    """
    logger.info("Starting Fire Risk application")

    prediction_service: PredictionService = app.state.prediction_service
    if not app.state.settings.prediction_service_configured:
        logger.warning("PREDICT_API_URL is not set; prediction requests will fail")
    else:
        logger.info("Prediction service configured", **prediction_service.get_status())

    try:
        yield

    # Shutdown
    finally:
        logger.info("Shutting down Fire Risk application")
        await prediction_service.close()


def create_app(
    settings: Optional[Config] = None,
    prediction_service: Optional[PredictionService] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Application settings; the environment-loaded config if omitted
        prediction_service: Upstream client; built from settings if omitted

    Returns:
        Configured FastAPI application instance
    """
    if settings is None:
        settings = config
    setup_logging(settings)

    app = FastAPI(
        title="Fire Risk API",
        description="""
        ## Fire Risk API

        Draw an area of interest on the map and get a wildfire risk
        probability for a given date from the prediction service.

        ### Endpoints:
        - **/**: Interactive map page
        - **/predict**: Relays `{aoi, date}` to the prediction service
        - **/health**: Liveness check
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.prediction_service = prediction_service or PredictionService.from_config(settings)

    # Request logging middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all HTTP requests with timing information."""
        start_time = time.time()

        logger.info(
            "HTTP request started",
            method=request.method,
            url=str(request.url),
            client_ip=request.client.host if request.client else "unknown",
        )

        try:
            response = await call_next(request)
            process_time = time.time() - start_time

            logger.info(
                "HTTP request completed",
                method=request.method,
                url=str(request.url),
                status_code=response.status_code,
                process_time=process_time,
            )

            response.headers["X-Process-Time"] = str(process_time)
            return response

        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                "HTTP request failed",
                method=request.method,
                url=str(request.url),
                error=str(e),
                process_time=process_time,
            )
            raise

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions globally."""
        logger.error(
            "Unhandled exception",
            method=request.method,
            url=str(request.url),
            error=str(exc),
            exc_info=True,
        )

        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "message": "An unexpected error occurred. Please try again later.",
                "timestamp": time.time(),
            },
        )

    # HTTP exception handler
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions with consistent formatting."""
        logger.warning(
            "HTTP exception",
            method=request.method,
            url=str(request.url),
            status_code=exc.status_code,
            detail=exc.detail,
        )

        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail, "status_code": exc.status_code, "timestamp": time.time()},
            headers=exc.headers,
        )

    app.include_router(page_router)
    app.include_router(prediction_router)
    app.include_router(health_router)

    return app


def main():
    app = create_app(config)

    logger.info(
        f"Starting Fire Risk server in {config.environment} environment",
        host=config.api_host,
        port=config.api_port,
    )

    try:
        uvicorn.run(
            app,
            host=config.api_host,
            port=config.api_port,
            log_level=config.log_level.lower(),
            access_log=True,
            server_header=False,
            date_header=False,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested")
    except Exception as e:
        logger.error("Server failed to start", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
