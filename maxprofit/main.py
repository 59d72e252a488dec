"""
Max Profit Analyzer API

FastAPI application exposing the single-trade profit scan.
"""

from fastapi import FastAPI, Request
import structlog

from maxprofit.api.health import router as health_router
from maxprofit.api.v1.router import api_router
from maxprofit.config.settings import get_settings
from maxprofit.utils.logging import configure_logging, set_correlation_id, clear_correlation_id

logger = structlog.get_logger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    settings = get_settings()
    configure_logging()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.app_version,
        description="Maximum single-trade profit over daily price series",
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
    )

    @app.middleware("http")
    async def correlation_id_middleware(request: Request, call_next):
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response

    @app.get("/")
    async def root():
        """Root endpoint with service information."""
        return {
            "message": f"Welcome to {settings.PROJECT_NAME}",
            "version": settings.app_version,
            "docs": "/docs" if settings.DEBUG else "Documentation disabled in production",
            "health": "/health",
        }

    app.include_router(health_router)
    app.include_router(api_router, prefix=settings.API_V1_STR)

    logger.info("Application created", environment=settings.ENVIRONMENT)
    return app


app = create_app()
