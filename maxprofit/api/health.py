"""
Health check API endpoints.
"""

from datetime import datetime, timezone
from typing import Dict, Any

from fastapi import APIRouter, Depends

from maxprofit.config.settings import Settings, get_settings

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("", response_model=Dict[str, Any])
async def health_check(settings: Settings = Depends(get_settings)):
    """Basic health check endpoint for load balancers."""
    return {
        "status": "healthy",
        "service": settings.PROJECT_NAME,
        "version": settings.app_version,
        "environment": settings.ENVIRONMENT,
        "debug": settings.DEBUG
    }


@router.get("/live", response_model=Dict[str, Any])
async def liveness_probe():
    """Liveness probe; 200 while the process can serve requests."""
    return {
        "status": "alive",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": "maxprofit"
    }
