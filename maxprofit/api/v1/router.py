"""
API v1 Router

Main router that includes all API endpoint modules.
"""

from fastapi import APIRouter

from maxprofit.api.v1.endpoints import profit

# Create main API router
api_router = APIRouter()

api_router.include_router(
    profit.router,
    prefix="/profit",
    tags=["Profit"]
)
