"""
Profit API Endpoints

Endpoints for scanning daily price series for the best single trade.
"""

from fastapi import APIRouter, Depends, HTTPException, status
import structlog

from maxprofit.config.settings import Settings, get_settings
from maxprofit.models.schemas import PriceSeriesRequest, MaxProfitResponse, ErrorResponse
from maxprofit.services.analyzer.profit_scanner import ProfitScanner, ProfitScanError

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.post(
    "/max",
    response_model=MaxProfitResponse,
    responses={422: {"model": ErrorResponse}},
)
async def compute_max_profit(
    request: PriceSeriesRequest,
    settings: Settings = Depends(get_settings)
) -> MaxProfitResponse:
    """
    Find the most profitable single buy/sell trade.

    Args:
        request: Price series to scan
        settings: Application settings

    Returns:
        Profit with the buy and sell days
    """
    if len(request.prices) > settings.MAX_SERIES_LENGTH:
        logger.warning(
            "Price series too long",
            length=len(request.prices),
            limit=settings.MAX_SERIES_LENGTH
        )
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Price series exceeds {settings.MAX_SERIES_LENGTH} prices"
        )

    scanner = ProfitScanner(allow_empty=settings.ALLOW_EMPTY_SERIES)
    try:
        result = scanner.scan(request.prices)
    except ProfitScanError as e:
        logger.info("Rejected price series", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e)
        )

    logger.info(
        "Max profit computed",
        days=result.days_scanned,
        profit=result.profit,
        buy_day=result.buy_day,
        sell_day=result.sell_day
    )
    return MaxProfitResponse(**result.to_dict())
