"""
Pydantic schemas for API request/response validation.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, ConfigDict, StrictInt


# Base schemas
class BaseSchema(BaseModel):
    """Base schema with common configuration."""
    model_config = ConfigDict(
        from_attributes=True,
        validate_assignment=True,
    )


class PriceSeriesRequest(BaseSchema):
    """Daily prices to scan, oldest first."""
    prices: List[StrictInt] = Field(
        ...,
        description="Daily prices in chronological order",
        examples=[[7, 1, 5, 3, 6, 4]],
    )


class MaxProfitResponse(BaseSchema):
    """Best single trade for a price series."""
    profit: int = Field(..., ge=0, description="Sell price minus buy price, never negative")
    days_scanned: int = Field(..., ge=0)
    buy_day: Optional[int] = Field(None, ge=0, description="Index of the buy day")
    sell_day: Optional[int] = Field(None, ge=0, description="Index of the sell day")
    buy_price: Optional[int] = None
    sell_price: Optional[int] = None


class ErrorResponse(BaseSchema):
    """Error payload returned for rejected price series."""
    detail: str
