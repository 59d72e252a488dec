"""
Request and response models for the Max Profit Analyzer.
"""

from .schemas import PriceSeriesRequest, MaxProfitResponse, ErrorResponse

__all__ = [
    "PriceSeriesRequest",
    "MaxProfitResponse",
    "ErrorResponse",
]
