"""
Max Profit Analyzer

Computes the best single buy/sell trade over a series of daily prices.
"""

from maxprofit.services.analyzer.profit_scanner import (
    EmptyPriceSeriesError,
    InvalidPriceError,
    ProfitScanError,
    ProfitScanner,
    TradeResult,
    find_best_trade,
    max_profit,
)

__version__ = "1.0.0"
__author__ = "Max Profit Team"
__description__ = "Single-transaction maximum profit analyzer for daily price series"

__all__ = [
    "max_profit",
    "find_best_trade",
    "ProfitScanner",
    "TradeResult",
    "ProfitScanError",
    "EmptyPriceSeriesError",
    "InvalidPriceError",
]
