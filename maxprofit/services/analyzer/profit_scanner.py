"""
Profit Scanner for single-transaction trades.

Finds the best day to buy and the best later day to sell over a series of
daily prices, in one forward pass keeping the running minimum price and the
best profit seen so far.
"""

import logging
from dataclasses import dataclass, asdict
from numbers import Integral
from typing import Any, Dict, Iterable, Optional

logger = logging.getLogger(__name__)


class ProfitScanError(Exception):
    """Base error for invalid price series."""


class EmptyPriceSeriesError(ProfitScanError, ValueError):
    """Raised when a price series holds no prices."""


class InvalidPriceError(ProfitScanError, TypeError):
    """Raised when a price series holds something other than integers."""


@dataclass(frozen=True)
class TradeResult:
    """Best single buy/sell trade over a price series."""

    profit: int
    days_scanned: int

    # Unset when no trade makes a positive profit
    buy_day: Optional[int] = None
    sell_day: Optional[int] = None
    buy_price: Optional[int] = None
    sell_price: Optional[int] = None

    @property
    def has_trade(self) -> bool:
        return self.sell_day is not None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _check_price(day: int, price: Any) -> None:
    # bool is an Integral but never a price
    if isinstance(price, bool) or not isinstance(price, Integral):
        raise InvalidPriceError(
            f"Price on day {day} must be an integer, got {type(price).__name__}"
        )


class ProfitScanner:
    """Scanner computing the maximum one-trade profit of a price series."""

    def __init__(self, allow_empty: bool = False):
        """
        Initialize profit scanner.

        Args:
            allow_empty: Return a zero-profit result for an empty series
                instead of raising EmptyPriceSeriesError
        """
        self.allow_empty = allow_empty

    def scan(self, prices: Iterable[int]) -> TradeResult:
        """
        Scan a price series for the best single trade.

        The series is consumed once, so generators are accepted. Ties are
        resolved to the earliest sell day, bought at the earliest minimum
        before it.

        Args:
            prices: Daily prices in chronological order

        Returns:
            TradeResult with the profit (never negative) and the trade days

        Raises:
            EmptyPriceSeriesError: If the series is empty and empty series
                are not allowed
            InvalidPriceError: If an element is not an integer
        """
        iterator = iter(prices)
        try:
            first = next(iterator)
        except StopIteration:
            if self.allow_empty:
                logger.debug("Empty price series, reporting zero profit")
                return TradeResult(profit=0, days_scanned=0)
            logger.debug("Rejected empty price series")
            raise EmptyPriceSeriesError("Price series must contain at least one price")

        _check_price(0, first)

        min_price = first
        min_day = 0
        best_profit = 0
        buy_day = sell_day = None
        buy_price = sell_price = None
        days = 1

        for day, price in enumerate(iterator, start=1):
            _check_price(day, price)
            days += 1

            candidate = price - min_price
            if candidate > best_profit:
                best_profit = candidate
                buy_day, sell_day = min_day, day
                buy_price, sell_price = min_price, price

            if price < min_price:
                min_price = price
                min_day = day

        result = TradeResult(
            profit=best_profit,
            days_scanned=days,
            buy_day=buy_day,
            sell_day=sell_day,
            buy_price=buy_price,
            sell_price=sell_price,
        )

        logger.debug(
            f"Scanned {days} prices: profit={result.profit} "
            f"buy_day={result.buy_day} sell_day={result.sell_day}"
        )
        return result

    def max_profit(self, prices: Iterable[int]) -> int:
        """Maximum one-trade profit of a price series, floored at 0."""
        return self.scan(prices).profit


# Convenience functions
def max_profit(prices: Iterable[int]) -> int:
    """
    Maximum profit from one buy and one later sell.

    Args:
        prices: Daily prices in chronological order, at least one

    Returns:
        Best sell price minus earlier buy price, or 0 if prices never rise

    Raises:
        EmptyPriceSeriesError: If prices is empty
    """
    return ProfitScanner().max_profit(prices)


def find_best_trade(prices: Iterable[int], allow_empty: bool = False) -> TradeResult:
    """
    Quick scan returning the best trade with its buy and sell days.

    Args:
        prices: Daily prices in chronological order
        allow_empty: Treat an empty series as zero profit

    Returns:
        TradeResult for the series
    """
    return ProfitScanner(allow_empty=allow_empty).scan(prices)
