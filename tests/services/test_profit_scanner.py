"""
Unit tests for the Profit Scanner service.
"""

import random
from decimal import Decimal

import pytest

from maxprofit.services.analyzer.profit_scanner import (
    EmptyPriceSeriesError,
    InvalidPriceError,
    ProfitScanError,
    ProfitScanner,
    TradeResult,
    find_best_trade,
    max_profit,
)


def brute_force_profit(prices):
    best = 0
    for i in range(len(prices)):
        for j in range(i + 1, len(prices)):
            best = max(best, prices[j] - prices[i])
    return best


class TestMaxProfit:
    """Test cases for the max_profit function."""

    @pytest.mark.parametrize("prices,expected", [
        ([7, 1, 5, 3, 6, 4], 5),
        ([7, 6, 4, 3, 1], 0),
        ([1, 2, 3, 4, 5], 4),
        ([5], 0),
        ([3, 3, 3, 3], 0),
        ([2, 4, 1], 2),
        ([3, 2, 6, 5, 0, 3], 4),
        ([-5, -2, -10, -1], 9),
    ])
    def test_known_series(self, prices, expected):
        """Test profit for hand-checked series."""
        assert max_profit(prices) == expected

    def test_empty_series_rejected(self):
        """Test that an empty series raises instead of returning a value."""
        with pytest.raises(EmptyPriceSeriesError):
            max_profit([])

    def test_empty_series_is_value_error(self):
        """Test that the empty-series error is catchable as ValueError."""
        with pytest.raises(ValueError):
            max_profit([])

    def test_strictly_decreasing_is_zero(self):
        """Test strictly decreasing series yields exactly 0."""
        assert max_profit(list(range(100, 0, -1))) == 0

    def test_matches_brute_force(self):
        """Test profit against an exhaustive pair search on random series."""
        rng = random.Random(121)
        for _ in range(200):
            prices = [rng.randint(-50, 50) for _ in range(rng.randint(1, 25))]
            result = max_profit(prices)
            assert result >= 0
            assert result == brute_force_profit(prices)

    def test_accepts_generator(self):
        """Test that a one-shot iterator is scanned in a single pass."""
        assert max_profit(p for p in [7, 1, 5, 3, 6, 4]) == 5

    def test_accepts_tuple(self):
        assert max_profit((1, 9)) == 8

    def test_input_not_modified(self):
        """Test that the input series is left untouched."""
        prices = [7, 1, 5, 3, 6, 4]
        max_profit(prices)
        assert prices == [7, 1, 5, 3, 6, 4]


class TestProfitScanner:
    """Test cases for ProfitScanner."""

    def setup_method(self):
        """Set up test fixtures."""
        self.scanner = ProfitScanner()

    def test_initialization(self):
        """Test scanner initialization."""
        assert ProfitScanner().allow_empty is False
        assert ProfitScanner(allow_empty=True).allow_empty is True

    def test_scan_reports_trade(self, sample_prices):
        """Test that the trade days and prices are reported."""
        result = self.scanner.scan(sample_prices)

        assert result == TradeResult(
            profit=5,
            days_scanned=6,
            buy_day=1,
            sell_day=4,
            buy_price=1,
            sell_price=6,
        )
        assert result.has_trade is True

    def test_scan_without_trade(self):
        """Test result for a series that never rises."""
        result = self.scanner.scan([7, 6, 4, 3, 1])

        assert result.profit == 0
        assert result.days_scanned == 5
        assert result.has_trade is False
        assert result.buy_day is None
        assert result.sell_day is None
        assert result.buy_price is None
        assert result.sell_price is None

    def test_single_price(self):
        result = self.scanner.scan([5])
        assert result.profit == 0
        assert result.days_scanned == 1
        assert result.has_trade is False

    def test_ties_resolve_to_earliest_trade(self):
        """Test that equal profits keep the earliest sell day and buy day."""
        result = self.scanner.scan([1, 3, 1, 3])

        assert result.profit == 2
        assert result.buy_day == 0
        assert result.sell_day == 1

    def test_buy_moves_to_later_minimum(self):
        """Test that a later, lower minimum replaces the buy day."""
        result = self.scanner.scan([2, 4, 1, 7])

        assert result.profit == 6
        assert (result.buy_day, result.sell_day) == (2, 3)
        assert (result.buy_price, result.sell_price) == (1, 7)

    def test_trade_invariants(self):
        """Test trade consistency on random series."""
        rng = random.Random(7)
        for _ in range(200):
            prices = [rng.randint(0, 100) for _ in range(rng.randint(1, 30))]
            result = self.scanner.scan(prices)

            assert result.profit == brute_force_profit(prices)
            if result.has_trade:
                assert result.buy_day < result.sell_day
                assert prices[result.buy_day] == result.buy_price
                assert prices[result.sell_day] == result.sell_price
                assert result.sell_price - result.buy_price == result.profit

    def test_empty_rejected_by_default(self):
        """Test empty series error."""
        with pytest.raises(EmptyPriceSeriesError, match="at least one price"):
            self.scanner.scan([])

    def test_empty_allowed(self):
        """Test empty series yields zero profit when allowed."""
        result = ProfitScanner(allow_empty=True).scan([])

        assert result.profit == 0
        assert result.days_scanned == 0
        assert result.has_trade is False

    @pytest.mark.parametrize("prices", [
        [1, "2", 3],
        [1.5, 2],
        [1, None],
        [True, 5],
        [1, Decimal("3")],
    ])
    def test_invalid_prices_rejected(self, prices):
        """Test that non-integer prices raise InvalidPriceError."""
        with pytest.raises(InvalidPriceError):
            self.scanner.scan(prices)

    def test_invalid_price_reports_day(self):
        with pytest.raises(InvalidPriceError, match="day 2"):
            self.scanner.scan([1, 2, "x"])

    def test_error_hierarchy(self):
        """Test that scan errors share a base class."""
        assert issubclass(EmptyPriceSeriesError, ProfitScanError)
        assert issubclass(InvalidPriceError, ProfitScanError)
        assert issubclass(InvalidPriceError, TypeError)

    def test_max_profit_method(self, sample_prices):
        assert self.scanner.max_profit(sample_prices) == 5

    def test_to_dict(self, sample_prices):
        """Test result serialization."""
        assert self.scanner.scan(sample_prices).to_dict() == {
            "profit": 5,
            "days_scanned": 6,
            "buy_day": 1,
            "sell_day": 4,
            "buy_price": 1,
            "sell_price": 6,
        }

    def test_find_best_trade(self, sample_prices):
        """Test convenience wrapper."""
        assert find_best_trade(sample_prices).sell_day == 4
        assert find_best_trade([], allow_empty=True).profit == 0

    def test_large_series(self):
        """Test a long series finishes in one pass with the right answer."""
        prices = list(range(100_000, 0, -1)) + [200_000]
        result = self.scanner.scan(prices)

        assert result.profit == 199_999
        assert result.buy_day == 99_999
        assert result.sell_day == 100_000
