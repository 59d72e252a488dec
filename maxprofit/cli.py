"""
Command-line interface for the Max Profit Analyzer.

Usage:
    maxprofit 7 1 5 3 6 4
    maxprofit --details 7 1 5 3 6 4
    echo "7 1 5 3 6 4" | maxprofit --file -
"""

import argparse
import json
import sys
from typing import List, Optional

from maxprofit.config.settings import LOG_LEVELS, get_settings
from maxprofit.services.analyzer.profit_scanner import ProfitScanner, ProfitScanError, TradeResult
from maxprofit.utils.logging import configure_logging, get_logger

EXIT_OK = 0
EXIT_INVALID_INPUT = 2


def _read_prices(stream) -> List[int]:
    tokens = stream.read().replace(",", " ").split()
    try:
        return [int(token) for token in tokens]
    except ValueError as e:
        raise ProfitScanError(f"Invalid price in input: {e}") from e


def format_summary(result: TradeResult) -> str:
    """Format a trade result as a human-readable summary."""
    if not result.has_trade:
        return f"""
Max Profit: 0
Days Scanned: {result.days_scanned}
No profitable trade.
        """.strip()

    return f"""
Max Profit: {result.profit}
Days Scanned: {result.days_scanned}
Buy:  day {result.buy_day} at {result.buy_price}
Sell: day {result.sell_day} at {result.sell_price}
    """.strip()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="maxprofit",
        description="Maximum profit from one buy and one later sell over daily prices"
    )
    parser.add_argument("prices", nargs="*", type=int, help="Daily prices, oldest first")
    parser.add_argument("--file", type=argparse.FileType("r"),
                        help="Read whitespace or comma separated prices from a file ('-' for stdin)")
    parser.add_argument("--details", action="store_true", help="Show the buy and sell days")
    parser.add_argument("--json", action="store_true", help="Print the full result as JSON")
    parser.add_argument("--allow-empty", action="store_true", default=None,
                        help="Report 0 for an empty series instead of failing")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="Override LOG_LEVEL")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI interface."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(log_level=args.log_level, log_format="console")
    logger = get_logger(__name__)

    allow_empty = settings.ALLOW_EMPTY_SERIES if args.allow_empty is None else args.allow_empty
    scanner = ProfitScanner(allow_empty=allow_empty)

    try:
        prices = list(args.prices)
        if args.file is not None:
            try:
                prices.extend(_read_prices(args.file))
            finally:
                if args.file is not sys.stdin:
                    args.file.close()
        result = scanner.scan(prices)
    except ProfitScanError as e:
        logger.debug("Price series rejected", error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    if args.json:
        print(json.dumps(result.to_dict()))
    elif args.details:
        print(format_summary(result))
    else:
        print(result.profit)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
