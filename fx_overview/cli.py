"""Command line entry point printing an exchange rate overview."""

from __future__ import annotations

import argparse
import sys
from datetime import date
from typing import Sequence

from fx_overview import FxOverview, __version__
from fx_overview.config import DEFAULT_CACHE_DIR, EXCHANGE_URL
from fx_overview.exceptions import FxOverviewError
from fx_overview.utils.date_range import parse_date
from fx_overview.utils.logger import get_logger, set_verbose

LOGGER = get_logger(__name__)

__all__ = ["build_parser", "parse_args", "main"]

EPILOG = (
    "Obtained rates are cached in files in the cache directory. A small share of "
    "failed lookups is tolerated and reported as a notice; a larger share is an error."
)


def _iso_date(value: str) -> date:
    try:
        return parse_date(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}, expected YYYY-MM-DD") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fx-overview",
        description="Use exchangeratesapi.io to get exchange rates for given time period",
        epilog=EPILOG,
    )
    parser.add_argument("currency_from", metavar="CURRENCY_FROM")
    parser.add_argument("currency_to", metavar="CURRENCY_TO")
    parser.add_argument(
        "date_from", metavar="DATE_FROM", type=_iso_date, help="date in format YYYY-MM-DD"
    )
    parser.add_argument(
        "date_to", metavar="DATE_TO", type=_iso_date, help="date in format YYYY-MM-DD"
    )
    parser.add_argument(
        "--cache-dir",
        dest="cache_dir",
        default=str(DEFAULT_CACHE_DIR),
        help="Directory holding cached rates (default: current directory)",
    )
    parser.add_argument(
        "--api-url",
        dest="api_url",
        default=EXCHANGE_URL,
        help="Base URL of the exchange rate service",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    set_verbose(args.verbose)
    print(f"For {args.currency_from}:{args.currency_to} between {args.date_from} and {args.date_to}")

    with FxOverview(args.cache_dir, api_url=args.api_url) as fx:
        try:
            summary = fx.overview(args.currency_from, args.currency_to, args.date_from, args.date_to)
        except FxOverviewError as exc:
            LOGGER.debug("Overview failed: %r", exc)
            print(exc, file=sys.stderr)
            return 1

    print(summary.describe())
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
