"""
Command line entry point: checks whether a date is a holiday.
"""

import argparse
import logging
import sys

from .errors import HolidayError
from .holidays import HolidayChecker

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Prints the holiday name for a country and date (default: today)."""
    parser = argparse.ArgumentParser(prog="holiday-resolver")
    parser.add_argument("country", help="Country code, e.g. kr, us, jp")
    parser.add_argument("date", nargs="?", help="ISO date, defaults to today")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        name = HolidayChecker().get_holiday_name(args.country, args.date)
    except (HolidayError, ValueError) as e:
        logger.error("Holiday lookup failed: %s", e)
        return 2

    if name is None:
        print("not a holiday")
        return 1
    print(name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
