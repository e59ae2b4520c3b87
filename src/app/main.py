"""
Day-of-week calculator
Main application entry point
"""
import argparse
import json
import logging
import sys
from typing import Callable, Optional, TextIO

from src.app.logging_config import setup_logging
from src.app.settings import (
    EXIT_INVALID_INPUT, EXIT_OK, EXIT_SELF_CHECK_FAILED,
    INPUT_PROMPT, LOG_LEVEL, MAX_PROMPT_ATTEMPTS
)
from src.core.calendar import SelfCheckFailure, build_weekday_report, run_self_checks
from src.core.contracts import (
    DateInputError, WeekdayRequestValidator, parse_date_string, validate_weekday_report
)
from src.core.domain import CalendarDate

logger = logging.getLogger(__name__)


def prompt_for_date(
    read: Optional[Callable[[str], str]] = None,
    attempts: int = MAX_PROMPT_ATTEMPTS,
) -> Optional[CalendarDate]:
    """Ask for a date until it parses or attempts run out."""
    read = read or input
    for attempt in range(1, attempts + 1):
        print(INPUT_PROMPT)
        try:
            text = read("> ")
        except EOFError:
            logger.warning("Input closed before a date was entered")
            return None

        try:
            return parse_date_string(text)
        except DateInputError as e:
            logger.warning(f"Attempt {attempt}/{attempts}: {e}")
            print(f"Invalid date: {e}")

    return None


def read_request(stream: TextIO) -> CalendarDate:
    """Read a weekday_request JSON object and parse its date."""
    try:
        payload = json.load(stream)
    except json.JSONDecodeError as e:
        raise DateInputError("<stdin>", f"Request is not valid JSON: {e.msg}") from e

    errors = WeekdayRequestValidator().error_messages(payload)
    if errors:
        raise DateInputError(json.dumps(payload), "Invalid weekday_request: " + "; ".join(errors))

    return parse_date_string(payload["date"])


def print_report(date: CalendarDate, as_json: bool = False):
    """Resolve the weekday and print the diagnostic report."""
    report = build_weekday_report(date)

    if as_json:
        payload = report.to_dict()
        validate_weekday_report(payload)
        print(json.dumps(payload, indent=2))
        return

    print("Valid date")
    for line in report.to_lines():
        print(line)


def main(argv=None) -> int:
    """Main application logic."""
    args = parse_arguments(argv)
    setup_logging(level=args.log_level)

    if args.self_check:
        try:
            count = run_self_checks()
        except SelfCheckFailure as e:
            print(f"Self-check failed: {e}")
            return EXIT_SELF_CHECK_FAILED
        print(f"All {count} self-checks passed")
        if args.date is None:
            return EXIT_OK

    if args.date is None and not args.json:
        date = prompt_for_date()
        if date is None:
            return EXIT_INVALID_INPUT
    else:
        try:
            if args.date is not None:
                date = parse_date_string(args.date)
            else:
                # --json without a positional date: weekday_request on stdin
                date = read_request(sys.stdin)
        except DateInputError as e:
            logger.warning(str(e))
            print(f"Invalid date: {e}")
            return EXIT_INVALID_INPUT

    logger.info(f"Resolving weekday for {date.to_iso()}")
    print_report(date, as_json=args.json)
    return EXIT_OK


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="dow",
        description="Day of the week for a Gregorian date (YYYY-MM-DD)"
    )

    parser.add_argument(
        "date",
        nargs="?",
        default=None,
        help="Date in YYYY-MM-DD format (prompted for when omitted, read from stdin as a weekday_request with --json)"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as a weekday_report JSON object; without DATE, read {\"date\": ...} from stdin"
    )

    parser.add_argument(
        "--self-check",
        action="store_true",
        help="Run the engine self-checks before resolving"
    )

    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help=f"Console log level (default: {LOG_LEVEL})"
    )

    return parser.parse_args(argv)


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
