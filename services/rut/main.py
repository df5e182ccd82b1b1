"""
Main CLI module for the RUT toolkit.

Provides a command-line interface over the RUT helpers.
Example: python -m services.rut format 123456785 --to grouped-separated
"""

import argparse
import sys
from typing import List, Optional

from . import __version__
from .helpers import RutError, RutFormat, compute_check_character, convert, is_valid
from .log_config import configure_logging, get_logger, log_command
from .settings import settings


logger = get_logger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def run_dv(value: str) -> int:
    """Print the check character of a RUT body."""
    result = compute_check_character(value)
    print(result)
    log_command(logger, "dv", value, result=result)
    return EXIT_OK


def run_validate(value: str) -> int:
    """Print whether a RUT matches its check character."""
    valid = is_valid(value)
    print("valid" if valid else "invalid")
    log_command(logger, "validate", value, result=valid)
    return EXIT_OK if valid else EXIT_INVALID


def run_format(value: str, form: str) -> int:
    """Print a RUT converted to the requested form."""
    result = convert(value, form)
    print(result)
    log_command(logger, "format", value, result=result, form=form)
    return EXIT_OK


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="rut",
        description="Chilean RUT validation and formatting",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m services.rut dv 12.345.678
  python -m services.rut validate 20.347.878-K
  python -m services.rut format 123456785 --to grouped-separated
  python -m services.rut --log-level DEBUG validate 12345678-5
        """
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override log level from configuration"
    )

    parser.add_argument(
        "--log-format",
        choices=["json", "text"],
        help="Override log format from configuration"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"RUT toolkit {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    dv_parser = subparsers.add_parser("dv", help="Calculate the check character")
    dv_parser.add_argument("value", help="RUT body, e.g. 12.345.678")

    validate_parser = subparsers.add_parser("validate", help="Validate a RUT")
    validate_parser.add_argument("value", help="RUT with check character, e.g. 12.345.678-5")

    format_parser = subparsers.add_parser("format", help="Convert a RUT to another format")
    format_parser.add_argument("value", help="RUT in any supported format")
    format_parser.add_argument(
        "--to",
        dest="form",
        choices=[form.value for form in RutFormat],
        default=RutFormat.GROUPED_SEPARATED.value,
        help="Target format (default: grouped-separated)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI application.

    Args:
        argv: Arguments to parse (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for an invalid RUT, 2 for malformed input)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level, args.log_format)

    config = settings()
    logger.debug(
        "Command starting",
        command=args.command,
        version=__version__,
        environment=config.environment,
    )

    try:
        if args.command == "dv":
            return run_dv(args.value)
        if args.command == "validate":
            return run_validate(args.value)
        return run_format(args.value, args.form)

    except RutError as e:
        log_command(logger, args.command, args.value, error=e)
        print(str(e), file=sys.stderr)
        return EXIT_ERROR


def cli_main():
    """Synchronous entry point for setuptools console scripts."""
    return main()


if __name__ == "__main__":
    sys.exit(main())
