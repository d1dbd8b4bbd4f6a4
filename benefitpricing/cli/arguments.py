"""Argument builders shared by the quote and catalog commands."""

import argparse
import os

CATALOG_ENV_VAR = "BENEFITPRICING_CATALOG"


def add_format_arg(parser: argparse.ArgumentParser) -> None:
    """Add --format to choose between a quote table and JSON."""
    parser.add_argument(
        "--format",
        "-f",
        choices=["table", "json"],
        default="table",
        help="Print quotes as a table or as JSON (default: table)",
    )


def add_catalog_arg(parser: argparse.ArgumentParser) -> None:
    """Add --catalog argument for the product catalog file."""
    parser.add_argument(
        "--catalog",
        "-c",
        type=str,
        default=os.getenv(CATALOG_ENV_VAR),
        help=f"Product catalog JSON file (default: ${CATALOG_ENV_VAR}, else built-in catalog)",
    )


def add_verbose_arg(parser: argparse.ArgumentParser) -> None:
    """Add --verbose to log bracket and contribution decisions."""
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log rate lookups and contribution steps at debug level",
    )


def parse_coverage(value: str) -> tuple[str, float]:
    """Parse a ROLE=AMOUNT coverage election."""
    role, sep, amount = value.partition("=")
    if not sep or not role:
        raise argparse.ArgumentTypeError(f"Expected ROLE=AMOUNT, got {value!r}")
    try:
        return role, float(amount.replace(",", "").replace("_", ""))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid coverage amount: {amount!r}") from None
