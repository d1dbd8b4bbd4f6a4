"""CLI entrypoint for benefitpricing.

Commands:
- inspect-products: Display product catalog
- quote: Price a product for an employee's elections
"""

import argparse
import logging
import sys
from typing import Optional

from dotenv import load_dotenv

from benefitpricing.cli.arguments import (
    add_catalog_arg,
    add_format_arg,
    add_verbose_arg,
    parse_coverage,
)
from benefitpricing.cli.formatting import OutputFormatter, format_money

# Load .env file from current directory
load_dotenv()


def _load_catalog(args: argparse.Namespace):
    from benefitpricing.catalog.products import ProductCatalog

    if args.catalog:
        return ProductCatalog.from_json(args.catalog)
    return ProductCatalog.default()


def inspect_products_command(args: argparse.Namespace) -> int:
    """Display product catalog.

    Args:
        args: Command line arguments.

    Returns:
        Exit code.
    """
    catalog = _load_catalog(args)
    products = catalog.list_products()
    formatter = OutputFormatter(args.format)

    def table() -> None:
        formatter.print_header("Voluntary Benefits Catalog", width=80)
        for product in products:
            print(f"\n{product['name']} ({product['id']}, {product['type']})")
            print("-" * 40)
            contribution = product["employerContribution"]
            print(f"  Employer contribution: {contribution['mode']} {contribution['contribution']}")
            for role, rate in product["costs"].items():
                if isinstance(rate, list):
                    tiers = ", ".join(f"<{b['maxCoverage']}: {b['rate']}" for b in rate)
                    print(f"  {role}: {tiers}")
                else:
                    print(f"  {role}: {rate}")
            for benefit, price in product.get("benefitPrices", {}).items():
                print(f"  {benefit}: {format_money(price)}")

    formatter.output(products, table)
    return 0


def quote_command(args: argparse.Namespace) -> int:
    """Price a product.

    Args:
        args: Command line arguments.

    Returns:
        Exit code.
    """
    from benefitpricing.catalog.products import SAMPLE_EMPLOYEE, load_employee
    from benefitpricing.core.config import PricingConfig
    from benefitpricing.core.errors import BenefitPricingError
    from benefitpricing.core.types import CoverageElection, Employee, SelectedOptions
    from benefitpricing.pricing.engine import quote_product

    try:
        config = PricingConfig.from_env()
        product = _load_catalog(args).get_product(args.product)
        employee = load_employee(args.employee) if args.employee else Employee.from_dict(SAMPLE_EMPLOYEE)
        options = SelectedOptions(
            family_members_to_cover=tuple(args.cover),
            coverage_level=tuple(CoverageElection(role, amount) for role, amount in args.coverage),
            benefit=(args.benefit,) if args.benefit else (),
        )
        quote = quote_product(product, employee, options, config=config)
    except (BenefitPricingError, OSError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    formatter = OutputFormatter(args.format)

    def table() -> None:
        formatter.print_header("\nPremium Quote")
        print(f"  Product: {product.name or product.id}")
        for role, price in quote.by_role.items():
            print(f"    {role}: {format_money(price, quote.currency)}")
        print("-" * 40)
        print(f"  Gross Premium: {format_money(quote.gross_premium, quote.currency)}")
        print(f"  Employer Contribution: {format_money(quote.employer_contribution, quote.currency)}")
        print(f"  Net Premium: {format_money(quote.net_premium, quote.currency)}")

    formatter.output(quote.to_dict(), table)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point.

    Args:
        argv: Command line arguments (defaults to sys.argv).

    Returns:
        Exit code.
    """
    parser = argparse.ArgumentParser(
        prog="benefitpricing",
        description="Voluntary benefits premium calculator",
    )
    add_verbose_arg(parser)
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # inspect-products command
    products_parser = subparsers.add_parser(
        "inspect-products",
        help="Display product catalog",
    )
    add_catalog_arg(products_parser)
    add_format_arg(products_parser)

    # quote command
    quote_parser = subparsers.add_parser(
        "quote",
        help="Price a product for an employee's elections",
    )
    quote_parser.add_argument(
        "--product",
        "-p",
        type=str,
        required=True,
        help="Product id",
    )
    quote_parser.add_argument(
        "--employee",
        "-e",
        type=str,
        default=None,
        help="Employee profile JSON file (default: sample employee)",
    )
    quote_parser.add_argument(
        "--cover",
        nargs="+",
        default=["ee"],
        metavar="ROLE",
        help="Roles to cover (default: ee)",
    )
    quote_parser.add_argument(
        "--coverage",
        nargs="*",
        type=parse_coverage,
        default=[],
        metavar="ROLE=AMOUNT",
        help="Elected coverage per role",
    )
    quote_parser.add_argument(
        "--benefit",
        "-b",
        type=str,
        default=None,
        help="Commuter benefit (e.g. train, parking)",
    )
    add_catalog_arg(quote_parser)
    add_format_arg(quote_parser)

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "inspect-products":
        return inspect_products_command(args)
    elif args.command == "quote":
        return quote_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
