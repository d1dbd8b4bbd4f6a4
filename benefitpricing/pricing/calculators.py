"""Gross premium calculators, one per product family.

Each calculator returns the gross premium: before employer contribution and
before formatting. Inputs may be records or the equivalent catalog mappings.

- Disability: flat per-period rate for the employee's coverage bracket
- Voluntary life: per-mille rate on each covered role's elected coverage
- Commuter: flat price of the elected commuter benefit
"""

import logging
from typing import Any, Mapping, Optional, Sequence, Union

from benefitpricing.core.config import DEFAULT_CONFIG, PricingConfig
from benefitpricing.core.errors import InvalidRecordError, MissingCoverageError
from benefitpricing.core.types import (
    EMPLOYEE,
    CoverageElection,
    Employee,
    Product,
    SelectedOptions,
    as_employee,
    as_product,
    as_selected_options,
    find_coverage,
)
from benefitpricing.pricing.rates import resolve_rate

logger = logging.getLogger(__name__)

ProductLike = Union[Product, Mapping[str, Any]]
EmployeeLike = Union[Employee, Mapping[str, Any]]
OptionsLike = Union[SelectedOptions, Mapping[str, Any]]


def get_ltd_coverage(product: Product, employee: Optional[Employee]) -> float:
    """Coverage derived from salary and the product's replacement percentage.

    Raises:
        InvalidRecordError: If there is no employee to take a salary from.
    """
    if employee is None:
        raise InvalidRecordError(
            "Disability coverage needs an employee salary", record="Employee", field="salary"
        )
    percentage = 100.0 if product.coverage_percentage is None else product.coverage_percentage
    return employee.salary * percentage / 100


def calculate_ltd_price(
    product: ProductLike,
    employee: EmployeeLike,
    selected_options: OptionsLike,
    *,
    config: Optional[PricingConfig] = None,
) -> float:
    """Calculate the gross premium of a long-term disability product.

    Disability covers the employee only; other elected roles are ignored. The
    coverage basis is the employee's elected coverage when one is given,
    otherwise the salary-derived coverage. The resolved rate is the premium
    itself and is not scaled by coverage.

    Args:
        product: Disability product.
        employee: Employee whose salary sets the default coverage.
        selected_options: Elected roles and optional coverage override.
        config: Pricing configuration.

    Returns:
        Gross premium.
    """
    product = as_product(product)
    options = as_selected_options(selected_options)

    if EMPLOYEE not in options.family_members_to_cover:
        logger.debug("Employee role not elected for %s, nothing to price", product.id or product.type.value)
        return 0.0

    coverage = options.coverage_for(EMPLOYEE)
    if coverage is None:
        coverage = get_ltd_coverage(product, as_employee(employee))

    return resolve_rate(EMPLOYEE, product.costs, coverage, config=config)


def calculate_vol_life_price_per_role(
    role: str,
    coverage_level: Sequence[Union[CoverageElection, Mapping[str, Any]]],
    costs: Mapping[str, Any],
    *,
    config: Optional[PricingConfig] = None,
) -> float:
    """Calculate one role's voluntary life premium.

    ``costs`` is a product's cost table, parsed or catalog-shaped.

    premium = coverage / coverage_unit * rate

    Raises:
        MissingCoverageError: If the role has no entry in ``coverage_level``.
    """
    config = config or DEFAULT_CONFIG
    coverage = find_coverage(role, coverage_level)
    if coverage is None:
        raise MissingCoverageError(role)

    rate = resolve_rate(role, costs, coverage, config=config)
    return coverage / config.coverage_unit * rate


def calculate_vol_life_prices_by_role(
    product: ProductLike,
    selected_options: OptionsLike,
    *,
    config: Optional[PricingConfig] = None,
) -> dict[str, float]:
    """Per-role voluntary life premiums for the elected roles, in election order."""
    product = as_product(product)
    options = as_selected_options(selected_options)
    return {
        role: calculate_vol_life_price_per_role(
            role, options.coverage_level, product.costs, config=config
        )
        for role in options.family_members_to_cover
    }


def calculate_vol_life_price(
    product: ProductLike,
    selected_options: OptionsLike,
    *,
    config: Optional[PricingConfig] = None,
) -> float:
    """Calculate the gross premium of a voluntary life product.

    The sum of the per-role premiums over exactly the elected roles. Coverage
    entries for roles that are not elected are ignored.
    """
    prices = calculate_vol_life_prices_by_role(product, selected_options, config=config)
    return sum(prices.values(), 0.0)


def calculate_commuter_price(product: ProductLike, selected_options: OptionsLike) -> float:
    """Calculate the price of the elected commuter benefit.

    Unknown or missing benefit keys price at zero.
    """
    product = as_product(product)
    options = as_selected_options(selected_options)

    if not options.benefit:
        return 0.0

    benefit = options.benefit[0]
    price = product.benefit_prices.get(benefit)
    if price is None:
        logger.warning(
            "Unknown commuter benefit %r for %s, pricing at zero",
            benefit,
            product.id or product.type.value,
        )
        return 0.0
    return price
