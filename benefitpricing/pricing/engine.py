"""Product price dispatch.

Routes a pricing request to the product family's calculator, subtracts the
employer contribution and truncates the result to currency precision:

    gross = family calculator(product, employee, options)
    net = format_price(max(gross - employer contribution, 0))
"""

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Optional

from benefitpricing.core.config import DEFAULT_CONFIG, PricingConfig
from benefitpricing.core.errors import UnknownProductTypeError
from benefitpricing.core.types import (
    EMPLOYEE,
    Employee,
    Product,
    ProductType,
    SelectedOptions,
    as_employee,
    as_product,
    as_selected_options,
)
from benefitpricing.pricing.calculators import (
    EmployeeLike,
    OptionsLike,
    ProductLike,
    calculate_commuter_price,
    calculate_ltd_price,
    calculate_vol_life_price,
    calculate_vol_life_prices_by_role,
)
from benefitpricing.pricing.contribution import get_employer_contribution
from benefitpricing.pricing.formatting import format_price

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PremiumQuote:
    """Itemized premium for display."""

    product_id: str
    product_type: str
    currency: str
    gross_premium: float
    employer_contribution: float
    net_premium: float
    by_role: dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _gross_premium(
    product: Product,
    employee: Optional[Employee],
    options: SelectedOptions,
    config: PricingConfig,
) -> float:
    """Run the family calculator for the product's type."""
    if product.type == ProductType.DISABILITY:
        return calculate_ltd_price(product, employee, options, config=config)
    elif product.type == ProductType.VOLUNTARY_LIFE:
        return calculate_vol_life_price(product, options, config=config)
    elif product.type == ProductType.COMMUTER:
        return calculate_commuter_price(product, options)
    # Unreachable for parsed products; ProductType is closed
    raise UnknownProductTypeError(product.type)


def calculate_product_price(
    product: ProductLike,
    employee: EmployeeLike,
    selected_options: OptionsLike,
    *,
    config: Optional[PricingConfig] = None,
) -> float:
    """Calculate the premium the employee owes for a product.

    Args:
        product: Product record or catalog mapping.
        employee: Employee record or profile mapping.
        selected_options: Elections for this request.
        config: Pricing configuration.

    Returns:
        Net premium truncated to currency precision.

    Raises:
        UnknownProductTypeError: If the product type is not supported.
        MissingCoverageError: If an elected role has no coverage on a tiered product.
    """
    config = config or DEFAULT_CONFIG
    product = as_product(product)
    employee = as_employee(employee)
    options = as_selected_options(selected_options)

    gross = _gross_premium(product, employee, options, config)
    contribution = get_employer_contribution(product.employer_contribution, gross)
    net = max(gross - contribution, 0.0)

    logger.debug(
        "Priced %s: gross=%s contribution=%s net=%s",
        product.id or product.type.value,
        gross,
        contribution,
        net,
    )
    return format_price(net, config.precision)


def quote_product(
    product: ProductLike,
    employee: EmployeeLike,
    selected_options: OptionsLike,
    *,
    config: Optional[PricingConfig] = None,
) -> PremiumQuote:
    """Price a product and itemize gross, contribution and per-role premiums."""
    config = config or DEFAULT_CONFIG
    product = as_product(product)
    employee = as_employee(employee)
    options = as_selected_options(selected_options)

    gross = _gross_premium(product, employee, options, config)
    contribution = get_employer_contribution(product.employer_contribution, gross)

    if product.type == ProductType.VOLUNTARY_LIFE:
        by_role = calculate_vol_life_prices_by_role(product, options, config=config)
    elif product.type == ProductType.DISABILITY and gross:
        by_role = {EMPLOYEE: gross}
    else:
        by_role = {}

    return PremiumQuote(
        product_id=product.id,
        product_type=product.type.value,
        currency=config.currency,
        gross_premium=format_price(gross, config.precision),
        employer_contribution=format_price(min(contribution, gross), config.precision),
        net_premium=format_price(max(gross - contribution, 0.0), config.precision),
        by_role={role: format_price(price, config.precision) for role, price in by_role.items()},
    )
