"""Premium calculation: rate lookup, family calculators, contribution and dispatch."""

from benefitpricing.pricing.calculators import (
    calculate_commuter_price,
    calculate_ltd_price,
    calculate_vol_life_price,
    calculate_vol_life_price_per_role,
    calculate_vol_life_prices_by_role,
    get_ltd_coverage,
)
from benefitpricing.pricing.contribution import get_employer_contribution
from benefitpricing.pricing.engine import PremiumQuote, calculate_product_price, quote_product
from benefitpricing.pricing.formatting import format_price
from benefitpricing.pricing.rates import (
    resolve_flat_rate,
    resolve_rate,
    resolve_tiered_rate,
    select_bracket,
)

__all__ = [
    # Dispatch
    "calculate_product_price",
    "quote_product",
    "PremiumQuote",
    # Family calculators
    "calculate_ltd_price",
    "calculate_vol_life_price",
    "calculate_vol_life_price_per_role",
    "calculate_vol_life_prices_by_role",
    "calculate_commuter_price",
    "get_ltd_coverage",
    # Contribution and formatting
    "get_employer_contribution",
    "format_price",
    # Rates
    "resolve_rate",
    "resolve_flat_rate",
    "resolve_tiered_rate",
    "select_bracket",
]
