"""benefitpricing - voluntary benefits premium calculator.

Computes the periodic premium an employee owes for a voluntary benefit
product (voluntary life, long-term disability, commuter) from the product's
rate table, the employee's profile and the employee's elections.

Usage:
    from benefitpricing import ProductCatalog, calculate_product_price

    catalog = ProductCatalog.default()
    price = calculate_product_price(
        catalog.get_product("vol-life"),
        {"salary": 120000},
        {
            "familyMembersToCover": ["ee", "sp"],
            "coverageLevel": [
                {"role": "ee", "coverage": 200000},
                {"role": "sp", "coverage": 75000},
            ],
        },
    )
"""

from benefitpricing.catalog.products import ProductCatalog
from benefitpricing.core.config import PricingConfig
from benefitpricing.core.errors import (
    BenefitPricingError,
    MissingCoverageError,
    UnknownProductTypeError,
    UnknownRoleError,
)
from benefitpricing.core.types import (
    CoverageElection,
    Employee,
    EmployerContribution,
    Product,
    ProductType,
    SelectedOptions,
)
from benefitpricing.pricing import (
    PremiumQuote,
    calculate_commuter_price,
    calculate_ltd_price,
    calculate_product_price,
    calculate_vol_life_price,
    calculate_vol_life_price_per_role,
    format_price,
    get_employer_contribution,
    quote_product,
)

__version__ = "0.1.0"

__all__ = [
    # Pricing
    "calculate_product_price",
    "quote_product",
    "PremiumQuote",
    "calculate_ltd_price",
    "calculate_vol_life_price",
    "calculate_vol_life_price_per_role",
    "calculate_commuter_price",
    "get_employer_contribution",
    "format_price",
    # Types
    "ProductType",
    "Product",
    "Employee",
    "EmployerContribution",
    "CoverageElection",
    "SelectedOptions",
    # Catalog and config
    "ProductCatalog",
    "PricingConfig",
    # Errors
    "BenefitPricingError",
    "UnknownProductTypeError",
    "MissingCoverageError",
    "UnknownRoleError",
    # Version
    "__version__",
]
