"""Core types, errors, and configuration for benefitpricing."""

from benefitpricing.core.config import DEFAULT_CONFIG, PricingConfig
from benefitpricing.core.errors import (
    BenefitPricingError,
    CoverageOutOfRangeError,
    InvalidRecordError,
    MissingCoverageError,
    ProductNotFoundError,
    UnknownProductTypeError,
    UnknownRoleError,
)
from benefitpricing.core.types import (
    CHILD,
    EMPLOYEE,
    SPOUSE,
    ContributionMode,
    CoverageElection,
    Employee,
    EmployerContribution,
    Product,
    ProductType,
    RateBracket,
    SelectedOptions,
)

__all__ = [
    # Types
    "ProductType",
    "ContributionMode",
    "RateBracket",
    "EmployerContribution",
    "Product",
    "Employee",
    "CoverageElection",
    "SelectedOptions",
    "EMPLOYEE",
    "SPOUSE",
    "CHILD",
    # Config
    "PricingConfig",
    "DEFAULT_CONFIG",
    # Errors
    "BenefitPricingError",
    "UnknownProductTypeError",
    "MissingCoverageError",
    "UnknownRoleError",
    "CoverageOutOfRangeError",
    "InvalidRecordError",
    "ProductNotFoundError",
]
