"""Errors raised while loading records and calculating premiums."""

from typing import Any, Optional


class BenefitPricingError(Exception):
    """Base exception for premium calculation failures.

    ``details`` carries the offending product type, role or record field.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the error class name and its details."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class UnknownProductTypeError(BenefitPricingError):
    """Raised when a product type tag is not one of the supported product kinds."""

    def __init__(self, product_type: Any):
        super().__init__(
            f"Unknown product type: {product_type}",
            details={"product_type": product_type},
        )
        self.product_type = product_type


class MissingCoverageError(BenefitPricingError):
    """Raised when a covered role has no coverage amount elected.

    Examples:
    - Spouse is in familyMembersToCover but coverageLevel only lists the employee
    - A tiered rate is requested without a coverage amount
    """

    def __init__(self, role: str):
        super().__init__(
            f"No coverage elected for role: {role}",
            details={"role": role},
        )
        self.role = role


class UnknownRoleError(BenefitPricingError):
    """Raised when a role has no entry in a product's cost table."""

    def __init__(self, role: str, known_roles: Optional[list[str]] = None):
        super().__init__(
            f"No rate defined for role: {role}",
            details={"role": role, "known_roles": known_roles or []},
        )
        self.role = role
        self.known_roles = known_roles or []


class CoverageOutOfRangeError(BenefitPricingError):
    """Raised when coverage exceeds every bracket bound and overflow is strict."""

    def __init__(self, role: str, coverage: float, max_bound: Optional[float]):
        super().__init__(
            f"Coverage {coverage:,.2f} for role {role} exceeds the highest bracket",
            details={"role": role, "coverage": coverage, "max_bound": max_bound},
        )
        self.role = role
        self.coverage = coverage
        self.max_bound = max_bound


class InvalidRecordError(BenefitPricingError):
    """Raised when a product, employee or election record fails validation.

    Examples:
    - Negative coverage amount
    - Rate bracket without a rate
    - Employee without a salary
    """

    def __init__(self, message: str, record: str, field: Optional[str] = None):
        super().__init__(
            message,
            details={"record": record, "field": field},
        )
        self.record = record
        self.field = field


class ProductNotFoundError(BenefitPricingError):
    """Raised when a product id is not in the catalog."""

    def __init__(self, product_id: str):
        super().__init__(
            f"Product not found: {product_id}",
            details={"product_id": product_id},
        )
        self.product_id = product_id
