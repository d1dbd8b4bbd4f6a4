"""Configuration dataclasses for benefitpricing."""

import os
from dataclasses import dataclass
from typing import Literal, Optional

ENV_PREFIX = "BENEFITPRICING_"


@dataclass(frozen=True)
class PricingConfig:
    """Pricing engine configuration.

    Bracket overflow options:
        - "ceiling": coverage above every bracket bound uses the last bracket's rate (default)
        - "error": coverage above every bracket bound raises CoverageOutOfRangeError

    Unknown role options:
        - "error": resolving a role missing from the cost table raises UnknownRoleError (default)
        - "zero": a missing role resolves to a rate of 0.0
    """

    currency: str = "USD"
    precision: int = 2  # Decimal places kept by format_price
    coverage_unit: float = 1000.0  # Per-mille rates are quoted per this much coverage

    bracket_overflow: Literal["ceiling", "error"] = "ceiling"
    unknown_role: Literal["error", "zero"] = "error"

    def validate(self) -> None:
        """Validate configuration."""
        if self.precision < 0:
            raise ValueError("precision must be non-negative")
        if self.coverage_unit <= 0:
            raise ValueError("coverage_unit must be positive")
        if self.bracket_overflow not in ("ceiling", "error"):
            raise ValueError(f"Invalid bracket_overflow: {self.bracket_overflow}")
        if self.unknown_role not in ("error", "zero"):
            raise ValueError(f"Invalid unknown_role: {self.unknown_role}")

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "currency": self.currency,
            "precision": self.precision,
            "coverage_unit": self.coverage_unit,
            "bracket_overflow": self.bracket_overflow,
            "unknown_role": self.unknown_role,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PricingConfig":
        """Create from dictionary."""
        defaults = cls()
        config = cls(
            currency=data.get("currency", defaults.currency),
            precision=int(data.get("precision", defaults.precision)),
            coverage_unit=float(data.get("coverage_unit", defaults.coverage_unit)),
            bracket_overflow=data.get("bracket_overflow", defaults.bracket_overflow),
            unknown_role=data.get("unknown_role", defaults.unknown_role),
        )
        config.validate()
        return config

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None) -> "PricingConfig":
        """Create from BENEFITPRICING_* environment variables.

        Args:
            environ: Mapping to read instead of os.environ.
        """
        environ = os.environ if environ is None else environ
        data = {}
        for key in ("currency", "precision", "coverage_unit", "bracket_overflow", "unknown_role"):
            value = environ.get(f"{ENV_PREFIX}{key.upper()}")
            if value:
                data[key] = value
        return cls.from_dict(data)


DEFAULT_CONFIG = PricingConfig()
