"""Rate lookup against a product's cost table.

A cost table maps each covered role to either a flat rate or a sequence of
coverage brackets. Bracket bounds are exclusive: a bracket applies when its
``max_coverage`` is strictly greater than the requested coverage.
"""

import logging
from typing import Mapping, Optional, Sequence

from benefitpricing.core.config import DEFAULT_CONFIG, PricingConfig
from benefitpricing.core.errors import (
    CoverageOutOfRangeError,
    MissingCoverageError,
    UnknownRoleError,
)
from benefitpricing.core.types import RateBracket, RateDescriptor, normalize_costs

logger = logging.getLogger(__name__)


def _descriptor(
    role: str, costs: Mapping[str, RateDescriptor], config: PricingConfig
) -> Optional[RateDescriptor]:
    descriptor = costs.get(role)
    if descriptor is None:
        if config.unknown_role == "zero":
            logger.warning("No rate defined for role %s, pricing it at zero", role)
            return None
        raise UnknownRoleError(role, known_roles=list(costs))
    return descriptor


def resolve_flat_rate(
    role: str,
    costs: Mapping[str, RateDescriptor],
    *,
    config: Optional[PricingConfig] = None,
) -> float:
    """Return a role's flat rate.

    Raises:
        UnknownRoleError: If the role has no rate and unknown roles are strict.
    """
    config = config or DEFAULT_CONFIG
    descriptor = _descriptor(role, costs, config)
    if descriptor is None:
        return 0.0
    if isinstance(descriptor, tuple):
        raise TypeError(f"Role {role} is priced by coverage bracket, not a flat rate")
    return float(descriptor)


def select_bracket(
    brackets: Sequence[RateBracket],
    coverage: float,
) -> Optional[RateBracket]:
    """Return the first bracket whose bound exceeds the coverage, or None."""
    for bracket in brackets:
        if bracket.max_coverage is None or bracket.max_coverage > coverage:
            return bracket
    return None


def resolve_tiered_rate(
    role: str,
    coverage: float,
    costs: Mapping[str, RateDescriptor],
    *,
    config: Optional[PricingConfig] = None,
) -> float:
    """Return a role's rate for the bracket containing ``coverage``.

    Coverage above every bound uses the last bracket's rate, unless the
    config's ``bracket_overflow`` is "error".

    Raises:
        UnknownRoleError: If the role has no rate and unknown roles are strict.
        CoverageOutOfRangeError: On overflow when overflow is strict.
    """
    config = config or DEFAULT_CONFIG
    descriptor = _descriptor(role, costs, config)
    if descriptor is None:
        return 0.0
    if not isinstance(descriptor, tuple):
        return float(descriptor)

    bracket = select_bracket(descriptor, coverage)
    if bracket is None:
        ceiling = descriptor[-1]
        if config.bracket_overflow == "error":
            raise CoverageOutOfRangeError(role, coverage, ceiling.max_coverage)
        logger.debug(
            "Coverage %s for role %s above highest bound %s, using ceiling rate",
            coverage,
            role,
            ceiling.max_coverage,
        )
        bracket = ceiling

    logger.debug("Resolved rate %s for role %s at coverage %s", bracket.rate, role, coverage)
    return bracket.rate


def resolve_rate(
    role: str,
    costs: Mapping[str, RateDescriptor],
    coverage: Optional[float] = None,
    *,
    config: Optional[PricingConfig] = None,
) -> float:
    """Resolve a role's rate for either kind of cost table entry.

    ``costs`` may be a product's parsed table or a catalog-shaped mapping
    with bracket lists.

    Raises:
        MissingCoverageError: If the role is tiered and no coverage is given.
    """
    costs = normalize_costs(costs)
    descriptor = costs.get(role)
    if isinstance(descriptor, tuple):
        if coverage is None:
            raise MissingCoverageError(role)
        return resolve_tiered_rate(role, coverage, costs, config=config)
    return resolve_flat_rate(role, costs, config=config)
