"""Employer contribution toward a product's premium."""

from typing import Any, Mapping, Optional, Union

from benefitpricing.core.types import ContributionMode, EmployerContribution


def get_employer_contribution(
    contribution: Union[EmployerContribution, Mapping[str, Any], None],
    gross_premium: float = 0.0,
) -> float:
    """Return the amount the employer covers.

    The amount is returned, not subtracted; the caller computes the net premium.

    Args:
        contribution: The product's employer contribution configuration.
            A missing configuration contributes nothing.
        gross_premium: Premium before contribution, used by percentage mode.

    Returns:
        Contribution in currency units.
    """
    config: Optional[EmployerContribution]
    if contribution is None or isinstance(contribution, EmployerContribution):
        config = contribution
    else:
        config = EmployerContribution.from_dict(contribution)

    if config is None or config.mode == ContributionMode.NONE:
        return 0.0
    if config.mode == ContributionMode.PERCENTAGE:
        return gross_premium * config.contribution / 100
    return config.contribution
