"""Core type definitions for benefitpricing.

Records arrive from the product catalog and the employee profile as plain
mappings using the catalog's camelCase keys. Each record's ``from_dict``
validates its input once at the boundary so the pricing functions can trust
what they receive.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from benefitpricing.core.errors import InvalidRecordError, UnknownProductTypeError

# Well known covered roles
EMPLOYEE = "ee"
SPOUSE = "sp"
CHILD = "ch"

_MISSING = object()


class ProductType(str, Enum):
    """Voluntary benefit product kinds."""

    DISABILITY = "disability"  # Long-term disability
    VOLUNTARY_LIFE = "voluntary-life"
    COMMUTER = "commuter"

    @classmethod
    def parse(cls, value: Any) -> "ProductType":
        """Parse a product type tag, accepting the catalog's short aliases."""
        if isinstance(value, cls):
            return value
        tag = _PRODUCT_TYPE_ALIASES.get(value, value) if isinstance(value, str) else value
        try:
            return cls(tag)
        except ValueError:
            raise UnknownProductTypeError(value) from None


_PRODUCT_TYPE_ALIASES = {
    "ltd": "disability",
    "volLife": "voluntary-life",
    "voluntary_life": "voluntary-life",
}


class ContributionMode(str, Enum):
    """How the employer contribution is computed."""

    PERCENTAGE = "percentage"  # Percent of gross premium
    DOLLAR = "dollar"  # Flat currency amount
    NONE = "none"

    @classmethod
    def parse(cls, value: Any) -> "ContributionMode":
        if isinstance(value, cls):
            return value
        if value in ("fixed", "flat"):
            return cls.DOLLAR
        try:
            return cls(value)
        except ValueError:
            raise InvalidRecordError(
                f"Unknown employer contribution mode: {value}",
                record="EmployerContribution",
                field="mode",
            ) from None


def _get(data: Mapping[str, Any], *keys: str, default: Any = _MISSING) -> Any:
    """Look up the first present key, so camelCase and snake_case both work."""
    for key in keys:
        if key in data:
            return data[key]
    return default


def _amount(value: Any, record: str, field_name: str) -> float:
    """Coerce a non-negative finite amount."""
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise InvalidRecordError(
            f"{record}.{field_name} must be a number, got {value!r}",
            record=record,
            field=field_name,
        ) from None
    if math.isnan(amount) or amount < 0:
        raise InvalidRecordError(
            f"{record}.{field_name} must be non-negative, got {value!r}",
            record=record,
            field=field_name,
        )
    return amount


@dataclass(frozen=True)
class RateBracket:
    """One coverage bracket of a tiered rate.

    ``max_coverage`` is an exclusive upper bound; None means unbounded.
    """

    max_coverage: Optional[float]
    rate: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RateBracket":
        bound = _get(data, "maxCoverage", "max_coverage", default=None)
        if bound in (None, "unbounded") or (isinstance(bound, float) and math.isinf(bound)):
            max_coverage = None
        else:
            max_coverage = _amount(bound, "RateBracket", "max_coverage")
        rate = _get(data, "rate", "price", default=_MISSING)
        if rate is _MISSING:
            raise InvalidRecordError("Rate bracket has no rate", record="RateBracket", field="rate")
        return cls(max_coverage=max_coverage, rate=_amount(rate, "RateBracket", "rate"))

    def to_dict(self) -> dict[str, Any]:
        return {
            "maxCoverage": "unbounded" if self.max_coverage is None else self.max_coverage,
            "rate": self.rate,
        }


# A flat rate, or brackets sorted ascending by bound with the unbounded bracket last
RateDescriptor = Union[float, tuple[RateBracket, ...]]


def parse_rate_descriptor(role: str, value: Any) -> RateDescriptor:
    if isinstance(value, (list, tuple)):
        if not value:
            raise InvalidRecordError(
                f"Rate table for role {role} is empty", record="Product", field="costs"
            )
        brackets = [b if isinstance(b, RateBracket) else RateBracket.from_dict(b) for b in value]
        brackets.sort(key=lambda b: (b.max_coverage is None, b.max_coverage or 0.0))
        return tuple(brackets)
    return _amount(value, "Product", f"costs.{role}")


def normalize_costs(costs: Mapping[str, Any]) -> dict[str, RateDescriptor]:
    """Parse a cost table, accepting catalog-shaped bracket lists."""
    return {role: parse_rate_descriptor(role, value) for role, value in costs.items()}


@dataclass(frozen=True)
class EmployerContribution:
    """Employer share of a product's premium."""

    mode: ContributionMode = ContributionMode.NONE
    contribution: float = 0.0

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "EmployerContribution":
        if not data:
            return cls()
        mode = ContributionMode.parse(_get(data, "mode", default="none"))
        amount = _get(data, "contribution", "amount", default=0.0)
        return cls(mode=mode, contribution=_amount(amount, "EmployerContribution", "contribution"))

    def to_dict(self) -> dict[str, Any]:
        return {"mode": self.mode.value, "contribution": self.contribution}


@dataclass(frozen=True)
class Product:
    """A voluntary benefit offering and its rate table."""

    type: ProductType
    costs: Mapping[str, RateDescriptor] = field(default_factory=dict)
    employer_contribution: EmployerContribution = field(default_factory=EmployerContribution)
    id: str = ""
    name: str = ""
    coverage_percentage: Optional[float] = None  # Disability salary replacement, in percent
    benefit_prices: Mapping[str, float] = field(default_factory=dict)  # Commuter benefit prices

    def __post_init__(self) -> None:
        # Freeze the mappings so a pricing call can never alter the catalog
        object.__setattr__(self, "costs", MappingProxyType(dict(self.costs)))
        object.__setattr__(self, "benefit_prices", MappingProxyType(dict(self.benefit_prices)))

    @property
    def is_tiered(self) -> bool:
        """Whether any role is priced by coverage bracket."""
        return any(isinstance(d, tuple) for d in self.costs.values())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Product":
        """Create from a catalog entry.

        Raises:
            UnknownProductTypeError: If ``type`` is not a supported product kind.
            InvalidRecordError: If the rate table or contribution is malformed.
        """
        product_type = ProductType.parse(_get(data, "type", default=None))

        raw_costs = _get(data, "costs", default={}) or {}
        if isinstance(raw_costs, (list, tuple)):
            # [{"role": "ee", "price": 0.5}, ...]
            raw_costs = {
                entry["role"]: _get(entry, "price", "rate", "brackets", default=None)
                for entry in raw_costs
            }
        costs = normalize_costs(raw_costs)

        coverage_percentage = _get(data, "coveragePercentage", "coverage_percentage", default=None)
        if coverage_percentage is not None:
            coverage_percentage = _amount(coverage_percentage, "Product", "coverage_percentage")

        benefit_prices = {
            key: _amount(price, "Product", f"benefit_prices.{key}")
            for key, price in (_get(data, "benefitPrices", "benefit_prices", default={}) or {}).items()
        }

        return cls(
            type=product_type,
            costs=costs,
            employer_contribution=EmployerContribution.from_dict(
                _get(data, "employerContribution", "employer_contribution", default=None)
            ),
            id=str(_get(data, "id", default="")),
            name=str(_get(data, "name", default="")),
            coverage_percentage=coverage_percentage,
            benefit_prices=benefit_prices,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        costs: dict[str, Any] = {}
        for role, descriptor in self.costs.items():
            if isinstance(descriptor, tuple):
                costs[role] = [b.to_dict() for b in descriptor]
            else:
                costs[role] = descriptor
        result = {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "costs": costs,
            "employerContribution": self.employer_contribution.to_dict(),
        }
        if self.coverage_percentage is not None:
            result["coveragePercentage"] = self.coverage_percentage
        if self.benefit_prices:
            result["benefitPrices"] = dict(self.benefit_prices)
        return result


@dataclass(frozen=True)
class Employee:
    """Employee profile. Only salary takes part in pricing."""

    salary: float
    id: str = ""
    first_name: str = ""
    last_name: str = ""
    date_of_birth: Optional[str] = None
    gender: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Employee":
        salary = _get(data, "salary", "baseSalary", "base_salary", default=_MISSING)
        if salary is _MISSING:
            raise InvalidRecordError("Employee has no salary", record="Employee", field="salary")
        return cls(
            salary=_amount(salary, "Employee", "salary"),
            id=str(_get(data, "id", default="")),
            first_name=_get(data, "firstName", "first_name", default=""),
            last_name=_get(data, "lastName", "last_name", default=""),
            date_of_birth=_get(data, "dateOfBirth", "date_of_birth", default=None),
            gender=_get(data, "gender", default=None),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "salary": self.salary,
            "dateOfBirth": self.date_of_birth,
            "gender": self.gender,
        }


@dataclass(frozen=True)
class CoverageElection:
    """Elected face value for one covered role."""

    role: str
    coverage: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CoverageElection":
        role = _get(data, "role", default=None)
        if not role:
            raise InvalidRecordError("Coverage entry has no role", record="CoverageElection", field="role")
        coverage = _get(data, "coverage", default=_MISSING)
        if coverage is _MISSING:
            raise InvalidRecordError(
                f"Coverage entry for role {role} has no coverage",
                record="CoverageElection",
                field="coverage",
            )
        return cls(role=role, coverage=_amount(coverage, "CoverageElection", "coverage"))

    def to_dict(self) -> dict[str, Any]:
        return {"role": self.role, "coverage": self.coverage}


@dataclass(frozen=True)
class SelectedOptions:
    """An employee's elections for one pricing request."""

    family_members_to_cover: tuple[str, ...] = ()
    coverage_level: tuple[CoverageElection, ...] = ()
    benefit: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Covered roles form an ordered set
        object.__setattr__(
            self, "family_members_to_cover", tuple(dict.fromkeys(self.family_members_to_cover))
        )
        object.__setattr__(self, "coverage_level", tuple(self.coverage_level))
        object.__setattr__(self, "benefit", tuple(self.benefit))
        seen: set[str] = set()
        for election in self.coverage_level:
            if election.role in seen:
                raise InvalidRecordError(
                    f"Coverage elected more than once for role {election.role}",
                    record="SelectedOptions",
                    field="coverage_level",
                )
            seen.add(election.role)

    def coverage_for(self, role: str) -> Optional[float]:
        """Return the elected coverage for a role, or None."""
        return find_coverage(role, self.coverage_level)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SelectedOptions":
        members = _get(data, "familyMembersToCover", "family_members_to_cover", default=()) or ()
        levels = _get(data, "coverageLevel", "coverage_level", default=()) or ()
        benefit = _get(data, "benefit", default=()) or ()
        # A single role or benefit key may be given bare
        if isinstance(members, str):
            members = (members,)
        if isinstance(benefit, str):
            benefit = (benefit,)
        return cls(
            family_members_to_cover=tuple(members),
            coverage_level=tuple(
                e if isinstance(e, CoverageElection) else CoverageElection.from_dict(e) for e in levels
            ),
            benefit=tuple(benefit),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "familyMembersToCover": list(self.family_members_to_cover),
            "coverageLevel": [e.to_dict() for e in self.coverage_level],
            "benefit": list(self.benefit),
        }


def find_coverage(role: str, coverage_level: Any) -> Optional[float]:
    """Find a role's coverage in a sequence of elections (records or mappings)."""
    for election in coverage_level:
        if isinstance(election, CoverageElection):
            if election.role == role:
                return election.coverage
        elif election.get("role") == role:
            return _amount(election.get("coverage"), "CoverageElection", "coverage")
    return None


def as_product(product: Union[Product, Mapping[str, Any]]) -> Product:
    return product if isinstance(product, Product) else Product.from_dict(product)


def as_employee(employee: Union[Employee, Mapping[str, Any], None]) -> Optional[Employee]:
    if employee is None or isinstance(employee, Employee):
        return employee
    return Employee.from_dict(employee)


def as_selected_options(options: Union[SelectedOptions, Mapping[str, Any], None]) -> SelectedOptions:
    if isinstance(options, SelectedOptions):
        return options
    return SelectedOptions.from_dict(options or {})
