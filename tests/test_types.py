"""Tests for record validation and serialization."""

import dataclasses

import pytest

from benefitpricing.core.errors import InvalidRecordError, UnknownProductTypeError
from benefitpricing.core.types import (
    ContributionMode,
    Employee,
    EmployerContribution,
    Product,
    ProductType,
    RateBracket,
    SelectedOptions,
)


class TestProductType:
    """Tests for ProductType parsing."""

    def test_aliases(self):
        """Test the catalog's short type tags."""
        assert ProductType.parse("ltd") == ProductType.DISABILITY
        assert ProductType.parse("volLife") == ProductType.VOLUNTARY_LIFE
        assert ProductType.parse("commuter") == ProductType.COMMUTER
        assert ProductType.parse("voluntary-life") == ProductType.VOLUNTARY_LIFE

    def test_unknown_type(self):
        """Test that unknown tags raise with the tag in the message."""
        with pytest.raises(UnknownProductTypeError) as exc_info:
            ProductType.parse("vision")
        assert str(exc_info.value) == "Unknown product type: vision"
        assert exc_info.value.to_dict()["details"] == {"product_type": "vision"}

    def test_missing_type(self):
        """Test that a product without a type is rejected."""
        with pytest.raises(UnknownProductTypeError):
            Product.from_dict({})


class TestProduct:
    """Tests for Product records."""

    def test_round_trip(self, voluntary_life):
        """Test that to_dict output loads back to an equal product."""
        assert Product.from_dict(voluntary_life.to_dict()) == voluntary_life

    def test_is_immutable(self, voluntary_life):
        """Test that products cannot be changed."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            voluntary_life.id = "other"
        with pytest.raises(TypeError):
            voluntary_life.costs["ee"] = 1.0

    def test_is_tiered(self, voluntary_life, commuter):
        """Test tiered detection."""
        assert voluntary_life.is_tiered
        assert not commuter.is_tiered

    def test_costs_as_role_list(self):
        """Test the list-of-roles cost table shape."""
        product = Product.from_dict(
            {"type": "volLife", "costs": [{"role": "ee", "price": 0.5}, {"role": "sp", "price": 0.25}]}
        )
        assert product.costs == {"ee": 0.5, "sp": 0.25}

    def test_negative_rate_rejected(self):
        """Test that negative rates fail validation."""
        with pytest.raises(InvalidRecordError) as exc_info:
            Product.from_dict({"type": "volLife", "costs": {"ee": -1}})
        assert exc_info.value.record == "Product"

    def test_empty_bracket_table_rejected(self):
        """Test that an empty bracket list fails validation."""
        with pytest.raises(InvalidRecordError):
            Product.from_dict({"type": "volLife", "costs": {"ee": []}})

    def test_bracket_without_rate_rejected(self):
        """Test that a bracket must carry a rate."""
        with pytest.raises(InvalidRecordError):
            RateBracket.from_dict({"maxCoverage": 1000})

    def test_unbounded_sentinels(self):
        """Test the accepted spellings of an unbounded bracket."""
        for bound in ("unbounded", None, float("inf")):
            assert RateBracket.from_dict({"maxCoverage": bound, "rate": 1}).max_coverage is None
        assert RateBracket.from_dict({"rate": 1}).max_coverage is None


class TestEmployerContributionRecord:
    """Tests for EmployerContribution records."""

    def test_missing_is_none_mode(self):
        """Test that no configuration means no contribution."""
        assert EmployerContribution.from_dict(None).mode == ContributionMode.NONE

    def test_fixed_alias(self):
        """Test that 'fixed' is read as a dollar amount."""
        config = EmployerContribution.from_dict({"mode": "fixed", "contribution": 5})
        assert config.mode == ContributionMode.DOLLAR
        assert config.contribution == 5

    def test_unknown_mode(self):
        """Test that unknown modes fail validation."""
        with pytest.raises(InvalidRecordError):
            EmployerContribution.from_dict({"mode": "matching", "contribution": 5})


class TestEmployee:
    """Tests for Employee records."""

    def test_requires_salary(self):
        """Test that salary is required."""
        with pytest.raises(InvalidRecordError) as exc_info:
            Employee.from_dict({"firstName": "Sam"})
        assert exc_info.value.field == "salary"

    def test_error_serializes_offending_field(self):
        """Test that the validation error names its record and field."""
        with pytest.raises(InvalidRecordError) as exc_info:
            Employee.from_dict({})
        data = exc_info.value.to_dict()
        assert data["error_type"] == "InvalidRecordError"
        assert data["details"] == {"record": "Employee", "field": "salary"}

    def test_demographics_carried(self, employee):
        """Test that demographic fields load."""
        assert employee.first_name == "Jordan"
        assert employee.salary == 120000


class TestSelectedOptions:
    """Tests for SelectedOptions records."""

    def test_roles_deduplicated_in_order(self):
        """Test that covered roles form an ordered set."""
        options = SelectedOptions.from_dict({"familyMembersToCover": ["sp", "ee", "sp"]})
        assert options.family_members_to_cover == ("sp", "ee")

    def test_duplicate_coverage_rejected(self):
        """Test that a role cannot have two coverage amounts."""
        with pytest.raises(InvalidRecordError):
            SelectedOptions.from_dict(
                {
                    "familyMembersToCover": ["ee"],
                    "coverageLevel": [
                        {"role": "ee", "coverage": 1000},
                        {"role": "ee", "coverage": 2000},
                    ],
                }
            )

    def test_negative_coverage_rejected(self):
        """Test that coverage must be non-negative."""
        with pytest.raises(InvalidRecordError):
            SelectedOptions.from_dict({"coverageLevel": [{"role": "ee", "coverage": -5}]})

    def test_role_string_wrapped(self):
        """Test that a single covered role string is one role, not its letters."""
        options = SelectedOptions.from_dict({"familyMembersToCover": "ee"})
        assert options.family_members_to_cover == ("ee",)

    def test_benefit_string_wrapped(self):
        """Test that a single benefit string is accepted."""
        assert SelectedOptions.from_dict({"benefit": "train"}).benefit == ("train",)

    def test_snake_case_keys(self):
        """Test that snake_case keys load too."""
        options = SelectedOptions.from_dict(
            {
                "family_members_to_cover": ["ee"],
                "coverage_level": [{"role": "ee", "coverage": 1000}],
            }
        )
        assert options.coverage_for("ee") == 1000
        assert options.coverage_for("sp") is None
