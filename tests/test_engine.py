"""Tests for product price dispatch and quotes."""

from unittest import mock

import pytest

from benefitpricing.core.errors import InvalidRecordError, UnknownProductTypeError
from benefitpricing.core.types import SelectedOptions
from benefitpricing.pricing import engine
from benefitpricing.pricing.engine import calculate_product_price, quote_product


@pytest.fixture
def spies():
    """Wrap the dispatcher's collaborators to count calls."""
    names = [
        "calculate_vol_life_price",
        "calculate_ltd_price",
        "calculate_commuter_price",
        "get_employer_contribution",
        "format_price",
    ]
    patchers = {name: mock.patch.object(engine, name, wraps=getattr(engine, name)) for name in names}
    started = {name: patcher.start() for name, patcher in patchers.items()}
    yield started
    for patcher in patchers.values():
        patcher.stop()


class TestCalculateProductPrice:
    """Tests for calculate_product_price."""

    def test_vol_life_single_employee(self, voluntary_life, employee, spies):
        """Test net price for a single employee after 10% contribution."""
        options = SelectedOptions.from_dict(
            {
                "familyMembersToCover": ["ee"],
                "coverageLevel": [{"role": "ee", "coverage": 125000}],
            }
        )
        price = calculate_product_price(voluntary_life, employee, options)

        assert price == 39.37
        assert spies["calculate_vol_life_price"].call_count == 1
        assert spies["get_employer_contribution"].call_count == 1
        assert spies["format_price"].call_count == 1
        assert spies["calculate_ltd_price"].call_count == 0

    def test_vol_life_employee_with_spouse(self, voluntary_life, employee, employee_and_spouse, spies):
        """Test net price for employee and spouse; truncation gives 71.09."""
        price = calculate_product_price(voluntary_life, employee, employee_and_spouse)

        assert price == 71.09
        assert spies["calculate_vol_life_price"].call_count == 1
        assert spies["get_employer_contribution"].call_count == 1
        assert spies["format_price"].call_count == 1
        assert spies["calculate_ltd_price"].call_count == 0

    def test_disability(self, long_term_disability, employee, employee_only, spies):
        """Test net disability price after the $10 contribution."""
        price = calculate_product_price(long_term_disability, employee, employee_only)

        assert price == 22.04
        assert spies["calculate_ltd_price"].call_count == 1
        assert spies["get_employer_contribution"].call_count == 1
        assert spies["format_price"].call_count == 1
        assert spies["calculate_vol_life_price"].call_count == 0

    def test_commuter(self, commuter, employee, spies):
        """Test that commuter pricing still runs the contribution step."""
        options = SelectedOptions.from_dict({"benefit": ["train"]})
        price = calculate_product_price(commuter, employee, options)

        assert price == 84.75
        assert spies["calculate_commuter_price"].call_count == 1
        assert spies["get_employer_contribution"].call_count == 1
        assert spies["format_price"].call_count == 1

    def test_unknown_product_type(self):
        """Test that an unknown product type is rejected with its name."""
        with pytest.raises(UnknownProductTypeError, match="Unknown product type: vision"):
            calculate_product_price({"type": "vision"}, {}, {})

    def test_employee_without_salary_rejected(self, long_term_disability):
        """Test that an employee mapping with no salary fails instead of pricing."""
        with pytest.raises(InvalidRecordError) as exc_info:
            calculate_product_price(long_term_disability, {}, {"familyMembersToCover": ["ee"]})
        assert exc_info.value.field == "salary"

    def test_commuter_without_employee(self, commuter):
        """Test that commuter pricing does not need an employee."""
        assert calculate_product_price(commuter, None, {"benefit": "bus"}) == 60.00

    def test_bare_role_string(self, long_term_disability, employee):
        """Test that a single covered role given as a string prices that role."""
        assert calculate_product_price(long_term_disability, employee, {"familyMembersToCover": "ee"}) == 22.04

    def test_accepts_catalog_mappings(self, voluntary_life):
        """Test pricing straight from catalog-shaped mappings."""
        price = calculate_product_price(
            voluntary_life.to_dict(),
            {"salary": 120000},
            {
                "familyMembersToCover": ["ee", "sp"],
                "coverageLevel": [
                    {"role": "ee", "coverage": 200000},
                    {"role": "sp", "coverage": 75000},
                ],
            },
        )
        assert price == 71.09

    def test_net_premium_never_negative(self, long_term_disability, employee):
        """Test that a flat contribution above gross floors the premium at zero."""
        options = SelectedOptions.from_dict({"familyMembersToCover": []})
        assert calculate_product_price(long_term_disability, employee, options) == 0

    def test_is_idempotent(self, voluntary_life, employee, employee_and_spouse):
        """Test that repeated calls give the same result."""
        results = {calculate_product_price(voluntary_life, employee, employee_and_spouse) for _ in range(3)}
        assert results == {71.09}

    def test_does_not_mutate_inputs(self, voluntary_life, employee, employee_and_spouse):
        """Test that pricing leaves its inputs untouched."""
        product_before = voluntary_life.to_dict()
        options_before = employee_and_spouse.to_dict()

        calculate_product_price(voluntary_life, employee, employee_and_spouse)

        assert voluntary_life.to_dict() == product_before
        assert employee_and_spouse.to_dict() == options_before


class TestQuoteProduct:
    """Tests for quote_product."""

    def test_vol_life_breakdown(self, voluntary_life, employee, employee_and_spouse):
        """Test the itemized voluntary life quote."""
        quote = quote_product(voluntary_life, employee, employee_and_spouse)

        assert quote.product_id == "vol-life"
        assert quote.product_type == "voluntary-life"
        assert quote.currency == "USD"
        assert quote.gross_premium == 79
        assert quote.employer_contribution == 7.9
        assert quote.net_premium == 71.09
        assert quote.by_role == {"ee": 70, "sp": 9}

    def test_net_matches_calculate_product_price(self, long_term_disability, employee, employee_only):
        """Test that the quote's net premium matches the dispatcher."""
        quote = quote_product(long_term_disability, employee, employee_only)

        assert quote.net_premium == calculate_product_price(long_term_disability, employee, employee_only)
        assert quote.by_role == {"ee": 32.04}

    def test_to_dict(self, commuter, employee):
        """Test quote serialization."""
        quote = quote_product(commuter, employee, {"benefit": ["parking"]})
        data = quote.to_dict()

        assert data["net_premium"] == 250.0
        assert data["employer_contribution"] == 0
        assert data["by_role"] == {}
