"""Pytest fixtures for benefitpricing tests."""

import pytest

from benefitpricing.catalog.products import SAMPLE_EMPLOYEE, ProductCatalog
from benefitpricing.core.types import Employee, Product, SelectedOptions


@pytest.fixture
def product_catalog() -> ProductCatalog:
    """Create the built-in product catalog."""
    return ProductCatalog.default()


@pytest.fixture
def voluntary_life(product_catalog: ProductCatalog) -> Product:
    """Voluntary life product with a 10% employer contribution."""
    return product_catalog.get_product("vol-life")


@pytest.fixture
def long_term_disability(product_catalog: ProductCatalog) -> Product:
    """Disability product with a $10 employer contribution."""
    return product_catalog.get_product("ltd")


@pytest.fixture
def commuter(product_catalog: ProductCatalog) -> Product:
    """Commuter product without employer contribution."""
    return product_catalog.get_product("commuter")


@pytest.fixture
def employee() -> Employee:
    """Sample employee earning $120,000."""
    return Employee.from_dict(SAMPLE_EMPLOYEE)


@pytest.fixture
def employee_only() -> SelectedOptions:
    """Employee-only election without explicit coverage."""
    return SelectedOptions.from_dict({"familyMembersToCover": ["ee"]})


@pytest.fixture
def employee_and_spouse() -> SelectedOptions:
    """Employee at $200,000 and spouse at $75,000."""
    return SelectedOptions.from_dict(
        {
            "familyMembersToCover": ["ee", "sp"],
            "coverageLevel": [
                {"role": "ee", "coverage": 200000},
                {"role": "sp", "coverage": 75000},
            ],
        }
    )
