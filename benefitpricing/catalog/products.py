"""Voluntary benefits product catalog.

Products:
- vol-life: Voluntary life insurance (employee, spouse, child)
- ltd: Long-term disability (employee only, 60% salary replacement)
- commuter: Commuter benefits (transit and parking)

Catalog entries use the same camelCase mapping shape as catalog JSON files,
so the built-in catalog and a loaded one go through the same validation.
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Optional

from benefitpricing.core.errors import InvalidRecordError, ProductNotFoundError
from benefitpricing.core.types import Employee, Product, SelectedOptions

logger = logging.getLogger(__name__)

# Voluntary life rates per $1000 of coverage, by coverage bracket
VOLUNTARY_LIFE = {
    "id": "vol-life",
    "name": "Voluntary Life",
    "type": "volLife",
    "costs": {
        "ee": [
            {"maxCoverage": 100_000, "rate": 0.28},
            {"maxCoverage": 250_000, "rate": 0.35},
            {"maxCoverage": "unbounded", "rate": 0.42},
        ],
        "sp": [
            {"maxCoverage": 50_000, "rate": 0.10},
            {"maxCoverage": 100_000, "rate": 0.12},
            {"maxCoverage": "unbounded", "rate": 0.15},
        ],
        "ch": 0.20,
    },
    "employerContribution": {"mode": "percentage", "contribution": 10},
}

# Disability rates are flat per pay period, by covered salary bracket
LONG_TERM_DISABILITY = {
    "id": "ltd",
    "name": "Long Term Disability",
    "type": "ltd",
    "coveragePercentage": 60,
    "costs": {
        "ee": [
            {"maxCoverage": 50_000, "rate": 18.75},
            {"maxCoverage": 150_000, "rate": 32.04},
            {"maxCoverage": "unbounded", "rate": 47.30},
        ],
    },
    "employerContribution": {"mode": "dollar", "contribution": 10},
}

# Monthly commuter benefit prices
COMMUTER = {
    "id": "commuter",
    "name": "Commuter Benefits",
    "type": "commuter",
    "costs": {},
    "benefitPrices": {
        "train": 84.75,
        "bus": 60.00,
        "parking": 250.00,
    },
}

SAMPLE_EMPLOYEE = {
    "id": "emp-001",
    "firstName": "Jordan",
    "lastName": "Rivera",
    "dateOfBirth": "1985-04-12",
    "salary": 120_000,
}


class ProductCatalog:
    """Products by id."""

    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._products: dict[str, Product] = {}
        for product in products or ():
            if product.id in self._products:
                raise InvalidRecordError(
                    f"Duplicate product id: {product.id}", record="Product", field="id"
                )
            self._products[product.id] = product

    @classmethod
    def default(cls) -> "ProductCatalog":
        """The built-in sample catalog."""
        return cls.from_dicts([VOLUNTARY_LIFE, LONG_TERM_DISABILITY, COMMUTER])

    @classmethod
    def from_dicts(cls, entries: Iterable[dict[str, Any]]) -> "ProductCatalog":
        return cls(Product.from_dict(entry) for entry in entries)

    @classmethod
    def from_json(cls, path: Path | str) -> "ProductCatalog":
        """Load a catalog file.

        The file holds either a list of products or ``{"products": [...]}``.
        """
        path = Path(path)
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        entries = data.get("products", []) if isinstance(data, dict) else data
        catalog = cls.from_dicts(entries)
        logger.info("Loaded %d products from %s", len(catalog), path)
        return catalog

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id: str) -> bool:
        return product_id in self._products

    def list_products(self) -> list[dict[str, Any]]:
        """List all products in the catalog."""
        return [p.to_dict() for p in self._products.values()]

    def get_product(self, product_id: str) -> Product:
        """Get a specific product.

        Raises:
            ProductNotFoundError: If the id is not in the catalog.
        """
        product = self._products.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product


def _load_json(path: Path | str) -> dict[str, Any]:
    with Path(path).open("r", encoding="utf-8") as f:
        return json.load(f)


def load_employee(path: Path | str) -> Employee:
    """Load an employee profile from a JSON file."""
    return Employee.from_dict(_load_json(path))


def load_selected_options(path: Path | str) -> SelectedOptions:
    """Load elections from a JSON file."""
    return SelectedOptions.from_dict(_load_json(path))
