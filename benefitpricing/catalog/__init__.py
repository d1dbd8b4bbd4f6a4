"""Product catalog loading."""

from benefitpricing.catalog.products import (
    SAMPLE_EMPLOYEE,
    ProductCatalog,
    load_employee,
    load_selected_options,
)

__all__ = [
    "ProductCatalog",
    "SAMPLE_EMPLOYEE",
    "load_employee",
    "load_selected_options",
]
