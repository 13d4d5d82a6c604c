"""
Catalog — category and country reference data for steps 1 and 4.
"""

from __future__ import annotations

from listing.catalog._types import (
    SubCategory,
    Category,
    Country,
    CategorySource,
    CountrySource,
    CatalogErrorKind,
    CatalogError,
)
from listing.catalog._reference import ReferenceData, country_name

__all__ = (
    "SubCategory",
    "Category",
    "Country",
    "CategorySource",
    "CountrySource",
    "CatalogErrorKind",
    "CatalogError",
    "ReferenceData",
    "country_name",
)
