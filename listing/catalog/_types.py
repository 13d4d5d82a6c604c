"""
Catalog types — reference data the wizard reads but never writes.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Protocol

# ═══════════════════════════════════════════════════════════════════════════════
# Records
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class SubCategory:
    id: str
    name: str


@dataclass(frozen=True, slots=True)
class Category:
    id: str
    name: str
    sub_categories: tuple[SubCategory, ...] = ()

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Category:
        """Accepts ``subCategories`` / ``sub_categories`` spellings."""
        subs = row.get("sub_categories", row.get("subCategories")) or ()
        return cls(
            id=str(row["id"]),
            name=str(row["name"]),
            sub_categories=tuple(
                SubCategory(id=str(s["id"]), name=str(s["name"])) for s in subs
            ),
        )


@dataclass(frozen=True, slots=True)
class Country:
    id: str
    code: str
    name: str
    currency: str = ""

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Country:
        """Accepts API (``code``/``name``) and table (``country_code``/``country_name``) rows."""
        return cls(
            id=str(row["id"]),
            code=str(row.get("code", row.get("country_code", ""))).upper(),
            name=str(row.get("name", row.get("country_name", ""))),
            currency=str(row.get("currency", row.get("currency_code", "")) or ""),
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Sources — implemented outside the core
# ═══════════════════════════════════════════════════════════════════════════════


class CategorySource(Protocol):
    async def fetch_categories(self) -> Sequence[Category]:
        """All categories with their sub-categories."""
        ...


class CountrySource(Protocol):
    async def fetch_countries(self) -> Sequence[Country]:
        """Countries the marketplace can sell into."""
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# Errors
# ═══════════════════════════════════════════════════════════════════════════════


class CatalogErrorKind(Enum):
    NO_SOURCE = auto()
    FETCH_FAILED = auto()


@dataclass(frozen=True, slots=True)
class CatalogError:
    kind: CatalogErrorKind
    message: str


__all__ = (
    "SubCategory",
    "Category",
    "Country",
    "CategorySource",
    "CountrySource",
    "CatalogErrorKind",
    "CatalogError",
)
