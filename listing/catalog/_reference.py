"""
Reference data — categories and countries, fetched at most once per session.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Sequence

from combinators import lift as L
from kungfu import Result, Ok, Error

from listing.catalog._types import (
    Category,
    Country,
    SubCategory,
    CategorySource,
    CountrySource,
    CatalogError,
    CatalogErrorKind,
)

logger = logging.getLogger(__name__)


async def _collect[T](fetch: Callable[[], Awaitable[Sequence[T]]]) -> tuple[T, ...]:
    return tuple(await fetch())


class ReferenceData:
    """
    Session-scoped view of the category and country sources.

    Successful loads are memoised until invalidate(); failures are not,
    so the next call retries.

    Example:
        ref = ReferenceData(categories=api, countries=api)
        match await ref.countries():
            case Ok(rows): ...
            case Error(e): show(e.message)
    """

    def __init__(
        self,
        categories: CategorySource | None = None,
        countries: CountrySource | None = None,
    ) -> None:
        self._category_source = categories
        self._country_source = countries
        self._categories: tuple[Category, ...] | None = None
        self._countries: tuple[Country, ...] | None = None

    async def categories(self) -> Result[tuple[Category, ...], CatalogError]:
        if self._categories is not None:
            return Ok(self._categories)
        source = self._category_source
        if source is None:
            return Error(CatalogError(CatalogErrorKind.NO_SOURCE, "No category source configured"))

        result = await L.catching_async(
            lambda: _collect(source.fetch_categories),
            on_error=lambda e: CatalogError(
                CatalogErrorKind.FETCH_FAILED, f"Failed to load categories: {e}"
            ),
        )
        match result:
            case Ok(rows):
                self._categories = rows
                logger.debug("Loaded %d categories", len(rows))
                return Ok(rows)
            case Error(err):
                logger.warning(err.message)
                return Error(err)

    async def countries(self) -> Result[tuple[Country, ...], CatalogError]:
        if self._countries is not None:
            return Ok(self._countries)
        source = self._country_source
        if source is None:
            return Error(CatalogError(CatalogErrorKind.NO_SOURCE, "No country source configured"))

        result = await L.catching_async(
            lambda: _collect(source.fetch_countries),
            on_error=lambda e: CatalogError(
                CatalogErrorKind.FETCH_FAILED, f"Failed to load countries: {e}"
            ),
        )
        match result:
            case Ok(rows):
                self._countries = rows
                logger.debug("Loaded %d countries", len(rows))
                return Ok(rows)
            case Error(err):
                logger.warning(err.message)
                return Error(err)

    # Synchronous views over whatever has been loaded so far

    def loaded_categories(self) -> tuple[Category, ...]:
        return self._categories or ()

    def loaded_countries(self) -> tuple[Country, ...]:
        return self._countries or ()

    def sub_categories(self, category_id: str) -> tuple[SubCategory, ...]:
        for category in self.loaded_categories():
            if category.id == category_id:
                return category.sub_categories
        return ()

    def invalidate(self) -> None:
        self._categories = None
        self._countries = None


def country_name(countries: Sequence[Country], code: str) -> str:
    """Display name for ``code``; the code itself when the list has no match."""
    code = code.strip().upper()
    for country in countries:
        if country.code.upper() == code:
            return country.name
    return code


__all__ = ("ReferenceData", "country_name")
