"""Shared infrastructure for examples."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Coroutine, Mapping, Sequence
from dataclasses import dataclass, field

from listing.catalog import Category, Country, SubCategory
from listing.draft import MediaFile


# Fake catalogue API
@dataclass(slots=True)
class FakeCatalogApi:
    async def fetch_categories(self) -> list[Category]:
        await asyncio.sleep(0.01)
        return [
            Category("apparel", "Apparel", (SubCategory("shirts", "Shirts"), SubCategory("dresses", "Dresses"))),
            Category("home", "Home & Kitchen"),
        ]

    async def fetch_countries(self) -> list[Country]:
        await asyncio.sleep(0.01)
        return [
            Country("1", "IN", "India", "INR"),
            Country("2", "US", "United States", "USD"),
            Country("3", "AE", "United Arab Emirates", "AED"),
        ]


# Fake storage
@dataclass(slots=True)
class FakeStorage:
    stored: dict[str, str] = field(default_factory=dict)

    async def upload(self, media: Sequence[MediaFile]) -> Mapping[str, str]:
        await asyncio.sleep(0.01)
        urls = {m.id: f"https://cdn.example.com/{m.name}" for m in media}
        self.stored.update(urls)
        print(f"  ✓ Uploaded {len(urls)} files")
        return urls

    async def discard(self, urls: Sequence[str]) -> None:
        print(f"  ← Discarded {len(urls)} files")


# Fake product API
@dataclass(slots=True)
class FakeProductApi:
    fail_first: bool = False
    created: list[Mapping[str, object]] = field(default_factory=list)

    async def create_product(self, payload: Mapping[str, object]) -> str:
        await asyncio.sleep(0.01)
        if self.fail_first:
            self.fail_first = False
            print("  ✗ Create product: 503")
            raise ConnectionError("Service unavailable")
        self.created.append(payload)
        print(f"  ✓ Create product: {payload['name']}")
        return f"PRD-{len(self.created):04d}"

    async def save_draft(self, payload: Mapping[str, object]) -> None:
        print(f"  ✓ Saved draft: {payload['name'] or '(untitled)'}")


# Helpers
def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:
    logging.basicConfig(level=logging.INFO, format="  %(name)s: %(message)s")
    asyncio.run(main())
