"""Shared fakes and helpers for the listing tests."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping, Sequence

import pytest
from kungfu import Result, Ok, Error, Option, Some, Nothing

from listing.catalog import Category, Country, SubCategory
from listing.draft import MediaFile, MediaKind
from listing.media import PickedFile
from listing.wizard import WizardController

FIXED_NOW = "2024-05-01T10:00:00+00:00"


# ═══════════════════════════════════════════════════════════════════════════════
# Result / Option unwrapping
# ═══════════════════════════════════════════════════════════════════════════════


def ok_value[T, E](result: Result[T, E]) -> T:
    match result:
        case Ok(value):
            return value
        case Error(e):
            pytest.fail(f"expected Ok, got Error({e!r})")


def err_value[T, E](result: Result[T, E]) -> E:
    match result:
        case Error(e):
            return e
        case Ok(value):
            pytest.fail(f"expected Error, got Ok({value!r})")


def some_value[T](option: Option[T]) -> T:
    match option:
        case Some(value):
            return value
        case Nothing():
            pytest.fail("expected Some, got Nothing")


def is_nothing(option: Option[object]) -> bool:
    match option:
        case Nothing():
            return True
        case _:
            return False


# ═══════════════════════════════════════════════════════════════════════════════
# Media
# ═══════════════════════════════════════════════════════════════════════════════


def jpeg(name: str = "photo.jpg", size_bytes: int = 200_000) -> PickedFile:
    return PickedFile(name=name, content_type="image/jpeg", size_bytes=size_bytes, preview_url=f"blob:{name}")


def mp4(name: str = "clip.mp4", size_bytes: int = 2_000_000) -> PickedFile:
    return PickedFile(name=name, content_type="video/mp4", size_bytes=size_bytes, preview_url=f"blob:{name}")


def jpegs(count: int) -> list[PickedFile]:
    return [jpeg(f"photo-{i}.jpg") for i in range(1, count + 1)]


def fill_required_steps(wizard: WizardController) -> None:
    """Make steps 1-5 valid."""
    wizard.update_step1(
        category_id="cat-1",
        sub_category_id="sub-1",
        product_title="Linen Shirt",
        brand_name="Acme",
        short_description="Breathable summer shirt",
        stock=20,
    )
    ok_value(wizard.add_media(jpegs(5), MediaKind.IMAGE))
    wizard.update_step3(full_description="Stone-washed linen, relaxed fit.")
    wizard.update_step4(country_code="IN", mrp=1000, selling_price=750, stock_quantity=20)
    wizard.update_step5(package_weight=0.4, courier_partner="BlueDart")


# ═══════════════════════════════════════════════════════════════════════════════
# Collaborators
# ═══════════════════════════════════════════════════════════════════════════════


class FakeCreator:
    def __init__(self, fail: Exception | None = None, gate: asyncio.Event | None = None) -> None:
        self.fail = fail
        self.gate = gate
        self.payloads: list[Mapping[str, object]] = []

    async def create_product(self, payload: Mapping[str, object]) -> dict[str, object]:
        self.payloads.append(payload)
        if self.gate is not None:
            await self.gate.wait()
        if self.fail is not None:
            raise self.fail
        return {"id": "prod-1", "name": payload["name"]}


class FakeUploader:
    def __init__(self, fail: Exception | None = None, fail_discard: Exception | None = None) -> None:
        self.fail = fail
        self.fail_discard = fail_discard
        self.uploaded: list[str] = []
        self.discarded: list[str] = []

    async def upload(self, media: Sequence[MediaFile]) -> Mapping[str, str]:
        if self.fail is not None:
            raise self.fail
        urls = {m.id: f"https://cdn.example/{m.name}" for m in media}
        self.uploaded += urls.values()
        return urls

    async def discard(self, urls: Sequence[str]) -> None:
        if self.fail_discard is not None:
            raise self.fail_discard
        self.discarded += urls


class FakeSaver:
    def __init__(self, fail: Exception | None = None) -> None:
        self.fail = fail
        self.payloads: list[Mapping[str, object]] = []

    async def save_draft(self, payload: Mapping[str, object]) -> None:
        if self.fail is not None:
            raise self.fail
        self.payloads.append(payload)


class FakeCatalog:
    """Category and country source that counts fetches and can fail first."""

    def __init__(self, failures: int = 0) -> None:
        self.failures = failures
        self.category_calls = 0
        self.country_calls = 0

    async def fetch_categories(self) -> list[Category]:
        self.category_calls += 1
        if self.failures > 0:
            self.failures -= 1
            raise ConnectionError("catalog unavailable")
        return [
            Category("cat-1", "Apparel", (SubCategory("sub-1", "Shirts"), SubCategory("sub-2", "Trousers"))),
            Category("cat-2", "Home"),
        ]

    async def fetch_countries(self) -> list[Country]:
        self.country_calls += 1
        if self.failures > 0:
            self.failures -= 1
            raise ConnectionError("catalog unavailable")
        return [
            Country("1", "IN", "India", "INR"),
            Country("2", "US", "United States", "USD"),
            Country("3", "GB", "United Kingdom", "GBP"),
        ]
