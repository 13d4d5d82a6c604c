"""
Variant manager — size and color variant collections of step 1.

Collections are ordered; a variant is never edited in place,
remove + re-add is the update path.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import replace
from typing import Protocol

from kungfu import Option, Some, Nothing

from listing._types import IdGenerator
from listing.draft import Step1, SizeVariant, ColorVariant

# ═══════════════════════════════════════════════════════════════════════════════
# Size Variants
# ═══════════════════════════════════════════════════════════════════════════════


def add_size_variant(
    step1: Step1,
    *,
    size: str,
    stock: int,
    quantity: int = 0,
    price: float = 0.0,
    ids: IdGenerator,
) -> Option[tuple[Step1, SizeVariant]]:
    """
    Append a size variant with a fresh id.

    Refused (Nothing) unless ``size`` is non-empty, ``stock > 0`` and
    quantity/price are non-negative.
    """
    size = size.strip()
    if not size or stock <= 0 or quantity < 0 or price < 0:
        return Nothing()
    variant = SizeVariant(id=ids(), size=size, quantity=quantity, stock=stock, price=price)
    return Some((replace(step1, size_variants=(*step1.size_variants, variant)), variant))


def remove_size_variant(step1: Step1, variant_id: str) -> Step1:
    return replace(
        step1,
        size_variants=tuple(v for v in step1.size_variants if v.id != variant_id),
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Color Variants
# ═══════════════════════════════════════════════════════════════════════════════


def normalize_sku(sku: str) -> str:
    return sku.strip().upper()


def add_color_variant(
    step1: Step1,
    *,
    color: str,
    sku: str,
    price: float = 0.0,
    stock: int = 0,
    ids: IdGenerator,
) -> Option[tuple[Step1, ColorVariant]]:
    """
    Append a color variant with an uppercased SKU.

    Refused when color or SKU is empty, a number is negative, or the SKU is
    already used by another color variant.
    """
    color = color.strip()
    sku = normalize_sku(sku)
    if not color or not sku or price < 0 or stock < 0:
        return Nothing()
    if any(v.sku == sku for v in step1.color_variants):
        return Nothing()
    variant = ColorVariant(id=ids(), color=color, sku=sku, price=price, stock=stock)
    return Some((replace(step1, color_variants=(*step1.color_variants, variant)), variant))


def remove_color_variant(step1: Step1, variant_id: str) -> Step1:
    return replace(
        step1,
        color_variants=tuple(v for v in step1.color_variants if v.id != variant_id),
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Checks
# ═══════════════════════════════════════════════════════════════════════════════


def duplicate_skus(variants: Iterable[ColorVariant]) -> tuple[str, ...]:
    counts = Counter(normalize_sku(v.sku) for v in variants)
    return tuple(sku for sku, n in counts.items() if n > 1)


class _HasId(Protocol):
    @property
    def id(self) -> str: ...


def duplicate_ids(rows: Iterable[_HasId]) -> tuple[str, ...]:
    """Ids occurring more than once in any collection of rows with an ``id``."""
    counts = Counter(r.id for r in rows)
    return tuple(i for i, n in counts.items() if n > 1)


__all__ = (
    "add_size_variant",
    "remove_size_variant",
    "normalize_sku",
    "add_color_variant",
    "remove_color_variant",
    "duplicate_skus",
    "duplicate_ids",
)
