"""
Offer rule types — a closed sum of four promotional shapes.

Each variant carries only its own fields; there is no "all optional" record.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

# ═══════════════════════════════════════════════════════════════════════════════
# Tag
# ═══════════════════════════════════════════════════════════════════════════════


class OfferType(StrEnum):
    BUY_X_GET_Y = "buy_x_get_y"
    SPECIAL_DAY = "special_day"
    HOURLY = "hourly"
    BUNDLE = "bundle"


# ═══════════════════════════════════════════════════════════════════════════════
# Variants
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class BuyXGetY:
    """Buy ``buy_quantity``, receive ``get_quantity`` free."""

    id: str
    buy_quantity: int
    get_quantity: int
    is_active: bool = True
    type: OfferType = OfferType.BUY_X_GET_Y


@dataclass(frozen=True, slots=True)
class SpecialDay:
    """Percentage off on a named day (Diwali, Black Friday, ...)."""

    id: str
    special_day_name: str
    discount_percent: float
    is_active: bool = True
    type: OfferType = OfferType.SPECIAL_DAY


@dataclass(frozen=True, slots=True)
class Hourly:
    """Percentage off inside a daily time window. Times are opaque ``HH:MM`` strings."""

    id: str
    start_time: str
    end_time: str
    discount_percent: float
    is_active: bool = True
    type: OfferType = OfferType.HOURLY


@dataclass(frozen=True, slots=True)
class Bundle:
    """Percentage off when buying at least ``bundle_min_qty`` units."""

    id: str
    bundle_min_qty: int
    bundle_discount: float
    is_active: bool = True
    type: OfferType = OfferType.BUNDLE


type OfferRule = BuyXGetY | SpecialDay | Hourly | Bundle


__all__ = (
    "OfferType",
    "BuyXGetY",
    "SpecialDay",
    "Hourly",
    "Bundle",
    "OfferRule",
)
