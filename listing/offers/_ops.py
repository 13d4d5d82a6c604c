"""
Offer rule engine — build, toggle, remove and describe promotional rules.

The engine stores rules; it never arbitrates overlapping effects.
"""

from __future__ import annotations

import re
from dataclasses import replace
from collections.abc import Mapping

from kungfu import Option, Some, Nothing

from listing._types import IdGenerator
from listing.offers._types import (
    OfferType,
    OfferRule,
    BuyXGetY,
    SpecialDay,
    Hourly,
    Bundle,
)

# ═══════════════════════════════════════════════════════════════════════════════
# Defaults (mirror the seller console's "new offer" form)
# ═══════════════════════════════════════════════════════════════════════════════

DEFAULT_FIELDS: Mapping[str, object] = {
    "buy_quantity": 2,
    "get_quantity": 1,
    "discount_percent": 10,
    "special_day_name": "",
    "start_time": "",
    "end_time": "",
    "bundle_min_qty": 3,
    "bundle_discount": 15,
    "is_active": True,
}

_CAMEL = re.compile(r"(?<!^)(?=[A-Z])")


def _snake(key: str) -> str:
    return _CAMEL.sub("_", key).lower()


def _percent_ok(value: float) -> bool:
    return 0 <= value <= 100


def _whole(value: object) -> int:
    number = float(value)  # type: ignore[arg-type]
    if not number.is_integer():
        raise ValueError(f"{value!r} is not a whole number")
    return int(number)


# ═══════════════════════════════════════════════════════════════════════════════
# make_offer() — Construct the variant for a tag
# ═══════════════════════════════════════════════════════════════════════════════


def make_offer(
    offer_type: OfferType | str,
    fields: Mapping[str, object],
    ids: IdGenerator,
) -> Option[OfferRule]:
    """
    Build the concrete rule for ``offer_type``.

    Fields irrelevant to the type are ignored; missing ones take the form
    defaults. Keys may be snake_case or camelCase. Unknown tags and
    out-of-range or fractional quantities give Nothing.

    Example:
        make_offer("bundle", {"bundleMinQty": 4, "bundleDiscount": 20}, ids)
        # Some(Bundle(id=..., bundle_min_qty=4, bundle_discount=20))
    """
    try:
        tag = OfferType(offer_type)
    except ValueError:
        return Nothing()

    given = {_snake(k): v for k, v in fields.items()}
    f = {**DEFAULT_FIELDS, **given}
    active = bool(f["is_active"])

    try:
        match tag:
            case OfferType.BUY_X_GET_Y:
                buy, get = _whole(f["buy_quantity"]), _whole(f["get_quantity"])
                if buy < 1 or get < 1:
                    return Nothing()
                return Some(BuyXGetY(ids(), buy, get, active))

            case OfferType.SPECIAL_DAY:
                pct = float(f["discount_percent"])  # type: ignore[arg-type]
                if not _percent_ok(pct):
                    return Nothing()
                return Some(SpecialDay(ids(), str(f["special_day_name"]).strip(), pct, active))

            case OfferType.HOURLY:
                pct = float(f["discount_percent"])  # type: ignore[arg-type]
                if not _percent_ok(pct):
                    return Nothing()
                return Some(Hourly(ids(), str(f["start_time"]), str(f["end_time"]), pct, active))

            case OfferType.BUNDLE:
                min_qty = _whole(f["bundle_min_qty"])
                pct = float(f["bundle_discount"])  # type: ignore[arg-type]
                if min_qty < 2 or not _percent_ok(pct):
                    return Nothing()
                return Some(Bundle(ids(), min_qty, pct, active))
    except (TypeError, ValueError):
        return Nothing()
    return Nothing()


# ═══════════════════════════════════════════════════════════════════════════════
# Collection ops
# ═══════════════════════════════════════════════════════════════════════════════


def add_offer(rules: tuple[OfferRule, ...], rule: OfferRule) -> tuple[OfferRule, ...]:
    return (*rules, rule)


def toggle_offer_active(rules: tuple[OfferRule, ...], offer_id: str) -> tuple[OfferRule, ...]:
    """Flip ``is_active`` on the matching rule; every other field is kept."""
    return tuple(
        replace(r, is_active=not r.is_active) if r.id == offer_id else r
        for r in rules
    )


def remove_offer(rules: tuple[OfferRule, ...], offer_id: str) -> tuple[OfferRule, ...]:
    return tuple(r for r in rules if r.id != offer_id)


def is_well_formed(rule: OfferRule) -> bool:
    """Bounds check for rules that did not come through make_offer()."""
    match rule:
        case BuyXGetY(buy_quantity=buy, get_quantity=get):
            return buy >= 1 and get >= 1
        case SpecialDay(discount_percent=pct) | Hourly(discount_percent=pct):
            return _percent_ok(pct)
        case Bundle(bundle_min_qty=min_qty, bundle_discount=pct):
            return min_qty >= 2 and _percent_ok(pct)
    return False


# ═══════════════════════════════════════════════════════════════════════════════
# describe() — Human-readable summary
# ═══════════════════════════════════════════════════════════════════════════════


def _num(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def describe(rule: OfferRule) -> str:
    """Render a rule the way the offer list shows it."""
    match rule:
        case BuyXGetY(buy_quantity=buy, get_quantity=get):
            return f"Buy {buy} Get {get} Free"
        case SpecialDay(special_day_name=day, discount_percent=pct):
            return f"{day} - {_num(pct)}% OFF"
        case Hourly(start_time=start, end_time=end, discount_percent=pct):
            return f"{start} - {end}: {_num(pct)}% OFF"
        case Bundle(bundle_min_qty=min_qty, bundle_discount=pct):
            return f"Buy {min_qty}+ Get {_num(pct)}% OFF"
    return "Unknown offer"


__all__ = (
    "DEFAULT_FIELDS",
    "make_offer",
    "add_offer",
    "toggle_offer_active",
    "remove_offer",
    "is_well_formed",
    "describe",
)
