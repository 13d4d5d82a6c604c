"""
Offers — typed promotional rules (step 6).

    from listing import offers as O

    match O.make_offer(O.OfferType.BUNDLE, {"bundle_min_qty": 3}, ids):
        case Some(rule):
            rules = O.add_offer(rules, rule)
            print(O.describe(rule))   # "Buy 3+ Get 15% OFF"
"""

from __future__ import annotations

from listing.offers._types import (
    OfferType,
    BuyXGetY,
    SpecialDay,
    Hourly,
    Bundle,
    OfferRule,
)
from listing.offers._ops import (
    DEFAULT_FIELDS,
    make_offer,
    add_offer,
    toggle_offer_active,
    remove_offer,
    is_well_formed,
    describe,
)

__all__ = (
    "OfferType",
    "BuyXGetY",
    "SpecialDay",
    "Hourly",
    "Bundle",
    "OfferRule",
    "DEFAULT_FIELDS",
    "make_offer",
    "add_offer",
    "toggle_offer_active",
    "remove_offer",
    "is_well_formed",
    "describe",
)
