"""
Pricing — derived figures for step 4, recomputed on every read.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from collections.abc import Mapping

from listing.draft import Step4, merge
from listing.settings import WizardSettings, DEFAULT_SETTINGS
from listing.pricing._gst import gst_rate_for

# ═══════════════════════════════════════════════════════════════════════════════
# Breakdown
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class PriceBreakdown:
    discount_percent: int
    platform_fee_amount: float
    commission_amount: float
    gst_amount: float
    seller_earnings: float


def discount_percent(mrp: float, selling_price: float) -> int:
    """Whole-percent discount off MRP, halves rounded up. 0 when MRP is 0."""
    if mrp <= 0:
        return 0
    return math.floor((mrp - selling_price) / mrp * 100 + 0.5)


def percent_of(amount: float, percent: float) -> float:
    return amount * percent / 100


def breakdown(step4: Step4) -> PriceBreakdown:
    """
    Fees, tax and earnings for the current selling price.

    Example:
        mrp=1000, price=750, fee=7.5, commission=0.5, gst=18
        → 25 %, 56.25, 3.75, 135.0, earnings 555.0
    """
    price = step4.selling_price
    fee = percent_of(price, step4.platform_fee)
    commission = percent_of(price, step4.commission)
    gst = percent_of(price, step4.gst_rate)
    return PriceBreakdown(
        discount_percent=discount_percent(step4.mrp, price),
        platform_fee_amount=fee,
        commission_amount=commission,
        gst_amount=gst,
        seller_earnings=price - fee - commission - gst,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Writes — keep selling price inside [0, MRP]
# ═══════════════════════════════════════════════════════════════════════════════


def clamp_selling_price(step4: Step4) -> Step4:
    ceiling = max(step4.mrp, 0.0)
    clamped = min(max(step4.selling_price, 0.0), ceiling)
    if clamped == step4.selling_price:
        return step4
    return replace(step4, selling_price=clamped)


def suggested_gst_rate(
    previous: Step4,
    new_country: str,
    settings: WizardSettings = DEFAULT_SETTINGS,
) -> float:
    """
    GST rate to show after switching primary country.

    The table default replaces the current rate only while that rate is
    still the previous country's default; a manual edit is kept.
    """
    if previous.country_code:
        previous_default = gst_rate_for(previous.country_code, settings.default_gst_rate)
        if previous.gst_rate != previous_default:
            return previous.gst_rate
    return gst_rate_for(new_country, settings.default_gst_rate)


def apply_changes(
    step4: Step4,
    changes: Mapping[str, object],
    settings: WizardSettings = DEFAULT_SETTINGS,
) -> Step4:
    """
    Merge ``changes`` into step 4 and restore the pricing invariants.

    - country change without an explicit ``gst_rate`` re-suggests the rate
    - selling price is clamped to ``[0, mrp]`` on every write
    """
    changes = dict(changes)
    if "country_code" in changes:
        changes["country_code"] = str(changes["country_code"] or "").strip().upper()

    updated = merge(step4, changes)

    if (
        "country_code" in changes
        and "gst_rate" not in changes
        and updated.country_code
        and updated.country_code != step4.country_code
    ):
        updated = replace(
            updated,
            gst_rate=suggested_gst_rate(step4, updated.country_code, settings),
        )

    return clamp_selling_price(updated)


__all__ = (
    "PriceBreakdown",
    "discount_percent",
    "percent_of",
    "breakdown",
    "clamp_selling_price",
    "suggested_gst_rate",
    "apply_changes",
)
