"""
Pricing — discount, platform fee, commission, GST and seller earnings.

    from listing import pricing as P

    P.breakdown(step4).seller_earnings
    step4 = P.apply_changes(step4, {"mrp": 500})  # clamps selling price
"""

from __future__ import annotations

from listing.pricing._gst import GST_RATES, gst_rate_for
from listing.pricing._calc import (
    PriceBreakdown,
    discount_percent,
    percent_of,
    breakdown,
    clamp_selling_price,
    suggested_gst_rate,
    apply_changes,
)

__all__ = (
    "GST_RATES",
    "gst_rate_for",
    "PriceBreakdown",
    "discount_percent",
    "percent_of",
    "breakdown",
    "clamp_selling_price",
    "suggested_gst_rate",
    "apply_changes",
)
