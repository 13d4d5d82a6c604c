"""
Shipping — volumetric and chargeable weight for step 5.

    from listing import shipping as SH

    SH.weights(step5).chargeable   # max(actual, L×W×H / 5000)
"""

from __future__ import annotations

from listing.shipping._calc import (
    VOLUMETRIC_DIVISOR,
    WeightBreakdown,
    volumetric_weight,
    chargeable_weight,
    weights,
)

__all__ = (
    "VOLUMETRIC_DIVISOR",
    "WeightBreakdown",
    "volumetric_weight",
    "chargeable_weight",
    "weights",
)
