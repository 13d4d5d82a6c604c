"""
Weight derivations. Pure; never stored on the draft.
"""

from __future__ import annotations

from dataclasses import dataclass

from listing.draft import Step5

VOLUMETRIC_DIVISOR = 5000.0
"""cm³ per kg, the courier-industry convention."""


@dataclass(frozen=True, slots=True)
class WeightBreakdown:
    actual: float
    volumetric: float
    chargeable: float


def volumetric_weight(
    length: float,
    width: float,
    height: float,
    divisor: float = VOLUMETRIC_DIVISOR,
) -> float:
    """(L × W × H) / divisor in kg; 0 unless all three dimensions are positive."""
    if length > 0 and width > 0 and height > 0:
        return (length * width * height) / divisor
    return 0.0


def chargeable_weight(actual: float, volumetric: float) -> float:
    return max(actual, volumetric)


def weights(step5: Step5, divisor: float = VOLUMETRIC_DIVISOR) -> WeightBreakdown:
    volumetric = volumetric_weight(
        step5.package_length,
        step5.package_width,
        step5.package_height,
        divisor,
    )
    return WeightBreakdown(
        actual=step5.package_weight,
        volumetric=volumetric,
        chargeable=chargeable_weight(step5.package_weight, volumetric),
    )


__all__ = (
    "VOLUMETRIC_DIVISOR",
    "WeightBreakdown",
    "volumetric_weight",
    "chargeable_weight",
    "weights",
)
