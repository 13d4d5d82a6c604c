"""
Draft — the ProductDraft aggregate.

    from listing import draft as D

    d = D.ProductDraft.empty()
    d = replace(d, step1=D.merge(d.step1, {"product_title": "Linen shirt"}))
"""

from __future__ import annotations

from listing.draft._types import (
    ShippingType,
    MediaKind,
    ApprovalStatus,
    SizeVariant,
    ColorVariant,
    Specification,
    DeliveryCountry,
    MediaFile,
    Step1,
    Step2,
    Step3,
    Step4,
    Step5,
    Step6,
    StepRecord,
    ProductDraft,
)
from listing.draft._merge import merge

__all__ = (
    "ShippingType",
    "MediaKind",
    "ApprovalStatus",
    "SizeVariant",
    "ColorVariant",
    "Specification",
    "DeliveryCountry",
    "MediaFile",
    "Step1",
    "Step2",
    "Step3",
    "Step4",
    "Step5",
    "Step6",
    "StepRecord",
    "ProductDraft",
    "merge",
)
