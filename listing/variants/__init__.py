"""
Variants — size/color variant collections (step 1).

    from listing import variants as V

    match V.add_color_variant(step1, color="Navy", sku="tee-nv", ids=ids):
        case Some((step1, variant)):
            assert variant.sku == "TEE-NV"
        case Nothing():
            ...
"""

from __future__ import annotations

from listing.variants._ops import (
    add_size_variant,
    remove_size_variant,
    normalize_sku,
    add_color_variant,
    remove_color_variant,
    duplicate_skus,
    duplicate_ids,
)

__all__ = (
    "add_size_variant",
    "remove_size_variant",
    "normalize_sku",
    "add_color_variant",
    "remove_color_variant",
    "duplicate_skus",
    "duplicate_ids",
)
