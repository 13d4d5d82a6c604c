"""
Default GST/VAT rates by country — pre-fill only, never a lock.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

GST_RATES: Mapping[str, float] = MappingProxyType({
    "IN": 18.0,  # GST
    "US": 0.0,
    "GB": 20.0,  # VAT
    "CA": 5.0,   # GST
    "AU": 10.0,
    "AE": 5.0,   # VAT
    "DE": 19.0,  # VAT
    "FR": 20.0,  # TVA
    "SG": 8.0,
    "JP": 10.0,
})


def gst_rate_for(country_code: str, default: float) -> float:
    """Suggested rate for ``country_code``; ``default`` for unknown codes."""
    return GST_RATES.get(country_code.strip().upper(), default)


__all__ = ("GST_RATES", "gst_rate_for")
