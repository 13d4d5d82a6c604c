"""
Wizard settings — every tunable constant in one frozen record.

    settings = WizardSettings()                       # built-in defaults
    settings = WizardSettings.from_env()              # .env / LISTING_* overrides
    settings = WizardSettings(platform_fee_percent=5) # explicit
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from collections.abc import Callable

from dotenv import load_dotenv

MB = 1024 * 1024


@dataclass(frozen=True, slots=True)
class WizardSettings:
    """Limits, fees and defaults used by the listing wizard."""

    # Pricing (step 4)
    platform_fee_percent: float = 7.5
    commission_percent: float = 0.5
    default_gst_rate: float = 15.0

    # Shipping (step 5)
    volumetric_divisor: float = 5000.0
    max_policy_days: int = 30
    default_cancellation_days: int = 7
    default_return_days: int = 7

    # Media (step 2)
    min_images: int = 5
    max_images: int = 10
    max_videos: int = 2
    max_image_bytes: int = 25 * MB
    max_video_bytes: int = 40 * MB
    image_types: tuple[str, ...] = ("image/jpeg", "image/jpg", "image/png")
    video_types: tuple[str, ...] = ("video/mp4", "video/webm", "video/quicktime")

    # Text limits (steps 1 and 3)
    min_title_length: int = 3
    max_title_length: int = 250
    max_short_description_length: int = 350
    model_number_min_length: int = 8
    model_number_max_length: int = 20
    max_specifications: int = 50

    @classmethod
    def from_env(cls, prefix: str = "LISTING_", dotenv_path: str | None = None) -> WizardSettings:
        """
        Build settings from the environment.

        Loads ``.env`` first (existing variables win), then reads
        ``{prefix}{FIELD_NAME}`` for every numeric field.
        """
        load_dotenv(dotenv_path)
        overrides: dict[str, object] = {}
        for name, convert in _ENV_FIELDS.items():
            raw = os.getenv(f"{prefix}{name.upper()}")
            if raw is None or raw.strip() == "":
                continue
            try:
                overrides[name] = convert(raw)
            except ValueError as exc:
                raise ValueError(f"{prefix}{name.upper()}: cannot parse {raw!r}") from exc
        return replace(cls(), **overrides)


_ENV_FIELDS: dict[str, Callable[[str], object]] = {
    "platform_fee_percent": float,
    "commission_percent": float,
    "default_gst_rate": float,
    "volumetric_divisor": float,
    "max_policy_days": int,
    "default_cancellation_days": int,
    "default_return_days": int,
    "min_images": int,
    "max_images": int,
    "max_videos": int,
    "max_image_bytes": int,
    "max_video_bytes": int,
    "min_title_length": int,
    "max_title_length": int,
    "max_short_description_length": int,
    "model_number_min_length": int,
    "model_number_max_length": int,
    "max_specifications": int,
}

DEFAULT_SETTINGS = WizardSettings()


__all__ = ("WizardSettings", "DEFAULT_SETTINGS", "MB")
