"""
Draft types — the ProductDraft aggregate and its six step records.

All records are frozen; the controller swaps in new records on every write.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto

from listing.offers._types import OfferRule
from listing.settings import WizardSettings, DEFAULT_SETTINGS

# ═══════════════════════════════════════════════════════════════════════════════
# Enums
# ═══════════════════════════════════════════════════════════════════════════════


class ShippingType(StrEnum):
    SELF = "self"
    PLATFORM = "platform"


class MediaKind(StrEnum):
    IMAGE = auto()
    VIDEO = auto()


class ApprovalStatus(StrEnum):
    PENDING = "pending"
    DRAFT = "draft"


# ═══════════════════════════════════════════════════════════════════════════════
# Rows
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class SizeVariant:
    id: str
    size: str
    quantity: int
    stock: int
    price: float


@dataclass(frozen=True, slots=True)
class ColorVariant:
    id: str
    color: str
    sku: str
    price: float
    stock: int


@dataclass(frozen=True, slots=True)
class Specification:
    id: str
    key: str
    value: str


@dataclass(frozen=True, slots=True)
class DeliveryCountry:
    """Per-country delivery row. ``country_name`` is copied at add time."""

    id: str
    country_code: str
    country_name: str
    delivery_charge: float
    min_order_qty: int


@dataclass(frozen=True, slots=True)
class MediaFile:
    """
    Local handle for one picked file.

    The file body never enters the core; only what the limits need.
    ``uploaded_url`` is filled when the upload collaborator reports completion.
    """

    id: str
    name: str
    content_type: str
    size_bytes: int
    kind: MediaKind
    preview_url: str
    uploaded_url: str | None = None

    @property
    def url(self) -> str:
        return self.uploaded_url or self.preview_url


# ═══════════════════════════════════════════════════════════════════════════════
# Steps
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Step1:
    """Identity & variants."""

    category_id: str = ""
    sub_category_id: str = ""
    product_type_id: str = ""
    product_title: str = ""
    brand_name: str = ""
    model_number: str = ""
    short_description: str = ""
    stock: int = 0
    size_applicable: bool = False
    color_applicable: bool = False
    size_variants: tuple[SizeVariant, ...] = ()
    color_variants: tuple[ColorVariant, ...] = ()


@dataclass(frozen=True, slots=True)
class Step2:
    """Media."""

    images: tuple[MediaFile, ...] = ()
    videos: tuple[MediaFile, ...] = ()


@dataclass(frozen=True, slots=True)
class Step3:
    """Content."""

    highlights: tuple[str, ...] = ()
    full_description: str = ""
    specifications: tuple[Specification, ...] = ()
    seller_notes: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Step4:
    """Pricing & geography."""

    country_code: str = ""
    mrp: float = 0.0
    selling_price: float = 0.0
    stock_quantity: int = 0
    gst_rate: float = 0.0
    platform_fee: float = DEFAULT_SETTINGS.platform_fee_percent
    commission: float = DEFAULT_SETTINGS.commission_percent
    delivery_countries: tuple[DeliveryCountry, ...] = ()


@dataclass(frozen=True, slots=True)
class Step5:
    """Logistics & policy."""

    package_weight: float = 0.0
    package_length: float = 0.0
    package_width: float = 0.0
    package_height: float = 0.0
    shipping_type: ShippingType = ShippingType.SELF
    manufacturer_name: str = ""
    manufacturer_address: str = ""
    packing_details: str = ""
    courier_partner: str = ""
    cancellation_policy_days: int = DEFAULT_SETTINGS.default_cancellation_days
    return_policy_days: int = DEFAULT_SETTINGS.default_return_days


@dataclass(frozen=True, slots=True)
class Step6:
    """Offers."""

    offer_rules: tuple[OfferRule, ...] = ()


# ═══════════════════════════════════════════════════════════════════════════════
# Aggregate
# ═══════════════════════════════════════════════════════════════════════════════


type StepRecord = Step1 | Step2 | Step3 | Step4 | Step5 | Step6


@dataclass(frozen=True, slots=True)
class ProductDraft:
    """One wizard session's worth of input, partitioned by step."""

    step1: Step1 = field(default_factory=Step1)
    step2: Step2 = field(default_factory=Step2)
    step3: Step3 = field(default_factory=Step3)
    step4: Step4 = field(default_factory=Step4)
    step5: Step5 = field(default_factory=Step5)
    step6: Step6 = field(default_factory=Step6)

    @classmethod
    def empty(cls, settings: WizardSettings = DEFAULT_SETTINGS) -> ProductDraft:
        """Fresh draft with the settings' fee and policy defaults."""
        return cls(
            step4=Step4(
                platform_fee=settings.platform_fee_percent,
                commission=settings.commission_percent,
            ),
            step5=Step5(
                cancellation_policy_days=settings.default_cancellation_days,
                return_policy_days=settings.default_return_days,
            ),
        )

    def step(self, n: int) -> StepRecord:
        match n:
            case 1:
                return self.step1
            case 2:
                return self.step2
            case 3:
                return self.step3
            case 4:
                return self.step4
            case 5:
                return self.step5
            case 6:
                return self.step6
            case _:
                raise ValueError(f"Unknown wizard step: {n}")


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
)
