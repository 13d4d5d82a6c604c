"""
Submission payload — the flat, camelCase record handed to the collaborators.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from listing._types import Payload
from listing.draft import ProductDraft, ApprovalStatus
from listing.offers import OfferRule, BuyXGetY, SpecialDay, Hourly, Bundle

# ═══════════════════════════════════════════════════════════════════════════════
# Wire Models
# ═══════════════════════════════════════════════════════════════════════════════


class _Wire(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class SizeVariantOut(_Wire):
    id: str
    size: str
    quantity: int
    stock: int
    price: float


class ColorVariantOut(_Wire):
    id: str
    color: str
    sku: str
    price: float
    stock: int


class SpecificationOut(_Wire):
    id: str
    key: str
    value: str


class DeliveryCountryOut(_Wire):
    id: str
    country_code: str
    country_name: str
    delivery_charge: float
    min_order_qty: int


class PackageDimensions(_Wire):
    length: float
    width: float
    height: float


class BuyXGetYOut(_Wire):
    id: str
    type: Literal["buy_x_get_y"] = "buy_x_get_y"
    buy_quantity: int
    get_quantity: int
    is_active: bool


class SpecialDayOut(_Wire):
    id: str
    type: Literal["special_day"] = "special_day"
    special_day_name: str
    discount_percent: float
    is_active: bool


class HourlyOut(_Wire):
    id: str
    type: Literal["hourly"] = "hourly"
    start_time: str
    end_time: str
    discount_percent: float
    is_active: bool


class BundleOut(_Wire):
    id: str
    type: Literal["bundle"] = "bundle"
    bundle_min_qty: int
    bundle_discount: float
    is_active: bool


OfferOut = Annotated[
    BuyXGetYOut | SpecialDayOut | HourlyOut | BundleOut,
    Field(discriminator="type"),
]


def offer_out(rule: OfferRule) -> BuyXGetYOut | SpecialDayOut | HourlyOut | BundleOut:
    match rule:
        case BuyXGetY():
            return BuyXGetYOut(
                id=rule.id,
                buy_quantity=rule.buy_quantity,
                get_quantity=rule.get_quantity,
                is_active=rule.is_active,
            )
        case SpecialDay():
            return SpecialDayOut(
                id=rule.id,
                special_day_name=rule.special_day_name,
                discount_percent=rule.discount_percent,
                is_active=rule.is_active,
            )
        case Hourly():
            return HourlyOut(
                id=rule.id,
                start_time=rule.start_time,
                end_time=rule.end_time,
                discount_percent=rule.discount_percent,
                is_active=rule.is_active,
            )
        case Bundle():
            return BundleOut(
                id=rule.id,
                bundle_min_qty=rule.bundle_min_qty,
                bundle_discount=rule.bundle_discount,
                is_active=rule.is_active,
            )


class ProductPayload(_Wire):
    """
    One product submission.

    Field names follow the draft, except where the catalogue API names
    differ: ``name`` (title), ``description`` (full description),
    ``price`` (selling price).
    """

    # Basic info
    category_id: str
    sub_category_id: str
    product_type_id: str
    name: str
    brand_name: str
    model_number: str
    short_description: str
    stock: int
    size_applicable: bool
    color_applicable: bool
    size_variants: list[SizeVariantOut]
    color_variants: list[ColorVariantOut]

    # Media
    images: list[str]
    videos: list[str]

    # Details
    highlights: list[str]
    description: str
    specifications: list[SpecificationOut]
    seller_notes: list[str]

    # Pricing
    country_code: str
    mrp: float
    price: float
    stock_quantity: int
    gst_rate: float
    platform_fee: float
    commission: float
    delivery_countries: list[DeliveryCountryOut]

    # Shipping
    package_weight: float
    package_dimensions: PackageDimensions
    shipping_type: str
    manufacturer_name: str
    manufacturer_address: str
    packing_details: str
    courier_partner: str
    cancellation_policy_days: int
    return_policy_days: int

    # Offers
    offer_rules: list[OfferOut]

    # Meta
    created_at: str
    approval_status: Literal["pending", "draft"]
    is_active: bool = False

    @classmethod
    def from_draft(
        cls,
        draft: ProductDraft,
        *,
        approval_status: ApprovalStatus,
        created_at: str,
    ) -> ProductPayload:
        s1, s2, s3, s4, s5, s6 = (
            draft.step1, draft.step2, draft.step3, draft.step4, draft.step5, draft.step6,
        )
        return cls(
            category_id=s1.category_id,
            sub_category_id=s1.sub_category_id,
            product_type_id=s1.product_type_id,
            name=s1.product_title,
            brand_name=s1.brand_name,
            model_number=s1.model_number,
            short_description=s1.short_description,
            stock=s1.stock,
            size_applicable=s1.size_applicable,
            color_applicable=s1.color_applicable,
            size_variants=[
                SizeVariantOut(id=v.id, size=v.size, quantity=v.quantity, stock=v.stock, price=v.price)
                for v in s1.size_variants
            ],
            color_variants=[
                ColorVariantOut(id=v.id, color=v.color, sku=v.sku, price=v.price, stock=v.stock)
                for v in s1.color_variants
            ],
            images=[m.url for m in s2.images],
            videos=[m.url for m in s2.videos],
            highlights=list(s3.highlights),
            description=s3.full_description,
            specifications=[
                SpecificationOut(id=sp.id, key=sp.key, value=sp.value) for sp in s3.specifications
            ],
            seller_notes=list(s3.seller_notes),
            country_code=s4.country_code,
            mrp=s4.mrp,
            price=s4.selling_price,
            stock_quantity=s4.stock_quantity,
            gst_rate=s4.gst_rate,
            platform_fee=s4.platform_fee,
            commission=s4.commission,
            delivery_countries=[
                DeliveryCountryOut(
                    id=d.id,
                    country_code=d.country_code,
                    country_name=d.country_name,
                    delivery_charge=d.delivery_charge,
                    min_order_qty=d.min_order_qty,
                )
                for d in s4.delivery_countries
            ],
            package_weight=s5.package_weight,
            package_dimensions=PackageDimensions(
                length=s5.package_length,
                width=s5.package_width,
                height=s5.package_height,
            ),
            shipping_type=str(s5.shipping_type),
            manufacturer_name=s5.manufacturer_name,
            manufacturer_address=s5.manufacturer_address,
            packing_details=s5.packing_details,
            courier_partner=s5.courier_partner,
            cancellation_policy_days=s5.cancellation_policy_days,
            return_policy_days=s5.return_policy_days,
            offer_rules=[offer_out(r) for r in s6.offer_rules],
            created_at=created_at,
            approval_status=approval_status.value,
        )

    def to_payload(self) -> Payload:
        return self.model_dump(by_alias=True, mode="json")


__all__ = (
    "SizeVariantOut",
    "ColorVariantOut",
    "SpecificationOut",
    "DeliveryCountryOut",
    "PackageDimensions",
    "BuyXGetYOut",
    "SpecialDayOut",
    "HourlyOut",
    "BundleOut",
    "OfferOut",
    "offer_out",
    "ProductPayload",
)
