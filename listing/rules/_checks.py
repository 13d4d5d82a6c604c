"""
Per-step checks. Each returns every issue found, empty when the step is valid.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from listing.draft import (
    ProductDraft,
    Step1,
    Step2,
    Step3,
    Step4,
    Step5,
    Step6,
    ShippingType,
    MediaFile,
)
from listing.media import check_file
from listing.offers import is_well_formed
from listing.settings import WizardSettings, DEFAULT_SETTINGS
from listing.variants import duplicate_skus, duplicate_ids

_ALNUM = re.compile(r"[A-Za-z0-9]+")


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    step: int
    field: str
    message: str


# ═══════════════════════════════════════════════════════════════════════════════
# Step 1 — Identity & Variants
# ═══════════════════════════════════════════════════════════════════════════════


def check_step1(s: Step1, settings: WizardSettings) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []

    def issue(field: str, message: str) -> None:
        issues.append(ValidationIssue(1, field, message))

    if not s.category_id:
        issue("category_id", "Select a category")

    title = s.product_title.strip()
    if len(title) < settings.min_title_length:
        issue("product_title", f"Title needs at least {settings.min_title_length} characters")
    elif len(title) > settings.max_title_length:
        issue("product_title", f"Title is limited to {settings.max_title_length} characters")

    if not s.brand_name.strip():
        issue("brand_name", "Brand name is required")

    short = s.short_description.strip()
    if not short:
        issue("short_description", "Short description is required")
    elif len(short) > settings.max_short_description_length:
        issue(
            "short_description",
            f"Short description is limited to {settings.max_short_description_length} characters",
        )

    model = s.model_number.strip()
    if model and not (
        settings.model_number_min_length <= len(model) <= settings.model_number_max_length
        and _ALNUM.fullmatch(model)
    ):
        issue(
            "model_number",
            f"Model number must be {settings.model_number_min_length}-"
            f"{settings.model_number_max_length} letters or digits",
        )

    if s.stock < 0:
        issue("stock", "Stock cannot be negative")

    if s.size_applicable:
        for v in s.size_variants:
            if v.quantity < 0 or v.stock < 0 or v.price < 0:
                issue("size_variants", f"Size {v.size!r} has a negative value")
        if duplicate_ids(s.size_variants):
            issue("size_variants", "Size variant ids must be unique")

    if s.color_applicable:
        for v in s.color_variants:
            if not v.sku or v.sku != v.sku.upper():
                issue("color_variants", f"Color {v.color!r} needs an uppercase SKU")
            if v.price < 0 or v.stock < 0:
                issue("color_variants", f"Color {v.color!r} has a negative value")
        for sku in duplicate_skus(s.color_variants):
            issue("color_variants", f"SKU {sku} is used more than once")
        if duplicate_ids(s.color_variants):
            issue("color_variants", "Color variant ids must be unique")

    return issues


# ═══════════════════════════════════════════════════════════════════════════════
# Step 2 — Media
# ═══════════════════════════════════════════════════════════════════════════════


def _media_issues(items: tuple[MediaFile, ...], field: str, settings: WizardSettings) -> list[ValidationIssue]:
    out: list[ValidationIssue] = []
    for m in items:
        problem = check_file(m.name, m.content_type, m.size_bytes, m.kind, settings)
        if problem is not None:
            out.append(ValidationIssue(2, field, problem.message))
    return out


def check_step2(s: Step2, settings: WizardSettings) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    if len(s.images) < settings.min_images:
        issues.append(ValidationIssue(2, "images", f"Upload at least {settings.min_images} images"))
    elif len(s.images) > settings.max_images:
        issues.append(ValidationIssue(2, "images", f"Maximum {settings.max_images} images allowed"))
    if len(s.videos) > settings.max_videos:
        issues.append(ValidationIssue(2, "videos", f"Maximum {settings.max_videos} videos allowed"))
    issues += _media_issues(s.images, "images", settings)
    issues += _media_issues(s.videos, "videos", settings)
    return issues


# ═══════════════════════════════════════════════════════════════════════════════
# Step 3 — Content
# ═══════════════════════════════════════════════════════════════════════════════


def check_step3(s: Step3, settings: WizardSettings) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    if not s.full_description.strip():
        issues.append(ValidationIssue(3, "full_description", "Full description is required"))
    if len(s.specifications) > settings.max_specifications:
        issues.append(ValidationIssue(
            3, "specifications", f"At most {settings.max_specifications} specifications"
        ))
    return issues


# ═══════════════════════════════════════════════════════════════════════════════
# Step 4 — Pricing & Geography
# ═══════════════════════════════════════════════════════════════════════════════


def check_step4(s: Step4, settings: WizardSettings) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []

    def issue(field: str, message: str) -> None:
        issues.append(ValidationIssue(4, field, message))

    if not s.country_code:
        issue("country_code", "Select a country")
    if s.mrp <= 0:
        issue("mrp", "MRP must be greater than 0")
    if s.selling_price <= 0:
        issue("selling_price", "Selling price must be greater than 0")
    elif s.selling_price > s.mrp:
        issue("selling_price", "Selling price cannot exceed MRP")
    if not 0 <= s.gst_rate <= 100:
        issue("gst_rate", "GST rate must be between 0 and 100")
    if s.stock_quantity < 0:
        issue("stock_quantity", "Stock quantity cannot be negative")

    seen: set[str] = set()
    for d in s.delivery_countries:
        code = d.country_code.upper()
        if code in seen:
            issue("delivery_countries", f"{code} is listed more than once")
        seen.add(code)
        if d.delivery_charge < 0:
            issue("delivery_countries", f"{code}: delivery charge cannot be negative")
        if d.min_order_qty < 1:
            issue("delivery_countries", f"{code}: minimum order quantity must be at least 1")
    if duplicate_ids(s.delivery_countries):
        issue("delivery_countries", "Delivery row ids must be unique")
    return issues


# ═══════════════════════════════════════════════════════════════════════════════
# Step 5 — Logistics & Policy
# ═══════════════════════════════════════════════════════════════════════════════


def check_step5(s: Step5, settings: WizardSettings) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []

    def issue(field: str, message: str) -> None:
        issues.append(ValidationIssue(5, field, message))

    if s.package_weight <= 0:
        issue("package_weight", "Package weight must be greater than 0")
    for name in ("package_length", "package_width", "package_height"):
        if getattr(s, name) < 0:
            issue(name, "Dimensions cannot be negative")
    if s.shipping_type not in ShippingType:
        issue("shipping_type", "Choose self or platform shipping")
    elif s.shipping_type == ShippingType.SELF and not s.courier_partner.strip():
        issue("courier_partner", "Courier partner is required for self shipping")
    for name in ("cancellation_policy_days", "return_policy_days"):
        if not 0 <= getattr(s, name) <= settings.max_policy_days:
            issue(name, f"Must be between 0 and {settings.max_policy_days} days")
    return issues


# ═══════════════════════════════════════════════════════════════════════════════
# Step 6 — Offers (advisory)
# ═══════════════════════════════════════════════════════════════════════════════


def check_step6(s: Step6, settings: WizardSettings) -> list[ValidationIssue]:
    issues = [
        ValidationIssue(6, "offer_rules", f"Offer {rule.id} is out of range")
        for rule in s.offer_rules
        if not is_well_formed(rule)
    ]
    if duplicate_ids(s.offer_rules):
        issues.append(ValidationIssue(6, "offer_rules", "Offer ids must be unique"))
    return issues


# ═══════════════════════════════════════════════════════════════════════════════
# Dispatch
# ═══════════════════════════════════════════════════════════════════════════════


def step_issues(
    step: int,
    draft: ProductDraft,
    settings: WizardSettings = DEFAULT_SETTINGS,
) -> tuple[ValidationIssue, ...]:
    match step:
        case 1:
            return tuple(check_step1(draft.step1, settings))
        case 2:
            return tuple(check_step2(draft.step2, settings))
        case 3:
            return tuple(check_step3(draft.step3, settings))
        case 4:
            return tuple(check_step4(draft.step4, settings))
        case 5:
            return tuple(check_step5(draft.step5, settings))
        case 6:
            return tuple(check_step6(draft.step6, settings))
        case _:
            return (ValidationIssue(step, "step", f"Unknown step {step}"),)


def is_step_valid(
    step: int,
    draft: ProductDraft,
    settings: WizardSettings = DEFAULT_SETTINGS,
) -> bool:
    return not step_issues(step, draft, settings)


__all__ = (
    "ValidationIssue",
    "check_step1",
    "check_step2",
    "check_step3",
    "check_step4",
    "check_step5",
    "check_step6",
    "step_issues",
    "is_step_valid",
)
