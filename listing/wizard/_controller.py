"""
WizardController — owns one draft and the current step.

Every write replaces a step record wholesale; the records themselves are
immutable, so anything holding an old ``draft`` keeps a consistent snapshot.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import replace
from datetime import datetime, timezone

from kungfu import Result, Ok, Error, Option, Some, Nothing

from listing._types import IdGenerator, Payload, FIRST_STEP, LAST_STEP
from listing.ids import uuid_ids
from listing.settings import WizardSettings, DEFAULT_SETTINGS
from listing.catalog import ReferenceData
from listing.draft import (
    ProductDraft,
    ApprovalStatus,
    MediaKind,
    SizeVariant,
    ColorVariant,
    Specification,
    DeliveryCountry,
    merge,
)
from listing.media import PickedFile, MediaError, MediaBatch
from listing.offers import OfferType, OfferRule
from listing.pricing import PriceBreakdown
from listing.shipping import WeightBreakdown
from listing.rules import ValidationIssue
from listing import (
    content as CT,
    delivery as DL,
    media as M,
    offers as O,
    pricing as P,
    rules as R,
    shipping as SH,
    variants as V,
)
from listing.wizard._payload import ProductPayload
from listing.wizard._submit import submit_draft, save_draft_payload
from listing.wizard._types import (
    Clock,
    DraftSaver,
    LeaveConfirmation,
    MediaUploader,
    ProductCreator,
    SubmitError,
    SubmitErrorKind,
    SubmitOutcome,
)

logger = logging.getLogger(__name__)

LEAVE_PROMPT = "You have unsaved changes. Are you sure you want to leave?"


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


class WizardController:
    """
    Six-step product listing session.

    Example:
        wizard = WizardController()
        wizard.update_step1(category_id="c1", product_title="Linen shirt", ...)
        if wizard.go_to_next_step():
            ...
        match await wizard.submit(api, uploader=storage):
            case Ok(outcome): ...
            case Error(e): show(e.message)
    """

    def __init__(
        self,
        settings: WizardSettings | None = None,
        ids: IdGenerator | None = None,
        clock: Clock | None = None,
        reference: ReferenceData | None = None,
    ) -> None:
        self.settings = settings or DEFAULT_SETTINGS
        self.ids = ids or uuid_ids()
        self.clock = clock or utc_now
        self.reference = reference or ReferenceData()
        self.draft = ProductDraft.empty(self.settings)
        self.current_step = FIRST_STEP
        self._submitting = False

    # ═══════════════════════════════════════════════════════════════════════════
    # Step updates
    # ═══════════════════════════════════════════════════════════════════════════

    def update_step1(self, **changes: object) -> None:
        self.draft = replace(self.draft, step1=merge(self.draft.step1, changes))

    def update_step2(self, **changes: object) -> None:
        self.draft = replace(self.draft, step2=merge(self.draft.step2, changes))

    def update_step3(self, **changes: object) -> None:
        self.draft = replace(self.draft, step3=merge(self.draft.step3, changes))

    def update_step4(self, **changes: object) -> None:
        self.draft = replace(
            self.draft,
            step4=P.apply_changes(self.draft.step4, changes, self.settings),
        )

    def update_step5(self, **changes: object) -> None:
        self.draft = replace(self.draft, step5=merge(self.draft.step5, changes))

    def update_step6(self, **changes: object) -> None:
        self.draft = replace(self.draft, step6=merge(self.draft.step6, changes))

    def update_step(self, step: int, **changes: object) -> None:
        match step:
            case 1:
                self.update_step1(**changes)
            case 2:
                self.update_step2(**changes)
            case 3:
                self.update_step3(**changes)
            case 4:
                self.update_step4(**changes)
            case 5:
                self.update_step5(**changes)
            case 6:
                self.update_step6(**changes)
            case _:
                raise ValueError(f"Unknown wizard step: {step}")

    # ═══════════════════════════════════════════════════════════════════════════
    # Validation & navigation
    # ═══════════════════════════════════════════════════════════════════════════

    def is_step_valid(self, step: int) -> bool:
        return R.is_step_valid(step, self.draft, self.settings)

    def step_issues(self, step: int) -> tuple[ValidationIssue, ...]:
        return R.step_issues(step, self.draft, self.settings)

    def go_to_next_step(self) -> bool:
        if self.current_step >= LAST_STEP or not self.is_step_valid(self.current_step):
            return False
        self.current_step += 1
        return True

    def go_to_previous_step(self) -> bool:
        if self.current_step <= FIRST_STEP:
            return False
        self.current_step -= 1
        return True

    def set_current_step(self, step: int) -> bool:
        """
        Jump to ``step``. Backwards is always allowed; forwards only when
        every step being skipped over is valid.
        """
        if not FIRST_STEP <= step <= LAST_STEP:
            return False
        if step > self.current_step:
            blocked = [n for n in range(self.current_step, step) if not self.is_step_valid(n)]
            if blocked:
                logger.debug("Jump to step %d blocked by step %d", step, blocked[0])
                return False
        self.current_step = step
        return True

    # ═══════════════════════════════════════════════════════════════════════════
    # Variants (step 1)
    # ═══════════════════════════════════════════════════════════════════════════

    def add_size_variant(
        self,
        size: str,
        stock: int,
        quantity: int = 0,
        price: float = 0.0,
    ) -> Option[SizeVariant]:
        match V.add_size_variant(
            self.draft.step1, size=size, stock=stock, quantity=quantity, price=price, ids=self.ids
        ):
            case Some((step1, variant)):
                self.draft = replace(self.draft, step1=step1)
                return Some(variant)
            case Nothing():
                return Nothing()

    def remove_size_variant(self, variant_id: str) -> None:
        self.draft = replace(self.draft, step1=V.remove_size_variant(self.draft.step1, variant_id))

    def add_color_variant(
        self,
        color: str,
        sku: str,
        price: float = 0.0,
        stock: int = 0,
    ) -> Option[ColorVariant]:
        match V.add_color_variant(
            self.draft.step1, color=color, sku=sku, price=price, stock=stock, ids=self.ids
        ):
            case Some((step1, variant)):
                self.draft = replace(self.draft, step1=step1)
                return Some(variant)
            case Nothing():
                return Nothing()

    def remove_color_variant(self, variant_id: str) -> None:
        self.draft = replace(self.draft, step1=V.remove_color_variant(self.draft.step1, variant_id))

    # ═══════════════════════════════════════════════════════════════════════════
    # Media (step 2)
    # ═══════════════════════════════════════════════════════════════════════════

    def add_media(
        self,
        files: Iterable[PickedFile],
        kind: MediaKind = MediaKind.IMAGE,
    ) -> Result[MediaBatch, MediaError]:
        result = M.add_media(self.draft.step2, files, kind, self.settings, self.ids)
        match result:
            case Ok(batch):
                self.draft = replace(self.draft, step2=batch.step2)
                for rejected in batch.rejected:
                    logger.debug("Rejected %s: %s", rejected.file_name, rejected.message)
            case Error(e):
                logger.debug("No media added: %s", e.message)
        return result

    def remove_media(self, media_id: str) -> None:
        self.draft = replace(self.draft, step2=M.remove_media(self.draft.step2, media_id))

    def mark_uploaded(self, urls: Mapping[str, str]) -> None:
        self.draft = replace(self.draft, step2=M.mark_uploaded(self.draft.step2, urls))

    # ═══════════════════════════════════════════════════════════════════════════
    # Content (step 3)
    # ═══════════════════════════════════════════════════════════════════════════

    def add_highlight(self, text: str) -> bool:
        match CT.add_highlight(self.draft.step3, text):
            case Some(step3):
                self.draft = replace(self.draft, step3=step3)
                return True
            case Nothing():
                return False

    def remove_highlight(self, index: int) -> None:
        self.draft = replace(self.draft, step3=CT.remove_highlight(self.draft.step3, index))

    def add_seller_note(self, text: str) -> bool:
        match CT.add_seller_note(self.draft.step3, text):
            case Some(step3):
                self.draft = replace(self.draft, step3=step3)
                return True
            case Nothing():
                return False

    def remove_seller_note(self, index: int) -> None:
        self.draft = replace(self.draft, step3=CT.remove_seller_note(self.draft.step3, index))

    def add_specification(self, key: str, value: str) -> Option[Specification]:
        match CT.add_specification(
            self.draft.step3,
            key=key,
            value=value,
            limit=self.settings.max_specifications,
            ids=self.ids,
        ):
            case Some((step3, spec)):
                self.draft = replace(self.draft, step3=step3)
                return Some(spec)
            case Nothing():
                return Nothing()

    def remove_specification(self, spec_id: str) -> None:
        self.draft = replace(self.draft, step3=CT.remove_specification(self.draft.step3, spec_id))

    # ═══════════════════════════════════════════════════════════════════════════
    # Pricing & geography (step 4)
    # ═══════════════════════════════════════════════════════════════════════════

    def select_country(self, country_code: str) -> None:
        self.update_step4(country_code=country_code)

    def set_mrp(self, mrp: float) -> None:
        self.update_step4(mrp=mrp)

    def set_selling_price(self, price: float) -> None:
        self.update_step4(selling_price=price)

    def add_delivery_country(
        self,
        country_code: str,
        delivery_charge: float = 0.0,
        min_order_qty: int = 1,
    ) -> Option[DeliveryCountry]:
        match DL.add_delivery_country(
            self.draft.step4,
            country_code=country_code,
            delivery_charge=delivery_charge,
            min_order_qty=min_order_qty,
            countries=self.reference.loaded_countries(),
            ids=self.ids,
        ):
            case Some((step4, row)):
                self.draft = replace(self.draft, step4=step4)
                return Some(row)
            case Nothing():
                return Nothing()

    def remove_delivery_country(self, row_id: str) -> None:
        self.draft = replace(
            self.draft,
            step4=DL.remove_delivery_country(self.draft.step4, row_id),
        )

    @property
    def pricing(self) -> PriceBreakdown:
        return P.breakdown(self.draft.step4)

    # ═══════════════════════════════════════════════════════════════════════════
    # Shipping (step 5)
    # ═══════════════════════════════════════════════════════════════════════════

    @property
    def weights(self) -> WeightBreakdown:
        return SH.weights(self.draft.step5, self.settings.volumetric_divisor)

    # ═══════════════════════════════════════════════════════════════════════════
    # Offers (step 6)
    # ═══════════════════════════════════════════════════════════════════════════

    def add_offer(
        self,
        offer_type: OfferType | str,
        fields: Mapping[str, object] | None = None,
    ) -> Option[OfferRule]:
        """Add a rule; missing fields take the new-offer form defaults."""
        match O.make_offer(offer_type, fields or {}, self.ids):
            case Some(rule):
                step6 = replace(self.draft.step6, offer_rules=O.add_offer(self.draft.step6.offer_rules, rule))
                self.draft = replace(self.draft, step6=step6)
                return Some(rule)
            case Nothing():
                return Nothing()

    def toggle_offer_active(self, offer_id: str) -> None:
        rules = O.toggle_offer_active(self.draft.step6.offer_rules, offer_id)
        self.draft = replace(self.draft, step6=replace(self.draft.step6, offer_rules=rules))

    def remove_offer(self, offer_id: str) -> None:
        rules = O.remove_offer(self.draft.step6.offer_rules, offer_id)
        self.draft = replace(self.draft, step6=replace(self.draft.step6, offer_rules=rules))

    def offer_descriptions(self) -> list[str]:
        return [O.describe(rule) for rule in self.draft.step6.offer_rules]

    # ═══════════════════════════════════════════════════════════════════════════
    # Lifecycle
    # ═══════════════════════════════════════════════════════════════════════════

    def get_submit_data(self, approval_status: ApprovalStatus = ApprovalStatus.PENDING) -> Payload:
        return ProductPayload.from_draft(
            self.draft,
            approval_status=approval_status,
            created_at=self.clock(),
        ).to_payload()

    def reset_form(self) -> None:
        """Start a new session: empty draft, step 1, reference data refetched on next read."""
        self.draft = ProductDraft.empty(self.settings)
        self.current_step = FIRST_STEP
        self.reference.invalidate()

    def has_unsaved_changes(self) -> bool:
        return self.draft != ProductDraft.empty(self.settings)

    def request_leave(self, confirm: LeaveConfirmation) -> bool:
        """
        True when the session may be left. With unsaved changes the user is
        asked first; a confirmed leave discards the draft.
        """
        if not self.has_unsaved_changes():
            return True
        if not confirm(LEAVE_PROMPT):
            return False
        logger.info("Leaving wizard, discarding unsaved draft")
        self.reset_form()
        return True

    # ═══════════════════════════════════════════════════════════════════════════
    # Submission
    # ═══════════════════════════════════════════════════════════════════════════

    def invalid_steps(self) -> tuple[int, ...]:
        """Required steps (1-5) that currently fail validation."""
        return tuple(n for n in range(FIRST_STEP, LAST_STEP) if not self.is_step_valid(n))

    async def submit[T](
        self,
        creator: ProductCreator[T],
        uploader: MediaUploader | None = None,
    ) -> Result[SubmitOutcome[T], SubmitError]:
        """
        Submit the draft for approval.

        On success the wizard is reset. On failure the draft is left exactly
        as it was and any uploaded media has been discarded.
        """
        invalid = self.invalid_steps()
        if invalid:
            return Error(SubmitError(
                SubmitErrorKind.INVALID_STEPS,
                "Please complete steps " + ", ".join(map(str, invalid)),
                invalid_steps=invalid,
            ))
        if self._submitting:
            return Error(SubmitError(SubmitErrorKind.IN_PROGRESS, "A submission is already running"))

        self._submitting = True
        try:
            result = await submit_draft(
                self.draft,
                creator=creator,
                uploader=uploader,
                build_payload=lambda d: ProductPayload.from_draft(
                    d,
                    approval_status=ApprovalStatus.PENDING,
                    created_at=self.clock(),
                ).to_payload(),
            )
        finally:
            self._submitting = False

        match result:
            case Ok(outcome):
                logger.info("Product submitted for approval")
                self.reset_form()
                return Ok(outcome)
            case Error(e):
                logger.warning(
                    "Submission failed (%s), rollback complete: %s",
                    e.kind.name,
                    e.rollback_complete,
                )
                return Error(e)

    async def save_draft(self, saver: DraftSaver) -> Result[Payload, SubmitError]:
        """Save without validation. The session keeps its state either way."""
        return await save_draft_payload(saver, self.get_submit_data(ApprovalStatus.DRAFT))


__all__ = ("WizardController", "LEAVE_PROMPT", "utc_now")
