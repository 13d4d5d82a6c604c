"""
Wizard — the stateful six-step controller and its submission flow.

    from listing.wizard import WizardController

    wizard = WizardController()
    wizard.update_step4(country_code="IN", mrp=1000, selling_price=750)
    wizard.pricing.seller_earnings      # 555.0

    match await wizard.submit(api, uploader=storage):
        case Ok(outcome):
            print(outcome.product)
        case Error(e) if e.kind is SubmitErrorKind.INVALID_STEPS:
            print("Fix steps", e.invalid_steps)
"""

from __future__ import annotations

from listing.wizard._types import (
    ProductCreator,
    DraftSaver,
    MediaUploader,
    LeaveConfirmation,
    Clock,
    SubmitErrorKind,
    SubmitError,
    SubmitOutcome,
)
from listing.wizard._payload import ProductPayload
from listing.wizard._submit import SubmitStep, run_compensators, submit_draft
from listing.wizard._controller import WizardController, LEAVE_PROMPT, utc_now

__all__ = (
    "ProductCreator",
    "DraftSaver",
    "MediaUploader",
    "LeaveConfirmation",
    "Clock",
    "SubmitErrorKind",
    "SubmitError",
    "SubmitOutcome",
    "ProductPayload",
    "SubmitStep",
    "run_compensators",
    "submit_draft",
    "WizardController",
    "LEAVE_PROMPT",
    "utc_now",
)
