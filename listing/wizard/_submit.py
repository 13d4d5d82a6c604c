"""
Submission — upload media, then create the product, with rollback.

Two steps run in order. Each successful step records its compensator;
when a later step fails the recorded compensators run in reverse and the
error carries the rollback status.

    upload_media  ──►  create_product
        │                   │ fails
        └── discard(urls) ◄─┘
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass, replace

from combinators import lift as L
from kungfu import Result, Ok, Error, LazyCoroResult

from listing._types import Payload
from listing.draft import ProductDraft, MediaFile
from listing.media import pending_uploads, mark_uploaded
from listing.wizard._types import (
    ProductCreator,
    DraftSaver,
    MediaUploader,
    SubmitError,
    SubmitErrorKind,
    SubmitOutcome,
)

logger = logging.getLogger(__name__)

type Compensator = Callable[[], Awaitable[None]]

# ═══════════════════════════════════════════════════════════════════════════════
# Steps
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class SubmitStep[T]:
    """Named action plus the undo for its result."""

    name: str
    action: LazyCoroResult[T, SubmitError]
    compensate: Callable[[T], Awaitable[None]] | None = None


def upload_step(
    uploader: MediaUploader,
    media: Sequence[MediaFile],
) -> SubmitStep[Mapping[str, str]]:
    return SubmitStep(
        name="upload_media",
        action=L.catching_async(
            lambda: uploader.upload(media),
            on_error=lambda e: SubmitError(
                SubmitErrorKind.UPLOAD_FAILED, f"Media upload failed: {e}"
            ),
        ),
        compensate=lambda urls: uploader.discard(list(urls.values())),
    )


def create_step[P](creator: ProductCreator[P], payload: Payload) -> SubmitStep[P]:
    return SubmitStep(
        name="create_product",
        action=L.catching_async(
            lambda: creator.create_product(payload),
            on_error=lambda e: SubmitError(
                SubmitErrorKind.CREATE_FAILED, f"Product creation failed: {e}"
            ),
        ),
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Execution
# ═══════════════════════════════════════════════════════════════════════════════


async def run_step[T](
    step: SubmitStep[T],
    compensators: list[Compensator],
) -> Result[T, SubmitError]:
    """Execute single step, recording its compensator on success."""
    result = await step.action
    match result:
        case Ok(value):
            if step.compensate is not None:
                undo = step.compensate
                compensators.append(lambda: undo(value))
            logger.debug("Submit step %s succeeded", step.name)
            return Ok(value)
        case Error(e):
            logger.warning("Submit step %s failed: %s", step.name, e.message)
            return Error(e)


async def run_compensators(compensators: list[Compensator]) -> tuple[int, int]:
    """Run compensators in reverse. Returns (run, failed)."""
    comp_run = 0
    comp_failed = 0

    for comp in reversed(compensators):
        try:
            await comp()
            comp_run += 1
        except Exception:
            logger.warning("Compensator failed during submit rollback", exc_info=True)
            comp_failed += 1

    return comp_run, comp_failed


async def _rolled_back(error: SubmitError, compensators: list[Compensator]) -> SubmitError:
    comp_run, comp_failed = await run_compensators(compensators)
    return replace(
        error,
        compensators_run=comp_run,
        compensators_failed=comp_failed,
        rollback_complete=comp_failed == 0,
    )


async def submit_draft[P](
    draft: ProductDraft,
    *,
    creator: ProductCreator[P],
    uploader: MediaUploader | None,
    build_payload: Callable[[ProductDraft], Payload],
) -> Result[SubmitOutcome[P], SubmitError]:
    """
    Upload pending media (when an uploader is given) and create the product.

    ``draft`` itself is never modified; uploaded URLs only flow into the
    payload. On failure every recorded compensator has run before the
    error is returned.
    """
    compensators: list[Compensator] = []
    uploaded: dict[str, str] = {}

    pending = pending_uploads(draft.step2)
    if uploader is not None and pending:
        match await run_step(upload_step(uploader, pending), compensators):
            case Ok(urls):
                uploaded = dict(urls)
            case Error(e):
                return Error(await _rolled_back(e, compensators))
        draft = replace(draft, step2=mark_uploaded(draft.step2, uploaded))

    payload = build_payload(draft)

    match await run_step(create_step(creator, payload), compensators):
        case Ok(product):
            return Ok(SubmitOutcome(product=product, payload=payload, uploaded=uploaded))
        case Error(e):
            return Error(await _rolled_back(e, compensators))


async def save_draft_payload(
    saver: DraftSaver,
    payload: Payload,
) -> Result[Payload, SubmitError]:
    result = await L.catching_async(
        lambda: saver.save_draft(payload),
        on_error=lambda e: SubmitError(SubmitErrorKind.SAVE_FAILED, f"Draft save failed: {e}"),
    )
    match result:
        case Ok(_):
            logger.info("Draft saved")
            return Ok(payload)
        case Error(e):
            logger.warning(e.message)
            return Error(e)


__all__ = (
    "SubmitStep",
    "upload_step",
    "create_step",
    "run_step",
    "run_compensators",
    "submit_draft",
    "save_draft_payload",
)
