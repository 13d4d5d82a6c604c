"""
Wizard types — collaborator protocols and submission outcomes.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

from listing._types import Payload
from listing.draft import MediaFile

# ═══════════════════════════════════════════════════════════════════════════════
# Collaborators
# ═══════════════════════════════════════════════════════════════════════════════


class ProductCreator[P](Protocol):
    """Persists a submitted product. Raising means the create failed."""

    async def create_product(self, payload: Payload) -> P: ...


class DraftSaver(Protocol):
    async def save_draft(self, payload: Payload) -> object: ...


class MediaUploader(Protocol):
    """
    Turns local media into persisted URLs.

    ``upload`` returns ``{media_id: url}`` for every file it stored;
    ``discard`` removes previously uploaded URLs during rollback.
    """

    async def upload(self, media: Sequence[MediaFile]) -> Mapping[str, str]: ...

    async def discard(self, urls: Sequence[str]) -> None: ...


type LeaveConfirmation = Callable[[str], bool]
"""Asks the user a yes/no question; True means leave."""

type Clock = Callable[[], str]
"""Returns the current time as an ISO-8601 string."""


# ═══════════════════════════════════════════════════════════════════════════════
# Outcomes
# ═══════════════════════════════════════════════════════════════════════════════


class SubmitErrorKind(Enum):
    INVALID_STEPS = auto()
    IN_PROGRESS = auto()
    UPLOAD_FAILED = auto()
    CREATE_FAILED = auto()
    SAVE_FAILED = auto()


@dataclass(frozen=True, slots=True)
class SubmitError:
    """
    Why a submission did not go through.

    For UPLOAD_FAILED / CREATE_FAILED the rollback fields report how the
    compensators went; ``rollback_complete`` is False when any of them raised.
    """

    kind: SubmitErrorKind
    message: str
    invalid_steps: tuple[int, ...] = ()
    compensators_run: int = 0
    compensators_failed: int = 0
    rollback_complete: bool = True


@dataclass(frozen=True, slots=True)
class SubmitOutcome[P]:
    product: P
    payload: Payload
    uploaded: Mapping[str, str] = field(default_factory=dict)


__all__ = (
    "ProductCreator",
    "DraftSaver",
    "MediaUploader",
    "LeaveConfirmation",
    "Clock",
    "SubmitErrorKind",
    "SubmitError",
    "SubmitOutcome",
)
