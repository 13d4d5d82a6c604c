"""
Media types — picked files, batch outcome and rejection reasons.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from listing.draft import Step2, MediaFile


@dataclass(frozen=True, slots=True)
class PickedFile:
    """What the file picker hands over. The body stays with the UI."""

    name: str
    content_type: str
    size_bytes: int
    preview_url: str


class MediaErrorKind(Enum):
    NO_FILES = auto()
    LIMIT_REACHED = auto()
    UNSUPPORTED_TYPE = auto()
    TOO_LARGE = auto()


@dataclass(frozen=True, slots=True)
class MediaError:
    kind: MediaErrorKind
    message: str
    file_name: str | None = None


@dataclass(frozen=True, slots=True)
class MediaBatch:
    """Result of one add: the new step record, what got in, what did not."""

    step2: Step2
    added: tuple[MediaFile, ...]
    rejected: tuple[MediaError, ...] = ()


__all__ = ("PickedFile", "MediaErrorKind", "MediaError", "MediaBatch")
