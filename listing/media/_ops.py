"""
Media constraints — count, type and size checks at the point of adding.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import replace

from kungfu import Result, Ok, Error

from listing._types import IdGenerator
from listing.draft import Step2, MediaFile, MediaKind
from listing.settings import WizardSettings, MB
from listing.media._types import PickedFile, MediaError, MediaErrorKind, MediaBatch


def _limits(kind: MediaKind, settings: WizardSettings) -> tuple[int, int, tuple[str, ...]]:
    if kind is MediaKind.IMAGE:
        return settings.max_images, settings.max_image_bytes, settings.image_types
    return settings.max_videos, settings.max_video_bytes, settings.video_types


def check_file(
    name: str,
    content_type: str,
    size_bytes: int,
    kind: MediaKind,
    settings: WizardSettings,
) -> MediaError | None:
    """First constraint ``name`` breaks, or None."""
    _, max_bytes, accepted = _limits(kind, settings)
    if content_type.lower() not in accepted:
        label = "image" if kind is MediaKind.IMAGE else "video"
        return MediaError(
            MediaErrorKind.UNSUPPORTED_TYPE,
            f"Unsupported {label} type {content_type!r}",
            name,
        )
    if size_bytes > max_bytes:
        return MediaError(
            MediaErrorKind.TOO_LARGE,
            f"{name} exceeds {max_bytes // MB}MB",
            name,
        )
    return None


def add_media(
    step2: Step2,
    files: Iterable[PickedFile],
    kind: MediaKind,
    settings: WizardSettings,
    ids: IdGenerator,
) -> Result[MediaBatch, MediaError]:
    """
    Add picked files to the image or video collection.

    Files beyond the remaining slots and files failing a check are
    rejected individually; the rest are appended. When nothing is accepted
    the first rejection is returned as Error and ``step2`` is unchanged.
    """
    files = tuple(files)
    if not files:
        return Error(MediaError(MediaErrorKind.NO_FILES, "No files selected"))

    current = step2.images if kind is MediaKind.IMAGE else step2.videos
    max_count, _, _ = _limits(kind, settings)
    slots = max_count - len(current)
    if slots <= 0:
        return Error(MediaError(
            MediaErrorKind.LIMIT_REACHED,
            f"Maximum {max_count} {kind.value}s allowed",
        ))

    added: list[MediaFile] = []
    rejected: list[MediaError] = []
    for picked in files:
        if len(added) >= slots:
            rejected.append(MediaError(
                MediaErrorKind.LIMIT_REACHED,
                f"Maximum {max_count} {kind.value}s allowed",
                picked.name,
            ))
            continue
        problem = check_file(picked.name, picked.content_type, picked.size_bytes, kind, settings)
        if problem is not None:
            rejected.append(problem)
            continue
        added.append(MediaFile(
            id=ids(),
            name=picked.name,
            content_type=picked.content_type.lower(),
            size_bytes=picked.size_bytes,
            kind=kind,
            preview_url=picked.preview_url,
        ))

    if not added:
        return Error(rejected[0])

    merged = (*current, *added)
    updated = replace(step2, images=merged) if kind is MediaKind.IMAGE else replace(step2, videos=merged)
    return Ok(MediaBatch(step2=updated, added=tuple(added), rejected=tuple(rejected)))


def remove_media(step2: Step2, media_id: str) -> Step2:
    return replace(
        step2,
        images=tuple(m for m in step2.images if m.id != media_id),
        videos=tuple(m for m in step2.videos if m.id != media_id),
    )


def pending_uploads(step2: Step2) -> tuple[MediaFile, ...]:
    return tuple(m for m in (*step2.images, *step2.videos) if m.uploaded_url is None)


def mark_uploaded(step2: Step2, urls: Mapping[str, str]) -> Step2:
    """Record persisted URLs reported by the upload collaborator, keyed by media id."""
    def _apply(items: tuple[MediaFile, ...]) -> tuple[MediaFile, ...]:
        return tuple(
            replace(m, uploaded_url=urls[m.id]) if m.id in urls else m
            for m in items
        )
    return replace(step2, images=_apply(step2.images), videos=_apply(step2.videos))


__all__ = (
    "check_file",
    "add_media",
    "remove_media",
    "pending_uploads",
    "mark_uploaded",
)
