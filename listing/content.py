"""
Content — highlights, specifications and seller notes (step 3).
"""

from __future__ import annotations

from dataclasses import replace

from kungfu import Option, Some, Nothing

from listing._types import IdGenerator
from listing.draft import Step3, Specification


def _drop_index[T](items: tuple[T, ...], index: int) -> tuple[T, ...]:
    if not 0 <= index < len(items):
        return items
    return items[:index] + items[index + 1:]


def add_highlight(step3: Step3, text: str) -> Option[Step3]:
    text = text.strip()
    if not text:
        return Nothing()
    return Some(replace(step3, highlights=(*step3.highlights, text)))


def remove_highlight(step3: Step3, index: int) -> Step3:
    return replace(step3, highlights=_drop_index(step3.highlights, index))


def add_seller_note(step3: Step3, text: str) -> Option[Step3]:
    text = text.strip()
    if not text:
        return Nothing()
    return Some(replace(step3, seller_notes=(*step3.seller_notes, text)))


def remove_seller_note(step3: Step3, index: int) -> Step3:
    return replace(step3, seller_notes=_drop_index(step3.seller_notes, index))


def add_specification(
    step3: Step3,
    *,
    key: str,
    value: str,
    limit: int,
    ids: IdGenerator,
) -> Option[tuple[Step3, Specification]]:
    """Append a key/value row. Keys may repeat; the table is capped at ``limit`` rows."""
    key, value = key.strip(), value.strip()
    if not key or not value or len(step3.specifications) >= limit:
        return Nothing()
    spec = Specification(id=ids(), key=key, value=value)
    return Some((replace(step3, specifications=(*step3.specifications, spec)), spec))


def remove_specification(step3: Step3, spec_id: str) -> Step3:
    return replace(
        step3,
        specifications=tuple(s for s in step3.specifications if s.id != spec_id),
    )


__all__ = (
    "add_highlight",
    "remove_highlight",
    "add_seller_note",
    "remove_seller_note",
    "add_specification",
    "remove_specification",
)
