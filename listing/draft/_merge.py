"""
Shallow merge of partial updates into a step record.
"""

from __future__ import annotations

from dataclasses import fields, replace
from collections.abc import Mapping

from listing.draft._types import StepRecord


def merge[R: StepRecord](record: R, changes: Mapping[str, object]) -> R:
    """
    Return ``record`` with ``changes`` applied.

    No validation happens here; lists are frozen into tuples so the
    record stays hashable and detached from the caller's list.
    Unknown field names raise TypeError.
    """
    if not changes:
        return record
    known = {f.name for f in fields(record)}
    unknown = sorted(set(changes) - known)
    if unknown:
        raise TypeError(
            f"{type(record).__name__} has no field(s): {', '.join(unknown)}"
        )
    frozen = {
        key: tuple(value) if isinstance(value, list) else value
        for key, value in changes.items()
    }
    return replace(record, **frozen)


__all__ = ("merge",)
