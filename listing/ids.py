"""
Ids — injectable generators for synthetic row ids.

    from listing import ids

    controller = WizardController(ids=ids.sequential_ids("offer"))
"""

from __future__ import annotations

import itertools
import uuid

from listing._types import IdGenerator


def uuid_ids() -> IdGenerator:
    """Random uuid4 ids. Default for live sessions."""
    def _next() -> str:
        return str(uuid.uuid4())
    return _next


def sequential_ids(prefix: str = "id") -> IdGenerator:
    """
    Deterministic ids: ``prefix-1``, ``prefix-2``, ...

    Each call returns an independent counter.
    """
    counter = itertools.count(1)

    def _next() -> str:
        return f"{prefix}-{next(counter)}"
    return _next


__all__ = ("uuid_ids", "sequential_ids")
