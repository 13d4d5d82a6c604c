"""
Core types for listing.

Re-exports from kungfu + wizard-wide aliases.
"""

from __future__ import annotations

from collections.abc import Callable

# Re-export from kungfu
from kungfu import Result, Ok, Error, Option, Some, Nothing, LazyCoroResult

# ═══════════════════════════════════════════════════════════════════════════════
# Wizard Aliases
# ═══════════════════════════════════════════════════════════════════════════════

type IdGenerator = Callable[[], str]
"""Produces a fresh synthetic id for variants, offers, media and rows."""

type Payload = dict[str, object]
"""Flat mapping handed to the create-product / draft-save collaborators."""

FIRST_STEP = 1
LAST_STEP = 6

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "Option",
    "Some",
    "Nothing",
    "LazyCoroResult",
    # Aliases
    "IdGenerator",
    "Payload",
    "FIRST_STEP",
    "LAST_STEP",
)
