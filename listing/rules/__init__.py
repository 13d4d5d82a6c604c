"""
Rules — one validator per wizard step.

    from listing import rules as R

    R.is_step_valid(4, draft)            # gate for "Next"
    R.step_issues(4, draft)              # what to show next to the fields
"""

from __future__ import annotations

from listing.rules._checks import (
    ValidationIssue,
    check_step1,
    check_step2,
    check_step3,
    check_step4,
    check_step5,
    check_step6,
    step_issues,
    is_step_valid,
)

__all__ = (
    "ValidationIssue",
    "check_step1",
    "check_step2",
    "check_step3",
    "check_step4",
    "check_step5",
    "check_step6",
    "step_issues",
    "is_step_valid",
)
