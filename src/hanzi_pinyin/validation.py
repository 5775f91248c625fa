"""Validation helpers shared by dictionary loading code."""

from __future__ import annotations

from typing import Sequence

MAX_PREVIEW_ERRORS = 25


def format_error_summary(label: str, errors: Sequence[str]) -> str:
    """Format collected error messages as a bounded bullet list.

    Args:
        label: Short description of the failed step, e.g. ``Dictionary load``.
        errors: Individual error messages in discovery order.

    Returns:
        Multi-line message listing up to ``MAX_PREVIEW_ERRORS`` items followed by
        a count of the remaining ones.
    """

    preview = "\n".join(f"- {item}" for item in errors[:MAX_PREVIEW_ERRORS])
    rest = len(errors) - min(MAX_PREVIEW_ERRORS, len(errors))
    more = f"\n- ... and {rest} more" if rest > 0 else ""
    return f"{label} failed with {len(errors)} errors:\n{preview}{more}"
