"""Helpers for safe debug logging.

Encoded polylines can be very long. This module shortens them before they
are written to DEBUG logs.
"""

from __future__ import annotations


def abbreviate_for_log(value: str, *, max_string: int = 64) -> str:
    """Return *value* cut to *max_string* characters, suitable for debug logs."""
    if len(value) > max_string:
        return f"{value[:max_string]}…<truncated {len(value) - max_string} chars>"
    return value
