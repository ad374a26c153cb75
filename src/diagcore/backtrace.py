"""Backtrace rendering for DiagnosticError.

DiagnosticError treats its backtrace as opaque text. This module produces
that text from the live Python call stack, using the same layout as
``traceback.format_stack`` under a short header.

Python 3.13+.
"""

from __future__ import annotations

import sys
import traceback

from .constants import BACKTRACE_HEADER

__all__ = ["capture_backtrace"]


def capture_backtrace(skip: int = 0) -> str:
    """Render the caller's call stack as backtrace text.

    The result starts with a newline so it can be appended directly after
    the last message fragment, and has no trailing newline.

    Args:
        skip: Additional innermost frames to omit. 0 (default) starts at the
            function that called capture_backtrace().

    Returns:
        Backtrace text, most recent call last

    Raises:
        ValueError: If skip is negative.
    """
    if skip < 0:
        msg = f"skip must be >= 0, got {skip}"
        raise ValueError(msg)
    frame = sys._getframe(1 + skip)  # noqa: SLF001
    frames = traceback.format_stack(frame)
    return BACKTRACE_HEADER + "".join(frames).rstrip("\n")
