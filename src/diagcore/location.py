"""Source location tracking for diagnostics.

SourceLocation identifies where a diagnostic originated: the enclosing
function, the file, and the line. It is a debug-only data carrier, so no
validation is performed on its fields.

Thread Safety:
    SourceLocation is frozen (immutable) and safe to share across threads.

Python 3.13+.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass

__all__ = ["SourceLocation", "strip_basename"]


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Location in source code where a diagnostic was raised.

    Attributes:
        function: Name of the enclosing function
        file: File name or path
        line: Line number (accepted verbatim, 0 included)

    Example:
        >>> loc = SourceLocation("forward", "net.cc", 42)
        >>> str(loc)
        'forward at net.cc:42'
    """

    function: str
    file: str
    line: int

    def __str__(self) -> str:
        """Render as ``<function> at <file>:<line>``."""
        return f"{self.function} at {self.file}:{self.line}"

    @classmethod
    def from_caller(cls, stacklevel: int = 1) -> SourceLocation:
        """Build a location from a frame on the current call stack.

        Args:
            stacklevel: Which frame to describe. 1 (default) is the function
                that called from_caller(), 2 is its caller, and so on.

        Returns:
            SourceLocation for the selected frame

        Raises:
            ValueError: If stacklevel is less than 1 or deeper than the stack.
        """
        if stacklevel < 1:
            msg = f"stacklevel must be >= 1, got {stacklevel}"
            raise ValueError(msg)
        frame = sys._getframe(stacklevel)  # noqa: SLF001 - same as warnings.warn
        code = frame.f_code
        return cls(code.co_name, code.co_filename, frame.f_lineno or 0)


def strip_basename(full_path: str) -> str:
    """Return the final component of a path.

    Both ``/`` and ``\\`` are treated as separators so paths recorded on any
    platform shorten the same way.

    Example:
        >>> strip_basename("/src/ops/conv.py")
        'conv.py'
        >>> strip_basename("C:\\\\src\\\\net.cc")
        'net.cc'
    """
    pos = max(full_path.rfind("/"), full_path.rfind("\\"))
    return full_path[pos + 1 :]
