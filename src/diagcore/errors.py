"""Diagnostic error values with an accumulating message stack.

DiagnosticError carries failure information outward through nested call
layers. Each layer may add context with append_message() instead of
wrapping the error in a new exception, so the original detail (stack entry
0) is never lost.

Two display strings are derived from the message stack and kept cached:

    message_without_backtrace = MESSAGE_DELIMITER.join(message_stack)
    full_message              = message_without_backtrace + backtrace

Both are recomputed from scratch whenever the stack changes, so a consumer
asking for the concise message never sees backtrace text, no matter when
the backtrace was attached or how many messages were appended afterwards.

Constructing a DiagnosticError never raises. It subclasses Exception so the
standard raise/except machinery can carry it, but it is equally usable as
a plain value (returned in a result tuple, stored, compared).

Thread Safety:
    Not thread-safe. Construct and mutate an error from a single logical
    execution context only. Independent errors share no mutable state.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Sequence

from .constants import CHECK_FAILED_MARKER, MESSAGE_DELIMITER
from .location import SourceLocation, strip_basename

__all__ = ["DiagnosticError", "DiagnosticWarning"]


class DiagnosticError(Exception):
    """Error value with a message stack, optional backtrace, and caller token.

    Attributes:
        message_stack: Fragments in append order (index 0 is the original)
        backtrace: Pre-rendered backtrace text, fixed at construction
        caller: Opaque correlation token, returned unchanged
        full_message: Messages followed by the backtrace (cached)
        message_without_backtrace: Messages only (cached)

    Example:
        >>> err = DiagnosticError("tensor size mismatch", "<bt>")
        >>> err.append_message("while running op Conv2d")
        >>> err.message_without_backtrace
        'tensor size mismatch\\nwhile running op Conv2d'
        >>> err.full_message
        'tensor size mismatch\\nwhile running op Conv2d<bt>'
    """

    def __init__(
        self,
        message: str,
        backtrace: str | None = None,
        caller: object | None = None,
    ) -> None:
        """Initialize DiagnosticError.

        Args:
            message: Original error message (any text, empty included)
            backtrace: Pre-rendered backtrace, appended verbatim to
                full_message (None for no backtrace)
            caller: Opaque correlation token, typically a CallerToken
        """
        super().__init__(message)
        self._message_stack: list[str] = [message]
        self._backtrace = backtrace
        self._caller = caller
        self._message_without_backtrace = ""
        self._full_message = ""
        self._refresh()

    @classmethod
    def from_location(cls, location: SourceLocation, message: str) -> DiagnosticError:
        """Create an error whose message records where it was raised.

        The location is folded into the message text as
        ``<message> (<function> at <file>:<line>)``; it is not retained as a
        separate field. No backtrace is attached.
        """
        return cls(f"{message} ({location})")

    @classmethod
    def from_check(
        cls,
        file: str,
        line: int,
        condition_text: str,
        message: str,
        backtrace: str | None = None,
        caller: object | None = None,
    ) -> DiagnosticError:
        """Create an error for a failed assertion-style check.

        The sole stack entry reads
        ``<condition_text> CHECK FAILED at <basename>:<line>: <message>``.

        Args:
            file: Path of the file containing the check
            line: Line number of the check
            condition_text: Source text of the condition that failed
            message: Explanation supplied by the check site
            backtrace: Pre-rendered backtrace (optional)
            caller: Opaque correlation token (optional)
        """
        text = (
            f"{condition_text} {CHECK_FAILED_MARKER} at "
            f"{strip_basename(file)}:{line}: {message}"
        )
        return cls(text, backtrace, caller)

    def append_message(self, message: str) -> None:
        """Add outer-layer context to the end of the message stack.

        Callable any number of times. The stack always grows by one entry,
        even for empty text, and both derived strings are refreshed before
        this method returns.
        """
        self._message_stack.append(message)
        self._refresh()

    def _refresh(self) -> None:
        self._message_without_backtrace = MESSAGE_DELIMITER.join(self._message_stack)
        if self._backtrace is None:
            self._full_message = self._message_without_backtrace
        else:
            self._full_message = self._message_without_backtrace + self._backtrace

    @property
    def message_stack(self) -> Sequence[str]:
        """Snapshot of the message fragments, original first."""
        return tuple(self._message_stack)

    @property
    def backtrace(self) -> str | None:
        """Backtrace supplied at construction, or None."""
        return self._backtrace

    @property
    def caller(self) -> object | None:
        """Correlation token supplied at construction, or None."""
        return self._caller

    @property
    def full_message(self) -> str:
        """All messages followed by the backtrace, if any."""
        return self._full_message

    @property
    def message_without_backtrace(self) -> str:
        """All messages joined by the delimiter, never including the backtrace."""
        return self._message_without_backtrace

    def __copy__(self) -> DiagnosticError:
        # Each error owns its stack list.
        clone = type(self).__new__(type(self), *self.args)
        clone.__dict__.update(self.__dict__)
        clone._message_stack = list(self._message_stack)
        return clone

    def __str__(self) -> str:
        return self._full_message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message_stack={self.message_stack!r}, "
            f"backtrace={'present' if self._backtrace is not None else None}, "
            f"caller={self._caller!r})"
        )


class DiagnosticWarning(UserWarning):
    """Warning category used when diagnostics are routed into ``warnings``."""
