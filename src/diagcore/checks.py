"""Call-site helpers for raising errors and emitting warnings.

These helpers record the location of whoever called them, so library code
can write::

    check(weight is not None, "null weight for ", name)
    warn("falling back to slow path for ", op)
    raise error("unsupported dtype ", dtype)

error() only builds the DiagnosticError; propagating it is up to the
caller. check(), enforce() and internal_assert() raise when their condition
is falsy.

Python 3.13+.
"""

from __future__ import annotations

from .backtrace import capture_backtrace
from .constants import ASSERT_FAILED_MARKER, BUG_REPORT_SUFFIX
from .errors import DiagnosticError
from .location import SourceLocation
from .warning_channel import WarningChannel, default_channel

__all__ = [
    "check",
    "enforce",
    "error",
    "format_to_string",
    "internal_assert",
    "warn",
]


def format_to_string(*args: object) -> str:
    """Concatenate the string form of each argument.

    Example:
        >>> format_to_string("expected ", 3, " dims, got ", 4)
        'expected 3 dims, got 4'
    """
    if len(args) == 1 and isinstance(args[0], str):
        return args[0]
    return "".join(str(arg) for arg in args)


def error(*args: object, stacklevel: int = 1) -> DiagnosticError:
    """Build a DiagnosticError located at the caller.

    Args:
        *args: Message parts, joined by format_to_string()
        stacklevel: 1 (default) records the direct caller, 2 its caller, ...

    Returns:
        Unraised DiagnosticError
    """
    location = SourceLocation.from_caller(stacklevel + 1)
    return DiagnosticError.from_location(location, format_to_string(*args))


def warn(
    *args: object,
    channel: WarningChannel | None = None,
    stacklevel: int = 1,
) -> None:
    """Emit a warning located at the caller.

    Args:
        *args: Message parts, joined by format_to_string()
        channel: Channel to emit on (default: the process-wide channel)
        stacklevel: 1 (default) records the direct caller, 2 its caller, ...
    """
    location = SourceLocation.from_caller(stacklevel + 1)
    (channel or default_channel).emit_warning(location, format_to_string(*args))


def check(condition: object, *args: object) -> None:
    """Raise a DiagnosticError located at the caller if condition is falsy.

    Raises:
        DiagnosticError: If condition is falsy.
    """
    if not condition:
        raise error(*args, stacklevel=2)


def enforce(
    condition: object,
    condition_text: str,
    *args: object,
    caller: object | None = None,
) -> None:
    """Raise a CHECK FAILED error with a backtrace if condition is falsy.

    Args:
        condition: Value to test
        condition_text: Source text of the condition, for the message
        *args: Message parts, joined by format_to_string()
        caller: Opaque correlation token stored on the error

    Raises:
        DiagnosticError: If condition is falsy.
    """
    if not condition:
        location = SourceLocation.from_caller(2)
        raise DiagnosticError.from_check(
            location.file,
            location.line,
            condition_text,
            format_to_string(*args),
            capture_backtrace(skip=1),
            caller,
        )


def internal_assert(condition: object, condition_text: str, *args: object) -> None:
    """Raise an ASSERT FAILED error if condition is falsy.

    For invariants that only a bug in this library can break. The message
    asks the reader to report a bug and ends with any extra arguments.

    Raises:
        DiagnosticError: If condition is falsy.
    """
    if not condition:
        location = SourceLocation.from_caller(2)
        message = (
            f"{condition_text} {ASSERT_FAILED_MARKER} at "
            f"{location.file}:{location.line}, {BUG_REPORT_SUFFIX}"
        )
        if args:
            message += " " + format_to_string(*args)
        raise DiagnosticError.from_location(location, message)
