"""Warning dispatch independent of the error path.

A WarningChannel holds one handler and forwards every emitted warning to
it. Warnings are fire-and-forget notifications: emitting one never raises
and never returns a value.

Subsystems that emit warnings should accept a channel as a parameter. For
convenience a process-wide channel, ``default_channel``, backs the
module-level emit_warning(), set_warning_handler() and
get_warning_handler() functions.

Thread Safety:
    Handler replacement is intended to happen once, during startup. It is
    not a hot-swap facility. Replacements are serialized by an internal
    lock, but emit_warning() reads the handler without locking, so a
    warning emitted concurrently with set_handler() may reach either the
    old or the new handler.

Handler Contract:
    A handler is any callable ``(location, message) -> None``. Handlers
    must not propagate failures. If one does, the channel reports it
    through this module's logger and carries on.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
import threading
import warnings
from collections.abc import Callable, Generator
from contextlib import contextmanager

from .constants import WARNING_PREFIX, WARNINGS_LOGGER_NAME
from .errors import DiagnosticWarning
from .location import SourceLocation

__all__ = [
    "WarningChannel",
    "WarningHandler",
    "default_channel",
    "emit_warning",
    "get_warning_handler",
    "logging_handler",
    "print_warning",
    "python_warnings_handler",
    "set_warning_handler",
]

logger = logging.getLogger(__name__)

_warnings_logger = logging.getLogger(WARNINGS_LOGGER_NAME)

type WarningHandler = Callable[[SourceLocation, str], None]


def print_warning(location: SourceLocation, message: str) -> None:
    """Default handler: print one line to standard error.

    Output format: ``Warning: <message> (<function> at <file>:<line>)``.
    Write failures (closed or broken stream) are ignored.
    """
    try:
        sys.stderr.write(f"{WARNING_PREFIX}{message} ({location})\n")
    except (OSError, ValueError):
        pass


def logging_handler(location: SourceLocation, message: str) -> None:
    """Handler that forwards warnings to the ``diagcore.warnings`` logger.

    The location is attached to the log record as ``diag_function``,
    ``diag_file`` and ``diag_line`` for formatters that want them.
    """
    _warnings_logger.warning(
        "%s (%s)",
        message,
        location,
        extra={
            "diag_function": location.function,
            "diag_file": location.file,
            "diag_line": location.line,
        },
    )


def python_warnings_handler(location: SourceLocation, message: str) -> None:
    """Handler that routes warnings through the standard ``warnings`` module.

    Issues a DiagnosticWarning attributed to the location's file and line,
    so ``warnings`` filters, ``-W`` options and pytest's warning capture
    all apply.
    """
    warnings.warn_explicit(
        message,
        DiagnosticWarning,
        filename=location.file,
        lineno=location.line,
    )


class WarningChannel:
    """Dispatches warnings to a single installed handler.

    Example:
        >>> seen = []
        >>> channel = WarningChannel(lambda loc, msg: seen.append(msg))
        >>> channel.emit_warning(SourceLocation("f", "x.py", 1), "careful")
        >>> seen
        ['careful']
    """

    __slots__ = ("_handler", "_lock")

    def __init__(self, handler: WarningHandler = print_warning) -> None:
        """Initialize channel with handler (default: print_warning)."""
        self._handler = handler
        self._lock = threading.Lock()

    @property
    def handler(self) -> WarningHandler:
        """Currently installed handler."""
        return self._handler

    def emit_warning(self, location: SourceLocation, message: str) -> None:
        """Send a warning to the current handler. Never raises."""
        handler = self._handler
        try:
            handler(location, message)
        except Exception:
            logger.exception(
                "Warning handler %r raised while handling warning from %s", handler, location
            )

    def set_handler(self, handler: WarningHandler) -> None:
        """Replace the current handler.

        Intended to be called once during initialization. See the module
        docstring for the concurrency caveat.
        """
        with self._lock:
            previous = self._handler
            self._handler = handler
        logger.debug("Warning handler replaced: %r -> %r", previous, handler)

    def reset(self) -> None:
        """Reinstall the default print_warning handler."""
        self.set_handler(print_warning)

    @contextmanager
    def override(self, handler: WarningHandler) -> Generator[WarningChannel]:
        """Install handler for the duration of a with-block.

        The previous handler is restored on exit, including when the block
        raises. Subject to the same concurrency caveat as set_handler().
        """
        with self._lock:
            previous = self._handler
            self._handler = handler
        try:
            yield self
        finally:
            with self._lock:
                self._handler = previous

    def __repr__(self) -> str:
        return f"WarningChannel(handler={self._handler!r})"


default_channel = WarningChannel()


def emit_warning(location: SourceLocation, message: str) -> None:
    """Emit a warning on the process-wide channel."""
    default_channel.emit_warning(location, message)


def set_warning_handler(handler: WarningHandler) -> None:
    """Replace the process-wide warning handler.

    Not thread-safe with respect to concurrent emit_warning() calls;
    call once during initialization.
    """
    default_channel.set_handler(handler)


def get_warning_handler() -> WarningHandler:
    """Return the process-wide warning handler."""
    return default_channel.handler
