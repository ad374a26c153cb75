"""diagcore - structured errors and warnings for library code.

Failures are rich, mutable error values rather than bare strings. Each
error keeps an ordered stack of message fragments that outer call layers
extend as the error propagates, and exposes both a full message (with
backtrace) and a concise message (without). Warnings travel on a separate,
configurable channel and never interrupt control flow.

Public API:
    DiagnosticError - Error value with message stack and cached renderings
    SourceLocation - Function, file and line of a diagnostic
    CallerToken - Opaque identifier of the component that raised an error
    WarningChannel - Dispatches warnings to an installed handler
    emit_warning / set_warning_handler - Process-wide warning channel
    error / warn / check / enforce / internal_assert - Call-site helpers
    ErrorFormatter - Render errors at a chosen level of detail

Submodules:
    diagcore.errors - DiagnosticError, DiagnosticWarning
    diagcore.location - SourceLocation, strip_basename
    diagcore.warning_channel - WarningChannel and built-in handlers
    diagcore.checks - Call-site helpers
    diagcore.backtrace - Backtrace capture
    diagcore.formatter - ErrorFormatter, OutputFormat
    diagcore.constants - Delimiters and markers
"""

from .backtrace import capture_backtrace
from .caller import CallerToken
from .checks import check, enforce, error, format_to_string, internal_assert, warn
from .errors import DiagnosticError, DiagnosticWarning
from .formatter import ErrorFormatter, OutputFormat
from .location import SourceLocation, strip_basename
from .warning_channel import (
    WarningChannel,
    default_channel,
    emit_warning,
    get_warning_handler,
    logging_handler,
    print_warning,
    python_warnings_handler,
    set_warning_handler,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("diagcore")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CallerToken",
    "DiagnosticError",
    "DiagnosticWarning",
    "ErrorFormatter",
    "OutputFormat",
    "SourceLocation",
    "WarningChannel",
    "__version__",
    "capture_backtrace",
    "check",
    "default_channel",
    "emit_warning",
    "enforce",
    "error",
    "format_to_string",
    "get_warning_handler",
    "internal_assert",
    "logging_handler",
    "print_warning",
    "python_warnings_handler",
    "set_warning_handler",
    "strip_basename",
    "warn",
]
