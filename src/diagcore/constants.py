"""Shared constants for diagcore.

Fixed text fragments used when rendering diagnostics. Kept in one place so
errors, warnings, and call-site helpers agree on the exact layout.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Message stack rendering
    "MESSAGE_DELIMITER",
    # Construction forms
    "CHECK_FAILED_MARKER",
    "ASSERT_FAILED_MARKER",
    "BUG_REPORT_SUFFIX",
    # Warnings
    "WARNING_PREFIX",
    "WARNINGS_LOGGER_NAME",
    # Backtraces
    "BACKTRACE_HEADER",
    # Formatting
    "SIMPLE_FRAGMENT_SEPARATOR",
    "DEFAULT_MAX_CONTENT_LENGTH",
]

# ============================================================================
# MESSAGE STACK RENDERING
# ============================================================================

# Joins message stack entries. The backtrace is appended after the joined
# stack with no separator of its own.
MESSAGE_DELIMITER: str = "\n"

# ============================================================================
# CONSTRUCTION FORMS
# ============================================================================

CHECK_FAILED_MARKER: str = "CHECK FAILED"
ASSERT_FAILED_MARKER: str = "ASSERT FAILED"
BUG_REPORT_SUFFIX: str = "please report a bug."

# ============================================================================
# WARNINGS
# ============================================================================

WARNING_PREFIX: str = "Warning: "

# Logger used by logging_handler for forwarded warnings.
WARNINGS_LOGGER_NAME: str = "diagcore.warnings"

# ============================================================================
# BACKTRACES
# ============================================================================

# Leading newline separates the trace from the last message fragment.
BACKTRACE_HEADER: str = "\nBacktrace (most recent call last):\n"

# ============================================================================
# FORMATTING
# ============================================================================

SIMPLE_FRAGMENT_SEPARATOR: str = "; "
DEFAULT_MAX_CONTENT_LENGTH: int = 100
