"""Error formatting service.

Renders DiagnosticError values at a chosen level of detail.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .constants import DEFAULT_MAX_CONTENT_LENGTH, SIMPLE_FRAGMENT_SEPARATOR
from .errors import DiagnosticError

__all__ = [
    "ErrorFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for error formatting."""

    FULL = "full"  # Messages plus backtrace (default)
    CONCISE = "concise"  # Messages only
    SIMPLE = "simple"  # Single line, no backtrace


@dataclass(frozen=True, slots=True)
class ErrorFormatter:
    """Error formatting service.

    Attributes:
        output_format: Level of detail (full, concise, simple)
        sanitize: Truncate output to max_content_length characters
        max_content_length: Maximum output length when sanitizing

    Example:
        >>> err = DiagnosticError("tensor size mismatch", "<bt>")
        >>> err.append_message("while running op Conv2d")
        >>> ErrorFormatter(output_format=OutputFormat.SIMPLE).format(err)
        'tensor size mismatch; while running op Conv2d'
    """

    output_format: OutputFormat = OutputFormat.FULL
    sanitize: bool = False
    max_content_length: int = DEFAULT_MAX_CONTENT_LENGTH

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If output_format is not an OutputFormat value, or if
                max_content_length is not positive.
        """
        if self.output_format not in tuple(OutputFormat):
            msg = f"output_format must be one of {[f.value for f in OutputFormat]}"
            raise ValueError(msg)
        if self.max_content_length <= 0:
            msg = "max_content_length must be positive"
            raise ValueError(msg)

    def format(self, error: DiagnosticError) -> str:
        """Format a single error.

        Args:
            error: Error to format

        Returns:
            Formatted error string
        """
        match self.output_format:
            case OutputFormat.FULL:
                text = error.full_message
            case OutputFormat.CONCISE:
                text = error.message_without_backtrace
            case OutputFormat.SIMPLE:
                text = self._format_simple(error)
            case _:
                msg = f"Unknown output format: {self.output_format!r}"
                raise ValueError(msg)
        return self._maybe_sanitize(text)

    def format_all(self, errors: Iterable[DiagnosticError]) -> str:
        """Format multiple errors.

        Args:
            errors: Iterable of errors to format

        Returns:
            Formatted string with all errors separated by blank lines
        """
        return "\n\n".join(self.format(e) for e in errors)

    def _format_simple(self, error: DiagnosticError) -> str:
        """Join fragments on one line, original message first.

        Example output:
            tensor size mismatch; while running op Conv2d
        """
        fragments = (" ".join(f.split()) for f in error.message_stack)
        return SIMPLE_FRAGMENT_SEPARATOR.join(fragments)

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled."""
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
