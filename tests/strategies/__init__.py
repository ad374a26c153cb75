"""Hypothesis strategies for diagcore property-based testing.

Usage:
    from tests.strategies import diagnostic_errors, message_fragments
    from tests.strategies.diagnostics import source_locations
"""

from .diagnostics import backtraces, diagnostic_errors, message_fragments, source_locations

__all__ = [
    "backtraces",
    "diagnostic_errors",
    "message_fragments",
    "source_locations",
]
