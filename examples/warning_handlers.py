"""Routing diagcore warnings.

The process-wide channel prints to stderr until the application installs
a different handler, once, at startup. Libraries that want isolation can
own a WarningChannel and pass it to warn().
"""

import logging
import warnings

from diagcore import (
    DiagnosticWarning,
    WarningChannel,
    logging_handler,
    python_warnings_handler,
    set_warning_handler,
    warn,
)

# Example 1: Send warnings to logging (configure once at startup)
logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
set_warning_handler(logging_handler)
warn("cache disabled: ", "no writable directory")

# Example 2: A private channel routed through the warnings module
channel = WarningChannel(python_warnings_handler)
with warnings.catch_warnings(record=True) as caught:
    warnings.simplefilter("always", DiagnosticWarning)
    warn("deprecated option 'fast_math'", channel=channel)
print(f"captured {len(caught)} DiagnosticWarning(s): {caught[0].message}")

# Example 3: Temporarily collect warnings
collected: list[str] = []
with channel.override(lambda loc, msg: collected.append(f"{msg} @ {loc}")):
    warn("inside override", channel=channel)
print(collected)
