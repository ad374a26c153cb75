"""Quickstart example for diagcore.

Shows an error accumulating context as it propagates, the two message
views, and the warning channel.
"""

from diagcore import (
    CallerToken,
    DiagnosticError,
    ErrorFormatter,
    OutputFormat,
    capture_backtrace,
    check,
    enforce,
    warn,
)


class Conv2d:
    def __init__(self, weight: list[float] | None) -> None:
        self.weight = weight

    def forward(self, ndim: int) -> None:
        check(self.weight is not None, "null weight")
        enforce(
            ndim == 4, "ndim == 4", "expected 4-D input, got ", ndim, "-D",
            caller=CallerToken.of(self),
        )


def run_model(layer: Conv2d, ndim: int) -> None:
    try:
        layer.forward(ndim)
    except DiagnosticError as exc:
        exc.append_message(f"while running op {type(layer).__name__}")
        raise


# Example 1: Context accumulates on the same error
print("=" * 50)
print("Example 1: Message Stack")
print("=" * 50)

conv = Conv2d([0.5])
try:
    run_model(conv, 3)
except DiagnosticError as err:
    print(err.message_without_backtrace)
    print("stack depth:", len(err.message_stack))
    print("raised by conv:", err.caller.matches(conv))

# Example 2: Full vs concise
print("\n" + "=" * 50)
print("Example 2: Full vs Concise")
print("=" * 50)

err = DiagnosticError("tensor size mismatch", capture_backtrace())
err.append_message("while running op Conv2d")
print(ErrorFormatter(output_format=OutputFormat.SIMPLE).format(err))
print(ErrorFormatter(sanitize=True, max_content_length=60).format(err))

# Example 3: Warnings go to stderr by default
print("\n" + "=" * 50)
print("Example 3: Warnings")
print("=" * 50)

warn("falling back to slow path for dtype ", "float8")
