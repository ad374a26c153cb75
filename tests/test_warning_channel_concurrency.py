"""Thread safety tests for warning dispatch and error values.

Validates that handler replacement under concurrent emission never loses
or corrupts a warning, and that errors built in separate threads stay
independent.
"""

import threading
from concurrent.futures import ThreadPoolExecutor, as_completed

from diagcore.errors import DiagnosticError
from diagcore.location import SourceLocation
from diagcore.warning_channel import WarningChannel

LOC = SourceLocation("worker", "pool.py", 7)


class TestChannelConcurrency:
    """Test WarningChannel under concurrent use."""

    def test_concurrent_emit(self) -> None:
        """Concurrent emits all reach the handler."""
        received: list[str] = []
        lock = threading.Lock()

        def handler(location: SourceLocation, message: str) -> None:
            with lock:
                received.append(message)

        channel = WarningChannel(handler)

        with ThreadPoolExecutor(max_workers=8) as executor:
            futures = [
                executor.submit(channel.emit_warning, LOC, f"msg {i}") for i in range(200)
            ]
            for future in as_completed(futures):
                future.result()

        assert sorted(received) == sorted(f"msg {i}" for i in range(200))

    def test_replace_while_emitting(self) -> None:
        """Every warning reaches exactly one of the installed handlers."""
        counts = {"old": 0, "new": 0}
        lock = threading.Lock()

        def make_handler(name: str):  # noqa: ANN202
            def handler(location: SourceLocation, message: str) -> None:
                with lock:
                    counts[name] += 1

            return handler

        channel = WarningChannel(make_handler("old"))
        new_handler = make_handler("new")
        start = threading.Event()

        def emit_many() -> None:
            start.wait()
            for _ in range(100):
                channel.emit_warning(LOC, "tick")

        threads = [threading.Thread(target=emit_many) for _ in range(4)]
        for thread in threads:
            thread.start()
        start.set()
        channel.set_handler(new_handler)
        for thread in threads:
            thread.join()

        assert counts["old"] + counts["new"] == 400
        assert channel.handler is new_handler


class TestErrorIsolationAcrossThreads:
    """Errors built in different threads share nothing."""

    def test_independent_errors(self) -> None:
        """Each thread's appends land only on its own error."""

        def build(i: int) -> DiagnosticError:
            err = DiagnosticError(f"root {i}", "<bt>")
            for depth in range(10):
                err.append_message(f"ctx {i}.{depth}")
            return err

        with ThreadPoolExecutor(max_workers=8) as executor:
            errors = list(executor.map(build, range(32)))

        for i, err in enumerate(errors):
            assert err.message_stack[0] == f"root {i}"
            assert len(err.message_stack) == 11
            assert all(entry.startswith(f"ctx {i}.") for entry in err.message_stack[1:])
            assert err.full_message.count("<bt>") == 1
