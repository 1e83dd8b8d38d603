"""Millisecond wall-clock and monotonic interval timing."""

import time as _time


class StopWatch:
    """Measures elapsed milliseconds from a monotonic start point."""

    def __init__(self) -> None:
        self._start_ms = 0

    def time(self) -> int:
        """Wall-clock time in milliseconds since the epoch."""
        return _time.time_ns() // 1_000_000

    def start(self) -> int:
        """Record and return the current monotonic time in milliseconds."""
        self._start_ms = _time.monotonic_ns() // 1_000_000
        return self._start_ms

    def elapsed(self) -> int:
        """Milliseconds since the last start."""
        return _time.monotonic_ns() // 1_000_000 - self._start_ms