"""Handler timing reported as ``time_ns`` in every response."""

import time


def elapsed_ns(start: int) -> int:
    """Nanoseconds since *start*, a ``time.perf_counter_ns()`` reading."""
    return time.perf_counter_ns() - start
