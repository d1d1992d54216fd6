"""Wall-clock timing for solver runs."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any


class Timer:
    """Measures the time between :meth:`start` and :meth:`stop`.

    Also works as a context manager::

        with Timer() as timer:
            solver.solve(start, goal)
        print(timer.elapsed)
    """

    def __init__(self) -> None:
        self._start: float | None = None
        self._elapsed: float = 0.0

    def start(self) -> None:
        self._start = time.perf_counter()

    def stop(self) -> float:
        if self._start is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._elapsed = time.perf_counter() - self._start
        self._start = None
        return self._elapsed

    @property
    def elapsed(self) -> float:
        """Seconds of the last completed run, or so far if still running."""
        if self._start is not None:
            return time.perf_counter() - self._start
        return self._elapsed

    def __enter__(self) -> Timer:
        self.start()
        return self

    def __exit__(self, *exc: Any) -> None:
        self.stop()


def benchmark(fn: Callable[[], Any], repeat: int) -> float:
    """Call *fn* *repeat* times and return the total elapsed seconds."""
    with Timer() as timer:
        for _ in range(repeat):
            fn()
    return timer.elapsed
