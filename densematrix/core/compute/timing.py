"""
Wall-clock timing for the polynomial fit.

A fit reports how long it took overall and per stage (building V,
forming VᵀV, inverting it, ...). Stage names become keys of
Result.timing next to 'total_seconds'.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Total time plus named stages.

    A stage entered more than once accumulates.
    """

    def __init__(self):
        self._stages: dict[str, float] = {}
        self._began: float | None = None
        self._elapsed: float | None = None

    def start(self) -> None:
        self._began = time.perf_counter()

    def stop(self) -> None:
        if self._began is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._elapsed = time.perf_counter() - self._began

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent in the with-block to stage `name`."""
        entered = time.perf_counter()
        try:
            yield
        finally:
            spent = time.perf_counter() - entered
            self._stages[name] = self._stages.get(name, 0.0) + spent

    def result(self) -> dict[str, float]:
        """
        {'total_seconds': ..., <stage>: ...}.

        Raises:
            RuntimeError: If the timer has not been stopped
        """
        if self._elapsed is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._elapsed, **self._stages}


@contextmanager
def timed() -> Iterator[Timer]:
    """Running Timer for the duration of the with-block; stopped on exit."""
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
