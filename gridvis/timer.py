"""Wall-clock timers reporting milliseconds."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod


class Timer(ABC):
    """Interface for timers measuring intervals in milliseconds."""

    @abstractmethod
    def start(self) -> None:
        """Start the timer."""

    @abstractmethod
    def stop(self) -> None:
        """Stop the timer."""

    @abstractmethod
    def report(self) -> float:
        """Print the time between the last start and stop."""

    @abstractmethod
    def elapsed(self) -> float:
        """Return milliseconds from the last start until now."""

    def __enter__(self) -> "Timer":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()


class CPUTimer(Timer):
    """Times events on the host using a monotonic clock."""

    def __init__(self) -> None:
        self._start: float | None = None
        self._stop: float | None = None

    def _started(self) -> float:
        if self._start is None:
            raise RuntimeError("timer has not been started")
        return self._start

    def start(self) -> None:
        self._start = time.perf_counter()
        self._stop = None

    def stop(self) -> None:
        self._started()
        self._stop = time.perf_counter()

    def report(self) -> float:
        """Print and return the milliseconds between start and stop."""
        start = self._started()
        if self._stop is None:
            raise RuntimeError("timer has not been stopped")
        diff = (self._stop - start) * 1000.0
        print(f"Elapsed time: {diff:.3f} ")
        return diff

    def elapsed(self) -> float:
        return (time.perf_counter() - self._started()) * 1000.0