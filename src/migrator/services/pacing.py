# migrator/services/pacing.py
"""
Pacing policies applied after each top-level document write.

The migration runs against rate-limited external services. Pacing is a
fixed-rate limiter, not an adaptive backoff: every pause has the same
length regardless of how the previous calls went.
"""

import time
from abc import ABC, abstractmethod
from collections.abc import Callable


class Pacer(ABC):
    """Pause policy invoked between top-level writes."""

    def __init__(self) -> None:
        self.pauses = 0

    def pause(self) -> None:
        self.pauses += 1
        self._wait()

    @abstractmethod
    def _wait(self) -> None:
        pass


class FixedIntervalPacer(Pacer):
    """Sleep for a fixed interval on every pause."""

    def __init__(
        self, interval_seconds: float, sleep: Callable[[float], None] = time.sleep
    ) -> None:
        super().__init__()
        if interval_seconds < 0:
            raise ValueError("interval_seconds must not be negative")
        self.interval_seconds = interval_seconds
        self._sleep = sleep

    def _wait(self) -> None:
        self._sleep(self.interval_seconds)


class NoDelayPacer(Pacer):
    """Count pauses without waiting (tests, emulator runs)."""

    def _wait(self) -> None:
        pass


def create_pacer(interval_seconds: float) -> Pacer:
    if interval_seconds <= 0:
        return NoDelayPacer()
    return FixedIntervalPacer(interval_seconds)
