"""Clocks that supply the reference instant for vague times.

A formatter asks its clock for "now" only when the caller omits a reference
timestamp. Swap in a FixedClock to pin "now" in tests or replays.
"""

import time
from abc import ABC, abstractmethod

from typing_extensions import override

from vaguetime.util import SECOND


class Clock(ABC):

    @abstractmethod
    def now_ms(self) -> int:
        """Return the current instant in whole milliseconds since the epoch."""
        pass


class SystemClock(Clock):
    @override
    def now_ms(self) -> int:
        return time.time_ns() // 1_000_000


class FixedClock(Clock):
    """Clock frozen at a single instant, given in seconds since the epoch."""

    def __init__(self, timestamp: int):
        self.timestamp: int = timestamp

    @override
    def now_ms(self) -> int:
        return self.timestamp * SECOND

    def __repr__(self) -> str:
        return f"FixedClock({self.timestamp})"
