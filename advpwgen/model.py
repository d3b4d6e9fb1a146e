"""
Success model: lifetime attempt statistics for one generator and the adaptive
retry bound derived from them.
"""

from __future__ import annotations

import math
import threading
from typing import Tuple

from .config import MIN_LENGTH

DEFAULT_SUCCESS_RATE = 0.5
RATE_FLOOR = 0.01
RATE_CEILING = 0.99


class SuccessModel:
    """
    Counters of attempts and successful attempts, never reset.

    The lock makes ``record`` and the reads consistent when one generator is
    shared between threads.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._attempts = 0
        self._successes = 0

    def record(self, success: bool) -> None:
        with self._lock:
            self._attempts += 1
            if success:
                self._successes += 1

    def snapshot(self) -> Tuple[int, int]:
        """(attempts, successes)"""
        with self._lock:
            return self._attempts, self._successes

    @property
    def success_rate(self) -> float:
        attempts, successes = self.snapshot()
        if attempts == 0:
            return DEFAULT_SUCCESS_RATE
        return successes / attempts

    def retry_bound(self, length: int) -> int:
        """
        ceil(1 / p) * max(length, 16), with p clamped to [0.01, 0.99].

        Ranges from 2 * max(length, 16) for a near-perfect history to
        100 * max(length, 16) for a near-hopeless one.
        """
        rate = min(max(self.success_rate, RATE_FLOOR), RATE_CEILING)
        expected = math.ceil(1.0 / rate)
        return expected * max(length, MIN_LENGTH)
