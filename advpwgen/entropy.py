"""
Entropy source:
Thin wrapper over the operating system CSPRNG used for every random choice
the generator makes.
"""

from __future__ import annotations

import secrets
from typing import Sequence, TypeVar

from .errors import EntropySourceError

T = TypeVar("T")


class SecureRandom:
    """
    Uniform draws from ``secrets.SystemRandom``.

    ``draws`` counts every value handed out, so callers (and tests) can tell
    whether a code path touched the entropy source at all. OS failures are
    re-raised as EntropySourceError; there is no fallback to a weaker PRNG.
    """

    def __init__(self, source: secrets.SystemRandom | None = None) -> None:
        self._source = source or secrets.SystemRandom()
        self.draws = 0

    def below(self, n: int) -> int:
        """
        Uniform integer in ``[0, n)``.
        """
        if n <= 0:
            raise ValueError(f"upper bound must be positive, got {n}")
        try:
            value = self._source.randrange(n)
        except OSError as exc:
            raise EntropySourceError(f"secure random source failed: {exc}") from exc
        self.draws += 1
        return value

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise IndexError("cannot choose from an empty sequence")
        return seq[self.below(len(seq))]
