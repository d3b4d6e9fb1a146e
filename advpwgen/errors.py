"""
Errors raised by the password generator.

Every failure of a single ``generate`` call is a subclass of
``GenerationError`` so callers can catch the whole family at once.
"""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for all password generation failures."""


class LengthBelowMinimum(GenerationError):
    def __init__(self, length: int, minimum: int) -> None:
        self.length = length
        self.minimum = minimum
        super().__init__(
            f"requested length {length} is smaller than required minimum {minimum}"
        )


class LengthExceedsCapacity(GenerationError):
    def __init__(self, length: int, capacity: int) -> None:
        self.length = length
        self.capacity = capacity
        super().__init__(
            f"length {length} exceeds character pool capacity {capacity}"
        )


class RetryBoundExhausted(GenerationError):
    def __init__(self, bound: int) -> None:
        self.bound = bound
        super().__init__(f"unable to satisfy constraints after {bound} attempts")


class EntropySourceError(GenerationError):
    """The operating system refused to hand out secure random bytes."""
