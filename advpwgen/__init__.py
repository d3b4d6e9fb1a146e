"""
Advanced password generator package.
"""

from .config import GeneratorConfig, DEFAULT_CONFIG, MIN_LENGTH
from .engine import Generator, new_generator
from .errors import (
    GenerationError,
    LengthBelowMinimum,
    LengthExceedsCapacity,
    RetryBoundExhausted,
    EntropySourceError,
)
from .pools import CharClass, pool_for

__all__ = [
    "GeneratorConfig",
    "DEFAULT_CONFIG",
    "MIN_LENGTH",
    "Generator",
    "new_generator",
    "GenerationError",
    "LengthBelowMinimum",
    "LengthExceedsCapacity",
    "RetryBoundExhausted",
    "EntropySourceError",
    "CharClass",
    "pool_for",
]
