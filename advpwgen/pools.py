"""
Character pools: the four fixed character classes a password is drawn from.

Each class owns an immutable, ordered pool. The table is checked once when
this module is imported; a broken table is a programming error and fails the
import with an AssertionError rather than surfacing per call.
"""

from __future__ import annotations

import enum
from typing import Dict, Mapping


class CharClass(enum.IntEnum):
    UPPER = 0
    LOWER = 1
    DIGIT = 2
    SPECIAL = 3


ALL_CLASSES: tuple[CharClass, ...] = tuple(CharClass)

UPPER_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWER_CHARS = "abcdefghijklmnopqrstuvwxyz"
DIGIT_CHARS = "0123456789"
SPECIAL_CHARS = "~!@#$%^&*()-_=+[];:,.<>/?\\|`"

POOLS: Mapping[CharClass, str] = {
    CharClass.UPPER: UPPER_CHARS,
    CharClass.LOWER: LOWER_CHARS,
    CharClass.DIGIT: DIGIT_CHARS,
    CharClass.SPECIAL: SPECIAL_CHARS,
}


def fold(ch: str) -> int:
    """
    Case-folded byte value of a pool character.

    Only used for uniqueness comparisons; the emitted character keeps its case.
    """
    return ord(ch.lower())


def validate_pools(pools: Mapping[CharClass, str]) -> None:
    """
    Startup invariants for a pool table.

    - every class has a non-empty pool
    - every character folds to a single byte (the tracker is 256 bits wide)
    - no character appears twice, within or across pools
    - no folded value is shared by two classes, except UPPER/LOWER which
      are the two cases of the same letters
    """
    assert set(pools) == set(CharClass), "pool table must cover every CharClass"

    seen: Dict[str, CharClass] = {}
    folded_owner: Dict[int, CharClass] = {}
    for cls in CharClass:
        pool = pools[cls]
        assert pool, f"pool for {cls.name} is empty"
        for ch in pool:
            value = fold(ch)
            assert 0 <= value < 256, f"{ch!r} does not fold to a single byte"
            assert ch not in seen, f"{ch!r} appears in {seen[ch].name} and {cls.name}"
            seen[ch] = cls

            owner = folded_owner.setdefault(value, cls)
            letters = {owner, cls} <= {CharClass.UPPER, CharClass.LOWER}
            assert owner is cls or letters, (
                f"{ch!r} collides with a {owner.name} character under case folding"
            )


validate_pools(POOLS)

_CLASS_OF: Dict[str, CharClass] = {
    ch: cls for cls, pool in POOLS.items() for ch in pool
}

# Nominal size of all pools together (26 + 26 + 10 + 28).
POOL_CAPACITY = sum(len(pool) for pool in POOLS.values())

# Distinct case-folded values across all pools. Upper and lower letters
# share folded values, so longer requests are attempted but can never
# satisfy the uniqueness rule and end in RetryBoundExhausted.
UNIQUE_CAPACITY = len({fold(ch) for pool in POOLS.values() for ch in pool})


def pool_for(cls: CharClass) -> str:
    return POOLS[cls]


def class_of(ch: str) -> CharClass | None:
    """Class a character belongs to, or None if it is in no pool."""
    return _CLASS_OF.get(ch)
