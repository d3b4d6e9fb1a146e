"""
Uniqueness tracker: a 256-bit membership set over case-folded byte values.

One tracker lives for exactly one password attempt. The storage behind it is
a backend picked once, when the tracker (or the generator that builds
trackers) is constructed:

- ScalarBitmap: 32-byte bytearray, plain byte/bit arithmetic.
- VectorBitmap: 32 uint8 lanes in a numpy array; every insert ANDs and ORs
  a one-hot mask across the whole state in a single vector operation.

Both keep the same bit layout (bit ``v & 7`` of byte ``v >> 3``), so their
snapshots can be compared byte for byte.
"""

from __future__ import annotations

import functools
import logging
from typing import Dict, Tuple, Type

import numpy as np

from .pools import fold

logger = logging.getLogger(__name__)

BITMAP_BYTES = 32
BITMAP_BITS = BITMAP_BYTES * 8


class ScalarBitmap:
    name = "scalar"

    __slots__ = ("_bits",)

    def __init__(self) -> None:
        self._bits = bytearray(BITMAP_BYTES)

    def insert(self, value: int) -> bool:
        index, mask = value >> 3, 1 << (value & 7)
        if self._bits[index] & mask:
            return False
        self._bits[index] |= mask
        return True

    def contains(self, value: int) -> bool:
        return bool(self._bits[value >> 3] & (1 << (value & 7)))

    def snapshot(self) -> bytes:
        return bytes(self._bits)


def _one_hot_table() -> np.ndarray:
    # Row v is the 32-byte mask with only bit v set.
    values = np.arange(BITMAP_BITS)
    table = np.zeros((BITMAP_BITS, BITMAP_BYTES), dtype=np.uint8)
    table[values, values >> 3] = np.left_shift(1, values & 7).astype(np.uint8)
    table.setflags(write=False)
    return table


_ONE_HOT = _one_hot_table()


class VectorBitmap:
    name = "vector"

    __slots__ = ("_bits",)

    def __init__(self) -> None:
        self._bits = np.zeros(BITMAP_BYTES, dtype=np.uint8)

    def insert(self, value: int) -> bool:
        mask = _ONE_HOT[value]
        if np.bitwise_and(self._bits, mask).any():
            return False
        np.bitwise_or(self._bits, mask, out=self._bits)
        return True

    def contains(self, value: int) -> bool:
        return bool(np.bitwise_and(self._bits, _ONE_HOT[value]).any())

    def snapshot(self) -> bytes:
        return self._bits.tobytes()


BACKENDS: Dict[str, Type] = {
    ScalarBitmap.name: ScalarBitmap,
    VectorBitmap.name: VectorBitmap,
}


def simd_features() -> Tuple[str, ...]:
    """
    SIMD extensions numpy found on this host at runtime (e.g. AVX2, ASIMD).

    An empty tuple means either no extensions or a numpy build that does not
    report them; both lead to the scalar backend.
    """
    try:
        info = np.show_config(mode="dicts")
        found = info["SIMD Extensions"]["found"]
    except (AttributeError, KeyError, TypeError, ValueError):
        return ()
    return tuple(found or ())


@functools.lru_cache(maxsize=None)
def detect_backend() -> str:
    """
    Probe the host once per process and name the preferred backend.
    """
    features = simd_features()
    name = VectorBitmap.name if features else ScalarBitmap.name
    logger.debug("Uniqueness backend %r selected (SIMD: %s)", name, ", ".join(features) or "none")
    return name


def resolve_backend(name: str = "auto") -> Type:
    """
    Map a configured backend name to a backend class.
    """
    if name == "auto":
        name = detect_backend()
    try:
        return BACKENDS[name]
    except KeyError:
        raise ValueError(
            f"Unknown uniqueness backend {name!r}; choose from auto, {', '.join(BACKENDS)}"
        ) from None


class UniquenessTracker:
    """
    Attempt-scoped set of case-folded characters already emitted.
    """

    def __init__(self, backend: Type | None = None) -> None:
        self._backend = (backend or resolve_backend())()

    @property
    def backend_name(self) -> str:
        return self._backend.name

    def insert(self, value: int) -> bool:
        """
        Record ``value``; True if it was not present before.
        """
        if not 0 <= value < BITMAP_BITS:
            raise ValueError(f"folded value {value} outside 0..{BITMAP_BITS - 1}")
        return self._backend.insert(value)

    def insert_char(self, ch: str) -> bool:
        return self.insert(fold(ch))

    def contains(self, value: int) -> bool:
        if not 0 <= value < BITMAP_BITS:
            return False
        return self._backend.contains(value)

    def contains_char(self, ch: str) -> bool:
        return self.contains(fold(ch))

    def snapshot(self) -> bytes:
        return self._backend.snapshot()
