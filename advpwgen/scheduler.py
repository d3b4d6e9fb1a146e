"""
Class scheduler: decides which character class fills each position of one
password attempt.

Two rules shape the choice:

- adjacency: the class used at the previous position is never a candidate
- forcing: once the positions left equal the classes still missing, only
  missing classes are candidates, so coverage of all four classes is built
  in rather than left to retry luck

Among the surviving candidates the pick is uniform.
"""

from __future__ import annotations

from typing import List, Set

from .entropy import SecureRandom
from .pools import ALL_CLASSES, CharClass


class ClassScheduler:
    """
    Per-attempt schedule state. Discard it together with the attempt.
    """

    def __init__(self, length: int, rng: SecureRandom) -> None:
        self._rng = rng
        self.previous: CharClass | None = None
        self.used: Set[CharClass] = set()
        self.remaining = length

    @property
    def missing(self) -> List[CharClass]:
        return [cls for cls in ALL_CLASSES if cls not in self.used]

    def candidates(self) -> List[CharClass]:
        """
        Classes allowed at the next position, in CharClass order.
        """
        if self.remaining <= 0:
            return []

        missing = self.missing
        if len(missing) > self.remaining:
            # Not enough positions left to cover every class.
            return []
        if len(missing) == self.remaining:
            pool = missing
        else:
            pool = list(ALL_CLASSES)
        return [cls for cls in pool if cls is not self.previous]

    def next_class(self) -> CharClass | None:
        """
        Pick and commit the class for the next position.

        Returns None on a dead end; the state is left untouched in that case.
        """
        options = self.candidates()
        if not options:
            return None
        chosen = self._rng.choice(options)
        self.previous = chosen
        self.used.add(chosen)
        self.remaining -= 1
        return chosen
