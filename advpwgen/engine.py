"""
Generation engine: builds passwords one attempt at a time and retries dead
ends up to a bound.

An attempt walks the positions in order. For each one the scheduler picks a
class, then a character of that class is sampled that has not been used yet
(ignoring case). Either step can hit a dead end; the attempt is then dropped
as a whole, never repaired.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import List, Type

from .config import DEFAULT_CONFIG, GeneratorConfig
from .entropy import SecureRandom
from .errors import (
    GenerationError,
    LengthBelowMinimum,
    LengthExceedsCapacity,
    RetryBoundExhausted,
)
from .model import SuccessModel
from .pools import ALL_CLASSES, POOL_CAPACITY, CharClass, class_of, fold, pool_for
from .scheduler import ClassScheduler
from .tracker import UniquenessTracker, resolve_backend

logger = logging.getLogger(__name__)


@dataclass
class BatchItem:
    """
    Outcome of one password request inside ``generate_many``.
    """

    password: str | None = None
    error: GenerationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def satisfies_policy(password: str, length: int) -> bool:
    """
    Check a finished password against every rule of the policy.
    """
    if len(password) != length:
        return False

    classes = [class_of(ch) for ch in password]
    if any(cls is None for cls in classes):
        return False
    if set(classes) != set(ALL_CLASSES):
        return False
    if any(a is b for a, b in zip(classes, classes[1:])):
        return False

    folded = [fold(ch) for ch in password]
    return len(set(folded)) == len(folded)


class Generator:
    """
    Encapsulates the policy-constrained generation loop.

    A generator is meant to be reused: its success model keeps learning from
    every attempt across all ``generate`` calls made on it.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        rng: SecureRandom | None = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self.rng = rng or SecureRandom()
        self.model = SuccessModel()

        # Resolved once; every attempt's tracker reuses it.
        self._backend: Type = resolve_backend(self.config.backend)

    @property
    def backend_name(self) -> str:
        return self._backend.name

    # --- public API ---

    def retry_bound(self, length: int) -> int:
        """
        Attempts allowed for one password of ``length`` right now.
        """
        if self.config.max_retries is not None:
            return self.config.max_retries
        return self.model.retry_bound(length)

    def generate(self, length: int) -> str:
        """
        Produce one password of exactly ``length`` characters.

        Raises LengthBelowMinimum or LengthExceedsCapacity without drawing
        any randomness, and RetryBoundExhausted once every allowed attempt
        has hit a dead end.
        """
        self._check_length(length)

        bound = self.retry_bound(length)
        for attempt in range(1, bound + 1):
            password = self._attempt(length)
            self.model.record(password is not None)
            if password is not None:
                logger.debug("Password of length %d built on attempt %d/%d", length, attempt, bound)
                return password

        attempts, successes = self.model.snapshot()
        logger.warning(
            "Retry bound %d exhausted for length %d (lifetime %d/%d attempts succeeded)",
            bound,
            length,
            successes,
            attempts,
        )
        raise RetryBoundExhausted(bound)

    def generate_many(
        self,
        length: int,
        count: int,
        stop_on_error: bool = True,
    ) -> List[BatchItem]:
        """
        Run ``generate`` ``count`` times.

        With ``stop_on_error`` the first failure is re-raised; otherwise each
        failure is recorded in its BatchItem and the batch carries on.
        """
        items: List[BatchItem] = []
        for _ in range(count):
            try:
                items.append(BatchItem(password=self.generate(length)))
            except GenerationError as exc:
                if stop_on_error:
                    raise
                items.append(BatchItem(error=exc))
        return items

    # --- internals ---

    def _check_length(self, length: int) -> None:
        if length < self.config.min_length:
            raise LengthBelowMinimum(length, self.config.min_length)
        if length > POOL_CAPACITY:
            raise LengthExceedsCapacity(length, POOL_CAPACITY)

    def _attempt(self, length: int) -> str | None:
        """
        One full attempt; None on a dead end.
        """
        scheduler = ClassScheduler(length, self.rng)
        tracker = UniquenessTracker(self._backend)
        out: List[str] = []

        for position in range(length):
            cls = scheduler.next_class()
            if cls is None:
                logger.debug("Dead end at position %d: no class available", position)
                return None

            ch = self._sample(cls, tracker)
            if ch is None:
                logger.debug("Dead end at position %d: %s pool exhausted", position, cls.name)
                return None
            out.append(ch)

        password = "".join(out)
        if not satisfies_policy(password, length):
            # Only reachable through a scheduling bug; never hand it out.
            logger.warning("Discarding attempt that violates the password policy")
            return None
        return password

    def _sample(self, cls: CharClass, tracker: UniquenessTracker) -> str | None:
        """
        Uniformly pick a character of ``cls`` whose folded value is unused,
        and record it in ``tracker``.
        """
        pool = pool_for(cls)

        for _ in range(self.config.max_probes):
            ch = self.rng.choice(pool)
            if tracker.insert_char(ch):
                return ch

        # Pool nearly or fully used up: choose among what is left.
        eligible = [ch for ch in pool if not tracker.contains_char(ch)]
        if not eligible:
            return None
        ch = self.rng.choice(eligible)
        tracker.insert_char(ch)
        return ch


def new_generator(
    max_retry_override: int | None = None,
    config: GeneratorConfig | None = None,
    rng: SecureRandom | None = None,
) -> Generator:
    """
    Build a generator, optionally pinning the retry ceiling.

    Without ``max_retry_override`` the ceiling adapts to the generator's own
    success history.
    """
    cfg = config or DEFAULT_CONFIG
    if max_retry_override is not None:
        cfg = replace(cfg, max_retries=max_retry_override)
    return Generator(cfg, rng=rng)
