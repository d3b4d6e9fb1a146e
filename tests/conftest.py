import pytest

from advpwgen.entropy import SecureRandom
from advpwgen.tracker import detect_backend


class FirstChoiceRandom(SecureRandom):
    """Deterministic stand-in that always picks index 0 but still counts draws."""

    def below(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"upper bound must be positive, got {n}")
        self.draws += 1
        return 0


@pytest.fixture
def counting_rng():
    return SecureRandom()


@pytest.fixture
def first_choice_rng():
    return FirstChoiceRandom()


@pytest.fixture
def fresh_backend_probe():
    """Forget the cached capability probe before and after a test."""
    detect_backend.cache_clear()
    yield
    detect_backend.cache_clear()
