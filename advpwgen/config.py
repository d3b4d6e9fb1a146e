"""
Configuration for the advanced password generator.
"""

from dataclasses import dataclass

# Policy minimum; shorter passwords are rejected before any attempt is made.
MIN_LENGTH = 16

# Ceiling used by the CLI when --max-retries is not given.
DEFAULT_MAX_RETRIES = 256

# Rejection-sampling probes per character before falling back to an
# explicit scan of the remaining eligible characters.
DEFAULT_MAX_PROBES = 32


@dataclass(frozen=True)
class GeneratorConfig:
    # Shortest password the generator will produce.
    min_length: int = MIN_LENGTH

    # Explicit retry ceiling per password.
    # None means the ceiling is derived from the generator's success model.
    max_retries: int | None = None

    # Uniqueness tracker backend: "auto", "scalar" or "vector".
    # "auto" probes the host once when the generator is built.
    backend: str = "auto"

    max_probes: int = DEFAULT_MAX_PROBES

    def __post_init__(self) -> None:
        # The policy floor can be raised but never lowered.
        if self.min_length < MIN_LENGTH:
            raise ValueError(f"min_length must be >= {MIN_LENGTH}, got {self.min_length}")
        if self.max_retries is not None and self.max_retries < 1:
            raise ValueError(f"max_retries must be positive, got {self.max_retries}")
        if self.max_probes < 1:
            raise ValueError(f"max_probes must be positive, got {self.max_probes}")


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = GeneratorConfig()
