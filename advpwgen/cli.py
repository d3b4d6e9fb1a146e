"""
Command-line interface around the generator.

Exit codes:
0 = success
1 = invalid input
2 = generation failure
"""
from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .config import DEFAULT_MAX_RETRIES, MIN_LENGTH, GeneratorConfig
from .engine import new_generator
from .errors import GenerationError
from .logging_config import setup_logging
from .tracker import BACKENDS

EXIT_OK = 0
EXIT_INVALID_INPUT = 1
EXIT_GENERATION_FAILED = 2


class _ArgumentParser(argparse.ArgumentParser):
    """
    argparse exits with 2 on bad input; that code is reserved for
    generation failures here.
    """

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(EXIT_INVALID_INPUT, f"Error: {message}\n")


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid numeric value: {raw}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be > 0, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="advpwgen",
        description=(
            "Advanced password generator: every password mixes upper, lower, "
            "digit and special characters, never repeats a class twice in a row "
            "and never reuses a character (ignoring case)."
        ),
    )
    parser.add_argument(
        "-l", "--length", type=_positive_int, required=True,
        help=f"Password length (>= {MIN_LENGTH})",
    )
    parser.add_argument(
        "-n", "--count", type=_positive_int, default=1,
        help="Number of passwords to generate (default: 1)",
    )
    retries = parser.add_mutually_exclusive_group()
    retries.add_argument(
        "--max-retries", type=_positive_int, default=DEFAULT_MAX_RETRIES,
        help=f"Retry bound for dead-end recovery (default: {DEFAULT_MAX_RETRIES})",
    )
    retries.add_argument(
        "--adaptive", action="store_true",
        help="Derive the retry bound from the observed success rate instead",
    )
    parser.add_argument(
        "--backend", choices=["auto", *BACKENDS], default="auto",
        help="Uniqueness tracker backend (default: auto)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log generation progress to stderr",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """
    Entry point for `python -m advpwgen.cli` or `run_advpwgen.py`.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.length < MIN_LENGTH:
        print(f"Error: Password length must be >= {MIN_LENGTH}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return EXIT_INVALID_INPUT

    setup_logging(args.verbose)

    generator = new_generator(
        max_retry_override=None if args.adaptive else args.max_retries,
        config=GeneratorConfig(backend=args.backend),
    )

    # The batch stops at the first failed password.
    for _ in range(args.count):
        try:
            password = generator.generate(args.length)
        except GenerationError as e:
            print(f"Generation failed: {e}", file=sys.stderr)
            return EXIT_GENERATION_FAILED
        print(password)

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
