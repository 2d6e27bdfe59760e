"""
Command-line interface and high-level generator function.
"""

from __future__ import annotations

import argparse
import logging
import math
import random
import sys
from dataclasses import dataclass

from .config import DEFAULT_CONFIG, GeneratorConfig, InvalidConfiguration
from .generator import generate
from .strength import StrengthResult, score

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """
    Full result of one password generation.
    """
    password: str
    strength: StrengthResult

    # Theoretical estimate: length * log2(charset size)
    entropy_bits: float
    config: GeneratorConfig


def generate_password_with_meta(
    config: GeneratorConfig | None = None,
    rng: random.Random | None = None,
) -> GenerationResult:
    """
    Generate a password and score it in one go.

    Raises InvalidConfiguration when no character class is enabled.
    """
    cfg = config or DEFAULT_CONFIG
    password = generate(cfg, rng)

    charset = cfg.charset()
    entropy_bits = len(password) * math.log2(len(charset)) if password else 0.0

    return GenerationResult(
        password=password,
        strength=score(password),
        entropy_bits=entropy_bits,
        config=cfg,
    )


def generate_password(
    config: GeneratorConfig | None = None,
    rng: random.Random | None = None,
) -> str:
    """Generate a password and return only the string."""
    return generate_password_with_meta(config, rng).password


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="passgen",
        description="Generate random passwords and rate their strength.",
    )
    parser.add_argument(
        "-l", "--length", type=int, default=DEFAULT_CONFIG.length,
        help="password length (default: %(default)s)",
    )
    parser.add_argument("--no-lowercase", action="store_true", help="exclude a-z")
    parser.add_argument("--no-uppercase", action="store_true", help="exclude A-Z")
    parser.add_argument("--no-numbers", action="store_true", help="exclude 0-9")
    parser.add_argument("--no-symbols", action="store_true", help="exclude symbols")
    parser.add_argument(
        "-n", "--count", type=int, default=1,
        help="number of passwords to generate (default: %(default)s)",
    )
    parser.add_argument(
        "--quantum", action="store_true",
        help="draw randomness from the simulated quantum source",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for `python -m passgen` or `run_passgen.py`.
    """
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config = GeneratorConfig(
        length=args.length,
        include_lowercase=not args.no_lowercase,
        include_uppercase=not args.no_uppercase,
        include_numbers=not args.no_numbers,
        include_symbols=not args.no_symbols,
    )

    logger.debug("Using %s", config)

    rng = None
    if args.quantum:
        # Imported lazily: building the simulator backend is slow.
        from .entropy import QuantumRandom

        rng = QuantumRandom()

    try:
        for _ in range(args.count):
            result = generate_password_with_meta(config, rng)
            print(
                f"{result.password}  [{result.strength.feedback}, "
                f"score {result.strength.score}, ~{result.entropy_bits:.1f} bits]"
            )
    except InvalidConfiguration as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    return 0
