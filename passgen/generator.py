"""
Password generation: turn a GeneratorConfig into a random password.
"""

from __future__ import annotations

import logging
import random
import secrets

from .config import (
    DEFAULT_CONFIG,
    LOWERCASE,
    NUMBERS,
    SYMBOLS,
    UPPERCASE,
    GeneratorConfig,
    InvalidConfiguration,
)
from .strength import StrengthResult, score as score_password

logger = logging.getLogger(__name__)


def _seed_characters(cfg: GeneratorConfig, rng: random.Random) -> list[str]:
    """
    Pick the guaranteed characters that go in before the random fill.

    Each class has its own fixed length threshold (lowercase needs length > 0,
    uppercase > 1, numbers > 2, symbols > 3). The threshold does not depend on
    how many earlier classes are enabled, so for length <= 3 an enabled class
    can end up without a guaranteed character.
    """
    seeds: list[str] = []
    if cfg.include_lowercase and cfg.length > 0:
        seeds.append(rng.choice(LOWERCASE))
    if cfg.include_uppercase and cfg.length > 1:
        seeds.append(rng.choice(UPPERCASE))
    if cfg.include_numbers and cfg.length > 2:
        seeds.append(rng.choice(NUMBERS))
    if cfg.include_symbols and cfg.length > 3:
        seeds.append(rng.choice(SYMBOLS))
    return seeds


def generate(
    config: GeneratorConfig | None = None,
    rng: random.Random | None = None,
) -> str:
    """
    Generate one password for the given configuration.

    - Build the charset from the enabled classes.
    - Seed one character per enabled class (subject to the length thresholds).
    - Fill up to `length` with uniform draws from the whole charset.
    - Shuffle the result (Fisher-Yates via random.Random.shuffle).

    Raises InvalidConfiguration when no character class is enabled.
    """
    cfg = config or DEFAULT_CONFIG
    rng = rng or secrets.SystemRandom()

    charset = cfg.charset()
    if not charset:
        raise InvalidConfiguration("At least one character type must be selected")

    password_chars = _seed_characters(cfg, rng)
    while len(password_chars) < cfg.length:
        password_chars.append(rng.choice(charset))

    rng.shuffle(password_chars)

    logger.debug(
        "Generated password of length %d from charset of %d characters",
        len(password_chars),
        len(charset),
    )
    return "".join(password_chars)


class PasswordGenerator:
    """
    Stateful front end used by presentation code.

    Holds the current configuration and its own randomness source. Each
    generate() call is independent; no output is retained.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        # Copy so that configure() never mutates a shared instance such as DEFAULT_CONFIG.
        self.config = (config or DEFAULT_CONFIG).updated()
        self.rng = rng or secrets.SystemRandom()

    def configure(self, **options) -> GeneratorConfig:
        """
        Merge the given options into the current configuration and return it.
        """
        self.config = self.config.updated(**options)
        return self.config

    def charset(self) -> str:
        return self.config.charset()

    def generate(self) -> str:
        return generate(self.config, self.rng)

    def score(self, password: str) -> StrengthResult:
        return score_password(password)
