import itertools
import random

import pytest

from passgen import DEFAULT_CONFIG, GeneratorConfig, InvalidConfiguration, PasswordGenerator, generate
from passgen.config import LOWERCASE, NUMBERS, SYMBOLS, UPPERCASE


class RecordingRandom(random.Random):
    """Seeded Random that remembers which pool every choice() drew from."""

    def __init__(self, seed=0):
        super().__init__(seed)
        self.pools = []

    def choice(self, seq):
        self.pools.append(seq)
        return super().choice(seq)


def _all_configs(length):
    for flags in itertools.product([True, False], repeat=4):
        if any(flags):
            yield GeneratorConfig(length, *flags)


@pytest.mark.parametrize("length", [1, 2, 3, 4, 5, 12, 64])
def test_length_and_charset_for_every_class_combination(length):
    rng = random.Random(1234)
    for cfg in _all_configs(length):
        charset = set(cfg.charset())
        for _ in range(20):
            pw = generate(cfg, rng)
            assert len(pw) == length
            assert set(pw) <= charset


@pytest.mark.parametrize("length", [0, -1, -50])
def test_non_positive_length_gives_empty_password(length):
    assert generate(GeneratorConfig(length=length)) == ""


def test_all_classes_disabled_raises():
    cfg = GeneratorConfig(
        include_lowercase=False,
        include_uppercase=False,
        include_numbers=False,
        include_symbols=False,
    )
    with pytest.raises(InvalidConfiguration):
        generate(cfg)

    # Also a ValueError for callers that only catch the builtin.
    with pytest.raises(ValueError):
        generate(cfg.updated(length=0))


def test_every_class_present_when_length_at_least_four():
    rng = random.Random(7)
    cfg = GeneratorConfig(length=4)
    for _ in range(2000):
        pw = generate(cfg, rng)
        assert any(c in LOWERCASE for c in pw)
        assert any(c in UPPERCASE for c in pw)
        assert any(c in NUMBERS for c in pw)
        assert any(c in SYMBOLS for c in pw)


def test_single_class_uses_only_that_class():
    cfg = GeneratorConfig(
        length=30,
        include_lowercase=False,
        include_uppercase=False,
        include_symbols=False,
    )
    pw = generate(cfg, random.Random(3))
    assert len(pw) == 30
    assert set(pw) <= set(NUMBERS)


def test_seed_then_fill_order_with_all_classes():
    rng = RecordingRandom()
    generate(GeneratorConfig(length=6), rng)
    charset = LOWERCASE + UPPERCASE + NUMBERS + SYMBOLS
    assert rng.pools == [LOWERCASE, UPPERCASE, NUMBERS, SYMBOLS, charset, charset]


@pytest.mark.parametrize(
    "length, expected",
    [
        (1, [LOWERCASE]),
        (2, [LOWERCASE, UPPERCASE]),
        (3, [LOWERCASE, UPPERCASE, NUMBERS]),
        (4, [LOWERCASE, UPPERCASE, NUMBERS, SYMBOLS]),
    ],
)
def test_short_lengths_seed_by_position(length, expected):
    rng = RecordingRandom()
    generate(GeneratorConfig(length=length), rng)
    assert rng.pools == expected


def test_seed_thresholds_do_not_shift_when_earlier_classes_disabled():
    # Numbers need length > 2 and symbols length > 3, even when they are
    # the only enabled classes, so a length-2 password gets no seed at all.
    cfg = GeneratorConfig(length=2, include_lowercase=False, include_uppercase=False)
    rng = RecordingRandom()
    pw = generate(cfg, rng)

    assert len(pw) == 2
    assert rng.pools == [NUMBERS + SYMBOLS, NUMBERS + SYMBOLS]


def test_seed_characters_are_not_kept_in_front():
    rng = random.Random(0)
    cfg = GeneratorConfig(length=4)
    first_chars = {generate(cfg, rng)[0] for _ in range(200)}
    assert not first_chars <= set(LOWERCASE)


def test_seeded_rng_is_reproducible():
    cfg = GeneratorConfig(length=20)
    assert generate(cfg, random.Random(42)) == generate(cfg, random.Random(42))


def test_generator_default_config():
    gen = PasswordGenerator()
    assert gen.config == GeneratorConfig()
    assert len(gen.generate()) == 12


def test_configure_merges_and_keeps_other_fields():
    gen = PasswordGenerator(rng=random.Random(5))
    cfg = gen.configure(length=16, include_symbols=False)

    assert cfg.length == 16
    assert cfg.include_symbols is False
    assert cfg.include_lowercase is True
    assert cfg.include_uppercase is True
    assert cfg.include_numbers is True

    pw = gen.generate()
    assert len(pw) == 16
    assert not any(c in SYMBOLS for c in pw)

    gen.configure(include_numbers=False)
    assert gen.config.length == 16
    assert gen.config.include_symbols is False


def test_configure_does_not_mutate_default_config():
    gen = PasswordGenerator()
    gen.configure(length=40, include_lowercase=False)
    assert DEFAULT_CONFIG == GeneratorConfig()


def test_configure_parses_numeric_length():
    gen = PasswordGenerator()
    assert gen.configure(length="20").length == 20
    assert len(gen.generate()) == 20


@pytest.mark.parametrize(
    "options",
    [
        {"lenght": 10},
        {"include_emoji": True},
        {"length": "twelve"},
        {"length": None},
        {"length": True},
        {"include_symbols": "yes"},
    ],
)
def test_configure_rejects_bad_options(options):
    gen = PasswordGenerator()
    with pytest.raises(InvalidConfiguration):
        gen.configure(**options)
    assert gen.config == GeneratorConfig()


def test_configure_allows_all_false_until_generate():
    gen = PasswordGenerator()
    gen.configure(
        include_lowercase=False,
        include_uppercase=False,
        include_numbers=False,
        include_symbols=False,
    )
    assert gen.charset() == ""
    with pytest.raises(InvalidConfiguration):
        gen.generate()

    gen.configure(include_lowercase=True)
    assert set(gen.generate()) <= set(LOWERCASE)


def test_generator_score_delegates_to_scorer():
    result = PasswordGenerator().score("Abcdef12")
    assert result.score == 65
    assert result.label == "strong"
