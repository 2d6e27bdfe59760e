import math
import random

from passgen import GeneratorConfig, generate_password, generate_password_with_meta
from passgen.cli import main


def test_generate_password_with_meta():
    cfg = GeneratorConfig(length=12)
    result = generate_password_with_meta(cfg, random.Random(1))

    assert len(result.password) == 12
    assert result.config is cfg
    assert result.entropy_bits == 12 * math.log2(88)
    assert result.strength.label == "very-strong"


def test_generate_password_empty_length_has_no_entropy():
    result = generate_password_with_meta(GeneratorConfig(length=0))
    assert result.password == ""
    assert result.entropy_bits == 0.0
    assert result.strength.score == 5


def test_generate_password_defaults():
    assert len(generate_password()) == 12


def test_main_prints_password_and_strength(capsys):
    assert main(["--length", "20", "--no-symbols"]) == 0

    out = capsys.readouterr().out.strip()
    password, _, rest = out.partition("  ")
    assert len(password) == 20
    assert password.isalnum()
    assert "score" in rest


def test_main_count(capsys):
    assert main(["-n", "3", "-l", "8"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 3


def test_main_reports_invalid_configuration(capsys):
    code = main(["--no-lowercase", "--no-uppercase", "--no-numbers", "--no-symbols"])
    assert code == 2
    assert "At least one character type" in capsys.readouterr().err
