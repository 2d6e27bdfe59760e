"""
Configuration for the password generator.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace


# Character classes, concatenated in this order when building the charset.
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
NUMBERS = "0123456789"
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"


class PassgenError(Exception):
    """Generic passgen error."""


class InvalidConfiguration(PassgenError, ValueError):
    """Raised when a configuration cannot produce a password."""


@dataclass
class GeneratorConfig:
    # Desired password length in characters.
    # Zero or negative is allowed and produces an empty password.
    length: int = 12

    include_lowercase: bool = True
    include_uppercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True

    def character_classes(self) -> list[tuple[str, bool]]:
        """
        Return (class, enabled) pairs in the fixed generation order.
        """
        return [
            (LOWERCASE, self.include_lowercase),
            (UPPERCASE, self.include_uppercase),
            (NUMBERS, self.include_numbers),
            (SYMBOLS, self.include_symbols),
        ]

    def charset(self) -> str:
        """
        Concatenation of all enabled character classes.

        May be empty; that is only an error once generation is attempted.
        """
        return "".join(chars for chars, enabled in self.character_classes() if enabled)

    def updated(self, **options) -> GeneratorConfig:
        """
        Return a copy with the given fields replaced.

        Unknown field names and unparseable values raise InvalidConfiguration.
        Fields that are not passed keep their current values.
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise InvalidConfiguration(f"Unknown configuration option(s): {', '.join(unknown)}")

        changes = {}
        for name, value in options.items():
            if name == "length":
                changes[name] = _parse_length(value)
            else:
                if not isinstance(value, bool):
                    raise InvalidConfiguration(f"{name} must be a bool, got {type(value).__name__}")
                changes[name] = value

        return replace(self, **changes)


def _parse_length(value) -> int:
    # bool is an int subclass; True as a length is almost certainly a mistake.
    if isinstance(value, bool):
        raise InvalidConfiguration("length must be an integer, got bool")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise InvalidConfiguration(f"length must be an integer, got {value!r}") from exc


@dataclass
class QuantumSourceConfig:
    # Number of qubits to prepare in superposition.
    # Each qubit gives one raw bit per run.
    # NOTE: Keep this <= backend limit (often 20-29 for local simulators).
    num_qubits: int = 20

    # How many rounds of SHA-256 mixing to apply to each sampled block.
    # 0 disables mixing and uses the raw bits directly.
    entropy_rounds: int = 2

    # Independent engine runs XOR-combined into each block.
    quantum_streams: int = 2


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = GeneratorConfig()
