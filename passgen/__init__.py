"""
Random password generator with a simple strength rubric.
"""

from .config import (
    DEFAULT_CONFIG,
    GeneratorConfig,
    InvalidConfiguration,
    PassgenError,
    QuantumSourceConfig,
)
from .generator import PasswordGenerator, generate
from .strength import StrengthResult, score
from .cli import GenerationResult, generate_password, generate_password_with_meta

__all__ = [
    "DEFAULT_CONFIG",
    "GeneratorConfig",
    "InvalidConfiguration",
    "PassgenError",
    "QuantumSourceConfig",
    "PasswordGenerator",
    "generate",
    "StrengthResult",
    "score",
    "GenerationResult",
    "generate_password",
    "generate_password_with_meta",
]
