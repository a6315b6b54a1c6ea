"""
LockGen secure password generator package.
"""

from .config import (
    CharacterClass,
    GenerationOptions,
    DEFAULT_OPTIONS,
    LEVEL_PRESETS,
    options_for_level,
)
from .errors import (
    GenerationError,
    InvalidArgument,
    EmptyPool,
    EntropySourceUnavailable,
)
from .pool import build_pool, class_alphabet
from .secure_random import SecureRandom, uniform_int
from .strength import StrengthLabel, StrengthEstimate, estimate
from .generator import (
    GenerationResult,
    GenerationOutcome,
    generate,
    generate_with_result,
    try_generate,
    generate_many,
)

__all__ = [
    "CharacterClass",
    "GenerationOptions",
    "DEFAULT_OPTIONS",
    "LEVEL_PRESETS",
    "options_for_level",
    "GenerationError",
    "InvalidArgument",
    "EmptyPool",
    "EntropySourceUnavailable",
    "build_pool",
    "class_alphabet",
    "SecureRandom",
    "uniform_int",
    "StrengthLabel",
    "StrengthEstimate",
    "estimate",
    "GenerationResult",
    "GenerationOutcome",
    "generate",
    "generate_with_result",
    "try_generate",
    "generate_many",
]
