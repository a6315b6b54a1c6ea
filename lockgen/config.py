"""
Configuration for the LockGen password generator.

Character alphabets, the ambiguous-character set and the level presets
are process-wide constants and are never mutated.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable

from .errors import InvalidArgument


class CharacterClass(enum.Enum):
    # Declaration order is the canonical order for pools and coverage seeding.
    LOWER = "lower"
    UPPER = "upper"
    DIGIT = "digit"
    SYMBOL = "symbol"


LOWER = "abcdefghijklmnopqrstuvwxyz"
UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "0123456789"
# Backtick is the last character.
SYMBOLS = "!@#$%^&*()-_=+[]{};:,.<>/?|~'\"\\`"

ALPHABETS = MappingProxyType(
    {
        CharacterClass.LOWER: LOWER,
        CharacterClass.UPPER: UPPER,
        CharacterClass.DIGIT: DIGITS,
        CharacterClass.SYMBOL: SYMBOLS,
    }
)

# Characters that look alike in many fonts (I/l/1, O/0/o, brackets, quotes...).
AMBIGUOUS = frozenset("Il1O0o{}[]()/\\'\"`~,;:.<>")


def ordered(classes: Iterable[CharacterClass]) -> list[CharacterClass]:
    """
    Return the given classes in canonical order (lower, upper, digit, symbol).
    """
    wanted = set(classes)
    return [cls for cls in CharacterClass if cls in wanted]


@dataclass(frozen=True)
class GenerationOptions:
    # Desired password length in characters.
    length: int = 16

    # Enabled character classes. Any iterable is accepted and frozen.
    classes: frozenset[CharacterClass] = field(
        default_factory=lambda: frozenset(CharacterClass)
    )

    # Drop AMBIGUOUS characters from the pool and class alphabets.
    exclude_ambiguous: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "classes", frozenset(self.classes))

    @classmethod
    def from_flags(
        cls,
        length: int,
        lower: bool = True,
        upper: bool = True,
        digits: bool = True,
        symbols: bool = True,
        exclude_ambiguous: bool = False,
    ) -> "GenerationOptions":
        """
        Build options from the four class toggles of the generator form.
        """
        flags = (
            (CharacterClass.LOWER, lower),
            (CharacterClass.UPPER, upper),
            (CharacterClass.DIGIT, digits),
            (CharacterClass.SYMBOL, symbols),
        )
        return cls(
            length=length,
            classes=frozenset(c for c, enabled in flags if enabled),
            exclude_ambiguous=exclude_ambiguous,
        )

    def ordered_classes(self) -> list[CharacterClass]:
        return ordered(self.classes)


# Named presets offered by the CLI and GUI. "custom" keeps the current
# toggles and therefore has no entry here.
CUSTOM_LEVEL = "custom"
LEVEL_PRESETS = MappingProxyType(
    {
        "easy": GenerationOptions.from_flags(
            8, digits=False, symbols=False, exclude_ambiguous=True
        ),
        "medium": GenerationOptions.from_flags(
            12, symbols=False, exclude_ambiguous=True
        ),
        "strong": GenerationOptions.from_flags(16, exclude_ambiguous=True),
        "insane": GenerationOptions.from_flags(24, exclude_ambiguous=False),
    }
)
LEVELS = tuple(LEVEL_PRESETS) + (CUSTOM_LEVEL,)
DEFAULT_LEVEL = "strong"


def options_for_level(level: str) -> GenerationOptions:
    """
    Return the preset options for a named level.

    Raises InvalidArgument for "custom" or an unknown name, since neither
    describes a fixed set of options.
    """
    try:
        return LEVEL_PRESETS[level]
    except KeyError:
        raise InvalidArgument(
            f"Unknown level {level!r}; expected one of {', '.join(LEVEL_PRESETS)}."
        ) from None


# Default options instance you can import elsewhere
DEFAULT_OPTIONS = options_for_level(DEFAULT_LEVEL)
