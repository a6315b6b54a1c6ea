"""
Strength estimate: entropy approximation and the label shown next to it.

The estimate treats every character as an independent uniform draw over
the pool used to build the password. The one guaranteed character per
class skews the real distribution slightly, so this is an approximation
and not a cryptographic guarantee.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

from .errors import InvalidArgument


class StrengthLabel(enum.IntEnum):
    VERY_WEAK = 0
    WEAK = 1
    OKAY = 2
    STRONG = 3
    INSANE = 4

    @property
    def text(self) -> str:
        return _LABEL_TEXT[self]

    def __str__(self) -> str:
        return self.text


_LABEL_TEXT = {
    StrengthLabel.VERY_WEAK: "Very Weak",
    StrengthLabel.WEAK: "Weak",
    StrengthLabel.OKAY: "Okay",
    StrengthLabel.STRONG: "Strong",
    StrengthLabel.INSANE: "Insane",
}

# Inclusive lower bounds, checked from the top down.
THRESHOLDS = (
    (80, StrengthLabel.INSANE),
    (60, StrengthLabel.STRONG),
    (36, StrengthLabel.OKAY),
    (28, StrengthLabel.WEAK),
)


@dataclass(frozen=True)
class StrengthEstimate:
    entropy_bits: int
    label: StrengthLabel


def label_for_bits(bits: float) -> StrengthLabel:
    for lower_bound, label in THRESHOLDS:
        if bits >= lower_bound:
            return label
    return StrengthLabel.VERY_WEAK


def estimate(password: str, pool_size: int) -> StrengthEstimate:
    """
    Estimate entropy as len(password) * log2(pool_size), rounded half up
    to whole bits, and map it to a label.
    """
    if pool_size < 2:
        raise InvalidArgument(f"pool_size must be at least 2, got {pool_size}.")

    bits = math.floor(len(password) * math.log2(pool_size) + 0.5)
    return StrengthEstimate(entropy_bits=bits, label=label_for_bits(bits))


def meter_percent(bits: int) -> int:
    # Strength bar fill; never fully empty.
    return max(5, min(100, bits))
