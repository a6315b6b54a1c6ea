"""
Pool logic: turn enabled character classes into the candidate pool.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .config import ALPHABETS, AMBIGUOUS, CharacterClass, ordered
from .errors import EmptyPool

logger = logging.getLogger(__name__)


def remove_ambiguous(chars: str) -> str:
    return "".join(ch for ch in chars if ch not in AMBIGUOUS)


def build_pool(
    classes: Iterable[CharacterClass],
    exclude_ambiguous: bool = False,
) -> str:
    """
    Build the combined candidate pool for the given classes.

    We:
    - Concatenate base alphabets in canonical order.
    - Drop duplicates, keeping the first occurrence.
    - Remove ambiguous characters if requested.

    Same inputs always give the same pool, character for character.
    """
    raw = "".join(ALPHABETS[cls] for cls in ordered(classes))
    if not raw:
        raise EmptyPool("Select at least one character set.")

    # dict keeps insertion order, so this is an ordered de-duplication
    pool = "".join(dict.fromkeys(raw))

    if exclude_ambiguous:
        pool = remove_ambiguous(pool)
    if not pool:
        raise EmptyPool("Character pool is empty after exclusions.")

    logger.debug(
        "Built pool of %d characters (exclude_ambiguous=%s).",
        len(pool),
        exclude_ambiguous,
    )
    return pool


def class_alphabet(cls: CharacterClass, exclude_ambiguous: bool = False) -> str:
    """
    Alphabet used to seed the one guaranteed character of `cls`.
    """
    alphabet = ALPHABETS[cls]
    if exclude_ambiguous:
        alphabet = remove_ambiguous(alphabet)
    if not alphabet:
        raise EmptyPool(
            f"No {cls.value} characters remain after excluding ambiguous ones."
        )
    return alphabet
