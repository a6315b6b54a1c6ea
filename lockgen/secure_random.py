"""
Secure random engine: unbiased integers, choices and shuffles drawn from
the operating system's cryptographically secure random source.
"""

from __future__ import annotations

import logging
import os
from typing import Callable, MutableSequence, Sequence, TypeVar

from .errors import EmptyPool, EntropySourceUnavailable, InvalidArgument

logger = logging.getLogger(__name__)

T = TypeVar("T")

# One draw is a 32-bit unsigned word.
WORD_BYTES = 4
WORD_RANGE = 1 << (8 * WORD_BYTES)


class SecureRandom:
    """
    Encapsulates all access to the secure entropy source.

    `source` must behave like os.urandom: take a byte count and return
    that many bytes. It is injectable so tests can drive the rejection
    loop deterministically.
    """

    def __init__(self, source: Callable[[int], bytes] | None = None) -> None:
        self.source = source or os.urandom

    def _next_word(self) -> int:
        try:
            data = self.source(WORD_BYTES)
        except (OSError, NotImplementedError) as exc:
            raise EntropySourceUnavailable(
                f"Secure random source could not be read: {exc}"
            ) from exc

        if len(data) != WORD_BYTES:
            raise EntropySourceUnavailable(
                f"Secure random source returned {len(data)} bytes, "
                f"expected {WORD_BYTES}."
            )
        return int.from_bytes(data, "big")

    def uniform_int(self, max_exclusive: int) -> int:
        """
        Return an integer in [0, max_exclusive), every value equally likely.

        Words at or above the largest multiple of max_exclusive that fits
        in 2**32 are rejected and redrawn, which removes modulo bias.
        """
        if isinstance(max_exclusive, bool) or not isinstance(max_exclusive, int):
            raise InvalidArgument(
                f"max_exclusive must be an integer, got {type(max_exclusive).__name__}."
            )
        if max_exclusive <= 0:
            raise InvalidArgument(
                f"max_exclusive must be positive, got {max_exclusive}."
            )
        if max_exclusive > WORD_RANGE:
            raise InvalidArgument(
                f"max_exclusive must not exceed 2**32, got {max_exclusive}."
            )

        limit = WORD_RANGE - (WORD_RANGE % max_exclusive)
        while True:
            value = self._next_word()
            if value < limit:
                return value % max_exclusive
            logger.debug("Rejected draw above limit %d; redrawing.", limit)

    def choice(self, pool: Sequence[T]) -> T:
        if not pool:
            raise EmptyPool("Cannot choose from an empty pool.")
        return pool[self.uniform_int(len(pool))]

    def shuffle(self, items: MutableSequence[T]) -> None:
        """
        Fisher-Yates shuffle in place; each swap index is a uniform draw.
        """
        for i in range(len(items) - 1, 0, -1):
            j = self.uniform_int(i + 1)
            items[i], items[j] = items[j], items[i]


# Shared instance; holds no state besides the reference to os.urandom.
_default = SecureRandom()


def uniform_int(max_exclusive: int) -> int:
    return _default.uniform_int(max_exclusive)


def choice(pool: Sequence[T]) -> T:
    return _default.choice(pool)


def shuffle(items: MutableSequence[T]) -> None:
    _default.shuffle(items)
