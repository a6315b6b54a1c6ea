"""
High-level password generation pipeline.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import DEFAULT_OPTIONS, GenerationOptions
from .errors import GenerationError, InvalidArgument
from .pool import build_pool, class_alphabet
from .secure_random import SecureRandom
from .strength import StrengthLabel, estimate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    """
    Full result of one password generation.
    """

    password: str
    entropy_bits: int
    label: StrengthLabel

    # Size of the combined pool the password was drawn from.
    pool_size: int


@dataclass(frozen=True)
class GenerationOutcome:
    """
    Either a result or the error that prevented one; never both.
    """

    result: GenerationResult | None = None
    error: GenerationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _generate(opts: GenerationOptions, rng: SecureRandom) -> tuple[str, str]:
    if isinstance(opts.length, bool) or not isinstance(opts.length, int):
        raise InvalidArgument(
            f"length must be an integer, got {type(opts.length).__name__}."
        )

    pool = build_pool(opts.classes, opts.exclude_ambiguous)

    # --- one guaranteed character per enabled class ---
    chars: list[str] = [
        rng.choice(class_alphabet(cls, opts.exclude_ambiguous))
        for cls in opts.ordered_classes()
    ]

    if opts.length < len(chars):
        # The guaranteed characters are kept, so the password comes out
        # longer than requested.
        logger.debug(
            "Requested length %d is below the %d enabled classes; "
            "returning %d characters.",
            opts.length,
            len(chars),
            len(chars),
        )

    # --- fill from the combined pool ---
    while len(chars) < opts.length:
        chars.append(rng.choice(pool))

    # --- move the guaranteed characters off the front ---
    rng.shuffle(chars)

    return "".join(chars), pool


def generate(
    opts: GenerationOptions | None = None,
    rng: SecureRandom | None = None,
) -> str:
    """
    Generate a password for `opts`.

    Every enabled class is represented at least once. If opts.length is
    smaller than the number of enabled classes, the password has one
    character per class instead of opts.length characters.
    """
    password, _pool = _generate(opts or DEFAULT_OPTIONS, rng or SecureRandom())
    return password


def generate_with_result(
    opts: GenerationOptions | None = None,
    rng: SecureRandom | None = None,
) -> GenerationResult:
    """
    Generate a password and its strength estimate.
    """
    password, pool = _generate(opts or DEFAULT_OPTIONS, rng or SecureRandom())
    strength = estimate(password, len(pool))

    return GenerationResult(
        password=password,
        entropy_bits=strength.entropy_bits,
        label=strength.label,
        pool_size=len(pool),
    )


def try_generate(
    opts: GenerationOptions | None = None,
    rng: SecureRandom | None = None,
) -> GenerationOutcome:
    """
    Like generate_with_result, but reports failures as a value so callers
    can branch on the error kind.
    """
    try:
        return GenerationOutcome(result=generate_with_result(opts, rng))
    except GenerationError as exc:
        logger.debug("Generation failed: %s", exc)
        return GenerationOutcome(error=exc)


def generate_many(
    opts: GenerationOptions | None = None,
    count: int = 1,
    rng: SecureRandom | None = None,
) -> list[GenerationResult]:
    if count < 1:
        raise InvalidArgument(f"count must be at least 1, got {count}.")
    return [generate_with_result(opts, rng) for _ in range(count)]
