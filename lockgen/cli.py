"""
Command-line interface for the password generator.
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from typing import Sequence

from .config import (
    CUSTOM_LEVEL,
    DEFAULT_LEVEL,
    DEFAULT_OPTIONS,
    LEVELS,
    CharacterClass,
    GenerationOptions,
    options_for_level,
)
from .errors import GenerationError
from .generator import GenerationResult, generate_many

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_GENERATION_ERROR = 2

# argparse dest -> character class toggled by it
CLASS_FLAGS = {
    "lower": CharacterClass.LOWER,
    "upper": CharacterClass.UPPER,
    "digits": CharacterClass.DIGIT,
    "symbols": CharacterClass.SYMBOL,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lockgen",
        description="Generate secure random passwords.",
    )
    parser.add_argument(
        "--level",
        choices=LEVELS,
        default=DEFAULT_LEVEL,
        help="Preset to start from (default: %(default)s).",
    )
    parser.add_argument("--length", type=int, help="Password length.")

    for dest, cls in CLASS_FLAGS.items():
        parser.add_argument(
            f"--{dest}",
            dest=dest,
            action=argparse.BooleanOptionalAction,
            default=None,
            help=f"Include {cls.value} characters.",
        )

    ambiguous = parser.add_mutually_exclusive_group()
    ambiguous.add_argument(
        "--exclude-ambiguous",
        dest="exclude_ambiguous",
        action="store_const",
        const=True,
        help="Leave out look-alike characters such as I, l, 1, O, 0.",
    )
    ambiguous.add_argument(
        "--include-ambiguous",
        dest="exclude_ambiguous",
        action="store_const",
        const=False,
        help="Allow look-alike characters.",
    )
    parser.set_defaults(exclude_ambiguous=None)

    parser.add_argument(
        "--count", type=int, default=1, help="Number of passwords to generate."
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--json", action="store_true", help="Output a JSON array.")
    output.add_argument(
        "-q", "--quiet", action="store_true", help="Print passwords only."
    )
    parser.add_argument(
        "--log-level",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        default="WARNING",
        help="Logging verbosity (default: %(default)s).",
    )
    return parser


def resolve_options(args: argparse.Namespace) -> tuple[str, GenerationOptions]:
    """
    Start from the chosen preset and apply explicit overrides.

    Touching any class or ambiguity toggle turns the level into "custom",
    the same way changing a checkbox does in the GUI.
    """
    level = args.level
    base = DEFAULT_OPTIONS if level == CUSTOM_LEVEL else options_for_level(level)

    classes = set(base.classes)
    toggled = False
    for dest, cls in CLASS_FLAGS.items():
        value = getattr(args, dest)
        if value is None:
            continue
        toggled = True
        if value:
            classes.add(cls)
        else:
            classes.discard(cls)

    exclude_ambiguous = base.exclude_ambiguous
    if args.exclude_ambiguous is not None:
        toggled = True
        exclude_ambiguous = args.exclude_ambiguous

    if toggled:
        level = CUSTOM_LEVEL

    opts = dataclasses.replace(
        base,
        length=base.length if args.length is None else args.length,
        classes=frozenset(classes),
        exclude_ambiguous=exclude_ambiguous,
    )
    return level, opts


def format_result(result: GenerationResult) -> str:
    return f"{result.password}\nStrength: {result.label.text} • ~{result.entropy_bits} bits"


def main(argv: Sequence[str] | None = None) -> int:
    """
    Entry point for `lockgen`, `python -m lockgen` or `run_lockgen.py`.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    level, opts = resolve_options(args)
    logger.info("Generating with level=%s, length=%d.", level, opts.length)

    try:
        results = generate_many(opts, args.count)
    except GenerationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_GENERATION_ERROR

    if args.json:
        payload = [
            {
                "password": r.password,
                "entropy_bits": r.entropy_bits,
                "label": r.label.text,
            }
            for r in results
        ]
        print(json.dumps(payload, indent=2))
    elif args.quiet:
        for r in results:
            print(r.password)
    else:
        for r in results:
            print(format_result(r))

    return EXIT_OK
