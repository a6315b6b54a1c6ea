"""Tests for pool construction."""

from __future__ import annotations

import string

import pytest

from lockgen import pool as pool_module
from lockgen.config import AMBIGUOUS, SYMBOLS, CharacterClass
from lockgen.errors import EmptyPool
from lockgen.pool import build_pool, class_alphabet

ALL = frozenset(CharacterClass)
LOWER, UPPER, DIGIT, SYMBOL = (
    CharacterClass.LOWER,
    CharacterClass.UPPER,
    CharacterClass.DIGIT,
    CharacterClass.SYMBOL,
)


class TestBuildPool:
    def test_all_classes_in_canonical_order(self):
        pool = build_pool(ALL)
        assert pool == (
            string.ascii_lowercase + string.ascii_uppercase + string.digits + SYMBOLS
        )
        assert len(pool) == 94

    def test_order_does_not_depend_on_input_order(self):
        assert build_pool([SYMBOL, DIGIT, LOWER]) == build_pool([LOWER, DIGIT, SYMBOL])

    def test_no_duplicates(self):
        pool = build_pool(ALL, exclude_ambiguous=False)
        assert len(set(pool)) == len(pool)

    def test_duplicate_classes_collapse(self):
        assert build_pool([DIGIT, DIGIT]) == string.digits

    def test_deterministic_across_calls(self):
        first = build_pool(ALL, True)
        assert all(build_pool(ALL, True) == first for _ in range(5))

    def test_exclusion_removes_ambiguous(self):
        pool = build_pool(ALL, exclude_ambiguous=True)
        assert not set(pool) & AMBIGUOUS
        # 24 lower + 24 upper + 8 digits + 14 symbols
        assert len(pool) == 70

    @pytest.mark.parametrize(
        "classes",
        [{LOWER}, {LOWER, UPPER}, {DIGIT, SYMBOL}, ALL],
    )
    def test_excluded_pool_is_subsequence(self, classes):
        full = build_pool(classes, False)
        reduced = build_pool(classes, True)
        assert set(reduced) < set(full)
        assert reduced == "".join(ch for ch in full if ch in set(reduced))

    def test_no_classes_raises(self):
        with pytest.raises(EmptyPool, match="Select at least one"):
            build_pool(set())

    def test_exclusion_emptying_pool_raises(self, monkeypatch):
        monkeypatch.setattr(pool_module, "AMBIGUOUS", frozenset(string.digits))
        with pytest.raises(EmptyPool, match="empty after exclusions"):
            build_pool({DIGIT}, exclude_ambiguous=True)


class TestClassAlphabet:
    def test_base_alphabets(self):
        assert class_alphabet(LOWER) == string.ascii_lowercase
        assert class_alphabet(UPPER) == string.ascii_uppercase
        assert class_alphabet(DIGIT) == string.digits
        assert class_alphabet(SYMBOL) == SYMBOLS

    @pytest.mark.parametrize(
        "cls,expected",
        [
            (LOWER, "abcdefghijkmnpqrstuvwxyz"),
            (UPPER, "ABCDEFGHJKLMNPQRSTUVWXYZ"),
            (DIGIT, "23456789"),
            (SYMBOL, "!@#$%^&*-_=+?|"),
        ],
    )
    def test_filtered_alphabets(self, cls, expected):
        assert class_alphabet(cls, exclude_ambiguous=True) == expected

    def test_fully_ambiguous_class_raises(self, monkeypatch):
        monkeypatch.setattr(pool_module, "AMBIGUOUS", frozenset(string.digits))
        with pytest.raises(EmptyPool, match="digit"):
            class_alphabet(DIGIT, exclude_ambiguous=True)
