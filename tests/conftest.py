from __future__ import annotations

import os
import struct

import pytest

# Qt widgets need a platform plugin; tests run without a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class WordSource:
    """
    Stand-in for os.urandom that hands out fixed 32-bit words in order,
    repeating the last one once the list is used up.
    """

    def __init__(self, words: list[int]) -> None:
        self.words = list(words)
        self.calls = 0

    def __call__(self, n: int) -> bytes:
        assert n == 4
        index = min(self.calls, len(self.words) - 1)
        self.calls += 1
        return struct.pack(">I", self.words[index])


@pytest.fixture
def word_source():
    return WordSource
