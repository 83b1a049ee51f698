# -*- coding: utf-8 -*-
"""
utils/patterns.py
===================
Pattern Detector — repeated characters, code-point sequences and
keyboard-adjacency runs.

Every check slides a window of WINDOW characters over the lowercased
password and stops at the first hit of its category.
"""
from typing import FrozenSet, Iterator, Tuple

from core.models import PatternReport

WINDOW = 3

# Standard US layout: rows, then the diagonal columns ("1qaz", "2wsx", ...)
KEYBOARD_ROWS: Tuple[str, ...] = (
    "`1234567890-=",
    "qwertyuiop[]\\",
    "asdfghjkl;'",
    "zxcvbnm,./",
)

KEYBOARD_COLUMNS: Tuple[str, ...] = (
    "1qaz", "2wsx", "3edc", "4rfv", "5tgb",
    "6yhn", "7ujm", "8ik,", "9ol.", "0p;/",
)


def _build_keyboard_windows() -> FrozenSet[str]:
    runs = set()
    for line in KEYBOARD_ROWS + KEYBOARD_COLUMNS:
        for i in range(len(line) - WINDOW + 1):
            chunk = line[i:i + WINDOW]
            runs.add(chunk)
            runs.add(chunk[::-1])
    return frozenset(runs)


# Built once at import, never mutated
KEYBOARD_WINDOWS: FrozenSet[str] = _build_keyboard_windows()


def _windows(text: str) -> Iterator[str]:
    for i in range(len(text) - WINDOW + 1):
        yield text[i:i + WINDOW]


def has_repeats(password: str) -> bool:
    """Three identical characters in a row."""
    return any(len(set(w)) == 1 for w in _windows(password.lower()))


def has_sequence(password: str) -> bool:
    """
    Three characters stepping by +1 or -1 code point ("abc", "321").

    A run of one character ("111") has step 0 and is not a sequence;
    has_repeats() reports it instead.
    """
    for w in _windows(password.lower()):
        a, b, c = (ord(ch) for ch in w)
        step = b - a
        if step in (1, -1) and c - b == step:
            return True
    return False


def has_keyboard_pattern(password: str) -> bool:
    """Three adjacent keys along a keyboard row or column ("qwe", "dsa", "zaq")."""
    return any(w in KEYBOARD_WINDOWS for w in _windows(password.lower()))


def detect_patterns(password: str) -> PatternReport:
    return PatternReport(
        has_repeats=has_repeats(password),
        has_sequence=has_sequence(password),
        has_keyboard_pattern=has_keyboard_pattern(password),
    )
