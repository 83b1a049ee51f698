# -*- coding: utf-8 -*-
"""
utils/password_utils.py
=========================
Pure password utility functions — zero external dependencies.

Entropy estimate:
  pool  = sum of the alphabet sizes of the classes present
          lowercase 26, uppercase 26, digit 10, symbol 33
  bits  = length * log2(pool)

Anything that is not an ASCII letter or digit counts as a symbol,
non-ASCII characters included.
"""
import math
import string
from typing import FrozenSet

from constants import CharClasses

_LOWER = frozenset(string.ascii_lowercase)
_UPPER = frozenset(string.ascii_uppercase)
_DIGIT = frozenset(string.digits)


def char_class(ch: str) -> str:
    """Class name of a single character."""
    if ch in _LOWER:
        return CharClasses.LOWER
    if ch in _UPPER:
        return CharClasses.UPPER
    if ch in _DIGIT:
        return CharClasses.DIGIT
    return CharClasses.SYMBOL


def character_classes(password: str) -> FrozenSet[str]:
    """Set of character classes represented in `password`."""
    return frozenset(char_class(ch) for ch in password)


def pool_size(password: str) -> int:
    """Alphabet size implied by the classes present (0 for empty)."""
    return sum(CharClasses.POOL_SIZES[c] for c in character_classes(password))


def estimate_entropy(password: str) -> float:
    """
    Bits of entropy of `password` from its length and class variety.

    0.0 for an empty password or a pool of at most one symbol.
    """
    if not password:
        return 0.0

    pool = pool_size(password)
    if pool <= 1:
        return 0.0
    return len(password) * math.log2(pool)
