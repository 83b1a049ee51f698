# -*- coding: utf-8 -*-
"""
utils/matcher.py
==================
Dictionary/Blacklist Matcher.

A term matches when it equals the lowercased password, or when it is at
least MIN_TERM_LENGTH characters long and appears inside it. Shorter terms
only ever match exactly, so a one-letter blacklist entry does not flag
every password containing that letter.

Lookups walk the password's substrings (longest first, then leftmost) and
probe the term set. Substrings longer than the longest term are never
probed, so the cost grows with len(password) * longest term, not with
the size of the dictionary.
"""
from typing import FrozenSet, Iterable, Optional

from constants import Scoring
from core.models import MatchReport

MIN_TERM_LENGTH = Scoring.MIN_TERM_LENGTH


def normalize_terms(terms: Optional[Iterable[str]]) -> FrozenSet[str]:
    """Strip and lowercase `terms`, dropping empty entries."""
    if not terms:
        return frozenset()
    if isinstance(terms, str):
        terms = (terms,)
    normalized = (str(term).strip().lower() for term in terms)
    return frozenset(term for term in normalized if term)


def longest_term(terms: Iterable[str]) -> int:
    """Length of the longest term, 0 for an empty set."""
    return max((len(term) for term in terms), default=0)


def find_term(password: str, terms: FrozenSet[str], longest: Optional[int] = None) -> Optional[str]:
    """
    First term of `terms` found in `password`, or None.

    `terms` must already be normalized. Exact equality wins over
    containment; among substrings the longest, then leftmost, wins.
    `longest` is longest_term(terms); pass it when the set is reused.
    """
    if not password or not terms:
        return None

    lowered = password.lower()
    if lowered in terms:
        return lowered

    if longest is None:
        longest = longest_term(terms)
    n = len(lowered)
    for size in range(min(n - 1, longest), MIN_TERM_LENGTH - 1, -1):
        for start in range(n - size + 1):
            candidate = lowered[start:start + size]
            if candidate in terms:
                return candidate
    return None


def match_terms(password: str, dictionary: FrozenSet[str], blacklist: FrozenSet[str],
                dictionary_longest: Optional[int] = None,
                blacklist_longest: Optional[int] = None) -> MatchReport:
    """
    Check `password` against the dictionary and the (merged) blacklist.

    The reported term prefers a blacklist hit over a dictionary hit;
    personal information leaking into a password is the graver finding.
    """
    blacklist_term = find_term(password, blacklist, blacklist_longest)
    dictionary_term = find_term(password, dictionary, dictionary_longest)

    return MatchReport(
        in_dictionary=dictionary_term is not None,
        in_blacklist=blacklist_term is not None,
        matched_term=blacklist_term if blacklist_term is not None else dictionary_term,
    )
