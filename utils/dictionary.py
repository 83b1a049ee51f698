# -*- coding: utf-8 -*-
"""
utils/dictionary.py
=====================
Default common-password dictionary.

Loaded once per process from utils/data/common_passwords.txt, or from the
file named by PASSGAUGE_DICTIONARY_FILE, and shared as a frozenset.
"""
import logging
from functools import lru_cache
from pathlib import Path
from typing import FrozenSet, Iterable, Union

from constants import ConfigKeys
from core.config import get_config
from core.paths import data_path
from exceptions import ConfigurationError
from utils.matcher import longest_term, normalize_terms

logger = logging.getLogger(__name__)

DEFAULT_WORDLIST = "common_passwords.txt"


def parse_wordlist(lines: Iterable[str]) -> FrozenSet[str]:
    """Normalized terms from word-list lines; blanks and '#' comments are skipped."""
    return normalize_terms(
        line for line in lines
        if line.strip() and not line.lstrip().startswith("#")
    )


def load_wordlist(path: Union[str, Path]) -> FrozenSet[str]:
    """Read a word list file (UTF-8, one term per line)."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            words = parse_wordlist(f)
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read word list: {path}", option="dictionary", detail=str(e)
        ) from e
    logger.info(f"Loaded {len(words)} dictionary terms from {path}")
    return words


@lru_cache(maxsize=1)
def default_dictionary() -> FrozenSet[str]:
    """The process-wide default dictionary (read once, never mutated)."""
    custom = get_config().get_path(ConfigKeys.DICTIONARY_FILE)
    return load_wordlist(custom if custom else data_path(DEFAULT_WORDLIST))


@lru_cache(maxsize=1)
def default_longest_term() -> int:
    """Longest term of default_dictionary(), the substring size ceiling."""
    return longest_term(default_dictionary())
