"""
services/feedback.py
====================
Feedback Formatter: caller translations over built-in defaults.

    format_message("length_too_short", "Use at least 8 characters.",
                   {"length_too_short": "Mindestens {min_length} Zeichen."},
                   {"min_length": 8})
    → "Mindestens 8 Zeichen."

List-valued params hold message keys (e.g. the missing character classes);
each is looked up the same way and the results are joined with ", ".
"""
import logging
from typing import Any, Iterable, List, Mapping, Optional

from core.translator import load_catalog, DEFAULT_LANGUAGE

logger = logging.getLogger(__name__)


def _lookup(key: str, i18n: Optional[Mapping[str, str]]) -> Optional[str]:
    if i18n:
        value = i18n.get(key)
        if value:
            return value
    return None


def _render_params(params: Mapping[str, Any], i18n: Optional[Mapping[str, str]]) -> dict:
    defaults = load_catalog(DEFAULT_LANGUAGE)
    rendered = {}
    for name, value in params.items():
        if isinstance(value, (list, tuple)):
            rendered[name] = ", ".join(
                _lookup(str(item), i18n) or defaults.get(str(item), str(item))
                for item in value
            )
        else:
            rendered[name] = value
    return rendered


def format_message(key: Optional[str], default_message: str,
                   i18n: Optional[Mapping[str, str]] = None,
                   params: Optional[Mapping[str, Any]] = None) -> str:
    """
    `i18n[key]` when present and non-empty, else `default_message`.

    A translated template is filled from `params`; if it does not format
    (unknown placeholder, stray brace, indexing or attribute access the
    value does not support) it is returned as written.
    """
    template = _lookup(key, i18n) if key else None
    if template is None:
        return default_message

    if not params:
        return template

    try:
        return template.format_map(_render_params(params, i18n))
    except (KeyError, IndexError, ValueError, TypeError, AttributeError) as e:
        logger.warning(f"Translation for '{key}' could not be formatted: {e!r}")
        return template


def dedupe(messages: Iterable[str]) -> List[str]:
    """Drop repeated messages, keeping first-seen order."""
    return list(dict.fromkeys(messages))
