"""
core/translator.py — PASSGAUGE
==============================
Built-in feedback message catalogs.

Each language lives in core/i18n/<code>.py and exposes a `translations` dict.
Catalogs are loaded on first use and handed out as read-only mappings, so
they can be shared between concurrent evaluations.

Usage:
    from core.translator import load_catalog, default_message

    evaluate(password, {"i18n": load_catalog("ar")})
    default_message("length_too_short", {"min_length": 8})
"""
import logging
import importlib
import pkgutil
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Mapping, Optional, FrozenSet

from exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"


@lru_cache(maxsize=1)
def supported_languages() -> FrozenSet[str]:
    """Language codes discovered inside the core.i18n package."""
    import core.i18n

    languages = frozenset(
        module.name for module in pkgutil.iter_modules(core.i18n.__path__)
    )
    logger.debug(f"Discovered languages: {sorted(languages)}")
    return languages


@lru_cache(maxsize=None)
def load_catalog(language: str = DEFAULT_LANGUAGE) -> Mapping[str, str]:
    """
    Return the read-only message catalog for `language`.

    Raises:
        ConfigurationError: unknown language or malformed catalog module
    """
    lang = (language or "").strip().lower()

    if lang not in supported_languages():
        raise ConfigurationError(f"Unsupported language: {language!r}", option="i18n")

    module_path = f"core.i18n.{lang}"
    module = importlib.import_module(module_path)
    translations = getattr(module, "translations", None)

    if not isinstance(translations, dict):
        raise ConfigurationError(
            f"'translations' in {module_path} must be dict", option="i18n"
        )

    logger.debug(f"Loaded {len(translations)} translations for {lang}")
    return MappingProxyType(dict(translations))


def default_message(key: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """
    English text for `key` with placeholders filled from `params`.

    Unknown keys come back as the key itself.
    """
    template = load_catalog(DEFAULT_LANGUAGE).get(key)
    if template is None:
        logger.debug(f"Missing translation key: {key}")
        return key
    if not params:
        return template
    return template.format_map(_english_params(params))


def _english_params(params: Mapping[str, Any]) -> dict:
    # list-valued params hold message keys (e.g. missing character classes)
    catalog = load_catalog(DEFAULT_LANGUAGE)
    rendered = {}
    for name, value in params.items():
        if isinstance(value, (list, tuple)):
            rendered[name] = ", ".join(catalog.get(str(item), str(item)) for item in value)
        else:
            rendered[name] = value
    return rendered
