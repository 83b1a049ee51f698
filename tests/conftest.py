"""
tests/conftest.py
=================
Shared pytest fixtures — no .env, no settings.json, no environment leaks.
"""
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest

from constants import ConfigKeys
from core.config import Config
from core.translator import load_catalog, supported_languages
from utils.dictionary import default_dictionary, default_longest_term


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Fresh Config per test, pointed at empty temp files."""
    for key in (ConfigKeys.MIN_LENGTH, ConfigKeys.MAX_LENGTH,
                ConfigKeys.DICTIONARY_FILE, ConfigKeys.LOG_LEVEL):
        monkeypatch.delenv(key, raising=False)

    Config.clear_instance()
    default_dictionary.cache_clear()
    default_longest_term.cache_clear()
    Config(env_file=tmp_path / "missing.env", config_file=tmp_path / "missing.json")
    yield
    Config.clear_instance()
    default_dictionary.cache_clear()
    default_longest_term.cache_clear()
    load_catalog.cache_clear()
    supported_languages.cache_clear()


@pytest.fixture
def write_config(tmp_path):
    """Replace the Config singleton with one reading the given JSON data."""
    import json

    def _write(data: dict) -> Config:
        path = tmp_path / "settings.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        Config.clear_instance()
        default_dictionary.cache_clear()
        default_longest_term.cache_clear()
        return Config(env_file=tmp_path / "missing.env", config_file=path)

    return _write
