"""
core/paths.py — PASSGAUGE
=========================
Single source of truth for every path the library reads.

  - BASE_DIR → where the packages live (read-only)
    - development checkout: project root
    - installed: site-packages (the packages sit side by side)

Usage:
    from core.paths import config_path, data_path

    settings = config_path("settings.json")
    words = data_path("common_passwords.txt")
"""

from pathlib import Path

# core/paths.py → go up one folder
BASE_DIR = Path(__file__).resolve().parent.parent


def config_path(filename: str = "") -> Path:
    """Settings folder, or a file inside it."""
    p = BASE_DIR / "config"
    return p / filename if filename else p


def data_path(filename: str = "") -> Path:
    """Bundled data folder (word lists), or a file inside it."""
    p = BASE_DIR / "utils" / "data"
    return p / filename if filename else p
