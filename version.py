"""
version.py — PASSGAUGE
======================
Single source of truth for the package name and version number.
Used by:
  - pyproject.toml (kept in sync by hand)
  - the command line (--version)
"""

APP_NAME = "PASSGAUGE"
VERSION  = "1.0.0"
BUILD    = "2026.10.19"
