# core/__init__.py
"""
PASSGAUGE Core Module
=====================

Central module providing the ambient pieces every other module leans on.

Public API:
    - Configuration: Config, get_config
    - Messages: load_catalog, default_message, supported_languages
    - Models: RuleOutcome, RuleContext, PatternReport, MatchReport,
              Feedback, EvaluationResult
    - Logging: LoggingConfig
"""

# Configuration
from .config import Config, get_config

# Messages
from .translator import load_catalog, default_message, supported_languages

# Models
from .models import (
    RuleOutcome,
    RuleContext,
    PatternReport,
    MatchReport,
    Feedback,
    EvaluationResult,
)

# Utilities
from .singleton import SingletonMeta

# Logging
from .logging_config import LoggingConfig

__all__ = [
    # Configuration
    "Config",
    "get_config",

    # Messages
    "load_catalog",
    "default_message",
    "supported_languages",

    # Models
    "RuleOutcome",
    "RuleContext",
    "PatternReport",
    "MatchReport",
    "Feedback",
    "EvaluationResult",

    # Utilities
    "SingletonMeta",
    "LoggingConfig",
]
