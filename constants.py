"""
PASSGAUGE Constants - Single Source of Truth
============================================

This file contains all constants used across the library.
Using constants instead of magic strings prevents typos and makes refactoring easier.
"""


class RuleNames:
    """
    Built-in rule identifiers.

    Usage:
        from constants import RuleNames as R
        options = {"disabled_rules": {R.PATTERN}}
    """

    LENGTH = "length"
    VARIETY = "variety"
    ENTROPY = "entropy"
    PATTERN = "pattern"
    COMMON = "common"
    BLACKLIST = "blacklist"

    # Iteration order of the default rule set
    ALL = (LENGTH, VARIETY, ENTROPY, PATTERN, COMMON, BLACKLIST)


class Severity:
    """Where a failed rule's message lands in the feedback."""

    ADVISORY = "advisory"   # → feedback.suggestions
    CRITICAL = "critical"   # → feedback.warnings

    ALL = (ADVISORY, CRITICAL)


class Strength:
    """
    Strength tiers, weakest first.

    THRESHOLDS holds (inclusive lower bound, tier) pairs in ascending order.
    """

    VERY_WEAK = "very-weak"
    WEAK = "weak"
    MODERATE = "moderate"
    STRONG = "strong"
    EXCELLENT = "excellent"

    ORDER = (VERY_WEAK, WEAK, MODERATE, STRONG, EXCELLENT)

    THRESHOLDS = (
        (0, VERY_WEAK),
        (20, WEAK),
        (40, MODERATE),
        (60, STRONG),
        (85, EXCELLENT),
    )


class CharClasses:
    """Character classes and the alphabet size each contributes to the pool."""

    LOWER = "lower"
    UPPER = "upper"
    DIGIT = "digit"
    SYMBOL = "symbol"

    ALL = (LOWER, UPPER, DIGIT, SYMBOL)

    POOL_SIZES = {
        LOWER: 26,
        UPPER: 26,
        DIGIT: 10,
        SYMBOL: 33,
    }


class MessageKeys:
    """Feedback message keys (see core/i18n/en.py for default texts)."""

    LENGTH_TOO_SHORT = "length_too_short"
    LENGTH_TOO_LONG = "length_too_long"
    VARIETY_LOW = "variety_low"
    ENTROPY_LOW = "entropy_low"
    PATTERN_REPEATS = "pattern_repeats"
    PATTERN_SEQUENCE = "pattern_sequence"
    PATTERN_KEYBOARD = "pattern_keyboard"
    COMMON_PASSWORD = "common_password"
    BLACKLISTED = "blacklisted"

    # Names of character classes, used to fill {missing}
    CLASS_LOWER = "class_lower"
    CLASS_UPPER = "class_upper"
    CLASS_DIGIT = "class_digit"
    CLASS_SYMBOL = "class_symbol"


class Scoring:
    """Numeric knobs of the built-in rules and of aggregation."""

    MAX_RULE_SCORE = 10.0

    DEFAULT_MIN_LENGTH = 8
    DEFAULT_MAX_LENGTH = 128

    # length: full marks this many characters past min_length
    LENGTH_BONUS_SPAN = 8

    # variety: valid from this many classes
    VARIETY_MIN_CLASSES = 3

    # entropy (bits)
    ENTROPY_STRONG_BITS = 50.0
    ENTROPY_CEILING_BITS = 100.0

    # pattern: points lost per raised flag
    PATTERN_PENALTY = 4.0

    # dictionary/blacklist substring matching
    MIN_TERM_LENGTH = 3

    # default weights of the critical rules
    COMMON_WEIGHT = 3.0
    BLACKLIST_WEIGHT = 2.0


class ConfigKeys:
    """Keys read through core.config.Config (.env / config/settings.json)."""

    MIN_LENGTH = "PASSGAUGE_MIN_LENGTH"
    MAX_LENGTH = "PASSGAUGE_MAX_LENGTH"
    DICTIONARY_FILE = "PASSGAUGE_DICTIONARY_FILE"
    LOG_LEVEL = "LOG_LEVEL"
