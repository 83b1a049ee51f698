"""
services/rules.py
=================
The rule set: named, stateless scoring checks.

A rule is a plain value — a name, an evaluate(password, context) callable,
a default weight and a severity. Built-in and custom rules share that shape
and are composed as an ordered tuple:

    from services.rules import Rule, default_rules, rule

    @rule("no_spaces")
    def no_spaces(password, context):
        ok = " " not in password
        return RuleOutcome("no_spaces", ok, 10.0 if ok else 0.0,
                           None if ok else "Remove spaces.")

    evaluate(password, rules=default_rules() + (no_spaces,))

Every built-in scores on a 0–10 scale (Scoring.MAX_RULE_SCORE).
"""
import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from constants import CharClasses, MessageKeys, RuleNames, Scoring, Severity
from core.models import RuleContext, RuleOutcome
from core.translator import default_message
from exceptions import ConfigurationError

MAX_SCORE = Scoring.MAX_RULE_SCORE

Evaluator = Callable[[str, RuleContext], RuleOutcome]


@dataclass(frozen=True)
class Rule:
    """
    A named check plus its default weight and severity.

    `default_weight` applies when options.rule_weights has no entry for
    the rule. It is 1.0 for every rule except `common` (3.0) and
    `blacklist` (2.0): at unit weights a bare dictionary word such as
    "password" passes enough other rules to land in "moderate".
    """
    name: str
    evaluate: Evaluator
    default_weight: float = 1.0
    severity: str = Severity.ADVISORY

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ConfigurationError(f"Rule name must be a non-empty string, got {self.name!r}",
                                     option="rules")
        if not callable(self.evaluate):
            raise ConfigurationError(f"Rule '{self.name}' needs a callable evaluate",
                                     option="rules")
        weight = self.default_weight
        if isinstance(weight, bool) or not isinstance(weight, Real) \
                or not math.isfinite(weight) or weight < 0:
            raise ConfigurationError(
                f"Rule '{self.name}' default_weight must be a non-negative number",
                option="rules",
            )
        if self.severity not in Severity.ALL:
            raise ConfigurationError(
                f"Rule '{self.name}' severity must be one of {Severity.ALL}",
                option="rules",
            )

    @property
    def is_critical(self) -> bool:
        return self.severity == Severity.CRITICAL


def rule(name: str, *, default_weight: float = 1.0, severity: str = Severity.ADVISORY):
    """Decorator turning an evaluate(password, context) function into a Rule."""
    def wrap(func: Evaluator) -> Rule:
        return Rule(name, func, default_weight, severity)
    return wrap


def _outcome(name: str, valid: bool, score: float,
             key: Optional[str] = None, params: Optional[Mapping[str, Any]] = None) -> RuleOutcome:
    params = dict(params or {})
    message = default_message(key, params) if key and not valid else None
    return RuleOutcome(
        rule_name=name,
        is_valid=valid,
        raw_score=float(score),
        message=message,
        message_key=key if message else None,
        message_params=params if message else {},
    )


# ─── Built-in rules ──────────────────────────────────────────────────────────

def check_length(password: str, context: RuleContext) -> RuleOutcome:
    """0 outside the bounds; else rises with the characters past min_length."""
    n = len(password)
    if n < context.min_length:
        return _outcome(RuleNames.LENGTH, False, 0.0,
                        MessageKeys.LENGTH_TOO_SHORT, {"min_length": context.min_length})
    if n > context.max_length:
        return _outcome(RuleNames.LENGTH, False, 0.0,
                        MessageKeys.LENGTH_TOO_LONG, {"max_length": context.max_length})

    extra = n - context.min_length
    score = min(MAX_SCORE, extra * MAX_SCORE / Scoring.LENGTH_BONUS_SPAN)
    return _outcome(RuleNames.LENGTH, True, score)


_CLASS_KEYS: Dict[str, str] = {
    CharClasses.LOWER: MessageKeys.CLASS_LOWER,
    CharClasses.UPPER: MessageKeys.CLASS_UPPER,
    CharClasses.DIGIT: MessageKeys.CLASS_DIGIT,
    CharClasses.SYMBOL: MessageKeys.CLASS_SYMBOL,
}


def check_variety(password: str, context: RuleContext) -> RuleOutcome:
    """One step per character class beyond the first; 4 classes = 10."""
    present = len(context.char_classes)
    steps = len(CharClasses.ALL) - 1
    score = max(0, present - 1) * MAX_SCORE / steps
    valid = present >= Scoring.VARIETY_MIN_CLASSES

    missing = tuple(_CLASS_KEYS[c] for c in CharClasses.ALL if c not in context.char_classes)
    return _outcome(RuleNames.VARIETY, valid, score,
                    MessageKeys.VARIETY_LOW, {"missing": missing})


def check_entropy(password: str, context: RuleContext) -> RuleOutcome:
    bits = context.entropy_bits
    score = MAX_SCORE * min(1.0, bits / Scoring.ENTROPY_CEILING_BITS)
    valid = bits >= Scoring.ENTROPY_STRONG_BITS
    return _outcome(RuleNames.ENTROPY, valid, score,
                    MessageKeys.ENTROPY_LOW, {"bits": round(bits, 1)})


def check_pattern(password: str, context: RuleContext) -> RuleOutcome:
    """10 less PATTERN_PENALTY per flag raised, scaled by length coverage."""
    patterns = context.patterns
    flags = patterns.flag_count
    score = max(0.0, MAX_SCORE - Scoring.PATTERN_PENALTY * flags)
    score *= context.length_coverage(password)

    if patterns.has_repeats:
        key = MessageKeys.PATTERN_REPEATS
    elif patterns.has_sequence:
        key = MessageKeys.PATTERN_SEQUENCE
    elif patterns.has_keyboard_pattern:
        key = MessageKeys.PATTERN_KEYBOARD
    else:
        key = None
    return _outcome(RuleNames.PATTERN, flags == 0, score, key)


def check_common(password: str, context: RuleContext) -> RuleOutcome:
    if context.matches.in_dictionary:
        return _outcome(RuleNames.COMMON, False, 0.0, MessageKeys.COMMON_PASSWORD)
    return _outcome(RuleNames.COMMON, True, MAX_SCORE * context.length_coverage(password))


def check_blacklist(password: str, context: RuleContext) -> RuleOutcome:
    if context.matches.in_blacklist:
        return _outcome(RuleNames.BLACKLIST, False, 0.0, MessageKeys.BLACKLISTED)
    return _outcome(RuleNames.BLACKLIST, True, MAX_SCORE * context.length_coverage(password))


LENGTH_RULE = Rule(RuleNames.LENGTH, check_length)
VARIETY_RULE = Rule(RuleNames.VARIETY, check_variety)
ENTROPY_RULE = Rule(RuleNames.ENTROPY, check_entropy)
PATTERN_RULE = Rule(RuleNames.PATTERN, check_pattern)
COMMON_RULE = Rule(RuleNames.COMMON, check_common,
                   default_weight=Scoring.COMMON_WEIGHT, severity=Severity.CRITICAL)
BLACKLIST_RULE = Rule(RuleNames.BLACKLIST, check_blacklist,
                      default_weight=Scoring.BLACKLIST_WEIGHT, severity=Severity.CRITICAL)

DEFAULT_RULES: Tuple[Rule, ...] = (
    LENGTH_RULE,
    VARIETY_RULE,
    ENTROPY_RULE,
    PATTERN_RULE,
    COMMON_RULE,
    BLACKLIST_RULE,
)


def default_rules() -> Tuple[Rule, ...]:
    """The built-in rule sequence; extend it with `default_rules() + (my_rule,)`."""
    return DEFAULT_RULES
