"""
services/evaluator.py
=====================
Evaluation Orchestrator — the library entry point.

    from services.evaluator import evaluate

    result = evaluate("Tr0ub4dor&3", {"min_length": 10, "user_inputs": {"alice"}})
    result.percentage, result.strength, result.feedback.warnings

Flow:
  1. validate options (ConfigurationError, nothing evaluated)
  2. effective rules = (rules or defaults) minus disabled_rules
  3. shared context built once (entropy, patterns, matches, merged blacklist)
  4. every rule runs behind a fault barrier; weighted scores accumulate
  5. percentage → strength tier; failed rules → suggestions / warnings

Pure and synchronous: no shared mutable state, no clock, no randomness.
"""
import logging
import math
from numbers import Real
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from constants import Scoring, Strength
from core.models import EvaluationResult, Feedback, RuleContext, RuleOutcome
from exceptions import ConfigurationError, RuleExecutionError
from services.feedback import dedupe, format_message
from services.options import EvaluationOptions, coerce_options
from services.rules import Rule, default_rules
from utils.dictionary import default_dictionary, default_longest_term
from utils.matcher import match_terms
from utils.password_utils import character_classes, estimate_entropy
from utils.patterns import detect_patterns

logger = logging.getLogger(__name__)


def strength_for(percentage: int) -> str:
    """Tier for a percentage (inclusive lower bounds, see Strength.THRESHOLDS)."""
    tier = Strength.VERY_WEAK
    for lower_bound, name in Strength.THRESHOLDS:
        if percentage >= lower_bound:
            tier = name
    return tier


def to_percentage(score: float, max_possible: float) -> int:
    if max_possible <= 0:
        return 0
    # half-up rounding
    value = math.floor(100.0 * score / max_possible + 0.5)
    return int(min(100, max(0, value)))


def resolve_rules(rules: Optional[Iterable[Rule]], options: EvaluationOptions) -> Tuple[Rule, ...]:
    """(rules or defaults) minus options.disabled_rules, order preserved."""
    candidates = tuple(default_rules() if rules is None else rules)

    seen = set()
    for item in candidates:
        if not isinstance(item, Rule):
            raise ConfigurationError(
                f"rules must contain Rule values, got {type(item).__name__}", option="rules"
            )
        if item.name in seen:
            raise ConfigurationError(f"Duplicate rule name: '{item.name}'", option="rules")
        seen.add(item.name)

    return tuple(r for r in candidates if r.name not in options.disabled_rules)


def build_context(password: str, options: EvaluationOptions) -> RuleContext:
    if options.dictionary is not None:
        dictionary, dictionary_longest = options.dictionary, options.longest_dictionary_term
    else:
        dictionary, dictionary_longest = default_dictionary(), default_longest_term()
    blacklist = options.merged_blacklist
    return RuleContext(
        min_length=options.min_length,
        max_length=options.max_length,
        blacklist=blacklist,
        dictionary=dictionary,
        entropy_bits=estimate_entropy(password),
        char_classes=character_classes(password),
        patterns=detect_patterns(password),
        matches=match_terms(password, dictionary, blacklist,
                            dictionary_longest, options.longest_blacklist_term),
    )


def _malformed_reason(outcome: Any) -> Optional[str]:
    if not isinstance(outcome, RuleOutcome):
        return f"returned {type(outcome).__name__} instead of RuleOutcome"
    if not isinstance(outcome.is_valid, bool):
        return f"is_valid must be bool, got {outcome.is_valid!r}"
    score = outcome.raw_score
    if isinstance(score, bool) or not isinstance(score, Real) or not math.isfinite(score):
        return f"raw_score must be a finite number, got {score!r}"
    if not 0 <= score <= Scoring.MAX_RULE_SCORE:
        return f"raw_score must be within 0..{Scoring.MAX_RULE_SCORE}, got {score!r}"
    if outcome.message is not None and not isinstance(outcome.message, str):
        return f"message must be a string or None, got {type(outcome.message).__name__}"
    if outcome.message_key is not None and not isinstance(outcome.message_key, str):
        return f"message_key must be a string or None, got {outcome.message_key!r}"
    if outcome.message_params is not None and not isinstance(outcome.message_params, Mapping):
        return f"message_params must be a mapping, got {type(outcome.message_params).__name__}"
    return None


def run_rule(rule: Rule, password: str, context: RuleContext) -> RuleOutcome:
    """
    Evaluate one rule; a raising or malformed rule yields an invalid,
    zero-score outcome carrying a diagnostic instead of aborting.
    """
    try:
        outcome = rule.evaluate(password, context)
    except Exception as e:
        error = RuleExecutionError(rule.name, f"raised {type(e).__name__}: {e}")
        logger.warning(str(error), exc_info=True)
        return RuleOutcome(rule.name, False, 0.0, diagnostic=str(error))

    reason = _malformed_reason(outcome)
    if reason:
        error = RuleExecutionError(rule.name, reason)
        logger.warning(str(error))
        return RuleOutcome(rule.name, False, 0.0, diagnostic=str(error))

    if outcome.rule_name != rule.name:
        logger.debug(f"Rule '{rule.name}' reported name '{outcome.rule_name}'; using '{rule.name}'")
    return RuleOutcome(
        rule_name=rule.name,
        is_valid=outcome.is_valid,
        raw_score=float(outcome.raw_score),
        message=outcome.message or None,
        message_key=outcome.message_key,
        message_params=dict(outcome.message_params or {}),
        diagnostic=outcome.diagnostic,
    )


def _feedback(pairs: Sequence[Tuple[Rule, RuleOutcome]], options: EvaluationOptions) -> Feedback:
    suggestions: List[str] = []
    warnings: List[str] = []

    for rule, outcome in pairs:
        if outcome.is_valid or not outcome.message:
            continue
        text = format_message(outcome.message_key, outcome.message,
                              options.i18n, outcome.message_params)
        (warnings if rule.is_critical else suggestions).append(text)

    return Feedback(suggestions=tuple(dedupe(suggestions)), warnings=tuple(dedupe(warnings)))


def evaluate(password: Optional[str], options: Any = None,
             rules: Optional[Iterable[Rule]] = None) -> EvaluationResult:
    """
    Score `password` against the effective rule set.

    Args:
        password: any string; None is treated as ""
        options: None, a mapping or EvaluationOptions
        rules: rule sequence replacing default_rules()

    Raises:
        ConfigurationError: invalid options or rule list
        TypeError: password is not a string
    """
    if password is None:
        password = ""
    if not isinstance(password, str):
        raise TypeError(f"password must be a string, got {type(password).__name__}")

    opts = coerce_options(options)
    active = resolve_rules(rules, opts)
    context = build_context(password, opts)

    score = 0.0
    max_possible = 0.0
    pairs: List[Tuple[Rule, RuleOutcome]] = []

    for rule in active:
        outcome = run_rule(rule, password, context)
        weight = opts.weight_for(rule.name, rule.default_weight)
        score += outcome.raw_score * weight
        max_possible += Scoring.MAX_RULE_SCORE * weight
        pairs.append((rule, outcome))

    percentage = to_percentage(score, max_possible)
    strength = strength_for(percentage)

    logger.debug(
        f"Evaluated {len(active)} rules: score={score:.2f}/{max_possible:.2f} "
        f"({percentage}%, {strength})"
    )

    return EvaluationResult(
        score=score,
        percentage=percentage,
        strength=strength,
        feedback=_feedback(pairs, opts),
        details=tuple(outcome for _, outcome in pairs),
    )
