# -*- coding: utf-8 -*-
"""
tests/test_evaluator.py
=========================
Tests for services.evaluator — aggregation, tiers, feedback, fault isolation.
"""
import logging
import time

import pytest

from constants import RuleNames, Severity, Strength
from core.models import EvaluationResult, RuleOutcome
from core.translator import load_catalog
from exceptions import ConfigurationError
from services.evaluator import evaluate, resolve_rules, strength_for, to_percentage
from services.options import EvaluationOptions
from services.rules import Rule, default_rules, rule


def detail(result, name):
    return next(d for d in result.details if d.rule_name == name)


# ══════════════════════════════════════════════════════════════════════════════
# Tiers and percentage
# ══════════════════════════════════════════════════════════════════════════════

class TestStrengthFor:

    @pytest.mark.parametrize("percentage,tier", [
        (0, Strength.VERY_WEAK),
        (19, Strength.VERY_WEAK),
        (20, Strength.WEAK),
        (39, Strength.WEAK),
        (40, Strength.MODERATE),
        (59, Strength.MODERATE),
        (60, Strength.STRONG),
        (84, Strength.STRONG),
        (85, Strength.EXCELLENT),
        (100, Strength.EXCELLENT),
    ])
    def test_thresholds(self, percentage, tier):
        assert strength_for(percentage) == tier


class TestToPercentage:

    def test_zero_denominator(self):
        assert to_percentage(0.0, 0.0) == 0

    def test_rounds_half_up(self):
        assert to_percentage(1.0, 8.0) == 13     # 12.5

    def test_clamped(self):
        assert to_percentage(200.0, 10.0) == 100

    def test_monotonic_in_score(self):
        values = [to_percentage(s / 10, 60.0) for s in range(0, 601)]
        assert values == sorted(values)


# ══════════════════════════════════════════════════════════════════════════════
# Scenarios
# ══════════════════════════════════════════════════════════════════════════════

class TestScenarios:

    def test_empty_password(self):
        result = evaluate("", {"min_length": 8})
        assert not detail(result, RuleNames.LENGTH).is_valid
        assert detail(result, RuleNames.ENTROPY).raw_score == 0.0
        assert result.strength == Strength.VERY_WEAK
        assert result.percentage == 0

    def test_common_password(self):
        result = evaluate("password", {})
        assert not detail(result, RuleNames.COMMON).is_valid
        assert result.feedback.warnings
        assert result.strength in (Strength.VERY_WEAK, Strength.WEAK)

    def test_strong_password(self):
        result = evaluate("Tr0ub4dor&3xyz!", {})
        for name in (RuleNames.LENGTH, RuleNames.VARIETY, RuleNames.ENTROPY,
                     RuleNames.COMMON, RuleNames.BLACKLIST):
            assert detail(result, name).is_valid, name
        assert result.strength in (Strength.STRONG, Strength.EXCELLENT)
        assert not result.feedback.warnings

    def test_repeats_penalized(self):
        result = evaluate("aaa111", {"min_length": 6, "max_length": 20})
        pattern = detail(result, RuleNames.PATTERN)
        assert not pattern.is_valid
        assert 0 < pattern.raw_score < 10
        assert result.score > 0

    def test_over_length_is_a_rule_failure(self):
        result = evaluate("a" * 300, {"max_length": 128})
        length = detail(result, RuleNames.LENGTH)
        assert not length.is_valid
        assert length.message == "Use no more than 128 characters."

    @pytest.mark.parametrize("pw", ["\x00\x01\x02", "пароль123", "密码密码密码", "\t \n", "🔐🔐🔐🔐"])
    def test_any_content_evaluates(self, pw):
        result = evaluate(pw)
        assert isinstance(result, EvaluationResult)
        assert 0 <= result.percentage <= 100

    def test_none_is_empty(self):
        assert evaluate(None) == evaluate("")

    def test_non_string_rejected(self):
        with pytest.raises(TypeError):
            evaluate(12345678)


# ══════════════════════════════════════════════════════════════════════════════
# Invariants
# ══════════════════════════════════════════════════════════════════════════════

SAMPLES = [
    "", "a", "abc", "password", "P@ssw0rd", "aaa111", "qwerty123",
    "correct horse battery staple", "Tr0ub4dor&3xyz!", "x" * 200, "Zq7$kP2!mW9#",
]


class TestInvariants:

    @pytest.mark.parametrize("pw", SAMPLES)
    def test_percentage_bounds_and_tier(self, pw):
        result = evaluate(pw)
        assert 0 <= result.percentage <= 100
        assert result.strength == strength_for(result.percentage)
        assert result.score >= 0

    @pytest.mark.parametrize("pw", SAMPLES)
    def test_deterministic(self, pw):
        options = {"user_inputs": ["alice"], "blacklist": ["acme"]}
        first = evaluate(pw, options)
        second = evaluate(pw, options)
        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_adding_classes_never_lowers_percentage(self):
        chain = ["correcthorse", "correcthorse7", "correcthorse7Q", "correcthorse7Q%"]
        percentages = [evaluate(pw).percentage for pw in chain]
        assert percentages == sorted(percentages)

    def test_details_in_rule_order(self):
        result = evaluate("whatever")
        assert tuple(d.rule_name for d in result.details) == RuleNames.ALL

    def test_disable_all(self):
        result = evaluate("Tr0ub4dor&3xyz!", {"disabled_rules": set(RuleNames.ALL)})
        assert result.percentage == 0
        assert result.details == ()
        assert result.score == 0
        assert result.strength == Strength.VERY_WEAK

    def test_disabled_rule_leaves_denominator(self):
        # with only the length rule left, a long password scores 100%
        others = set(RuleNames.ALL) - {RuleNames.LENGTH}
        result = evaluate("a" * 40, {"disabled_rules": others})
        assert [d.rule_name for d in result.details] == [RuleNames.LENGTH]
        assert result.percentage == 100

    def test_blacklist_any_casing(self):
        for pw in ("SECRETWORD", "secretword", "SeCrEtWoRd"):
            result = evaluate(pw, {"blacklist": ["SecretWord"]})
            assert not detail(result, RuleNames.BLACKLIST).is_valid

    def test_user_inputs_do_not_leak_between_calls(self):
        evaluate("alice2024!", {"user_inputs": ["alice"]})
        result = evaluate("alice2024!")
        assert detail(result, RuleNames.BLACKLIST).is_valid

    def test_long_paste_evaluates_quickly(self):
        password = "Zq7$kP2!mW9#" * 250
        options = {"max_length": 5000, "user_inputs": ["alice"], "blacklist": ["acme"]}
        started = time.perf_counter()
        result = evaluate(password, options)
        elapsed = time.perf_counter() - started
        assert detail(result, RuleNames.LENGTH).is_valid
        assert elapsed < 1.0


# ══════════════════════════════════════════════════════════════════════════════
# Weights
# ══════════════════════════════════════════════════════════════════════════════

class TestWeights:

    def test_default_weights_applied(self):
        result = evaluate("Zq7$kP2!mW9#")
        # common (3.0) and blacklist (2.0) both pass with full coverage
        common = detail(result, RuleNames.COMMON).raw_score
        blacklist = detail(result, RuleNames.BLACKLIST).raw_score
        others = sum(d.raw_score for d in result.details
                     if d.rule_name not in (RuleNames.COMMON, RuleNames.BLACKLIST))
        assert result.score == pytest.approx(others + 3.0 * common + 2.0 * blacklist)

    def test_heavier_match_weights_keep_dictionary_word_weak(self):
        unit = {RuleNames.COMMON: 1.0, RuleNames.BLACKLIST: 1.0}
        assert evaluate("password", {"rule_weights": unit}).strength == Strength.MODERATE
        assert evaluate("password").strength == Strength.WEAK

    def test_override_weight(self):
        base = evaluate("Zq7$kP2!mW9#")
        boosted = evaluate("Zq7$kP2!mW9#", {"rule_weights": {RuleNames.LENGTH: 4.0}})
        length = detail(base, RuleNames.LENGTH).raw_score
        assert boosted.score == pytest.approx(base.score + 3.0 * length)

    def test_zero_weight_removes_contribution(self):
        result = evaluate("password", {"rule_weights": {RuleNames.COMMON: 0}})
        full = evaluate("password", {"disabled_rules": [RuleNames.COMMON]})
        assert result.percentage == full.percentage
        # the rule still ran and still reports
        assert not detail(result, RuleNames.COMMON).is_valid

    def test_all_zero_weights(self):
        weights = {name: 0 for name in RuleNames.ALL}
        assert evaluate("anything", {"rule_weights": weights}).percentage == 0

    def test_negative_weight_raises(self):
        with pytest.raises(ConfigurationError):
            evaluate("x", {"rule_weights": {RuleNames.LENGTH: -0.5}})

    def test_inverted_lengths_raise(self):
        with pytest.raises(ConfigurationError):
            evaluate("x", {"min_length": 10, "max_length": 5})


# ══════════════════════════════════════════════════════════════════════════════
# Feedback
# ══════════════════════════════════════════════════════════════════════════════

class TestFeedback:

    def test_structural_failures_are_suggestions(self):
        result = evaluate("abc")
        assert "Use at least 8 characters." in result.feedback.suggestions
        assert result.feedback.warnings == ()

    def test_critical_failures_are_warnings(self):
        result = evaluate("alice-password", {"user_inputs": ["alice"]})
        assert result.feedback.warnings == (
            "This is a commonly used password.",
            "Avoid personal information and forbidden words.",
        )

    def test_valid_rules_say_nothing(self):
        result = evaluate("Zq7$kP2!mW9#")
        assert result.feedback.suggestions == ()
        assert result.feedback.warnings == ()

    def test_i18n_override(self):
        result = evaluate("abc", {"i18n": {"length_too_short": "Mindestens {min_length} Zeichen."}})
        assert "Mindestens 8 Zeichen." in result.feedback.suggestions
        # keys without override keep the English default
        assert "Make the password longer or less predictable." in result.feedback.suggestions

    def test_arabic_catalog(self):
        result = evaluate("password", {"i18n": load_catalog("ar")})
        assert "كلمة المرور هذه شائعة الاستخدام." in result.feedback.warnings

    def test_duplicate_messages_collapsed(self):
        def same(name):
            return Rule(name, lambda p, c: RuleOutcome(name, False, 0.0, "Try again."))

        result = evaluate("x", rules=(same("one"), same("two")))
        assert result.feedback.suggestions == ("Try again.",)
        assert len(result.details) == 2

    def test_details_keep_default_text(self):
        result = evaluate("abc", {"i18n": {"length_too_short": "short!"}})
        assert detail(result, RuleNames.LENGTH).message == "Use at least 8 characters."


# ══════════════════════════════════════════════════════════════════════════════
# Custom rules and fault isolation
# ══════════════════════════════════════════════════════════════════════════════

@rule("no_spaces")
def no_spaces(password, context):
    ok = " " not in password
    return RuleOutcome("no_spaces", ok, 10.0 if ok else 0.0,
                       None if ok else "Remove spaces.")


class TestCustomRules:

    def test_custom_rule_participates(self):
        result = evaluate("hello world", rules=default_rules() + (no_spaces,))
        assert detail(result, "no_spaces").raw_score == 0.0
        assert "Remove spaces." in result.feedback.suggestions
        assert len(result.details) == len(RuleNames.ALL) + 1

    def test_custom_rule_disabled_round_trip(self):
        pw = "hello world"
        without = evaluate(pw)
        disabled = evaluate(pw, {"disabled_rules": ["no_spaces"]},
                            rules=default_rules() + (no_spaces,))
        assert disabled == without

    def test_custom_critical_rule(self):
        @rule("banned_prefix", severity=Severity.CRITICAL)
        def banned_prefix(password, context):
            ok = not password.startswith("corp")
            return RuleOutcome("banned_prefix", ok, 10.0 if ok else 0.0,
                               None if ok else "Do not start with 'corp'.")

        result = evaluate("corpZq7$kP2!", rules=(banned_prefix,))
        assert result.feedback.warnings == ("Do not start with 'corp'.",)

    def test_context_shared_with_custom_rules(self):
        seen = {}

        def spy(password, context):
            seen["blacklist"] = context.blacklist
            seen["dictionary_is_default"] = "password" in context.dictionary
            return RuleOutcome("spy", True, 10.0)

        evaluate("x", {"user_inputs": ["Bob"], "blacklist": ["acme"]}, rules=(Rule("spy", spy),))
        assert seen["blacklist"] == frozenset({"bob", "acme"})
        assert seen["dictionary_is_default"]

    def test_duplicate_names_rejected(self):
        with pytest.raises(ConfigurationError):
            evaluate("x", rules=default_rules() + (Rule(RuleNames.LENGTH, no_spaces.evaluate),))

    def test_non_rule_rejected(self):
        with pytest.raises(ConfigurationError):
            evaluate("x", rules=[lambda p, c: None])

    def test_resolve_rules_keeps_order(self):
        opts = EvaluationOptions.from_dict({"disabled_rules": [RuleNames.VARIETY]})
        names = [r.name for r in resolve_rules(None, opts)]
        assert names == [n for n in RuleNames.ALL if n != RuleNames.VARIETY]


class TestFaultIsolation:

    def test_raising_rule_is_contained(self, caplog):
        def boom(password, context):
            raise RuntimeError("kaput")

        with caplog.at_level(logging.WARNING, logger="services.evaluator"):
            result = evaluate("Zq7$kP2!mW9#", rules=default_rules() + (Rule("boom", boom),))

        broken = detail(result, "boom")
        assert not broken.is_valid
        assert broken.raw_score == 0.0
        assert "RuntimeError" in broken.diagnostic
        assert "kaput" in broken.diagnostic
        # the other rules still ran
        assert len(result.details) == len(RuleNames.ALL) + 1
        assert detail(result, RuleNames.LENGTH).is_valid
        assert any("boom" in r.getMessage() for r in caplog.records)

    @pytest.mark.parametrize("bad", [
        None,
        "fine",
        RuleOutcome("bad", True, float("nan")),
        RuleOutcome("bad", True, -1.0),
        RuleOutcome("bad", True, 10.5),
        RuleOutcome("bad", "yes", 5.0),
        RuleOutcome("bad", True, "10"),
        RuleOutcome("bad", False, 0.0, message=42),
    ])
    def test_malformed_outcome(self, bad):
        result = evaluate("Zq7$kP2!mW9#", rules=(Rule("bad", lambda p, c: bad),))
        out = detail(result, "bad")
        assert not out.is_valid
        assert out.raw_score == 0.0
        assert out.diagnostic
        assert result.percentage == 0

    def test_faulted_rule_still_counts_in_denominator(self):
        def boom(password, context):
            raise ValueError()

        ok = Rule("ok", lambda p, c: RuleOutcome("ok", True, 10.0))
        result = evaluate("x", rules=(ok, Rule("boom", boom)))
        assert result.percentage == 50

    def test_wrong_name_replaced(self):
        result = evaluate("x", rules=(Rule("mine", lambda p, c: RuleOutcome("other", True, 10.0)),))
        assert result.details[0].rule_name == "mine"

    def test_faulted_rule_adds_no_feedback(self):
        def boom(password, context):
            raise KeyError("x")

        result = evaluate("Zq7$kP2!mW9#", rules=(Rule("boom", boom),))
        assert result.feedback.suggestions == ()
        assert result.feedback.warnings == ()
