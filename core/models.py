"""
core/models.py — PASSGAUGE
==========================
Value objects passed between the detectors, the rules and the orchestrator.

All of them are frozen dataclasses created fresh for every evaluation.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Mapping, Optional, Tuple


@dataclass(frozen=True)
class PatternReport:
    """Output of utils.patterns.detect_patterns()."""
    has_repeats: bool = False
    has_sequence: bool = False
    has_keyboard_pattern: bool = False

    @property
    def flag_count(self) -> int:
        return sum([self.has_repeats, self.has_sequence, self.has_keyboard_pattern])


@dataclass(frozen=True)
class MatchReport:
    """Output of utils.matcher.match_terms()."""
    in_dictionary: bool = False
    in_blacklist: bool = False
    matched_term: Optional[str] = None


@dataclass(frozen=True)
class RuleOutcome:
    """
    What a single rule reports.

    message       — default (English) feedback text, None when nothing to say
    message_key   — catalog key used to look up a translation of `message`
    message_params— values for the placeholders of the translated template
    diagnostic    — internal note, set only when the rule itself faulted
    """
    rule_name: str
    is_valid: bool
    raw_score: float
    message: Optional[str] = None
    message_key: Optional[str] = None
    message_params: Mapping[str, Any] = field(default_factory=dict)
    diagnostic: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "rule_name": self.rule_name,
            "is_valid": self.is_valid,
            "raw_score": self.raw_score,
            "message": self.message,
        }
        if self.diagnostic:
            data["diagnostic"] = self.diagnostic
        return data


@dataclass(frozen=True)
class RuleContext:
    """Per-call data computed once and shared by every rule."""
    min_length: int
    max_length: int
    blacklist: FrozenSet[str]
    dictionary: FrozenSet[str]
    entropy_bits: float
    char_classes: FrozenSet[str]
    patterns: PatternReport
    matches: MatchReport

    def length_coverage(self, password: str) -> float:
        """Share of min_length the password fills, capped at 1."""
        return min(1.0, len(password) / self.min_length)


@dataclass(frozen=True)
class Feedback:
    suggestions: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()


@dataclass(frozen=True)
class EvaluationResult:
    score: float
    percentage: int
    strength: str
    feedback: Feedback
    details: Tuple[RuleOutcome, ...]

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly rendering for UI layers and the command line."""
        return {
            "score": self.score,
            "percentage": self.percentage,
            "strength": self.strength,
            "feedback": {
                "suggestions": list(self.feedback.suggestions),
                "warnings": list(self.feedback.warnings),
            },
            "details": [outcome.to_dict() for outcome in self.details],
        }
