from .evaluator import evaluate, strength_for
from .options import EvaluationOptions
from .rules import Rule, rule, default_rules

__all__ = [
    "evaluate",
    "strength_for",
    "EvaluationOptions",
    "Rule",
    "rule",
    "default_rules",
]
