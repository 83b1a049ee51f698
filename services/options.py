"""
services/options.py
===================
Caller-supplied evaluation options and their validation.

Options are immutable: term sets are normalized (stripped, lowercased) once,
when the options object is built, so a caller that reuses the same options
for every keystroke pays that cost only once.

Usage:
    opts = EvaluationOptions.from_dict({"min_length": 10, "user_inputs": {"alice"}})
    evaluate(password, opts)
"""
import math
from dataclasses import dataclass, field, fields
from functools import cached_property
from numbers import Real
from types import MappingProxyType
from typing import Any, FrozenSet, Iterable, Mapping, Optional

from core.config import get_length_defaults
from exceptions import ConfigurationError
from utils.matcher import longest_term, normalize_terms

# spec-style camelCase spellings accepted by from_dict()
_ALIASES = {
    "minLength": "min_length",
    "maxLength": "max_length",
    "userInputs": "user_inputs",
    "ruleWeights": "rule_weights",
    "disabledRules": "disabled_rules",
}


@dataclass(frozen=True)
class EvaluationOptions:
    min_length: int = 8
    max_length: int = 128
    blacklist: FrozenSet[str] = frozenset()
    user_inputs: FrozenSet[str] = frozenset()
    rule_weights: Mapping[str, float] = field(default_factory=dict)
    disabled_rules: FrozenSet[str] = frozenset()
    dictionary: Optional[FrozenSet[str]] = None
    i18n: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        _check_length("min_length", self.min_length)
        _check_length("max_length", self.max_length)
        if self.min_length > self.max_length:
            raise ConfigurationError(
                f"min_length ({self.min_length}) must not exceed max_length ({self.max_length})",
                option="min_length",
                code="INVERTED_LENGTH_BOUNDS",
            )

        object.__setattr__(self, "blacklist", _terms("blacklist", self.blacklist))
        object.__setattr__(self, "user_inputs", _terms("user_inputs", self.user_inputs))
        object.__setattr__(self, "disabled_rules", _names(self.disabled_rules))
        object.__setattr__(self, "rule_weights", _weights(self.rule_weights))
        if self.dictionary is not None:
            object.__setattr__(self, "dictionary", _terms("dictionary", self.dictionary))
        object.__setattr__(self, "i18n", _i18n(self.i18n))

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]] = None) -> "EvaluationOptions":
        """
        Build options from a plain mapping.

        Missing length bounds come from the process configuration
        (PASSGAUGE_MIN_LENGTH / PASSGAUGE_MAX_LENGTH, else 8 / 128).

        Raises:
            ConfigurationError: unknown key or invalid value
        """
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ConfigurationError(
                f"options must be a mapping, got {type(data).__name__}", option="options"
            )

        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                raise ConfigurationError(f"Unknown option: {key!r}", option=str(key))
            if name in kwargs:
                raise ConfigurationError(f"Option given twice: {name!r}", option=name)
            kwargs[name] = value

        min_default, max_default = get_length_defaults()
        kwargs.setdefault("min_length", min_default)
        if "max_length" not in kwargs:
            # an explicit min_length above the default ceiling lifts the ceiling
            min_length = kwargs["min_length"]
            if isinstance(min_length, int) and not isinstance(min_length, bool):
                max_default = max(max_default, min_length)
            kwargs["max_length"] = max_default
        return cls(**kwargs)

    @cached_property
    def merged_blacklist(self) -> FrozenSet[str]:
        """blacklist ∪ user_inputs, for this evaluation only"""
        return self.blacklist | self.user_inputs

    @cached_property
    def longest_blacklist_term(self) -> int:
        return longest_term(self.merged_blacklist)

    @cached_property
    def longest_dictionary_term(self) -> Optional[int]:
        """None when the default dictionary is used"""
        if self.dictionary is None:
            return None
        return longest_term(self.dictionary)

    def weight_for(self, rule_name: str, default: float = 1.0) -> float:
        return self.rule_weights.get(rule_name, default)


def coerce_options(options: Any) -> EvaluationOptions:
    """Accept None, a mapping or an EvaluationOptions instance."""
    if isinstance(options, EvaluationOptions):
        return options
    return EvaluationOptions.from_dict(options)


# ─── validators ──────────────────────────────────────────────────────────────

def _check_length(name: str, value: Any):
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(
            f"{name} must be an integer, got {value!r}", option=name
        )
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}", option=name)


def _terms(name: str, value: Any) -> FrozenSet[str]:
    if value is None:
        return frozenset()
    if not isinstance(value, (str, Iterable)) or isinstance(value, Mapping):
        raise ConfigurationError(
            f"{name} must be a collection of strings", option=name
        )
    if isinstance(value, str):
        value = (value,)
    items = list(value)
    if not all(isinstance(item, str) for item in items):
        raise ConfigurationError(f"{name} must contain only strings", option=name)
    return normalize_terms(items)


def _names(value: Any) -> FrozenSet[str]:
    if value is None:
        return frozenset()
    if isinstance(value, str):
        return frozenset({value})
    if not isinstance(value, Iterable) or isinstance(value, Mapping):
        raise ConfigurationError(
            "disabled_rules must be a collection of rule names", option="disabled_rules"
        )
    names = frozenset(value)
    if not all(isinstance(n, str) for n in names):
        raise ConfigurationError(
            "disabled_rules must contain only strings", option="disabled_rules"
        )
    return names


def _weights(value: Any) -> Mapping[str, float]:
    if value is None:
        return MappingProxyType({})
    if not isinstance(value, Mapping):
        raise ConfigurationError(
            "rule_weights must map rule names to numbers", option="rule_weights"
        )

    weights = {}
    for name, weight in value.items():
        if not isinstance(name, str):
            raise ConfigurationError(
                f"rule_weights key must be a rule name, got {name!r}", option="rule_weights"
            )
        if isinstance(weight, bool) or not isinstance(weight, Real):
            raise ConfigurationError(
                f"Weight for rule '{name}' must be a number, got {weight!r}",
                option="rule_weights",
                code="INVALID_WEIGHT",
            )
        weight = float(weight)
        if not math.isfinite(weight):
            raise ConfigurationError(
                f"Weight for rule '{name}' must be finite", option="rule_weights",
                code="INVALID_WEIGHT",
            )
        if weight < 0:
            raise ConfigurationError(
                f"Weight for rule '{name}' must not be negative, got {weight}",
                option="rule_weights",
                code="NEGATIVE_WEIGHT",
            )
        weights[name] = weight
    return MappingProxyType(weights)


def _i18n(value: Any) -> Mapping[str, str]:
    if value is None:
        return MappingProxyType({})
    if not isinstance(value, Mapping):
        raise ConfigurationError("i18n must map message keys to strings", option="i18n")
    if not all(isinstance(k, str) and isinstance(v, str) for k, v in value.items()):
        raise ConfigurationError("i18n keys and values must be strings", option="i18n")
    return MappingProxyType(dict(value))
