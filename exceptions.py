"""
exceptions.py
=============
PASSGAUGE — Hierarchical Exception System

All library exceptions inherit from PassgaugeError so callers
can catch the full hierarchy with a single except clause when needed.

Structure
---------
PassgaugeError
├── ConfigurationError
└── RuleExecutionError

Password content never raises: weak, empty or over-long passwords are
reported through rule outcomes, not exceptions.
"""


# ─── Root ────────────────────────────────────────────────────────────────────

class PassgaugeError(Exception):
    """Base exception for all PASSGAUGE errors."""

    def __init__(self, message: str = "", *, code: str = "", detail: str = ""):
        super().__init__(message)
        self.message = message
        self.code = code          # machine-readable code e.g. "NEGATIVE_WEIGHT"
        self.detail = detail      # extra context for logging

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} | {self.detail}"
        return self.message


# ─── Configuration ───────────────────────────────────────────────────────────

class ConfigurationError(PassgaugeError):
    """Raised when evaluation options or the runtime configuration are invalid."""

    def __init__(self, message: str = "", *, option: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.option = option


# ─── Rule execution ──────────────────────────────────────────────────────────

class RuleExecutionError(PassgaugeError):
    """
    Describes a rule that raised or returned a malformed outcome.

    The orchestrator never lets this escape: it is built to render the
    diagnostic note attached to the faulted rule's details entry.
    """

    def __init__(self, rule_name: str = "", reason: str = "", **kwargs):
        msg = f"Rule '{rule_name}' failed"
        if reason:
            msg += f": {reason}"
        super().__init__(msg, **kwargs)
        self.rule_name = rule_name
        self.reason = reason
