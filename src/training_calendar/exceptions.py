"""Custom exception hierarchy for the training calendar engine."""

from __future__ import annotations


class CalendarError(Exception):
    """Base exception for all training_calendar errors."""


class InvalidInputError(CalendarError, ValueError):
    """A caller-supplied value is malformed (bad date, timestamp, label)."""


class ConfigurationError(CalendarError):
    """The dataset itself is inconsistent and must not be trusted."""


class MalformedReferenceError(ConfigurationError):
    """A workout reference string does not match the reference grammar."""

    def __init__(self, reference: str) -> None:
        super().__init__(f"Invalid workout reference: {reference!r}")
        self.reference = reference


class DanglingReferenceError(ConfigurationError):
    """A reference points at an entity that is missing or not resolvable."""


class InvariantViolation(ConfigurationError):
    """A whole-dataset structural rule was broken.

    Carries the offending entity and the rule name so callers can report
    exactly which record needs fixing.
    """

    def __init__(self, entity_kind: str, entity_id: str, rule: str, message: str) -> None:
        super().__init__(f"{entity_kind} {entity_id}: {message} [{rule}]")
        self.entity_kind = entity_kind
        self.entity_id = entity_id
        self.rule = rule
