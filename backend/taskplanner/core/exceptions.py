"""
Custom exceptions for the application.

Core code (date utilities, recurrence engine, lifecycle policy, validator)
raises these; the HTTP layer maps them to status codes in one place.
"""

from enum import Enum
from typing import Any, Optional


class SchedulerError(Exception):
    """Base exception for taskplanner."""

    def __init__(self, message: str, details: Optional[Any] = None):
        self.message = message
        self.details = details
        super().__init__(message)


class DateFormatError(SchedulerError):
    """Date string is not a valid YYYYMMDD calendar date."""

    def __init__(self, value: str):
        super().__init__(f"invalid date format: {value!r}", details={"value": value})
        self.value = value


class DateRangeError(SchedulerError):
    """Date arithmetic left the supported calendar range (years 1 to 9999)."""

    def __init__(self, value, message: str):
        super().__init__(
            f"date out of range: {message}", details={"value": str(value)}
        )
        self.value = value


# ===========================================
# Recurrence rule errors
# ===========================================


class RuleError(SchedulerError):
    """Recurrence rule cannot be used."""

    pass


class EmptyRuleError(RuleError):
    """Rule text is empty; one-shot tasks have no next occurrence."""

    def __init__(self):
        super().__init__("empty repeat rule")


class InvalidRuleSyntaxError(RuleError):
    """Rule text matches none of the supported grammars."""

    def __init__(self, rule: str):
        super().__init__(f"unsupported repeat rule: {rule!r}", details={"rule": rule})
        self.rule = rule


class IntervalOutOfRangeError(RuleError):
    """Day interval outside [1, 400]."""

    def __init__(self, interval: int, low: int, high: int):
        super().__init__(
            f"day interval {interval} is out of range [{low}, {high}]",
            details={"interval": interval, "min": low, "max": high},
        )
        self.interval = interval


# ===========================================
# Validation / storage / auth
# ===========================================


class ValidationErrorCode(str, Enum):
    """Kinds of task validation failures."""

    MISSING_TITLE = "MISSING_TITLE"
    MISSING_ID = "MISSING_ID"
    BAD_DATE_FORMAT = "BAD_DATE_FORMAT"
    BAD_RULE_FORMAT = "BAD_RULE_FORMAT"
    INTERVAL_OUT_OF_RANGE = "INTERVAL_OUT_OF_RANGE"


class ValidationError(SchedulerError):
    """Task record failed field-level validation."""

    def __init__(
        self,
        code: ValidationErrorCode,
        message: str,
        field: Optional[str] = None,
    ):
        super().__init__(message, details={"code": code.value, "field": field})
        self.code = code
        self.field = field


class NotFoundError(SchedulerError):
    """Resource not found."""

    pass


class AuthenticationError(SchedulerError):
    """Authentication failed."""

    pass


class InvariantViolationError(SchedulerError):
    """Stored data breaks an invariant that validated writes guarantee."""

    pass
