"""
Recurrence engine.

Parses ``repeat`` rule text and advances a task's anchor date to its next
occurrence relative to a reference date ("today"). Everything here is pure:
the reference date is always passed in, never read from the clock.

Boundary semantics are *not-before*: the candidate starts at the anchor and is
stepped while it is earlier than the reference, so an occurrence falling on
the reference date itself is returned as-is.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Union

from taskplanner.core.exceptions import (
    EmptyRuleError,
    IntervalOutOfRangeError,
    InvalidRuleSyntaxError,
)
from taskplanner.models.recurrence import (
    MAX_INTERVAL_DAYS,
    MIN_INTERVAL_DAYS,
    EveryNDays,
    MultiDaySelect,
    NoRepeat,
    RecurrenceRule,
    Yearly,
)
from taskplanner.utils.date_utils import add_days, add_years, format_date, parse_date

_YEARLY = "y"
_DAYS_RE = re.compile(r"d +([+-]?[0-9]+)")
_MULTI_DAYS_RE = re.compile(r"d +([+-]?[0-9]+(?: *, *[+-]?[0-9]+)+)")


def _check_interval(value: int) -> int:
    if not MIN_INTERVAL_DAYS <= value <= MAX_INTERVAL_DAYS:
        raise IntervalOutOfRangeError(value, MIN_INTERVAL_DAYS, MAX_INTERVAL_DAYS)
    return value


def parse_rule(text: str, allow_multi_day: bool = False) -> RecurrenceRule:
    """
    Parse rule text into a typed rule.

    Args:
        text: Rule text: "", "y", "d <n>" or (with allow_multi_day) "d n1,n2,..."
        allow_multi_day: Accept the multi-interval extension

    Returns:
        RecurrenceRule: NoRepeat for empty text, otherwise the parsed variant

    Raises:
        InvalidRuleSyntaxError: Text matches no supported grammar
        IntervalOutOfRangeError: A day interval is outside [1, 400]
    """
    if text == "":
        return NoRepeat()
    if text == _YEARLY:
        return Yearly()

    match = _DAYS_RE.fullmatch(text)
    if match:
        return EveryNDays(interval=_check_interval(int(match.group(1))))

    match = _MULTI_DAYS_RE.fullmatch(text)
    if match and allow_multi_day:
        intervals = tuple(
            _check_interval(int(part)) for part in match.group(1).split(",")
        )
        return MultiDaySelect(intervals=intervals)

    raise InvalidRuleSyntaxError(text)


def _advance_days(reference: date, anchor: date, interval: int) -> date:
    """First anchor + k*interval (k >= 0) that is not before reference."""
    days_behind = (reference - anchor).days
    if days_behind <= 0:
        return anchor
    steps = -(-days_behind // interval)
    return add_days(anchor, steps * interval)


def _advance_years(reference: date, anchor: date) -> date:
    candidate = anchor
    while candidate < reference:
        candidate = add_years(candidate, 1)
    return candidate


def next_occurrence(
    reference: date,
    anchor: date,
    rule: Union[str, RecurrenceRule],
    allow_multi_day: bool = False,
) -> date:
    """
    Compute the next occurrence of a recurring task.

    Args:
        reference: Date the occurrence must not precede (usually today)
        anchor: Task's current scheduled date
        rule: Rule text or an already parsed rule
        allow_multi_day: Accept "d n1,n2,..." when ``rule`` is text

    Returns:
        date: Smallest date reachable from ``anchor`` by whole rule steps that
            is on or after ``reference``

    Raises:
        EmptyRuleError: Rule is empty (one-shot tasks have no next occurrence)
        InvalidRuleSyntaxError: Rule text is not recognized
        IntervalOutOfRangeError: A day interval is outside [1, 400]

    Example:
        >>> next_occurrence(date(2024, 1, 10), date(2024, 1, 8), "d 10")
        date(2024, 1, 18)
    """
    parsed = parse_rule(rule, allow_multi_day) if isinstance(rule, str) else rule

    if isinstance(parsed, NoRepeat):
        raise EmptyRuleError()
    if isinstance(parsed, Yearly):
        return _advance_years(reference, anchor)
    if isinstance(parsed, EveryNDays):
        return _advance_days(reference, anchor, parsed.interval)
    if isinstance(parsed, MultiDaySelect):
        return min(_advance_days(reference, anchor, n) for n in parsed.intervals)

    raise InvalidRuleSyntaxError(str(parsed))


def next_date(
    now: str | date, date_text: str, rule_text: str, allow_multi_day: bool = False
) -> str:
    """
    String-level wrapper used by the HTTP layer.

    Raises:
        DateFormatError: ``now`` or ``date_text`` is not YYYYMMDD
        RuleError: see ``next_occurrence``
    """
    reference = parse_date(now) if isinstance(now, str) else now
    anchor = parse_date(date_text)
    return format_date(next_occurrence(reference, anchor, rule_text, allow_multi_day))
