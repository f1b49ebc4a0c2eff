"""
Task lifecycle policy.

Decides where a new task lands on the calendar and what marking a task done
does to it: one-shot tasks are deleted, recurring tasks move to their next
occurrence. All functions are pure given ``today``.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from taskplanner.core.exceptions import (
    DateFormatError,
    InvariantViolationError,
    RuleError,
)
from taskplanner.core.logger import setup_logger
from taskplanner.models.recurrence import NoRepeat, RecurrenceRule
from taskplanner.models.task import Delete, LifecycleOutcome, Reschedule, Task
from taskplanner.services.recurrence import next_occurrence, parse_rule
from taskplanner.utils.date_utils import add_days, parse_date

logger = setup_logger(__name__)


def schedule_on_create(
    today: date, task_date: Optional[date], rule: RecurrenceRule
) -> date:
    """
    Compute the date a new task is stored with.

    - No date: today.
    - Date before today, one-shot: today.
    - Date before today, recurring: first occurrence not before today.
    - Otherwise the given date is kept.
    """
    if task_date is None:
        return today
    if task_date >= today:
        return task_date
    if isinstance(rule, NoRepeat):
        return today
    return next_occurrence(today, task_date, rule)


def _stored_rule(task: Task, allow_multi_day: bool) -> RecurrenceRule:
    """Parse the rule of a stored task; failure means a broken write path."""
    try:
        return parse_rule(task.repeat, allow_multi_day)
    except RuleError as exc:
        logger.error("Stored task %s has unparseable repeat %r", task.id, task.repeat)
        raise InvariantViolationError(
            f"stored task {task.id} has invalid repeat rule {task.repeat!r}",
            details={"id": task.id, "repeat": task.repeat},
        ) from exc


def _stored_date(task: Task) -> date:
    try:
        return parse_date(task.date)
    except DateFormatError as exc:
        logger.error("Stored task %s has unparseable date %r", task.id, task.date)
        raise InvariantViolationError(
            f"stored task {task.id} has invalid date {task.date!r}",
            details={"id": task.id, "date": task.date},
        ) from exc


def complete_task(
    today: date, task: Task, allow_multi_day: bool = False
) -> LifecycleOutcome:
    """
    Decide what marking ``task`` done does.

    One-shot tasks are deleted. Recurring tasks are rescheduled to the next
    occurrence on or after today, and always strictly after their current
    date, so completing a task that is due today moves it forward.

    Raises:
        InvariantViolationError: The stored date or rule does not parse
    """
    if task.repeat == "":
        return Delete()

    rule = _stored_rule(task, allow_multi_day)
    anchor = _stored_date(task)
    reference = max(today, add_days(anchor, 1))
    return Reschedule(date=next_occurrence(reference, anchor, rule))


def is_overdue(today: date, task: Task) -> bool:
    """Check whether the task's scheduled date is already behind today."""
    return _stored_date(task) < today
