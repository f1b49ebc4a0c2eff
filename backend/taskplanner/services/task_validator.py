"""
Task record validator.

Field-level checks run before a task is stored or replaced. Whether an edited
task exists is a storage concern and is not checked here.
"""

from __future__ import annotations

from taskplanner.core.exceptions import (
    DateFormatError,
    IntervalOutOfRangeError,
    RuleError,
    ValidationError,
    ValidationErrorCode,
)
from taskplanner.models.task import TaskBase, TaskUpdate, ValidatedTask
from taskplanner.services.recurrence import parse_rule
from taskplanner.utils.date_utils import parse_date


def validate_for_create(task: TaskBase, allow_multi_day: bool = False) -> ValidatedTask:
    """
    Validate a candidate task.

    Raises:
        ValidationError: MISSING_TITLE, BAD_DATE_FORMAT, BAD_RULE_FORMAT or
            INTERVAL_OUT_OF_RANGE; rule and date errors are chained as cause
    """
    if not task.title:
        raise ValidationError(
            ValidationErrorCode.MISSING_TITLE, "task title is required", field="title"
        )

    task_date = None
    if task.date:
        try:
            task_date = parse_date(task.date)
        except DateFormatError as exc:
            raise ValidationError(
                ValidationErrorCode.BAD_DATE_FORMAT, exc.message, field="date"
            ) from exc

    try:
        rule = parse_rule(task.repeat, allow_multi_day)
    except IntervalOutOfRangeError as exc:
        raise ValidationError(
            ValidationErrorCode.INTERVAL_OUT_OF_RANGE, exc.message, field="repeat"
        ) from exc
    except RuleError as exc:
        raise ValidationError(
            ValidationErrorCode.BAD_RULE_FORMAT, exc.message, field="repeat"
        ) from exc

    return ValidatedTask(
        title=task.title,
        comment=task.comment,
        date=task_date,
        repeat=task.repeat,
        rule=rule,
    )


def validate_for_edit(task: TaskUpdate, allow_multi_day: bool = False) -> ValidatedTask:
    """Validate a full replacement of an existing task."""
    if not task.id:
        raise ValidationError(
            ValidationErrorCode.MISSING_ID, "task id is required", field="id"
        )
    return validate_for_create(task, allow_multi_day)
