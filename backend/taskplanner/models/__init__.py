"""Pydantic models (schemas) for the application."""

from taskplanner.models.recurrence import (
    EveryNDays,
    MultiDaySelect,
    NoRepeat,
    RecurrenceRule,
    Yearly,
)
from taskplanner.models.task import (
    Delete,
    LifecycleOutcome,
    Reschedule,
    Task,
    TaskCreate,
    TaskUpdate,
    ValidatedTask,
)

__all__ = [
    # Recurrence rules
    "RecurrenceRule",
    "NoRepeat",
    "Yearly",
    "EveryNDays",
    "MultiDaySelect",
    # Tasks
    "Task",
    "TaskCreate",
    "TaskUpdate",
    "ValidatedTask",
    # Lifecycle
    "LifecycleOutcome",
    "Delete",
    "Reschedule",
]
