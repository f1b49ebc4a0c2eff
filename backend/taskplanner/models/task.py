"""
Task model definitions.

Wire models accept empty strings everywhere: field rules (non-empty title,
date format, rule syntax) are enforced by the task validator so that failures
come back as the API's ``{"error": ...}`` payload instead of a schema error.
"""

from __future__ import annotations

import datetime as dt
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from taskplanner.models.recurrence import NoRepeat, RecurrenceRule


class TaskBase(BaseModel):
    """Fields shared by every task representation."""

    date: str = Field("", description="Scheduled date, YYYYMMDD")
    title: str = Field("", description="Task title")
    comment: str = Field("", description="Free text")
    repeat: str = Field("", description="Recurrence rule: '', 'y' or 'd <n>'")

    @field_validator("date", "title", "comment", "repeat", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        return "" if value is None else value


class TaskCreate(TaskBase):
    """Payload of POST /api/task."""

    pass


class TaskUpdate(TaskBase):
    """Payload of PUT /api/task (full replace)."""

    id: str = Field("", description="Task ID")

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, value: object) -> object:
        if value is None:
            return ""
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class Task(TaskBase):
    """Stored task."""

    id: str

    model_config = ConfigDict(from_attributes=True)

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, value: object) -> object:
        return str(value)


class ValidatedTask(BaseModel):
    """Task fields after validation, with the rule parsed."""

    title: str
    comment: str = ""
    date: Optional[dt.date] = None
    repeat: str = ""
    rule: RecurrenceRule = Field(default_factory=NoRepeat)

    model_config = ConfigDict(frozen=True)

    @property
    def is_recurring(self) -> bool:
        return not isinstance(self.rule, NoRepeat)


class TaskIdResponse(BaseModel):
    """Response of POST /api/task."""

    id: str


class TaskListResponse(BaseModel):
    """Response of GET /api/tasks."""

    tasks: list[Task]


class Delete(BaseModel):
    """Completing the task removes it."""

    kind: str = "delete"


class Reschedule(BaseModel):
    """Completing the task moves it to ``date``."""

    kind: str = "reschedule"
    date: dt.date


LifecycleOutcome = Union[Delete, Reschedule]
