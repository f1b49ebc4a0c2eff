"""
Task service.

Runs one API-level operation at a time against the injected repository:
validate, apply the lifecycle policy, then perform at most one logical read
and one logical write.
"""

from __future__ import annotations

from datetime import date
from typing import Callable, Optional

from taskplanner.core.exceptions import NotFoundError
from taskplanner.core.logger import setup_logger
from taskplanner.interfaces.task_repository import ITaskRepository
from taskplanner.models.task import Delete, Task, TaskBase, TaskCreate, TaskUpdate
from taskplanner.services.task_lifecycle import complete_task, schedule_on_create
from taskplanner.services.task_validator import validate_for_create, validate_for_edit
from taskplanner.utils import date_utils
from taskplanner.utils.date_utils import format_date

logger = setup_logger(__name__)


class TaskService:
    """Service for creating, editing and completing tasks."""

    def __init__(
        self,
        task_repo: ITaskRepository,
        today: Callable[[], date] = date_utils.today,
        allow_multi_day: bool = False,
        list_limit: int = 50,
    ):
        self.task_repo = task_repo
        self.today = today
        self.allow_multi_day = allow_multi_day
        self.list_limit = list_limit

    async def add_task(self, payload: TaskCreate) -> Task:
        """Validate, place on the calendar and store a new task."""
        validated = validate_for_create(payload, self.allow_multi_day)
        scheduled = schedule_on_create(self.today(), validated.date, validated.rule)
        task = await self.task_repo.create(
            TaskBase(
                date=format_date(scheduled),
                title=validated.title,
                comment=validated.comment,
                repeat=validated.repeat,
            )
        )
        logger.info("Created task %s on %s (repeat=%r)", task.id, task.date, task.repeat)
        return task

    async def get_task(self, task_id: str) -> Task:
        task = await self.task_repo.get(task_id)
        if not task:
            raise NotFoundError(f"Task {task_id} not found")
        return task

    async def list_tasks(self, search: Optional[str] = None) -> list[Task]:
        return await self.task_repo.list(search=search or None, limit=self.list_limit)

    async def edit_task(self, payload: TaskUpdate) -> Task:
        """
        Replace all fields of an existing task.

        An empty date means today; the given date is otherwise kept as-is.
        """
        validated = validate_for_edit(payload, self.allow_multi_day)
        task_date = validated.date or self.today()
        task = await self.task_repo.update(
            Task(
                id=payload.id,
                date=format_date(task_date),
                title=validated.title,
                comment=validated.comment,
                repeat=validated.repeat,
            )
        )
        logger.info("Updated task %s", task.id)
        return task

    async def mark_done(self, task_id: str) -> Optional[Task]:
        """
        Complete a task.

        Returns:
            The rescheduled task, or None if a one-shot task was deleted
        """
        task = await self.get_task(task_id)
        outcome = complete_task(self.today(), task, self.allow_multi_day)

        if isinstance(outcome, Delete):
            if not await self.task_repo.delete(task.id):
                raise NotFoundError(f"Task {task_id} not found")
            logger.info("Completed one-shot task %s", task.id)
            return None

        new_date = format_date(outcome.date)
        await self.task_repo.update_date(task.id, new_date)
        logger.info("Rescheduled task %s from %s to %s", task.id, task.date, new_date)
        return task.model_copy(update={"date": new_date})

    async def delete_task(self, task_id: str) -> None:
        if not await self.task_repo.delete(task_id):
            raise NotFoundError(f"Task {task_id} not found")
        logger.info("Deleted task %s", task_id)
