"""
SQLite implementation of task repository.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import delete, or_, select

from taskplanner.core.exceptions import NotFoundError
from taskplanner.infrastructure.local.database import SchedulerORM, get_session_factory
from taskplanner.interfaces.task_repository import ITaskRepository
from taskplanner.models.task import Task, TaskBase

_MIN_ROWID = -(2**63)
_MAX_ROWID = 2**63 - 1


def _parse_id(task_id: str) -> Optional[int]:
    """Storage IDs are 64-bit integers; anything else cannot match a row."""
    try:
        value = int(str(task_id).strip())
    except ValueError:
        return None
    if not _MIN_ROWID <= value <= _MAX_ROWID:
        return None
    return value


class SqliteTaskRepository(ITaskRepository):
    """SQLite implementation of task repository."""

    def __init__(self, session_factory=None):
        self._session_factory = session_factory or get_session_factory()

    def _orm_to_model(self, orm: SchedulerORM) -> Task:
        """Convert ORM object to Pydantic model."""
        return Task.model_validate(orm, from_attributes=True)

    async def create(self, task: TaskBase) -> Task:
        """Insert a new task."""
        async with self._session_factory() as session:
            orm = SchedulerORM(
                date=task.date,
                title=task.title,
                comment=task.comment,
                repeat=task.repeat,
            )
            session.add(orm)
            await session.commit()
            await session.refresh(orm)
            return self._orm_to_model(orm)

    async def get(self, task_id: str) -> Optional[Task]:
        """Get a task by ID."""
        row_id = _parse_id(task_id)
        if row_id is None:
            return None
        async with self._session_factory() as session:
            orm = await session.get(SchedulerORM, row_id)
            return self._orm_to_model(orm) if orm else None

    async def update(self, task: Task) -> Task:
        """Replace every field of an existing task."""
        row_id = _parse_id(task.id)
        async with self._session_factory() as session:
            orm = await session.get(SchedulerORM, row_id) if row_id is not None else None
            if not orm:
                raise NotFoundError(f"Task {task.id} not found")

            orm.date = task.date
            orm.title = task.title
            orm.comment = task.comment
            orm.repeat = task.repeat
            await session.commit()
            await session.refresh(orm)
            return self._orm_to_model(orm)

    async def update_date(self, task_id: str, date: str) -> None:
        """Move a task to another date."""
        row_id = _parse_id(task_id)
        async with self._session_factory() as session:
            orm = await session.get(SchedulerORM, row_id) if row_id is not None else None
            if not orm:
                raise NotFoundError(f"Task {task_id} not found")
            orm.date = date
            await session.commit()

    async def delete(self, task_id: str) -> bool:
        """Delete a task."""
        row_id = _parse_id(task_id)
        if row_id is None:
            return False
        async with self._session_factory() as session:
            result = await session.execute(
                delete(SchedulerORM).where(SchedulerORM.id == row_id)
            )
            await session.commit()
            return result.rowcount > 0

    async def list(self, search: Optional[str] = None, limit: int = 50) -> list[Task]:
        """List tasks ordered by date, optionally filtered by a substring."""
        async with self._session_factory() as session:
            query = select(SchedulerORM)
            if search:
                pattern = f"%{search}%"
                query = query.where(
                    or_(
                        SchedulerORM.title.like(pattern),
                        SchedulerORM.comment.like(pattern),
                    )
                )
            query = query.order_by(SchedulerORM.date, SchedulerORM.id).limit(limit)
            result = await session.execute(query)
            return [self._orm_to_model(orm) for orm in result.scalars().all()]
