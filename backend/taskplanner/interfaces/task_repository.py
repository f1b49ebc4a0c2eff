"""
Task repository interface.

Defines the contract for task persistence operations.
Implementations: SQLite
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from taskplanner.models.task import Task, TaskBase


class ITaskRepository(ABC):
    """Abstract interface for task persistence.

    Dates are stored as YYYYMMDD text; implementations must keep ordering by
    that text equivalent to chronological ordering.
    """

    @abstractmethod
    async def create(self, task: TaskBase) -> Task:
        """
        Insert a new task.

        Args:
            task: Validated fields with the final YYYYMMDD date

        Returns:
            Stored task with its assigned ID
        """
        pass

    @abstractmethod
    async def get(self, task_id: str) -> Optional[Task]:
        """
        Get a task by ID.

        Returns:
            Task if found, None otherwise (including non-numeric IDs)
        """
        pass

    @abstractmethod
    async def update(self, task: Task) -> Task:
        """
        Replace every field of an existing task.

        Raises:
            NotFoundError: If the task does not exist
        """
        pass

    @abstractmethod
    async def update_date(self, task_id: str, date: str) -> None:
        """
        Move a task to another date.

        Raises:
            NotFoundError: If the task does not exist
        """
        pass

    @abstractmethod
    async def delete(self, task_id: str) -> bool:
        """
        Delete a task.

        Returns:
            True if a task was deleted, False if it did not exist
        """
        pass

    @abstractmethod
    async def list(self, search: Optional[str] = None, limit: int = 50) -> list[Task]:
        """
        List tasks ordered by date.

        Args:
            search: Substring matched against title or comment
            limit: Maximum number of tasks
        """
        pass
