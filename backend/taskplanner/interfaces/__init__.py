"""Abstract interfaces for infrastructure abstraction."""

from taskplanner.interfaces.task_repository import ITaskRepository

__all__ = [
    "ITaskRepository",
]
