"""
Dependency injection for API endpoints.

Endpoints receive the repository, the task service and the auth check through
FastAPI dependencies; tests swap them with ``app.dependency_overrides``.
"""

from functools import lru_cache
from typing import Annotated, Optional

from fastapi import Cookie, Depends

from taskplanner.core.config import Settings, get_settings
from taskplanner.core.security import verify_access_token
from taskplanner.interfaces.task_repository import ITaskRepository
from taskplanner.services.task_service import TaskService


# ===========================================
# Repository Dependencies
# ===========================================


@lru_cache()
def get_task_repository() -> ITaskRepository:
    """Get task repository instance."""
    from taskplanner.infrastructure.local.task_repository import SqliteTaskRepository

    return SqliteTaskRepository()


# ===========================================
# Service Dependencies
# ===========================================


def get_task_service(
    repo: ITaskRepository = Depends(get_task_repository),
    settings: Settings = Depends(get_settings),
) -> TaskService:
    """Build a task service around the injected repository."""
    return TaskService(
        task_repo=repo,
        allow_multi_day=settings.TODO_MULTI_DAY_RULES,
        list_limit=settings.TODO_TASKS_LIMIT,
    )


# ===========================================
# Auth Dependencies
# ===========================================


async def require_auth(
    settings: Annotated[Settings, Depends(get_settings)],
    token: Annotated[Optional[str], Cookie()] = None,
) -> None:
    """
    Reject the request unless it carries a valid ``token`` cookie.

    A no-op when TODO_PASSWORD is empty.
    """
    if not settings.auth_enabled:
        return
    verify_access_token(token or "", settings)


# ===========================================
# Type Aliases for Dependency Injection
# ===========================================

AppSettings = Annotated[Settings, Depends(get_settings)]
TaskSvc = Annotated[TaskService, Depends(get_task_service)]
