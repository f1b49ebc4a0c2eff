"""
Task API endpoints.

Routes keep the scheduler's wire format: query-string IDs, string fields, and
``{"error": "..."}`` bodies on failure (rendered by the app's exception
handlers from the domain exceptions raised below).
"""

from fastapi import APIRouter, Query

from taskplanner.api.deps import TaskSvc
from taskplanner.core.exceptions import ValidationError, ValidationErrorCode
from taskplanner.models.task import (
    Task,
    TaskCreate,
    TaskIdResponse,
    TaskListResponse,
    TaskUpdate,
)

router = APIRouter()


def _require_id(task_id: str) -> str:
    if not task_id:
        raise ValidationError(
            ValidationErrorCode.MISSING_ID, "task id is required", field="id"
        )
    return task_id


@router.post("/task", response_model=TaskIdResponse)
async def create_task(payload: TaskCreate, service: TaskSvc) -> TaskIdResponse:
    """Create a task; the date is moved to today or its next occurrence if past."""
    task = await service.add_task(payload)
    return TaskIdResponse(id=task.id)


@router.get("/tasks", response_model=TaskListResponse)
async def list_tasks(
    service: TaskSvc,
    search: str = Query("", description="Substring of title or comment"),
) -> TaskListResponse:
    """List upcoming tasks ordered by date."""
    return TaskListResponse(tasks=await service.list_tasks(search))


@router.get("/task", response_model=Task)
async def get_task(
    service: TaskSvc,
    task_id: str = Query("", alias="id"),
) -> Task:
    """Get a task by ID."""
    return await service.get_task(_require_id(task_id))


@router.put("/task")
async def update_task(payload: TaskUpdate, service: TaskSvc) -> dict:
    """Replace all fields of a task."""
    await service.edit_task(payload)
    return {}


@router.post("/task/done")
async def complete_task(
    service: TaskSvc,
    task_id: str = Query("", alias="id"),
) -> dict:
    """Mark a task done: one-shot tasks are deleted, recurring ones rescheduled."""
    await service.mark_done(_require_id(task_id))
    return {}


@router.delete("/task")
async def delete_task(
    service: TaskSvc,
    task_id: str = Query("", alias="id"),
) -> dict:
    """Delete a task."""
    await service.delete_task(_require_id(task_id))
    return {}
