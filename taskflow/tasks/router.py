"""
TASKFLOW - Task Router

CRUD endpoints for task management.
All endpoints require a session and are user-scoped.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncEngine

from taskflow.auth.dependencies import CurrentUserId
from taskflow.database import get_database
from taskflow.errors import NotFoundError
from taskflow.tasks.repository import TaskRepository
from taskflow.tasks.schemas import (
    TaskCreateRequest,
    TaskEnvelope,
    TaskListResponse,
    TaskUpdateRequest,
)
from taskflow.tasks.service import TaskService


router = APIRouter(prefix="/tasks", tags=["Tasks"])


async def get_task_repository(
    engine: Annotated[AsyncEngine, Depends(get_database)]
) -> TaskRepository:
    """Dependency to get task repository instance."""
    return TaskRepository(engine)


async def get_task_service(
    repository: Annotated[TaskRepository, Depends(get_task_repository)]
) -> TaskService:
    """Dependency to get task service instance."""
    return TaskService(repository)


@router.get(
    "",
    response_model=TaskListResponse,
    summary="List tasks",
)
async def list_tasks(
    user_id: CurrentUserId,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskListResponse:
    """List the current user's tasks, newest first."""
    return TaskListResponse(tasks=await service.list_tasks(user_id))


@router.post(
    "",
    response_model=TaskEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new task",
)
async def create_task(
    request: TaskCreateRequest,
    user_id: CurrentUserId,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskEnvelope:
    """
    Create a new task for the authenticated user.

    New tasks start with done=false.
    """
    task = await service.create_task(user_id=user_id, title=request.title)
    return TaskEnvelope(task=task)


@router.patch(
    "/{task_id}",
    response_model=TaskEnvelope,
    summary="Mark a task done or not done",
)
async def update_task(
    task_id: str,
    request: TaskUpdateRequest,
    user_id: CurrentUserId,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskEnvelope:
    """
    Set the done flag of a task.

    Returns 404 if the task doesn't exist or belongs to another user.
    """
    task = await service.set_done(user_id, task_id, request.done)
    if task is None:
        raise NotFoundError("Task not found")
    return TaskEnvelope(task=task)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a task",
)
async def delete_task(
    task_id: str,
    user_id: CurrentUserId,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> Response:
    """
    Delete a task by ID.

    Returns 404 if the task doesn't exist or belongs to another user.
    """
    deleted = await service.delete_task(user_id, task_id)
    if not deleted:
        raise NotFoundError("Task not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
