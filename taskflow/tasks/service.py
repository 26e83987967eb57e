"""
TASKFLOW - Task Service

Business logic for task operations, always scoped to one owner.
"""

from datetime import datetime, timezone
from typing import Callable, List, Optional

from taskflow.tasks.models import Task
from taskflow.tasks.repository import TaskRepository
from taskflow.tasks.schemas import TaskResponse


class TaskService:
    """Service layer for task business logic."""

    def __init__(
        self,
        repository: TaskRepository,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize the task service.

        Args:
            repository: Task repository implementation
            clock: Optional clock function for testing (returns current datetime)
        """
        self.repository = repository
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def _now(self) -> datetime:
        """Get current time using the configured clock."""
        return self._clock()

    @staticmethod
    def _task_to_response(task: Task) -> TaskResponse:
        return TaskResponse(
            id=task.id,
            user_id=task.user_id,
            title=task.title,
            done=task.done,
            created_at=task.created_at,
        )

    async def list_tasks(self, user_id: str) -> List[TaskResponse]:
        tasks = await self.repository.list_by_owner(user_id)
        return [self._task_to_response(task) for task in tasks]

    async def create_task(self, user_id: str, title: str) -> TaskResponse:
        """Create a new task for the owner."""
        task = Task.create(user_id=user_id, title=title, now=self._now())
        await self.repository.create(task)
        return self._task_to_response(task)

    async def set_done(self, user_id: str, task_id: str, done: bool) -> Optional[TaskResponse]:
        """Update the done flag, scoped to owner."""
        task = await self.repository.set_done(user_id, task_id, done)
        if task is None:
            return None
        return self._task_to_response(task)

    async def delete_task(self, user_id: str, task_id: str) -> bool:
        """Delete a task, scoped to owner."""
        return await self.repository.delete(user_id, task_id)
