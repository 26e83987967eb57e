"""
TASKFLOW - Task Repository

Repository pattern for task data access.
"""

from typing import List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncEngine

from taskflow.database import tasks_table
from taskflow.tasks.models import Task


class TaskRepository:
    """
    SQL implementation of the task repository.

    Every query that reads or changes a single task filters on both the task
    id and the owner's user id, so a task owned by someone else looks exactly
    like a task that does not exist.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    async def create(self, task: Task) -> Task:
        async with self.engine.begin() as conn:
            await conn.execute(insert(tasks_table).values(**task.to_row()))
        return task

    async def list_by_owner(self, user_id: str) -> List[Task]:
        """List the owner's tasks, newest first."""
        async with self.engine.connect() as conn:
            result = await conn.execute(
                select(tasks_table)
                .where(tasks_table.c.user_id == user_id)
                .order_by(tasks_table.c.created_at.desc())
            )
            rows = result.mappings().all()
        return [Task.from_row(row) for row in rows]

    async def set_done(self, user_id: str, task_id: str, done: bool) -> Optional[Task]:
        """Set the done flag; returns the updated task, or None if no owned task matched."""
        async with self.engine.begin() as conn:
            result = await conn.execute(
                update(tasks_table)
                .where(tasks_table.c.id == task_id, tasks_table.c.user_id == user_id)
                .values(done=done)
                .returning(*tasks_table.c)
            )
            row = result.mappings().first()
        if row is None:
            return None
        return Task.from_row(row)

    async def delete(self, user_id: str, task_id: str) -> bool:
        async with self.engine.begin() as conn:
            result = await conn.execute(
                delete(tasks_table).where(
                    tasks_table.c.id == task_id, tasks_table.c.user_id == user_id
                )
            )
        return result.rowcount > 0
