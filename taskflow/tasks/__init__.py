"""
TASKFLOW - Tasks Module

Per-user task CRUD.
"""

from taskflow.tasks.router import router as tasks_router

__all__ = ["tasks_router"]
