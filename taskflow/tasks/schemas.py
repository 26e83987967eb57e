"""
TASKFLOW - Task Schemas

Pydantic models for task API requests and responses.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field, StrictBool, StrictStr, field_validator

from taskflow.schemas import CamelModel


class TaskCreateRequest(BaseModel):
    """Request model for creating a task."""

    title: StrictStr = Field(description="Task title")

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        title = v.strip()
        if not title:
            raise ValueError("title is required")
        return title


class TaskUpdateRequest(BaseModel):
    """Request model for updating a task. Only the done flag can change."""

    done: StrictBool = Field(description="Completion flag")


class TaskResponse(CamelModel):
    """Response model for a single task."""

    id: str = Field(description="Task ID")
    user_id: str = Field(description="Owner user ID")
    title: str = Field(description="Task title")
    done: bool = Field(description="Completion flag")
    created_at: datetime = Field(description="Creation timestamp")


class TaskEnvelope(BaseModel):
    task: TaskResponse


class TaskListResponse(BaseModel):
    """Response model for a list of tasks."""

    tasks: List[TaskResponse] = Field(description="Tasks, newest first")
