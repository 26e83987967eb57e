"""
TASKFLOW - Task Models

Internal task model for database operations.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping

from taskflow.database import utcnow
from taskflow.identifiers import new_id


@dataclass
class Task:
    """Task entity for database storage."""

    id: str
    user_id: str
    title: str
    done: bool = False
    created_at: datetime = field(default_factory=utcnow)

    @classmethod
    def create(cls, user_id: str, title: str, now: datetime) -> "Task":
        """Create a new, not yet done task with generated ID."""
        return cls(
            id=new_id(),
            user_id=user_id,
            title=title,
            done=False,
            created_at=now,
        )

    def to_row(self) -> dict:
        """Convert task to a row for the tasks table."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "title": self.title,
            "done": self.done,
            "created_at": self.created_at,
        }

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Task":
        """Create task from a tasks table row."""
        return cls(
            id=row["id"],
            user_id=row["user_id"],
            title=row["title"],
            done=bool(row["done"]),
            created_at=row["created_at"],
        )
