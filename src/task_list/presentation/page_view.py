"""
Page view models handed to callers.

Timestamps are held as epoch milliseconds and serialized as ISO-8601.
"""

from typing import Optional

from pydantic import BaseModel, field_serializer

from ..repository.entities import Task
from ..shared import epoch_ms_to_iso8601

WELCOME_COMPONENT = "welcome"


class BaseTimestampView(BaseModel):
    """Base class for views that include the standard timestamp fields."""

    @field_serializer("created_at", "updated_at", check_fields=False)
    def _serialize_timestamp(self, value: Optional[int]) -> Optional[str]:
        return epoch_ms_to_iso8601(value)


class TaskResponse(BaseTimestampView):
    """A single task as shown on the page."""

    id: int
    title: str
    completed: bool
    created_at: int
    updated_at: int

    @classmethod
    def from_entity(cls, task: Task) -> "TaskResponse":
        return cls(
            id=task.id,
            title=task.title,
            completed=task.completed,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )


class TaskPageResponse(BaseModel):
    """Page view carrying the full, ordered task list."""

    component: str = WELCOME_COMPONENT
    tasks: list[TaskResponse]
    total: int
