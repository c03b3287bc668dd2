"""
Request DTOs for task-related API endpoints.
"""

from typing import Optional

from pydantic import BaseModel, Field

from ....repository.entities import TaskUpdate


class CreateTaskRequest(BaseModel):
    """Request to create a new task.

    The title is optional at the schema level so that a missing title is
    reported through the same field-level validation as a blank one.
    """

    title: Optional[str] = Field(None, description="Task title (1-255 characters after trimming)")


class UpdateTaskRequest(BaseModel):
    """Request to update an existing task. Omitted fields are left unchanged."""

    title: Optional[str] = Field(None, description="New task title")
    completed: Optional[bool] = Field(None, description="New completion state")

    def to_task_update(self) -> TaskUpdate:
        """Carry over only the fields the caller actually sent."""
        return TaskUpdate(**self.model_dump(exclude_unset=True))

