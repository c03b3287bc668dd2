"""
Task domain entity and its partial-update payload.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel

from ...shared.exceptions import EntityOperation, ValidationError
from ..models.task_model import TITLE_MAX_LENGTH

ENTITY_TYPE = "Task"


class TaskStatusFilter(str, Enum):
    """Listing filter for the task collection."""

    ALL = "all"
    PENDING = "pending"
    COMPLETED = "completed"


def normalize_title(title: Any, operation: Optional[EntityOperation] = None) -> str:
    """
    Validate a task title and return it trimmed.

    Raises:
        ValidationError: if the title is missing, not a string, blank after
            trimming, or longer than TITLE_MAX_LENGTH characters.
    """
    if title is None:
        raise ValidationError.for_field(
            "title", "The title field is required.", ENTITY_TYPE, operation
        )
    if not isinstance(title, str):
        raise ValidationError.for_field(
            "title", "The title field must be a string.", ENTITY_TYPE, operation
        )
    trimmed = title.strip()
    if not trimmed:
        raise ValidationError.for_field(
            "title", "The title field is required.", ENTITY_TYPE, operation
        )
    if len(trimmed) > TITLE_MAX_LENGTH:
        raise ValidationError.for_field(
            "title",
            f"The title field must not be greater than {TITLE_MAX_LENGTH} characters.",
            ENTITY_TYPE,
            operation,
        )
    return trimmed


class Task(BaseModel):
    """Task domain entity."""

    id: int
    title: str
    completed: bool = False
    created_at: int
    updated_at: int

    @property
    def is_pending(self) -> bool:
        return not self.completed

    def apply(self, changes: Dict[str, Any], updated_at: int) -> None:
        """Apply already-validated field changes and refresh ``updated_at``."""
        for field, value in changes.items():
            setattr(self, field, value)
        self.updated_at = max(updated_at, self.updated_at)


class TaskUpdate(BaseModel):
    """
    Partial update for a task.

    Only fields present in ``model_fields_set`` are applied, so an omitted
    field is distinguishable from one explicitly set to a falsy value.
    """

    title: Optional[str] = None
    completed: Optional[bool] = None

    def changes(self) -> Dict[str, Any]:
        """Validated field changes, with the title trimmed."""
        data = self.model_dump(exclude_unset=True)
        if "title" in data:
            data["title"] = normalize_title(data["title"], EntityOperation.UPDATE)
        if "completed" in data and data["completed"] is None:
            raise ValidationError.for_field(
                "completed",
                "The completed field must be true or false.",
                ENTITY_TYPE,
                EntityOperation.UPDATE,
            )
        return data
