"""
Repository interfaces defining contracts for data access.
"""

from abc import ABC, abstractmethod
from typing import Optional

from .entities import Task, TaskUpdate


class ITaskRepository(ABC):
    """Interface for task data access operations.

    Every listing is ordered most recent first: ``created_at`` descending,
    ties broken by ``id`` descending.
    """

    @abstractmethod
    def create(self, title: str) -> Task:
        """Create a pending task.

        Raises:
            ValidationError: if the title is blank or too long.
        """
        pass

    @abstractmethod
    def update(self, task_id: int, fields: TaskUpdate) -> Task:
        """Apply the fields present in ``fields`` and refresh ``updated_at``.

        Raises:
            EntityNotFoundError: if no task has ``task_id``.
            ValidationError: if a supplied title is blank or too long.
        """
        pass

    @abstractmethod
    def delete(self, task_id: int) -> None:
        """Delete a task permanently.

        Raises:
            EntityNotFoundError: if no task has ``task_id``.
        """
        pass

    @abstractmethod
    def get(self, task_id: int) -> Optional[Task]:
        """Find a task by its ID."""
        pass

    @abstractmethod
    def list_all(self) -> list[Task]:
        """All tasks, most recent first."""
        pass

    @abstractmethod
    def list_pending(self) -> list[Task]:
        """Tasks not yet completed, most recent first."""
        pass

    @abstractmethod
    def list_completed(self) -> list[Task]:
        """Completed tasks, most recent first."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Total number of tasks."""
        pass
