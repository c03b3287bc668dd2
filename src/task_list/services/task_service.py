"""
Business service for task-related operations.
"""

import logging
from typing import Callable, Optional, Sequence

from ..presentation import TaskPageResponse, render_task_page
from ..repository.entities import Task, TaskStatusFilter, TaskUpdate, normalize_title
from ..repository.entities.task import ENTITY_TYPE
from ..repository.interfaces import ITaskRepository
from ..shared.exceptions import EntityNotFoundError, EntityOperation

log = logging.getLogger(__name__)

PageRenderer = Callable[[Sequence[Task]], TaskPageResponse]


class TaskService:
    """Service layer for task business logic.

    Every mutating handler performs at most one store mutation and then
    re-reads the full ordered list, so the page view always reflects the
    current state rather than just the affected task.
    """

    def __init__(
        self,
        task_repository: ITaskRepository,
        renderer: PageRenderer = render_task_page,
    ):
        self.task_repository = task_repository
        self.renderer = renderer

    def handle_list(self) -> TaskPageResponse:
        """Render the full task list."""
        return self._render_all()

    def handle_filter(self, status: TaskStatusFilter = TaskStatusFilter.ALL) -> TaskPageResponse:
        """Render the tasks matching ``status``."""
        if status == TaskStatusFilter.PENDING:
            tasks = self.task_repository.list_pending()
        elif status == TaskStatusFilter.COMPLETED:
            tasks = self.task_repository.list_completed()
        else:
            tasks = self.task_repository.list_all()
        log.debug("Listed %d task(s) with status filter '%s'", len(tasks), status.value)
        return self.renderer(tasks)

    def handle_create(self, title: Optional[str]) -> TaskPageResponse:
        """
        Create a task and render the full list.

        Raises:
            ValidationError: if the title is missing, blank or too long.
                Nothing is persisted in that case.
        """
        title = normalize_title(title, EntityOperation.CREATE)
        task = self.task_repository.create(title)
        log.info("Created task %s", task.id)
        return self._render_all()

    def handle_update(self, task_id: int, fields: TaskUpdate) -> TaskPageResponse:
        """
        Apply a partial update and render the full list.

        An unknown id is reported before any field validation.

        Raises:
            EntityNotFoundError: if the task does not exist.
            ValidationError: if a supplied field is invalid.
        """
        if self.task_repository.get(task_id) is None:
            raise EntityNotFoundError(ENTITY_TYPE, task_id)
        fields.changes()  # raises ValidationError before any write
        task = self.task_repository.update(task_id, fields)
        log.info(
            "Updated task %s (fields: %s)",
            task.id,
            ", ".join(sorted(fields.model_fields_set)) or "none",
        )
        return self._render_all()

    def handle_delete(self, task_id: int) -> TaskPageResponse:
        """
        Delete a task and render the remaining list.

        Raises:
            EntityNotFoundError: if the task does not exist.
        """
        self.task_repository.delete(task_id)
        log.info("Deleted task %s", task_id)
        return self._render_all()

    def _render_all(self) -> TaskPageResponse:
        tasks = self.task_repository.list_all()
        log.debug("Rendering %d task(s)", len(tasks))
        return self.renderer(tasks)
