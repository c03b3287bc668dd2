"""
Repository implementation for task data access operations.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session as DBSession

from ..shared import now_epoch_ms
from ..shared.database import storage_errors
from ..shared.exceptions import EntityNotFoundError, EntityOperation
from .entities import Task, TaskUpdate, normalize_title
from .entities.task import ENTITY_TYPE
from .interfaces import ITaskRepository
from .models import TaskModel

log = logging.getLogger(__name__)


class TaskRepository(ITaskRepository):
    """SQLAlchemy implementation of task repository.

    Writes are flushed, not committed; the request-scoped session owned by
    ``dependencies.get_db`` commits once the handler succeeds.
    """

    def __init__(self, db: DBSession):
        self.db = db

    def create(self, title: str) -> Task:
        """Create a new pending task."""
        title = normalize_title(title, EntityOperation.CREATE)
        now_ms = now_epoch_ms()
        with storage_errors(EntityOperation.CREATE):
            model = TaskModel(
                title=title,
                completed=False,
                created_at=now_ms,
                updated_at=now_ms,
            )
            self.db.add(model)
            self.db.flush()
            self.db.refresh(model)
        log.debug("Inserted task row id=%s", model.id)
        return self._model_to_entity(model)

    def update(self, task_id: int, fields: TaskUpdate) -> Task:
        """Update the supplied fields of a task."""
        changes = fields.changes()
        with storage_errors(EntityOperation.UPDATE):
            model = self._find_model(task_id)
            if not model:
                raise EntityNotFoundError(ENTITY_TYPE, task_id)

            for field, value in changes.items():
                setattr(model, field, value)

            model.updated_at = max(now_epoch_ms(), model.updated_at)
            self.db.flush()
            self.db.refresh(model)
        return self._model_to_entity(model)

    def delete(self, task_id: int) -> None:
        """Delete a task by its ID."""
        with storage_errors(EntityOperation.DELETE):
            result = (
                self.db.query(TaskModel)
                .filter(TaskModel.id == task_id)
                .delete(synchronize_session=False)
            )
            self.db.flush()
        if result == 0:
            raise EntityNotFoundError(ENTITY_TYPE, task_id)

    def get(self, task_id: int) -> Optional[Task]:
        with storage_errors(EntityOperation.READ):
            model = self._find_model(task_id)
        return self._model_to_entity(model) if model else None

    def list_all(self) -> list[Task]:
        return self._list()

    def list_pending(self) -> list[Task]:
        return self._list(completed=False)

    def list_completed(self) -> list[Task]:
        return self._list(completed=True)

    def count(self) -> int:
        with storage_errors(EntityOperation.READ):
            return self.db.query(TaskModel).count()

    def _find_model(self, task_id: int) -> Optional[TaskModel]:
        return self.db.query(TaskModel).filter(TaskModel.id == task_id).first()

    def _list(self, completed: Optional[bool] = None) -> list[Task]:
        with storage_errors(EntityOperation.READ):
            query = self.db.query(TaskModel)
            if completed is not None:
                query = query.filter(TaskModel.completed == completed)
            models = query.order_by(TaskModel.created_at.desc(), TaskModel.id.desc()).all()
        return [self._model_to_entity(model) for model in models]

    def _model_to_entity(self, model: TaskModel) -> Task:
        """Convert SQLAlchemy model to domain entity."""
        return Task(
            id=model.id,
            title=model.title,
            completed=bool(model.completed),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
