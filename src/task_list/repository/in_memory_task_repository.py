"""
In-memory task repository, used when no database is configured and as a
substitute store in tests.
"""

import itertools
import logging
import threading
from typing import Callable, Dict, Optional

from ..shared import now_epoch_ms
from ..shared.exceptions import EntityNotFoundError, EntityOperation
from .entities import Task, TaskUpdate, normalize_title
from .entities.task import ENTITY_TYPE
from .interfaces import ITaskRepository

log = logging.getLogger(__name__)


class InMemoryTaskRepository(ITaskRepository):
    """
    Dict-backed implementation of ITaskRepository.

    Ids come from a monotonic counter and are never reused, even after
    deletion. Data is not persisted across restarts.
    """

    def __init__(self, clock: Callable[[], int] = now_epoch_ms):
        self._tasks: Dict[int, Task] = {}
        self._ids = itertools.count(1)
        self._clock = clock
        self._lock = threading.Lock()
        log.info("Initialized in-memory task repository (data not persisted)")

    def create(self, title: str) -> Task:
        title = normalize_title(title, EntityOperation.CREATE)
        with self._lock:
            now_ms = self._clock()
            task = Task(
                id=next(self._ids),
                title=title,
                completed=False,
                created_at=now_ms,
                updated_at=now_ms,
            )
            self._tasks[task.id] = task
            return task.model_copy()

    def update(self, task_id: int, fields: TaskUpdate) -> Task:
        changes = fields.changes()
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                raise EntityNotFoundError(ENTITY_TYPE, task_id)
            task.apply(changes, self._clock())
            return task.model_copy()

    def delete(self, task_id: int) -> None:
        with self._lock:
            if self._tasks.pop(task_id, None) is None:
                raise EntityNotFoundError(ENTITY_TYPE, task_id)

    def get(self, task_id: int) -> Optional[Task]:
        with self._lock:
            task = self._tasks.get(task_id)
            return task.model_copy() if task else None

    def list_all(self) -> list[Task]:
        return self._list(lambda task: True)

    def list_pending(self) -> list[Task]:
        return self._list(lambda task: task.is_pending)

    def list_completed(self) -> list[Task]:
        return self._list(lambda task: task.completed)

    def count(self) -> int:
        with self._lock:
            return len(self._tasks)

    def _list(self, predicate: Callable[[Task], bool]) -> list[Task]:
        with self._lock:
            tasks = [task.model_copy() for task in self._tasks.values() if predicate(task)]
        tasks.sort(key=lambda t: (t.created_at, t.id), reverse=True)
        return tasks
