"""
Repository layer for task persistence.
"""

from .entities import Task, TaskUpdate
from .interfaces import ITaskRepository
from .task_repository import TaskRepository
from .in_memory_task_repository import InMemoryTaskRepository

__all__ = [
    "Task",
    "TaskUpdate",
    "ITaskRepository",
    "TaskRepository",
    "InMemoryTaskRepository",
]
