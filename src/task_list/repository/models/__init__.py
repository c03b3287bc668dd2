"""
SQLAlchemy models for database persistence.
"""

from .base import Base
from .task_model import TaskModel, TITLE_MAX_LENGTH

__all__ = [
    "Base",
    "TaskModel",
    "TITLE_MAX_LENGTH",
]
