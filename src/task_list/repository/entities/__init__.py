"""
Domain entities.
"""

from .task import Task, TaskStatusFilter, TaskUpdate, normalize_title

__all__ = ["Task", "TaskStatusFilter", "TaskUpdate", "normalize_title"]
