"""
Presentation adapter for the task page view.
"""

from .page_view import TaskPageResponse, TaskResponse, WELCOME_COMPONENT
from .page_renderer import render_task_page, render_task_page_html, wants_html

__all__ = [
    "TaskPageResponse",
    "TaskResponse",
    "WELCOME_COMPONENT",
    "render_task_page",
    "render_task_page_html",
    "wants_html",
]
