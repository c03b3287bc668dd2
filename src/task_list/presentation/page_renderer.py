"""
Presentation adapter: turns an ordered task list into the page view.

``render_task_page`` is a pure function of its input; the HTML rendering
goes through a Liquid template and never touches the store.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional, Sequence

from liquid import Environment

from ..repository.entities import Task
from .page_view import TaskPageResponse, TaskResponse

log = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"
HTML_MEDIA_TYPES = ("text/html", "application/xhtml+xml")
DEFAULT_PAGE_TITLE = "Task List"


def render_task_page(tasks: Sequence[Task]) -> TaskPageResponse:
    """Build the ``welcome`` page view from an already ordered task list."""
    task_responses = [TaskResponse.from_entity(task) for task in tasks]
    return TaskPageResponse(tasks=task_responses, total=len(task_responses))


@lru_cache(maxsize=None)
def _load_template(component: str):
    template_path = TEMPLATES_DIR / f"{component}.liquid"
    log.debug("Loading Liquid template %s", template_path)
    env = Environment()
    return env.from_string(template_path.read_text(encoding="utf-8"))


def render_task_page_html(page: TaskPageResponse, app_name: Optional[str] = None) -> str:
    """Render a page view to HTML using the template named by its component."""
    context = page.model_dump()
    context["app_name"] = app_name or DEFAULT_PAGE_TITLE
    context["pending_count"] = sum(1 for task in page.tasks if not task.completed)
    template = _load_template(page.component)
    return template.render(**context)


def wants_html(accept_header: Optional[str]) -> bool:
    """
    True when the Accept header lists an HTML media type before JSON.

    A missing header or ``*/*`` yields the JSON page view.
    """
    if not accept_header:
        return False
    for part in accept_header.split(","):
        media_type = part.split(";", 1)[0].strip().lower()
        if media_type in HTML_MEDIA_TYPES:
            return True
        if media_type == "application/json":
            return False
    return False
