"""
Task list API router.

Every route answers with the ``welcome`` page view carrying the full,
freshly ordered task list; business errors are mapped to HTTP responses by
the shared exception handlers.
"""

import logging
from typing import Optional, Union

from fastapi import APIRouter, Depends, Header, Query
from fastapi.responses import HTMLResponse

from ..config import AppConfig
from ..dependencies import get_app_config, get_task_service
from ..presentation import TaskPageResponse, render_task_page_html, wants_html
from ..repository.entities import TaskStatusFilter
from ..services.task_service import TaskService
from .dto.requests import CreateTaskRequest, UpdateTaskRequest

log = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=TaskPageResponse)
def list_tasks(
    accept: Optional[str] = Header(None),
    task_service: TaskService = Depends(get_task_service),
    config: AppConfig = Depends(get_app_config),
) -> Union[TaskPageResponse, HTMLResponse]:
    """
    Show all tasks, most recent first.

    Browsers asking for HTML get the rendered page; other clients get the
    page view as JSON.
    """
    page = task_service.handle_list()
    if wants_html(accept):
        return HTMLResponse(render_task_page_html(page, app_name=config.app_name))
    return page


@router.get("/tasks", response_model=TaskPageResponse)
def filter_tasks(
    status: TaskStatusFilter = Query(TaskStatusFilter.ALL),
    task_service: TaskService = Depends(get_task_service),
) -> TaskPageResponse:
    """List tasks filtered by completion state."""
    return task_service.handle_filter(status)


@router.post("/tasks", response_model=TaskPageResponse)
def create_task(
    request: CreateTaskRequest,
    task_service: TaskService = Depends(get_task_service),
) -> TaskPageResponse:
    """Create a task and return the full task list."""
    log.debug("Create task request received")
    return task_service.handle_create(request.title)


@router.patch("/tasks/{task_id}", response_model=TaskPageResponse)
def update_task(
    task_id: int,
    request: UpdateTaskRequest,
    task_service: TaskService = Depends(get_task_service),
) -> TaskPageResponse:
    """Update a task's title and/or completion state and return the full list."""
    log.debug("Update task %s request received (fields: %s)", task_id, sorted(request.model_fields_set))
    return task_service.handle_update(task_id, request.to_task_update())


@router.delete("/tasks/{task_id}", response_model=TaskPageResponse)
def delete_task(
    task_id: int,
    task_service: TaskService = Depends(get_task_service),
) -> TaskPageResponse:
    """Delete a task and return the remaining tasks."""
    log.debug("Delete task %s request received", task_id)
    return task_service.handle_delete(task_id)
