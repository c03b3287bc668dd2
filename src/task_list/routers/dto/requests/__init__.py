from .task_requests import CreateTaskRequest, UpdateTaskRequest

__all__ = ["CreateTaskRequest", "UpdateTaskRequest"]
