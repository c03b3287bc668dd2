"""
Exception types and handlers for consistent error handling.

Provides:
- Business exception types (ValidationError, EntityNotFoundError, etc.)
- FastAPI exception handlers
- Error DTOs for API responses
"""

from .exceptions import (
    TaskListException,
    ValidationError,
    EntityNotFoundError,
    NotFoundError,
    StorageError,
    EntityOperation,
)
from .exception_handlers import register_exception_handlers
from .error_dto import (
    ErrorResponse,
    ValidationErrorDetail,
    FieldError,
)

__all__ = [
    "TaskListException",
    "ValidationError",
    "EntityNotFoundError",
    "NotFoundError",
    "StorageError",
    "EntityOperation",
    "register_exception_handlers",
    "ErrorResponse",
    "ValidationErrorDetail",
    "FieldError",
]
