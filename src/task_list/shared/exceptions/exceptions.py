"""
Business exception types raised by the service and repository layers.

Routers never translate these by hand; the handlers in
``exception_handlers`` map each type to an HTTP status and an
``ErrorResponse`` body.
"""

from enum import Enum
from typing import Any, Dict, List, Optional


class EntityOperation(str, Enum):
    """Operation during which a business error was detected."""

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"


class TaskListException(Exception):
    """Base class for all business exceptions of the application."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(TaskListException):
    """
    Raised when input data fails business validation.

    ``validation_details`` maps a field name to the list of messages for
    that field, e.g. ``{"title": ["Title cannot be empty"]}``.
    """

    def __init__(
        self,
        message: str,
        validation_details: Optional[Dict[str, List[str]]] = None,
        entity_type: Optional[str] = None,
        operation: Optional[EntityOperation] = None,
    ):
        super().__init__(message)
        self.validation_details = validation_details or {}
        self.entity_type = entity_type
        self.operation = operation

    @classmethod
    def for_field(
        cls,
        field: str,
        message: str,
        entity_type: Optional[str] = None,
        operation: Optional[EntityOperation] = None,
    ) -> "ValidationError":
        """Build a validation error carrying a single field message."""
        return cls(
            message,
            validation_details={field: [message]},
            entity_type=entity_type,
            operation=operation,
        )


class EntityNotFoundError(TaskListException):
    """Raised when a referenced entity does not exist."""

    def __init__(self, entity_type: str, entity_id: Any):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


NotFoundError = EntityNotFoundError


class StorageError(TaskListException):
    """Persistence layer failure. Not recovered locally."""

    def __init__(self, message: str, operation: Optional[EntityOperation] = None):
        super().__init__(message)
        self.operation = operation

