"""
Error DTOs returned by the exception handlers.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class FieldError(BaseModel):
    """A single field-level validation message."""

    field: str
    message: str


class ValidationErrorDetail(BaseModel):
    """Field-level validation errors grouped by field name."""

    model_config = ConfigDict(populate_by_name=True)

    fields: Dict[str, List[str]] = Field(default_factory=dict)

    @classmethod
    def from_field_errors(cls, errors: List[FieldError]) -> "ValidationErrorDetail":
        grouped: Dict[str, List[str]] = {}
        for error in errors:
            grouped.setdefault(error.field, []).append(error.message)
        return cls(fields=grouped)


class ErrorResponse(BaseModel):
    """Standard error body for every non-2xx response."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    validation_details: Optional[Dict[str, List[str]]] = Field(
        default=None, alias="validationDetails"
    )

    @classmethod
    def create(
        cls, message: str, validation_details: Optional[Dict[str, List[str]]] = None
    ) -> "ErrorResponse":
        return cls(message=message, validation_details=validation_details)
