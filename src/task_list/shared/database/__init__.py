"""
Database utilities for repositories and data access.

Provides:
- StorageError translation for SQLAlchemy failures
- Database helpers (dialect detection)
"""

from .database_exceptions import StorageError, storage_errors
from .database_helpers import (
    get_db_dialect,
    is_in_memory_sqlite,
)

__all__ = [
    "StorageError",
    "storage_errors",
    "get_db_dialect",
    "is_in_memory_sqlite",
]
