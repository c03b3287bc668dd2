"""
Translation of SQLAlchemy failures into the application's StorageError.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy.exc import SQLAlchemyError

from ..exceptions.exceptions import EntityOperation, StorageError

log = logging.getLogger(__name__)


@contextmanager
def storage_errors(operation: Optional[EntityOperation] = None) -> Iterator[None]:
    """
    Re-raise any SQLAlchemy error raised inside the block as StorageError.

    The original exception is chained so handlers can log the full cause.
    """
    try:
        yield
    except SQLAlchemyError as e:
        op = operation.value if operation else "query"
        log.error("Database %s failed: %s", op, e)
        raise StorageError(f"Database {op} failed", operation=operation) from e


__all__ = ["StorageError", "storage_errors"]
