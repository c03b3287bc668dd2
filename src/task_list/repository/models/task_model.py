"""
SQLAlchemy model for task data.
"""

from sqlalchemy import BigInteger, Boolean, Column, Index, Integer, String

from .base import Base

TITLE_MAX_LENGTH = 255


class TaskModel(Base):
    """SQLAlchemy model for to-do tasks."""

    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(TITLE_MAX_LENGTH), nullable=False)
    completed = Column(Boolean, nullable=False, default=False)
    created_at = Column(BigInteger, nullable=False)  # Epoch timestamp in milliseconds
    updated_at = Column(BigInteger, nullable=False)  # Epoch timestamp in milliseconds

    # AUTOINCREMENT keeps SQLite from reusing ids of deleted rows
    __table_args__ = (
        Index("ix_tasks_created_at_id", "created_at", "id"),
        Index("ix_tasks_completed", "completed"),
        {"sqlite_autoincrement": True},
    )
