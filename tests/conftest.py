"""
Shared fixtures: an in-memory SQLite session, an in-memory task store with a
controllable clock, and a helper for inserting task rows with explicit
timestamps.
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from task_list.repository import InMemoryTaskRepository
from task_list.repository.models import Base, TaskModel


class FakeClock:
    """Deterministic epoch-ms clock; every call advances by ``step``."""

    def __init__(self, start: int = 1_700_000_000_000, step: int = 1000):
        self.now = start
        self.step = step

    def __call__(self) -> int:
        current = self.now
        self.now += self.step
        return current


@pytest.fixture
def db_session():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(engine)
    Session = sessionmaker(bind=engine, autoflush=False)
    session = Session()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def memory_repository(clock):
    return InMemoryTaskRepository(clock=clock)


@pytest.fixture
def add_task_row(db_session):
    """Insert a task row directly, bypassing the repository."""

    def _add(title: str, completed: bool = False, created_at: int = 1000, updated_at=None):
        model = TaskModel(
            title=title,
            completed=completed,
            created_at=created_at,
            updated_at=updated_at if updated_at is not None else created_at,
        )
        db_session.add(model)
        db_session.flush()
        return model.id

    return _add
