"""
Tests for the SQLAlchemy TaskRepository against an in-memory SQLite database.
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from task_list.repository import TaskRepository, TaskUpdate
from task_list.repository.models import TaskModel
from task_list.shared.database import StorageError
from task_list.shared.exceptions import EntityNotFoundError, EntityOperation, ValidationError


@pytest.fixture
def repository(db_session):
    return TaskRepository(db_session)


class TestTaskRepositoryWrites:
    """Create, update and delete."""

    def test_create_persists_trimmed_pending_task(self, repository, db_session):
        task = repository.create("  Buy milk ")

        row = db_session.get(TaskModel, task.id)
        assert row.title == "Buy milk"
        assert row.completed is False
        assert row.created_at == row.updated_at == task.created_at

    def test_create_rejects_blank_title(self, repository):
        with pytest.raises(ValidationError):
            repository.create(" ")

        assert repository.count() == 0

    def test_create_accepts_255_rejects_256(self, repository):
        repository.create("a" * 255)

        with pytest.raises(ValidationError):
            repository.create("a" * 256)

        assert repository.count() == 1

    def test_update_toggles_completed(self, repository):
        task = repository.create("Toggle me")

        repository.update(task.id, TaskUpdate(completed=True))
        updated = repository.update(task.id, TaskUpdate(completed=False))

        assert updated.completed is False
        assert updated.title == "Toggle me"

    def test_update_changes_only_supplied_fields(self, repository):
        task = repository.create("Old")
        repository.update(task.id, TaskUpdate(completed=True))

        updated = repository.update(task.id, TaskUpdate(title="New"))

        assert updated.title == "New"
        assert updated.completed is True
        assert updated.created_at == task.created_at
        assert updated.updated_at >= task.updated_at

    def test_update_unknown_id_raises_not_found(self, repository):
        with pytest.raises(EntityNotFoundError):
            repository.update(404, TaskUpdate(title="Nope"))

    def test_delete_removes_row(self, repository):
        first = repository.create("First")
        second = repository.create("Second")

        repository.delete(first.id)

        assert repository.get(first.id) is None
        assert [t.id for t in repository.list_all()] == [second.id]

    def test_delete_twice_raises_not_found(self, repository):
        task = repository.create("Once")
        repository.delete(task.id)

        with pytest.raises(EntityNotFoundError):
            repository.delete(task.id)

    def test_ids_are_not_reused_after_delete(self, repository):
        repository.create("First")
        second = repository.create("Second")
        repository.delete(second.id)

        third = repository.create("Third")

        assert third.id > second.id


class TestTaskRepositoryListing:
    """Ordering and filters."""

    def test_list_all_orders_by_created_at_then_id(self, repository, add_task_row):
        a = add_task_row("A", created_at=1000)
        b = add_task_row("B", created_at=1000)
        c = add_task_row("C", created_at=2000)

        assert [t.id for t in repository.list_all()] == [c, b, a]

    def test_filters_keep_ordering(self, repository, add_task_row):
        pending_old = add_task_row("Pending old", created_at=1000)
        done = add_task_row("Done", completed=True, created_at=1500)
        pending_new = add_task_row("Pending new", created_at=2000)

        assert [t.id for t in repository.list_pending()] == [pending_new, pending_old]
        assert [t.id for t in repository.list_completed()] == [done]

    def test_count(self, repository, add_task_row):
        add_task_row("One")
        add_task_row("Two")

        assert repository.count() == 2


class TestTaskRepositoryStorageErrors:
    """SQLAlchemy failures surface as StorageError."""

    def test_query_failure_is_wrapped(self):
        db = MagicMock()
        cause = OperationalError("SELECT", {}, Exception("database is locked"))
        db.query.side_effect = cause

        with pytest.raises(StorageError) as exc_info:
            TaskRepository(db).list_all()

        assert exc_info.value.operation == EntityOperation.READ
        assert exc_info.value.__cause__ is cause
