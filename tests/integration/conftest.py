"""
Fixtures that build the real application against a throwaway store.
"""

import pytest
from fastapi.testclient import TestClient

from task_list import main
from task_list.config import AppConfig


def _client_for(config: AppConfig, **client_kwargs):
    main.reset_dependencies()
    app = main.create_app(config)
    return TestClient(app, **client_kwargs)


@pytest.fixture
def api_client():
    """Client for an app backed by an in-memory SQLite database."""
    config = AppConfig(database_url="sqlite:///:memory:", app_name="Test Tasks")
    with _client_for(config) as client:
        yield client
    main.app.dependency_overrides.clear()
    main.reset_dependencies()


@pytest.fixture
def memory_api_client():
    """Client for an app with no database configured (in-memory task store)."""
    config = AppConfig(database_url="")
    with _client_for(config) as client:
        yield client
    main.app.dependency_overrides.clear()
    main.reset_dependencies()


@pytest.fixture
def create_task(api_client):
    def _create(title: str, completed: bool = False) -> dict:
        page = api_client.post("/tasks", json={"title": title}).json()
        task = next(t for t in page["tasks"] if t["title"] == title.strip())
        if completed:
            api_client.patch(f"/tasks/{task['id']}", json={"completed": True})
            task["completed"] = True
        return task

    return _create
