import pytest
from fastapi.testclient import TestClient

from taskapi.main import app
from taskapi.store import TaskStore, get_store


@pytest.fixture
def store():
    return TaskStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
