from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from helpers import StepClock

from taskboard.main import create_app
from taskboard.store import TaskStore


@pytest.fixture
def store() -> TaskStore:
    return TaskStore(clock=StepClock())


@pytest.fixture
def client(store: TaskStore) -> TestClient:
    return TestClient(create_app(store))
