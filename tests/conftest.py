"""
Shared fixtures.

The API is exercised with the in-memory storage backend.  Each test gets
fresh repositories, installed through ``app.dependency_overrides`` so
routes, services and storage run exactly as in production.
"""

import os

os.environ.setdefault("STORAGE_BACKEND", "memory")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from resource_api.app.api.v1.endpoints import clubs, instances  # noqa: E402
from resource_api.app.main import app  # noqa: E402
from resource_api.app.repositories.memory import InMemoryCrudeRepository, InMemoryCrudRepository  # noqa: E402


@pytest.fixture
def club_repository():
    return InMemoryCrudRepository(unique_fields=("name",))


@pytest.fixture
def instance_repository():
    return InMemoryCrudeRepository(unique_fields=("name",))


@pytest.fixture
def client(club_repository, instance_repository):
    app.dependency_overrides[clubs.get_club_repository] = lambda: club_repository
    app.dependency_overrides[instances.get_instance_repository] = lambda: instance_repository
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
