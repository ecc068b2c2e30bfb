import pytest
from fastapi.testclient import TestClient

from registration_api.app.core.config import Settings
from registration_api.app.core.db import ConnectionManager
from registration_api.app.main import create_app

from .fakes import FakeServer


@pytest.fixture
def settings() -> Settings:
    return Settings(
        mongodb_uri="mongodb://fake-host:27017",
        database_name="test-db",
        collection_name="test-registrations",
        environment="test",
    )


@pytest.fixture
def fake_server() -> FakeServer:
    return FakeServer()


@pytest.fixture
def manager(settings: Settings, fake_server: FakeServer) -> ConnectionManager:
    return ConnectionManager(settings, client_factory=fake_server)


@pytest.fixture
def app(settings: Settings, manager: ConnectionManager):
    return create_app(settings, manager)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def collection(fake_server: FakeServer, settings: Settings):
    return fake_server.collection(settings.database_name, settings.collection_name)
