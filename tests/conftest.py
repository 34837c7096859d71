import pytest
from fastapi.testclient import TestClient

from user_registry_api.app.core.config import Settings
from user_registry_api.app.core.store import UserStore
from user_registry_api.app.main import create_app

SEED = ["Ram", "Shyam", "Rita"]


@pytest.fixture
def settings():
    return Settings(seed_users=list(SEED), api_prefix="")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def store():
    return UserStore(SEED)
