import pytest
from fastapi.testclient import TestClient

from feature_flag_api.app.main import create_app
from feature_flag_api.app.services.flag_store import FlagStore


@pytest.fixture
def store():
    return FlagStore()


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
def client(app):
    return TestClient(app)
