import os

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("API_BASE_URL", "https://rickandmortyapi.test/api/")
os.environ.setdefault("CHARACTER_RESOURCE", "character")
os.environ.setdefault("LOAD_ON_STARTUP", "false")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from app.config import get_settings  # noqa: E402
from app.main import create_app  # noqa: E402
from tests.helpers import RecordingTransport, page_payload  # noqa: E402


@pytest.fixture(autouse=True)
def reset_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def transport():
    return RecordingTransport(json_body=page_payload())


@pytest.fixture()
def client(transport):
    app = create_app(transport=transport)
    with TestClient(app) as test_client:
        yield test_client
