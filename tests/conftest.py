import pytest
from fastapi.testclient import TestClient

from nexa_chat.app import create_app
from nexa_chat.core.config import PROJECT_ROOT, Settings

STATIC_DIR = PROJECT_ROOT / "static"


@pytest.fixture
def file_settings(tmp_path):
    return Settings(store_file=tmp_path / "chat_store.json", static_dir=STATIC_DIR, session_secret="test-secret")


@pytest.fixture
def sql_settings(tmp_path):
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'chat.db'}",
        static_dir=STATIC_DIR,
        session_secret="test-secret",
    )


@pytest.fixture(params=["file", "sql"])
def settings(request, file_settings, sql_settings):
    return file_settings if request.param == "file" else sql_settings


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    return TestClient(app)


def login(client, username="vishnu", password="pass123"):
    res = client.post("/login", json={"username": username, "password": password})
    assert res.status_code == 200, res.text
    return res
