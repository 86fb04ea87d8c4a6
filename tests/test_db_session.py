import pytest

from nexa_chat.db import session as db_session
from nexa_chat.db.session import make_engine


@pytest.fixture
def captured(monkeypatch):
    calls = []

    def fake_create_engine(url, **kwargs):
        calls.append((url, kwargs))
        return object()

    monkeypatch.setattr(db_session, "create_engine", fake_create_engine)
    return calls


def test_ssl_requires_tls_without_verification(captured):
    make_engine("postgresql://u:p@db:5432/chat", ssl=True)
    url, kwargs = captured[0]
    assert url == "postgresql://u:p@db:5432/chat"
    assert kwargs["connect_args"] == {"sslmode": "require"}
    assert kwargs["pool_pre_ping"] is True


def test_no_ssl_by_default(captured):
    make_engine("postgresql://u:p@db:5432/chat")
    assert captured[0][1]["connect_args"] == {}


def test_sqlite_allows_cross_thread_use_and_ignores_ssl(captured):
    make_engine("sqlite:///chat.db", ssl=True)
    assert captured[0][1]["connect_args"] == {"check_same_thread": False}


def test_real_sqlite_engine(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'chat.db'}")
    assert engine.dialect.name == "sqlite"
