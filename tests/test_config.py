from pathlib import Path

import pytest

from nexa_chat.core.config import DEFAULT_USERS, get_settings, normalize_database_url, parse_users

ENV_KEYS = ["DATABASE_URL", "DB_SSL", "APP_ENV", "SESSION_SECRET", "PORT", "HOST", "CHAT_STORE_FILE", "STATIC_DIR", "CHAT_USERS"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults_select_file_mode():
    settings = get_settings()
    assert settings.database_url is None
    assert settings.mode == "file"
    assert settings.port == 3000
    assert settings.session_secret == "nexa-secret"
    assert settings.db_ssl is False
    assert settings.users == DEFAULT_USERS


def test_database_url_selects_postgres(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgres://u:p@db:5432/chat")
    settings = get_settings()
    assert settings.mode == "postgres"
    assert settings.database_url == "postgresql://u:p@db:5432/chat"


def test_blank_database_url_is_unset(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "   ")
    assert get_settings().mode == "file"


@pytest.mark.parametrize("env,value", [("DB_SSL", "true"), ("APP_ENV", "production")])
def test_ssl_flags(monkeypatch, env, value):
    monkeypatch.setenv(env, value)
    assert get_settings().db_ssl is True


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("SESSION_SECRET", "s3cret")
    monkeypatch.setenv("CHAT_STORE_FILE", str(tmp_path / "store.json"))
    monkeypatch.setenv("CHAT_USERS", "alice:wonder, bob:builder")
    settings = get_settings()
    assert settings.port == 8080
    assert settings.session_secret == "s3cret"
    assert settings.store_file == Path(tmp_path / "store.json")
    assert settings.users == {"alice": "wonder", "bob": "builder"}


def test_parse_users_rejects_missing_password_separator():
    with pytest.raises(ValueError):
        parse_users("alice")


def test_normalize_database_url_keeps_other_schemes():
    assert normalize_database_url("sqlite:///chat.db") == "sqlite:///chat.db"
    assert normalize_database_url(None) is None
