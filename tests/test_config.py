"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from catalog.config import Settings, get_settings


def test_default_database_url_targets_postgres(monkeypatch):
    monkeypatch.delenv("CATALOG_DB_URL", raising=False)

    settings = Settings(
        _env_file=None,
        db_user="user",
        db_password="secret",
        db_host="db",
        db_port=5433,
        db_name="catalog",
    )

    assert settings.database_url == "postgresql+asyncpg://user:secret@db:5433/catalog"


def test_db_url_overrides_parts():
    settings = Settings(_env_file=None, db_url="sqlite+aiosqlite:///:memory:")

    assert settings.database_url == "sqlite+aiosqlite:///:memory:"


def test_reads_prefixed_environment(monkeypatch):
    monkeypatch.setenv("CATALOG_DEFAULT_PER_PAGE", "25")
    monkeypatch.setenv("CATALOG_ENVIRONMENT", "test")

    settings = Settings(_env_file=None)

    assert settings.default_per_page == 25
    assert settings.environment == "test"


def test_default_per_page_defaults_to_fifteen(monkeypatch):
    monkeypatch.delenv("CATALOG_DEFAULT_PER_PAGE", raising=False)

    assert Settings(_env_file=None).default_per_page == 15


@pytest.mark.parametrize("value", [0, -3])
def test_default_per_page_must_be_positive(value):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, default_per_page=value)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
