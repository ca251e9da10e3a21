"""Settings & CLI — defaults, env coercion, and flag overrides."""

from people_api.__main__ import settings_from_args
from people_api.config import Settings


def test_defaults_match_documented_surface(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("CREDENTIALS_FILE", raising=False)
    settings = Settings(_env_file=None)
    assert settings.redirect_url == "http://localhost:8080/auth/"
    assert settings.credentials_file == "clientid.github.json"
    assert settings.oauth_scopes == ["read:user"]
    assert settings.database_url == "sqlite+aiosqlite:///test.db"
    assert (settings.host, settings.port) == ("localhost", 8080)
    assert settings.is_sqlite


def test_postgres_url_converted_to_asyncpg():
    settings = Settings(database_url="postgresql://u:p@db:5432/people")
    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/people"
    assert not settings.is_sqlite


def test_cli_flags_override_settings():
    settings = settings_from_args([
        "--redirect", "https://people.example.com/auth/",
        "--cred-file", "/etc/people/github.json",
        "--port", "9090",
    ])
    assert settings.redirect_url == "https://people.example.com/auth/"
    assert settings.credentials_file == "/etc/people/github.json"
    assert settings.port == 9090


def test_cli_without_flags_keeps_settings():
    settings = settings_from_args([])
    assert settings.redirect_url == "http://localhost:8080/auth/"
