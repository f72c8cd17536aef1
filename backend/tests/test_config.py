import pytest

from users_api.config import Settings
from users_api.database import build_engine


def test_defaults(monkeypatch):
    for name in ("APP_ENV", "PORT", "CORS_ORIGINS", "SQL_ECHO", "SHUTDOWN_GRACE_SECONDS"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.app_env == "development"
    assert settings.is_development
    assert settings.port == 8080
    assert settings.cors_origins == ["http://localhost:3000"]
    assert settings.sql_echo is False
    assert settings.shutdown_grace_seconds == 10


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example.com, https://b.example.com,")
    monkeypatch.setenv("SQL_ECHO", "yes")
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/users")

    settings = Settings()

    assert settings.app_env == "production"
    assert not settings.is_development
    assert settings.port == 9000
    assert settings.cors_origins == ["https://a.example.com", "https://b.example.com"]
    assert settings.sql_echo is True
    assert settings.database_url == "postgresql://u:p@db:5432/users"


@pytest.mark.parametrize(
    "name,value",
    [("APP_ENV", "staging"), ("PORT", "0"), ("PORT", "70000"), ("SHUTDOWN_GRACE_SECONDS", "-1")],
)
def test_rejects_invalid_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ValueError):
        Settings()


def test_build_engine_creates_sqlite_directory(tmp_path):
    db_file = tmp_path / "nested" / "users.db"

    engine = build_engine(f"sqlite:///{db_file}")

    assert db_file.parent.is_dir()
    engine.dispose()
