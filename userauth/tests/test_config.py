from __future__ import annotations

from pathlib import Path

import pytest

from userauth.shared.config import AppConfig


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("APP_ENV", "HOST", "PORT"):
        monkeypatch.delenv(name, raising=False)

    config = AppConfig()

    assert config.app_env == "development"
    assert config.server.address() == "127.0.0.1:8000"
    assert config.hashing.max_workers >= 1
    assert not config.is_production()


def test_nested_sections_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")
    monkeypatch.setenv("HASH_MAX_WORKERS", "2")
    monkeypatch.setenv("PORT", "9001")
    monkeypatch.setenv("APP_ENV", " TEST ")

    config = AppConfig()

    assert config.database.url == "sqlite:///:memory:"
    assert config.hashing.max_workers == 2
    assert config.server.port == 9001
    assert config.is_test()


@pytest.mark.parametrize("value", ["1", "true", "YES"])
def test_debug_logging_flag(value: str) -> None:
    assert AppConfig(DEBUG_LOGGING=value).debug_logging is True


def test_production_refuses_insecure_secret() -> None:
    with pytest.raises(SystemExit):
        AppConfig(APP_ENV="production", JWT_SECRET="dev")


def test_production_accepts_strong_secret() -> None:
    config = AppConfig(APP_ENV="production", JWT_SECRET="s3cure-random-value-0123456789abcdef")

    assert config.is_production()


def test_dotenv_fills_every_section(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("JWT_SECRET", "DATABASE_URL", "HASH_MAX_WORKERS", "PORT"):
        monkeypatch.delenv(name, raising=False)
    (tmp_path / ".env").write_text(
        "JWT_SECRET=from-dotenv-secret\n"
        "DATABASE_URL=sqlite:///from-dotenv.db\n"
        "HASH_MAX_WORKERS=9\n"
        "PORT=8123\n",
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)

    config = AppConfig()

    assert config.jwt_secret == "from-dotenv-secret"
    assert config.database.url == "sqlite:///from-dotenv.db"
    assert config.hashing.max_workers == 9
    assert config.server.port == 8123


def test_environment_overrides_dotenv(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text("DATABASE_URL=sqlite:///from-dotenv.db\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DATABASE_URL", "sqlite:///from-env.db")

    assert AppConfig().database.url == "sqlite:///from-env.db"
