# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_INSECURE_SECRETS = ("dev", "development", "test", "")

# Sections are settings of their own, so each reads the environment and .env.
_SECTION_CONFIG = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    validate_by_name=True,
    extra="ignore",
)


class ServerConfig(BaseSettings):
    host: str = Field("127.0.0.1", alias="HOST")
    port: int = Field(8000, ge=1, le=65535, alias="PORT")

    model_config = _SECTION_CONFIG

    def address(self) -> str:
        return f"{self.host}:{self.port}"


class DatabaseConfig(BaseSettings):
    url: str = Field("sqlite:///userauth.db", alias="DATABASE_URL")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")

    model_config = _SECTION_CONFIG


class HashingConfig(BaseSettings):
    # Each Argon2id call holds ``memory_cost`` KiB, so max_workers caps memory pressure.
    max_workers: int = Field(4, ge=1, alias="HASH_MAX_WORKERS")
    timeout: float = Field(30.0, ge=0.1, alias="HASH_TIMEOUT")
    time_cost: int = Field(3, ge=1, alias="HASH_TIME_COST")
    memory_cost: int = Field(65536, ge=8, alias="HASH_MEMORY_COST")
    parallelism: int = Field(4, ge=1, alias="HASH_PARALLELISM")

    model_config = _SECTION_CONFIG


def _server_config_factory() -> ServerConfig:
    return ServerConfig()  # type: ignore[call-arg]


def _database_config_factory() -> DatabaseConfig:
    return DatabaseConfig()  # type: ignore[call-arg]


def _hashing_config_factory() -> HashingConfig:
    return HashingConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    jwt_secret: str = Field("dev", alias="JWT_SECRET")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: str | None = Field(None, alias="LOG_FILE")

    server: ServerConfig = Field(default_factory=_server_config_factory)
    database: DatabaseConfig = Field(default_factory=_database_config_factory)
    hashing: HashingConfig = Field(default_factory=_hashing_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        validate_by_name=True,
        extra="ignore",
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)

    @field_validator("app_env", mode="after")
    @classmethod
    def _normalize_env(cls, value: str) -> str:
        return value.strip().lower()

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        if self.jwt_secret in _INSECURE_SECRETS:
            print(
                "\n❌ CRITICAL SECURITY ERROR: Insecure JWT_SECRET detected in production!\n"
                "   JWT_SECRET must be a strong random value in production.\n"
                "   Generate one with: python -c \"import secrets; print(secrets.token_urlsafe(32))\"\n",
                file=sys.stderr,
            )
            sys.exit(1)

        if self.database.url.startswith("sqlite"):
            print(
                "\n⚠️  PRODUCTION WARNING: SQLite database in use, "
                "concurrent registrations will serialize on a file lock.\n",
                file=sys.stderr,
            )

        return self

    def is_production(self) -> bool:
        return self.app_env in ("production", "prod")

    def is_test(self) -> bool:
        return self.app_env == "test"


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = ["AppConfig", "DatabaseConfig", "HashingConfig", "ServerConfig", "load_config"]
