# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from userauth.shared.config import DatabaseConfig
from userauth.shared.logging import logger


class Base(DeclarativeBase):
    pass


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def _is_memory_sqlite(url: str) -> bool:
    return _is_sqlite(url) and (url.rstrip("/") in ("sqlite:", "sqlite:/") or ":memory:" in url)


def _use_immediate_transactions(engine: Engine) -> None:
    # pysqlite defers BEGIN until the first write, and a deferred writer that
    # loses the upgrade race gets "database is locked" without waiting.
    @event.listens_for(engine, "connect")
    def _disable_pysqlite_begin(dbapi_connection: Any, _record: Any) -> None:
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _begin_immediate(connection: Any) -> None:
        connection.exec_driver_sql("BEGIN IMMEDIATE")


class Database:
    """Engine plus session factory; one instance per application."""

    def __init__(self, config: DatabaseConfig) -> None:
        url = config.url
        engine_kwargs: dict[str, Any] = {"echo": False, "pool_pre_ping": True}
        connect_args: dict[str, object] = {}

        if _is_sqlite(url):
            connect_args = {"check_same_thread": False, "timeout": int(config.pool_timeout)}
        if not _is_memory_sqlite(url):
            engine_kwargs.update(
                pool_size=config.pool_size,
                max_overflow=config.max_overflow,
                pool_timeout=config.pool_timeout,
            )

        self.engine: Engine = create_engine(url, connect_args=connect_args, **engine_kwargs)
        if _is_sqlite(url):
            _use_immediate_transactions(self.engine)

        self._sessions = sessionmaker(
            bind=self.engine, autoflush=False, autocommit=False, expire_on_commit=False
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        session = self._sessions()
        logger.debug("db.session: opened session")
        try:
            yield session
            session.commit()
            logger.debug("db.session: committed session")
        except Exception as exc:
            logger.debug(f"db.session: {type(exc).__name__}, rolling back")
            session.rollback()
            raise
        finally:
            session.close()

    def create_schema(self) -> None:
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database schema ensured")

    def drop_schema(self) -> None:
        Base.metadata.drop_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()
