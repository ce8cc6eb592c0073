# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Session, scoped_session, sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.shared.config import load_config
from storefront.shared.config.settings import DatabaseConfig
from storefront.shared.logging import logger


class Base(DeclarativeBase):
    pass


def _sqlite_pragmas(dbapi_conn, _record) -> None:
    cur = dbapi_conn.cursor()
    try:
        cur.execute("PRAGMA journal_mode=WAL;")
        cur.execute("PRAGMA foreign_keys=ON;")
    finally:
        cur.close()


def _build_engine(config: DatabaseConfig) -> Engine:
    url = make_url(config.url)
    is_sqlite = url.get_backend_name() == "sqlite"
    options: dict[str, Any] = {"pool_pre_ping": True}

    if is_sqlite and url.database in (None, "", ":memory:"):
        # An in-memory database lives on a single connection.
        options.update(poolclass=StaticPool, connect_args={"check_same_thread": False})
    else:
        options.update(
            pool_size=config.pool_size,
            max_overflow=config.max_overflow,
            pool_timeout=config.pool_timeout,
        )
        if is_sqlite:
            options["connect_args"] = {
                "check_same_thread": False,
                "timeout": config.pool_timeout,
            }

    engine = create_engine(config.url, **options)
    if is_sqlite:
        event.listen(engine, "connect", _sqlite_pragmas)
    return engine


ENGINE: Engine = _build_engine(load_config().database)

SessionLocal = scoped_session(
    sessionmaker(bind=ENGINE, autoflush=False, expire_on_commit=False)
)


@contextmanager
def session_scope() -> Iterator[Session]:
    """Unit of work: commit on success, roll back and re-raise on error."""

    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        logger.exception("db.session: error, rolling back")
        session.rollback()
        raise
    finally:
        session.close()
        SessionLocal.remove()


def init_db() -> None:
    Base.metadata.create_all(bind=ENGINE)
    logger.info(f"Database schema ensured on {ENGINE.url.get_backend_name()}")
