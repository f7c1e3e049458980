# tests/conftest.py
from __future__ import annotations
import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from mediarank.common.settings import get_settings
from mediarank.database.models import Base  # <-- imports your models/metadata

cfg = get_settings()


def _sqlite_engine() -> Engine:
    # One shared in-memory connection so every session sees the same tables
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )

    @event.listens_for(engine, "connect")
    def _fk_on(dbapi_conn, _):
        cur = dbapi_conn.cursor()
        cur.execute("PRAGMA foreign_keys=ON")
        cur.close()

    return engine


@pytest.fixture(scope="session")
def _database_url():
    """
    USE_TESTCONTAINERS=true runs the suite against a throwaway PostgreSQL;
    otherwise everything runs on in-memory SQLite.
    """
    if not cfg.use_testcontainers:
        yield None
        return
    from testcontainers.postgres import PostgresContainer

    with PostgresContainer(cfg.test_db_image) as pg:
        # Force psycopg (v3) driver in the URL returned by testcontainers (it defaults to psycopg2)
        yield pg.get_connection_url().replace("psycopg2", "psycopg")


@pytest.fixture(scope="session")
def db_engine(_database_url) -> Engine:
    engine = create_engine(_database_url, future=True) if _database_url else _sqlite_engine()

    # Skip Alembic here; just create tables from models
    Base.metadata.create_all(bind=engine)

    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()
