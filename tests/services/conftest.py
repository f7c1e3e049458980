# tests/services/conftest.py
from __future__ import annotations
import pytest
from sqlalchemy.orm import Session
from starlette.testclient import TestClient

from mediarank.common.settings import get_settings
from mediarank.services.api.app import create_app
from mediarank.services.api.deps import transactional_session


@pytest.fixture()
def db_session(db_engine) -> Session:
    """Service-level tests: one Session on an outer transaction, rolled back afterwards."""
    conn = db_engine.connect()
    trans = conn.begin()
    session = Session(bind=conn, future=True)
    try:
        yield session
    finally:
        session.close()
        if trans.is_active:
            trans.rollback()
        conn.close()


@pytest.fixture()
def app(db_session):
    """
    A FastAPI app whose dependency `transactional_session` is overridden
    to yield a single SQLAlchemy Session bound to the test engine/transaction.
    All API calls in one test share the same session (so PUT -> GET works),
    and everything is rolled back at the end of the test.
    """
    app = create_app()

    def _override():
        # yield the same session for every request in this test
        yield db_session

    app.dependency_overrides[transactional_session] = _override
    try:
        yield app
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def api_client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def as_user():
    """Headers for a request made on behalf of `uid`."""
    header = get_settings().api.user_header

    def _headers(uid: str) -> dict:
        return {header: uid}

    return _headers
