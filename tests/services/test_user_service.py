# tests/services/test_user_service.py
from __future__ import annotations

import pytest

from mediarank.common.errors import AuthenticationError
from mediarank.database.repos.user_repo import SqlAlchemyUserRepo
from mediarank.services.users.service import UserService


@pytest.fixture()
def svc(db_session):
    return UserService(SqlAlchemyUserRepo(db_session))


def test_save_profile_creates_then_updates(svc):
    created = svc.save_profile("u1", display_name=" Lee ", favorite_genres=["drama", " ", "sci-fi"])
    assert created.display_name == "Lee"
    assert created.favorite_genres == ["drama", "sci-fi"]
    assert created.created_at is not None

    updated = svc.save_profile("u1", bio="Watches everything")
    assert updated.display_name == "Lee"
    assert updated.bio == "Watches everything"
    assert updated.favorite_genres == ["drama", "sci-fi"]


def test_save_profile_requires_uid(svc):
    with pytest.raises(AuthenticationError):
        svc.save_profile("  ")


def test_get_user(svc):
    assert svc.get_user("u1") is None
    svc.save_profile("u1", display_name="Lee")
    assert svc.get_user("u1").display_name == "Lee"


def test_get_users_by_name(svc):
    svc.save_profile("u1", display_name="Lee")
    svc.save_profile("u2", display_name="Lee")
    svc.save_profile("u3", display_name="Leena")
    assert {p.uid for p in svc.get_users_by_name("Lee")} == {"u1", "u2"}
    assert svc.get_users_by_name("  ") == []
