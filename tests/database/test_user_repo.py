# tests/database/test_user_repo.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone

from mediarank.database.repos.user_repo import SqlAlchemyUserRepo
from mediarank.domain.entities.user_profile import UserProfile
from mediarank.domain.enums.family_role import FamilyRole

T0 = datetime(2024, 1, 10, tzinfo=timezone.utc)


def test_save_inserts_then_overwrites(db):
    repo = SqlAlchemyUserRepo(db)
    repo.save(UserProfile(uid="u1", display_name="Ana", favorite_genres=["noir"], created_at=T0))

    p = repo.get("u1")
    assert p.display_name == "Ana"
    assert p.favorite_genres == ["noir"]
    assert p.created_at == T0

    repo.save(UserProfile(uid="u1", display_name="Ana B", bio="hi", created_at=T0))
    p = repo.get("u1")
    assert p.display_name == "Ana B"
    assert p.bio == "hi"
    assert p.favorite_genres == []


def test_get_missing(db):
    assert SqlAlchemyUserRepo(db).get("nobody") is None


def test_list_by_display_name_exact_newest_first(db):
    repo = SqlAlchemyUserRepo(db)
    repo.save(UserProfile(uid="a", display_name="Sam", created_at=T0))
    repo.save(UserProfile(uid="b", display_name="Sam", created_at=T0 + timedelta(days=1)))
    repo.save(UserProfile(uid="c", display_name="Samantha", created_at=T0))

    assert [p.uid for p in repo.list_by_display_name("Sam")] == ["b", "a"]


def test_set_family_link(db):
    repo = SqlAlchemyUserRepo(db)
    repo.save(UserProfile(uid="u1"))
    repo.set_family_link("u1", "f1", FamilyRole.parent)

    p = repo.get("u1")
    assert (p.family_id, p.family_role) == ("f1", FamilyRole.parent)

    # no profile: nothing to link, nothing raised
    repo.set_family_link("ghost", "f1", FamilyRole.child)
    assert repo.get("ghost") is None
