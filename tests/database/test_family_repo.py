# tests/database/test_family_repo.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone

from mediarank.database.models.family import FamilyMember as DBFamilyMember
from mediarank.database.repos.family_repo import SqlAlchemyFamilyRepo
from mediarank.domain.entities.family import Family, FamilyMember, FamilySettings
from mediarank.domain.enums.family_role import FamilyRole
from mediarank.domain.enums.privacy_level import PrivacyLevel

T0 = datetime(2024, 2, 1, tzinfo=timezone.utc)


def _family(fid="f1", creator="u1", created=T0) -> Family:
    return Family(id=fid, name="The Smiths", created_by=creator, description="movie night", created_at=created)


def test_create_adds_creator_membership(db):
    repo = SqlAlchemyFamilyRepo(db)
    fam = repo.create(_family(), FamilyRole.parent)

    assert fam.member_ids == ["u1"]
    assert fam.settings == FamilySettings()
    member = repo.get_member("f1", "u1")
    assert member.role is FamilyRole.parent
    assert member.is_active


def test_add_and_remove_member_updates_member_ids(db):
    repo = SqlAlchemyFamilyRepo(db)
    repo.create(_family(), FamilyRole.parent)

    repo.add_member(FamilyMember(family_id="f1", user_id="u2", role=FamilyRole.child, joined_at=T0 + timedelta(days=1)))
    assert sorted(repo.get("f1").member_ids) == ["u1", "u2"]

    assert repo.remove_member("f1", "u2") is True
    assert repo.get("f1").member_ids == ["u1"]
    assert repo.remove_member("f1", "u2") is False


def test_inactive_members_are_not_listed(db):
    repo = SqlAlchemyFamilyRepo(db)
    repo.create(_family(), FamilyRole.parent)
    repo.add_member(FamilyMember(family_id="f1", user_id="u3", role=FamilyRole.cousin, is_active=False))

    assert [m.user_id for m in repo.list_active_members("f1")] == ["u1"]
    assert repo.get("f1").member_ids == ["u1"]


def test_update_info_and_settings(db):
    repo = SqlAlchemyFamilyRepo(db)
    repo.create(_family(), FamilyRole.parent)

    fam = repo.update_info("f1", name="Smith clan", description=None)
    assert fam.name == "Smith clan"
    assert fam.description == "movie night"

    fam = repo.update_settings("f1", FamilySettings(require_parent_approval=True, privacy_level=PrivacyLevel.public))
    assert fam.settings.require_parent_approval is True
    assert fam.settings.privacy_level is PrivacyLevel.public

    assert repo.update_info("nope", name="x") is None


def test_list_for_member_newest_first(db):
    repo = SqlAlchemyFamilyRepo(db)
    repo.create(_family("old", created=T0), FamilyRole.parent)
    repo.create(_family("new", created=T0 + timedelta(days=3)), FamilyRole.parent)
    repo.create(_family("other", creator="u9"), FamilyRole.parent)

    assert [f.id for f in repo.list_for_member("u1")] == ["new", "old"]


def test_set_member_role_and_lookup_by_role(db):
    repo = SqlAlchemyFamilyRepo(db)
    repo.create(_family("f1"), FamilyRole.parent)
    repo.create(_family("f2"), FamilyRole.parent)

    updated = repo.set_member_role("f2", "u1", FamilyRole.uncle)
    assert updated.role is FamilyRole.uncle
    assert repo.list_family_ids_by_role("u1", FamilyRole.parent) == ["f1"]
    assert repo.set_member_role("f2", "ghost", FamilyRole.aunt) is None


def test_delete_cascades_memberships(db):
    repo = SqlAlchemyFamilyRepo(db)
    repo.create(_family(), FamilyRole.parent)
    repo.add_member(FamilyMember(family_id="f1", user_id="u2"))

    assert repo.delete("f1") is True
    assert repo.get("f1") is None
    assert db.get(DBFamilyMember, ("f1", "u2")) is None
    assert repo.delete("f1") is False
