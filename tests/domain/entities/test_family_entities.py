import pytest

from mediarank.domain.entities.family import Family, FamilyMember, FamilySettings
from mediarank.domain.entities.user_profile import UserProfile
from mediarank.domain.enums.family_role import FamilyRole
from mediarank.domain.enums.privacy_level import PrivacyLevel


def test_family_settings_defaults():
    s = FamilySettings()
    assert s.allow_child_rankings is True
    assert s.require_parent_approval is False
    assert s.privacy_level is PrivacyLevel.private


def test_family_settings_merge_ignores_none():
    s = FamilySettings().merged(require_parent_approval=True, privacy_level=None)
    assert s.require_parent_approval is True
    assert s.allow_child_rankings is True
    assert s.privacy_level is PrivacyLevel.private


def test_privacy_level_wire_value():
    assert PrivacyLevel("family-only") is PrivacyLevel.family_only


def test_family_requires_name_and_creator():
    with pytest.raises(ValueError):
        Family(id="f1", name=" ", created_by="u1")
    with pytest.raises(ValueError):
        Family(id="f1", name="Smiths", created_by="")


def test_family_has_member():
    f = Family(id="f1", name="Smiths", created_by="u1", member_ids=["u1", "u2"])
    assert f.has_member("u2")
    assert not f.has_member("u3")


def test_family_member_defaults_to_other_role():
    m = FamilyMember(family_id="f1", user_id="u2")
    assert m.role is FamilyRole.other
    assert m.is_active


def test_user_profile_requires_uid():
    with pytest.raises(ValueError):
        UserProfile(uid="")
    p = UserProfile(uid="u1")
    assert p.favorite_genres == []
    assert p.family_id is None
