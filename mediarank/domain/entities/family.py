# mediarank/domain/entities/family.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import List, Optional

from mediarank.domain.enums.family_role import FamilyRole
from mediarank.domain.enums.privacy_level import PrivacyLevel


@dataclass(frozen=True)
class FamilySettings:
    allow_child_rankings: bool = True
    require_parent_approval: bool = False
    privacy_level: PrivacyLevel = PrivacyLevel.private

    def merged(self, **changes) -> "FamilySettings":
        """Return a copy with the non-None `changes` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


@dataclass
class FamilyMember:
    """Membership of one user in one family. Unique per (family_id, user_id)."""
    family_id: str
    user_id: str
    role: FamilyRole = FamilyRole.other
    joined_at: Optional[datetime] = None
    is_active: bool = True

    def __post_init__(self):
        if not self.family_id:
            raise ValueError("FamilyMember.family_id is required")
        if not self.user_id:
            raise ValueError("FamilyMember.user_id is required")


@dataclass
class Family:
    id: str
    name: str
    created_by: str
    description: Optional[str] = None
    member_ids: List[str] = field(default_factory=list)
    settings: FamilySettings = field(default_factory=FamilySettings)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Family.name is required")
        if not self.created_by:
            raise ValueError("Family.created_by is required")

    def has_member(self, user_id: str) -> bool:
        return user_id in self.member_ids
