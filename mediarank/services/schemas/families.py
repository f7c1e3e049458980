# mediarank/services/schemas/families.py
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from mediarank.domain.enums.family_role import FamilyRole
from mediarank.domain.enums.privacy_level import PrivacyLevel


# ---------- Settings ----------
class FamilySettingsRead(BaseModel):
    allow_child_rankings: bool = True
    require_parent_approval: bool = False
    privacy_level: PrivacyLevel = PrivacyLevel.private

    model_config = ConfigDict(from_attributes=True)


class FamilySettingsUpdate(BaseModel):
    # partial: omitted fields keep their value
    allow_child_rankings: Optional[bool] = None
    require_parent_approval: Optional[bool] = None
    privacy_level: Optional[PrivacyLevel] = None


# ---------- Family ----------
class FamilyCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None


class FamilyUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None


class FamilyRead(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    created_by: str
    member_ids: List[str] = Field(default_factory=list)
    settings: FamilySettingsRead
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


# ---------- Members ----------
class FamilyMemberCreate(BaseModel):
    user_id: str = Field(..., min_length=1)
    role: FamilyRole = FamilyRole.other


class FamilyMemberRoleUpdate(BaseModel):
    role: FamilyRole


class FamilyMemberRead(BaseModel):
    family_id: str
    user_id: str
    role: FamilyRole
    joined_at: Optional[datetime] = None
    is_active: bool = True

    model_config = ConfigDict(from_attributes=True)
