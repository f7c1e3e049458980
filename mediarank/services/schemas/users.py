from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from mediarank.domain.enums.family_role import FamilyRole


class UserProfileUpdate(BaseModel):
    display_name: Optional[str] = Field(None, max_length=255)
    email: Optional[str] = Field(None, max_length=320)
    bio: Optional[str] = None
    photo_url: Optional[str] = None
    favorite_genres: Optional[List[str]] = None


class UserProfileRead(BaseModel):
    uid: str
    display_name: str = ""
    email: Optional[str] = None
    bio: str = ""
    photo_url: Optional[str] = None
    favorite_genres: List[str] = Field(default_factory=list)
    family_id: Optional[str] = None
    family_role: Optional[FamilyRole] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
