# mediarank/domain/entities/user_profile.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from mediarank.domain.enums.family_role import FamilyRole


@dataclass
class UserProfile:
    """
    Profile document keyed by the identity provider's user id (uid).
    Authentication itself lives outside this service.
    """
    uid: str
    display_name: str = ""
    email: Optional[str] = None
    bio: str = ""
    photo_url: Optional[str] = None
    favorite_genres: List[str] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # denormalized link to the family the user belongs to (if any)
    family_id: Optional[str] = None
    family_role: Optional[FamilyRole] = None

    def __post_init__(self):
        if not self.uid or not self.uid.strip():
            raise ValueError("UserProfile.uid is required")
