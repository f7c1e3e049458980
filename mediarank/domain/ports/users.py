from __future__ import annotations
from typing import List, Optional, Protocol

from mediarank.domain.entities.user_profile import UserProfile
from mediarank.domain.enums.family_role import FamilyRole

class UserStorePort(Protocol):
    def get(self, uid: str) -> Optional[UserProfile]: ...
    def list_by_display_name(self, name: str) -> List[UserProfile]: ...
    def save(self, profile: UserProfile) -> UserProfile: ...
    def set_family_link(self, uid: str, family_id: Optional[str], role: Optional[FamilyRole]) -> None: ...
