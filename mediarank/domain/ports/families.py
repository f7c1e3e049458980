from __future__ import annotations
from typing import List, Optional, Protocol

from mediarank.domain.entities.family import Family, FamilyMember, FamilySettings
from mediarank.domain.enums.family_role import FamilyRole

class FamilyStorePort(Protocol):
    def get(self, family_id: str) -> Optional[Family]: ...
    def list_for_member(self, user_id: str) -> List[Family]: ...
    def create(self, family: Family, creator_role: FamilyRole) -> Family: ...
    def update_info(self, family_id: str, *, name: Optional[str], description: Optional[str]) -> Optional[Family]: ...
    def update_settings(self, family_id: str, settings: FamilySettings) -> Optional[Family]: ...
    def delete(self, family_id: str) -> bool: ...
    def get_member(self, family_id: str, user_id: str) -> Optional[FamilyMember]: ...
    def add_member(self, member: FamilyMember) -> FamilyMember: ...
    def remove_member(self, family_id: str, user_id: str) -> bool: ...
    def set_member_role(self, family_id: str, user_id: str, role: FamilyRole) -> Optional[FamilyMember]: ...
    def list_active_members(self, family_id: str) -> List[FamilyMember]: ...
    def list_family_ids_by_role(self, user_id: str, role: FamilyRole) -> List[str]: ...
