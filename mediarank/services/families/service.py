from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime
from typing import Callable, Iterator, List, Optional
from uuid import uuid4

from sqlalchemy.exc import SQLAlchemyError

from mediarank.common.errors import (
    ConflictError, NotFoundError, PermissionDeniedError, StoreError, ValidationError,
)
from mediarank.common.logging import get_logger
from mediarank.common.strings.splitters import clean_text
from mediarank.common.timeutil import utcnow
from mediarank.domain.entities.family import Family, FamilyMember
from mediarank.domain.enums.family_role import FamilyRole
from mediarank.domain.enums.privacy_level import PrivacyLevel
from mediarank.domain.ports.families import FamilyStorePort
from mediarank.domain.ports.users import UserStorePort

logger = get_logger(__name__)

CREATOR_ROLE = FamilyRole.parent


@contextmanager
def _store_errors(message: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as e:
        logger.exception("%s: %s", message, e)
        raise StoreError(message) from e


class FamilyService:
    """
    Family groups and their memberships.

    When a user store is given, the user's profile keeps a denormalized
    pointer (family_id, family_role) to the family they most recently joined.
    """

    def __init__(
        self,
        store: FamilyStorePort,
        users: Optional[UserStorePort] = None,
        *,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self.store = store
        self.users = users
        self.clock = clock

    def _family_or_404(self, family_id: str) -> Family:
        family = self.store.get(family_id)
        if family is None:
            raise NotFoundError("Family not found")
        return family

    def _link_profile(self, user_id: str, family_id: Optional[str], role: Optional[FamilyRole]) -> None:
        if self.users is not None:
            self.users.set_family_link(user_id, family_id, role)

    # -------- Families --------

    def create_family(self, creator_id: str, name: str, description: Optional[str] = None) -> Family:
        name = clean_text(name)
        if not name:
            raise ValidationError("Family name is required")
        family = Family(
            id=str(uuid4()),
            name=name,
            description=clean_text(description),
            created_by=creator_id,
            member_ids=[creator_id],
            created_at=self.clock(),
        )
        with _store_errors("Failed to create family"):
            saved = self.store.create(family, CREATOR_ROLE)
            self._link_profile(creator_id, saved.id, CREATOR_ROLE)
        logger.info("Created family %s by user=%s", saved.id, creator_id)
        return saved

    def get_family(self, family_id: str) -> Optional[Family]:
        with _store_errors("Failed to fetch family"):
            return self.store.get(family_id)

    def get_user_families(self, user_id: str) -> List[Family]:
        with _store_errors("Failed to fetch user families"):
            return self.store.list_for_member(user_id)

    def update_family(
        self, family_id: str, *, name: Optional[str] = None, description: Optional[str] = None
    ) -> Family:
        if name is not None and not name.strip():
            raise ValidationError("Family name cannot be blank")
        with _store_errors("Failed to update family"):
            updated = self.store.update_info(
                family_id,
                name=name.strip() if name is not None else None,
                description=description,
            )
        if updated is None:
            raise NotFoundError("Family not found")
        logger.info("Updated family %s", family_id)
        return updated

    def update_family_settings(
        self,
        family_id: str,
        *,
        allow_child_rankings: Optional[bool] = None,
        require_parent_approval: Optional[bool] = None,
        privacy_level: Optional[PrivacyLevel] = None,
    ) -> Family:
        """Merge the given settings over the current ones; None leaves a setting as is."""
        with _store_errors("Failed to update family settings"):
            current = self._family_or_404(family_id)
            merged = current.settings.merged(
                allow_child_rankings=allow_child_rankings,
                require_parent_approval=require_parent_approval,
                privacy_level=PrivacyLevel(privacy_level) if privacy_level is not None else None,
            )
            updated = self.store.update_settings(family_id, merged)
        logger.info("Updated settings of family %s", family_id)
        return updated

    def delete_family(self, family_id: str, user_id: str) -> None:
        with _store_errors("Failed to delete family"):
            family = self._family_or_404(family_id)
            if family.created_by != user_id:
                raise PermissionDeniedError("Only the family creator can delete the family")
            members = self.store.list_active_members(family_id)
            self.store.delete(family_id)
            for m in members:
                self._unlink_if_current(m.user_id, family_id)
        logger.info("Deleted family %s by user=%s", family_id, user_id)

    # -------- Memberships --------

    def add_family_member(self, family_id: str, user_id: str, role: FamilyRole) -> FamilyMember:
        if not user_id or not user_id.strip():
            raise ValidationError("User id is required")
        role = FamilyRole(role)
        with _store_errors("Failed to add family member"):
            family = self._family_or_404(family_id)
            if family.has_member(user_id) or self.store.get_member(family_id, user_id) is not None:
                raise ConflictError("User is already a member of this family")
            member = self.store.add_member(
                FamilyMember(family_id=family_id, user_id=user_id, role=role, joined_at=self.clock())
            )
            self._link_profile(user_id, family_id, role)
        logger.info("Added user=%s to family %s as %s", user_id, family_id, role.value)
        return member

    def remove_family_member(self, family_id: str, user_id: str) -> None:
        with _store_errors("Failed to remove family member"):
            self._family_or_404(family_id)
            if not self.store.remove_member(family_id, user_id):
                raise NotFoundError("Member not found")
            self._unlink_if_current(user_id, family_id)
        logger.info("Removed user=%s from family %s", user_id, family_id)

    def _unlink_if_current(self, user_id: str, family_id: str) -> None:
        if self.users is None:
            return
        profile = self.users.get(user_id)
        if profile is not None and profile.family_id == family_id:
            self.users.set_family_link(user_id, None, None)

    def update_member_role(self, family_id: str, user_id: str, role: FamilyRole) -> FamilyMember:
        role = FamilyRole(role)
        with _store_errors("Failed to update member role"):
            member = self.store.set_member_role(family_id, user_id, role)
            if member is None:
                raise NotFoundError("Member role not found")
            if self.users is not None:
                profile = self.users.get(user_id)
                if profile is not None and profile.family_id == family_id:
                    self.users.set_family_link(user_id, family_id, role)
        logger.info("Changed role of user=%s in family %s to %s", user_id, family_id, role.value)
        return member

    def get_family_member_roles(self, family_id: str) -> List[FamilyMember]:
        with _store_errors("Failed to fetch family member roles"):
            return self.store.list_active_members(family_id)

    def is_user_family_member(self, family_id: str, user_id: str) -> bool:
        family = self.get_family(family_id)
        return family is not None and family.has_member(user_id)

    def get_user_family_role(self, family_id: str, user_id: str) -> Optional[FamilyRole]:
        with _store_errors("Failed to fetch member role"):
            member = self.store.get_member(family_id, user_id)
        return member.role if member else None

    def get_user_families_by_role(self, user_id: str, role: FamilyRole) -> List[Family]:
        role = FamilyRole(role)
        with _store_errors("Failed to fetch user families by role"):
            families = [self.store.get(fid) for fid in self.store.list_family_ids_by_role(user_id, role)]
        return [f for f in families if f is not None]
