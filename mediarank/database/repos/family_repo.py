# mediarank/database/repos/family_repo.py
from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select, and_
from sqlalchemy.orm import Session, selectinload

from mediarank.database.models.family import Family as DBFamily, FamilyMember as DBFamilyMember
from mediarank.database.repos._mapping import to_domain_family, to_domain_member
from mediarank.domain.entities.family import (
    Family as DomainFamily,
    FamilyMember as DomainFamilyMember,
    FamilySettings,
)
from mediarank.domain.enums.family_role import FamilyRole


class SqlAlchemyFamilyRepo:
    """
    Families plus their membership rows. `Family.member_ids` is derived from
    the active membership rows, so the two can never drift apart.
    """

    def __init__(self, session: Session) -> None:
        self.db = session

    # -------- Families --------

    def _family_row(self, family_id: str) -> Optional[DBFamily]:
        stmt = (
            select(DBFamily)
            .options(selectinload(DBFamily.members))
            .where(DBFamily.id == family_id)
            .execution_options(populate_existing=True)
        )
        return self.db.execute(stmt).scalars().first()

    def get(self, family_id: str) -> Optional[DomainFamily]:
        row = self._family_row(family_id)
        return to_domain_family(row) if row else None

    def list_for_member(self, user_id: str) -> List[DomainFamily]:
        stmt = (
            select(DBFamily)
            .options(selectinload(DBFamily.members))
            .join(DBFamilyMember, DBFamilyMember.family_id == DBFamily.id)
            .where(DBFamilyMember.user_id == user_id, DBFamilyMember.is_active.is_(True))
            .order_by(DBFamily.date_created.desc().nulls_last(), DBFamily.id.asc())
            .execution_options(populate_existing=True)
        )
        return [to_domain_family(r) for r in self.db.execute(stmt).scalars().unique().all()]

    def create(self, family: DomainFamily, creator_role: FamilyRole) -> DomainFamily:
        row = DBFamily(
            id=family.id,
            name=family.name,
            description=family.description,
            created_by=family.created_by,
            allow_child_rankings=family.settings.allow_child_rankings,
            require_parent_approval=family.settings.require_parent_approval,
            privacy_level=family.settings.privacy_level,
        )
        if family.created_at is not None:
            row.date_created = family.created_at
            row.last_updated = family.created_at
        creator = DBFamilyMember(user_id=family.created_by, role=creator_role, is_active=True)
        if family.created_at is not None:
            creator.joined_at = family.created_at
        row.members.append(creator)
        self.db.add(row)
        self.db.flush()
        self.db.refresh(row)
        return to_domain_family(row)

    def update_info(
        self, family_id: str, *, name: Optional[str] = None, description: Optional[str] = None
    ) -> Optional[DomainFamily]:
        row = self._family_row(family_id)
        if not row:
            return None
        if name is not None:
            row.name = name
        if description is not None:
            row.description = description
        self.db.flush()
        self.db.refresh(row)
        return to_domain_family(row)

    def update_settings(self, family_id: str, settings: FamilySettings) -> Optional[DomainFamily]:
        row = self._family_row(family_id)
        if not row:
            return None
        row.allow_child_rankings = settings.allow_child_rankings
        row.require_parent_approval = settings.require_parent_approval
        row.privacy_level = settings.privacy_level
        self.db.flush()
        self.db.refresh(row)
        return to_domain_family(row)

    def delete(self, family_id: str) -> bool:
        row = self._family_row(family_id)
        if not row:
            return False
        # cascade="all, delete-orphan" removes the membership rows too
        self.db.delete(row)
        self.db.flush()
        return True

    # -------- Memberships --------

    def _member_row(self, family_id: str, user_id: str) -> Optional[DBFamilyMember]:
        return self.db.get(DBFamilyMember, (family_id, user_id))

    def get_member(self, family_id: str, user_id: str) -> Optional[DomainFamilyMember]:
        row = self._member_row(family_id, user_id)
        return to_domain_member(row) if row else None

    def add_member(self, member: DomainFamilyMember) -> DomainFamilyMember:
        row = DBFamilyMember(
            family_id=member.family_id,
            user_id=member.user_id,
            role=member.role,
            is_active=member.is_active,
        )
        if member.joined_at is not None:
            row.joined_at = member.joined_at
        self.db.add(row)
        self.db.flush()
        self.db.refresh(row)
        return to_domain_member(row)

    def remove_member(self, family_id: str, user_id: str) -> bool:
        row = self._member_row(family_id, user_id)
        if not row:
            return False
        self.db.delete(row)
        self.db.flush()
        return True

    def set_member_role(self, family_id: str, user_id: str, role: FamilyRole) -> Optional[DomainFamilyMember]:
        row = self._member_row(family_id, user_id)
        if not row:
            return None
        row.role = role
        self.db.flush()
        return to_domain_member(row)

    def list_active_members(self, family_id: str) -> List[DomainFamilyMember]:
        stmt = (
            select(DBFamilyMember)
            .where(DBFamilyMember.family_id == family_id, DBFamilyMember.is_active.is_(True))
            .order_by(DBFamilyMember.joined_at.asc().nulls_last(), DBFamilyMember.user_id.asc())
        )
        return [to_domain_member(r) for r in self.db.execute(stmt).scalars().all()]

    def list_family_ids_by_role(self, user_id: str, role: FamilyRole) -> List[str]:
        stmt = select(DBFamilyMember.family_id).where(
            and_(
                DBFamilyMember.user_id == user_id,
                DBFamilyMember.role == role,
                DBFamilyMember.is_active.is_(True),
            )
        )
        return [fid for (fid,) in self.db.execute(stmt).all()]
