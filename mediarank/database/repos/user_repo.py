# mediarank/database/repos/user_repo.py
from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from mediarank.database.models.user import UserProfile as DBUserProfile
from mediarank.database.repos._mapping import to_domain_user
from mediarank.domain.entities.user_profile import UserProfile as DomainUserProfile
from mediarank.domain.enums.family_role import FamilyRole


class SqlAlchemyUserRepo:
    def __init__(self, session: Session) -> None:
        self.db = session

    def get(self, uid: str) -> Optional[DomainUserProfile]:
        row = self.db.get(DBUserProfile, uid)
        return to_domain_user(row) if row else None

    def list_by_display_name(self, name: str) -> List[DomainUserProfile]:
        stmt = (
            select(DBUserProfile)
            .where(DBUserProfile.display_name == name)
            .order_by(DBUserProfile.created_at.desc().nulls_last(), DBUserProfile.uid.asc())
        )
        return [to_domain_user(r) for r in self.db.execute(stmt).scalars().all()]

    def save(self, profile: DomainUserProfile) -> DomainUserProfile:
        """Insert or overwrite the profile document for `profile.uid`."""
        row = self.db.get(DBUserProfile, profile.uid)
        if row is None:
            row = DBUserProfile(uid=profile.uid)
            if profile.created_at is not None:
                row.created_at = profile.created_at
            self.db.add(row)
        row.email = profile.email
        row.display_name = profile.display_name
        row.bio = profile.bio
        row.photo_url = profile.photo_url
        row.favorite_genres = list(profile.favorite_genres)
        if profile.updated_at is not None:
            row.updated_at = profile.updated_at
        self.db.flush()
        self.db.refresh(row)
        return to_domain_user(row)

    def set_family_link(self, uid: str, family_id: Optional[str], role: Optional[FamilyRole]) -> None:
        """No-op when the user has no profile yet."""
        row = self.db.get(DBUserProfile, uid)
        if row is None:
            return
        row.family_id = family_id
        row.family_role = role
        self.db.flush()
