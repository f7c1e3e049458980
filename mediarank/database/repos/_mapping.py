# mediarank/database/repos/_mapping.py
from __future__ import annotations

from typing import List

from mediarank.common.timeutil import as_utc
from mediarank.database.models.ranking import Ranking as DBRanking
from mediarank.database.models.family import Family as DBFamily, FamilyMember as DBFamilyMember
from mediarank.database.models.user import UserProfile as DBUserProfile
from mediarank.domain.entities.media_item import MediaItem
from mediarank.domain.entities.ranking import Ranking as DomainRanking
from mediarank.domain.entities.family import (
    Family as DomainFamily,
    FamilyMember as DomainFamilyMember,
    FamilySettings,
)
from mediarank.domain.entities.user_profile import UserProfile as DomainUserProfile


def to_domain_ranking(row: DBRanking) -> DomainRanking:
    return DomainRanking(
        id=row.id,
        user_id=row.user_id,
        media_id=row.media_id,
        media=MediaItem.from_dict(row.media) if row.media else None,
        rank=int(row.rank),
        notes=row.notes,
        created_at=as_utc(row.date_created),
        updated_at=as_utc(row.last_updated),
    )


def to_domain_member(row: DBFamilyMember) -> DomainFamilyMember:
    return DomainFamilyMember(
        family_id=row.family_id,
        user_id=row.user_id,
        role=row.role,
        joined_at=as_utc(row.joined_at),
        is_active=bool(row.is_active),
    )


def to_domain_family(row: DBFamily) -> DomainFamily:
    member_ids: List[str] = [m.user_id for m in row.members if m.is_active]
    return DomainFamily(
        id=row.id,
        name=row.name,
        description=row.description,
        created_by=row.created_by,
        member_ids=member_ids,
        settings=FamilySettings(
            allow_child_rankings=bool(row.allow_child_rankings),
            require_parent_approval=bool(row.require_parent_approval),
            privacy_level=row.privacy_level,
        ),
        created_at=as_utc(row.date_created),
        updated_at=as_utc(row.last_updated),
    )


def to_domain_user(row: DBUserProfile) -> DomainUserProfile:
    return DomainUserProfile(
        uid=row.uid,
        email=row.email,
        display_name=row.display_name or "",
        bio=row.bio or "",
        photo_url=row.photo_url,
        favorite_genres=list(row.favorite_genres or []),
        family_id=row.family_id,
        family_role=row.family_role,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )
