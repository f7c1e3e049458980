# mediarank/services/mappers/rankings.py
from __future__ import annotations

from typing import List

from mediarank.domain.dataclasses.stats import UserStats
from mediarank.domain.entities.media_item import MediaItem
from mediarank.domain.entities.ranking import Ranking
from mediarank.services.rankings.service import RankingImport
from mediarank.services.schemas.media import MediaItemIn
from mediarank.services.schemas.rankings import RankingImportEntry, RankingRead
from mediarank.services.schemas.stats import UserStatsRead


def to_domain_media(s: MediaItemIn) -> MediaItem:
    return MediaItem(
        id=s.id,
        type=s.type,
        title=s.title,
        release_date=s.release_date,
        poster=s.poster,
        overview=s.overview,
        rating=s.rating,
    )


def to_import_entries(entries: List[RankingImportEntry]) -> List[RankingImport]:
    return [
        RankingImport(
            rank=e.rank,
            media=to_domain_media(e.media),
            notes=e.notes,
            id=e.id,
            created_at=e.created_at,
        )
        for e in entries
    ]


def to_read_schema(r: Ranking) -> RankingRead:
    return RankingRead.model_validate(r)


def to_stats_schema(stats: UserStats) -> UserStatsRead:
    return UserStatsRead.model_validate(stats)
