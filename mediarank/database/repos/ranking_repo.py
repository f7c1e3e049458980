# mediarank/database/repos/ranking_repo.py
from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select, delete as sa_delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from mediarank.common.errors import ConflictError, NotFoundError
from mediarank.common.logging import get_logger
from mediarank.database.models.ranking import Ranking as DBRanking
from mediarank.database.repos._mapping import to_domain_ranking
from mediarank.domain.entities.ranking import Ranking as DomainRanking
from mediarank.domain.enums.media_type import MediaType

logger = get_logger(__name__)


class SqlAlchemyRankingRepo:
    """
    SQLAlchemy-backed ranking store; satisfies RankingStorePort.

    Every query is scoped by user_id: a user's rankings form their own
    partition and no call can reach across it.

    The (user_id, media_id) unique constraint backs the upsert invariant. Two
    racing inserts for the same pair cannot both land; the loser gets a
    ConflictError.

    The caller (API transaction / service) controls commit.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------
    def _row(self, user_id: str, ranking_id: str) -> Optional[DBRanking]:
        row = self.db.get(DBRanking, ranking_id)
        if row is None or row.user_id != user_id:
            return None
        return row

    def get(self, user_id: str, ranking_id: str) -> Optional[DomainRanking]:
        row = self._row(user_id, ranking_id)
        return to_domain_ranking(row) if row else None

    def find_by_media(self, user_id: str, media_id: str) -> Optional[DomainRanking]:
        stmt = (
            select(DBRanking)
            .where(DBRanking.user_id == user_id, DBRanking.media_id == media_id)
            .limit(1)
        )
        row = self.db.execute(stmt).scalars().first()
        return to_domain_ranking(row) if row else None

    def list_for_user(self, user_id: str) -> List[DomainRanking]:
        stmt = (
            select(DBRanking)
            .where(DBRanking.user_id == user_id)
            .order_by(
                DBRanking.last_updated.desc().nulls_last(),
                DBRanking.date_created.desc().nulls_last(),
                DBRanking.id.asc(),
            )
        )
        return [to_domain_ranking(r) for r in self.db.execute(stmt).scalars().all()]

    def list_by_type(self, user_id: str, media_type: MediaType) -> List[DomainRanking]:
        stmt = (
            select(DBRanking)
            .where(DBRanking.user_id == user_id, DBRanking.media_type == MediaType(media_type))
            .order_by(DBRanking.rank.desc(), DBRanking.date_created.asc().nulls_first())
        )
        return [to_domain_ranking(r) for r in self.db.execute(stmt).scalars().all()]

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------
    def _apply_domain_to_orm(self, orm: DBRanking, dom: DomainRanking) -> None:
        orm.rank = dom.rank
        orm.notes = dom.notes
        orm.media = dom.media.as_dict() if dom.media else None
        orm.media_type = dom.media.type if dom.media else None
        if dom.updated_at is not None:
            orm.last_updated = dom.updated_at

    def insert(self, ranking: DomainRanking, *, data_origin: str | None = None) -> DomainRanking:
        if self.db.get(DBRanking, ranking.id) is not None:
            raise ConflictError(f"Ranking id {ranking.id!r} is already in use")
        if self.find_by_media(ranking.user_id, ranking.media_id) is not None:
            raise ConflictError(f"Media {ranking.media_id!r} is already ranked")

        orm = DBRanking(
            id=ranking.id,
            user_id=ranking.user_id,
            media_id=ranking.media_id,
            data_origin=data_origin,
        )
        if ranking.created_at is not None:
            orm.date_created = ranking.created_at
        self._apply_domain_to_orm(orm, ranking)
        self.db.add(orm)
        try:
            self.db.flush()
        except IntegrityError as e:
            # lost the race against a concurrent insert for the same pair
            logger.warning("Duplicate ranking insert user=%s media=%s", ranking.user_id, ranking.media_id)
            raise ConflictError(f"Media {ranking.media_id!r} is already ranked") from e
        self.db.refresh(orm)
        return to_domain_ranking(orm)

    def update(self, ranking: DomainRanking) -> DomainRanking:
        orm = self._row(ranking.user_id, ranking.id)
        if orm is None:
            raise NotFoundError("Ranking not found")
        self._apply_domain_to_orm(orm, ranking)
        self.db.flush()
        self.db.refresh(orm)
        return to_domain_ranking(orm)

    def delete(self, user_id: str, ranking_id: str) -> bool:
        stmt = sa_delete(DBRanking).where(DBRanking.id == ranking_id, DBRanking.user_id == user_id)
        result = self.db.execute(stmt)
        return (result.rowcount or 0) > 0

    def flush(self) -> None:
        self.db.flush()
