from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Callable, Iterable, Iterator, List, Optional, Tuple
from uuid import uuid4

from sqlalchemy.exc import SQLAlchemyError

from mediarank.common.errors import AuthenticationError, NotFoundError, StoreError, ValidationError
from mediarank.common.iter import chunked
from mediarank.common.logging import get_logger
from mediarank.common.settings import get_settings
from mediarank.common.strings.splitters import clean_text
from mediarank.common.timeutil import utcnow
from mediarank.domain.dataclasses.stats import UserStats
from mediarank.domain.entities.media_item import MediaItem
from mediarank.domain.entities.ranking import Ranking, validate_rank
from mediarank.domain.enums.media_type import MediaType
from mediarank.domain.enums.sort_option import SortOption
from mediarank.domain.policies.ranking_stats import compute_user_stats
from mediarank.domain.policies.ranking_view import ALL_CATEGORIES, CategoryFilter, filter_and_sort
from mediarank.domain.ports.rankings import RankingStorePort

logger = get_logger(__name__)


@dataclass
class RankingImport:
    """One entry of a batch import; `id` is kept when present."""
    rank: int
    media: MediaItem
    notes: Optional[str] = None
    id: Optional[str] = None
    created_at: Optional[datetime] = None


def _require_user(user_id: Optional[str]) -> str:
    if not user_id or not str(user_id).strip():
        raise AuthenticationError()
    return user_id


@contextmanager
def _store_errors(message: str) -> Iterator[None]:
    """Log driver failures and surface them as a generic StoreError."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.exception("%s: %s", message, e)
        raise StoreError(message) from e


class RankingService:
    """
    Rank upsert and the read paths around it.

    The caller passes the authenticated user id explicitly; nothing here reads
    ambient "current user" state. Writes go straight to the store: there is no
    cache, and a failed write raises instead of retrying.
    """

    def __init__(
        self,
        store: RankingStorePort,
        *,
        clock: Callable[[], datetime] = utcnow,
        recent_limit: Optional[int] = None,
        import_chunk_size: Optional[int] = None,
    ) -> None:
        cfg = get_settings()
        self.store = store
        self.clock = clock
        self.recent_limit = recent_limit if recent_limit is not None else cfg.recent_rankings_limit
        self.import_chunk_size = import_chunk_size if import_chunk_size is not None else cfg.import_chunk_size

    # ------------------------------------------------------------------
    # Upsert
    # ------------------------------------------------------------------
    def upsert_ranking(
        self,
        user_id: str,
        rank: int,
        media: Optional[MediaItem],
        notes: Optional[str] = None,
    ) -> Ranking:
        """Produce exactly one persisted ranking for (user_id, media.id)."""
        saved, _ = self.save_ranking(user_id, rank, media, notes)
        return saved

    def save_ranking(
        self,
        user_id: str,
        rank: int,
        media: Optional[MediaItem],
        notes: Optional[str] = None,
    ) -> Tuple[Ranking, bool]:
        """
        Upsert, returning `(ranking, created)`.

        Re-ranking keeps the id, created_at and the stored media snapshot; it
        takes the new rank and only replaces notes when new notes were given.
        """
        user_id = _require_user(user_id)
        validate_rank(rank)
        if media is None:
            raise ValidationError("Media is required to rank an item")
        notes = clean_text(notes)
        now = self.clock()

        with _store_errors("Failed to save ranking"):
            existing = self.store.find_by_media(user_id, media.id)
            if existing is not None:
                updated = replace(
                    existing,
                    rank=rank,
                    notes=notes or existing.notes,
                    updated_at=now,
                )
                saved = self.store.update(updated)
                logger.info("Updated ranking %s user=%s media=%s rank=%s", saved.id, user_id, media.id, rank)
                return saved, False

            created = Ranking(
                id=str(uuid4()),
                user_id=user_id,
                media_id=media.id,
                media=media,
                rank=rank,
                notes=notes,
                created_at=now,
                updated_at=now,
            )
            saved = self.store.insert(created, data_origin="api")
            logger.info("Created ranking %s user=%s media=%s rank=%s", saved.id, user_id, media.id, rank)
            return saved, True

    def update_ranking(
        self,
        user_id: str,
        ranking_id: str,
        *,
        rank: Optional[int] = None,
        notes: Optional[str] = None,
    ) -> Ranking:
        """Edit an existing ranking in place (rank and/or notes)."""
        user_id = _require_user(user_id)
        if rank is not None:
            validate_rank(rank)

        with _store_errors("Failed to update ranking"):
            current = self.store.get(user_id, ranking_id)
            if current is None:
                raise NotFoundError("Ranking not found")
            changed = replace(
                current,
                rank=rank if rank is not None else current.rank,
                notes=clean_text(notes) if notes is not None else current.notes,
                updated_at=self.clock(),
            )
            saved = self.store.update(changed)
        logger.info("Edited ranking %s user=%s", ranking_id, user_id)
        return saved

    def delete_ranking(self, user_id: str, ranking_id: str) -> None:
        user_id = _require_user(user_id)
        with _store_errors("Failed to delete ranking"):
            deleted = self.store.delete(user_id, ranking_id)
        if not deleted:
            raise NotFoundError("Ranking not found")
        logger.info("Deleted ranking %s user=%s", ranking_id, user_id)

    def batch_import(self, user_id: str, entries: Iterable[RankingImport]) -> List[Ranking]:
        """
        Upsert many rankings (migration path). Every entry is validated before
        the first write, so a bad rank aborts the import with nothing written.
        Later entries for the same media id win.
        """
        user_id = _require_user(user_id)
        items = list(entries)
        for entry in items:
            validate_rank(entry.rank)
            if entry.media is None:
                raise ValidationError("Media is required to rank an item")

        saved: List[Ranking] = []
        with _store_errors("Failed to import rankings"):
            for n, chunk in enumerate(chunked(items, self.import_chunk_size), start=1):
                for entry in chunk:
                    saved.append(self._import_one(user_id, entry))
                self.store.flush()
                logger.debug("Imported chunk %d (%d rankings) user=%s", n, len(chunk), user_id)
        logger.info("Imported %d rankings user=%s", len(saved), user_id)
        return saved

    def _import_one(self, user_id: str, entry: RankingImport) -> Ranking:
        now = self.clock()
        notes = clean_text(entry.notes)
        existing = self.store.find_by_media(user_id, entry.media.id)
        if existing is not None:
            return self.store.update(
                replace(existing, rank=entry.rank, notes=notes or existing.notes, updated_at=now)
            )
        created_at = entry.created_at or now
        return self.store.insert(
            Ranking(
                id=entry.id or str(uuid4()),
                user_id=user_id,
                media_id=entry.media.id,
                media=entry.media,
                rank=entry.rank,
                notes=notes,
                created_at=created_at,
                updated_at=now,
            ),
            data_origin="import",
        )

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def get_user_rankings(self, user_id: str) -> List[Ranking]:
        user_id = _require_user(user_id)
        with _store_errors("Failed to fetch rankings"):
            return self.store.list_for_user(user_id)

    def list_rankings(
        self,
        user_id: str,
        *,
        sort: SortOption | str = SortOption.rank_desc,
        category: CategoryFilter = ALL_CATEGORIES,
    ) -> List[Ranking]:
        return filter_and_sort(self.get_user_rankings(user_id), sort=sort, category=category)

    def list_rankings_by_type(self, user_id: str, media_type: MediaType) -> List[Ranking]:
        user_id = _require_user(user_id)
        with _store_errors("Failed to fetch rankings"):
            return self.store.list_by_type(user_id, media_type)

    def check_if_ranked(self, user_id: str, media_id: str) -> Tuple[bool, Optional[Ranking]]:
        user_id = _require_user(user_id)
        with _store_errors("Failed to fetch rankings"):
            found = self.store.find_by_media(user_id, media_id)
        return (found is not None, found)

    def get_user_stats(self, user_id: str) -> UserStats:
        user_id = _require_user(user_id)
        with _store_errors("Failed to calculate statistics"):
            rankings = self.store.list_for_user(user_id)
        stats = compute_user_stats(rankings, recent_limit=self.recent_limit)
        logger.debug("Stats user=%s total=%d avg=%.1f", user_id, stats.total, stats.avg_rating)
        return stats
