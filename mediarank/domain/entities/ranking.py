# mediarank/domain/entities/ranking.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from mediarank.common.errors import ValidationError
from mediarank.domain.entities.media_item import MediaItem
from mediarank.domain.enums.media_type import MediaType

MIN_RANK = 1
MAX_RANK = 5


def validate_rank(rank: Any) -> int:
    """Return `rank` if it is an int in [1, 5]; raise ValidationError otherwise."""
    # bool is an int subclass; True must not sneak in as rank 1
    if isinstance(rank, bool) or not isinstance(rank, int):
        raise ValidationError("Rank must be an integer between 1 and 5")
    if rank < MIN_RANK or rank > MAX_RANK:
        raise ValidationError("Rank must be an integer between 1 and 5")
    return rank


@dataclass
class Ranking:
    """
    A user's 1..5 rank plus optional notes for one media item.

    Policy & DB enforce *one ranking per (user_id, media_id)*; the entity only
    guards its own fields. Notes length is bounded by the API, not here.
    """
    id: str
    user_id: str
    media_id: str
    rank: int
    media: Optional[MediaItem] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        if not self.id:
            raise ValidationError("Ranking.id is required")
        if not self.user_id:
            raise ValidationError("Ranking.user_id is required")
        if not self.media_id:
            raise ValidationError("Ranking.media_id is required")
        validate_rank(self.rank)

    @property
    def media_type(self) -> Optional[MediaType]:
        return self.media.type if self.media else None

    @property
    def title(self) -> str:
        return self.media.title if self.media else ""
