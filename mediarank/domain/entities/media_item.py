# mediarank/domain/entities/media_item.py
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Mapping, Optional

from mediarank.common.errors import ValidationError
from mediarank.domain.enums.media_type import MediaType


@dataclass(frozen=True)
class MediaItem:
    """
    Normalized piece of external content (movie, show, book, game).

    Rankings embed a copy of this object rather than a reference: if the
    provider later renames the title, existing rankings keep the old snapshot.

    Invariants:
      - id and title are non-empty
      - provider rating (0..10) is distinct from the user's 1..5 rank
    """
    id: str
    type: MediaType
    title: str
    release_date: Optional[str] = None
    poster: Optional[str] = None
    overview: Optional[str] = None
    rating: Optional[float] = None

    def __post_init__(self):
        if not self.id or not str(self.id).strip():
            raise ValidationError("MediaItem.id is required")
        if not self.title or not str(self.title).strip():
            raise ValidationError("MediaItem.title is required")
        if not isinstance(self.type, MediaType):
            # frozen: go through object.__setattr__ to coerce "movie" -> MediaType.movie
            try:
                object.__setattr__(self, "type", MediaType(self.type))
            except ValueError as e:
                raise ValidationError(f"Unsupported media type: {self.type!r}") from e
        if self.rating is not None and not (0 <= self.rating <= 10):
            raise ValidationError("MediaItem.rating must be between 0 and 10 inclusive")

    def as_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["type"] = self.type.value
        return d

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MediaItem":
        return cls(
            id=str(data["id"]),
            type=MediaType(data["type"]),
            title=data["title"],
            release_date=data.get("release_date"),
            poster=data.get("poster"),
            overview=data.get("overview"),
            rating=data.get("rating"),
        )
