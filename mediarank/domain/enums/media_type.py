from __future__ import annotations
from enum import StrEnum

class MediaType(StrEnum):
    movie = "movie"
    tv = "tv"
    book = "book"
    game = "game"
    # No search provider and not counted in stats yet
    music = "music"


# Categories the statistics tally and the rankings view can filter on
COUNTED_MEDIA_TYPES: tuple[MediaType, ...] = (
    MediaType.movie,
    MediaType.tv,
    MediaType.book,
    MediaType.game,
)
