from __future__ import annotations
from typing import List, Protocol

from mediarank.domain.entities.media_item import MediaItem

class MediaSearchPort(Protocol):
    # provider name used in logs and error messages ("tmdb", "google-books", ...)
    source: str

    def search(self, query: str) -> List[MediaItem]: ...
    def close(self) -> None: ...
