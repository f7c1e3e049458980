# mediarank/services/search/service.py
from __future__ import annotations

from typing import Callable, Dict, List, Optional

from mediarank.common.errors import ValidationError
from mediarank.common.logging import get_logger
from mediarank.common.settings import Settings, get_settings
from mediarank.domain.entities.media_item import MediaItem
from mediarank.domain.enums.media_type import MediaType
from mediarank.domain.ports.search import MediaSearchPort
from mediarank.services.search.books_client import GoogleBooksClient
from mediarank.services.search.games_client import GamesClient
from mediarank.services.search.tmdb_client import TMDBClient

logger = get_logger(__name__)


class SearchService:
    """Dispatch a search to the provider that owns the media type."""

    def __init__(self, tmdb: TMDBClient, books: MediaSearchPort, games: MediaSearchPort) -> None:
        self.tmdb = tmdb
        self.books = books
        self.games = games
        self._dispatch: Dict[MediaType, Callable[[str], List[MediaItem]]] = {
            MediaType.movie: tmdb.search_movies,
            MediaType.tv: tmdb.search_shows,
            MediaType.book: books.search,
            MediaType.game: games.search,
        }

    @classmethod
    def from_settings(cls, cfg: Optional[Settings] = None, *, transport=None) -> "SearchService":
        cfg = cfg or get_settings()
        s = cfg.search
        common = {
            "placeholder_url": s.placeholder_poster_url,
            "timeout": s.timeout_sec,
            "transport": transport,
        }
        return cls(
            tmdb=TMDBClient(
                s.tmdb_api_key,
                base_url=s.tmdb_base_url,
                image_base_url=s.tmdb_image_base_url,
                **common,
            ),
            books=GoogleBooksClient(s.books_api_key, base_url=s.books_base_url, **common),
            games=GamesClient(s.games_api_key, base_url=s.games_base_url, **common),
        )

    def search(self, media_type: MediaType | str, query: Optional[str]) -> List[MediaItem]:
        try:
            mt = MediaType(media_type)
        except ValueError as e:
            raise ValidationError(f"Unsupported media type: {media_type}") from e
        handler = self._dispatch.get(mt)
        if handler is None:
            raise ValidationError(f"Search is not available for {mt.value}")

        q = (query or "").strip()
        if not q:
            return []
        results = handler(q)
        logger.debug("search type=%s q=%r -> %d results", mt.value, q, len(results))
        return results

    def close(self) -> None:
        self.tmdb.close()
        self.books.close()
        self.games.close()
