"""
TMDB client for movie and TV search.

Usage:
    client = TMDBClient(api_key="your_key")
    movies = client.search_movies("Inception")
    shows = client.search_shows("The Office")
    client.close()
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from mediarank.domain.entities.media_item import MediaItem
from mediarank.domain.enums.media_type import MediaType
from mediarank.services.search.base import ProviderClient, title_matches

TMDB_BASE_URL = "https://api.themoviedb.org/3"
TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w400"


class TMDBClient(ProviderClient):
    """
    Movie and TV metadata from The Movie Database (v3 API key in the query).

    Results are narrowed to English-language originals whose title contains
    the query, mirroring what the search page shows.
    """

    source = "tmdb"

    def __init__(
        self,
        api_key: Optional[str],
        *,
        base_url: str = TMDB_BASE_URL,
        image_base_url: str = TMDB_IMAGE_BASE_URL,
        placeholder_url: str = "https://placehold.co/400x600",
        timeout: float = 10.0,
        transport=None,
    ) -> None:
        super().__init__(
            base_url=base_url,
            api_key=api_key,
            placeholder_url=placeholder_url,
            timeout=timeout,
            transport=transport,
        )
        self._image_base_url = image_base_url.rstrip("/")

    def _search(self, path: str, query: str) -> List[Dict[str, Any]]:
        data = self._get_json(path, {"api_key": self._api_key, "query": query, "region": "US"})
        return list(data.get("results") or [])

    def _poster(self, poster_path: Optional[str], title: str) -> str:
        if poster_path:
            return f"{self._image_base_url}{poster_path}"
        return self.placeholder_poster(title)

    @staticmethod
    def _rating(item: Dict[str, Any]) -> Optional[float]:
        vote = item.get("vote_average")
        return float(vote) if vote and vote > 0 else None

    @staticmethod
    def _is_english(item: Dict[str, Any]) -> bool:
        return str(item.get("original_language") or "").lower() == "en"

    def search_movies(self, query: str) -> List[MediaItem]:
        out: List[MediaItem] = []
        for item in self._search("/search/movie", query):
            title = item.get("title")
            if not (title_matches(title, query) and self._is_english(item)):
                continue
            out.append(
                MediaItem(
                    id=str(item["id"]),
                    type=MediaType.movie,
                    title=title,
                    release_date=item.get("release_date") or None,
                    poster=self._poster(item.get("poster_path"), title),
                    overview=item.get("overview") or None,
                    rating=self._rating(item),
                )
            )
        return out

    def search_shows(self, query: str) -> List[MediaItem]:
        out: List[MediaItem] = []
        for item in self._search("/search/tv", query):
            title = item.get("name")
            if not (title_matches(title, query) and self._is_english(item)):
                continue
            out.append(
                MediaItem(
                    id=str(item["id"]),
                    type=MediaType.tv,
                    title=title,
                    release_date=item.get("first_air_date") or None,
                    poster=self._poster(item.get("poster_path"), title),
                    overview=item.get("overview") or None,
                    rating=self._rating(item),
                )
            )
        return out
