from __future__ import annotations

from typing import List, Optional

from mediarank.domain.entities.media_item import MediaItem
from mediarank.domain.enums.media_type import MediaType
from mediarank.services.search.base import ProviderClient, title_matches

BOOKS_BASE_URL = "https://www.googleapis.com"


class GoogleBooksClient(ProviderClient):
    source = "google-books"

    def __init__(self, api_key: Optional[str], *, base_url: str = BOOKS_BASE_URL, **kw) -> None:
        kw.setdefault("placeholder_url", "https://placehold.co/400x600")
        super().__init__(base_url=base_url, api_key=api_key, **kw)

    def search(self, query: str) -> List[MediaItem]:
        data = self._get_json("/books/v1/volumes", {"q": query, "key": self._api_key})
        out: List[MediaItem] = []
        for item in data.get("items") or []:
            info = item.get("volumeInfo") or {}
            title = info.get("title")
            if not title_matches(title, query):
                continue
            images = info.get("imageLinks") or {}
            snippet = (item.get("searchInfo") or {}).get("textSnippet")
            out.append(
                MediaItem(
                    id=str(item["id"]),
                    type=MediaType.book,
                    title=title,
                    release_date=info.get("publishedDate"),
                    poster=images.get("thumbnail") or images.get("smallThumbnail") or self.placeholder_poster(title),
                    overview=info.get("description") or snippet or "",
                    rating=info.get("averageRating"),
                )
            )
        return out
