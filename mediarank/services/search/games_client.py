from __future__ import annotations

from typing import Any, Dict, List, Optional

from mediarank.domain.entities.media_item import MediaItem
from mediarank.domain.enums.media_type import MediaType
from mediarank.services.search.base import ProviderClient, title_matches

GAMES_BASE_URL = "https://api.thegamesdb.net"


def boxart_url(game_id: str, boxart: Optional[Dict[str, Any]]) -> Optional[str]:
    """
    `{base_url.medium}{data[game_id][0].filename}` from the boxart include,
    or None when any piece is missing.
    """
    if not game_id or not boxart:
        return None
    base = (boxart.get("base_url") or {}).get("medium")
    images = (boxart.get("data") or {}).get(str(game_id)) or []
    if not base or not images or not images[0].get("filename"):
        return None
    return f"{base}{images[0]['filename']}"


class GamesClient(ProviderClient):
    """
    TheGamesDB lookup by name. The API key stays on the server; browsers only
    ever see the normalized results.
    """

    source = "games"

    def __init__(self, api_key: Optional[str], *, base_url: str = GAMES_BASE_URL, **kw) -> None:
        kw.setdefault("placeholder_url", "https://placehold.co/400x600")
        super().__init__(base_url=base_url, api_key=api_key, **kw)

    def search(self, query: str) -> List[MediaItem]:
        data = self._get_json(
            "/v1/Games/ByGameName",
            {"apikey": self._api_key, "name": query, "fields": "overview", "include": "boxart"},
        )
        games = ((data.get("data") or {}).get("games")) or []
        boxart = (data.get("include") or {}).get("boxart")
        out: List[MediaItem] = []
        for game in games:
            title = game.get("game_title")
            if not title_matches(title, query):
                continue
            game_id = str(game["id"])
            out.append(
                MediaItem(
                    id=game_id,
                    type=MediaType.game,
                    title=title,
                    release_date=game.get("release_date"),
                    poster=boxart_url(game_id, boxart) or self.placeholder_poster(title),
                    overview=game.get("overview") or None,
                )
            )
        return out
