# mediarank/services/search/base.py
from __future__ import annotations

from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from mediarank.common.errors import NetworkError
from mediarank.common.logging import get_logger

logger = get_logger(__name__)


class ProviderClient:
    """
    Thin GET-only wrapper around an httpx.Client for one metadata provider.

    Transport failures and non-2xx answers become NetworkError; there is no
    retry and no cache. The underlying client is created lazily so building a
    provider is free when it is never queried.
    """

    source: str = "provider"

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str],
        placeholder_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._placeholder_url = placeholder_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    @property
    def configured(self) -> bool:
        return bool(self._api_key)

    def _get_client(self) -> httpx.Client:
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                base_url=self._base_url,
                headers={"Accept": "application/json"},
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def placeholder_poster(self, title: str) -> str:
        return f"{self._placeholder_url}?text={quote(title)}"

    def _get_json(self, path: str, params: Dict[str, Any]) -> Dict[str, Any]:
        if not self.configured:
            raise NetworkError(f"{self.source} search is not configured")
        try:
            response = self._get_client().get(path, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error("%s answered %s for %s", self.source, e.response.status_code, path)
            raise NetworkError(f"Failed to search {self.source}") from e
        except (httpx.HTTPError, ValueError) as e:
            # ValueError: body was not JSON
            logger.error("%s request failed for %s: %s", self.source, path, e)
            raise NetworkError(f"Failed to search {self.source}") from e


def title_matches(title: Optional[str], query: str) -> bool:
    """Case-insensitive substring match, as the search box expects."""
    return bool(title) and query.lower() in str(title).lower()
