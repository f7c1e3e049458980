from __future__ import annotations
from typing import List, Optional, Protocol

from mediarank.domain.entities.ranking import Ranking
from mediarank.domain.enums.media_type import MediaType

class RankingStorePort(Protocol):
    def get(self, user_id: str, ranking_id: str) -> Optional[Ranking]: ...
    def find_by_media(self, user_id: str, media_id: str) -> Optional[Ranking]: ...
    def list_for_user(self, user_id: str) -> List[Ranking]: ...
    def list_by_type(self, user_id: str, media_type: MediaType) -> List[Ranking]: ...
    def insert(self, ranking: Ranking, *, data_origin: Optional[str] = None) -> Ranking: ...
    def update(self, ranking: Ranking) -> Ranking: ...
    def delete(self, user_id: str, ranking_id: str) -> bool: ...
    def flush(self) -> None: ...
