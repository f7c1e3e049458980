from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from mediarank.services.schemas.rankings import RankingRead


class UserStatsRead(BaseModel):
    total: int = 0
    total_ratings: int = 0
    movie_count: int = 0
    tv_count: int = 0
    book_count: int = 0
    game_count: int = 0
    avg_rating: float = 0.0
    rating_distribution: List[int] = Field(default_factory=lambda: [0, 0, 0, 0, 0])  # index 0 = rank 1
    most_common_rating: Optional[int] = None
    highest_rated: Optional[RankingRead] = None
    lowest_rated: Optional[RankingRead] = None
    recent_rankings: List[RankingRead] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)
