# mediarank/domain/dataclasses/stats.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from mediarank.domain.entities.ranking import Ranking


@dataclass
class UserStats:
    """Derived summary over a user's rankings. Never persisted."""
    total: int = 0
    total_ratings: int = 0
    movie_count: int = 0
    tv_count: int = 0
    book_count: int = 0
    game_count: int = 0
    avg_rating: float = 0.0
    rating_distribution: List[int] = field(default_factory=lambda: [0, 0, 0, 0, 0])
    most_common_rating: Optional[int] = None
    highest_rated: Optional[Ranking] = None
    lowest_rated: Optional[Ranking] = None
    recent_rankings: List[Ranking] = field(default_factory=list)
