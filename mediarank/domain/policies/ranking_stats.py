# mediarank/domain/policies/ranking_stats.py
from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, Optional

from mediarank.common.timeutil import or_epoch
from mediarank.domain.dataclasses.stats import UserStats
from mediarank.domain.entities.ranking import Ranking, MAX_RANK
from mediarank.domain.enums.media_type import MediaType

DEFAULT_RECENT_LIMIT = 7


def round_half_up(value: Decimal | float, places: int = 1) -> float:
    """4.25 -> 4.3 (not banker's rounding like the builtin round)."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def _by_rank_then_created(rankings: List[Ranking], *, highest: bool) -> Optional[Ranking]:
    """
    Pick the extreme-rank item. Ties: earliest created_at wins (missing
    created_at counts as the epoch), then input order (sorted() is stable).
    """
    if not rankings:
        return None
    sign = -1 if highest else 1
    ordered = sorted(rankings, key=lambda r: (sign * r.rank, or_epoch(r.created_at)))
    return ordered[0]


def _recent(rankings: List[Ranking], limit: int) -> List[Ranking]:
    """Most recently touched first; updated_at falls back to created_at."""
    ordered = sorted(
        rankings,
        key=lambda r: or_epoch(r.updated_at or r.created_at),
        reverse=True,  # reverse keeps ties in input order
    )
    return ordered[:limit]


def compute_user_stats(rankings: Iterable[Ranking], *, recent_limit: int = DEFAULT_RECENT_LIMIT) -> UserStats:
    """
    Full recompute over the given rankings; no incremental state, input order
    only matters for ties. Music rankings count toward totals and the
    histogram but have no per-category counter.
    """
    items = list(rankings)
    stats = UserStats(total=len(items))
    if not items:
        return stats

    distribution = [0] * MAX_RANK
    by_type = {t: 0 for t in MediaType}
    total_ratings = 0
    for r in items:
        total_ratings += r.rank
        distribution[r.rank - 1] += 1
        if r.media_type is not None:
            by_type[r.media_type] += 1

    stats.total_ratings = total_ratings
    stats.movie_count = by_type[MediaType.movie]
    stats.tv_count = by_type[MediaType.tv]
    stats.book_count = by_type[MediaType.book]
    stats.game_count = by_type[MediaType.game]
    stats.avg_rating = round_half_up(Decimal(total_ratings) / Decimal(len(items)), 1)
    stats.rating_distribution = distribution
    # list.index returns the first maximum -> lowest rank wins ties
    stats.most_common_rating = distribution.index(max(distribution)) + 1
    stats.highest_rated = _by_rank_then_created(items, highest=True)
    stats.lowest_rated = _by_rank_then_created(items, highest=False)
    stats.recent_rankings = _recent(items, recent_limit)
    return stats
