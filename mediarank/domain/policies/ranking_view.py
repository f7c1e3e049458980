# mediarank/domain/policies/ranking_view.py
from __future__ import annotations

from typing import Iterable, List, Union

from mediarank.common.errors import ValidationError
from mediarank.common.strings.collation import collation_key
from mediarank.common.timeutil import or_epoch
from mediarank.domain.entities.ranking import Ranking
from mediarank.domain.enums.media_type import COUNTED_MEDIA_TYPES, MediaType
from mediarank.domain.enums.sort_option import SortOption

ALL_CATEGORIES = "all"

CategoryFilter = Union[MediaType, str]


def filter_rankings(rankings: Iterable[Ranking], category: CategoryFilter = ALL_CATEGORIES) -> List[Ranking]:
    """Exact match on the embedded media type; "all" passes everything through."""
    items = list(rankings)
    if category is None or str(category) == ALL_CATEGORIES:
        return items
    try:
        wanted = MediaType(category)
    except ValueError as e:
        raise ValidationError(f"Unknown media category: {category!r}") from e
    if wanted not in COUNTED_MEDIA_TYPES:
        raise ValidationError(f"Rankings cannot be filtered by {wanted.value}")
    return [r for r in items if r.media_type == wanted]


def sort_rankings(rankings: Iterable[Ranking], sort: SortOption | str = SortOption.rank_desc) -> List[Ranking]:
    """
    Stable sort for display. Date sorts use created_at with missing values
    treated as the epoch, so they land last under date-desc.
    """
    try:
        option = SortOption(sort)
    except ValueError as e:
        raise ValidationError(f"Unknown sort option: {sort!r}") from e
    items = list(rankings)
    if option is SortOption.rank_desc:
        return sorted(items, key=lambda r: r.rank, reverse=True)
    if option is SortOption.rank_asc:
        return sorted(items, key=lambda r: r.rank)
    if option is SortOption.date_desc:
        return sorted(items, key=lambda r: or_epoch(r.created_at), reverse=True)
    if option is SortOption.date_asc:
        return sorted(items, key=lambda r: or_epoch(r.created_at))
    return sorted(items, key=lambda r: collation_key(r.title))


def filter_and_sort(
    rankings: Iterable[Ranking],
    sort: SortOption | str = SortOption.rank_desc,
    category: CategoryFilter = ALL_CATEGORIES,
) -> List[Ranking]:
    """Deterministic view over the ranking list; re-run whenever any input changes."""
    return sort_rankings(filter_rankings(rankings, category), sort)
