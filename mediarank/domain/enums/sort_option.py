from __future__ import annotations
from enum import StrEnum

class SortOption(StrEnum):
    rank_desc = "rank-desc"
    rank_asc = "rank-asc"
    date_desc = "date-desc"
    date_asc = "date-asc"
    title_asc = "title-asc"

    @classmethod
    def _missing_(cls, value):
        # older clients send plain "title"
        if isinstance(value, str) and value.strip().lower() == "title":
            return cls.title_asc
        return None
