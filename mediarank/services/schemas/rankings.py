# mediarank/services/schemas/rankings.py
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from mediarank.common.settings import get_settings
from mediarank.services.schemas.media import MediaItemIn, MediaItemRead

NOTES_MAX = get_settings().notes_max_length


class RankingUpsert(BaseModel):
    # range is checked by the domain so every entry point reports it the same way
    rank: int = Field(..., strict=True)
    media: MediaItemIn
    notes: Optional[str] = Field(None, max_length=NOTES_MAX)


class RankingPatch(BaseModel):
    rank: Optional[int] = Field(None, strict=True)
    notes: Optional[str] = Field(None, max_length=NOTES_MAX)  # "" clears


class RankingImportEntry(RankingUpsert):
    id: Optional[str] = None
    created_at: Optional[datetime] = None


class RankingImportRequest(BaseModel):
    rankings: List[RankingImportEntry] = Field(default_factory=list)


class RankingRead(BaseModel):
    id: str
    user_id: str
    media_id: str
    rank: int
    media: Optional[MediaItemRead] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class RankingCheckRead(BaseModel):
    ranked: bool
    ranking: Optional[RankingRead] = None
