# mediarank/services/schemas/media.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from mediarank.domain.enums.media_type import MediaType


class MediaItemIn(BaseModel):
    id: str = Field(..., min_length=1)
    type: MediaType
    title: str = Field(..., min_length=1)
    release_date: Optional[str] = None
    poster: Optional[str] = None
    overview: Optional[str] = None
    rating: Optional[float] = Field(None, ge=0, le=10)  # provider rating, not the user's rank


class MediaItemRead(MediaItemIn):
    model_config = ConfigDict(from_attributes=True, use_enum_values=False)
