from __future__ import annotations

from typing import Optional

from sqlalchemy import (
    Enum as SAEnum, Integer, String, Text, UniqueConstraint, CheckConstraint, Index,
)
from sqlalchemy.orm import Mapped, mapped_column

from mediarank.database.core.main import Base
from mediarank.database.core.service_object import ServiceObject, JSONDocument
from mediarank.domain.enums.media_type import MediaType


class Ranking(ServiceObject, Base):
    """
    One row per (user_id, media_id). `media` is a denormalized snapshot of the
    provider item at ranking time; `media_type` is lifted out of it for filtering.
    """
    __tablename__ = "ranking"
    __table_args__ = (
        UniqueConstraint("user_id", "media_id", name="uq_ranking_user_media"),
        CheckConstraint("rank BETWEEN 1 AND 5", name="rank_1_5"),
        Index("ix_ranking_user_updated", "user_id", "last_updated"),
        Index("ix_ranking_user_type", "user_id", "media_type"),
    )

    user_id: Mapped[str] = mapped_column(String(128), nullable=False)
    media_id: Mapped[str] = mapped_column(String(255), nullable=False)
    media_type: Mapped[Optional[MediaType]] = mapped_column(
        SAEnum(MediaType, name="media_type", native_enum=False, length=16), nullable=True
    )
    media: Mapped[Optional[dict]] = mapped_column(JSONDocument, nullable=True)

    rank: Mapped[int] = mapped_column(Integer, nullable=False)
    notes: Mapped[Optional[str]] = mapped_column(Text)
