from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Enum as SAEnum, String, Text, func, Index
from sqlalchemy.orm import Mapped, mapped_column

from mediarank.database.core.main import Base
from mediarank.database.core.service_object import JSONDocument
from mediarank.domain.enums.family_role import FamilyRole


class UserProfile(Base):
    __tablename__ = "user_profile"
    __table_args__ = (Index("ix_user_profile_display_name", "display_name"),)

    uid: Mapped[str] = mapped_column(String(128), primary_key=True)
    email: Mapped[Optional[str]] = mapped_column(String(320))
    display_name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    bio: Mapped[str] = mapped_column(Text, nullable=False, default="")
    photo_url: Mapped[Optional[str]] = mapped_column(Text)
    favorite_genres: Mapped[Optional[list]] = mapped_column(JSONDocument, nullable=True)

    family_id: Mapped[Optional[str]] = mapped_column(String(64))
    family_role: Mapped[Optional[FamilyRole]] = mapped_column(
        SAEnum(FamilyRole, name="family_role", native_enum=False, length=16)
    )

    created_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )
