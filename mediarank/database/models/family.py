from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy import (
    Boolean, DateTime, Enum as SAEnum, ForeignKey, String, Text, text, UniqueConstraint, Index, func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mediarank.database.core.main import Base
from mediarank.database.core.service_object import ServiceObject
from mediarank.domain.enums.family_role import FamilyRole
from mediarank.domain.enums.privacy_level import PrivacyLevel


class Family(ServiceObject, Base):
    __tablename__ = "family"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    created_by: Mapped[str] = mapped_column(String(128), nullable=False)

    # settings
    allow_child_rankings: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("true"))
    require_parent_approval: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("false"))
    privacy_level: Mapped[PrivacyLevel] = mapped_column(
        SAEnum(PrivacyLevel, name="privacy_level", native_enum=False, length=16,
               values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=PrivacyLevel.private,
    )

    members: Mapped[List["FamilyMember"]] = relationship(
        back_populates="family", cascade="all, delete-orphan", passive_deletes=True,
        order_by="FamilyMember.joined_at",
    )


class FamilyMember(Base):
    __tablename__ = "family_member"
    __table_args__ = (
        UniqueConstraint("family_id", "user_id", name="uq_family_member_family_user"),
        Index("ix_family_member_user_role", "user_id", "role"),
    )

    family_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("family.id", ondelete="CASCADE"), primary_key=True
    )
    user_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    role: Mapped[FamilyRole] = mapped_column(
        SAEnum(FamilyRole, name="family_role", native_enum=False, length=16), nullable=False
    )
    joined_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), server_default=func.now())
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("true"), default=True)

    family: Mapped[Family] = relationship(back_populates="members")
