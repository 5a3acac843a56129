from __future__ import annotations
from typing import TYPE_CHECKING
from enum import StrEnum
from sqlalchemy import String, DateTime, Date, ForeignKey, Float, Boolean, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from uuid import uuid4
from ..db.base_class import Base
from . import utcnow

if TYPE_CHECKING:
    from .family import Family

class Gender(StrEnum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"

class Member(Base):
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid4()))
    first_name: Mapped[str] = mapped_column(String(128), nullable=False)
    last_name: Mapped[str] = mapped_column(String(128), index=True, nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(32), nullable=False)
    gender: Mapped[Gender] = mapped_column(index=True)
    date_of_birth: Mapped["Date"] = mapped_column(Date, nullable=False)
    registration_date: Mapped["DateTime"] = mapped_column(DateTime(timezone=True), default=utcnow, index=True, nullable=False)
    parent_name: Mapped[str | None] = mapped_column(String(128))
    parent_phone: Mapped[str | None] = mapped_column(String(32))
    address: Mapped[str | None] = mapped_column(String(512))
    notes: Mapped[str | None] = mapped_column(Text)
    # set only when the address was geocoded
    latitude: Mapped[float | None] = mapped_column(Float)
    longitude: Mapped[float | None] = mapped_column(Float)

    # follow-up reported by the family leaders
    is_contacted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    contact_date: Mapped["DateTime | None"] = mapped_column(DateTime(timezone=True))
    leader_notes: Mapped[str | None] = mapped_column(Text)

    family_id: Mapped[str | None] = mapped_column(String(36), ForeignKey("family.id", ondelete="SET NULL"), index=True)
    created_at: Mapped["DateTime"] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped["DateTime"] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    family: Mapped["Family | None"] = relationship(back_populates="members")

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None
