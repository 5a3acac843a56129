from typing import TYPE_CHECKING, Optional
from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from uuid import uuid4
from ..db.base_class import Base
from . import utcnow

if TYPE_CHECKING:
    from .family import Family

class User(Base):
    """A volunteer leader, referenced by families as pilote or copilote."""
    __tablename__ = "user"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid4()))
    first_name: Mapped[str] = mapped_column(String(128), nullable=False)
    last_name: Mapped[str] = mapped_column(String(128), index=True, nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(String(32))
    gender: Mapped[str] = mapped_column(String(16), nullable=False)
    created_at: Mapped["DateTime"] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped["DateTime"] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    piloted_families: Mapped[list["Family"]] = relationship(
        back_populates="pilote",
        foreign_keys="Family.pilote_id",
    )
    copiloted_families: Mapped[list["Family"]] = relationship(
        back_populates="copilote",
        foreign_keys="Family.copilote_id",
    )
