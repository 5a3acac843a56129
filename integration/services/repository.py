from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from ..models.family import Family
from ..models.member import Member


class RecordNotFound(LookupError):
    pass


class FamilyRepository:
    """Member/family data access used by the assignment service."""

    def __init__(self, db: Session):
        self.db = db

    def get_member_by_id(self, member_id: str) -> Member | None:
        return self.db.get(Member, member_id)

    def get_family_by_id(self, family_id: str) -> Family | None:
        return self.db.get(
            Family, family_id,
            options=[selectinload(Family.pilote), selectinload(Family.copilote)],
        )

    def list_families_with_coordinates(self) -> list[Family]:
        # no ORDER BY: rows come back in insertion order
        stmt = (
            select(Family)
            .where(Family.latitude.is_not(None), Family.longitude.is_not(None))
            .options(
                selectinload(Family.pilote),
                selectinload(Family.copilote),
                selectinload(Family.members),
            )
        )
        return list(self.db.execute(stmt).scalars())

    def set_member_family(self, member_id: str, family_id: str | None) -> Member:
        member = self.get_member_by_id(member_id)
        if not member:
            raise RecordNotFound(f"Member {member_id} not found")
        if family_id is not None and self.db.get(Family, family_id) is None:
            raise RecordNotFound(f"Family {family_id} not found")
        member.family_id = family_id
        self.db.commit()
        self.db.refresh(member)
        return member

    def rollback(self) -> None:
        self.db.rollback()
