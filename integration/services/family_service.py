from sqlalchemy.orm import Session, selectinload
from sqlalchemy import select, update
import logging
from ..models.family import Family
from ..models.member import Member

logger = logging.getLogger(__name__)

_WITH_PEOPLE = (
    selectinload(Family.pilote),
    selectinload(Family.copilote),
    selectinload(Family.members),
)

def create_family(
    db: Session, *,
    name: str,
    address: str,
    latitude: float | None = None,
    longitude: float | None = None,
    pilote_id: str | None = None,
    copilote_id: str | None = None,
) -> Family:
    fam = Family(
        name=name,
        address=address,
        latitude=latitude,
        longitude=longitude,
        pilote_id=pilote_id or None,
        copilote_id=copilote_id or None,
    )
    db.add(fam)
    db.commit()
    db.refresh(fam)
    logger.info(f"Family created: id={fam.id}, name={fam.name}")
    return fam

def update_family(
    db: Session, *,
    family_id: str,
    name: str,
    address: str,
    latitude: float | None = None,
    longitude: float | None = None,
    pilote_id: str | None = None,
    copilote_id: str | None = None,
) -> Family | None:
    fam = db.get(Family, family_id)
    if not fam:
        return None
    fam.name = name
    fam.address = address
    fam.latitude = latitude
    fam.longitude = longitude
    fam.pilote_id = pilote_id or None
    fam.copilote_id = copilote_id or None
    db.commit()
    db.refresh(fam)
    return fam

def delete_family(db: Session, family_id: str) -> bool:
    fam = db.get(Family, family_id)
    if not fam:
        return False
    # detach members first, they outlive the family
    db.execute(update(Member).where(Member.family_id == family_id).values(family_id=None))
    db.delete(fam)
    db.commit()
    logger.info(f"Family deleted: id={family_id}")
    return True

def list_families(db: Session) -> list[Family]:
    return list(db.execute(select(Family).options(*_WITH_PEOPLE).order_by(Family.name)).scalars())

def get_family(db: Session, family_id: str) -> Family | None:
    return db.get(Family, family_id, options=list(_WITH_PEOPLE))

def list_available_members(db: Session) -> list[Member]:
    return list(db.execute(select(Member).where(Member.family_id.is_(None)).order_by(Member.last_name)).scalars())

def get_family_with_details(db: Session, family_id: str) -> tuple[Family, list[Member]] | None:
    fam = get_family(db, family_id)
    if not fam:
        return None
    return fam, list_available_members(db)
