import math
import logging
from datetime import date, datetime, time
from sqlalchemy import select, func, or_
from sqlalchemy.orm import Session

from ..models.member import Member, Gender
from ..models import utcnow

logger = logging.getLogger(__name__)

# optional text fields stored as NULL when left blank in the form
_NULLABLE_TEXT = ("parent_name", "parent_phone", "notes")


def create_member(
    db: Session, *,
    first_name: str,
    last_name: str,
    email: str,
    phone: str,
    date_of_birth: date,
    gender: Gender,
    address: str | None,
    parent_name: str | None = None,
    parent_phone: str | None = None,
    notes: str | None = None,
    latitude: float | None = None,
    longitude: float | None = None,
) -> Member:
    m = Member(
        first_name=first_name,
        last_name=last_name,
        email=email,
        phone=phone,
        date_of_birth=date_of_birth,
        gender=gender,
        address=address,
        parent_name=parent_name or None,
        parent_phone=parent_phone or None,
        notes=notes or None,
        latitude=latitude,
        longitude=longitude,
        registration_date=utcnow(),
    )
    db.add(m)
    db.commit()
    db.refresh(m)
    logger.info(f"Member registered: id={m.id}, geocoded={m.has_coordinates}")
    return m


def get_member(db: Session, member_id: str) -> Member | None:
    return db.get(Member, member_id)


def update_member(db: Session, *, member_id: str, **fields) -> Member | None:
    m = db.get(Member, member_id)
    if not m:
        return None
    for name, value in fields.items():
        if name in _NULLABLE_TEXT:
            setattr(m, name, value or None)
        elif value is not None:
            # date_of_birth is only replaced when a new one is given
            setattr(m, name, value)
    db.commit()
    db.refresh(m)
    return m


def delete_member(db: Session, member_id: str) -> bool:
    m = db.get(Member, member_id)
    if not m:
        return False
    db.delete(m)
    db.commit()
    logger.info(f"Member deleted: id={member_id}")
    return True


def list_members(db: Session) -> list[Member]:
    return list(db.execute(select(Member).order_by(Member.registration_date.desc())).scalars())


def paginate_members(
    db: Session, *,
    page: int = 1,
    page_size: int = 10,
    query: str = "",
    gender: str = "all",
    start_date: date | None = None,
    end_date: date | None = None,
) -> tuple[list[Member], dict]:
    """
    One page of members, newest registrations first, plus page metadata.

    `query` is matched case-insensitively against names, email and phone;
    `end_date` includes the whole day.
    """
    conditions = []
    if query:
        pattern = f"%{query}%"
        conditions.append(or_(
            Member.first_name.ilike(pattern),
            Member.last_name.ilike(pattern),
            Member.email.ilike(pattern),
            Member.phone.ilike(pattern),
        ))
    if gender and gender != "all":
        conditions.append(Member.gender == Gender(gender))
    if start_date:
        conditions.append(Member.registration_date >= datetime.combine(start_date, time.min))
    if end_date:
        conditions.append(Member.registration_date <= datetime.combine(end_date, time.max))

    total = db.execute(select(func.count()).select_from(Member).where(*conditions)).scalar_one()
    members = list(db.execute(
        select(Member)
        .where(*conditions)
        .order_by(Member.registration_date.desc())
        .offset((page - 1) * page_size)
        .limit(page_size)
    ).scalars())

    total_pages = math.ceil(total / page_size)
    metadata = {
        "total": total,
        "page": page,
        "page_size": page_size,
        "total_pages": total_pages,
        "has_next_page": page < total_pages,
        "has_prev_page": page > 1,
    }
    return members, metadata
