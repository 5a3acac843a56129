from sqlalchemy.orm import Session
from sqlalchemy import select, update
import logging
from ..models.user import User
from ..models.family import Family

logger = logging.getLogger(__name__)

# may be cleared by an update
_NULLABLE_FIELDS = ("phone",)

def create_user(db: Session, *, first_name: str, last_name: str, email: str, phone: str | None, gender: str) -> User:
    try:
        user = User(first_name=first_name, last_name=last_name, email=email, phone=phone, gender=gender)
        db.add(user)
        db.commit()
        db.refresh(user)
        logger.info(f"Leader created: id={user.id}, name={user.first_name} {user.last_name}")
        return user
    except Exception as e:
        logger.error(f"Error creating leader {email}: {str(e)}", exc_info=True)
        db.rollback()
        raise

def list_users(db: Session) -> list[User]:
    return list(db.execute(select(User).order_by(User.last_name)).scalars())

def get_user(db: Session, user_id: str) -> User | None:
    return db.get(User, user_id)

def update_user(db: Session, *, user_id: str, **fields) -> User | None:
    user = db.get(User, user_id)
    if not user:
        return None
    for name, value in fields.items():
        if name in _NULLABLE_FIELDS:
            setattr(user, name, value or None)
        elif value is not None:
            setattr(user, name, value)
    db.commit()
    db.refresh(user)
    return user

def delete_user(db: Session, user_id: str) -> bool:
    user = db.get(User, user_id)
    if not user:
        return False
    # a leader may still be referenced by families in either role
    db.execute(update(Family).where(Family.pilote_id == user_id).values(pilote_id=None))
    db.execute(update(Family).where(Family.copilote_id == user_id).values(copilote_id=None))
    db.delete(user)
    db.commit()
    logger.info(f"Leader deleted: id={user_id}")
    return True
