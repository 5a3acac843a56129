import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from ..models.member import Member
from ..models import utcnow
from ..schemas.common import OperationResult

logger = logging.getLogger(__name__)


def get_member_for_follow_up(db: Session, member_id: str) -> Member | None:
    return db.get(Member, member_id, options=[selectinload(Member.family)])


def update_member_follow_up(db: Session, *, member_id: str, is_contacted: bool, leader_notes: str) -> OperationResult:
    try:
        m = db.get(Member, member_id)
        if not m:
            return OperationResult(success=False, error="Member not found")
        m.is_contacted = is_contacted
        m.leader_notes = leader_notes
        m.contact_date = utcnow() if is_contacted else None
        db.commit()
    except SQLAlchemyError:
        logger.error(f"Failed to update follow-up for member {member_id}", exc_info=True)
        db.rollback()
        return OperationResult(success=False, error="Failed to update follow-up")
    logger.info(f"Follow-up updated: member={member_id}, contacted={is_contacted}")
    return OperationResult(success=True)
