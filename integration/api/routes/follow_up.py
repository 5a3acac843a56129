from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ...schemas.common import OperationResult
from ...schemas.follow_up import FollowUpOut, FollowUpUpdate
from ...services.follow_up_service import get_member_for_follow_up, update_member_follow_up
from ..deps import get_db

# reachable from the link sent to leaders, so no site-access cookie here
router = APIRouter()


@router.get("/{member_id}", response_model=FollowUpOut)
def get_one(member_id: str, db: Session = Depends(get_db)):
    m = get_member_for_follow_up(db, member_id)
    if not m:
        raise HTTPException(404, "Member not found")
    return m


@router.put("/{member_id}", response_model=OperationResult)
def update(member_id: str, payload: FollowUpUpdate, db: Session = Depends(get_db)):
    result = update_member_follow_up(
        db,
        member_id=member_id,
        is_contacted=payload.is_contacted,
        leader_notes=payload.leader_notes,
    )
    if not result.success:
        raise HTTPException(404 if result.error == "Member not found" else 500, result.error)
    return result
