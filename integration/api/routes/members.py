from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from ...schemas.assignment import AssignIn, AssignmentResult, ClosestFamiliesOut
from ...schemas.common import OperationResult
from ...schemas.member import MemberCreate, MemberUpdate, MemberOut, MemberPage, PageMetadata
from ...services.assignment_service import ProximityAssignmentService
from ...services.family_service import list_available_members
from ...services.member_service import (
    create_member,
    get_member,
    update_member,
    delete_member,
    paginate_members,
)
from ..deps import get_db, get_assignment_service

router = APIRouter()


@router.get("/", response_model=MemberPage)
def list_page(
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=100),
    query: str = "",
    gender: str = Query("all", pattern="^(all|male|female|other)$"),
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    db: Session = Depends(get_db),
):
    members, metadata = paginate_members(
        db,
        page=page,
        page_size=page_size,
        query=query.strip(),
        gender=gender,
        start_date=start_date,
        end_date=end_date,
    )
    return MemberPage(
        members=[MemberOut.model_validate(m) for m in members],
        metadata=PageMetadata(**metadata),
    )


@router.get("/available", response_model=list[MemberOut])
def available(db: Session = Depends(get_db)):
    return list_available_members(db)


@router.post("/", response_model=MemberOut, status_code=201)
def register(payload: MemberCreate, db: Session = Depends(get_db)):
    return create_member(db, **payload.model_dump())


@router.get("/{member_id}", response_model=MemberOut)
def get_one(member_id: str, db: Session = Depends(get_db)):
    m = get_member(db, member_id)
    if not m:
        raise HTTPException(404, "Member not found")
    return m


@router.patch("/{member_id}", response_model=MemberOut)
def update(member_id: str, payload: MemberUpdate, db: Session = Depends(get_db)):
    m = update_member(db, member_id=member_id, **payload.model_dump(exclude_unset=True))
    if not m:
        raise HTTPException(404, "Member not found")
    return m


@router.delete("/{member_id}", status_code=204)
def delete(member_id: str, db: Session = Depends(get_db)):
    if not delete_member(db, member_id):
        raise HTTPException(404, "Member not found")


# ------------------------------------------------------------------------
#  Family assignment
# ------------------------------------------------------------------------
@router.get("/{member_id}/closest-families", response_model=ClosestFamiliesOut)
def closest_families(
    member_id: str,
    limit: Optional[int] = Query(None, ge=1, le=20),
    service: ProximityAssignmentService = Depends(get_assignment_service),
):
    result = service.find_closest_families(member_id, limit=limit)
    if result.error:
        raise HTTPException(500, result.error)
    if not result.member:
        raise HTTPException(404, "Member not found")
    return ClosestFamiliesOut.model_validate(result)


@router.post("/{member_id}/assign", response_model=AssignmentResult)
def assign(
    member_id: str,
    body: AssignIn,
    service: ProximityAssignmentService = Depends(get_assignment_service),
):
    result = service.assign_member_to_family(body.family_id, member_id)
    if not result.success:
        raise HTTPException(400, result.error)
    return result


@router.delete("/{member_id}/family", response_model=OperationResult)
def remove_from_family(
    member_id: str,
    service: ProximityAssignmentService = Depends(get_assignment_service),
):
    result = service.remove_member_from_family(member_id)
    if not result.success:
        raise HTTPException(400, result.error)
    return result
