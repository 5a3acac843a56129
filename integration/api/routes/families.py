from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ...schemas.family import FamilyCreate, FamilyUpdate, FamilyOut, FamilyDetailsOut
from ...schemas.member import MemberOut
from ...services.family_service import (
    create_family,
    update_family,
    delete_family,
    list_families,
    get_family,
    get_family_with_details,
)
from ..deps import get_db

router = APIRouter()


@router.get("/", response_model=list[FamilyOut])
def list_all(db: Session = Depends(get_db)):
    return list_families(db)


@router.post("/", response_model=FamilyOut, status_code=201)
def create(payload: FamilyCreate, db: Session = Depends(get_db)):
    fam = create_family(db, **payload.model_dump())
    return get_family(db, fam.id)


@router.get("/{family_id}", response_model=FamilyDetailsOut)
def get_one(family_id: str, db: Session = Depends(get_db)):
    details = get_family_with_details(db, family_id)
    if not details:
        raise HTTPException(404, "Family not found")
    fam, available = details
    return FamilyDetailsOut(
        family=FamilyOut.model_validate(fam),
        available_members=[MemberOut.model_validate(m) for m in available],
    )


@router.put("/{family_id}", response_model=FamilyOut)
def update(family_id: str, payload: FamilyUpdate, db: Session = Depends(get_db)):
    fam = update_family(db, family_id=family_id, **payload.model_dump())
    if not fam:
        raise HTTPException(404, "Family not found")
    return get_family(db, fam.id)


@router.delete("/{family_id}", status_code=204)
def delete(family_id: str, db: Session = Depends(get_db)):
    if not delete_family(db, family_id):
        raise HTTPException(404, "Family not found")
