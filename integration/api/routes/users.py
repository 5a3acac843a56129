from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ...schemas.user import UserCreate, UserOut, UserUpdate
from ...services.user_service import create_user, list_users, update_user, delete_user
from ..deps import get_db

router = APIRouter()


@router.get("/", response_model=list[UserOut])
def list_all(db: Session = Depends(get_db)):
    return list_users(db)


@router.post("/", response_model=UserOut, status_code=201)
def create(payload: UserCreate, db: Session = Depends(get_db)):
    return create_user(db, **payload.model_dump())


@router.patch("/{user_id}", response_model=UserOut)
def update(user_id: str, payload: UserUpdate, db: Session = Depends(get_db)):
    user = update_user(db, user_id=user_id, **payload.model_dump(exclude_unset=True))
    if not user:
        raise HTTPException(404, "Leader not found")
    return user


@router.delete("/{user_id}", status_code=204)
def delete(user_id: str, db: Session = Depends(get_db)):
    if not delete_user(db, user_id):
        raise HTTPException(404, "Leader not found")
