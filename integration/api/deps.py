from typing import Generator, Optional
from fastapi import Cookie, Depends, HTTPException, status
from sqlalchemy.orm import Session
import jwt
from ..core.config import settings
from ..db.session import SessionLocal
from ..services.assignment_service import ProximityAssignmentService
from ..services.notification import NotificationConfig, NotificationLinkBuilder
from ..services.repository import FamilyRepository
from ..services.security import ACCESS_COOKIE, SITE_SUBJECT, decode_access_token

def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def require_site_access(site_access: Optional[str] = Cookie(default=None, alias=ACCESS_COOKIE)) -> None:
    if not site_access:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    try:
        payload = decode_access_token(site_access)
    except jwt.PyJWTError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
    if payload.get("sub") != SITE_SUBJECT:
        raise HTTPException(status_code=401, detail="Invalid token payload")

def get_link_builder() -> NotificationLinkBuilder:
    return NotificationLinkBuilder(NotificationConfig.from_settings(settings))

def get_assignment_service(
    db: Session = Depends(get_db),
    link_builder: NotificationLinkBuilder = Depends(get_link_builder),
) -> ProximityAssignmentService:
    return ProximityAssignmentService(FamilyRepository(db), link_builder, limit=settings.CLOSEST_FAMILIES_LIMIT)
