from fastapi import APIRouter, Depends
from . import auth, users, families, members, follow_up, statistics
from ..deps import require_site_access

router = APIRouter()
protected = [Depends(require_site_access)]

router.include_router(auth.router, prefix="/auth", tags=["Auth"])
router.include_router(follow_up.router, prefix="/follow-up", tags=["Follow-up"])
router.include_router(users.router, prefix="/users", tags=["Leaders"], dependencies=protected)
router.include_router(families.router, prefix="/families", tags=["Families"], dependencies=protected)
router.include_router(members.router, prefix="/members", tags=["Members"], dependencies=protected)
router.include_router(statistics.router, prefix="/statistics", tags=["Statistics"], dependencies=protected)
