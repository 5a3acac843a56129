from fastapi import APIRouter, Form, HTTPException, Response, status
import logging
from ...schemas.auth import LoginOut
from ...services.security import ACCESS_COOKIE, create_access_token, verify_site_password
from ...core.config import settings

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/login", response_model=LoginOut)
def login(response: Response, password: str = Form(...)):
    if not verify_site_password(password):
        logger.warning("Login failed: invalid site password")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid code")
    response.set_cookie(
        ACCESS_COOKIE,
        create_access_token(),
        max_age=settings.ACCESS_COOKIE_HOURS * 3600,
        httponly=True,
        secure=settings.ENVIRONMENT == "production",
        path="/",
    )
    return LoginOut()

@router.post("/logout", response_model=LoginOut)
def logout(response: Response):
    response.delete_cookie(ACCESS_COOKIE, path="/")
    return LoginOut()
