import secrets
from datetime import datetime, timedelta, timezone
import jwt
from ..core.config import settings

ACCESS_COOKIE = "site_access"
SITE_SUBJECT = "site"

def verify_site_password(password: str) -> bool:
    if not settings.SITE_PASSWORD:
        return False
    return secrets.compare_digest(password.encode("utf-8"), settings.SITE_PASSWORD.encode("utf-8"))

def create_access_token(sub: str = SITE_SUBJECT, hours: int | None = None) -> str:
    exp_hours = hours if hours is not None else settings.ACCESS_COOKIE_HOURS
    expire = datetime.now(timezone.utc) + timedelta(hours=exp_hours)
    payload = {"sub": sub, "exp": expire}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm="HS256")

def decode_access_token(token: str) -> dict:
    return jwt.decode(token, settings.SECRET_KEY, algorithms=["HS256"])
