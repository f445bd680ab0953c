from fastapi import APIRouter, HTTPException, Request, status
import secrets
import logging

from app.config import settings
from app.rate_limit import limiter
from app.schemas.auth import AdminLogin, AdminToken

router = APIRouter()
logger = logging.getLogger(__name__)


def _matches(given: str, expected: str) -> bool:
    return secrets.compare_digest(given.encode("utf-8"), expected.encode("utf-8"))


@router.post("/login", response_model=AdminToken)
@limiter.limit(settings.LOGIN_RATE_LIMIT)
async def admin_login(request: Request, credentials: AdminLogin):
    username_ok = _matches(credentials.username, settings.ADMIN_USERNAME)
    password_ok = _matches(credentials.password, settings.ADMIN_PASSWORD)
    if not (username_ok and password_ok):
        logger.warning(f"Échec de connexion admin pour '{credentials.username}'")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Identifiants incorrects")
    return AdminToken(success=True, token=settings.ADMIN_TOKEN)
