import secrets
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.config import settings

bearer_scheme = HTTPBearer(auto_error=False)


def is_admin_token(token: Optional[str]) -> bool:
    if not token:
        return False
    return secrets.compare_digest(token.encode("utf-8"), settings.ADMIN_TOKEN.encode("utf-8"))


def require_admin(credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)):
    """Bloque toute mutation du catalogue sans le token admin."""
    if credentials is None or not is_admin_token(credentials.credentials):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Non autorisé")
    return credentials.credentials
