from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from bloodlink.core.database import get_db
from bloodlink.models.user import User
from bloodlink.services.auth_service import AuthService
from bloodlink.utils.errors import Unauthorized

security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: Session = Depends(get_db),
) -> User:
    """Verify the bearer token (signature and expiry) and load its user"""
    if credentials is None or not credentials.credentials:
        raise Unauthorized("Missing bearer token")
    return AuthService.get_user_from_token(db, credentials.credentials)
