"""
Authentication dependencies for protected routes.

Provides:
- Bearer token extraction (HTTPBearer)
- FastAPI dependencies resolving the caller from the JWT subject
"""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from recruiting.core.security import decode_token
from recruiting.models import ADMIN_ROLE, UserModel
from recruiting.services.user_service import UserService, get_user_service

# Bearer token extractor; a missing header is a 401, not FastAPI's default 403
bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    user_service: UserService = Depends(get_user_service),
) -> UserModel:
    """
    FastAPI dependency - Get current authenticated user.

    Usage:
        @router.get("/protected")
        def route(user: UserModel = Depends(get_current_user)):
            return user
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or expired token",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if credentials is None:
        raise credentials_exception

    payload = decode_token(credentials.credentials)
    if not payload:
        raise credentials_exception

    username = payload.get("sub")
    if not username:
        raise credentials_exception

    # Verify user still exists
    user = user_service.find_by_username(username)
    if user is None:
        raise credentials_exception

    return user


def get_current_admin(user: UserModel = Depends(get_current_user)) -> UserModel:
    """Dependency - Require the Administrator role."""
    if user.role is None or user.role.name != ADMIN_ROLE:
        raise HTTPException(status_code=403, detail="Administrators only")
    return user
