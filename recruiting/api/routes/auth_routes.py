"""
Authentication Routes

POST /auth/login - Login and get JWT token
GET /auth/me - Get current user info
"""

from fastapi import APIRouter, Depends, HTTPException

from recruiting.core.auth import get_current_user
from recruiting.core.security import create_access_token
from recruiting.models import UserModel
from recruiting.schemas.schemas import LoginRequest, TokenResponse
from recruiting.services.user_service import UserService, get_user_service

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/login", response_model=TokenResponse)
def login(request: LoginRequest, user_service: UserService = Depends(get_user_service)):
    """
    Login and receive JWT access token.

    Include token in requests: Authorization: Bearer <token>
    """
    user = user_service.find_by_username_and_password(request.username, request.password)
    if user is None:
        raise HTTPException(status_code=401, detail="Invalid username or password")

    authorization = user.role.name if user.role else None
    token = create_access_token(data={"sub": user.username, "role": authorization})

    return TokenResponse(access_token=token, username=user.username, authorization=authorization)


@router.get("/me", response_model=UserModel)
def get_me(user: UserModel = Depends(get_current_user)):
    """Get current authenticated user's info."""
    return user
