"""Authentication API endpoints."""

from fastapi import APIRouter, Depends, status
from loguru import logger

from ..dependencies import get_auth_context, get_auth_service
from ..schemas.auth import LoginRequest, MessageResponse, RegisterRequest, TokenResponse
from ..schemas.user import UserResponse
from ..services import AuthContext, AuthService


router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user.

    New accounts always get the "user" role.
    """
    user = auth_service.register(email=request.email, password=request.password)
    return UserResponse.model_validate(user)


@router.post("/login", response_model=TokenResponse)
async def login(
    request: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Login with email and password.

    Returns access and refresh tokens.
    """
    return auth_service.login(email=request.email, password=request.password)


@router.post("/logout", response_model=MessageResponse)
async def logout(
    context: AuthContext = Depends(get_auth_context),
    auth_service: AuthService = Depends(get_auth_service),
):
    """Revoke the bearer token and forget the stored refresh token."""
    if not auth_service.logout(context):
        logger.warning(f"Logout for unknown user {context.email}; token revoked anyway")
    return MessageResponse(message="Logout successful")
