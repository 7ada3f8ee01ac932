"""Pydantic schemas for API request/response models."""

from .auth import AuthRequest, LoginRequest, MessageResponse, RegisterRequest, TokenResponse
from .character import CharacterCreate, CharacterResponse, CharacterUpdate
from .user import UserResponse

__all__ = [
    "AuthRequest",
    "LoginRequest",
    "RegisterRequest",
    "TokenResponse",
    "MessageResponse",
    "CharacterCreate",
    "CharacterUpdate",
    "CharacterResponse",
    "UserResponse",
]
