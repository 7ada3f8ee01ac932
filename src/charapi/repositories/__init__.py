"""Repository layer for data access."""

from .base import BaseRepository
from .user_repository import User, UserRepository, ROLE_ADMIN, ROLE_USER
from .character_repository import Character, CharacterRepository
from .revoked_token_repository import RevokedTokenRepository

__all__ = [
    "BaseRepository",
    "User",
    "UserRepository",
    "ROLE_ADMIN",
    "ROLE_USER",
    "Character",
    "CharacterRepository",
    "RevokedTokenRepository",
]
