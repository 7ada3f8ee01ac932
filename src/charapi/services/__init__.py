"""Service layer for business logic."""

from .auth_service import AuthContext, AuthService
from .character_service import CharacterService

__all__ = [
    "AuthContext",
    "AuthService",
    "CharacterService",
]
