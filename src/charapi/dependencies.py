"""Dependency injection for FastAPI endpoints."""

from typing import Callable, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .core.exceptions import ForbiddenError, InvalidTokenError
from .services import AuthContext, AuthService, CharacterService
from .state import AppState


# Security scheme; missing credentials are reported by get_auth_context
security = HTTPBearer(auto_error=False)


def get_app_state(request: Request) -> AppState:
    """Get the AppState of the application serving this request."""
    return request.app.state.store


# Service dependencies
def get_auth_service(state: AppState = Depends(get_app_state)) -> AuthService:
    """Get AuthService instance."""
    return AuthService(state.users, state.revoked_tokens, state.config)


def get_character_service(state: AppState = Depends(get_app_state)) -> CharacterService:
    """Get CharacterService instance."""
    return CharacterService(state.characters)


# Authentication dependencies
async def get_auth_context(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthContext:
    """
    Authenticate the bearer token on the request.

    Raises:
        InvalidTokenError: no token, or token invalid or expired (401)
        ForbiddenError: token has been revoked (403)
    """
    if credentials is None or not credentials.credentials:
        raise InvalidTokenError()

    return auth_service.authenticate(credentials.credentials)


def require_roles(*roles: str) -> Callable[..., AuthContext]:
    """
    Build a dependency that only lets the given roles through.

    Usage:
        @router.delete("/{id}")
        async def remove(context: AuthContext = Depends(require_roles("admin"))):
            ...
    """
    allowed = frozenset(roles)

    async def check_role(context: AuthContext = Depends(get_auth_context)) -> AuthContext:
        if context.role not in allowed:
            raise ForbiddenError()
        return context

    return check_role
