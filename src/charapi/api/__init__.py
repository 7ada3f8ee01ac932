"""API routers."""

from .auth import router as auth_router
from .characters import router as characters_router

__all__ = [
    "auth_router",
    "characters_router",
]
