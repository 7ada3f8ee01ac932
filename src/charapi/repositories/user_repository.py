"""User repository keyed by email."""

from dataclasses import dataclass, replace
from typing import Optional

from loguru import logger

from .base import BaseRepository
from ..core.security import hash_password, verify_password


ROLE_ADMIN = "admin"
ROLE_USER = "user"


@dataclass(frozen=True)
class User:
    id: int
    email: str
    password: str  # bcrypt hash
    role: str = ROLE_USER
    refresh_token: Optional[str] = None


class UserRepository(BaseRepository[str, User]):
    """Repository for User operations."""

    def create(self, email: str, password: str, role: str = ROLE_USER) -> User:
        """
        Hash the password and store a new user under its email.

        A repeated email replaces the stored record; callers that need
        uniqueness check `email_exists` first.
        """
        user = User(
            id=self.next_id(),
            email=email,
            password=hash_password(password),
            role=role,
        )
        with self._lock:
            self._items[email] = user
        return user

    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address."""
        return self.get(email)

    def email_exists(self, email: str) -> bool:
        """Check if email is already registered."""
        return self.exists(email)

    @staticmethod
    def validate_password(user: User, password: str) -> bool:
        """Check a plaintext password against the user's stored hash."""
        return verify_password(password, user.password)

    def set_refresh_token(self, email: str, token: Optional[str]) -> bool:
        """Store (or clear, with None) the user's refresh token."""
        with self._lock:
            user = self._items.get(email)
            if user is None:
                return False
            self._items[email] = replace(user, refresh_token=token)
            return True

    def revoke(self, email: str) -> bool:
        """Clear the stored refresh token. Returns False if the user is unknown."""
        if not self.set_refresh_token(email, None):
            logger.warning(f"Cannot revoke refresh token: user {email} not found")
            return False
        return True
