"""Authentication service: registration, login, logout and token checks."""

from dataclasses import dataclass
from datetime import timedelta

from loguru import logger

from ..config import AppConfig
from ..core.exceptions import (
    EmailAlreadyExistsError,
    ForbiddenError,
    InvalidCredentialsError,
    InvalidTokenError,
)
from ..core.security import (
    ACCESS_TOKEN,
    REFRESH_TOKEN,
    create_jwt_token,
    hash_password,
    verify_jwt_token,
    verify_password,
)
from ..repositories import RevokedTokenRepository, User, UserRepository
from ..schemas.auth import TokenResponse


# Checked against on unknown emails so a miss costs as much as a wrong password
_DUMMY_PASSWORD_HASH = hash_password("not-a-real-password")


@dataclass(frozen=True)
class AuthContext:
    """Claims of a verified access token, handed to downstream handlers."""
    user_id: int
    email: str
    role: str
    token: str


class AuthService:
    """Authentication service backed by the in-memory stores."""

    def __init__(
        self,
        user_repo: UserRepository,
        revoked_token_repo: RevokedTokenRepository,
        config: AppConfig,
    ):
        self.user_repo = user_repo
        self.revoked_token_repo = revoked_token_repo
        self.config = config

    def register(self, email: str, password: str, role: str = "user") -> User:
        """Register new user. Raises EmailAlreadyExistsError on a taken email."""
        if self.user_repo.email_exists(email):
            raise EmailAlreadyExistsError(f"Email {email} already registered")

        user = self.user_repo.create(email, password, role=role)
        logger.info(f"Registered user {user.id} ({user.role})")
        return user

    def login(self, email: str, password: str) -> TokenResponse:
        """Login and return JWT tokens."""
        user = self.user_repo.get_by_email(email)

        if user is None:
            verify_password(password, _DUMMY_PASSWORD_HASH)
            raise InvalidCredentialsError("Invalid email or password")

        if not self.user_repo.validate_password(user, password):
            raise InvalidCredentialsError("Invalid email or password")

        access_token = create_jwt_token(
            {"sub": str(user.id), "email": user.email, "role": user.role},
            self.config.jwt_secret,
            timedelta(minutes=self.config.access_token_ttl_minutes),
            token_type=ACCESS_TOKEN,
            algorithm=self.config.jwt_algorithm,
        )
        refresh_token = create_jwt_token(
            {"sub": str(user.id)},
            self.config.jwt_secret,
            timedelta(days=self.config.refresh_token_ttl_days),
            token_type=REFRESH_TOKEN,
            algorithm=self.config.jwt_algorithm,
        )

        self.user_repo.set_refresh_token(user.email, refresh_token)

        return TokenResponse(access_token=access_token, refresh_token=refresh_token)

    def authenticate(self, token: str) -> AuthContext:
        """
        Turn a bearer token into an AuthContext.

        Raises:
            ForbiddenError: token has been revoked
            InvalidTokenError: bad signature, expired, or not an access token
        """
        if self.revoked_token_repo.is_revoked(token):
            raise ForbiddenError()

        payload = verify_jwt_token(
            token,
            self.config.jwt_secret,
            expected_type=ACCESS_TOKEN,
            algorithm=self.config.jwt_algorithm,
        )
        if payload is None or payload.email is None or payload.role is None:
            raise InvalidTokenError()

        try:
            user_id = int(payload.sub)
        except ValueError:
            raise InvalidTokenError()

        return AuthContext(
            user_id=user_id,
            email=payload.email,
            role=payload.role,
            token=token,
        )

    def logout(self, context: AuthContext) -> bool:
        """
        Revoke the access token and clear the stored refresh token.

        Returns False when the user behind the token no longer exists; the
        access token is revoked either way.
        """
        self.revoked_token_repo.add(context.token)
        return self.user_repo.revoke(context.email)
