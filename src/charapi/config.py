"""Application configuration loaded from the environment."""

import os
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .core.security import check_password_length


class AppConfig(BaseModel):
    """
    Runtime configuration for the Character API.

    Every field can be overridden through an environment variable of the same
    name in upper case (see `from_env`).
    """

    jwt_secret: str = "My_Secret_Key"
    jwt_algorithm: str = "HS256"
    host: str = "0.0.0.0"
    port: int = 4000
    access_token_ttl_minutes: int = Field(default=60, gt=0)
    refresh_token_ttl_days: int = Field(default=1, gt=0)
    cors_origins: list[str] = ["*"]
    admin_email: Optional[str] = None
    admin_password: Optional[str] = None
    log_level: str = "INFO"

    @field_validator("admin_password")
    @classmethod
    def admin_password_fits_bcrypt(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            check_password_length(value)
        return value

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Build a config from environment variables, falling back to defaults."""
        defaults = cls()
        origins = os.getenv("CORS_ORIGINS")
        return cls(
            jwt_secret=os.getenv("JWT_SECRET") or defaults.jwt_secret,
            host=os.getenv("HOST", defaults.host),
            port=int(os.getenv("PORT", str(defaults.port))),
            access_token_ttl_minutes=int(
                os.getenv("ACCESS_TOKEN_TTL_MINUTES", str(defaults.access_token_ttl_minutes))
            ),
            refresh_token_ttl_days=int(
                os.getenv("REFRESH_TOKEN_TTL_DAYS", str(defaults.refresh_token_ttl_days))
            ),
            cors_origins=(
                [o.strip() for o in origins.split(",") if o.strip()]
                if origins
                else defaults.cors_origins
            ),
            admin_email=os.getenv("ADMIN_EMAIL") or None,
            admin_password=os.getenv("ADMIN_PASSWORD") or None,
            log_level=os.getenv("LOG_LEVEL", defaults.log_level).upper(),
        )
