"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from ..core.security import check_password_length


class AuthRequest(BaseModel):
    """Email and password pair shared by register and login."""
    email: EmailStr
    password: str = Field(..., min_length=6)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        return check_password_length(value)


class RegisterRequest(AuthRequest):
    """Registration request."""


class LoginRequest(AuthRequest):
    """Login request."""


class TokenResponse(BaseModel):
    """JWT token response."""
    model_config = ConfigDict(populate_by_name=True)

    access_token: str = Field(..., alias="accessToken")
    refresh_token: str = Field(..., alias="refreshToken")


class MessageResponse(BaseModel):
    message: str
