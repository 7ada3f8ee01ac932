"""User schemas."""

from pydantic import BaseModel, ConfigDict


class UserResponse(BaseModel):
    """Public view of a user; never carries the password hash or tokens."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    role: str
