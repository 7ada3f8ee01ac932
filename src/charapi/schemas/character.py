"""Character schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CharacterCreate(BaseModel):
    """Character creation schema."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=6)
    last_name: str = Field(..., min_length=6, alias="lastName")


class CharacterUpdate(BaseModel):
    """Character update schema; only the fields sent are changed."""
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(None, min_length=6)
    last_name: Optional[str] = Field(None, min_length=6, alias="lastName")


class CharacterResponse(BaseModel):
    """Character response schema."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    last_name: str = Field(..., alias="lastName")

    @classmethod
    def from_record(cls, character) -> "CharacterResponse":
        return cls(id=character.id, name=character.name, last_name=character.last_name)
