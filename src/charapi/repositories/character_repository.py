"""Character repository keyed by numeric id."""

from dataclasses import dataclass, replace
from typing import Optional

from loguru import logger

from .base import BaseRepository


@dataclass(frozen=True)
class Character:
    id: int
    name: str
    last_name: str


class CharacterRepository(BaseRepository[int, Character]):
    """Repository for Character operations."""

    def create(self, name: str, last_name: str) -> Character:
        """Store a new character under a freshly generated id."""
        character = Character(id=self.next_id(), name=name, last_name=last_name)
        with self._lock:
            self._items[character.id] = character
        return character

    def update(self, character_id: int, **data) -> Optional[Character]:
        """Merge fields into an existing character. Never creates one."""
        with self._lock:
            character = self._items.get(character_id)
            if character is None:
                logger.warning(f"Character with id '{character_id}' not found")
                return None
            fields = {k: v for k, v in data.items() if k in ("name", "last_name")}
            updated = replace(character, **fields)
            self._items[character_id] = updated
            return updated

    def delete(self, id: int) -> bool:
        """Delete a character by id."""
        deleted = super().delete(id)
        if not deleted:
            logger.warning(f"Character with id '{id}' not found")
        return deleted
