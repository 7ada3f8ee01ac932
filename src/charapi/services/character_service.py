"""Character service."""

from typing import List

from ..core.exceptions import ResourceNotFoundError, ValidationError
from ..repositories import Character, CharacterRepository


class CharacterService:
    """Business logic for Character operations."""

    def __init__(self, character_repo: CharacterRepository):
        self.character_repo = character_repo

    def list_characters(self) -> List[Character]:
        return self.character_repo.get_multi()

    def get_character(self, character_id: int) -> Character:
        """Get character by ID."""
        character = self.character_repo.get(character_id)

        if not character:
            raise ResourceNotFoundError("Character", character_id)

        return character

    def create_character(self, name: str, last_name: str) -> Character:
        return self.character_repo.create(name=name, last_name=last_name)

    def update_character(self, character_id: int, **updates) -> Character:
        """Apply a partial update. Unknown ids are never created."""
        if not self.character_repo.exists(character_id):
            raise ResourceNotFoundError("Character", character_id)

        if not updates:
            raise ValidationError("No fields to update")

        character = self.character_repo.update(character_id, **updates)
        if character is None:
            # Deleted between the existence check and the update
            raise ResourceNotFoundError("Character", character_id)

        return character

    def delete_character(self, character_id: int) -> None:
        if not self.character_repo.delete(character_id):
            raise ResourceNotFoundError("Character", character_id)
