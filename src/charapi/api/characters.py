"""Character CRUD endpoints.

Every route needs a valid access token. Reads are open to any role, creation
to admin and user, changes and deletion to admin only.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from ..dependencies import get_auth_context, get_character_service, require_roles
from ..repositories import ROLE_ADMIN, ROLE_USER
from ..schemas.character import CharacterCreate, CharacterResponse, CharacterUpdate
from ..services import AuthContext, CharacterService


router = APIRouter(tags=["Characters"])


@router.get("/characters", response_model=List[CharacterResponse])
async def list_characters(
    context: AuthContext = Depends(get_auth_context),
    character_service: CharacterService = Depends(get_character_service),
):
    """List all characters."""
    return [CharacterResponse.from_record(c) for c in character_service.list_characters()]


@router.get("/character/{character_id}", response_model=CharacterResponse)
@router.get("/characters/{character_id}", response_model=CharacterResponse)
async def get_character(
    character_id: int,
    context: AuthContext = Depends(get_auth_context),
    character_service: CharacterService = Depends(get_character_service),
):
    """Get a specific character."""
    character = character_service.get_character(character_id)
    return CharacterResponse.from_record(character)


@router.post(
    "/characters",
    response_model=CharacterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_character(
    data: CharacterCreate,
    context: AuthContext = Depends(require_roles(ROLE_ADMIN, ROLE_USER)),
    character_service: CharacterService = Depends(get_character_service),
):
    """Create a new character. Any id in the body is ignored."""
    character = character_service.create_character(name=data.name, last_name=data.last_name)
    return CharacterResponse.from_record(character)


@router.patch("/characters/{character_id}", response_model=CharacterResponse)
@router.patch("/character/{character_id}", response_model=CharacterResponse)
async def update_character(
    character_id: int,
    data: CharacterUpdate,
    context: AuthContext = Depends(require_roles(ROLE_ADMIN)),
    character_service: CharacterService = Depends(get_character_service),
):
    """Update some fields of a character."""
    updates = data.model_dump(exclude_unset=True, exclude_none=True)
    character = character_service.update_character(character_id, **updates)
    return CharacterResponse.from_record(character)


@router.delete(
    "/character/{character_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
@router.delete(
    "/characters/{character_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_character(
    character_id: int,
    context: AuthContext = Depends(require_roles(ROLE_ADMIN)),
    character_service: CharacterService = Depends(get_character_service),
):
    """Delete a character."""
    character_service.delete_character(character_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
