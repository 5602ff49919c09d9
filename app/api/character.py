from collections.abc import Sequence
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from app.models.character import Character
from app.schemas.character import CharacterCreate, CharacterUpdate
from app.schemas.common import APIResponse, PaginatedResponse
from app.services.character import CharacterService

router = APIRouter(prefix="/characters", tags=["characters"])


@router.get("/")
async def get_characters(
    service: Annotated[CharacterService, Depends()],
    page: Annotated[int, Query(ge=1)] = 1,
    page_size: Annotated[int, Query(ge=1)] = 10,
) -> PaginatedResponse[Sequence[Character]]:
    characters, pagination = await service.get_characters(page=page, page_size=page_size)
    return PaginatedResponse(data=characters, pagination=pagination)


@router.get("/{character_id}")
async def get_character(
    character_id: int, service: Annotated[CharacterService, Depends()]
) -> APIResponse[Character]:
    character = await service.get_character(character_id)
    if not character:
        raise HTTPException(status_code=404, detail="Character not found")
    return APIResponse(data=character)


@router.post("/")
async def create_character(
    character: CharacterCreate, service: Annotated[CharacterService, Depends()]
) -> APIResponse[Character]:
    created_character = await service.create_character(character)
    return APIResponse(data=created_character, message="Character created successfully")


@router.put("/{character_id}")
async def update_character(
    character_id: int,
    character: CharacterUpdate,
    service: Annotated[CharacterService, Depends()],
) -> APIResponse[Character]:
    updated_character = await service.update_character(character_id, character)
    if not updated_character:
        raise HTTPException(status_code=404, detail="Character not found")
    return APIResponse(data=updated_character, message="Character updated successfully")


@router.delete("/{character_id}")
async def delete_character(
    character_id: int, service: Annotated[CharacterService, Depends()]
) -> APIResponse[None]:
    deleted = await service.delete_character(character_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Character not found")
    return APIResponse(message="Character deleted successfully")
