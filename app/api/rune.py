from collections.abc import Sequence
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from app.models.hero import Rune
from app.schemas.common import APIResponse
from app.schemas.hero import RuneCreate
from app.services.hero import HeroService

router = APIRouter(prefix="/runes", tags=["runes"])


@router.get("/")
async def get_runes(service: Annotated[HeroService, Depends()]) -> APIResponse[Sequence[Rune]]:
    return APIResponse(data=await service.get_runes())


@router.get("/{rune_id}")
async def get_rune(rune_id: int, service: Annotated[HeroService, Depends()]) -> APIResponse[Rune]:
    rune = await service.get_rune(rune_id)
    if not rune:
        raise HTTPException(status_code=404, detail="Rune not found")
    return APIResponse(data=rune)


@router.post("/")
async def create_rune(
    rune: RuneCreate, service: Annotated[HeroService, Depends()]
) -> APIResponse[Rune]:
    created_rune = await service.create_rune(rune)
    return APIResponse(data=created_rune, message="Rune created successfully")


@router.delete("/{rune_id}")
async def delete_rune(
    rune_id: int, service: Annotated[HeroService, Depends()]
) -> APIResponse[None]:
    deleted = await service.delete_rune(rune_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Rune not found")
    return APIResponse(message="Rune deleted successfully")
