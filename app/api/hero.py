from collections.abc import Sequence
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from app.models.hero import Hero
from app.schemas.common import APIResponse, PaginatedResponse
from app.schemas.hero import HeroCreate, HeroUpdate
from app.services.hero import HeroService

router = APIRouter(prefix="/heroes", tags=["heroes"])


@router.get("/")
async def get_heroes(
    service: Annotated[HeroService, Depends()],
    page: Annotated[int, Query(ge=1)] = 1,
    page_size: Annotated[int, Query(ge=1)] = 10,
    owner_id: int | None = None,
) -> PaginatedResponse[Sequence[Hero]]:
    heroes, pagination = await service.get_heroes(
        page=page, page_size=page_size, owner_id=owner_id
    )
    return PaginatedResponse(data=heroes, pagination=pagination)


@router.get("/{hero_id}")
async def get_hero(hero_id: int, service: Annotated[HeroService, Depends()]) -> APIResponse[Hero]:
    hero = await service.get_hero(hero_id)
    if not hero:
        raise HTTPException(status_code=404, detail="Hero not found")
    return APIResponse(data=hero)


@router.post("/")
async def create_hero(
    hero: HeroCreate, service: Annotated[HeroService, Depends()]
) -> APIResponse[Hero]:
    created_hero = await service.create_hero(hero)
    return APIResponse(data=created_hero, message="Hero created successfully")


@router.put("/{hero_id}")
async def update_hero(
    hero_id: int, hero: HeroUpdate, service: Annotated[HeroService, Depends()]
) -> APIResponse[Hero]:
    updated_hero = await service.update_hero(hero_id, hero)
    if not updated_hero:
        raise HTTPException(status_code=404, detail="Hero not found")
    return APIResponse(data=updated_hero, message="Hero updated successfully")


@router.delete("/{hero_id}")
async def delete_hero(
    hero_id: int, service: Annotated[HeroService, Depends()]
) -> APIResponse[None]:
    deleted = await service.delete_hero(hero_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Hero not found")
    return APIResponse(message="Hero deleted successfully")
