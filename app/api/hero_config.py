from collections.abc import Sequence
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from app.core.enums import Rarity
from app.models.hero_config import HeroConfig
from app.schemas.common import APIResponse
from app.schemas.config import HeroConfigCreate, HeroConfigUpdate
from app.services.config import ConfigService

router = APIRouter(prefix="/hero-configs", tags=["hero-configs"])


@router.get("/")
async def get_hero_configs(
    service: Annotated[ConfigService, Depends()],
) -> APIResponse[Sequence[HeroConfig]]:
    return APIResponse(data=await service.get_hero_configs())


@router.get("/{rarity}")
async def get_hero_config(
    rarity: Rarity, service: Annotated[ConfigService, Depends()]
) -> APIResponse[HeroConfig]:
    config = await service.get_hero_config(rarity)
    if not config:
        raise HTTPException(status_code=404, detail="Hero config not found")
    return APIResponse(data=config)


@router.post("/")
async def create_hero_config(
    hero_config: HeroConfigCreate, service: Annotated[ConfigService, Depends()]
) -> APIResponse[HeroConfig]:
    created_config = await service.create_hero_config(hero_config)
    return APIResponse(data=created_config, message="Hero config created successfully")


@router.put("/{rarity}")
async def update_hero_config(
    rarity: Rarity, hero_config: HeroConfigUpdate, service: Annotated[ConfigService, Depends()]
) -> APIResponse[HeroConfig]:
    updated_config = await service.update_hero_config(rarity, hero_config)
    if not updated_config:
        raise HTTPException(status_code=404, detail="Hero config not found")
    return APIResponse(data=updated_config, message="Hero config updated successfully")


@router.delete("/{rarity}")
async def delete_hero_config(
    rarity: Rarity, service: Annotated[ConfigService, Depends()]
) -> APIResponse[None]:
    deleted = await service.delete_hero_config(rarity)
    if not deleted:
        raise HTTPException(status_code=404, detail="Hero config not found")
    return APIResponse(message="Hero config deleted successfully")
