from collections.abc import Sequence
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from app.core.enums import Rank
from app.models.rank_config import RankConfig
from app.schemas.common import APIResponse
from app.schemas.config import RankConfigCreate, RankConfigUpdate
from app.services.config import ConfigService

router = APIRouter(prefix="/rank-configs", tags=["rank-configs"])


@router.get("/")
async def get_rank_configs(
    service: Annotated[ConfigService, Depends()],
) -> APIResponse[Sequence[RankConfig]]:
    return APIResponse(data=await service.get_rank_configs())


@router.get("/{rank}")
async def get_rank_config(
    rank: Rank, service: Annotated[ConfigService, Depends()]
) -> APIResponse[RankConfig]:
    config = await service.get_rank_config(rank)
    if not config:
        raise HTTPException(status_code=404, detail="Rank config not found")
    return APIResponse(data=config)


@router.post("/")
async def create_rank_config(
    rank_config: RankConfigCreate, service: Annotated[ConfigService, Depends()]
) -> APIResponse[RankConfig]:
    created_config = await service.create_rank_config(rank_config)
    return APIResponse(data=created_config, message="Rank config created successfully")


@router.put("/{rank}")
async def update_rank_config(
    rank: Rank, rank_config: RankConfigUpdate, service: Annotated[ConfigService, Depends()]
) -> APIResponse[RankConfig]:
    updated_config = await service.update_rank_config(rank, rank_config)
    if not updated_config:
        raise HTTPException(status_code=404, detail="Rank config not found")
    return APIResponse(data=updated_config, message="Rank config updated successfully")


@router.delete("/{rank}")
async def delete_rank_config(
    rank: Rank, service: Annotated[ConfigService, Depends()]
) -> APIResponse[None]:
    deleted = await service.delete_rank_config(rank)
    if not deleted:
        raise HTTPException(status_code=404, detail="Rank config not found")
    return APIResponse(message="Rank config deleted successfully")
