from collections.abc import Sequence
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from app.models.player import Player
from app.schemas.common import APIResponse, PaginatedResponse
from app.schemas.player import PlayerCreate, PlayerUpdate
from app.services.player import PlayerService

router = APIRouter(prefix="/players", tags=["players"])


@router.get("/")
async def get_players(
    service: Annotated[PlayerService, Depends()],
    page: Annotated[int, Query(ge=1)] = 1,
    page_size: Annotated[int, Query(ge=1)] = 10,
) -> PaginatedResponse[Sequence[Player]]:
    players, pagination = await service.get_players(page=page, page_size=page_size)
    return PaginatedResponse(data=players, pagination=pagination)


@router.get("/{player_id}")
async def get_player(
    player_id: int, service: Annotated[PlayerService, Depends()]
) -> APIResponse[Player]:
    player = await service.get_player(player_id)
    if not player:
        raise HTTPException(status_code=404, detail="Player not found")
    return APIResponse(data=player)


@router.post("/")
async def create_player(
    player: PlayerCreate, service: Annotated[PlayerService, Depends()]
) -> APIResponse[Player]:
    created_player = await service.create_player(player)
    return APIResponse(data=created_player, message="Player created successfully")


@router.put("/{player_id}")
async def update_player(
    player_id: int, player: PlayerUpdate, service: Annotated[PlayerService, Depends()]
) -> APIResponse[Player]:
    updated_player = await service.update_player(player_id, player)
    if not updated_player:
        raise HTTPException(status_code=404, detail="Player not found")
    return APIResponse(data=updated_player, message="Player updated successfully")


@router.delete("/{player_id}")
async def delete_player(
    player_id: int, service: Annotated[PlayerService, Depends()]
) -> APIResponse[None]:
    deleted = await service.delete_player(player_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Player not found")
    return APIResponse(message="Player deleted successfully")
