from collections.abc import Sequence
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.core.enums import BattleMode
from app.schemas.battle import (
    BattleCreate,
    BattleDetail,
    BattleLogAppend,
    BattleSimulateRequest,
    BattleUpdate,
)
from app.schemas.common import APIResponse, PaginatedResponse
from app.schemas.earning import BattleEarningsReport
from app.services.battle import BattleService, to_battle_detail

router = APIRouter(prefix="/battles", tags=["battles"])


@router.get("/")
async def get_battles(
    service: Annotated[BattleService, Depends()],
    page: Annotated[int, Query(ge=1)] = 1,
    page_size: Annotated[int, Query(ge=1)] = 10,
    player_id: int | None = None,
    mode: BattleMode | None = None,
) -> PaginatedResponse[Sequence[BattleDetail]]:
    battles, pagination = await service.get_battles(
        page=page, page_size=page_size, player_id=player_id, mode=mode
    )
    return PaginatedResponse(
        data=[to_battle_detail(battle) for battle in battles], pagination=pagination
    )


@router.post("/", status_code=status.HTTP_201_CREATED)
async def create_battle(
    battle: BattleCreate, service: Annotated[BattleService, Depends()]
) -> APIResponse[BattleDetail]:
    created_battle = await service.create_battle(battle)
    return APIResponse(data=to_battle_detail(created_battle), message="Battle created")


@router.post("/simulate", status_code=status.HTTP_201_CREATED)
async def simulate_teams(
    request: BattleSimulateRequest, service: Annotated[BattleService, Depends()]
) -> APIResponse[BattleDetail]:
    """Create a battle between two teams and resolve it immediately."""
    battle = await service.simulate_teams(request.team_a_id, request.team_b_id, request.mode)
    return APIResponse(data=to_battle_detail(battle), message="Battle simulated")


@router.get("/{battle_id}")
async def get_battle(
    battle_id: int, service: Annotated[BattleService, Depends()]
) -> APIResponse[BattleDetail]:
    battle = await service.get_battle(battle_id)
    if not battle:
        raise HTTPException(status_code=404, detail="Battle not found")
    return APIResponse(data=to_battle_detail(battle))


@router.put("/{battle_id}")
async def update_battle(
    battle_id: int, battle: BattleUpdate, service: Annotated[BattleService, Depends()]
) -> APIResponse[BattleDetail]:
    updated_battle = await service.update_battle(battle_id, battle)
    if not updated_battle:
        raise HTTPException(status_code=404, detail="Battle not found")
    return APIResponse(data=to_battle_detail(updated_battle), message="Battle updated")


@router.delete("/{battle_id}")
async def delete_battle(
    battle_id: int, service: Annotated[BattleService, Depends()]
) -> APIResponse[None]:
    deleted = await service.delete_battle(battle_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Battle not found")
    return APIResponse(message="Battle deleted successfully")


@router.post("/{battle_id}/log", status_code=status.HTTP_201_CREATED)
async def append_log(
    battle_id: int, entry: BattleLogAppend, service: Annotated[BattleService, Depends()]
) -> APIResponse[dict]:
    log_entry = await service.append_log(battle_id, entry)
    return APIResponse(data=log_entry, message="Log appended")


@router.get("/{battle_id}/log")
async def get_log(
    battle_id: int, service: Annotated[BattleService, Depends()]
) -> APIResponse[list[dict]]:
    return APIResponse(data=await service.get_log(battle_id))


@router.post("/{battle_id}/simulate")
async def simulate_battle(
    battle_id: int, service: Annotated[BattleService, Depends()]
) -> APIResponse[BattleDetail]:
    battle = await service.simulate(battle_id)
    return APIResponse(data=to_battle_detail(battle), message="Battle simulated")


@router.post("/{battle_id}/finish")
async def finish_battle(
    battle_id: int, service: Annotated[BattleService, Depends()]
) -> APIResponse[BattleEarningsReport]:
    """End the battle and process fragment rewards for its players."""
    report = await service.finish_battle(battle_id)
    message = (
        "Battle finished"
        if report.all_succeeded
        else "Battle finished, some player earnings could not be processed"
    )
    return APIResponse(data=report, message=message)
