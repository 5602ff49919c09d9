import datetime
from collections.abc import Sequence
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.models.daily_earning import DailyEarning
from app.models.match_earning import MatchEarning
from app.schemas.common import APIResponse, PaginatedResponse
from app.services.earning import EarningService

router = APIRouter(prefix="/earnings", tags=["earnings"])


@router.get("/{player_id}/matches")
async def get_match_earnings(
    player_id: int,
    service: Annotated[EarningService, Depends()],
    day: datetime.date | None = None,
) -> APIResponse[Sequence[MatchEarning]]:
    """Per-game rewards of a player for a day, defaulting to today."""
    return APIResponse(data=await service.get_match_earnings(player_id, day))


@router.get("/{player_id}/daily")
async def get_daily_earnings(
    player_id: int,
    service: Annotated[EarningService, Depends()],
    page: Annotated[int, Query(ge=1)] = 1,
    page_size: Annotated[int, Query(ge=1)] = 10,
) -> PaginatedResponse[Sequence[DailyEarning]]:
    earnings, pagination = await service.get_daily_earnings(
        player_id, page=page, page_size=page_size
    )
    return PaginatedResponse(data=earnings, pagination=pagination)
