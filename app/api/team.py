from collections.abc import Sequence
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from app.models.team import Team
from app.schemas.common import APIResponse, PaginatedResponse
from app.schemas.team import TeamCreate, TeamMembersSet, TeamUpdate, TeamWithMembers
from app.services.team import TeamService

router = APIRouter(prefix="/teams", tags=["teams"])


@router.get("/")
async def get_teams(
    service: Annotated[TeamService, Depends()],
    page: Annotated[int, Query(ge=1)] = 1,
    page_size: Annotated[int, Query(ge=1)] = 10,
    owner_id: int | None = None,
) -> PaginatedResponse[Sequence[Team]]:
    teams, pagination = await service.get_teams(
        page=page, page_size=page_size, owner_id=owner_id
    )
    return PaginatedResponse(data=teams, pagination=pagination)


@router.get("/{team_id}")
async def get_team(
    team_id: int, service: Annotated[TeamService, Depends()]
) -> APIResponse[TeamWithMembers]:
    team = await service.get_team_with_members(team_id)
    if not team:
        raise HTTPException(status_code=404, detail="Team not found")
    return APIResponse(data=team)


@router.post("/")
async def create_team(
    team: TeamCreate, service: Annotated[TeamService, Depends()]
) -> APIResponse[TeamWithMembers]:
    created_team = await service.create_team(team)
    return APIResponse(
        data=await service.get_team_with_members(created_team.id),
        message="Team created successfully",
    )


@router.put("/{team_id}")
async def update_team(
    team_id: int, team: TeamUpdate, service: Annotated[TeamService, Depends()]
) -> APIResponse[Team]:
    updated_team = await service.update_team(team_id, team)
    if not updated_team:
        raise HTTPException(status_code=404, detail="Team not found")
    return APIResponse(data=updated_team, message="Team updated successfully")


@router.put("/{team_id}/members")
async def set_team_members(
    team_id: int, members: TeamMembersSet, service: Annotated[TeamService, Depends()]
) -> APIResponse[TeamWithMembers]:
    """Replace the roster of a team. Heroes are placed in the order given."""
    team = await service.set_members(team_id, members.hero_ids)
    if not team:
        raise HTTPException(status_code=404, detail="Team not found")
    return APIResponse(
        data=await service.get_team_with_members(team_id), message="Team members updated"
    )


@router.delete("/{team_id}")
async def delete_team(
    team_id: int, service: Annotated[TeamService, Depends()]
) -> APIResponse[None]:
    deleted = await service.delete_team(team_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Team not found")
    return APIResponse(message="Team deleted successfully")
