from pydantic import BaseModel, Field

from app.core.enums import Rarity
from app.models.team import MAX_TEAM_SIZE


class TeamCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    owner_id: int
    is_active: bool = False
    hero_ids: list[int] = Field(default_factory=list, max_length=MAX_TEAM_SIZE)


class TeamUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    is_active: bool | None = None


class TeamMembersSet(BaseModel):
    """Replace a team's roster; order of ``hero_ids`` becomes member position."""

    hero_ids: list[int] = Field(max_length=MAX_TEAM_SIZE)


class TeamMemberInfo(BaseModel):
    position: int
    hero_id: int
    name: str
    rarity: Rarity
    level: int


class TeamWithMembers(BaseModel):
    id: int
    name: str
    owner_id: int
    is_active: bool
    members: list[TeamMemberInfo]
