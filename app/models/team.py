from typing import TYPE_CHECKING

import sqlmodel

from ._base import BaseModel

if TYPE_CHECKING:
    from .hero import Hero

MAX_TEAM_SIZE = 3


class Team(BaseModel, table=True):
    __tablename__: str = "teams"
    __table_args__ = (sqlmodel.UniqueConstraint("owner_id", "name", name="uq_team_owner_name"),)

    id: int = sqlmodel.Field(primary_key=True, index=True, default=None)
    name: str = sqlmodel.Field(max_length=100)
    owner_id: int = sqlmodel.Field(foreign_key="players.id", index=True)
    is_active: bool = False


class TeamMember(BaseModel, table=True):
    __tablename__: str = "team_members"
    __table_args__ = (
        sqlmodel.UniqueConstraint("team_id", "position", name="uq_team_member_position"),
        sqlmodel.UniqueConstraint("team_id", "hero_id", name="uq_team_member_hero"),
    )

    id: int = sqlmodel.Field(primary_key=True, index=True, default=None)
    team_id: int = sqlmodel.Field(foreign_key="teams.id", index=True)
    hero_id: int = sqlmodel.Field(foreign_key="heroes.id", index=True)
    position: int = sqlmodel.Field(ge=1, le=MAX_TEAM_SIZE)

    hero: "Hero" = sqlmodel.Relationship(sa_relationship_kwargs={"lazy": "joined"})
