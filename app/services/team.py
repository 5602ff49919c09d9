from collections.abc import Sequence
from typing import Annotated

from fastapi import Depends, HTTPException
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.db import get_db
from app.models.hero import Hero
from app.models.player import Player
from app.models.team import MAX_TEAM_SIZE, Team, TeamMember
from app.schemas.common import PaginationData
from app.schemas.team import TeamCreate, TeamMemberInfo, TeamUpdate, TeamWithMembers


class TeamService:
    def __init__(self, db: Annotated[AsyncSession, Depends(get_db)]) -> None:
        self.db = db

    async def get_teams(
        self, *, page: int, page_size: int, owner_id: int | None = None
    ) -> tuple[Sequence[Team], PaginationData]:
        offset = PaginationData.offset(page, page_size)

        query = select(Team)
        if owner_id is not None:
            query = query.where(Team.owner_id == owner_id)

        total_items_result = await self.db.exec(query)
        total_items = len(total_items_result.all())

        result = await self.db.exec(query.order_by(Team.id).offset(offset).limit(page_size))
        teams = result.all()

        pagination = PaginationData.build(page=page, page_size=page_size, total_items=total_items)

        return teams, pagination

    async def get_team(self, team_id: int) -> Team | None:
        result = await self.db.exec(select(Team).where(Team.id == team_id))
        return result.first()

    async def get_team_heroes(self, team_id: int) -> list[Hero]:
        """Get a team's heroes in roster order, with blueprint, skills and rune loaded."""
        result = await self.db.exec(
            select(Hero)
            .join(TeamMember, col(TeamMember.hero_id) == Hero.id)
            .where(TeamMember.team_id == team_id)
            .order_by(col(TeamMember.position))
            .execution_options(populate_existing=True)
        )
        return list(result.all())

    async def get_team_with_members(self, team_id: int) -> TeamWithMembers | None:
        team = await self.get_team(team_id)
        if not team:
            return None

        heroes = await self.get_team_heroes(team_id)
        members = [
            TeamMemberInfo(
                position=position,
                hero_id=hero.id,
                name=hero.name or hero.character.name,
                rarity=hero.rarity,
                level=hero.level,
            )
            for position, hero in enumerate(heroes, start=1)
        ]
        return TeamWithMembers(
            id=team.id,
            name=team.name,
            owner_id=team.owner_id,
            is_active=team.is_active,
            members=members,
        )

    async def _validate_roster(self, owner_id: int, hero_ids: list[int]) -> None:
        if len(hero_ids) > MAX_TEAM_SIZE:
            raise HTTPException(
                status_code=400, detail=f"A team must have between 0 and {MAX_TEAM_SIZE} heroes"
            )
        if len(set(hero_ids)) != len(hero_ids):
            raise HTTPException(status_code=400, detail="A hero can only appear once in a team")

        for hero_id in hero_ids:
            result = await self.db.exec(select(Hero).where(Hero.id == hero_id))
            hero = result.first()
            if not hero:
                raise HTTPException(status_code=400, detail=f"Hero {hero_id} not found")
            if hero.owner_id != owner_id:
                raise HTTPException(
                    status_code=400, detail=f"Hero {hero_id} does not belong to player {owner_id}"
                )

    async def create_team(self, team: TeamCreate) -> Team:
        owner = await self.db.exec(select(Player).where(Player.id == team.owner_id))
        if not owner.first():
            raise HTTPException(status_code=400, detail=f"Player {team.owner_id} not found")

        existing = await self.db.exec(
            select(Team).where(Team.owner_id == team.owner_id, Team.name == team.name)
        )
        if existing.first():
            raise HTTPException(status_code=409, detail="You already have a team with this name")

        await self._validate_roster(team.owner_id, team.hero_ids)

        new_team = Team(name=team.name, owner_id=team.owner_id, is_active=team.is_active)
        self.db.add(new_team)
        await self.db.flush()

        for position, hero_id in enumerate(team.hero_ids, start=1):
            self.db.add(TeamMember(team_id=new_team.id, hero_id=hero_id, position=position))

        await self.db.commit()
        await self.db.refresh(new_team)
        return new_team

    async def _clear_members(self, team_id: int) -> None:
        result = await self.db.exec(select(TeamMember).where(TeamMember.team_id == team_id))
        for member in result.all():
            await self.db.delete(member)
        # Old positions must be gone before the new roster is inserted
        await self.db.flush()

    async def set_members(self, team_id: int, hero_ids: list[int]) -> Team | None:
        team = await self.get_team(team_id)
        if not team:
            return None

        await self._validate_roster(team.owner_id, hero_ids)

        await self._clear_members(team_id)
        for position, hero_id in enumerate(hero_ids, start=1):
            self.db.add(TeamMember(team_id=team_id, hero_id=hero_id, position=position))

        await self.db.commit()
        await self.db.refresh(team)
        return team

    async def update_team(self, team_id: int, team: TeamUpdate) -> Team | None:
        existing_team = await self.get_team(team_id)
        if not existing_team:
            return None

        existing_team.sqlmodel_update(team.model_dump(exclude_unset=True))
        self.db.add(existing_team)
        await self.db.commit()
        await self.db.refresh(existing_team)
        return existing_team

    async def delete_team(self, team_id: int) -> bool:
        team = await self.get_team(team_id)
        if not team:
            return False

        await self._clear_members(team_id)
        await self.db.delete(team)
        await self.db.commit()
        return True
