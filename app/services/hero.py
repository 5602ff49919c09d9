from collections.abc import Sequence
from typing import Annotated

from fastapi import Depends, HTTPException
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.db import get_db
from app.models.character import Character
from app.models.hero import Hero, Rune
from app.models.player import Player
from app.schemas.common import PaginationData
from app.schemas.hero import HeroCreate, HeroUpdate, RuneCreate


class HeroService:
    def __init__(self, db: Annotated[AsyncSession, Depends(get_db)]) -> None:
        self.db = db

    async def get_runes(self) -> Sequence[Rune]:
        result = await self.db.exec(select(Rune).order_by(Rune.id))
        return result.all()

    async def get_rune(self, rune_id: int) -> Rune | None:
        result = await self.db.exec(select(Rune).where(Rune.id == rune_id))
        return result.first()

    async def create_rune(self, rune: RuneCreate) -> Rune:
        new_rune = Rune.model_validate(rune.model_dump())
        self.db.add(new_rune)
        await self.db.commit()
        await self.db.refresh(new_rune)
        return new_rune

    async def delete_rune(self, rune_id: int) -> bool:
        rune = await self.get_rune(rune_id)
        if not rune:
            return False

        await self.db.delete(rune)
        await self.db.commit()
        return True

    async def get_heroes(
        self, *, page: int, page_size: int, owner_id: int | None = None
    ) -> tuple[Sequence[Hero], PaginationData]:
        offset = PaginationData.offset(page, page_size)

        query = select(Hero)
        if owner_id is not None:
            query = query.where(Hero.owner_id == owner_id)

        total_items_result = await self.db.exec(query)
        total_items = len(total_items_result.all())

        result = await self.db.exec(query.order_by(Hero.id).offset(offset).limit(page_size))
        heroes = result.all()

        pagination = PaginationData.build(page=page, page_size=page_size, total_items=total_items)

        return heroes, pagination

    async def get_hero(self, hero_id: int) -> Hero | None:
        result = await self.db.exec(select(Hero).where(Hero.id == hero_id))
        return result.first()

    async def create_hero(self, hero: HeroCreate) -> Hero:
        """Mint a hero for a player from a character blueprint.

        Raises:
            HTTPException: If the owner, character or rune does not exist.
        """
        owner = await self.db.exec(select(Player).where(Player.id == hero.owner_id))
        if not owner.first():
            raise HTTPException(status_code=400, detail=f"Player {hero.owner_id} not found")

        character = await self.db.exec(select(Character).where(Character.id == hero.character_id))
        if not character.first():
            raise HTTPException(status_code=400, detail=f"Character {hero.character_id} not found")

        if hero.rune_id is not None and not await self.get_rune(hero.rune_id):
            raise HTTPException(status_code=400, detail=f"Rune {hero.rune_id} not found")

        new_hero = Hero.model_validate(hero.model_dump())
        self.db.add(new_hero)
        await self.db.commit()
        await self.db.refresh(new_hero)
        return new_hero

    async def update_hero(self, hero_id: int, hero: HeroUpdate) -> Hero | None:
        existing_hero = await self.get_hero(hero_id)
        if not existing_hero:
            return None

        hero_data = hero.model_dump(exclude_unset=True)
        rune_id = hero_data.get("rune_id")
        if rune_id is not None and not await self.get_rune(rune_id):
            raise HTTPException(status_code=400, detail=f"Rune {rune_id} not found")

        existing_hero.sqlmodel_update(hero_data)
        self.db.add(existing_hero)
        await self.db.commit()
        await self.db.refresh(existing_hero)
        return existing_hero

    async def delete_hero(self, hero_id: int) -> bool:
        hero = await self.get_hero(hero_id)
        if not hero:
            return False

        await self.db.delete(hero)
        await self.db.commit()
        return True
