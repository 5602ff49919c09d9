from collections.abc import Sequence
from typing import Annotated

from fastapi import Depends, HTTPException
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.db import get_db
from app.core.enums import Rank, Rarity
from app.engine.economy import DEFAULT_RANK_MODIFIER, HeroConfigEntry
from app.models.hero_config import HeroConfig
from app.models.rank_config import RankConfig
from app.schemas.config import (
    HeroConfigCreate,
    HeroConfigUpdate,
    RankConfigCreate,
    RankConfigUpdate,
)


class ConfigService:
    """Reward configuration: per-rarity hero team values and per-rank modifiers."""

    def __init__(self, db: Annotated[AsyncSession, Depends(get_db)]) -> None:
        self.db = db

    async def get_hero_configs(self) -> Sequence[HeroConfig]:
        result = await self.db.exec(select(HeroConfig).order_by(HeroConfig.id))
        return result.all()

    async def get_hero_config(self, rarity: Rarity) -> HeroConfig | None:
        result = await self.db.exec(select(HeroConfig).where(HeroConfig.rarity == rarity))
        return result.first()

    async def get_hero_config_table(self) -> dict[Rarity, HeroConfigEntry]:
        """Load every hero config as plain lookup entries for the fragment calculator.

        Levels that are not numeric are ignored.
        """
        table: dict[Rarity, HeroConfigEntry] = {}
        for config in await self.get_hero_configs():
            team_value = {
                int(level): float(value)
                for level, value in config.team_value.items()
                if str(level).isdigit()
            }
            table[Rarity(config.rarity)] = HeroConfigEntry(
                team_modifier=config.team_modifier, team_value=team_value
            )
        return table

    async def create_hero_config(self, hero_config: HeroConfigCreate) -> HeroConfig:
        if await self.get_hero_config(hero_config.rarity):
            raise HTTPException(
                status_code=409, detail=f"Hero config for {hero_config.rarity} already exists"
            )

        new_config = HeroConfig.model_validate(hero_config.model_dump())
        self.db.add(new_config)
        await self.db.commit()
        await self.db.refresh(new_config)
        return new_config

    async def update_hero_config(
        self, rarity: Rarity, hero_config: HeroConfigUpdate
    ) -> HeroConfig | None:
        existing_config = await self.get_hero_config(rarity)
        if not existing_config:
            return None

        existing_config.sqlmodel_update(hero_config.model_dump(exclude_unset=True))
        self.db.add(existing_config)
        await self.db.commit()
        await self.db.refresh(existing_config)
        return existing_config

    async def delete_hero_config(self, rarity: Rarity) -> bool:
        config = await self.get_hero_config(rarity)
        if not config:
            return False

        await self.db.delete(config)
        await self.db.commit()
        return True

    async def get_rank_configs(self) -> Sequence[RankConfig]:
        result = await self.db.exec(select(RankConfig).order_by(RankConfig.id))
        return result.all()

    async def get_rank_config(self, rank: Rank) -> RankConfig | None:
        result = await self.db.exec(select(RankConfig).where(RankConfig.rank == rank))
        return result.first()

    async def get_rank_modifier(self, rank: Rank) -> float:
        """Reward modifier of a rank. Unconfigured ranks earn nothing."""
        config = await self.get_rank_config(rank)
        return config.modifier if config else DEFAULT_RANK_MODIFIER

    async def create_rank_config(self, rank_config: RankConfigCreate) -> RankConfig:
        if await self.get_rank_config(rank_config.rank):
            raise HTTPException(
                status_code=409, detail=f"Rank config for {rank_config.rank} already exists"
            )

        new_config = RankConfig.model_validate(rank_config.model_dump())
        self.db.add(new_config)
        await self.db.commit()
        await self.db.refresh(new_config)
        return new_config

    async def update_rank_config(
        self, rank: Rank, rank_config: RankConfigUpdate
    ) -> RankConfig | None:
        existing_config = await self.get_rank_config(rank)
        if not existing_config:
            return None

        existing_config.sqlmodel_update(rank_config.model_dump(exclude_unset=True))
        self.db.add(existing_config)
        await self.db.commit()
        await self.db.refresh(existing_config)
        return existing_config

    async def delete_rank_config(self, rank: Rank) -> bool:
        config = await self.get_rank_config(rank)
        if not config:
            return False

        await self.db.delete(config)
        await self.db.commit()
        return True
