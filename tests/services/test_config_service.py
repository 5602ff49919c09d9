import pytest
from fastapi import HTTPException

from app.core.enums import Rank, Rarity
from app.engine.economy import DEFAULT_RANK_MODIFIER
from app.schemas.config import HeroConfigCreate, HeroConfigUpdate, RankConfigCreate
from app.services.config import ConfigService


async def test_hero_config_table(config_service: ConfigService) -> None:
    await config_service.create_hero_config(
        HeroConfigCreate(rarity=Rarity.RARE, team_modifier=0.1, team_value={"1": 100, "3": 300})
    )

    table = await config_service.get_hero_config_table()

    assert set(table) == {Rarity.RARE}
    assert table[Rarity.RARE].team_modifier == pytest.approx(0.1)
    assert table[Rarity.RARE].team_value == {1: 100.0, 3: 300.0}


async def test_hero_config_is_unique_per_rarity(config_service: ConfigService) -> None:
    request = HeroConfigCreate(rarity=Rarity.EPIC, team_modifier=0.1, team_value={})
    await config_service.create_hero_config(request)

    with pytest.raises(HTTPException) as exc_info:
        await config_service.create_hero_config(request)

    assert exc_info.value.status_code == 409


async def test_update_hero_config(config_service: ConfigService) -> None:
    await config_service.create_hero_config(
        HeroConfigCreate(rarity=Rarity.EPIC, team_modifier=0.1, team_value={"1": 10})
    )

    updated = await config_service.update_hero_config(
        Rarity.EPIC, HeroConfigUpdate(team_value={"1": 20, "2": 40})
    )

    assert updated is not None
    assert updated.team_modifier == pytest.approx(0.1)
    assert updated.team_value == {"1": 20, "2": 40}
    assert await config_service.update_hero_config(Rarity.COMMON, HeroConfigUpdate()) is None


def test_team_value_levels_are_validated() -> None:
    with pytest.raises(ValueError, match="levels must be 1, 2 or 3"):
        HeroConfigCreate(rarity=Rarity.EPIC, team_modifier=0.1, team_value={"4": 10})


async def test_rank_modifier(config_service: ConfigService) -> None:
    await config_service.create_rank_config(RankConfigCreate(rank=Rank.MYTHIC, modifier=1.5))

    assert await config_service.get_rank_modifier(Rank.MYTHIC) == pytest.approx(1.5)
    assert await config_service.get_rank_modifier(Rank.SENTINEL) == DEFAULT_RANK_MODIFIER
