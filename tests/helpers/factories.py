from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.enums import Element, Rank, Rarity
from app.models.character import Character, Skill
from app.models.hero import Hero, Rune
from app.models.hero_config import HeroConfig
from app.models.player import Player
from app.models.rank_config import RankConfig
from app.models.team import Team, TeamMember


async def _save[T](session: AsyncSession, obj: T) -> T:
    session.add(obj)
    await session.commit()
    await session.refresh(obj)
    return obj


async def make_player(session: AsyncSession, username: str, rank: Rank = Rank.SENTINEL) -> Player:
    return await _save(session, Player(username=username, rank=rank))


async def make_skill(session: AsyncSession, name: str, atk_multiplier: float = 1.0) -> Skill:
    return await _save(session, Skill(name=name, atk_multiplier=atk_multiplier))


async def make_character(
    session: AsyncSession,
    name: str,
    *,
    basic: Skill | None,
    skill: Skill | None = None,
    ultimate: Skill | None = None,
    hp: int = 300,
    atk: int = 60,
    defense: int = 20,
    spd: int = 10,
) -> Character:
    return await _save(
        session,
        Character(
            name=name,
            element=Element.FIRE,
            hp=hp,
            atk=atk,
            defense=defense,
            spd=spd,
            basic_attack_id=basic.id if basic else None,
            skill_attack_id=skill.id if skill else None,
            ultimate_attack_id=ultimate.id if ultimate else None,
        ),
    )


async def make_rune(session: AsyncSession, name: str, **bonuses: float) -> Rune:
    return await _save(session, Rune(name=name, **bonuses))


async def make_hero(
    session: AsyncSession,
    owner: Player,
    character: Character,
    *,
    rarity: Rarity = Rarity.COMMON,
    level: int = 1,
    **overrides: object,
) -> Hero:
    return await _save(
        session,
        Hero(
            owner_id=owner.id,
            character_id=character.id,
            rarity=rarity,
            level=level,
            **overrides,
        ),
    )


async def make_team(
    session: AsyncSession, owner: Player, heroes: list[Hero], name: str = "Main"
) -> Team:
    team = await _save(session, Team(name=name, owner_id=owner.id))
    for position, hero in enumerate(heroes, start=1):
        session.add(TeamMember(team_id=team.id, hero_id=hero.id, position=position))
    await session.commit()
    return team


async def seed_reward_config(
    session: AsyncSession, rank_modifier: float = 1.0, rank: Rank = Rank.SENTINEL
) -> None:
    session.add(
        HeroConfig(
            rarity=Rarity.COMMON,
            team_modifier=0.15,
            team_value={"1": 5000, "2": 7500, "3": 10_000},
        )
    )
    session.add(RankConfig(rank=rank, modifier=rank_modifier))
    await session.commit()


async def make_roster(
    session: AsyncSession, owner: Player, basic: Skill, *, size: int = 3, name: str = "Main"
) -> Team:
    """Give ``owner`` a team of ``size`` level 1 common heroes."""
    character = await make_character(session, f"{owner.username} blueprint", basic=basic)
    heroes = [await make_hero(session, owner, character) for _ in range(size)]
    return await make_team(session, owner, heroes, name=name)
