import pytest
from fastapi import HTTPException
from sqlmodel.ext.asyncio.session import AsyncSession

from app.schemas.team import TeamCreate
from app.services.team import TeamService
from tests.helpers.factories import make_character, make_hero, make_player, make_skill


@pytest.fixture
async def roster(session: AsyncSession):
    owner = await make_player(session, "ayla")
    character = await make_character(session, "Ember", basic=await make_skill(session, "Strike"))
    heroes = [await make_hero(session, owner, character) for _ in range(4)]
    return owner, heroes


async def test_create_team_keeps_hero_order(team_service: TeamService, roster) -> None:
    owner, heroes = roster
    hero_ids = [heroes[2].id, heroes[0].id]

    team = await team_service.create_team(
        TeamCreate(name="Main", owner_id=owner.id, hero_ids=hero_ids)
    )
    detail = await team_service.get_team_with_members(team.id)

    assert detail is not None
    assert [member.hero_id for member in detail.members] == hero_ids
    assert [member.position for member in detail.members] == [1, 2]


async def test_duplicate_team_name_conflicts(team_service: TeamService, roster) -> None:
    owner, _ = roster
    await team_service.create_team(TeamCreate(name="Main", owner_id=owner.id))

    with pytest.raises(HTTPException) as exc_info:
        await team_service.create_team(TeamCreate(name="Main", owner_id=owner.id))

    assert exc_info.value.status_code == 409


async def test_roster_rules(session: AsyncSession, team_service: TeamService, roster) -> None:
    owner, heroes = roster
    stranger = await make_player(session, "brom")
    team = await team_service.create_team(TeamCreate(name="Main", owner_id=owner.id))

    for hero_ids in (
        [hero.id for hero in heroes],
        [heroes[0].id, heroes[0].id],
        [999],
    ):
        with pytest.raises(HTTPException) as exc_info:
            await team_service.set_members(team.id, hero_ids)
        assert exc_info.value.status_code == 400

    with pytest.raises(HTTPException, match="does not belong"):
        await team_service.create_team(
            TeamCreate(name="Borrowed", owner_id=stranger.id, hero_ids=[heroes[0].id])
        )


async def test_set_members_replaces_roster(team_service: TeamService, roster) -> None:
    owner, heroes = roster
    team = await team_service.create_team(
        TeamCreate(name="Main", owner_id=owner.id, hero_ids=[heroes[0].id, heroes[1].id])
    )

    await team_service.set_members(team.id, [heroes[1].id, heroes[3].id, heroes[0].id])
    team_heroes = await team_service.get_team_heroes(team.id)

    assert [hero.id for hero in team_heroes] == [heroes[1].id, heroes[3].id, heroes[0].id]


async def test_delete_team(team_service: TeamService, roster) -> None:
    owner, heroes = roster
    team = await team_service.create_team(
        TeamCreate(name="Main", owner_id=owner.id, hero_ids=[heroes[0].id])
    )

    assert await team_service.delete_team(team.id) is True
    assert await team_service.get_team(team.id) is None
    assert await team_service.get_team_heroes(team.id) == []
