import random
from collections.abc import Sequence
from typing import Annotated

from fastapi import Depends, HTTPException
from loguru import logger
from sqlmodel import col, desc, select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.db import get_db
from app.core.enums import BattleMode, BattleStatus, TeamSide
from app.engine.combatant import (
    DEFAULT_ATK,
    DEFAULT_DEF,
    DEFAULT_HP,
    DEFAULT_SPD,
    Combatant,
    SkillData,
)
from app.engine.scheduler import simulate_battle
from app.models.battle import Battle, BattlePlayer
from app.models.character import Skill
from app.models.hero import Hero
from app.models.team import Team
from app.schemas.battle import (
    BattleCreate,
    BattleDetail,
    BattlePlayerCreate,
    BattleLogAppend,
    BattlePlayerInfo,
    BattleUpdate,
)
from app.schemas.common import PaginationData
from app.schemas.earning import BattleEarningsReport
from app.services.earning import EarningService, snapshot_roster
from app.services.team import TeamService
from app.utils.misc import get_utc_iso_now

BATTLE_SIZE = 2
SIDES = (TeamSide.TEAM_A, TeamSide.TEAM_B)

# Status a battle must be in for each target status
_ALLOWED_TRANSITIONS = {
    BattleStatus.IN_BATTLE: BattleStatus.INIT_BATTLE,
    BattleStatus.END_BATTLE: BattleStatus.IN_BATTLE,
}


def _to_skill_data(skill: Skill | None) -> SkillData | None:
    if skill is None:
        return None
    return SkillData(
        name=skill.name,
        atk_multiplier=skill.atk_multiplier,
        def_multiplier=skill.def_multiplier,
        hp_multiplier=skill.hp_multiplier,
    )


def _pick[T](override: T | None, base: T | None, default: T) -> T:
    if override is not None:
        return override
    return base if base is not None else default


def build_combatant(hero: Hero, side: TeamSide) -> Combatant:
    """Turn a hero into a fresh combatant.

    Hero stat overrides win over the character blueprint, rune bonuses are
    added on top, and crit values are converted from percentages.
    """
    character = hero.character
    rune = hero.rune

    hp = _pick(hero.hp, character.hp if character else None, DEFAULT_HP)
    atk = _pick(hero.atk, character.atk if character else None, DEFAULT_ATK)
    defense = _pick(hero.defense, character.defense if character else None, DEFAULT_DEF)
    spd = _pick(hero.spd, character.spd if character else None, DEFAULT_SPD)
    crit_rate = _pick(hero.crit_rate, character.crit_rate if character else None, 0.0)
    crit_dmg = _pick(hero.crit_dmg, character.crit_dmg if character else None, 0.0)

    if rune is not None:
        hp += rune.hp_bonus
        atk += rune.atk_bonus
        defense += rune.def_bonus
        spd += rune.spd_bonus
        crit_rate += rune.crit_rate_bonus
        crit_dmg += rune.crit_dmg_bonus

    return Combatant(
        id=str(hero.id),
        name=hero.name or (character.name if character else "Unknown"),
        side=side,
        hp=hp,
        atk=atk,
        defense=defense,
        spd=spd,
        crit_rate=crit_rate / 100,
        crit_dmg=crit_dmg / 100,
        basic_attack=_to_skill_data(character.basic_attack) if character else None,
        skill_attack=_to_skill_data(character.skill_attack) if character else None,
        ultimate_attack=_to_skill_data(character.ultimate_attack) if character else None,
    )


def to_battle_detail(battle: Battle) -> BattleDetail:
    return BattleDetail(
        id=battle.id,
        mode=battle.mode,
        status=battle.status,
        winner_side=battle.winner_side,
        players=[
            BattlePlayerInfo(
                player_id=player.player_id,
                team_id=player.team_id,
                side=player.side,
                is_winner=player.is_winner,
                roster=player.roster,
            )
            for player in battle.players
        ],
        log=list(battle.log),
        created_at=battle.created_at,
        updated_at=battle.updated_at,
    )


class BattleService:
    def __init__(
        self,
        db: Annotated[AsyncSession, Depends(get_db)],
        team_service: Annotated[TeamService, Depends()],
        earning_service: Annotated[EarningService, Depends()],
    ) -> None:
        self.db = db
        self.team_service = team_service
        self.earning_service = earning_service

    async def get_battles(
        self,
        *,
        page: int,
        page_size: int,
        player_id: int | None = None,
        mode: BattleMode | None = None,
    ) -> tuple[Sequence[Battle], PaginationData]:
        offset = PaginationData.offset(page, page_size)

        query = select(Battle)
        if player_id is not None:
            query = query.where(
                col(Battle.id).in_(
                    select(BattlePlayer.battle_id).where(BattlePlayer.player_id == player_id)
                )
            )
        if mode is not None:
            query = query.where(Battle.mode == mode)

        total_items_result = await self.db.exec(query)
        total_items = len(total_items_result.all())

        result = await self.db.exec(
            query.order_by(desc(col(Battle.created_at))).offset(offset).limit(page_size)
        )
        battles = result.all()

        pagination = PaginationData.build(page=page, page_size=page_size, total_items=total_items)

        return battles, pagination

    async def get_battle(self, battle_id: int) -> Battle | None:
        result = await self.db.exec(
            select(Battle).where(Battle.id == battle_id).execution_options(populate_existing=True)
        )
        return result.first()

    async def _get_battle_or_404(self, battle_id: int) -> Battle:
        battle = await self.get_battle(battle_id)
        if not battle:
            raise HTTPException(status_code=404, detail="Battle not found")
        return battle

    async def create_battle(self, battle: BattleCreate) -> Battle:
        """Create a battle between two players' teams, waiting to be simulated.

        Raises:
            HTTPException: If there are not exactly two players or a team is missing.
        """
        if len(battle.players) != BATTLE_SIZE:
            raise HTTPException(status_code=400, detail="A battle needs exactly 2 players")

        for entry in battle.players:
            team = await self.team_service.get_team(entry.team_id)
            if not team:
                raise HTTPException(status_code=400, detail=f"Team {entry.team_id} not found")

        new_battle = Battle(mode=battle.mode, status=BattleStatus.INIT_BATTLE, log=[])
        self.db.add(new_battle)
        await self.db.flush()

        for side, entry in zip(SIDES, battle.players, strict=True):
            self.db.add(
                BattlePlayer(
                    battle_id=new_battle.id,
                    player_id=entry.player_id,
                    team_id=entry.team_id,
                    side=side,
                )
            )

        await self.db.commit()
        return await self._get_battle_or_404(new_battle.id)

    async def update_battle(self, battle_id: int, battle: BattleUpdate) -> Battle | None:
        existing_battle = await self.get_battle(battle_id)
        if not existing_battle:
            return None

        if battle.status is not None and battle.status != existing_battle.status:
            if battle.status == BattleStatus.END_BATTLE:
                raise HTTPException(
                    status_code=400, detail="Use the finish endpoint to end a battle"
                )
            self._check_transition(existing_battle, battle.status)
            existing_battle.status = battle.status

        if battle.players is not None:
            winners = {entry.player_id: entry.is_winner for entry in battle.players}
            for player in existing_battle.players:
                if player.player_id in winners:
                    player.is_winner = winners[player.player_id]
                    self.db.add(player)

        self.db.add(existing_battle)
        await self.db.commit()
        return await self.get_battle(battle_id)

    async def delete_battle(self, battle_id: int) -> bool:
        battle = await self.get_battle(battle_id)
        if not battle:
            return False
        if battle.status == BattleStatus.END_BATTLE:
            raise HTTPException(
                status_code=409, detail="A finished battle is referenced by reward ledgers"
            )

        await self.db.delete(battle)
        await self.db.commit()
        return True

    async def append_log(self, battle_id: int, entry: BattleLogAppend) -> dict:
        battle = await self._get_battle_or_404(battle_id)

        log_entry = {**entry.model_dump(), "timestamp": get_utc_iso_now()}
        # Reassign so the JSON column is flagged as changed
        battle.log = [*battle.log, log_entry]
        self.db.add(battle)
        await self.db.commit()
        return log_entry

    async def get_log(self, battle_id: int) -> list[dict]:
        battle = await self._get_battle_or_404(battle_id)
        return list(battle.log)

    @staticmethod
    def _check_transition(battle: Battle, target: BattleStatus) -> None:
        required = _ALLOWED_TRANSITIONS.get(target)
        if required is None or battle.status != required:
            raise HTTPException(
                status_code=409,
                detail=f"Battle {battle.id} cannot go from {battle.status} to {target}",
            )

    async def simulate(self, battle_id: int, *, rng: random.Random | None = None) -> Battle:
        """Resolve a created battle and record its log and winner.

        Nothing is written if the simulation fails, so the battle stays in
        its initial status.

        Raises:
            HTTPException: If the battle does not exist or was already simulated.
            SkillDataError: If a hero's blueprint has no usable skill.
        """
        battle = await self._get_battle_or_404(battle_id)
        self._check_transition(battle, BattleStatus.IN_BATTLE)

        players = sorted(battle.players, key=lambda p: SIDES.index(p.side))
        if len(players) != BATTLE_SIZE:
            raise HTTPException(status_code=400, detail="A battle needs exactly 2 players")

        rosters = [await self.team_service.get_team_heroes(player.team_id) for player in players]
        team_a, team_b = [
            [build_combatant(hero, player.side) for hero in heroes]
            for player, heroes in zip(players, rosters, strict=True)
        ]

        logger.info(
            f"Simulating battle {battle.id} ({battle.mode}): "
            f"{len(team_a)} vs {len(team_b)} combatants"
        )
        outcome = simulate_battle(team_a, team_b, rng=rng)

        battle.log = [entry.to_document() for entry in outcome.log]
        battle.winner_side = outcome.winner
        battle.status = BattleStatus.IN_BATTLE
        for player, heroes in zip(players, rosters, strict=True):
            player.is_winner = player.side == outcome.winner
            player.roster = snapshot_roster(heroes)
            self.db.add(player)
        self.db.add(battle)

        await self.db.commit()
        return await self._get_battle_or_404(battle_id)

    async def simulate_teams(
        self,
        team_a_id: int,
        team_b_id: int,
        mode: BattleMode = BattleMode.PVP,
        *,
        rng: random.Random | None = None,
    ) -> Battle:
        """Create a battle between two teams' owners and resolve it right away."""
        teams: list[Team] = []
        for team_id in (team_a_id, team_b_id):
            team = await self.team_service.get_team(team_id)
            if not team:
                raise HTTPException(status_code=404, detail=f"Team {team_id} not found")
            teams.append(team)

        # Check blueprints before anything is persisted
        for side, team in zip(SIDES, teams, strict=True):
            for hero in await self.team_service.get_team_heroes(team.id):
                combatant = build_combatant(hero, side)
                if combatant.basic_attack is None:
                    raise HTTPException(
                        status_code=400,
                        detail=f"Hero {combatant.name} has no basic attack configured",
                    )

        battle = await self.create_battle(
            BattleCreate(
                players=[
                    BattlePlayerCreate(player_id=team.owner_id, team_id=team.id) for team in teams
                ],
                mode=mode,
            )
        )
        return await self.simulate(battle.id, rng=rng)

    async def finish_battle(self, battle_id: int) -> BattleEarningsReport:
        """End a simulated battle and pay out fragment rewards, exactly once.

        The status change is committed before rewards are processed, so a
        retry can never pay a battle twice even if some players failed.

        Raises:
            HTTPException: If the battle does not exist or is not in progress.
        """
        battle = await self._get_battle_or_404(battle_id)
        self._check_transition(battle, BattleStatus.END_BATTLE)

        # Loaded before the status change so a failure leaves the battle in progress
        hero_configs = await self.earning_service.config_service.get_hero_config_table()

        battle.status = BattleStatus.END_BATTLE
        self.db.add(battle)
        await self.db.commit()

        report = await self.earning_service.process_battle_earnings(battle, hero_configs)
        failed = [result.player_id for result in report.results if not result.success]
        if failed:
            logger.error(f"Battle {battle_id} finished with earning failures for {failed}")
        else:
            logger.info(f"Battle {battle_id} finished, earnings processed")
        return report
