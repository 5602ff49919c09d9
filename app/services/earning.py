import asyncio
import datetime
import weakref
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends
from loguru import logger
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import col, desc, func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.config import settings
from app.core.db import get_db
from app.core.enums import EventType, Rank, Rarity
from app.engine.economy import (
    HeroConfigEntry,
    HeroRef,
    calculate_economic_fragment,
    compute_fragments,
)
from app.models.battle import Battle
from app.models.daily_earning import DailyEarning
from app.models.event_log import EventLog
from app.models.hero import Hero
from app.models.match_earning import MatchEarning
from app.models.player import Player
from app.schemas.common import PaginationData
from app.schemas.earning import BattleEarningsReport, MatchEarningRead, PlayerEarningResult
from app.services.config import ConfigService
from app.services.team import TeamService
from app.utils.misc import get_local_date, get_utc_now

# Attempts at writing a player's ledgers when another writer took the same game number
MAX_LEDGER_ATTEMPTS = 3

# Serializes game number assignment per (player, day) within this process; entries
# disappear once no coroutine holds the lock
_day_locks: weakref.WeakValueDictionary[tuple[int, datetime.date], asyncio.Lock] = (
    weakref.WeakValueDictionary()
)


def get_day_lock(player_id: int, day: datetime.date) -> asyncio.Lock:
    key = (player_id, day)
    lock = _day_locks.get(key)
    if lock is None:
        lock = asyncio.Lock()
        _day_locks[key] = lock
    return lock


def snapshot_roster(heroes: Sequence[Hero]) -> list[dict]:
    """Rarity and level of each hero, as stored on battle players and daily ledgers."""
    return [{"rarity": Rarity(hero.rarity).value, "level": hero.level} for hero in heroes]


def roster_refs(roster: Sequence[dict]) -> list[HeroRef]:
    return [HeroRef(rarity=Rarity(hero["rarity"]), level=int(hero["level"])) for hero in roster]


@dataclass(frozen=True, slots=True)
class _PlayerEntry:
    player_id: int
    team_id: int
    is_winner: bool
    roster: list[HeroRef] | None


class EarningService:
    def __init__(
        self,
        db: Annotated[AsyncSession, Depends(get_db)],
        config_service: Annotated[ConfigService, Depends()],
        team_service: Annotated[TeamService, Depends()],
    ) -> None:
        self.db = db
        self.config_service = config_service
        self.team_service = team_service
        self.today: Callable[[], datetime.date] = lambda: get_local_date(
            settings.utc_offset_hours
        )

    async def get_latest_daily_earning(self, player_id: int) -> DailyEarning | None:
        result = await self.db.exec(
            select(DailyEarning)
            .where(DailyEarning.player_id == player_id)
            .order_by(desc(col(DailyEarning.created_at)), desc(col(DailyEarning.id)))
            .limit(1)
        )
        return result.first()

    async def get_daily_earning(self, player_id: int, day: datetime.date) -> DailyEarning | None:
        result = await self.db.exec(
            select(DailyEarning).where(
                DailyEarning.player_id == player_id, DailyEarning.date == day
            )
        )
        return result.first()

    async def get_daily_earnings(
        self, player_id: int, *, page: int, page_size: int
    ) -> tuple[Sequence[DailyEarning], PaginationData]:
        offset = PaginationData.offset(page, page_size)
        query = select(DailyEarning).where(DailyEarning.player_id == player_id)

        total_items_result = await self.db.exec(query)
        total_items = len(total_items_result.all())

        result = await self.db.exec(
            query.order_by(desc(col(DailyEarning.date))).offset(offset).limit(page_size)
        )

        pagination = PaginationData.build(page=page, page_size=page_size, total_items=total_items)
        return result.all(), pagination

    async def get_match_earnings(
        self, player_id: int, day: datetime.date | None = None
    ) -> Sequence[MatchEarning]:
        """Get a player's match earnings for a day (today by default), in game order."""
        day = day or self.today()
        result = await self.db.exec(
            select(MatchEarning)
            .where(MatchEarning.player_id == player_id, MatchEarning.date == day)
            .order_by(col(MatchEarning.game_number))
        )
        return result.all()

    async def next_game_number(self, player_id: int, day: datetime.date) -> int:
        result = await self.db.exec(
            select(func.max(MatchEarning.game_number)).where(
                MatchEarning.player_id == player_id, MatchEarning.date == day
            )
        )
        return (result.one() or 0) + 1

    async def calculate_economic_fragment(
        self, team_id: int, hero_configs: dict[Rarity, HeroConfigEntry] | None = None
    ) -> tuple[float, list[HeroRef]]:
        """Score the roster value of a team.

        Returns:
            Tuple of (economic fragment, heroes the score was computed from)
        """
        if hero_configs is None:
            hero_configs = await self.config_service.get_hero_config_table()

        heroes = await self.get_team_roster(team_id)
        return calculate_economic_fragment(heroes, hero_configs), heroes

    async def get_team_roster(self, team_id: int) -> list[HeroRef]:
        return [
            HeroRef(rarity=Rarity(hero.rarity), level=hero.level)
            for hero in await self.team_service.get_team_heroes(team_id)
        ]

    async def process_battle_earnings(
        self, battle: Battle, hero_configs: dict[Rarity, HeroConfigEntry]
    ) -> BattleEarningsReport:
        """Compute and store fragment rewards for every player of a finished battle.

        Players are processed one after another and each one's ledgers are
        committed on their own, so a failure for one player is logged and
        reported without touching the others. Rosters snapshotted at
        simulation time are priced; older battles without one fall back to
        the team's current heroes.
        """
        entries = [
            _PlayerEntry(
                player_id=p.player_id,
                team_id=p.team_id,
                is_winner=p.is_winner,
                roster=roster_refs(p.roster) if p.roster is not None else None,
            )
            for p in battle.players
        ]
        battle_id = battle.id

        results: list[PlayerEarningResult] = []
        for entry in entries:
            try:
                match_earning = await self.process_player_earning(
                    entry.player_id,
                    team_id=entry.team_id,
                    is_winner=entry.is_winner,
                    battle_id=battle_id,
                    hero_configs=hero_configs,
                    heroes=entry.roster,
                )
            except (SQLAlchemyError, ValueError) as e:
                await self.db.rollback()
                logger.exception(
                    f"Failed to process earnings for player {entry.player_id} "
                    f"in battle {battle_id}"
                )
                results.append(
                    PlayerEarningResult(player_id=entry.player_id, success=False, error=str(e))
                )
            else:
                results.append(
                    PlayerEarningResult(
                        player_id=entry.player_id, success=True, match_earning=match_earning
                    )
                )

        return BattleEarningsReport(battle_id=battle_id, results=results)

    async def process_player_earning(
        self,
        player_id: int,
        *,
        team_id: int,
        is_winner: bool,
        battle_id: int | None = None,
        hero_configs: dict[Rarity, HeroConfigEntry] | None = None,
        heroes: list[HeroRef] | None = None,
    ) -> MatchEarningRead:
        """Compute one player's fragment reward and write it to the ledgers.

        ``heroes`` is the roster to price; the team's current heroes are used
        when it is not given.

        Raises:
            ValueError: If the player does not exist.
            SQLAlchemyError: If the ledgers could not be written.
        """
        if hero_configs is None:
            hero_configs = await self.config_service.get_hero_config_table()
        if heroes is None:
            heroes = await self.get_team_roster(team_id)
        economic_fragment = calculate_economic_fragment(heroes, hero_configs)
        heroes_used = [{"rarity": hero.rarity.value, "level": hero.level} for hero in heroes]

        day = self.today()
        async with get_day_lock(player_id, day):
            for attempt in range(1, MAX_LEDGER_ATTEMPTS + 1):
                try:
                    match_earning = await self._write_ledgers(
                        player_id,
                        day=day,
                        battle_id=battle_id,
                        is_winner=is_winner,
                        economic_fragment=economic_fragment,
                        heroes_used=heroes_used,
                    )
                except IntegrityError:
                    await self.db.rollback()
                    if attempt == MAX_LEDGER_ATTEMPTS:
                        raise
                    logger.warning(
                        f"Game number conflict for player {player_id} on {day}, "
                        f"retrying ({attempt}/{MAX_LEDGER_ATTEMPTS})"
                    )
                else:
                    break

        return match_earning

    async def _write_ledgers(
        self,
        player_id: int,
        *,
        day: datetime.date,
        battle_id: int | None,
        is_winner: bool,
        economic_fragment: float,
        heroes_used: list[dict],
    ) -> MatchEarningRead:
        # Streak, rank and game number are read here, under the player's day lock
        result = await self.db.exec(select(Player).where(Player.id == player_id))
        player = result.first()
        if not player:
            msg = f"Player {player_id} not found"
            raise ValueError(msg)

        previous = await self.get_latest_daily_earning(player_id)
        previous_rank = Rank(previous.rank) if previous else Rank.SENTINEL
        previous_win_streak = previous.win_streak if previous else 0
        rank_modifier = await self.config_service.get_rank_modifier(previous_rank)

        fragments = compute_fragments(
            economic_fragment=economic_fragment,
            previous_win_streak=previous_win_streak,
            is_winner=is_winner,
            rank_modifier=rank_modifier,
        )

        match_earning = MatchEarning(
            player_id=player_id,
            battle_id=battle_id,
            date=day,
            game_number=await self.next_game_number(player_id, day),
            win_count=1 if is_winner else 0,
            win_streak=fragments.win_streak,
            skill_fragment=fragments.skill_fragment,
            economic_fragment=fragments.economic_fragment,
            booster=fragments.booster,
            rank_modifier=fragments.rank_modifier,
            total_fragment=fragments.total_fragment,
        )
        self.db.add(match_earning)

        player.total_earning += fragments.total_fragment
        player.last_active = get_utc_now()
        self.db.add(player)

        daily_earning = await self.get_daily_earning(player_id, day)
        if daily_earning is None:
            daily_earning = DailyEarning(player_id=player_id, date=day)
        # Priced by the next game as its previous rank
        daily_earning.rank = Rank(player.rank)
        daily_earning.win_streak = fragments.win_streak
        daily_earning.heroes_used = heroes_used
        daily_earning.total_fragment += fragments.total_fragment
        daily_earning.total_daily_earning += fragments.total_daily_earning
        self.db.add(daily_earning)

        self.db.add(
            EventLog(
                player_id=player_id,
                battle_id=battle_id,
                event_type=EventType.FRAGMENT_EARNED,
                context={
                    "date": day.isoformat(),
                    "game_number": match_earning.game_number,
                    "total_fragment": fragments.total_fragment,
                    "total_daily_earning": fragments.total_daily_earning,
                },
            )
        )

        await self.db.commit()

        logger.info(
            f"Player {player_id} earned {fragments.total_fragment:.4f} fragments "
            f"(game #{match_earning.game_number}, streak {fragments.win_streak}, "
            f"economic {fragments.economic_fragment:.4f}, booster x{fragments.booster}, "
            f"rank {previous_rank} x{fragments.rank_modifier})"
        )
        return MatchEarningRead.model_validate(match_earning, from_attributes=True)
