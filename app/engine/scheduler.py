import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from loguru import logger

from app.core.enums import TeamSide
from app.utils.misc import get_utc_now

from .combatant import Combatant, alive_count, alive_members
from .damage import compute_damage
from .skills import choose_skill, choose_target, resolve_skill


@dataclass(frozen=True, slots=True)
class BattleLogEntry:
    turn: int
    attacker: str
    defender: str
    skill: str
    damage: int
    is_crit: bool
    remaining_hp: int
    timestamp: datetime

    def to_document(self) -> dict[str, Any]:
        """Serialize with the field names stored battle logs already use."""
        return {
            "turn": self.turn,
            "attacker": self.attacker,
            "defender": self.defender,
            "skill": self.skill,
            "damage": self.damage,
            "isCrit": self.is_crit,
            "remainingHp": self.remaining_hp,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(slots=True)
class BattleOutcome:
    winner: TeamSide
    log: list[BattleLogEntry] = field(default_factory=list)


def _turn_order(team_a: Sequence[Combatant], team_b: Sequence[Combatant]) -> list[Combatant]:
    # sorted() is stable: equal speed keeps roster order, team A ahead of team B
    actors = alive_members(team_a) + alive_members(team_b)
    return sorted(actors, key=lambda member: member.spd, reverse=True)


def simulate_battle(
    team_a: Sequence[Combatant],
    team_b: Sequence[Combatant],
    *,
    rng: random.Random | None = None,
    clock: Callable[[], datetime] = get_utc_now,
) -> BattleOutcome:
    """Run a battle between two teams until one of them has nobody standing.

    Every round snapshots the living combatants sorted by speed (fastest first)
    and lets each act once. Whether an actor may still act is checked again at
    its turn, since it or its whole enemy team may have fallen earlier in the
    same round. The combatants are mutated in place.

    Args:
        team_a: First roster.
        team_b: Second roster.
        rng: Random source for skill, target and crit rolls. A fresh unseeded
            generator is used when omitted.
        clock: Timestamp source for log entries.

    Returns:
        BattleOutcome with the winning side and the ordered action log.

    Raises:
        SkillDataError: If an acting combatant has no usable skill.
    """
    rng = rng or random.Random()  # noqa: S311
    enemies = {id(member): team_b for member in team_a} | {id(member): team_a for member in team_b}

    for member in (*team_a, *team_b):
        member.reset_cooldowns()

    turn = 1
    log: list[BattleLogEntry] = []

    while alive_count(team_a) > 0 and alive_count(team_b) > 0:
        for attacker in _turn_order(team_a, team_b):
            enemy_team = enemies[id(attacker)]
            if not attacker.is_alive or alive_count(enemy_team) == 0:
                continue

            attacker.tick_cooldowns()

            skill = resolve_skill(attacker, choose_skill(attacker, rng))
            defender = choose_target(enemy_team, attacker, rng)
            result = compute_damage(attacker, defender, skill, rng)
            remaining_hp = defender.take_damage(result.damage)

            entry = BattleLogEntry(
                turn=turn,
                attacker=attacker.name,
                defender=defender.name,
                skill=skill.name,
                damage=result.damage,
                is_crit=result.is_crit,
                remaining_hp=remaining_hp,
                timestamp=clock(),
            )
            log.append(entry)
            logger.debug(
                f"Turn {turn}: {entry.attacker} used {entry.skill} on {entry.defender} "
                f"-> {entry.damage}{' (CRIT)' if entry.is_crit else ''}, HP left {remaining_hp}"
            )
            turn += 1

    winner = TeamSide.TEAM_A if alive_count(team_a) > 0 else TeamSide.TEAM_B
    logger.info(f"Battle finished after {len(log)} actions, winner: {winner}")
    return BattleOutcome(winner=winner, log=log)
