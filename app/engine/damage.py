import math
import random
from dataclasses import dataclass

from .combatant import Combatant, SkillData

MIN_DAMAGE = 10
DEFENSE_SCALE = 100


@dataclass(frozen=True, slots=True)
class DamageResult:
    damage: int
    is_crit: bool


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up, unlike Python's banker's rounding."""
    return math.floor(value + 0.5)


def raw_damage(attacker: Combatant, skill: SkillData) -> float:
    return (
        attacker.atk * skill.atk_multiplier
        + attacker.defense * skill.def_multiplier
        + attacker.hp * skill.hp_multiplier
    )


def defense_multiplier(defender: Combatant) -> float:
    return DEFENSE_SCALE / (DEFENSE_SCALE + defender.defense)


def compute_damage(
    attacker: Combatant, defender: Combatant, skill: SkillData, rng: random.Random
) -> DamageResult:
    """Compute the damage ``attacker`` deals to ``defender`` with ``skill``.

    The attacker's own atk/def/current hp are scaled by the skill multipliers,
    reduced by the defender's defense, floored at ``MIN_DAMAGE`` and then
    possibly multiplied by ``1 + crit_dmg`` on a critical hit.

    Args:
        attacker: The acting combatant.
        defender: The combatant being hit.
        skill: The skill being used.
        rng: Random source for the crit roll, one draw per call.

    Returns:
        DamageResult with the rounded damage and whether it was a critical hit.
    """
    reduced = raw_damage(attacker, skill) * defense_multiplier(defender)
    reduced = max(reduced, MIN_DAMAGE)

    is_crit = rng.random() < attacker.crit_rate
    if is_crit:
        reduced *= 1 + attacker.crit_dmg

    return DamageResult(damage=round_half_up(reduced), is_crit=is_crit)
