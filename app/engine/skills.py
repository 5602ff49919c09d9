import random
from collections.abc import Sequence

from app.core.enums import SkillType

from .combatant import Combatant, SkillData, alive_members
from .errors import SkillDataError

ULTIMATE_CHANCE = 0.2
ULTIMATE_COOLDOWN = 5
SKILL_CHANCE = 0.4
SKILL_COOLDOWN = 2


def choose_skill(attacker: Combatant, rng: random.Random) -> SkillType:
    """Pick the skill tier for this turn and put it on cooldown.

    The ultimate is tried first, then the skill; each only consumes a random
    draw when it is off cooldown.
    """
    if attacker.cd_ult == 0 and rng.random() < ULTIMATE_CHANCE:
        attacker.cd_ult = ULTIMATE_COOLDOWN
        return SkillType.ULTIMATE

    if attacker.cd_skill == 0 and rng.random() < SKILL_CHANCE:
        attacker.cd_skill = SKILL_COOLDOWN
        return SkillType.SKILL

    return SkillType.BASIC


def resolve_skill(attacker: Combatant, skill_type: SkillType) -> SkillData:
    """Return the skill data for ``skill_type``, falling back to the basic attack.

    Raises:
        SkillDataError: If the attacker has no basic attack to fall back to.
    """
    skill = attacker.skill_for(skill_type) or attacker.basic_attack
    if skill is None:
        raise SkillDataError(attacker.name, skill_type.value)
    return skill


def choose_target(
    enemy_team: Sequence[Combatant], attacker: Combatant, rng: random.Random
) -> Combatant:
    """Pick a living enemy uniformly at random.

    Raises:
        ValueError: If there is nobody left to target.
    """
    candidates = [member for member in alive_members(enemy_team) if member is not attacker]
    if not candidates:
        msg = f"{attacker.name} has no living target"
        raise ValueError(msg)
    return rng.choice(candidates)
