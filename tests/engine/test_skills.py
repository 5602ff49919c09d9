import pytest

from app.core.enums import SkillType
from app.engine.errors import SkillDataError
from app.engine.skills import (
    SKILL_COOLDOWN,
    ULTIMATE_COOLDOWN,
    choose_skill,
    choose_target,
    resolve_skill,
)
from tests.helpers.combatants import BASIC, SKILL, make_combatant
from tests.helpers.rng import ScriptedRandom


def test_ultimate_roll_puts_ultimate_on_cooldown() -> None:
    attacker = make_combatant("hero")

    assert choose_skill(attacker, ScriptedRandom([0.1])) is SkillType.ULTIMATE
    assert attacker.cd_ult == ULTIMATE_COOLDOWN
    assert attacker.cd_skill == 0


def test_skill_rolled_after_missing_ultimate() -> None:
    attacker = make_combatant("hero")

    assert choose_skill(attacker, ScriptedRandom([0.5, 0.3])) is SkillType.SKILL
    assert attacker.cd_skill == SKILL_COOLDOWN
    assert attacker.cd_ult == 0


def test_basic_when_both_rolls_miss() -> None:
    attacker = make_combatant("hero")

    assert choose_skill(attacker, ScriptedRandom([0.5, 0.9])) is SkillType.BASIC
    assert (attacker.cd_skill, attacker.cd_ult) == (0, 0)


def test_ultimate_on_cooldown_skips_its_draw() -> None:
    attacker = make_combatant("hero")
    attacker.cd_ult = 3
    rng = ScriptedRandom([0.1])

    assert choose_skill(attacker, rng) is SkillType.SKILL
    assert rng.draws == 1


def test_everything_on_cooldown_uses_no_draws() -> None:
    attacker = make_combatant("hero")
    attacker.cd_ult = 2
    attacker.cd_skill = 1
    rng = ScriptedRandom()

    assert choose_skill(attacker, rng) is SkillType.BASIC
    assert rng.draws == 0


def test_tick_cooldowns_stops_at_zero() -> None:
    attacker = make_combatant("hero")
    attacker.cd_ult = 1

    attacker.tick_cooldowns()
    attacker.tick_cooldowns()

    assert (attacker.cd_skill, attacker.cd_ult) == (0, 0)


def test_missing_tier_falls_back_to_basic() -> None:
    attacker = make_combatant("hero", skill=None, ultimate=None)

    assert resolve_skill(attacker, SkillType.ULTIMATE) is BASIC
    assert resolve_skill(attacker, SkillType.SKILL) is BASIC


def test_configured_tier_is_used() -> None:
    attacker = make_combatant("hero")

    assert resolve_skill(attacker, SkillType.SKILL) is SKILL


def test_missing_basic_is_fatal() -> None:
    attacker = make_combatant("Hollow", basic=None, skill=None, ultimate=None)

    with pytest.raises(SkillDataError, match="Hollow") as exc_info:
        resolve_skill(attacker, SkillType.ULTIMATE)

    assert exc_info.value.skill_type == "ultimate"


def test_target_is_a_living_enemy() -> None:
    attacker = make_combatant("attacker")
    fallen = make_combatant("fallen", hp=0)
    standing = make_combatant("standing")

    assert choose_target([fallen, standing], attacker, ScriptedRandom()) is standing


def test_no_living_target_raises() -> None:
    attacker = make_combatant("attacker")

    with pytest.raises(ValueError, match="no living target"):
        choose_target([make_combatant("fallen", hp=0)], attacker, ScriptedRandom())


def test_take_damage_clamps_at_zero() -> None:
    defender = make_combatant("defender", hp=15)

    assert defender.take_damage(40) == 0
    assert defender.is_alive is False
