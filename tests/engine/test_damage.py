import random

from hypothesis import given, settings
from hypothesis import strategies as st

from app.engine.combatant import SkillData
from app.engine.damage import MIN_DAMAGE, compute_damage, round_half_up
from tests.helpers.combatants import make_combatant
from tests.helpers.rng import ScriptedRandom

PLAIN_HIT = SkillData(name="Strike", atk_multiplier=1.0)
NOTHING = SkillData(name="Nothing")


def test_defense_reduces_damage() -> None:
    attacker = make_combatant("attacker", hp=1000, atk=100, defense=50)
    defender = make_combatant("defender", defense=50)

    result = compute_damage(attacker, defender, PLAIN_HIT, ScriptedRandom([0.5]))

    # 100 * 100 / 150 = 66.67
    assert result.damage == 67
    assert result.is_crit is False


def test_zero_raw_damage_hits_the_floor() -> None:
    attacker = make_combatant("attacker", hp=1000, atk=100, defense=50)
    defender = make_combatant("defender", defense=0)

    result = compute_damage(attacker, defender, NOTHING, ScriptedRandom([0.5]))

    assert result.damage == MIN_DAMAGE
    assert result.is_crit is False


def test_skill_scales_defense_and_current_hp() -> None:
    attacker = make_combatant("attacker", hp=200, atk=10, defense=40)
    defender = make_combatant("defender", defense=0)
    skill = SkillData(name="Bulwark", atk_multiplier=1.0, def_multiplier=2.0, hp_multiplier=0.1)

    result = compute_damage(attacker, defender, skill, ScriptedRandom([0.5]))

    assert result.damage == 10 + 80 + 20


def test_critical_hit_multiplies_damage() -> None:
    attacker = make_combatant("attacker", atk=100, crit_rate=1.0, crit_dmg=0.5)
    defender = make_combatant("defender", defense=0)

    result = compute_damage(attacker, defender, PLAIN_HIT, ScriptedRandom([0.0]))

    assert result.damage == 150
    assert result.is_crit is True


def test_critical_hit_applies_after_the_floor() -> None:
    attacker = make_combatant("attacker", atk=0, crit_rate=1.0, crit_dmg=1.0)
    defender = make_combatant("defender", defense=500)

    result = compute_damage(attacker, defender, PLAIN_HIT, ScriptedRandom([0.0]))

    assert result.damage == 2 * MIN_DAMAGE


def test_crit_roll_is_strictly_below_rate() -> None:
    attacker = make_combatant("attacker", atk=100, crit_rate=0.3, crit_dmg=1.0)
    defender = make_combatant("defender", defense=0)

    assert compute_damage(attacker, defender, PLAIN_HIT, ScriptedRandom([0.3])).is_crit is False
    assert compute_damage(attacker, defender, PLAIN_HIT, ScriptedRandom([0.29])).is_crit is True


def test_crit_uses_exactly_one_draw() -> None:
    rng = ScriptedRandom()
    attacker = make_combatant("attacker")
    defender = make_combatant("defender")

    compute_damage(attacker, defender, PLAIN_HIT, rng)

    assert rng.draws == 1


def test_round_half_up() -> None:
    assert round_half_up(12.5) == 13
    assert round_half_up(13.5) == 14
    assert round_half_up(12.49) == 12


def test_half_damage_rounds_up() -> None:
    attacker = make_combatant("attacker", atk=25)
    defender = make_combatant("defender", defense=0)
    skill = SkillData(name="Jab", atk_multiplier=0.5)

    assert compute_damage(attacker, defender, skill, ScriptedRandom([0.5])).damage == 13


@given(
    atk=st.integers(min_value=0, max_value=5000),
    attacker_def=st.integers(min_value=0, max_value=5000),
    attacker_hp=st.integers(min_value=0, max_value=50_000),
    defender_def=st.integers(min_value=0, max_value=50_000),
    multipliers=st.tuples(
        st.floats(min_value=0, max_value=10),
        st.floats(min_value=0, max_value=10),
        st.floats(min_value=0, max_value=10),
    ),
    crit_rate=st.floats(min_value=0, max_value=1),
    crit_dmg=st.floats(min_value=0, max_value=5),
    seed=st.integers(min_value=0, max_value=2**32 - 1),
)
@settings(max_examples=200)
def test_damage_never_below_floor(
    atk: int,
    attacker_def: int,
    attacker_hp: int,
    defender_def: int,
    multipliers: tuple[float, float, float],
    crit_rate: float,
    crit_dmg: float,
    seed: int,
) -> None:
    attacker = make_combatant(
        "attacker",
        hp=attacker_hp,
        atk=atk,
        defense=attacker_def,
        crit_rate=crit_rate,
        crit_dmg=crit_dmg,
    )
    defender = make_combatant("defender", defense=defender_def)
    skill = SkillData(
        name="Any",
        atk_multiplier=multipliers[0],
        def_multiplier=multipliers[1],
        hp_multiplier=multipliers[2],
    )

    result = compute_damage(attacker, defender, skill, random.Random(seed))

    assert result.damage >= MIN_DAMAGE
