from app.core.enums import TeamSide
from app.engine.combatant import Combatant, SkillData

BASIC = SkillData(name="Basic", atk_multiplier=1.0)
SKILL = SkillData(name="Skill", atk_multiplier=1.5)
ULTIMATE = SkillData(name="Ultimate", atk_multiplier=3.0)


def make_combatant(
    name: str,
    *,
    side: TeamSide = TeamSide.TEAM_A,
    hp: int = 100,
    atk: float = 50,
    defense: float = 30,
    spd: float = 10,
    crit_rate: float = 0.0,
    crit_dmg: float = 0.0,
    basic: SkillData | None = BASIC,
    skill: SkillData | None = SKILL,
    ultimate: SkillData | None = ULTIMATE,
) -> Combatant:
    return Combatant(
        id=name,
        name=name,
        side=side,
        hp=hp,
        atk=atk,
        defense=defense,
        spd=spd,
        crit_rate=crit_rate,
        crit_dmg=crit_dmg,
        basic_attack=basic,
        skill_attack=skill,
        ultimate_attack=ultimate,
    )
