from collections.abc import Iterable
from dataclasses import dataclass, field

from app.core.enums import SkillType, TeamSide

DEFAULT_HP = 100
DEFAULT_ATK = 50
DEFAULT_DEF = 30
DEFAULT_SPD = 10


@dataclass(frozen=True, slots=True)
class SkillData:
    name: str
    atk_multiplier: float = 0.0
    def_multiplier: float = 0.0
    hp_multiplier: float = 0.0


@dataclass(slots=True)
class Combatant:
    """A character's live battle state.

    Built fresh for every battle from a hero record, so only ``hp`` and the
    cooldown counters change while the battle runs.
    """

    id: str
    name: str
    side: TeamSide
    hp: int
    atk: float
    defense: float
    spd: float
    crit_rate: float = 0.0
    """Probability in [0, 1]."""
    crit_dmg: float = 0.0
    """Bonus multiplier, 0.5 means +50% damage."""
    basic_attack: SkillData | None = None
    skill_attack: SkillData | None = None
    ultimate_attack: SkillData | None = None
    cd_skill: int = 0
    cd_ult: int = 0
    max_hp: int = field(default=0)

    def __post_init__(self) -> None:
        self.hp = max(0, self.hp)
        if not self.max_hp:
            self.max_hp = self.hp

    @property
    def is_alive(self) -> bool:
        return self.hp > 0

    def take_damage(self, amount: int) -> int:
        """Subtract ``amount`` from hp, clamped at zero, and return the remaining hp."""
        self.hp = max(0, self.hp - amount)
        return self.hp

    def tick_cooldowns(self) -> None:
        if self.cd_skill > 0:
            self.cd_skill -= 1
        if self.cd_ult > 0:
            self.cd_ult -= 1

    def reset_cooldowns(self) -> None:
        self.cd_skill = 0
        self.cd_ult = 0

    def skill_for(self, skill_type: SkillType) -> SkillData | None:
        match skill_type:
            case SkillType.ULTIMATE:
                return self.ultimate_attack
            case SkillType.SKILL:
                return self.skill_attack
            case _:
                return self.basic_attack


def alive_members(team: Iterable[Combatant]) -> list[Combatant]:
    return [member for member in team if member.is_alive]


def alive_count(team: Iterable[Combatant]) -> int:
    return sum(1 for member in team if member.is_alive)
