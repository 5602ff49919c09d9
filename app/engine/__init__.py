from .combatant import Combatant, SkillData, alive_count, alive_members
from .damage import DamageResult, compute_damage
from .economy import (
    FragmentBreakdown,
    HeroConfigEntry,
    HeroRef,
    calculate_economic_fragment,
    compute_fragments,
)
from .errors import SkillDataError
from .scheduler import BattleLogEntry, BattleOutcome, simulate_battle
from .skills import choose_skill, choose_target, resolve_skill

__all__ = (
    "BattleLogEntry",
    "BattleOutcome",
    "Combatant",
    "DamageResult",
    "FragmentBreakdown",
    "HeroConfigEntry",
    "HeroRef",
    "SkillData",
    "SkillDataError",
    "alive_count",
    "alive_members",
    "calculate_economic_fragment",
    "choose_skill",
    "choose_target",
    "compute_damage",
    "compute_fragments",
    "resolve_skill",
    "simulate_battle",
)
