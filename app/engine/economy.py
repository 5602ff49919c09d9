"""Fragment reward formulas.

Everything here is pure: configuration rows are loaded by the services and
passed in as plain mappings.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from app.core.enums import Rarity

MAX_MEMBER_VALUE = 37_500
TEAM_SIZE = 3
NORMALIZATION = MAX_MEMBER_VALUE * TEAM_SIZE
DEFAULT_TEAM_MODIFIER = 0.15
DEFAULT_RANK_MODIFIER = 0.0

WINRATE_TABLE: dict[int, float] = {
    1: 0.01,
    2: 0.05,
    3: 0.07,
    4: 0.09,
    5: 0.11,
    6: 0.13,
    7: 0.15,
    8: 0.17,
    9: 0.21,
}
MAX_STREAK_TIER = 9
# A streak of 0 is not in the table and lands on the top tier as well.
FALLBACK_WINRATE = 0.21

BOOSTER_STREAK = 3
BOOSTER_MULTIPLIER = 2
DAILY_EARNING_FACTOR = 10


@dataclass(frozen=True, slots=True)
class HeroRef:
    rarity: Rarity
    level: int


@dataclass(frozen=True, slots=True)
class HeroConfigEntry:
    team_modifier: float = DEFAULT_TEAM_MODIFIER
    team_value: Mapping[int, float] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class FragmentBreakdown:
    economic_fragment: float
    win_streak: int
    skill_fragment: float
    booster: int
    rank_modifier: float
    total_fragment: float
    total_daily_earning: float


def lowest_rarity(heroes: Iterable[HeroRef]) -> Rarity | None:
    rarities = [hero.rarity for hero in heroes]
    return min(rarities, key=lambda rarity: rarity.order) if rarities else None


def calculate_economic_fragment(
    heroes: Iterable[HeroRef], hero_configs: Mapping[Rarity, HeroConfigEntry]
) -> float:
    """Score a team's roster value in [0, 1].

    Each hero contributes the configured value for its rarity and level, the
    sum is normalized against a full team of maxed heroes, and the result is
    lifted by the team modifier of the team's lowest rarity so that even a
    worthless team earns that modifier.

    Args:
        heroes: The team's members.
        hero_configs: Per-rarity configuration. Missing rarities or levels
            contribute 0 value and a modifier of ``DEFAULT_TEAM_MODIFIER``.

    Returns:
        The economic fragment, 0 for an empty team.
    """
    heroes = list(heroes)
    if not heroes:
        return 0.0

    total_value = 0.0
    for hero in heroes:
        config = hero_configs.get(hero.rarity)
        if config is not None:
            total_value += config.team_value.get(hero.level, 0)

    total_normalized = min(max(total_value / NORMALIZATION, 0.0), 1.0)

    weakest = lowest_rarity(heroes)
    weakest_config = hero_configs.get(weakest) if weakest is not None else None
    team_modifier = (
        weakest_config.team_modifier if weakest_config is not None else DEFAULT_TEAM_MODIFIER
    )

    return total_normalized * (1 - team_modifier) + team_modifier


def next_win_streak(previous_streak: int, *, is_winner: bool) -> int:
    return previous_streak + 1 if is_winner else 0


def skill_fragment_for_streak(win_streak: int) -> float:
    return WINRATE_TABLE.get(min(win_streak, MAX_STREAK_TIER), FALLBACK_WINRATE) * 100


def booster_for_streak(win_streak: int) -> int:
    return BOOSTER_MULTIPLIER if win_streak >= BOOSTER_STREAK else 1


def total_fragment(
    economic_fragment: float, skill_fragment: float, booster: int, rank_modifier: float
) -> float:
    return economic_fragment * skill_fragment * booster * rank_modifier


def daily_earning_for(total: float) -> float:
    return total * DAILY_EARNING_FACTOR


def compute_fragments(
    *,
    economic_fragment: float,
    previous_win_streak: int,
    is_winner: bool,
    rank_modifier: float,
) -> FragmentBreakdown:
    win_streak = next_win_streak(previous_win_streak, is_winner=is_winner)
    skill_fragment = skill_fragment_for_streak(win_streak)
    booster = booster_for_streak(win_streak)
    total = total_fragment(economic_fragment, skill_fragment, booster, rank_modifier)
    return FragmentBreakdown(
        economic_fragment=economic_fragment,
        win_streak=win_streak,
        skill_fragment=skill_fragment,
        booster=booster,
        rank_modifier=rank_modifier,
        total_fragment=total,
        total_daily_earning=daily_earning_for(total),
    )
