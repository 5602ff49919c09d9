import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from app.core.enums import Rarity
from app.engine.economy import (
    DEFAULT_TEAM_MODIFIER,
    HeroConfigEntry,
    HeroRef,
    booster_for_streak,
    calculate_economic_fragment,
    compute_fragments,
    lowest_rarity,
    skill_fragment_for_streak,
)

CONFIGS = {
    Rarity.COMMON: HeroConfigEntry(team_modifier=0.15, team_value={1: 5000, 2: 7500, 3: 10_000}),
    Rarity.RARE: HeroConfigEntry(team_modifier=0.10, team_value={1: 10_000, 2: 15_000, 3: 20_000}),
    Rarity.LEGENDARY: HeroConfigEntry(
        team_modifier=0.05, team_value={1: 25_000, 2: 30_000, 3: 37_500}
    ),
}


def test_three_level_one_commons() -> None:
    heroes = [HeroRef(Rarity.COMMON, 1)] * 3

    fragment = calculate_economic_fragment(heroes, CONFIGS)

    assert fragment == pytest.approx((15_000 / 112_500) * 0.85 + 0.15)
    assert fragment == pytest.approx(0.2633, abs=1e-4)


def test_lowest_rarity_sets_the_team_modifier() -> None:
    heroes = [HeroRef(Rarity.LEGENDARY, 3), HeroRef(Rarity.RARE, 1)]

    assert lowest_rarity(heroes) is Rarity.RARE
    assert calculate_economic_fragment(heroes, CONFIGS) == pytest.approx(
        (47_500 / 112_500) * 0.9 + 0.1
    )


def test_full_team_of_maxed_heroes_scores_one() -> None:
    heroes = [HeroRef(Rarity.LEGENDARY, 3)] * 3

    assert calculate_economic_fragment(heroes, CONFIGS) == pytest.approx(1.0)


def test_unconfigured_rarity_uses_default_modifier() -> None:
    heroes = [HeroRef(Rarity.EPIC, 2)]

    assert calculate_economic_fragment(heroes, CONFIGS) == pytest.approx(DEFAULT_TEAM_MODIFIER)


def test_empty_team_is_worthless() -> None:
    assert calculate_economic_fragment([], CONFIGS) == 0.0
    assert lowest_rarity([]) is None


def test_win_extends_streak_and_boosts_at_three() -> None:
    fragments = compute_fragments(
        economic_fragment=0.5, previous_win_streak=2, is_winner=True, rank_modifier=1.0
    )

    assert fragments.win_streak == 3
    assert fragments.skill_fragment == pytest.approx(7)
    assert fragments.booster == 2
    assert fragments.total_fragment == pytest.approx(0.5 * 7 * 2)
    assert fragments.total_daily_earning == pytest.approx(fragments.total_fragment * 10)


def test_loss_resets_streak() -> None:
    fragments = compute_fragments(
        economic_fragment=0.5, previous_win_streak=7, is_winner=False, rank_modifier=1.0
    )

    assert fragments.win_streak == 0
    assert fragments.booster == 1
    # A streak of 0 is not in the win rate table and pays the top tier
    assert fragments.skill_fragment == pytest.approx(21)


def test_rank_modifier_scales_total() -> None:
    fragments = compute_fragments(
        economic_fragment=0.4, previous_win_streak=0, is_winner=True, rank_modifier=0.0
    )

    assert fragments.win_streak == 1
    assert fragments.skill_fragment == pytest.approx(1)
    assert fragments.total_fragment == 0


@pytest.mark.parametrize(
    ("streak", "expected"),
    [(1, 1), (2, 5), (5, 11), (8, 17), (9, 21), (25, 21)],
)
def test_skill_fragment_table(streak: int, expected: float) -> None:
    assert skill_fragment_for_streak(streak) == pytest.approx(expected)


def test_booster_threshold() -> None:
    assert [booster_for_streak(streak) for streak in range(6)] == [1, 1, 1, 2, 2, 2]


hero_strategy = st.builds(
    HeroRef,
    rarity=st.sampled_from(list(Rarity)),
    level=st.integers(min_value=1, max_value=3),
)
config_strategy = st.builds(
    HeroConfigEntry,
    team_modifier=st.floats(min_value=0, max_value=1),
    team_value=st.dictionaries(
        st.integers(min_value=1, max_value=3),
        st.floats(min_value=0, max_value=200_000),
    ),
)


@given(
    heroes=st.lists(hero_strategy, min_size=0, max_size=3),
    configs=st.dictionaries(st.sampled_from(list(Rarity)), config_strategy),
)
@settings(max_examples=200)
def test_economic_fragment_bounds(
    heroes: list[HeroRef], configs: dict[Rarity, HeroConfigEntry]
) -> None:
    fragment = calculate_economic_fragment(heroes, configs)

    assert 0.0 <= fragment <= 1.0 + 1e-9
