import datetime

from pydantic import BaseModel, ConfigDict


class MatchEarningRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    player_id: int
    battle_id: int | None
    date: datetime.date
    game_number: int
    win_count: int
    win_streak: int
    skill_fragment: float
    economic_fragment: float
    booster: int
    rank_modifier: float
    total_fragment: float


class PlayerEarningResult(BaseModel):
    """Outcome of processing one player's rewards after a battle."""

    player_id: int
    success: bool
    match_earning: MatchEarningRead | None = None
    error: str | None = None


class BattleEarningsReport(BaseModel):
    battle_id: int
    results: list[PlayerEarningResult]

    @property
    def all_succeeded(self) -> bool:
        return all(result.success for result in self.results)
