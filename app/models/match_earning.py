import datetime

import sqlmodel

from ._base import BaseModel


class MatchEarning(BaseModel, table=True):
    """Reward breakdown of a single game. Rows are never updated."""

    __tablename__: str = "match_earnings"
    __table_args__ = (
        sqlmodel.UniqueConstraint(
            "player_id", "date", "game_number", name="uq_match_earning_game_number"
        ),
    )

    id: int = sqlmodel.Field(primary_key=True, index=True, default=None)
    player_id: int = sqlmodel.Field(foreign_key="players.id", index=True)
    battle_id: int | None = sqlmodel.Field(
        foreign_key="battles.id", index=True, nullable=True, default=None
    )
    date: datetime.date = sqlmodel.Field(index=True)
    """Local calendar day the game was played on"""
    game_number: int = sqlmodel.Field(ge=1)
    win_count: int = sqlmodel.Field(ge=0, le=1)
    win_streak: int = sqlmodel.Field(default=0, ge=0)
    skill_fragment: float
    economic_fragment: float
    booster: int
    rank_modifier: float
    total_fragment: float
