import datetime

import sqlmodel

from app.core.enums import Rank

from ._base import BaseModel


class DailyEarning(BaseModel, table=True):
    __tablename__: str = "daily_earnings"
    __table_args__ = (
        sqlmodel.UniqueConstraint("player_id", "date", name="uq_daily_earning_player_date"),
    )

    id: int = sqlmodel.Field(primary_key=True, index=True, default=None)
    player_id: int = sqlmodel.Field(foreign_key="players.id", index=True)
    date: datetime.date = sqlmodel.Field(index=True)
    rank: Rank = Rank.SENTINEL
    win_streak: int = sqlmodel.Field(default=0, ge=0)
    """Streak after the latest game of the day"""
    total_fragment: float = 0
    total_daily_earning: float = 0
    heroes_used: list[dict] = sqlmodel.Field(
        default_factory=list, sa_column=sqlmodel.Column(sqlmodel.JSON, nullable=False)
    )
    """Roster of the latest game, ``[{"rarity": ..., "level": ...}]``"""
