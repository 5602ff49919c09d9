from datetime import datetime

import sqlmodel

from app.core.enums import Rank
from app.utils.misc import get_utc_now

from ._base import BaseModel


class Player(BaseModel, table=True):
    __tablename__: str = "players"

    id: int = sqlmodel.Field(primary_key=True, index=True, default=None)
    username: str = sqlmodel.Field(max_length=100, index=True, unique=True)
    wallet_address: str | None = sqlmodel.Field(default=None, nullable=True, index=True)
    rank: Rank = Rank.SENTINEL
    total_earning: float = sqlmodel.Field(default=0, ge=0)
    """Sum of every fragment reward the player has received"""
    last_active: datetime = sqlmodel.Field(
        default_factory=get_utc_now, sa_type=sqlmodel.DateTime(timezone=True)
    )
