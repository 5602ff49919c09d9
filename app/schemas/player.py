from datetime import datetime

from pydantic import BaseModel, Field

from app.core.enums import Rank


class PlayerCreate(BaseModel):
    username: str = Field(min_length=1, max_length=100)
    wallet_address: str | None = None
    rank: Rank = Rank.SENTINEL


class PlayerUpdate(BaseModel):
    username: str | None = Field(default=None, min_length=1, max_length=100)
    wallet_address: str | None = None
    rank: Rank | None = None
    last_active: datetime | None = None
