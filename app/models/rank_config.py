import sqlmodel

from app.core.enums import Rank

from ._base import BaseModel


class RankConfig(BaseModel, table=True):
    __tablename__: str = "rank_configs"

    id: int = sqlmodel.Field(primary_key=True, index=True, default=None)
    rank: Rank = sqlmodel.Field(unique=True, index=True)
    modifier: float = sqlmodel.Field(ge=0)
