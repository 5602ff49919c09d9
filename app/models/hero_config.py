import sqlmodel

from app.core.enums import Rarity

from ._base import BaseModel


class HeroConfig(BaseModel, table=True):
    __tablename__: str = "hero_configs"

    id: int = sqlmodel.Field(primary_key=True, index=True, default=None)
    rarity: Rarity = sqlmodel.Field(unique=True, index=True)
    team_modifier: float = sqlmodel.Field(ge=0, le=1)
    team_value: dict[str, float] = sqlmodel.Field(
        default_factory=dict, sa_column=sqlmodel.Column(sqlmodel.JSON, nullable=False)
    )
    """Value a hero of this rarity adds to its team, keyed by hero level ("1".."3")"""
