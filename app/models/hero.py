from typing import TYPE_CHECKING, Optional

import sqlmodel

from app.core.enums import Rarity

from ._base import BaseModel

if TYPE_CHECKING:
    from .character import Character


class Rune(BaseModel, table=True):
    __tablename__: str = "runes"

    id: int = sqlmodel.Field(primary_key=True, index=True, default=None)
    name: str = sqlmodel.Field(max_length=100)
    description: str = ""
    hp_bonus: int = 0
    atk_bonus: int = 0
    def_bonus: int = 0
    spd_bonus: int = 0
    crit_rate_bonus: float = 0
    crit_dmg_bonus: float = 0


class Hero(BaseModel, table=True):
    """A hero owned by a player, minted from a character blueprint.

    Stat columns left empty fall back to the blueprint's values.
    """

    __tablename__: str = "heroes"

    id: int = sqlmodel.Field(primary_key=True, index=True, default=None)
    owner_id: int = sqlmodel.Field(foreign_key="players.id", index=True)
    character_id: int = sqlmodel.Field(foreign_key="characters.id", index=True)
    rune_id: int | None = sqlmodel.Field(
        foreign_key="runes.id", nullable=True, default=None, index=True
    )
    name: str | None = sqlmodel.Field(default=None, max_length=100, nullable=True)
    rarity: Rarity
    level: int = sqlmodel.Field(default=1, ge=1, le=3)

    hp: int | None = sqlmodel.Field(default=None, ge=1, nullable=True)
    atk: int | None = sqlmodel.Field(default=None, ge=0, nullable=True)
    defense: int | None = sqlmodel.Field(default=None, ge=0, nullable=True)
    spd: int | None = sqlmodel.Field(default=None, ge=0, nullable=True)
    crit_rate: float | None = sqlmodel.Field(default=None, ge=0, le=100, nullable=True)
    crit_dmg: float | None = sqlmodel.Field(default=None, ge=0, le=500, nullable=True)

    character: "Character" = sqlmodel.Relationship(
        sa_relationship_kwargs={"lazy": "joined"}
    )
    rune: Optional["Rune"] = sqlmodel.Relationship(
        sa_relationship_kwargs={"lazy": "joined"}
    )
