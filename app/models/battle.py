from typing import Any

import sqlmodel

from app.core.enums import BattleMode, BattleStatus, TeamSide

from ._base import BaseModel


class Battle(BaseModel, table=True):
    __tablename__: str = "battles"

    id: int = sqlmodel.Field(primary_key=True, index=True, default=None)
    mode: BattleMode = BattleMode.PVP
    status: BattleStatus = BattleStatus.INIT_BATTLE
    winner_side: TeamSide | None = sqlmodel.Field(default=None, nullable=True)
    log: list[dict[str, Any]] = sqlmodel.Field(
        default_factory=list, sa_column=sqlmodel.Column(sqlmodel.JSON, nullable=False)
    )
    """Append-only action log, entries keyed like ``BattleLogEntry.to_document``"""

    players: list["BattlePlayer"] = sqlmodel.Relationship(
        back_populates="battle",
        sa_relationship_kwargs={
            "lazy": "selectin",
            "order_by": "BattlePlayer.id",
            "cascade": "all, delete-orphan",
        },
    )


class BattlePlayer(BaseModel, table=True):
    __tablename__: str = "battle_players"

    id: int = sqlmodel.Field(primary_key=True, index=True, default=None)
    battle_id: int = sqlmodel.Field(foreign_key="battles.id", index=True)
    player_id: int = sqlmodel.Field(foreign_key="players.id", index=True)
    team_id: int = sqlmodel.Field(foreign_key="teams.id", index=True)
    side: TeamSide
    is_winner: bool = False
    roster: list[dict] | None = sqlmodel.Field(
        default=None, sa_column=sqlmodel.Column(sqlmodel.JSON, nullable=True)
    )
    """Team heroes as ``{"rarity", "level"}`` when the battle was simulated"""

    battle: "Battle" = sqlmodel.Relationship(back_populates="players")
