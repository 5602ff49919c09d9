from typing import Any

import sqlmodel

from app.core.enums import EventType

from ._base import BaseModel


class EventLog(BaseModel, table=True):
    """Audit trail of reward events, one row per ledger write."""

    __tablename__: str = "event_logs"

    id: int = sqlmodel.Field(primary_key=True, index=True, default=None)
    player_id: int = sqlmodel.Field(foreign_key="players.id", index=True)
    battle_id: int | None = sqlmodel.Field(
        foreign_key="battles.id", index=True, nullable=True, default=None
    )
    event_type: EventType
    context: dict[str, Any] = sqlmodel.Field(
        default_factory=dict, sa_column=sqlmodel.Column(sqlmodel.JSON, nullable=False)
    )
