from datetime import datetime

from pydantic import BaseModel, Field

from app.core.enums import BattleMode, BattleStatus, TeamSide


class BattlePlayerCreate(BaseModel):
    player_id: int
    team_id: int


class BattleCreate(BaseModel):
    players: list[BattlePlayerCreate]
    mode: BattleMode = BattleMode.PVP


class BattlePlayerUpdate(BaseModel):
    player_id: int
    is_winner: bool


class BattleUpdate(BaseModel):
    status: BattleStatus | None = None
    players: list[BattlePlayerUpdate] | None = None


class BattleLogAppend(BaseModel):
    turn: int = Field(ge=1)
    attacker: str
    defender: str
    skill: str
    damage: int = Field(ge=0)
    isCrit: bool = False  # noqa: N815
    remainingHp: int = Field(ge=0)  # noqa: N815


class BattleSimulateRequest(BaseModel):
    team_a_id: int
    team_b_id: int
    mode: BattleMode = BattleMode.PVP


class BattlePlayerInfo(BaseModel):
    player_id: int
    team_id: int
    side: TeamSide
    is_winner: bool
    roster: list[dict] | None = None


class BattleDetail(BaseModel):
    id: int
    mode: BattleMode
    status: BattleStatus
    winner_side: TeamSide | None
    players: list[BattlePlayerInfo]
    log: list[dict]
    created_at: datetime
    updated_at: datetime
