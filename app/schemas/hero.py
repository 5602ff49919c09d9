from pydantic import BaseModel, Field

from app.core.enums import Rarity


class RuneCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: str = ""
    hp_bonus: int = 0
    atk_bonus: int = 0
    def_bonus: int = 0
    spd_bonus: int = 0
    crit_rate_bonus: float = 0
    crit_dmg_bonus: float = 0


class HeroCreate(BaseModel):
    owner_id: int
    character_id: int
    rune_id: int | None = None
    name: str | None = Field(default=None, max_length=100)
    rarity: Rarity
    level: int = Field(default=1, ge=1, le=3)
    hp: int | None = Field(default=None, ge=1)
    atk: int | None = Field(default=None, ge=0)
    defense: int | None = Field(default=None, ge=0)
    spd: int | None = Field(default=None, ge=0)
    crit_rate: float | None = Field(default=None, ge=0, le=100)
    crit_dmg: float | None = Field(default=None, ge=0, le=500)


class HeroUpdate(BaseModel):
    rune_id: int | None = None
    name: str | None = Field(default=None, max_length=100)
    level: int | None = Field(default=None, ge=1, le=3)

