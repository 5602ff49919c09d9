from pydantic import BaseModel, Field

from app.core.enums import Element


class SkillCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: str = ""
    atk_multiplier: float = Field(default=0, ge=0)
    def_multiplier: float = Field(default=0, ge=0)
    hp_multiplier: float = Field(default=0, ge=0)


class SkillUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = None
    atk_multiplier: float | None = Field(default=None, ge=0)
    def_multiplier: float | None = Field(default=None, ge=0)
    hp_multiplier: float | None = Field(default=None, ge=0)


class CharacterCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    element: Element
    hp: int = Field(ge=1)
    atk: int = Field(ge=0)
    defense: int = Field(ge=0)
    spd: int = Field(ge=0)
    crit_rate: float = Field(default=0, ge=0, le=100)
    crit_dmg: float = Field(default=0, ge=0, le=500)
    basic_attack_id: int | None = None
    skill_attack_id: int | None = None
    ultimate_attack_id: int | None = None


class CharacterUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    element: Element | None = None
    hp: int | None = Field(default=None, ge=1)
    atk: int | None = Field(default=None, ge=0)
    defense: int | None = Field(default=None, ge=0)
    spd: int | None = Field(default=None, ge=0)
    crit_rate: float | None = Field(default=None, ge=0, le=100)
    crit_dmg: float | None = Field(default=None, ge=0, le=500)
    basic_attack_id: int | None = None
    skill_attack_id: int | None = None
    ultimate_attack_id: int | None = None
