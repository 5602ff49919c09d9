from typing import Optional

import sqlmodel

from app.core.enums import Element

from ._base import BaseModel


class Skill(BaseModel, table=True):
    __tablename__: str = "skills"

    id: int = sqlmodel.Field(primary_key=True, index=True, default=None)
    name: str = sqlmodel.Field(max_length=100)
    description: str = ""
    atk_multiplier: float = sqlmodel.Field(default=0, ge=0)
    def_multiplier: float = sqlmodel.Field(default=0, ge=0)
    hp_multiplier: float = sqlmodel.Field(default=0, ge=0)


class Character(BaseModel, table=True):
    """Blueprint that owned heroes are minted from."""

    __tablename__: str = "characters"

    id: int = sqlmodel.Field(primary_key=True, index=True, default=None)
    name: str = sqlmodel.Field(max_length=100, index=True)
    element: Element
    hp: int = sqlmodel.Field(ge=1)
    atk: int = sqlmodel.Field(ge=0)
    defense: int = sqlmodel.Field(ge=0)
    spd: int = sqlmodel.Field(ge=0)
    crit_rate: float = sqlmodel.Field(default=0, ge=0, le=100)
    """Percentage"""
    crit_dmg: float = sqlmodel.Field(default=0, ge=0, le=500)
    """Percentage"""

    basic_attack_id: int | None = sqlmodel.Field(
        foreign_key="skills.id", nullable=True, default=None
    )
    skill_attack_id: int | None = sqlmodel.Field(
        foreign_key="skills.id", nullable=True, default=None
    )
    ultimate_attack_id: int | None = sqlmodel.Field(
        foreign_key="skills.id", nullable=True, default=None
    )

    basic_attack: Optional["Skill"] = sqlmodel.Relationship(
        sa_relationship_kwargs={"lazy": "joined", "foreign_keys": "[Character.basic_attack_id]"}
    )
    skill_attack: Optional["Skill"] = sqlmodel.Relationship(
        sa_relationship_kwargs={"lazy": "joined", "foreign_keys": "[Character.skill_attack_id]"}
    )
    ultimate_attack: Optional["Skill"] = sqlmodel.Relationship(
        sa_relationship_kwargs={
            "lazy": "joined",
            "foreign_keys": "[Character.ultimate_attack_id]",
        }
    )

    def __str__(self) -> str:
        return f"{self.name} (#{self.id})"
