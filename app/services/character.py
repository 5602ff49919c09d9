from collections.abc import Sequence
from typing import Annotated

from fastapi import Depends, HTTPException
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.db import get_db
from app.models.character import Character, Skill
from app.schemas.character import CharacterCreate, CharacterUpdate, SkillCreate, SkillUpdate
from app.schemas.common import PaginationData


class CharacterService:
    """Character blueprints and the skills they reference."""

    def __init__(self, db: Annotated[AsyncSession, Depends(get_db)]) -> None:
        self.db = db

    async def get_skills(self) -> Sequence[Skill]:
        result = await self.db.exec(select(Skill).order_by(Skill.id))
        return result.all()

    async def get_skill(self, skill_id: int) -> Skill | None:
        result = await self.db.exec(select(Skill).where(Skill.id == skill_id))
        return result.first()

    async def create_skill(self, skill: SkillCreate) -> Skill:
        new_skill = Skill.model_validate(skill.model_dump())
        self.db.add(new_skill)
        await self.db.commit()
        await self.db.refresh(new_skill)
        return new_skill

    async def update_skill(self, skill_id: int, skill: SkillUpdate) -> Skill | None:
        existing_skill = await self.get_skill(skill_id)
        if not existing_skill:
            return None

        existing_skill.sqlmodel_update(skill.model_dump(exclude_unset=True))
        self.db.add(existing_skill)
        await self.db.commit()
        await self.db.refresh(existing_skill)
        return existing_skill

    async def delete_skill(self, skill_id: int) -> bool:
        skill = await self.get_skill(skill_id)
        if not skill:
            return False

        await self.db.delete(skill)
        await self.db.commit()
        return True

    async def _ensure_skills_exist(self, *skill_ids: int | None) -> None:
        for skill_id in skill_ids:
            if skill_id is not None and not await self.get_skill(skill_id):
                raise HTTPException(status_code=400, detail=f"Skill {skill_id} not found")

    async def get_characters(
        self, *, page: int, page_size: int
    ) -> tuple[Sequence[Character], PaginationData]:
        offset = PaginationData.offset(page, page_size)

        total_items_result = await self.db.exec(select(Character))
        total_items = len(total_items_result.all())

        result = await self.db.exec(
            select(Character).order_by(Character.id).offset(offset).limit(page_size)
        )
        characters = result.all()

        pagination = PaginationData.build(page=page, page_size=page_size, total_items=total_items)

        return characters, pagination

    async def get_character(self, character_id: int) -> Character | None:
        result = await self.db.exec(select(Character).where(Character.id == character_id))
        return result.first()

    async def create_character(self, character: CharacterCreate) -> Character:
        await self._ensure_skills_exist(
            character.basic_attack_id, character.skill_attack_id, character.ultimate_attack_id
        )

        new_character = Character.model_validate(character.model_dump())
        self.db.add(new_character)
        await self.db.commit()
        await self.db.refresh(new_character)
        return new_character

    async def update_character(
        self, character_id: int, character: CharacterUpdate
    ) -> Character | None:
        existing_character = await self.get_character(character_id)
        if not existing_character:
            return None

        character_data = character.model_dump(exclude_unset=True)
        await self._ensure_skills_exist(
            character_data.get("basic_attack_id"),
            character_data.get("skill_attack_id"),
            character_data.get("ultimate_attack_id"),
        )

        existing_character.sqlmodel_update(character_data)
        self.db.add(existing_character)
        await self.db.commit()
        await self.db.refresh(existing_character)
        return existing_character

    async def delete_character(self, character_id: int) -> bool:
        character = await self.get_character(character_id)
        if not character:
            return False

        await self.db.delete(character)
        await self.db.commit()
        return True
