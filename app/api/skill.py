from collections.abc import Sequence
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from app.models.character import Skill
from app.schemas.character import SkillCreate, SkillUpdate
from app.schemas.common import APIResponse
from app.services.character import CharacterService

router = APIRouter(prefix="/skills", tags=["skills"])


@router.get("/")
async def get_skills(
    service: Annotated[CharacterService, Depends()],
) -> APIResponse[Sequence[Skill]]:
    return APIResponse(data=await service.get_skills())


@router.get("/{skill_id}")
async def get_skill(
    skill_id: int, service: Annotated[CharacterService, Depends()]
) -> APIResponse[Skill]:
    skill = await service.get_skill(skill_id)
    if not skill:
        raise HTTPException(status_code=404, detail="Skill not found")
    return APIResponse(data=skill)


@router.post("/")
async def create_skill(
    skill: SkillCreate, service: Annotated[CharacterService, Depends()]
) -> APIResponse[Skill]:
    created_skill = await service.create_skill(skill)
    return APIResponse(data=created_skill, message="Skill created successfully")


@router.put("/{skill_id}")
async def update_skill(
    skill_id: int, skill: SkillUpdate, service: Annotated[CharacterService, Depends()]
) -> APIResponse[Skill]:
    updated_skill = await service.update_skill(skill_id, skill)
    if not updated_skill:
        raise HTTPException(status_code=404, detail="Skill not found")
    return APIResponse(data=updated_skill, message="Skill updated successfully")


@router.delete("/{skill_id}")
async def delete_skill(
    skill_id: int, service: Annotated[CharacterService, Depends()]
) -> APIResponse[None]:
    deleted = await service.delete_skill(skill_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Skill not found")
    return APIResponse(message="Skill deleted successfully")
