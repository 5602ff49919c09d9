from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field

from app.core.enums import Rank, Rarity


def _check_levels(value: dict[str, float]) -> dict[str, float]:
    invalid = [level for level in value if level not in {"1", "2", "3"}]
    if invalid:
        msg = f"Team value levels must be 1, 2 or 3, got {', '.join(invalid)}"
        raise ValueError(msg)
    return value


TeamValue = Annotated[dict[str, float], AfterValidator(_check_levels)]


class HeroConfigCreate(BaseModel):
    rarity: Rarity
    team_modifier: float = Field(ge=0, le=1)
    team_value: TeamValue = Field(
        description="Team value contributed by a hero of this rarity, keyed by level"
    )


class HeroConfigUpdate(BaseModel):
    team_modifier: float | None = Field(default=None, ge=0, le=1)
    team_value: TeamValue | None = None


class RankConfigCreate(BaseModel):
    rank: Rank
    modifier: float = Field(ge=0)


class RankConfigUpdate(BaseModel):
    modifier: float = Field(ge=0)
