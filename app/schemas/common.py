from typing import Literal, Self

from pydantic import BaseModel, Field

from app.utils.misc import get_utc_iso_now


class PaginationData(BaseModel):
    page: int
    page_size: int
    total_items: int
    total_pages: int

    @classmethod
    def build(cls, *, page: int, page_size: int, total_items: int) -> Self:
        return cls(
            page=page,
            page_size=page_size,
            total_items=total_items,
            total_pages=(total_items + page_size - 1) // page_size,
        )

    @staticmethod
    def offset(page: int, page_size: int) -> int:
        return (page - 1) * page_size


class APIResponse[T](BaseModel):
    """Envelope for every response of the API, errors included."""

    status: Literal["success", "error"] = "success"
    data: T | None = None
    message: str | None = None
    timestamp: str = Field(default_factory=get_utc_iso_now)

    pagination: PaginationData | None = None


class PaginatedResponse[T](APIResponse[T]):
    data: T | None = None
    pagination: PaginationData  # pyright: ignore[reportGeneralTypeIssues]
