from collections.abc import Sequence
from typing import Annotated

from fastapi import Depends, HTTPException
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.db import get_db
from app.models.player import Player
from app.schemas.common import PaginationData
from app.schemas.player import PlayerCreate, PlayerUpdate


class PlayerService:
    def __init__(self, db: Annotated[AsyncSession, Depends(get_db)]) -> None:
        self.db = db

    async def get_players(
        self, *, page: int, page_size: int
    ) -> tuple[Sequence[Player], PaginationData]:
        offset = PaginationData.offset(page, page_size)

        total_items_result = await self.db.exec(select(Player))
        total_items = len(total_items_result.all())

        result = await self.db.exec(select(Player).order_by(Player.id).offset(offset).limit(page_size))
        players = result.all()

        pagination = PaginationData.build(page=page, page_size=page_size, total_items=total_items)

        return players, pagination

    async def get_player(self, player_id: int) -> Player | None:
        result = await self.db.exec(select(Player).where(Player.id == player_id))
        return result.first()

    async def get_player_by_username(self, username: str) -> Player | None:
        result = await self.db.exec(select(Player).where(Player.username == username))
        return result.first()

    async def create_player(self, player: PlayerCreate) -> Player:
        if await self.get_player_by_username(player.username):
            raise HTTPException(status_code=409, detail=f"Username {player.username} is taken")

        new_player = Player.model_validate(player.model_dump())
        self.db.add(new_player)
        await self.db.commit()
        await self.db.refresh(new_player)
        return new_player

    async def update_player(self, player_id: int, player: PlayerUpdate) -> Player | None:
        existing_player = await self.get_player(player_id)
        if not existing_player:
            return None

        player_data = player.model_dump(exclude_unset=True)
        existing_player.sqlmodel_update(player_data)
        self.db.add(existing_player)
        await self.db.commit()
        await self.db.refresh(existing_player)
        return existing_player

    async def delete_player(self, player_id: int) -> bool:
        player = await self.get_player(player_id)
        if not player:
            return False

        await self.db.delete(player)
        await self.db.commit()
        return True
