from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.config import settings


def make_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Objects stay readable after commit; reward processing relies on it
    return async_sessionmaker(
        bind, class_=AsyncSession, autoflush=False, expire_on_commit=False
    )


engine = create_async_engine(settings.db_url, pool_pre_ping=True)
session_factory = make_session_factory(engine)


async def get_db() -> AsyncGenerator[AsyncSession]:
    async with session_factory() as session:
        yield session
