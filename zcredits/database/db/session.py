from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from zcredits.config import settings, Environment
from zcredits.database.models import Base

engine_async: AsyncEngine = create_async_engine(
    settings.database_url,
    echo=settings.DEBUG and settings.ENVIRONMENT == Environment.DEVELOPMENT,
    pool_pre_ping=True,
)

AsyncSessionLocal = async_sessionmaker(
    bind=engine_async,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        yield session


async def init_models(engine: AsyncEngine = engine_async) -> None:
    """Create missing tables. Used by the seed script and tests."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
