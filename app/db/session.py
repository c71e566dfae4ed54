import logging
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.core.config import settings
from app.db.base import Base

logger = logging.getLogger(__name__)

engine: AsyncEngine | None = None
async_session: async_sessionmaker[AsyncSession] | None = None


async def get_engine() -> AsyncEngine:
    global engine
    if engine is None:
        await connect_db_engine()
    return engine


async def connect_db_engine(database_url: Optional[str] = None):
    global engine, async_session
    if engine is None:
        url = database_url or settings.DATABASE_URL
        try:
            engine = create_async_engine(url, pool_pre_ping=True)
            async_session = async_sessionmaker(engine, expire_on_commit=False)
            logger.info("✅ Database engine created for %s", engine.url.render_as_string(hide_password=True))
        except Exception as e:
            logger.error(f"❌ Error creating database engine: {e}")
            raise


async def init_db():
    """Create the users and donations tables if they do not exist yet."""
    # model modules register their tables on Base.metadata
    from app.db.models import donation_model, user_model  # noqa: F401

    current = await get_engine()
    async with current.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("✅ Database schema is ready.")


async def close_db_engine():
    global engine, async_session
    if engine:
        await engine.dispose()
        engine = None
        async_session = None
        logger.info("❌ Database engine disposed.")


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    if async_session is None:
        raise Exception("Database engine is not initialized.")
    async with async_session() as session:
        yield session
