import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from core.config import configs

logger = logging.getLogger(__name__)

# Set echo to True only if log level is DEBUG for verbose SQL logging
engine = create_async_engine(configs.DATABASE_URL, echo=False, future=True)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)

Base = declarative_base()


async def init_models():
    """Create missing tables. Existing tables are left untouched."""
    # Register models on Base.metadata
    from photoboard.models import photo  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"Database ready: {engine.url.render_as_string(hide_password=True)}")


async def get_db() -> AsyncSession:
    """Dependency for getting async database sessions."""
    logger.debug("Creating new database session.")
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            logger.debug("Closing database session.")
            await session.close()


async def close_engine():
    """Close pooled connections; they belong to the event loop that opened them."""
    await engine.dispose()
    logger.debug("Database engine disposed.")
