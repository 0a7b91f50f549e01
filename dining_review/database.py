"""Async SQLAlchemy engine, session factory, and Base declaration."""

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool
from sqlalchemy import text

from dining_review.config import settings

# Signed 64-bit INTEGER range; larger Python ints cannot be bound as parameters
SQL_INT_MIN = -(2**63)
SQL_INT_MAX = 2**63 - 1


class Base(DeclarativeBase):
    """Shared declarative base for all ORM models."""
    pass


def _engine_options() -> dict:
    """SQLite files get a fresh connection per checkout; servers get a pool."""
    if settings.is_sqlite:
        return {"poolclass": NullPool}
    return {"pool_pre_ping": True, "pool_size": 10, "max_overflow": 20}


engine = create_async_engine(
    settings.database_url,
    echo=(settings.app_env == "development" and settings.log_level.upper() == "DEBUG"),
    **_engine_options(),
)

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncSession:
    """FastAPI dependency: yields an async database session."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def check_db_connectivity() -> bool:
    """Return True if a simple SELECT 1 succeeds."""
    try:
        async with AsyncSessionLocal() as session:
            await session.execute(text("SELECT 1"))
        return True
    except Exception:
        return False


async def create_all() -> None:
    """Create every registered table (idempotent)."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_all() -> None:
    """Drop every registered table. Used by tests and local resets."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
