from typing import AsyncIterator

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from gigapi.core.config import settings
from gigapi.core.retry import RetryPolicy


def build_engine(database_url: str) -> AsyncEngine:
    """
    Create the async SQLAlchemy engine for a database URL.

    Pool sizing only applies to server databases; SQLite picks its own pool.
    """
    engine_kwargs = {"pool_pre_ping": True}  # Verify connections before using them
    if make_url(database_url).get_backend_name() != "sqlite":
        engine_kwargs["pool_size"] = settings.DB_POOL_SIZE
        engine_kwargs["max_overflow"] = settings.DB_MAX_OVERFLOW
    return create_async_engine(database_url, **engine_kwargs)


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker:
    # expire_on_commit=False keeps attributes readable after commit without another await
    return async_sessionmaker(bind=bind, autoflush=False, expire_on_commit=False)


engine = build_engine(settings.DATABASE_URL)

SessionLocal = build_session_factory(engine)

# Retry-on-failure policy shared by every repository
retry_policy = RetryPolicy.from_settings(settings)

# Create Base class for models
Base = declarative_base()


async def get_db() -> AsyncIterator[AsyncSession]:
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    async with SessionLocal() as db:
        yield db


def init_db():
    """
    Initialize database.

    Alembic owns table creation ("alembic upgrade head"), so this only makes
    sure the models are imported and registered on Base.metadata.
    """
    from gigapi.models import gig  # noqa: F401


async def dispose_db() -> None:
    """Close every pooled connection on shutdown."""
    await engine.dispose()
