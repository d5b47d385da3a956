"""Async engine and session factory for the activities database."""

from typing import Any, AsyncGenerator

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from core.config import Settings, settings


def build_engine(config: Settings) -> AsyncEngine:
    """Create the async engine described by ``config``.

    Pool sizing only applies to server databases; SQLite uses its own
    single-file pool.
    """
    url = make_url(config.async_database_url)
    options: dict[str, Any] = {"echo": config.db_echo, "pool_pre_ping": True}
    if url.get_backend_name() != "sqlite":
        options["pool_size"] = config.db_pool_size
        options["max_overflow"] = config.db_max_overflow
    return create_async_engine(url, **options)


engine = build_engine(settings)

async_session_factory = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a session for request-scoped queries such as the health check."""
    async with async_session_factory() as session:
        yield session
