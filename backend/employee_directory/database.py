"""Database engine and session management."""
from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from .config import get_settings


def async_database_url(url: str) -> str:
    """Point plain PostgreSQL URLs at the asyncpg driver."""

    for prefix in ("postgresql://", "postgres://"):
        if url.startswith(prefix):
            return "postgresql+asyncpg://" + url[len(prefix):]
    return url


settings = get_settings()
database_url = async_database_url(settings.database_url)
connect_args = {"check_same_thread": False} if database_url.startswith("sqlite+") else {}
engine = create_async_engine(
    database_url,
    future=True,
    echo=False,
    pool_pre_ping=True,
    connect_args=connect_args,
)
AsyncSessionLocal = async_sessionmaker(engine, expire_on_commit=False)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide an async SQLAlchemy session per request."""

    async with AsyncSessionLocal() as session:
        yield session
