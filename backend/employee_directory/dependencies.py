"""Reusable FastAPI dependencies."""
from __future__ import annotations

from collections.abc import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from .config import Settings, get_settings
from .database import get_session
from .services.change_feed import ChangeFeedTracker
from .services.media import MediaAttachmentHandler


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency that yields an AsyncSession."""
    async for session in get_session():
        yield session


def get_app_settings() -> Settings:
    """Cached application settings."""
    return get_settings()


def get_media_handler(request: Request) -> MediaAttachmentHandler:
    """Upload handler configured for this application instance."""
    return request.app.state.media


def get_change_feed(request: Request) -> ChangeFeedTracker:
    """The process-wide new-user tracker (one shared watermark)."""
    return request.app.state.change_feed
