"""Read-only feeds over the user registration system's accounts."""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..dependencies import get_change_feed, get_db_session
from ..schemas import UserFeedItem
from ..services.change_feed import ChangeFeedTracker

router = APIRouter(prefix="/api", tags=["users"])


@router.get("/new-users", response_model=list[UserFeedItem])
async def new_users(
    session: AsyncSession = Depends(get_db_session),
    feed: ChangeFeedTracker = Depends(get_change_feed),
) -> list[dict]:
    """Users registered since the previous call; every call advances the shared watermark."""

    return await feed.poll_new_users(session)


@router.get("/all-users", response_model=list[UserFeedItem])
async def all_users(
    session: AsyncSession = Depends(get_db_session),
    feed: ChangeFeedTracker = Depends(get_change_feed),
) -> list[dict]:
    """Every registered user, newest first."""

    return await feed.list_all_users(session)
