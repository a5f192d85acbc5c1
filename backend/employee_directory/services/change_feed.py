"""Watermark-based feed of newly registered users.

The tracker keeps one process-wide cursor. In the default mode a poll reads
every user newer than the watermark and only afterwards moves the watermark to
"now"; the read and the move are not atomic and there is no per-caller cursor,
so two overlapping polls can each miss rows or both return the same rows, and
a row committed while a read is in flight can be skipped entirely. That race
is the accepted behaviour of the feed.

``serialized=True`` selects the corrected variant: polls run one at a time,
the new watermark is the instant captured before the read, and it is
installed with a compare-and-advance.
"""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..errors import STORE_FAILURES, store_error
from ..models import User

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    """Naive UTC timestamp, matching how ``users.created_at`` is stored."""

    return datetime.now(timezone.utc).replace(tzinfo=None)


class Watermark:
    """Single mutable timestamp separating delivered from undelivered users."""

    def __init__(self, initial: datetime | None = None, clock: Callable[[], datetime] = utcnow) -> None:
        self._clock = clock
        self._value = initial if initial is not None else clock()

    @property
    def value(self) -> datetime:
        return self._value

    def now(self) -> datetime:
        return self._clock()

    def advance(self, to: datetime | None = None) -> datetime:
        """Unconditionally move the watermark (to the clock's ``now`` by default)."""

        self._value = to if to is not None else self._clock()
        return self._value

    def compare_and_advance(self, expected: datetime, new: datetime) -> bool:
        """Move to ``new`` only if nobody moved the watermark since ``expected`` was read."""

        if self._value != expected or new < expected:
            return False
        self._value = new
        return True


class ChangeFeedTracker:
    """Answers "which users appeared since the last poll"."""

    def __init__(self, watermark: Watermark | None = None, serialized: bool = False) -> None:
        self.watermark = watermark or Watermark()
        self.serialized = serialized
        self._lock = asyncio.Lock()

    async def poll_new_users(self, session: AsyncSession) -> list[dict]:
        """Return users created after the watermark, then advance it."""

        if self.serialized:
            async with self._lock:
                return await self._poll_serialized(session)

        rows = await self._select_since(session, self.watermark.value)
        moved_to = self.watermark.advance()
        logger.debug("New-user poll returned %d rows; watermark now %s", len(rows), moved_to)
        return rows

    async def _poll_serialized(self, session: AsyncSession) -> list[dict]:
        since = self.watermark.value
        read_started = self.watermark.now()
        rows = await self._select_since(session, since, until=read_started)
        if not self.watermark.compare_and_advance(since, read_started):
            logger.warning("Watermark moved during a serialized poll; leaving it at %s", self.watermark.value)
        logger.debug("New-user poll returned %d rows; watermark now %s", len(rows), self.watermark.value)
        return rows

    async def list_all_users(self, session: AsyncSession) -> list[dict]:
        """All users, newest id first; the watermark is left alone."""

        stmt = select(User.username, User.email, User.profile_image).order_by(User.id.desc())
        return await self._fetch(session, stmt)

    async def _select_since(
        self,
        session: AsyncSession,
        since: datetime,
        until: datetime | None = None,
    ) -> list[dict]:
        stmt = select(User.username, User.email, User.profile_image).where(User.created_at > since)
        if until is not None:
            stmt = stmt.where(User.created_at <= until)
        return await self._fetch(session, stmt)

    @staticmethod
    async def _fetch(session: AsyncSession, stmt) -> list[dict]:
        try:
            result = await session.execute(stmt)
        except STORE_FAILURES as exc:
            logger.exception("User feed query failed")
            raise store_error(exc) from exc
        return [dict(row) for row in result.mappings()]
