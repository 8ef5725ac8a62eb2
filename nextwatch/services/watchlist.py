"""Watchlist add / remove / list."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from nextwatch.domain.actor import ActorScope, describe
from nextwatch.domain.records import WatchlistRecord
from nextwatch.repositories import WatchlistRepository
from nextwatch.services.interactions import ensure_writable

logger = logging.getLogger(__name__)


class WatchlistService:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._watchlist = WatchlistRepository(session)

    async def add(self, scope: ActorScope, media_item_id: int) -> WatchlistRecord:
        """Idempotent: adding an item twice returns the same entry."""
        actor = scope.primary
        await ensure_writable(self._session, actor, media_item_id)
        entry = await self._watchlist.add(actor, media_item_id)
        logger.info("Watchlist add: media item %d for %s (entry %d)", media_item_id, describe(actor), entry.id)
        return entry

    async def remove(self, scope: ActorScope | None, media_item_id: int) -> bool:
        """Remove the item. Missing entries count as removed; no actor means failure."""
        if scope is None:
            return False
        removed = await self._watchlist.remove(scope.primary, media_item_id)
        logger.info(
            "Watchlist remove: media item %d for %s (%d rows)",
            media_item_id,
            describe(scope.primary),
            removed,
        )
        return True

    async def list_entries(self, scope: ActorScope | None) -> list[WatchlistRecord]:
        if scope is None:
            return []
        return await self._watchlist.list_for(scope)
