from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from nextwatch.domain.actor import Actor, ActorScope, actor_columns
from nextwatch.domain.models import MediaItem, WatchlistEntry, utcnow
from nextwatch.domain.records import WatchlistRecord
from nextwatch.repositories.base import actor_clause, conflict_target, insert_for, scope_clause
from nextwatch.repositories.rows import watchlist_record


class WatchlistRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, actor: Actor, media_item_id: int) -> WatchlistRecord:
        """Add the item, or return the existing entry unchanged."""
        stmt = insert_for(self._session, WatchlistEntry).values(
            **actor_columns(actor),
            media_item_id=media_item_id,
            created_at=utcnow(),
        )
        # No-op update so RETURNING yields the existing row on conflict.
        stmt = stmt.on_conflict_do_update(
            index_elements=conflict_target(actor),
            set_={"media_item_id": stmt.excluded.media_item_id},
        ).returning(WatchlistEntry)

        result = await self._session.scalars(stmt, execution_options={"populate_existing": True})
        return watchlist_record(result.one())

    async def remove(self, actor: Actor, media_item_id: int) -> int:
        result = await self._session.execute(
            delete(WatchlistEntry).where(
                actor_clause(WatchlistEntry, actor),
                WatchlistEntry.media_item_id == media_item_id,
            )
        )
        return result.rowcount or 0

    async def list_for(self, scope: ActorScope) -> list[WatchlistRecord]:
        result = await self._session.execute(
            select(WatchlistEntry, MediaItem)
            .join(MediaItem, WatchlistEntry.media_item_id == MediaItem.id)
            .where(scope_clause(WatchlistEntry, scope))
            .order_by(WatchlistEntry.created_at.desc(), WatchlistEntry.id.desc())
        )
        return [watchlist_record(entry, media) for entry, media in result.tuples()]
