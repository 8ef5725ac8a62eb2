import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from nextwatch.domain.actor import Actor, ActorScope, actor_columns
from nextwatch.domain.models import MediaItem, UserInteraction, utcnow
from nextwatch.domain.preferences import InteractionSignal
from nextwatch.domain.records import InteractionRecord
from nextwatch.repositories.base import actor_clause, conflict_target, insert_for, scope_clause
from nextwatch.repositories.rows import interaction_record

logger = logging.getLogger(__name__)


class InteractionRepository:
    """Interaction log: one current interaction per (actor, media item)."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find(self, actor: Actor, media_item_id: int) -> InteractionRecord | None:
        row = await self._session.scalar(
            select(UserInteraction).where(
                actor_clause(UserInteraction, actor),
                UserInteraction.media_item_id == media_item_id,
            )
        )
        return interaction_record(row) if row else None

    async def upsert(self, actor: Actor, media_item_id: int, interaction_type: str) -> InteractionRecord:
        """Record ``interaction_type`` as the actor's current stance on the item.

        A single INSERT .. ON CONFLICT keyed on the (actor, item) constraint, so
        concurrent writers for the same pair converge on one row.
        """
        now = utcnow()
        stmt = insert_for(self._session, UserInteraction).values(
            **actor_columns(actor),
            media_item_id=media_item_id,
            interaction_type=interaction_type,
            created_at=now,
            updated_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=conflict_target(actor),
            set_={"interaction_type": stmt.excluded.interaction_type, "updated_at": now},
        ).returning(UserInteraction)

        result = await self._session.scalars(stmt, execution_options={"populate_existing": True})
        return interaction_record(result.one())

    async def list_for(
        self, scope: ActorScope, interaction_type: str | None = None
    ) -> list[InteractionRecord]:
        stmt = select(UserInteraction).where(scope_clause(UserInteraction, scope))
        if interaction_type:
            stmt = stmt.where(UserInteraction.interaction_type == interaction_type)
        stmt = stmt.order_by(UserInteraction.updated_at.desc(), UserInteraction.id.desc())
        rows = await self._session.scalars(stmt)
        return [interaction_record(row) for row in rows]

    async def signals_for(self, scope: ActorScope) -> list[InteractionSignal]:
        """Interactions joined with the genres, type and title of their items."""
        result = await self._session.execute(
            select(
                UserInteraction.media_item_id,
                UserInteraction.interaction_type,
                MediaItem.title,
                MediaItem.genres,
                MediaItem.media_type,
            )
            .join(MediaItem, UserInteraction.media_item_id == MediaItem.id)
            .where(scope_clause(UserInteraction, scope))
            .order_by(UserInteraction.id.asc())
        )
        return [
            InteractionSignal(
                media_item_id=row.media_item_id,
                interaction_type=row.interaction_type,
                title=row.title,
                genres=tuple(row.genres or ()),
                media_type=row.media_type,
            )
            for row in result
        ]
