"""Interaction recording with actor and catalog validation."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from nextwatch.domain.actor import Actor, ActorScope, UserActor, describe
from nextwatch.domain.errors import NotFound
from nextwatch.domain.records import InteractionRecord
from nextwatch.repositories import InteractionRepository, MediaRepository, ProfileRepository

logger = logging.getLogger(__name__)


async def ensure_actor_exists(session: AsyncSession, actor: Actor) -> None:
    """Raise NotFound for a user actor without a profile. Guests always exist."""
    if isinstance(actor, UserActor) and not await ProfileRepository(session).exists(actor.user_id):
        raise NotFound(f"User {actor.user_id} not found")


async def ensure_writable(
    session: AsyncSession, actor: Actor, media_item_id: int
) -> None:
    """Raise NotFound unless the media item, and the user for user actors, exist."""
    if not await MediaRepository(session).exists(media_item_id):
        raise NotFound(f"Media item {media_item_id} not found")
    await ensure_actor_exists(session, actor)


class InteractionService:
    """Keeps one current interaction per (actor, media item)."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._interactions = InteractionRepository(session)

    async def record(
        self, scope: ActorScope, media_item_id: int, interaction_type: str
    ) -> InteractionRecord:
        """
        Record an interaction for the scope's primary actor.

        A later event for the same pair replaces the earlier kind; the row
        keeps its id and created_at.
        """
        actor = scope.primary
        await ensure_writable(self._session, actor, media_item_id)

        previous = await self._interactions.find(actor, media_item_id)
        interaction = await self._interactions.upsert(actor, media_item_id, interaction_type)
        if previous is not None and previous.interaction_type != interaction_type:
            logger.info(
                "Replaced %s with %s on media item %d for %s",
                previous.interaction_type,
                interaction_type,
                media_item_id,
                describe(actor),
            )
        else:
            logger.info(
                "Recorded %s on media item %d for %s",
                interaction_type,
                media_item_id,
                describe(actor),
            )
        return interaction

    async def list_interactions(
        self, scope: ActorScope, interaction_type: str | None = None
    ) -> list[InteractionRecord]:
        """Interactions of every actor in scope, most recently changed first."""
        return await self._interactions.list_for(scope, interaction_type)
