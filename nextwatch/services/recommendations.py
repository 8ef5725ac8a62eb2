"""Recommendation generation and swipe-style dispensing."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from nextwatch.domain.actor import ActorScope, describe
from nextwatch.domain.preferences import infer_preferences
from nextwatch.domain.records import RecommendationRecord
from nextwatch.ports.recommender import RecommenderPort
from nextwatch.repositories import (
    InteractionRepository,
    MediaRepository,
    RecommendationRepository,
)
from nextwatch.services.interactions import ensure_actor_exists

logger = logging.getLogger(__name__)


class RecommendationService:
    """
    Generates recommendation batches and hands them out one at a time.

    Generation reads the interactions of every actor in scope, scores a
    bounded candidate pool and queues the best ``limit`` results for the
    primary actor. Dispensing marks each queued row shown exactly once.
    """

    def __init__(
        self,
        session: AsyncSession,
        recommender: RecommenderPort,
        pool_factor: int = 3,
        dedupe_pending: bool = True,
    ) -> None:
        self._session = session
        self._interactions = InteractionRepository(session)
        self._media = MediaRepository(session)
        self._queue = RecommendationRepository(session)
        self._recommender = recommender
        self._pool_factor = pool_factor
        self._dedupe_pending = dedupe_pending

    async def generate(self, scope: ActorScope, limit: int = 10) -> list[RecommendationRecord]:
        actor = scope.primary
        await ensure_actor_exists(self._session, actor)
        profile = infer_preferences(await self._interactions.signals_for(scope))

        excluded = set(profile.excluded_ids)
        if self._dedupe_pending:
            excluded |= await self._queue.pending_media_ids(actor)

        candidates = await self._media.candidates(
            exclude_ids=excluded,
            media_type=profile.preferred_kind,
            limit=limit * self._pool_factor,
        )
        ranked = self._recommender.rank(profile, candidates, limit)
        recommendations = await self._queue.insert_many(actor, ranked)

        logger.info(
            "Generated %d recommendations for %s (pool=%d, excluded=%d)",
            len(recommendations),
            describe(actor),
            len(candidates),
            len(excluded),
        )
        return recommendations

    async def next(self, scope: ActorScope | None) -> RecommendationRecord | None:
        """Claim the best unshown recommendation, with its media item attached."""
        if scope is None:
            # Every stored row belongs to some actor, so nothing can match.
            return None

        recommendation = await self._queue.pop_next_unshown(scope.primary)
        if recommendation is None:
            logger.debug("No unshown recommendations for %s", describe(scope.primary))
            return None

        media = await self._media.get(recommendation.media_item_id)
        return recommendation.model_copy(update={"media_item": media})
