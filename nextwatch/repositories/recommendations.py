import logging
from collections.abc import Sequence

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from nextwatch.domain import numeric
from nextwatch.domain.actor import Actor, actor_columns, describe
from nextwatch.domain.models import Recommendation
from nextwatch.domain.records import RecommendationRecord
from nextwatch.ports.recommender import RecommendationResult
from nextwatch.repositories.base import actor_clause
from nextwatch.repositories.rows import recommendation_record

logger = logging.getLogger(__name__)


class RecommendationRepository:
    """Queue of generated recommendations, dispensed one at a time."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def insert_many(
        self, actor: Actor, results: Sequence[RecommendationResult]
    ) -> list[RecommendationRecord]:
        rows = [
            Recommendation(
                **actor_columns(actor),
                media_item_id=result.media_item_id,
                reason=result.reason,
                score=numeric.encode_score(result.score),
                shown=False,
            )
            for result in results
        ]
        self._session.add_all(rows)
        await self._session.flush()
        return [recommendation_record(row) for row in rows]

    async def pending_media_ids(self, actor: Actor) -> set[int]:
        """Items already queued (generated but not yet shown) for ``actor``."""
        result = await self._session.scalars(
            select(Recommendation.media_item_id).where(
                actor_clause(Recommendation, actor),
                Recommendation.shown.is_(False),
            )
        )
        return set(result)

    async def pop_next_unshown(self, actor: Actor) -> RecommendationRecord | None:
        """
        Claim the best unshown recommendation for ``actor``.

        The pick locks its row where the database supports it (SKIP LOCKED lets
        a concurrent caller move on to the next row) and the claim is an UPDATE
        guarded on ``shown = false``. If the guard loses a race the pick is
        repeated, so every row is returned to exactly one caller.
        """
        while True:
            pick = (
                select(Recommendation.id)
                .where(
                    actor_clause(Recommendation, actor),
                    Recommendation.shown.is_(False),
                )
                .order_by(
                    Recommendation.score.desc(),
                    Recommendation.created_at.asc(),
                    Recommendation.id.asc(),
                )
                .limit(1)
                .with_for_update(skip_locked=True)
            )
            recommendation_id = await self._session.scalar(pick)
            if recommendation_id is None:
                return None

            claim = (
                update(Recommendation)
                .where(
                    Recommendation.id == recommendation_id,
                    Recommendation.shown.is_(False),
                )
                .values(shown=True)
                .returning(Recommendation)
            )
            result = await self._session.scalars(
                claim,
                execution_options={"synchronize_session": False, "populate_existing": True},
            )
            row = result.one_or_none()
            if row is not None:
                return recommendation_record(row)
            logger.debug("Recommendation %d claimed concurrently for %s; retrying", recommendation_id, describe(actor))
