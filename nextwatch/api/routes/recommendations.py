"""Recommendation routes: batch generation and swipe-style dispensing."""

from fastapi import APIRouter, Depends, Query

from nextwatch.api.deps import get_recommendation_service, get_settings
from nextwatch.api.schemas import RecommendationsRequest
from nextwatch.config import Settings
from nextwatch.domain.actor import ActorScope
from nextwatch.domain.records import RecommendationRecord
from nextwatch.services import RecommendationService

router = APIRouter(prefix="/recommendations", tags=["Recommendations"])


@router.post("/generate", response_model=list[RecommendationRecord], status_code=201)
async def generate_recommendations(
    data: RecommendationsRequest,
    service: RecommendationService = Depends(get_recommendation_service),
    settings: Settings = Depends(get_settings),
) -> list[RecommendationRecord]:
    """Score the catalog against the actor's interactions and queue the best items."""
    scope = ActorScope.resolve(data.user_id, data.session_id)
    limit = data.limit or settings.recommendation_default_limit
    return await service.generate(scope, limit=limit)


@router.get("/next", response_model=RecommendationRecord | None)
async def get_next_recommendation(
    user_id: int | None = Query(None),
    session_id: str | None = Query(None),
    service: RecommendationService = Depends(get_recommendation_service),
) -> RecommendationRecord | None:
    """Return the highest-scored unshown recommendation and mark it shown."""
    return await service.next(ActorScope.maybe(user_id, session_id))
