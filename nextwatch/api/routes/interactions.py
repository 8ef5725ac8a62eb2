from fastapi import APIRouter, Depends, Query, status

from nextwatch.api.deps import get_interaction_service
from nextwatch.api.schemas import InteractionCreateRequest
from nextwatch.domain.actor import ActorScope
from nextwatch.domain.records import InteractionRecord, InteractionType
from nextwatch.services import InteractionService

router = APIRouter(prefix="/interactions", tags=["Interactions"])


@router.post("", response_model=InteractionRecord, status_code=status.HTTP_201_CREATED)
async def create_user_interaction(
    data: InteractionCreateRequest,
    service: InteractionService = Depends(get_interaction_service),
) -> InteractionRecord:
    scope = ActorScope.resolve(data.user_id, data.session_id)
    return await service.record(scope, data.media_item_id, data.interaction_type)


@router.get("", response_model=list[InteractionRecord])
async def get_user_interactions(
    user_id: int | None = Query(None),
    session_id: str | None = Query(None),
    interaction_type: InteractionType | None = Query(None),
    service: InteractionService = Depends(get_interaction_service),
) -> list[InteractionRecord]:
    scope = ActorScope.resolve(user_id, session_id)
    return await service.list_interactions(scope, interaction_type)
