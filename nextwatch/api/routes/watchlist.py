from fastapi import APIRouter, Depends, Query, status

from nextwatch.api.deps import get_watchlist_service
from nextwatch.api.schemas import WatchlistRemoveResponse, WatchlistRequest
from nextwatch.domain.actor import ActorScope
from nextwatch.domain.records import WatchlistRecord
from nextwatch.services import WatchlistService

router = APIRouter(prefix="/watchlist", tags=["Watchlist"])


@router.post("", response_model=WatchlistRecord, status_code=status.HTTP_201_CREATED)
async def add_to_watchlist(
    data: WatchlistRequest,
    service: WatchlistService = Depends(get_watchlist_service),
) -> WatchlistRecord:
    scope = ActorScope.resolve(data.user_id, data.session_id)
    return await service.add(scope, data.media_item_id)


@router.post("/remove", response_model=WatchlistRemoveResponse)
async def remove_from_watchlist(
    data: WatchlistRequest,
    service: WatchlistService = Depends(get_watchlist_service),
) -> WatchlistRemoveResponse:
    success = await service.remove(ActorScope.maybe(data.user_id, data.session_id), data.media_item_id)
    return WatchlistRemoveResponse(success=success)


@router.get("", response_model=list[WatchlistRecord])
async def get_watchlist(
    user_id: int | None = Query(None),
    session_id: str | None = Query(None),
    service: WatchlistService = Depends(get_watchlist_service),
) -> list[WatchlistRecord]:
    return await service.list_entries(ActorScope.maybe(user_id, session_id))
