"""Profile and guest session routes."""

from fastapi import APIRouter, Depends, status

from nextwatch.api.deps import get_profile_service
from nextwatch.api.schemas import GuestSessionResponse, UserProfileCreateRequest
from nextwatch.domain.records import UserProfileRecord
from nextwatch.services import ProfileService

router = APIRouter(tags=["Users"])


@router.post("/users", response_model=UserProfileRecord, status_code=status.HTTP_201_CREATED)
async def create_user_profile(
    data: UserProfileCreateRequest,
    service: ProfileService = Depends(get_profile_service),
) -> UserProfileRecord:
    return await service.create_profile(data.username, str(data.email))


@router.post("/sessions/guest", response_model=GuestSessionResponse, status_code=status.HTTP_201_CREATED)
async def create_guest_session(
    service: ProfileService = Depends(get_profile_service),
) -> GuestSessionResponse:
    return GuestSessionResponse(session_id=service.create_guest_session())
