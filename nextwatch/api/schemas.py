"""Request and response models for the HTTP API."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from nextwatch.domain.records import InteractionType

# ── Profiles & sessions ────────────────────────────


class UserProfileCreateRequest(BaseModel):
    username: str = Field(min_length=3, max_length=50)
    email: EmailStr


class GuestSessionResponse(BaseModel):
    session_id: str


# ── Actor-scoped requests ──────────────────────────


class ActorRequest(BaseModel):
    """Either a registered user id or a guest session id (or both)."""

    user_id: int | None = None
    session_id: str | None = None


class InteractionCreateRequest(ActorRequest):
    media_item_id: int
    interaction_type: InteractionType


class RecommendationsRequest(ActorRequest):
    limit: int | None = Field(default=None, gt=0, le=100)


class WatchlistRequest(ActorRequest):
    media_item_id: int


class WatchlistRemoveResponse(BaseModel):
    success: bool


# ── System ─────────────────────────────────────────


class HealthResponse(BaseModel):
    status: str
    service: str
    timestamp: datetime
