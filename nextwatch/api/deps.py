"""FastAPI dependencies resolving the objects owned by ``create_app``."""

from collections.abc import AsyncGenerator
from typing import Any

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from nextwatch.config import Settings
from nextwatch.ports.catalog import CatalogPort
from nextwatch.ports.recommender import RecommenderPort
from nextwatch.services import (
    CatalogService,
    InteractionService,
    ProfileService,
    RecommendationService,
    WatchlistService,
)


def _get_state_attr(request: Request, name: str, error_detail: str) -> Any:
    value = getattr(request.app.state, name, None)
    if value is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=error_detail,
        )
    return value


def get_settings(request: Request) -> Settings:
    return _get_state_attr(request, "settings", "Settings not initialized")


def get_catalog(request: Request) -> CatalogPort:
    return _get_state_attr(request, "catalog", "Catalog adapter not initialized")


def get_recommender(request: Request) -> RecommenderPort:
    return _get_state_attr(request, "recommender", "Recommender not initialized")


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """One session and transaction per request; committed on success."""
    factory = _get_state_attr(request, "session_factory", "Database not initialized")
    async with factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


def get_profile_service(session: AsyncSession = Depends(get_session)) -> ProfileService:
    return ProfileService(session)


def get_catalog_service(
    session: AsyncSession = Depends(get_session),
    catalog: CatalogPort = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
) -> CatalogService:
    return CatalogService(session, catalog, page_size=settings.page_size)


def get_interaction_service(session: AsyncSession = Depends(get_session)) -> InteractionService:
    return InteractionService(session)


def get_watchlist_service(session: AsyncSession = Depends(get_session)) -> WatchlistService:
    return WatchlistService(session)


def get_recommendation_service(
    session: AsyncSession = Depends(get_session),
    recommender: RecommenderPort = Depends(get_recommender),
    settings: Settings = Depends(get_settings),
) -> RecommendationService:
    return RecommendationService(
        session,
        recommender,
        pool_factor=settings.recommendation_pool_factor,
        dedupe_pending=settings.dedupe_pending_recommendations,
    )
