"""Catalog routes: popular listing, search, ingestion and lookup."""

from fastapi import APIRouter, Depends, Query, status

from nextwatch.api.deps import get_catalog_service
from nextwatch.domain.records import MediaItemFields, MediaItemRecord, MediaType
from nextwatch.ports.catalog import SearchScope
from nextwatch.services import CatalogService

router = APIRouter(prefix="/media", tags=["Media"])


@router.get("/popular", response_model=list[MediaItemRecord])
async def get_popular_items(
    media_type: SearchScope = Query("all"),
    page: int = Query(1, ge=1),
    service: CatalogService = Depends(get_catalog_service),
) -> list[MediaItemRecord]:
    return await service.popular(media_type, page)


@router.get("/search", response_model=list[MediaItemRecord])
async def search_media(
    query: str = Query(..., min_length=1),
    media_type: SearchScope = Query("all"),
    page: int = Query(1, ge=1),
    service: CatalogService = Depends(get_catalog_service),
) -> list[MediaItemRecord]:
    return await service.search(query, media_type, page)


@router.post("", response_model=MediaItemRecord, status_code=status.HTTP_201_CREATED)
async def create_media_item(
    data: MediaItemFields,
    service: CatalogService = Depends(get_catalog_service),
) -> MediaItemRecord:
    return await service.create_media_item(data)


@router.get("/tmdb/{tmdb_id}", response_model=MediaItemRecord | None)
async def get_media_item_by_tmdb_id(
    tmdb_id: int,
    media_type: MediaType | None = Query(None),
    service: CatalogService = Depends(get_catalog_service),
) -> MediaItemRecord | None:
    return await service.get_by_tmdb_id(tmdb_id, media_type)
