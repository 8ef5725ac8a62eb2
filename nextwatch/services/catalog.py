"""Media catalog: ingestion, lookup, popular listing and search."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from nextwatch.domain.errors import CatalogUnavailable
from nextwatch.domain.records import MediaItemFields, MediaItemRecord, MediaType
from nextwatch.ports.catalog import CatalogPort, SearchScope
from nextwatch.repositories import MediaRepository

logger = logging.getLogger(__name__)


def _kind_filter(media_type: SearchScope) -> str | None:
    return None if media_type == "all" else media_type


class CatalogService:
    def __init__(
        self,
        session: AsyncSession,
        catalog: CatalogPort | None = None,
        page_size: int = 20,
    ) -> None:
        self._media = MediaRepository(session)
        self._catalog = catalog
        self._page_size = page_size

    async def create_media_item(self, fields: MediaItemFields) -> MediaItemRecord:
        """Store an item from TMDB, refreshing it if the (tmdb_id, media_type) pair is already known."""
        item = await self._media.upsert(fields)
        logger.info("Stored media item tmdb_id=%d (%s) as id=%d", item.tmdb_id, item.media_type, item.id)
        return item

    async def get_by_tmdb_id(
        self, tmdb_id: int, media_type: MediaType | None = None
    ) -> MediaItemRecord | None:
        return await self._media.get_by_tmdb_id(tmdb_id, media_type)

    async def popular(self, media_type: SearchScope = "all", page: int = 1) -> list[MediaItemRecord]:
        offset = (page - 1) * self._page_size
        return await self._media.popular(_kind_filter(media_type), self._page_size, offset)

    async def search(
        self, query: str, media_type: SearchScope = "all", page: int = 1
    ) -> list[MediaItemRecord]:
        """
        Search by title.

        The external catalog is queried for the requested page and every hit
        is upserted, so results page the same way the catalog does. When the
        catalog cannot be reached (no API key, network failure) the search
        falls back to a title match against already ingested items.
        """
        if self._catalog is not None:
            try:
                hits = await self._catalog.search(query, media_type, page)
            except CatalogUnavailable as exc:
                logger.warning("Catalog unavailable, searching %r locally: %s", query, exc.message)
            else:
                stored = await self._media.upsert_many(hits)
                logger.info("Search %r ingested %d items from external catalog", query, len(stored))
                return stored

        offset = (page - 1) * self._page_size
        local = await self._media.search_local(query, _kind_filter(media_type), self._page_size, offset)
        logger.debug("Search %r served from local catalog (%d items)", query, len(local))
        return local
