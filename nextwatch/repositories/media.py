import logging
from collections.abc import Collection

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from nextwatch.domain import numeric
from nextwatch.domain.models import MediaItem, utcnow
from nextwatch.domain.records import MediaItemFields, MediaItemRecord
from nextwatch.repositories.base import insert_for
from nextwatch.repositories.rows import media_record

logger = logging.getLogger(__name__)


class MediaRepository:
    """Catalog store: media items keyed by TMDB id."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, media_item_id: int) -> MediaItemRecord | None:
        row = await self._session.get(MediaItem, media_item_id)
        return media_record(row) if row else None

    async def exists(self, media_item_id: int) -> bool:
        found = await self._session.scalar(
            select(MediaItem.id).where(MediaItem.id == media_item_id)
        )
        return found is not None

    async def get_by_tmdb_id(self, tmdb_id: int, media_type: str | None = None) -> MediaItemRecord | None:
        """Look up by TMDB id. Without a media type a movie wins over a show with the same id."""
        stmt = select(MediaItem).where(MediaItem.tmdb_id == tmdb_id)
        if media_type:
            stmt = stmt.where(MediaItem.media_type == media_type)
        row = await self._session.scalar(stmt.order_by(MediaItem.media_type.asc()).limit(1))
        return media_record(row) if row else None

    async def upsert(self, fields: MediaItemFields) -> MediaItemRecord:
        """Insert or refresh by (tmdb_id, media_type). Keeps id and created_at of an existing row."""
        values = fields.model_dump()
        values["vote_average"] = numeric.encode_rating(fields.vote_average)
        values["popularity"] = numeric.encode_popularity(fields.popularity)
        now = utcnow()

        stmt = insert_for(self._session, MediaItem).values(**values, created_at=now, updated_at=now)
        refreshed = {key: stmt.excluded[key] for key in values if key not in ("tmdb_id", "media_type")}
        stmt = stmt.on_conflict_do_update(
            index_elements=["tmdb_id", "media_type"],
            set_={**refreshed, "updated_at": now},
        ).returning(MediaItem)

        result = await self._session.scalars(stmt, execution_options={"populate_existing": True})
        row = result.one()
        logger.debug("Upserted media item tmdb_id=%d as id=%d", row.tmdb_id, row.id)
        return media_record(row)

    async def upsert_many(self, items: list[MediaItemFields]) -> list[MediaItemRecord]:
        return [await self.upsert(item) for item in items]

    async def candidates(
        self,
        exclude_ids: Collection[int],
        media_type: str | None,
        limit: int,
    ) -> list[MediaItemRecord]:
        """Best-rated items, then most popular, skipping ``exclude_ids``."""
        stmt = select(MediaItem)
        if exclude_ids:
            stmt = stmt.where(MediaItem.id.not_in(list(exclude_ids)))
        if media_type:
            stmt = stmt.where(MediaItem.media_type == media_type)
        stmt = stmt.order_by(
            MediaItem.vote_average.desc(),
            MediaItem.popularity.desc(),
            MediaItem.id.asc(),
        ).limit(limit)
        rows = await self._session.scalars(stmt)
        return [media_record(row) for row in rows]

    async def popular(self, media_type: str | None, limit: int, offset: int) -> list[MediaItemRecord]:
        stmt = select(MediaItem)
        if media_type:
            stmt = stmt.where(MediaItem.media_type == media_type)
        stmt = (
            stmt.order_by(
                MediaItem.popularity.desc(),
                MediaItem.vote_average.desc(),
                MediaItem.vote_count.desc(),
                MediaItem.id.asc(),
            )
            .limit(limit)
            .offset(offset)
        )
        rows = await self._session.scalars(stmt)
        return [media_record(row) for row in rows]

    async def search_local(
        self,
        query: str,
        media_type: str | None,
        limit: int,
        offset: int,
    ) -> list[MediaItemRecord]:
        """Case-insensitive title match against already ingested items."""
        stmt = select(MediaItem).where(MediaItem.title.icontains(query, autoescape=True))
        if media_type:
            stmt = stmt.where(MediaItem.media_type == media_type)
        stmt = (
            stmt.order_by(MediaItem.popularity.desc(), MediaItem.id.asc())
            .limit(limit)
            .offset(offset)
        )
        rows = await self._session.scalars(stmt)
        return [media_record(row) for row in rows]
