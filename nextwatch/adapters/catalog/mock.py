import logging
import zlib

from nextwatch.domain.records import MediaItemFields
from nextwatch.ports.catalog import CatalogPort, SearchScope

logger = logging.getLogger(__name__)


class MockCatalogAdapter(CatalogPort):
    """
    Mock catalog adapter for running without a TMDB API key.

    Returns deterministic, realistic placeholder results: the same query and
    page always produce the same TMDB ids, so repeated searches upsert the
    same rows.
    """

    RESULTS_PER_TYPE = 2

    async def search(
        self,
        query: str,
        media_type: SearchScope = "all",
        page: int = 1,
    ) -> list[MediaItemFields]:
        kinds = ["movie", "tv"] if media_type == "all" else [media_type]
        seed = zlib.crc32(f"{query.lower()}:{page}".encode())
        items = [
            self._fake_item(query, kind, seed, n)
            for kind in kinds
            for n in range(self.RESULTS_PER_TYPE)
        ]
        logger.info("MockCatalog: search %r (%s, page %d) -> %d items", query, media_type, page, len(items))
        return items

    def _fake_item(self, query: str, kind: str, seed: int, n: int) -> MediaItemFields:
        offset = 0 if kind == "movie" else 500_000
        tmdb_id = 1_000_000 + offset + (seed + n) % 400_000
        label = "Movie" if kind == "movie" else "Series"
        return MediaItemFields(
            tmdb_id=tmdb_id,
            title=f"{query.title()} {label} {n + 1}",
            media_type=kind,
            overview=f"A placeholder {label.lower()} matching '{query}'.",
            release_date="2020-01-01" if kind == "movie" else "2021-06-15",
            genres=["Drama", "Comedy"] if n % 2 == 0 else ["Action", "Thriller"],
            vote_average=round(5.0 + (seed % 40) / 10 + n * 0.3, 1),
            vote_count=100 + (seed % 900),
            popularity=round(10.0 + (seed % 9000) / 100 + n, 3),
            adult=False,
            original_language="en",
        )
