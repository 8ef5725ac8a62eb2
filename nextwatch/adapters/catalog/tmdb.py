import logging
from typing import Any

import httpx

from nextwatch.adapters.catalog.genres import genre_names
from nextwatch.domain.errors import CatalogError, CatalogUnavailable
from nextwatch.domain.records import MediaItemFields
from nextwatch.ports.catalog import CatalogPort, SearchScope

logger = logging.getLogger(__name__)

SEARCH_ENDPOINTS: dict[str, str] = {"all": "multi", "movie": "movie", "tv": "tv"}


def parse_result(raw: dict[str, Any], media_type: str) -> MediaItemFields:
    """Convert one TMDB search hit into catalog fields."""
    return MediaItemFields(
        tmdb_id=raw["id"],
        title=raw.get("title") or raw.get("name") or "",
        media_type=media_type,
        poster_path=raw.get("poster_path"),
        backdrop_path=raw.get("backdrop_path"),
        overview=raw.get("overview") or "",
        release_date=raw.get("release_date") or raw.get("first_air_date") or None,
        genres=genre_names(raw.get("genre_ids") or []),
        vote_average=min(max(float(raw.get("vote_average") or 0.0), 0.0), 10.0),
        vote_count=int(raw.get("vote_count") or 0),
        popularity=max(float(raw.get("popularity") or 0.0), 0.0),
        adult=bool(raw.get("adult", False)),
        original_language=raw.get("original_language") or "en",
    )


class TMDBCatalogAdapter(CatalogPort):
    """Catalog adapter backed by The Movie Database search API."""

    def __init__(
        self,
        api_key: str | None,
        base_url: str = "https://api.themoviedb.org/3",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=httpx.Timeout(timeout),
            headers={"Accept": "application/json"},
            transport=transport,
        )

    async def search(
        self,
        query: str,
        media_type: SearchScope = "all",
        page: int = 1,
    ) -> list[MediaItemFields]:
        """Search TMDB; person hits from the multi endpoint are dropped."""
        if not self._api_key:
            raise CatalogUnavailable("TMDB_API_KEY environment variable is required")

        endpoint = SEARCH_ENDPOINTS[media_type]
        params = {
            "api_key": self._api_key,
            "query": query,
            "page": page,
            "language": "en-US",
            "include_adult": "false",
        }
        logger.info("TMDB search: endpoint=%s, query=%r, page=%d", endpoint, query, page)
        try:
            resp = await self._client.get(f"/search/{endpoint}", params=params)
        except httpx.RequestError as exc:
            raise CatalogUnavailable(f"TMDB request failed: {exc}") from exc

        if resp.is_error:
            logger.warning("TMDB search failed: %d %s", resp.status_code, resp.reason_phrase)
            raise CatalogError(f"TMDB API error: {resp.status_code} {resp.reason_phrase}")

        items: list[MediaItemFields] = []
        for raw in resp.json().get("results", []):
            # Only the multi endpoint tags each hit with its type.
            kind = raw.get("media_type") or (media_type if media_type != "all" else None)
            if kind not in ("movie", "tv"):
                continue
            items.append(parse_result(raw, kind))

        logger.info("TMDB search returned %d items", len(items))
        return items

    async def aclose(self) -> None:
        await self._client.aclose()
