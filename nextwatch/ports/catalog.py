"""Catalog port: abstract interface for the external media catalog."""

from abc import ABC, abstractmethod
from typing import Literal

from nextwatch.domain.records import MediaItemFields

SearchScope = Literal["all", "movie", "tv"]


class CatalogPort(ABC):
    """Abstraction for the external movie/TV lookup service."""

    @abstractmethod
    async def search(
        self,
        query: str,
        media_type: SearchScope = "all",
        page: int = 1,
    ) -> list[MediaItemFields]:
        """Search the catalog. Results that are not movies or shows are dropped."""
        ...

    async def aclose(self) -> None:
        """Release any held connections."""
        return None
