from nextwatch.adapters.catalog.mock import MockCatalogAdapter
from nextwatch.adapters.catalog.tmdb import TMDBCatalogAdapter

__all__ = ["MockCatalogAdapter", "TMDBCatalogAdapter"]
