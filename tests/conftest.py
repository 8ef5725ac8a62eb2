import itertools
from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from nextwatch.adapters.catalog import MockCatalogAdapter
from nextwatch.config import CatalogProvider, Settings
from nextwatch.database import build_engine, build_session_factory, create_schema
from nextwatch.domain.records import MediaItemFields, MediaItemRecord, UserProfileRecord
from nextwatch.main import create_app
from nextwatch.repositories import MediaRepository, ProfileRepository

BASE = "http://test"


@pytest.fixture
async def engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """A fresh SQLite database per test, with all tables created."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return build_session_factory(engine)


@pytest.fixture
async def session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        database_url="sqlite+aiosqlite://",
        catalog_provider=CatalogProvider.MOCK,
        tmdb_api_key=None,
    )


@pytest.fixture
async def client(test_settings, session_factory) -> AsyncGenerator[AsyncClient, None]:
    app = create_app(
        test_settings,
        session_factory=session_factory,
        catalog=MockCatalogAdapter(),
    )
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url=BASE) as c:
        yield c


@pytest.fixture
def make_media(session):
    """Insert a catalog item; every call gets a distinct tmdb_id unless given one."""
    tmdb_ids = itertools.count(10_000)

    async def _make(**overrides) -> MediaItemRecord:
        fields = {
            "tmdb_id": next(tmdb_ids),
            "title": "Untitled",
            "media_type": "movie",
            "overview": "",
            "genres": [],
            "vote_average": 5.0,
            "vote_count": 100,
            "popularity": 10.0,
            "original_language": "en",
        }
        fields.update(overrides)
        return await MediaRepository(session).upsert(MediaItemFields(**fields))

    return _make


@pytest.fixture
def make_user(session):
    names = itertools.count(1)

    async def _make() -> UserProfileRecord:
        n = next(names)
        return await ProfileRepository(session).create(f"viewer{n}", f"viewer{n}@example.com")

    return _make

