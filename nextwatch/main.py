"""FastAPI application factory and entry point for NextWatch."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from nextwatch.adapters.catalog import MockCatalogAdapter, TMDBCatalogAdapter
from nextwatch.adapters.recommender import HeuristicRecommenderAdapter
from nextwatch.api.routes import all_routers
from nextwatch.api.schemas import HealthResponse
from nextwatch.config import CatalogProvider, Settings, settings as default_settings
from nextwatch.database import build_engine, build_session_factory
from nextwatch.domain.errors import NextWatchError
from nextwatch.ports.catalog import CatalogPort
from nextwatch.ports.recommender import RecommenderPort

logging.basicConfig(
    level=default_settings.log_level,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


def build_catalog(config: Settings) -> CatalogPort:
    if config.catalog_provider == CatalogProvider.MOCK:
        return MockCatalogAdapter()
    return TMDBCatalogAdapter(
        api_key=config.tmdb_api_key,
        base_url=config.tmdb_base_url,
        timeout=config.tmdb_timeout,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup and shutdown events."""
    config: Settings = app.state.settings
    logger.info("NextWatch starting up...")
    logger.info("Catalog provider: %s", config.catalog_provider.value)
    logger.info(
        "Recommendations: default limit=%d, pool factor=%d, dedupe pending=%s",
        config.recommendation_default_limit,
        config.recommendation_pool_factor,
        config.dedupe_pending_recommendations,
    )
    yield
    logger.info("NextWatch shutting down...")
    await app.state.catalog.aclose()
    if app.state.engine is not None:
        await app.state.engine.dispose()


async def handle_domain_error(request: Request, exc: NextWatchError) -> JSONResponse:
    if exc.status >= 500:
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status, content={"detail": exc.message, "code": exc.code})


def create_app(
    config: Settings | None = None,
    *,
    session_factory: async_sessionmaker[AsyncSession] | None = None,
    catalog: CatalogPort | None = None,
    recommender: RecommenderPort | None = None,
) -> FastAPI:
    """Build and configure the FastAPI application.

    Store, catalog and recommender are created here (or injected) and kept
    on ``app.state``; request handlers receive them through dependencies.
    """
    config = config or default_settings
    application = FastAPI(
        title=config.app_name,
        description="Movie & TV discovery with swipe-style recommendations",
        version="1.0.0",
        lifespan=lifespan,
    )

    engine = None
    if session_factory is None:
        engine = build_engine(config.database_url, echo=config.database_echo)
        session_factory = build_session_factory(engine)

    application.state.settings = config
    application.state.engine = engine
    application.state.session_factory = session_factory
    application.state.catalog = catalog or build_catalog(config)
    application.state.recommender = recommender or HeuristicRecommenderAdapter()

    # ── Middleware ──────────────────────────────────
    application.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Errors ─────────────────────────────────────
    application.add_exception_handler(NextWatchError, handle_domain_error)

    # ── Routes ─────────────────────────────────────
    for router in all_routers:
        application.include_router(router)

    # ── Health Check ───────────────────────────────
    @application.get("/health", response_model=HealthResponse, tags=["System"])
    async def health() -> HealthResponse:
        return HealthResponse(
            status="healthy",
            service="nextwatch",
            timestamp=datetime.now(timezone.utc),
        )

    return application


app = create_app()
