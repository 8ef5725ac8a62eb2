from nextwatch.api.routes.interactions import router as interactions_router
from nextwatch.api.routes.media import router as media_router
from nextwatch.api.routes.recommendations import router as recommendations_router
from nextwatch.api.routes.users import router as users_router
from nextwatch.api.routes.watchlist import router as watchlist_router

all_routers = [
    users_router,
    media_router,
    interactions_router,
    recommendations_router,
    watchlist_router,
]
