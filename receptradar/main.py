"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from receptradar.api import favorites, pantry, recipes, saved_web_recipes
from receptradar.api import settings as settings_api
from receptradar.config import Settings, get_settings
from receptradar.database import open_store
from receptradar.services.cache_service import purge_expired_caches

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application around the given settings."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Migrate and open the store before serving; a failed migration aborts startup."""
        configure_logging(settings.log_level)
        app.state.settings = settings
        app.state.store = open_store(settings)
        with app.state.store.session() as db:
            purge_expired_caches(db)
        if not settings.is_llm_configured:
            logger.info("Recipe generation is not configured; only stored recipes are served")
        yield
        app.state.store.close()

    app = FastAPI(
        title="Receptradar API",
        description="Local pantry store with generated recipe suggestions",
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS middleware for development
    if settings.is_development:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["http://localhost:8081", "http://localhost:19006"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Register routers
    app.include_router(pantry.router)
    app.include_router(recipes.router)
    app.include_router(favorites.router)
    app.include_router(saved_web_recipes.router)
    app.include_router(settings_api.router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "environment": settings.environment,
            "recipe_generation": settings.is_llm_configured,
        }

    return app


app = create_app()
