# moviehub/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from moviehub.api.articles import router as articles_router
from moviehub.api.movies import router as movies_router
from moviehub.api.pokemon import router as pokemon_router
from moviehub.api.users import router as users_router
from moviehub.clients.pokeapi import build_async_client
from moviehub.errors import register_exception_handlers
from moviehub.logging_setup import setup_logging
from moviehub.settings import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Open the shared upstream HTTP client on startup, close it on shutdown.
    """
    settings = get_settings()
    app.state.http_client = build_async_client(settings)
    logger.info("Upstream HTTP client opened for %s", settings.pokeapi_base_url)

    yield

    await app.state.http_client.aclose()
    app.state.http_client = None
    logger.info("Upstream HTTP client closed")


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Moviehub API",
        version="0.1.0",
        lifespan=lifespan,
    )

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    app.include_router(movies_router)
    app.include_router(articles_router)
    app.include_router(users_router)
    app.include_router(pokemon_router)

    register_exception_handlers(app)

    return app


app = create_app()
