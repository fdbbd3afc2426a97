# moviehub/dependencies.py

import httpx
from fastapi import Depends, Request

from moviehub.clients.pokeapi import PokeAPIClient
from moviehub.errors import UpstreamFailure
from moviehub.settings import Settings, get_settings


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Shared client opened by the application lifespan."""
    client = getattr(request.app.state, "http_client", None)
    if client is None:
        raise UpstreamFailure("HTTP client not initialized")
    return client


def get_pokeapi_client(
    http: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> PokeAPIClient:
    return PokeAPIClient(
        http,
        limit=settings.pokemon_limit,
        offset=settings.pokemon_offset,
    )
