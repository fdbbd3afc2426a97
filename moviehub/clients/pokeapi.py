# moviehub/clients/pokeapi.py

import logging
from typing import List, Optional

import httpx
from pydantic import ValidationError

from moviehub.errors import UpstreamFailure
from moviehub.models.pokemon import PokemonPage, PokemonRef
from moviehub.settings import Settings

logger = logging.getLogger(__name__)


def build_async_client(
    settings: Settings,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Create the shared `httpx.AsyncClient` used for upstream calls.

    Redirects are followed, so a moved upstream resource still resolves.
    """
    return httpx.AsyncClient(
        base_url=settings.pokeapi_base_url.rstrip("/"),
        timeout=httpx.Timeout(settings.upstream_timeout_seconds),
        follow_redirects=True,
        headers={"Accept": "application/json"},
        transport=transport,
    )


class PokeAPIClient:
    """
    Thin wrapper around PokeAPI. One request per call, no retries.

    Every failure is raised as UpstreamFailure so callers handle a single
    error kind.
    """

    def __init__(self, http: httpx.AsyncClient, limit: int = 100000, offset: int = 0):
        self.http = http
        self.limit = limit
        self.offset = offset

    async def list_pokemon(self) -> List[PokemonRef]:
        params = {"limit": self.limit, "offset": self.offset}

        try:
            resp = await self.http.get("/pokemon", params=params)
        except Exception as e:
            # transport errors, invalid URLs and anything else raised while sending
            raise UpstreamFailure("request failed", cause=e) from e

        if not resp.is_success:
            raise UpstreamFailure(f"HTTP {resp.status_code} from {resp.url}")

        try:
            page = PokemonPage.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            # json.JSONDecodeError is a ValueError
            raise UpstreamFailure("invalid response body", cause=e) from e

        logger.debug("Fetched %d pokemon from %s", len(page.results), resp.url)
        return page.results
