"""Unit tests for PokeAPIClient."""
import asyncio

import httpx
import pytest

from moviehub.clients.pokeapi import PokeAPIClient, build_async_client
from moviehub.errors import UpstreamFailure
from moviehub.settings import Settings


def _client(handler, **kwargs) -> PokeAPIClient:
    http = httpx.AsyncClient(
        base_url="https://pokeapi.test/api/v2",
        transport=httpx.MockTransport(handler),
    )
    return PokeAPIClient(http, **kwargs)


def test_list_pokemon_unwraps_results():
    client = _client(
        lambda request: httpx.Response(
            200, json={"results": [{"name": "pikachu", "url": "https://pokeapi.co/api/v2/pokemon/25/"}]}
        )
    )

    results = asyncio.run(client.list_pokemon())

    assert [p.name for p in results] == ["pikachu"]
    assert results[0].url == "https://pokeapi.co/api/v2/pokemon/25/"


def test_custom_limit_and_offset_are_sent():
    seen = []

    def handler(request):
        seen.append(request.url.params)
        return httpx.Response(200, json={"results": []})

    asyncio.run(_client(handler, limit=20, offset=40).list_pokemon())

    assert seen[0]["limit"] == "20"
    assert seen[0]["offset"] == "40"


def test_network_error_keeps_cause():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(UpstreamFailure) as exc_info:
        asyncio.run(_client(handler).list_pokemon())

    assert isinstance(exc_info.value.cause, httpx.ReadTimeout)


def test_non_success_status_raises():
    with pytest.raises(UpstreamFailure) as exc_info:
        asyncio.run(_client(lambda request: httpx.Response(404)).list_pokemon())

    assert "404" in exc_info.value.reason


def test_build_async_client_uses_settings():
    settings = Settings(pokeapi_base_url="https://example.test/api/v2/", upstream_timeout_seconds=2.5)

    http = build_async_client(settings)

    assert str(http.base_url) == "https://example.test/api/v2/"
    assert http.timeout.read == 2.5
    asyncio.run(http.aclose())


def test_build_async_client_follows_redirects():
    http = build_async_client(Settings())

    assert http.follow_redirects is True
    asyncio.run(http.aclose())


def test_invalid_url_is_upstream_failure():
    def handler(request):
        raise httpx.InvalidURL("bad url")

    with pytest.raises(UpstreamFailure) as exc_info:
        asyncio.run(_client(handler).list_pokemon())

    assert isinstance(exc_info.value.cause, httpx.InvalidURL)
