import asyncio

import httpx
import pytest
from fastapi.testclient import TestClient

from moviehub.clients.pokeapi import build_async_client
from moviehub.dependencies import get_http_client
from moviehub.main import create_app
from moviehub.settings import get_settings


class UpstreamStub:
    """Records outbound requests and answers them with a configurable handler."""

    def __init__(self):
        self.requests = []
        self.handler = lambda request: httpx.Response(200, json={"results": []})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)


@pytest.fixture
def upstream():
    return UpstreamStub()


@pytest.fixture
def http_client(upstream):
    http = build_async_client(get_settings(), transport=httpx.MockTransport(upstream))
    yield http
    asyncio.run(http.aclose())


@pytest.fixture
def app(http_client):
    app = create_app()
    app.dependency_overrides[get_http_client] = lambda: http_client
    return app


@pytest.fixture
def client(app):
    return TestClient(app)
