"""
Shared fixtures for Meta launch tests.
Graph API traffic is served by an in-process httpx.MockTransport, so no test
touches the network.
"""

import json
from typing import Any, Callable, Union

import httpx
import pytest
import pytest_asyncio  # type: ignore

from adapters.meta.client import MetaAdsClient
from config.meta import MetaCredentials

IMAGE_URL = "https://img.example.com/a.png"

ResponseSpec = Union[tuple[int, Any], Callable[[httpx.Request], httpx.Response]]


class FakeGraphAPI:
    """Records requests and answers by the last path segment (the edge)."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.responses: dict[str, ResponseSpec] = {
            "campaigns": (200, {"id": "120210000000001"}),
            "adsets": (200, {"id": "120210000000002"}),
            "adimages": (
                200,
                {"images": {"a.png": {"hash": "9f2c4e1b7a", "url": IMAGE_URL}}},
            ),
            "adcreatives": (200, {"id": "120210000000003"}),
            "ads": (200, {"id": "120210000000004"}),
        }

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        spec = self.responses[request.url.path.rsplit("/", 1)[-1]]
        if callable(spec):
            return spec(request)
        status_code, body = spec
        if isinstance(body, (dict, list)):
            return httpx.Response(status_code, json=body)
        return httpx.Response(status_code, text=body)

    def fail(self, edge: str, status_code: int, body: Any) -> None:
        self.responses[edge] = (status_code, body)

    @property
    def edges(self) -> list[str]:
        return [r.url.path.rsplit("/", 1)[-1] for r in self.requests]

    def body(self, edge: str) -> dict:
        request = next(r for r in self.requests if r.url.path.endswith(f"/{edge}"))
        return json.loads(request.content)


@pytest.fixture
def credentials() -> MetaCredentials:
    return MetaCredentials(
        app_id="1234567890",
        app_secret="app-secret",
        access_token="test-token",
        ad_account_id="987654321",
        page_id="555000111",
        api_version="v18.0",
    )


@pytest.fixture
def graph_api() -> FakeGraphAPI:
    return FakeGraphAPI()


@pytest_asyncio.fixture
async def meta_client(credentials: MetaCredentials, graph_api: FakeGraphAPI):
    async with httpx.AsyncClient(transport=httpx.MockTransport(graph_api.handler)) as http:
        yield MetaAdsClient(credentials, http_client=http)
