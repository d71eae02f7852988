"""Shared test fixtures and configuration for the algolia_client test suite."""

import json
from typing import Any

import httpx
import pytest

from algolia_client.api import (
    AnalyticsClient,
    InsightsClient,
    PersonalizationClient,
    SearchClient,
)
from algolia_client.config import (
    AnalyticsConfig,
    InsightsConfig,
    PersonalizationConfig,
    SearchConfig,
)


class FakeApi:
    """httpx MockTransport handler answering from a queue.

    Queued items are returned in order: a dict is sent back as a 200 JSON
    response, an httpx.Response as is, an exception is raised and a callable
    is called with the request. Once the queue is empty every request gets
    an empty 200 JSON object.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._queue: list[Any] = []

    def queue(self, *items: Any) -> None:
        self._queue.extend(items)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        item = self._queue.pop(0) if self._queue else {}
        if isinstance(item, Exception):
            raise item
        if isinstance(item, httpx.Response):
            return item
        if callable(item):
            return item(request)
        return httpx.Response(200, json=item)

    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))

    def body(self, position: int = -1) -> Any:
        """Decoded JSON body of a recorded request."""
        return json.loads(self.requests[position].content)

    @property
    def hosts(self) -> list[str]:
        return [request.url.host for request in self.requests]


@pytest.fixture
def fake_api() -> FakeApi:
    """Create a fake API recording every request.

    Returns:
        FakeApi: Handler to queue responses on and inspect requests with.
    """
    return FakeApi()


@pytest.fixture
def search_config() -> SearchConfig:
    """Search configuration with instant task polling."""
    return SearchConfig(app_id="test-app", api_key="test-key", wait_task_interval=0)


@pytest.fixture
async def search_client(fake_api, search_config):
    """Search client wired to the fake API.

    Yields:
        SearchClient: Client whose requests are served by fake_api.
    """
    client = SearchClient.create_with_config(
        search_config, http_client=fake_api.http_client()
    )
    yield client
    await client.close()


@pytest.fixture
def index(search_client):
    """SearchIndex named "products" on the fake API."""
    return search_client.init_index("products")


@pytest.fixture
async def analytics_client(fake_api):
    client = AnalyticsClient.create_with_config(
        AnalyticsConfig(app_id="test-app", api_key="test-key", region="de"),
        http_client=fake_api.http_client(),
    )
    yield client
    await client.close()


@pytest.fixture
async def insights_client(fake_api):
    client = InsightsClient.create_with_config(
        InsightsConfig(app_id="test-app", api_key="test-key"),
        http_client=fake_api.http_client(),
    )
    yield client
    await client.close()


@pytest.fixture
async def personalization_client(fake_api):
    client = PersonalizationClient.create_with_config(
        PersonalizationConfig(app_id="test-app", api_key="test-key", region="eu"),
        http_client=fake_api.http_client(),
    )
    yield client
    await client.close()
