"""Tests for the Search API client.

These tests cover client creation, cross-index operations and task waiting
against the fake API.
"""

from urllib.parse import parse_qs

import pytest

from algolia_client.api import SearchClient
from algolia_client.config import SearchConfig
from algolia_client.helpers.responses import MultipleIndexBatchIndexingResponse
from algolia_client.models import (
    Action,
    BatchOperation,
    ListIndicesResponse,
    MultipleQueriesResponse,
)


class TestCreation:
    """Tests for building clients."""

    def test_create_from_environment(self, monkeypatch):
        """Test that credentials fall back to environment variables."""
        monkeypatch.setenv("ALGOLIA_APP_ID", "env-app")
        monkeypatch.setenv("ALGOLIA_API_KEY", "env-key")

        client = SearchClient.create()

        assert client.config.app_id == "env-app"
        assert client.config.api_key == "env-key"

    def test_create_without_credentials(self, monkeypatch):
        monkeypatch.delenv("ALGOLIA_APP_ID", raising=False)
        monkeypatch.delenv("ALGOLIA_API_KEY", raising=False)

        with pytest.raises(ValueError, match="Application ID required"):
            SearchClient.create()

    def test_default_hosts(self):
        client = SearchClient.create("my-app", "key")
        hostnames = [host.hostname for host in client.transport.hosts.hosts]
        assert hostnames[:2] == ["my-app-dsn.algolia.net", "my-app.algolia.net"]
        assert len(hostnames) == 5

    def test_explicit_hosts(self):
        client = SearchClient.create("my-app", "key", hosts=["proxy.example.com"])
        hostnames = [host.hostname for host in client.transport.hosts.hosts]
        assert hostnames == ["proxy.example.com"]

    def test_config_is_copied(self, search_config):
        """Test that mutating the config after creation has no effect."""
        client = SearchClient.create_with_config(search_config)
        search_config.api_key = "changed"
        assert client.config.api_key == "test-key"

    def test_init_index_requires_name(self, search_client):
        with pytest.raises(ValueError, match="Missing the required parameter"):
            search_client.init_index("")

    async def test_async_context_manager(self, search_config, fake_api):
        http_client = fake_api.http_client()
        async with SearchClient.create_with_config(
            search_config, http_client=http_client
        ) as client:
            await client.list_indices()
        assert len(fake_api.requests) == 1


class TestCrossIndexOperations:
    """Tests for operations spanning indices."""

    async def test_list_indices(self, search_client, fake_api):
        fake_api.queue(
            {
                "items": [
                    {
                        "name": "products",
                        "entries": 12,
                        "updatedAt": "2024-01-01T00:00:00Z",
                        "numberOfPendingTasks": 1,
                    }
                ],
                "nbPages": 1,
            }
        )

        response = await search_client.list_indices()

        assert isinstance(response, ListIndicesResponse)
        assert response.items[0].name == "products"
        assert response.items[0].entries == 12
        assert response.items[0].number_of_pending_tasks == 1
        request = fake_api.requests[0]
        assert request.method == "GET"
        assert request.url.path == "/1/indexes"
        assert request.url.host == "test-app-dsn.algolia.net"

    async def test_multiple_queries(self, search_client, fake_api):
        """Test that search parameters are encoded into params strings."""
        fake_api.queue({"results": [{"hits": [], "index": "a"}, {"hits": [], "index": "b"}]})

        response = await search_client.multiple_queries(
            [
                {"indexName": "a", "query": "phone", "hitsPerPage": 2},
                {"indexName": "b", "facets": ["brand"], "analytics": False},
            ],
            strategy="stopIfEnoughMatches",
        )

        assert isinstance(response, MultipleQueriesResponse)
        assert [result.index for result in response.results] == ["a", "b"]
        body = fake_api.body()
        assert body["strategy"] == "stopIfEnoughMatches"
        assert body["requests"][0]["indexName"] == "a"
        assert parse_qs(body["requests"][0]["params"]) == {
            "query": ["phone"],
            "hitsPerPage": ["2"],
        }
        assert parse_qs(body["requests"][1]["params"]) == {
            "facets": ['["brand"]'],
            "analytics": ["false"],
        }

    async def test_multiple_queries_requires_index_name(self, search_client):
        with pytest.raises(ValueError, match="indexName"):
            await search_client.multiple_queries([{"query": "x"}])

    async def test_multiple_get_objects(self, search_client, fake_api):
        fake_api.queue({"results": [{"objectID": "1"}, None]})

        response = await search_client.multiple_get_objects(
            [{"indexName": "a", "objectID": "1"}, {"indexName": "b", "objectID": "2"}]
        )

        assert response.results == [{"objectID": "1"}, None]
        assert fake_api.requests[0].url.path == "/1/indexes/*/objects"

    async def test_multiple_batch_waits_per_index(self, search_client, fake_api):
        """Test that waiting polls the task of every index in the batch."""
        fake_api.queue(
            {"taskID": {"a": 11, "b": 12}, "objectIDs": ["1", "2"]},
            {"status": "published"},
            {"status": "published"},
        )

        response = await search_client.multiple_batch(
            [
                {"action": "addObject", "indexName": "a", "body": {"objectID": "1"}},
                {"action": "addObject", "indexName": "b", "body": {"objectID": "2"}},
            ]
        )
        assert isinstance(response, MultipleIndexBatchIndexingResponse)
        assert response.object_ids == ["1", "2"]

        await response.wait()
        await response.wait()

        paths = [request.url.path for request in fake_api.requests]
        assert paths == [
            "/1/indexes/*/batch",
            "/1/indexes/a/task/11",
            "/1/indexes/b/task/12",
        ]

    async def test_multiple_batch_requires_index_name(self, search_client):
        with pytest.raises(ValueError, match="indexName"):
            await search_client.multiple_batch([{"action": "addObject", "body": {}}])

    async def test_multiple_batch_accepts_models(self, search_client, fake_api):
        """Test that models and dicts are sent in the same wire form."""
        fake_api.queue({"taskID": {"a": 1, "b": 2}})

        await search_client.multiple_batch(
            [
                BatchOperation(
                    action=Action.DELETE_OBJECT, index_name="a", body={"objectID": "1"}
                ),
                {"action": "updateObject", "indexName": "b", "body": {"price": None}},
            ]
        )

        assert fake_api.body() == {
            "requests": [
                {"action": "deleteObject", "body": {"objectID": "1"}, "indexName": "a"},
                {"action": "updateObject", "body": {"price": None}, "indexName": "b"},
            ]
        }

    async def test_multiple_batch_unknown_action(self, search_client, fake_api):
        with pytest.raises(ValueError):
            await search_client.multiple_batch(
                [{"action": "explode", "indexName": "a", "body": {}}]
            )
        assert fake_api.requests == []

    async def test_copy_index_with_scope(self, search_client, fake_api):
        fake_api.queue({"taskID": 5})

        response = await search_client.copy_settings("src", "dst")

        assert response.task_id == 5
        assert fake_api.requests[0].url.path == "/1/indexes/src/operation"
        assert fake_api.requests[0].url.host == "test-app.algolia.net"
        assert fake_api.body() == {
            "operation": "copy",
            "destination": "dst",
            "scope": ["settings"],
        }

    async def test_copy_index_without_scope(self, search_client, fake_api):
        await search_client.copy_index("src", "dst")
        assert fake_api.body() == {"operation": "copy", "destination": "dst"}

    @pytest.mark.parametrize(
        "method, scope",
        [("copy_synonyms", ["synonyms"]), ("copy_rules", ["rules"])],
    )
    async def test_copy_parts(self, search_client, fake_api, method, scope):
        await getattr(search_client, method)("src", "dst")
        assert fake_api.body()["scope"] == scope

    async def test_move_index(self, search_client, fake_api):
        fake_api.queue({"taskID": 9}, {"status": "published"})

        response = await search_client.move_index("tmp", "products")
        await response.wait()

        assert fake_api.body(0) == {"operation": "move", "destination": "products"}
        assert fake_api.requests[1].url.path == "/1/indexes/tmp/task/9"

    async def test_move_index_requires_destination(self, search_client):
        with pytest.raises(ValueError, match="destination"):
            await search_client.move_index("tmp", "")


class TestWaitTask:
    """Tests for waiting on tasks from the client."""

    async def test_wait_task_polls_until_published(self, search_client, fake_api):
        fake_api.queue(
            {"status": "notPublished", "pendingTask": True},
            {"status": "published", "pendingTask": False},
        )

        task = await search_client.wait_task("products", 42)

        assert task.is_published
        assert [request.url.path for request in fake_api.requests] == [
            "/1/indexes/products/task/42"
        ] * 2

    async def test_custom_request(self, search_client, fake_api):
        """Test that custom calls are sent under the /1 prefix."""
        fake_api.queue({"ok": True})

        result = await search_client.custom_post(
            "/indexes/products/query", {"foo": "bar"}, {"query": "x"}
        )

        assert result == {"ok": True}
        request = fake_api.requests[0]
        assert request.url.path == "/1/indexes/products/query"
        assert request.url.params["foo"] == "bar"
        assert fake_api.body() == {"query": "x"}

    async def test_custom_get_and_delete(self, search_client, fake_api):
        await search_client.custom_get("/indexes")
        await search_client.custom_delete("/indexes/old")
        await search_client.custom_put("/indexes/products/settings")

        methods = [request.method for request in fake_api.requests]
        assert methods == ["GET", "DELETE", "PUT"]
        assert fake_api.body(2) == {}

    async def test_custom_request_requires_path(self, search_client):
        with pytest.raises(ValueError, match="'path'"):
            await search_client.custom_get("")
