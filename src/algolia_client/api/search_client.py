"""Client for the Algolia Search API."""

import logging
from typing import Any

import httpx

from algolia_client.api.base import BaseApiClient, Options, require
from algolia_client.api.search_index import SearchIndex
from algolia_client.config import SearchConfig
from algolia_client.helpers.responses import (
    IndexingResponse,
    MultipleIndexBatchIndexingResponse,
)
from algolia_client.models.search import (
    BatchOperation,
    GetObjectsResponse,
    ListIndicesResponse,
    MultipleQueriesResponse,
    TaskStatus,
)
from algolia_client.transport.hosts import HostRanker
from algolia_client.transport.requester import Transport
from algolia_client.util.paths import api_path, build_params_string

logger = logging.getLogger(__name__)


class SearchClient(BaseApiClient):
    """Async client for the Search API.

    Cross-index operations live here; per-index operations are on the
    SearchIndex returned by `init_index`.

    Example:
        async with SearchClient.create("APP_ID", "API_KEY") as client:
            index = client.init_index("products")
            response = await index.save_objects(records)
            await response.wait()
    """

    _config: SearchConfig

    @classmethod
    def create(
        cls,
        app_id: str | None = None,
        api_key: str | None = None,
        **kwargs,
    ) -> "SearchClient":
        """Create a client from credentials.

        Args:
            app_id: Application ID. Defaults to $ALGOLIA_APP_ID.
            api_key: API key. Defaults to $ALGOLIA_API_KEY.
            **kwargs: Other SearchConfig fields.

        Raises:
            ValueError: If credentials are missing.
        """
        return cls.create_with_config(SearchConfig.create(app_id, api_key, **kwargs))

    @classmethod
    def create_with_config(
        cls, config: SearchConfig, http_client: httpx.AsyncClient | None = None
    ) -> "SearchClient":
        """Create a client from a configuration.

        Args:
            config: The Search configuration. It is copied, so later changes
                to it do not affect the client.
            http_client: Optional httpx client to send requests with.
        """
        config = config.model_copy(deep=True)
        if config.hosts:
            hosts = HostRanker.from_hostnames(config.hosts, ttl=config.host_ttl)
        else:
            hosts = HostRanker.for_search(config.app_id, ttl=config.host_ttl)
        logger.debug(
            "Search client for %s on %s",
            config.app_id,
            [host.hostname for host in hosts.hosts],
        )
        return cls(Transport(config, hosts, http_client=http_client), config)

    def init_index(self, index_name: str) -> SearchIndex:
        return SearchIndex(index_name, self._transport, self._config, self)

    async def list_indices(self, request_options: Options = None) -> ListIndicesResponse:
        response = await self._transport.read(
            "GET", "/1/indexes", options=request_options
        )
        return ListIndicesResponse.model_validate(response)

    async def multiple_queries(
        self,
        queries: list[dict[str, Any]],
        strategy: str = "none",
        request_options: Options = None,
    ) -> MultipleQueriesResponse:
        """Run several searches, possibly on several indices, in one call.

        Args:
            queries: Each dict has an "indexName" and any search parameters.
            strategy: "none" runs every query; "stopIfEnoughMatches" stops
                once a query returns enough hits.
        """
        requests = []
        for query in queries:
            params = dict(query)
            index_name = params.pop("indexName", None)
            require(index_name, "indexName", "multiple_queries")
            requests.append(
                {"indexName": index_name, "params": build_params_string(params)}
            )

        response = await self._transport.read(
            "POST",
            "/1/indexes/*/queries",
            body={"requests": requests, "strategy": strategy},
            options=request_options,
        )
        return MultipleQueriesResponse.model_validate(response)

    async def multiple_get_objects(
        self, requests: list[dict[str, Any]], request_options: Options = None
    ) -> GetObjectsResponse:
        """Fetch records from several indices.

        Args:
            requests: Dicts with "indexName", "objectID" and optionally
                "attributesToRetrieve".
        """
        response = await self._transport.read(
            "POST",
            "/1/indexes/*/objects",
            body={"requests": requests},
            options=request_options,
        )
        return GetObjectsResponse.model_validate(response)

    async def multiple_batch(
        self,
        operations: list[BatchOperation | dict[str, Any]],
        request_options: Options = None,
    ) -> MultipleIndexBatchIndexingResponse:
        """Send batch operations targeting several indices.

        Args:
            operations: Models, or dicts with "action", "indexName" and "body".

        Raises:
            ValueError: If an operation has no index name or an unknown action.
        """
        requests = []
        for operation in operations:
            if not isinstance(operation, BatchOperation):
                operation = BatchOperation.model_validate(operation)
            require(operation.index_name, "indexName", "multiple_batch")
            requests.append(operation.to_request())
        response = await self._transport.write(
            "POST",
            "/1/indexes/*/batch",
            body={"requests": requests},
            options=request_options,
        )
        return MultipleIndexBatchIndexingResponse(response, self)

    async def copy_index(
        self,
        source: str,
        destination: str,
        scope: list[str] | None = None,
        request_options: Options = None,
    ) -> IndexingResponse:
        """Copy an index, or only parts of it when a scope is given.

        Args:
            scope: Any of "settings", "synonyms" and "rules". Records are
                copied only when no scope is given.
        """
        body: dict[str, Any] = {"operation": "copy", "destination": destination}
        if scope:
            body["scope"] = scope
        return await self._operation(source, body, request_options)

    async def copy_settings(
        self, source: str, destination: str, request_options: Options = None
    ) -> IndexingResponse:
        return await self.copy_index(source, destination, ["settings"], request_options)

    async def copy_synonyms(
        self, source: str, destination: str, request_options: Options = None
    ) -> IndexingResponse:
        return await self.copy_index(source, destination, ["synonyms"], request_options)

    async def copy_rules(
        self, source: str, destination: str, request_options: Options = None
    ) -> IndexingResponse:
        return await self.copy_index(source, destination, ["rules"], request_options)

    async def move_index(
        self, source: str, destination: str, request_options: Options = None
    ) -> IndexingResponse:
        """Rename an index, replacing the destination if it exists."""
        body = {"operation": "move", "destination": destination}
        return await self._operation(source, body, request_options)

    async def _operation(
        self, source: str, body: dict[str, Any], request_options: Options
    ) -> IndexingResponse:
        require(source, "source", body["operation"] + "_index")
        require(body["destination"], "destination", body["operation"] + "_index")
        response = await self._transport.write(
            "POST",
            api_path("/1/indexes/%s/operation", source),
            body=body,
            options=request_options,
        )
        return IndexingResponse(response, self.init_index(source))

    async def wait_task(
        self, index_name: str, task_id: int, request_options: Options = None, **kwargs
    ) -> TaskStatus:
        return await self.init_index(index_name).wait_task(
            task_id, request_options, **kwargs
        )
