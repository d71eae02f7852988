"""Operations scoped to one index of the Search API."""

import logging
import uuid
from typing import TYPE_CHECKING, Any, Iterable

from algolia_client.api.base import Options, require
from algolia_client.config import SearchConfig
from algolia_client.exceptions import AlgoliaApiError, MissingObjectIdError
from algolia_client.helpers.batching import (
    MISSING_OBJECT_ID_HINT,
    MISSING_OBJECT_ID_MESSAGE,
    build_batch,
    chunk,
    ensure_object_id,
    map_object_ids,
)
from algolia_client.helpers.iterators import (
    ObjectIterator,
    RuleIterator,
    SynonymIterator,
)
from algolia_client.helpers.responses import (
    BatchIndexingResponse,
    IndexingResponse,
    MultiResponse,
    NullResponse,
)
from algolia_client.helpers.tasks import wait_for_task
from algolia_client.models.search import (
    Action,
    GetObjectsResponse,
    SearchForFacetValuesResponse,
    SearchResponse,
    TaskStatus,
)
from algolia_client.transport.requester import Transport
from algolia_client.util.paths import api_path

if TYPE_CHECKING:
    from algolia_client.api.search_client import SearchClient

logger = logging.getLogger(__name__)


class SearchIndex:
    """Handle on one index. Obtain it with `SearchClient.init_index`."""

    def __init__(
        self,
        index_name: str,
        transport: Transport,
        config: SearchConfig,
        client: "SearchClient | None" = None,
    ):
        require(index_name, "index_name", "init_index")
        self.name = index_name
        self._transport = transport
        self._config = config
        self._client = client

    @property
    def app_id(self) -> str:
        return self._config.app_id

    def _path(self, template: str, *args: Any) -> str:
        return api_path(template, self.name, *args)

    def _replica_defaults(self) -> dict[str, Any]:
        if self._config.default_forward_to_replicas is None:
            return {}
        return {"forwardToReplicas": self._config.default_forward_to_replicas}

    # --- Search ---

    async def search(self, query: str, request_options: Options = None) -> SearchResponse:
        """Search the index.

        Args:
            query: The full-text query.
            request_options: Search parameters and per-call options.
        """
        response = await self._transport.read(
            "POST",
            self._path("/1/indexes/%s/query"),
            body={"query": str(query)},
            options=request_options,
        )
        return SearchResponse.model_validate(response)

    async def search_for_facet_values(
        self, facet_name: str, facet_query: str, request_options: Options = None
    ) -> SearchForFacetValuesResponse:
        require(facet_name, "facet_name", "search_for_facet_values")
        response = await self._transport.read(
            "POST",
            self._path("/1/indexes/%s/facets/%s/query", facet_name),
            body={"facetQuery": facet_query},
            options=request_options,
        )
        return SearchForFacetValuesResponse.model_validate(response)

    # --- Settings ---

    async def get_settings(self, request_options: Options = None) -> dict[str, Any]:
        return await self._transport.read(
            "GET",
            self._path("/1/indexes/%s/settings"),
            params={"getVersion": 2},
            options=request_options,
        )

    async def set_settings(
        self, settings: dict[str, Any], request_options: Options = None
    ) -> IndexingResponse:
        response = await self._transport.write(
            "PUT",
            self._path("/1/indexes/%s/settings"),
            body=settings,
            options=request_options,
            defaults=self._replica_defaults(),
        )
        return IndexingResponse(response, self)

    async def exists(self) -> bool:
        """Whether the index exists, based on its settings being readable."""
        try:
            await self.get_settings()
        except AlgoliaApiError as e:
            if e.status_code == 404:
                return False
            raise
        return True

    # --- Records ---

    async def get_object(
        self, object_id: str, request_options: Options = None
    ) -> dict[str, Any] | None:
        """Fetch one record by objectID.

        Returns:
            The record, or None if it does not exist.

        Raises:
            AlgoliaApiError: For client errors other than 404.
        """
        require(object_id, "object_id", "get_object")
        try:
            return await self._transport.read(
                "GET",
                self._path("/1/indexes/%s/%s", object_id),
                options=request_options,
            )
        except AlgoliaApiError as e:
            if e.status_code == 404:
                return None
            raise

    async def get_objects(
        self,
        object_ids: Iterable[str],
        attributes_to_retrieve: list[str] | None = None,
        request_options: Options = None,
    ) -> GetObjectsResponse:
        requests = []
        for object_id in object_ids:
            request: dict[str, Any] = {
                "indexName": self.name,
                "objectID": str(object_id),
            }
            if attributes_to_retrieve:
                request["attributesToRetrieve"] = attributes_to_retrieve
            requests.append(request)

        response = await self._transport.read(
            "POST",
            "/1/indexes/*/objects",
            body={"requests": requests},
            options=request_options,
        )
        return GetObjectsResponse.model_validate(response)

    async def save_object(
        self, obj: dict[str, Any], request_options: Options = None, **kwargs
    ) -> BatchIndexingResponse | NullResponse:
        return await self.save_objects([obj], request_options, **kwargs)

    async def save_objects(
        self,
        objects: Iterable[dict[str, Any]],
        request_options: Options = None,
        auto_generate_object_id: bool = False,
        object_id_key: str | None = None,
    ) -> BatchIndexingResponse | NullResponse:
        """Add or replace records, split into batches.

        Args:
            objects: Records to save. Each must carry an objectID unless
                `auto_generate_object_id` or `object_id_key` is used.
            request_options: Per-call options applied to every batch.
            auto_generate_object_id: Let the engine assign objectIDs.
            object_id_key: Field copied into objectID before sending.

        Raises:
            MissingObjectIdError: If a record has no objectID.
        """
        if auto_generate_object_id:
            return await self._split_into_batches(
                Action.ADD_OBJECT, objects, request_options
            )

        if object_id_key:
            objects = map_object_ids(object_id_key, objects)

        try:
            return await self._split_into_batches(
                Action.UPDATE_OBJECT, objects, request_options
            )
        except MissingObjectIdError as e:
            raise MissingObjectIdError(f"{e}{MISSING_OBJECT_ID_HINT}") from e

    async def partial_update_object(
        self, obj: dict[str, Any], request_options: Options = None, **kwargs
    ) -> BatchIndexingResponse | NullResponse:
        return await self.partial_update_objects([obj], request_options, **kwargs)

    async def partial_update_objects(
        self,
        objects: Iterable[dict[str, Any]],
        request_options: Options = None,
        create_if_not_exists: bool = False,
    ) -> BatchIndexingResponse | NullResponse:
        """Update some attributes of existing records, split into batches."""
        action = (
            Action.PARTIAL_UPDATE_OBJECT
            if create_if_not_exists
            else Action.PARTIAL_UPDATE_OBJECT_NO_CREATE
        )
        return await self._split_into_batches(action, objects, request_options)

    async def delete_object(
        self, object_id: str, request_options: Options = None
    ) -> BatchIndexingResponse | NullResponse:
        return await self.delete_objects([object_id], request_options)

    async def delete_objects(
        self, object_ids: Iterable[str], request_options: Options = None
    ) -> BatchIndexingResponse | NullResponse:
        objects = ({"objectID": object_id} for object_id in object_ids)
        return await self._split_into_batches(
            Action.DELETE_OBJECT, objects, request_options
        )

    async def delete_by(
        self, filters: dict[str, Any], request_options: Options = None
    ) -> IndexingResponse:
        """Delete every record matching the given filters."""
        response = await self._transport.write(
            "POST",
            self._path("/1/indexes/%s/deleteByQuery"),
            body=filters,
            options=request_options,
        )
        return IndexingResponse(response, self)

    async def clear_objects(self, request_options: Options = None) -> IndexingResponse:
        response = await self._transport.write(
            "POST", self._path("/1/indexes/%s/clear"), body={}, options=request_options
        )
        return IndexingResponse(response, self)

    async def batch(
        self, requests: list[dict[str, Any]], request_options: Options = None
    ) -> IndexingResponse:
        """Send already built batch operations in a single call."""
        response = await self._raw_batch(requests, request_options)
        return IndexingResponse(response, self)

    async def _raw_batch(
        self, requests: list[dict[str, Any]], request_options: Options
    ) -> dict[str, Any]:
        return await self._transport.write(
            "POST",
            self._path("/1/indexes/%s/batch"),
            body={"requests": requests},
            options=request_options,
        )

    async def _split_into_batches(
        self,
        action: Action,
        objects: Iterable[dict[str, Any]],
        request_options: Options,
    ) -> BatchIndexingResponse | NullResponse:
        responses = []
        for batch in chunk(objects, self._config.batch_size):
            if action is not Action.ADD_OBJECT:
                ensure_object_id(batch, MISSING_OBJECT_ID_MESSAGE)
            logger.debug(
                "Sending %s batch of %d objects to %s", action.value, len(batch), self.name
            )
            responses.append(
                await self._raw_batch(build_batch(batch, action), request_options)
            )

        if not responses:
            return NullResponse()
        return BatchIndexingResponse(responses, self)

    def browse_objects(self, request_options: Options = None) -> ObjectIterator:
        """Async iterator over every record, using the browse cursor."""
        return ObjectIterator(self._transport, self.name, request_options)

    async def replace_all_objects(
        self,
        objects: Iterable[dict[str, Any]],
        request_options: Options = None,
        safe: bool = False,
    ) -> MultiResponse:
        """Atomically replace every record of the index.

        Settings, synonyms and rules are copied to a temporary index, the
        records are written into it and it is then moved over this index.

        Args:
            objects: The new records.
            request_options: Per-call options applied to the record batches.
            safe: Wait for each step's task before starting the next.
        """
        tmp_name = f"{self.name}_tmp_{uuid.uuid4().hex}"
        tmp_index = SearchIndex(tmp_name, self._transport, self._config, self._client)

        copy_response = await self._operation(
            self.name, "copy", tmp_name, scope=["settings", "synonyms", "rules"]
        )
        if safe:
            await copy_response.wait()

        batch_response = await tmp_index.save_objects(objects, request_options)
        if safe:
            await batch_response.wait()

        move_response = await tmp_index._operation(tmp_name, "move", self.name)
        if safe:
            await move_response.wait()

        return MultiResponse([copy_response, batch_response, move_response])

    async def _operation(
        self,
        source: str,
        operation: str,
        destination: str,
        scope: list[str] | None = None,
    ) -> IndexingResponse:
        body: dict[str, Any] = {"operation": operation, "destination": destination}
        if scope:
            body["scope"] = scope
        response = await self._transport.write(
            "POST", api_path("/1/indexes/%s/operation", source), body=body
        )
        return IndexingResponse(response, self)

    # --- Synonyms ---

    async def search_synonyms(
        self, query: str, request_options: Options = None
    ) -> dict[str, Any]:
        return await self._transport.read(
            "POST",
            self._path("/1/indexes/%s/synonyms/search"),
            body={"query": str(query)},
            options=request_options,
        )

    async def get_synonym(
        self, object_id: str, request_options: Options = None
    ) -> dict[str, Any]:
        require(object_id, "object_id", "get_synonym")
        return await self._transport.read(
            "GET",
            self._path("/1/indexes/%s/synonyms/%s", object_id),
            options=request_options,
        )

    async def save_synonym(
        self, synonym: dict[str, Any], request_options: Options = None
    ) -> IndexingResponse | NullResponse:
        return await self.save_synonyms([synonym], request_options)

    async def save_synonyms(
        self, synonyms: Iterable[dict[str, Any]], request_options: Options = None
    ) -> IndexingResponse | NullResponse:
        return await self._save_batch(
            "/1/indexes/%s/synonyms/batch",
            synonyms,
            "All synonyms must have an unique objectID to be valid",
            request_options,
        )

    async def replace_all_synonyms(
        self, synonyms: Iterable[dict[str, Any]], request_options: Options = None
    ) -> IndexingResponse | NullResponse:
        return await self._save_batch(
            "/1/indexes/%s/synonyms/batch",
            synonyms,
            "All synonyms must have an unique objectID to be valid",
            request_options,
            {"replaceExistingSynonyms": True},
        )

    async def delete_synonym(
        self, object_id: str, request_options: Options = None
    ) -> IndexingResponse:
        require(object_id, "object_id", "delete_synonym")
        response = await self._transport.write(
            "DELETE",
            self._path("/1/indexes/%s/synonyms/%s", object_id),
            options=request_options,
            defaults=self._replica_defaults(),
        )
        return IndexingResponse(response, self)

    async def clear_synonyms(self, request_options: Options = None) -> IndexingResponse:
        response = await self._transport.write(
            "POST",
            self._path("/1/indexes/%s/synonyms/clear"),
            body={},
            options=request_options,
            defaults=self._replica_defaults(),
        )
        return IndexingResponse(response, self)

    def browse_synonyms(self, request_options: Options = None) -> SynonymIterator:
        return SynonymIterator(self._transport, self.name, request_options)

    # --- Rules ---

    async def search_rules(
        self, query: str, request_options: Options = None
    ) -> dict[str, Any]:
        return await self._transport.read(
            "POST",
            self._path("/1/indexes/%s/rules/search"),
            body={"query": str(query)},
            options=request_options,
        )

    async def get_rule(
        self, object_id: str, request_options: Options = None
    ) -> dict[str, Any]:
        require(object_id, "object_id", "get_rule")
        return await self._transport.read(
            "GET",
            self._path("/1/indexes/%s/rules/%s", object_id),
            options=request_options,
        )

    async def save_rule(
        self, rule: dict[str, Any], request_options: Options = None
    ) -> IndexingResponse | NullResponse:
        return await self.save_rules([rule], request_options)

    async def save_rules(
        self, rules: Iterable[dict[str, Any]], request_options: Options = None
    ) -> IndexingResponse | NullResponse:
        return await self._save_batch(
            "/1/indexes/%s/rules/batch",
            rules,
            "All rules must have an unique objectID to be valid",
            request_options,
        )

    async def replace_all_rules(
        self, rules: Iterable[dict[str, Any]], request_options: Options = None
    ) -> IndexingResponse | NullResponse:
        return await self._save_batch(
            "/1/indexes/%s/rules/batch",
            rules,
            "All rules must have an unique objectID to be valid",
            request_options,
            {"clearExistingRules": True},
        )

    async def delete_rule(
        self, object_id: str, request_options: Options = None
    ) -> IndexingResponse:
        require(object_id, "object_id", "delete_rule")
        response = await self._transport.write(
            "DELETE",
            self._path("/1/indexes/%s/rules/%s", object_id),
            options=request_options,
            defaults=self._replica_defaults(),
        )
        return IndexingResponse(response, self)

    async def clear_rules(self, request_options: Options = None) -> IndexingResponse:
        response = await self._transport.write(
            "POST",
            self._path("/1/indexes/%s/rules/clear"),
            body={},
            options=request_options,
            defaults=self._replica_defaults(),
        )
        return IndexingResponse(response, self)

    def browse_rules(self, request_options: Options = None) -> RuleIterator:
        return RuleIterator(self._transport, self.name, request_options)

    async def _save_batch(
        self,
        template: str,
        items: Iterable[dict[str, Any]],
        missing_id_message: str,
        request_options: Options,
        extra_query: dict[str, Any] | None = None,
    ) -> IndexingResponse | NullResponse:
        """Save synonyms or rules; they are sent in one call, never split."""
        items = list(items)
        if not items:
            return NullResponse()
        ensure_object_id(items, missing_id_message)

        response = await self._transport.write(
            "POST",
            self._path(template),
            body=items,
            params=extra_query,
            options=request_options,
            defaults=self._replica_defaults(),
        )
        return IndexingResponse(response, self)

    # --- Tasks ---

    async def get_task(self, task_id: int, request_options: Options = None) -> TaskStatus:
        if not task_id:
            raise ValueError("taskID cannot be empty")
        response = await self._transport.read(
            "GET",
            self._path("/1/indexes/%s/task/%s", task_id),
            options=request_options,
        )
        return TaskStatus.model_validate(response)

    async def wait_task(
        self,
        task_id: int,
        request_options: Options = None,
        max_retries: int | None = None,
        timeout: float | None = None,
    ) -> TaskStatus:
        """Poll the task on a fixed interval until it is published.

        Raises:
            TaskTimeoutError: If max_retries or timeout is exceeded.
        """

        async def _get_task(current_task_id: int) -> TaskStatus:
            return await self.get_task(current_task_id, request_options)

        return await wait_for_task(
            _get_task,
            task_id,
            interval=self._config.wait_task_interval,
            max_retries=max_retries,
            timeout=timeout,
        )

    # --- Index ---

    async def delete(self, request_options: Options = None) -> IndexingResponse:
        """Delete the index and every record, setting, synonym and rule."""
        response = await self._transport.write(
            "DELETE", self._path("/1/indexes/%s"), options=request_options
        )
        return IndexingResponse(response, self)
