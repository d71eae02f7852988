"""Responses of indexing operations that can wait for their tasks."""

from typing import TYPE_CHECKING, Any, Iterator

from algolia_client.models.search import BatchResponse, MultipleBatchResponse

if TYPE_CHECKING:
    from algolia_client.api.search_client import SearchClient
    from algolia_client.api.search_index import SearchIndex


class IndexingResponse:
    """Response of a write call that queued one task on one index."""

    def __init__(self, raw_response: dict[str, Any], index: "SearchIndex"):
        self.raw_response = raw_response
        self._index = index
        self._done = False

    @property
    def task_id(self) -> int | None:
        return self.raw_response.get("taskID")

    def __getitem__(self, key: str) -> Any:
        return self.raw_response[key]

    async def wait(self, request_options=None) -> "IndexingResponse":
        """Block until the task is published. Waiting twice is free."""
        if not self._done and self.task_id is not None:
            await self._index.wait_task(self.task_id, request_options)
        self._done = True
        return self


class BatchIndexingResponse:
    """Aggregate of the responses of every batch of a split operation."""

    def __init__(self, raw_responses: list[dict[str, Any]], index: "SearchIndex"):
        self.raw_responses = raw_responses
        self._index = index
        self._waited: set[int] = set()

    @property
    def responses(self) -> list[BatchResponse]:
        return [BatchResponse.model_validate(raw) for raw in self.raw_responses]

    @property
    def task_ids(self) -> list[int]:
        return [response.task_id for response in self.responses]

    @property
    def object_ids(self) -> list[str]:
        """Object IDs of every batch, in submission order."""
        return [
            object_id
            for response in self.responses
            for object_id in response.object_ids
        ]

    def __len__(self) -> int:
        return len(self.raw_responses)

    def __iter__(self) -> Iterator[dict[str, Any]]:
        return iter(self.raw_responses)

    async def wait(self, request_options=None) -> "BatchIndexingResponse":
        for task_id in self.task_ids:
            if task_id not in self._waited:
                await self._index.wait_task(task_id, request_options)
                self._waited.add(task_id)
        return self


class MultipleIndexBatchIndexingResponse:
    """Response of a batch spanning several indices: one task per index."""

    def __init__(self, raw_response: dict[str, Any], client: "SearchClient"):
        self.raw_response = raw_response
        self._client = client
        self._done = False

    @property
    def response(self) -> MultipleBatchResponse:
        return MultipleBatchResponse.model_validate(self.raw_response)

    @property
    def object_ids(self) -> list[str]:
        return self.response.object_ids

    async def wait(self, request_options=None) -> "MultipleIndexBatchIndexingResponse":
        if not self._done:
            for index_name, task_id in self.response.task_id.items():
                await self._client.wait_task(index_name, task_id, request_options)
        self._done = True
        return self


class MultiResponse:
    """Sequence of responses waited on in order."""

    def __init__(self, responses: list[Any]):
        self.responses = responses

    def __len__(self) -> int:
        return len(self.responses)

    def __iter__(self):
        return iter(self.responses)

    def __getitem__(self, position: int) -> Any:
        return self.responses[position]

    async def wait(self, request_options=None) -> "MultiResponse":
        for response in self.responses:
            await response.wait(request_options)
        return self


class NullResponse:
    """Returned when an operation had nothing to send."""

    def __init__(self):
        self.raw_response: dict[str, Any] = {}

    async def wait(self, request_options=None) -> "NullResponse":
        return self
