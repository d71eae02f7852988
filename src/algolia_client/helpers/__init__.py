"""Batching, iteration and task polling helpers built on the transport."""

from algolia_client.helpers.batching import (
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
    MultipleIndexBatchIndexingResponse,
    MultiResponse,
    NullResponse,
)
from algolia_client.helpers.tasks import wait_for_task

__all__ = [
    "BatchIndexingResponse",
    "IndexingResponse",
    "MultiResponse",
    "MultipleIndexBatchIndexingResponse",
    "NullResponse",
    "ObjectIterator",
    "RuleIterator",
    "SynonymIterator",
    "build_batch",
    "chunk",
    "ensure_object_id",
    "map_object_ids",
    "wait_for_task",
]
