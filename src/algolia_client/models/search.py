# src/algolia_client/models/search.py

"""Pydantic models for the Search API.

These models describe the request payloads and the response bodies exchanged
with the Search API. Records and settings stay plain dicts because their
shape is defined by each application.
"""

import enum
from typing import Any, Optional

from pydantic import Field

from algolia_client.models.base import AlgoliaModel


class Action(str, enum.Enum):
    """Type of operation in a batch request."""

    ADD_OBJECT = "addObject"
    UPDATE_OBJECT = "updateObject"
    PARTIAL_UPDATE_OBJECT = "partialUpdateObject"
    PARTIAL_UPDATE_OBJECT_NO_CREATE = "partialUpdateObjectNoCreate"
    DELETE_OBJECT = "deleteObject"
    DELETE = "delete"
    CLEAR = "clear"


class BatchOperation(AlgoliaModel):
    """One operation of a batch request."""

    action: Action
    """Operation to apply."""

    body: dict[str, Any] = Field(default_factory=dict)
    """The record, or the partial record, the operation applies to."""

    index_name: Optional[str] = None
    """Target index, only used by multi-index batches."""

    def to_request(self) -> dict[str, Any]:
        """Wire form of the operation. The record is sent as given, nulls included."""
        request: dict[str, Any] = {"action": self.action.value, "body": self.body}
        if self.index_name is not None:
            request["indexName"] = self.index_name
        return request


class BatchResponse(AlgoliaModel):
    """Response of a single batch call."""

    task_id: int = Field(alias="taskID")
    """Task to wait on for the batch to be applied."""

    object_ids: list[str] = Field(default_factory=list, alias="objectIDs")
    """Object IDs touched by the batch, in request order."""


class MultipleBatchResponse(AlgoliaModel):
    """Response of a multi-index batch call."""

    task_id: dict[str, int] = Field(alias="taskID")
    """Task ID per index name."""

    object_ids: list[str] = Field(default_factory=list, alias="objectIDs")


class TaskStatus(AlgoliaModel):
    """Status of an asynchronous indexing task."""

    status: str
    """Either "published" or "notPublished"."""

    pending_task: Optional[bool] = None

    @property
    def is_published(self) -> bool:
        return self.status == "published"


class SearchResponse(AlgoliaModel):
    """Results of a search in one index."""

    hits: list[dict[str, Any]] = Field(default_factory=list)
    """Matching records."""

    nb_hits: int = 0
    """Total number of matching records."""

    page: int = 0
    nb_pages: int = 0
    hits_per_page: int = 0

    processing_time_ms: Optional[int] = Field(default=None, alias="processingTimeMS")
    """Server processing time for search request, in milliseconds."""

    query: str = ""
    params: str = ""
    index: Optional[str] = None
    """Index name, only set in multi-index responses."""

    query_id: Optional[str] = Field(default=None, alias="queryID")
    """Set when clickAnalytics is enabled; pass it to Insights events."""


class MultipleQueriesResponse(AlgoliaModel):
    """Results of several searches sent in one call."""

    results: list[SearchResponse]


class FacetHit(AlgoliaModel):
    value: str
    highlighted: str = ""
    count: int = 0


class SearchForFacetValuesResponse(AlgoliaModel):
    """Facet values matching a facet query."""

    facet_hits: list[FacetHit] = Field(default_factory=list)
    exhaustive_facets_count: Optional[bool] = None
    processing_time_ms: Optional[int] = Field(default=None, alias="processingTimeMS")


class BrowseResponse(AlgoliaModel):
    """One page of a browse call."""

    hits: list[dict[str, Any]] = Field(default_factory=list)
    cursor: Optional[str] = None
    """Opaque cursor for the next page; absent on the last page."""


class GetObjectsResponse(AlgoliaModel):
    """Records fetched by ID. Missing records come back as None."""

    results: list[Optional[dict[str, Any]]] = Field(default_factory=list)


class IndexInfo(AlgoliaModel):
    """An index as listed by the list-indices call."""

    name: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    entries: int = 0
    data_size: int = 0
    file_size: int = 0
    last_build_time_s: int = 0
    number_of_pending_tasks: int = 0
    pending_task: bool = False
    primary: Optional[str] = None
    replicas: Optional[list[str]] = None


class ListIndicesResponse(AlgoliaModel):
    items: list[IndexInfo] = Field(default_factory=list)
    nb_pages: Optional[int] = None
