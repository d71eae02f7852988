"""Typed request and response models for every API."""

from algolia_client.models.base import AlgoliaModel
from algolia_client.models.insights import EventType, InsightsEvent, PushEventsResponse
from algolia_client.models.personalization import (
    DeleteUserProfileResponse,
    EventScoring,
    FacetScoring,
    PersonalizationStrategy,
    SetPersonalizationStrategyResponse,
    UserTokenProfile,
)
from algolia_client.models.search import (
    Action,
    BatchOperation,
    BatchResponse,
    BrowseResponse,
    GetObjectsResponse,
    IndexInfo,
    ListIndicesResponse,
    MultipleBatchResponse,
    MultipleQueriesResponse,
    SearchForFacetValuesResponse,
    SearchResponse,
    TaskStatus,
)

__all__ = [
    "Action",
    "AlgoliaModel",
    "BatchOperation",
    "BatchResponse",
    "BrowseResponse",
    "DeleteUserProfileResponse",
    "EventScoring",
    "EventType",
    "FacetScoring",
    "GetObjectsResponse",
    "IndexInfo",
    "InsightsEvent",
    "ListIndicesResponse",
    "MultipleBatchResponse",
    "MultipleQueriesResponse",
    "PersonalizationStrategy",
    "PushEventsResponse",
    "SearchForFacetValuesResponse",
    "SearchResponse",
    "SetPersonalizationStrategyResponse",
    "TaskStatus",
    "UserTokenProfile",
]
