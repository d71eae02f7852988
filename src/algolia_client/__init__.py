"""Async client for Algolia's Search, Analytics, Insights and Personalization APIs.

Typed method calls are sent as HTTP requests to a ranked cluster of hosts,
with retries and failover, and responses are decoded into pydantic models.
"""

from algolia_client.api import (
    AnalyticsClient,
    InsightsClient,
    PersonalizationClient,
    SearchClient,
    SearchIndex,
)
from algolia_client.config import (
    AnalyticsConfig,
    InsightsConfig,
    PersonalizationConfig,
    SearchConfig,
)
from algolia_client.exceptions import (
    AlgoliaApiError,
    AlgoliaException,
    MissingObjectIdError,
    TaskTimeoutError,
    UnreachableHostsError,
)
from algolia_client.transport import RequestOptions
from algolia_client.version import __version__

__all__ = [
    "AlgoliaApiError",
    "AlgoliaException",
    "AnalyticsClient",
    "AnalyticsConfig",
    "InsightsClient",
    "InsightsConfig",
    "MissingObjectIdError",
    "PersonalizationClient",
    "PersonalizationConfig",
    "RequestOptions",
    "SearchClient",
    "SearchConfig",
    "SearchIndex",
    "TaskTimeoutError",
    "UnreachableHostsError",
    "__version__",
]
