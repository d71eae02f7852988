"""API clients: Search, Analytics, Insights and Personalization."""

from algolia_client.api.analytics_client import AnalyticsClient
from algolia_client.api.insights_client import InsightsClient, UserInsightsClient
from algolia_client.api.personalization_client import PersonalizationClient
from algolia_client.api.search_client import SearchClient
from algolia_client.api.search_index import SearchIndex

__all__ = [
    "AnalyticsClient",
    "InsightsClient",
    "PersonalizationClient",
    "SearchClient",
    "SearchIndex",
    "UserInsightsClient",
]
