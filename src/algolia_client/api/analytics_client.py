"""Client for the Algolia Analytics API.

Every metric endpoint is a GET on the regional analytics host, scoped to one
index and an optional date range.
"""

import re
from typing import Any, TypeVar

import httpx

from algolia_client.api.base import BaseApiClient, require
from algolia_client.config import AnalyticsConfig
from algolia_client.models.analytics import (
    AverageClickPositionResponse,
    ClickPositionsResponse,
    ClickThroughRateResponse,
    ConversionRateResponse,
    NoClickRateResponse,
    NoResultsRateResponse,
    SearchesCountResponse,
    SearchesNoClicksResponse,
    SearchesNoResultsResponse,
    StatusResponse,
    TopCountriesResponse,
    TopFilterAttributesResponse,
    TopFilterForAttributeResponse,
    TopFiltersNoResultsResponse,
    TopHitsResponse,
    TopSearchesResponse,
    UsersCountResponse,
)
from algolia_client.models.base import AlgoliaModel
from algolia_client.transport.hosts import HostRanker
from algolia_client.transport.requester import Transport
from algolia_client.util.paths import api_path

_DATE_PATTERN = re.compile(r"^\d{4}-(0[1-9]|1[0-2])-(0[1-9]|[12][0-9]|3[01])$")

ModelT = TypeVar("ModelT", bound=AlgoliaModel)


def _check_date(value: str | None, name: str, operation: str) -> None:
    if value is not None and not _DATE_PATTERN.match(value):
        raise ValueError(
            f'invalid value for "{name}" when calling AnalyticsClient.{operation}, '
            "must be a date formatted as YYYY-MM-DD"
        )


class AnalyticsClient(BaseApiClient):
    """Async client for the Analytics API."""

    @classmethod
    def create(
        cls,
        app_id: str | None = None,
        api_key: str | None = None,
        region: str = "us",
        **kwargs,
    ) -> "AnalyticsClient":
        """Create a client from credentials.

        Args:
            app_id: Application ID. Defaults to $ALGOLIA_APP_ID.
            api_key: API key. Defaults to $ALGOLIA_API_KEY.
            region: "us" or "de".
        """
        config = AnalyticsConfig.create(app_id, api_key, region=region, **kwargs)
        return cls.create_with_config(config)

    @classmethod
    def create_with_config(
        cls, config: AnalyticsConfig, http_client: httpx.AsyncClient | None = None
    ) -> "AnalyticsClient":
        config = config.model_copy(deep=True)
        hostnames = config.hosts or [f"analytics.{config.region}.algolia.com"]
        hosts = HostRanker.from_hostnames(hostnames, ttl=config.host_ttl)
        return cls(Transport(config, hosts, http_client=http_client), config)

    async def _get(
        self,
        operation: str,
        path: str,
        model: type[ModelT],
        index: str,
        start_date: str | None = None,
        end_date: str | None = None,
        **params: Any,
    ) -> ModelT:
        require(index, "index", operation)
        _check_date(start_date, "start_date", operation)
        _check_date(end_date, "end_date", operation)

        query = {
            "index": index,
            "startDate": start_date,
            "endDate": end_date,
            **params,
        }
        query = {key: value for key, value in query.items() if value is not None}
        response = await self._transport.read("GET", path, params=query)
        return model.model_validate(response)

    async def get_average_click_position(
        self,
        index: str,
        start_date: str | None = None,
        end_date: str | None = None,
        tags: str | None = None,
    ) -> AverageClickPositionResponse:
        """Average position of clicked results, overall and per day.

        Args:
            index: The index name to target.
            start_date: Lower bound of the period, formatted YYYY-MM-DD.
            end_date: Upper bound of the period, formatted YYYY-MM-DD.
            tags: Filter on analyticsTags, combined with OR and AND.
        """
        return await self._get(
            "get_average_click_position",
            "/2/clicks/averageClickPosition",
            AverageClickPositionResponse,
            index,
            start_date,
            end_date,
            tags=tags,
        )

    async def get_click_positions(
        self,
        index: str,
        start_date: str | None = None,
        end_date: str | None = None,
        tags: str | None = None,
    ) -> ClickPositionsResponse:
        return await self._get(
            "get_click_positions",
            "/2/clicks/positions",
            ClickPositionsResponse,
            index,
            start_date,
            end_date,
            tags=tags,
        )

    async def get_click_through_rate(
        self,
        index: str,
        start_date: str | None = None,
        end_date: str | None = None,
        tags: str | None = None,
    ) -> ClickThroughRateResponse:
        return await self._get(
            "get_click_through_rate",
            "/2/clicks/clickThroughRate",
            ClickThroughRateResponse,
            index,
            start_date,
            end_date,
            tags=tags,
        )

    async def get_conversation_rate(
        self,
        index: str,
        start_date: str | None = None,
        end_date: str | None = None,
        tags: str | None = None,
    ) -> ConversionRateResponse:
        """Conversion rate of tracked searches, overall and per day."""
        return await self._get(
            "get_conversation_rate",
            "/2/conversions/conversionRate",
            ConversionRateResponse,
            index,
            start_date,
            end_date,
            tags=tags,
        )

    async def get_no_click_rate(
        self,
        index: str,
        start_date: str | None = None,
        end_date: str | None = None,
        tags: str | None = None,
    ) -> NoClickRateResponse:
        return await self._get(
            "get_no_click_rate",
            "/2/searches/noClickRate",
            NoClickRateResponse,
            index,
            start_date,
            end_date,
            tags=tags,
        )

    async def get_no_results_rate(
        self,
        index: str,
        start_date: str | None = None,
        end_date: str | None = None,
        tags: str | None = None,
    ) -> NoResultsRateResponse:
        return await self._get(
            "get_no_results_rate",
            "/2/searches/noResultRate",
            NoResultsRateResponse,
            index,
            start_date,
            end_date,
            tags=tags,
        )

    async def get_searches_count(
        self,
        index: str,
        start_date: str | None = None,
        end_date: str | None = None,
        tags: str | None = None,
    ) -> SearchesCountResponse:
        return await self._get(
            "get_searches_count",
            "/2/searches/count",
            SearchesCountResponse,
            index,
            start_date,
            end_date,
            tags=tags,
        )

    async def get_searches_no_clicks(
        self,
        index: str,
        start_date: str | None = None,
        end_date: str | None = None,
        limit: int = 10,
        offset: int = 0,
        tags: str | None = None,
    ) -> SearchesNoClicksResponse:
        """Top searches that received no click."""
        return await self._get(
            "get_searches_no_clicks",
            "/2/searches/noClicks",
            SearchesNoClicksResponse,
            index,
            start_date,
            end_date,
            limit=limit,
            offset=offset,
            tags=tags,
        )

    async def get_searches_no_results(
        self,
        index: str,
        start_date: str | None = None,
        end_date: str | None = None,
        limit: int = 10,
        offset: int = 0,
        tags: str | None = None,
    ) -> SearchesNoResultsResponse:
        """Top searches that returned no result."""
        return await self._get(
            "get_searches_no_results",
            "/2/searches/noResults",
            SearchesNoResultsResponse,
            index,
            start_date,
            end_date,
            limit=limit,
            offset=offset,
            tags=tags,
        )

    async def get_status(self, index: str) -> StatusResponse:
        """When the analytics of an index were last processed."""
        return await self._get("get_status", "/2/status", StatusResponse, index)

    async def get_top_countries(
        self,
        index: str,
        start_date: str | None = None,
        end_date: str | None = None,
        limit: int = 10,
        offset: int = 0,
        tags: str | None = None,
    ) -> TopCountriesResponse:
        return await self._get(
            "get_top_countries",
            "/2/countries",
            TopCountriesResponse,
            index,
            start_date,
            end_date,
            limit=limit,
            offset=offset,
            tags=tags,
        )

    async def get_top_filter_attributes(
        self,
        index: str,
        search: str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
        limit: int = 10,
        offset: int = 0,
        tags: str | None = None,
    ) -> TopFilterAttributesResponse:
        """Most used filter attributes, optionally for one search."""
        return await self._get(
            "get_top_filter_attributes",
            "/2/filters",
            TopFilterAttributesResponse,
            index,
            start_date,
            end_date,
            search=search,
            limit=limit,
            offset=offset,
            tags=tags,
        )

    async def get_top_filter_for_attribute(
        self,
        attribute: str,
        index: str,
        search: str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
        limit: int = 10,
        offset: int = 0,
        tags: str | None = None,
    ) -> TopFilterForAttributeResponse:
        """Most used values of one filter attribute.

        Args:
            attribute: The attribute, or several joined with commas.
            index: The index name to target.
        """
        require(attribute, "attribute", "get_top_filter_for_attribute")
        return await self._get(
            "get_top_filter_for_attribute",
            api_path("/2/filters/%s", attribute),
            TopFilterForAttributeResponse,
            index,
            start_date,
            end_date,
            search=search,
            limit=limit,
            offset=offset,
            tags=tags,
        )

    async def get_top_filters_no_results(
        self,
        index: str,
        search: str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
        limit: int = 10,
        offset: int = 0,
        tags: str | None = None,
    ) -> TopFiltersNoResultsResponse:
        return await self._get(
            "get_top_filters_no_results",
            "/2/filters/noResults",
            TopFiltersNoResultsResponse,
            index,
            start_date,
            end_date,
            search=search,
            limit=limit,
            offset=offset,
            tags=tags,
        )

    async def get_top_hits(
        self,
        index: str,
        search: str | None = None,
        click_analytics: bool = False,
        start_date: str | None = None,
        end_date: str | None = None,
        limit: int = 10,
        offset: int = 0,
        tags: str | None = None,
    ) -> TopHitsResponse:
        """Most returned records, with click metrics when click_analytics is on."""
        return await self._get(
            "get_top_hits",
            "/2/hits",
            TopHitsResponse,
            index,
            start_date,
            end_date,
            search=search,
            clickAnalytics=click_analytics,
            limit=limit,
            offset=offset,
            tags=tags,
        )

    async def get_top_searches(
        self,
        index: str,
        click_analytics: bool = False,
        start_date: str | None = None,
        end_date: str | None = None,
        order_by: str | None = None,
        direction: str | None = None,
        limit: int = 10,
        offset: int = 0,
        tags: str | None = None,
    ) -> TopSearchesResponse:
        """Most frequent searches.

        Args:
            index: The index name to target.
            click_analytics: Include click and conversion metrics.
            order_by: Metric to sort on, e.g. "searchCount" or "clickThroughRate".
            direction: "asc" or "desc".
        """
        if direction is not None and direction not in ("asc", "desc"):
            raise ValueError('direction must be "asc" or "desc"')
        return await self._get(
            "get_top_searches",
            "/2/searches",
            TopSearchesResponse,
            index,
            start_date,
            end_date,
            clickAnalytics=click_analytics,
            orderBy=order_by,
            direction=direction,
            limit=limit,
            offset=offset,
            tags=tags,
        )

    async def get_users_count(
        self,
        index: str,
        start_date: str | None = None,
        end_date: str | None = None,
        tags: str | None = None,
    ) -> UsersCountResponse:
        return await self._get(
            "get_users_count",
            "/2/users/count",
            UsersCountResponse,
            index,
            start_date,
            end_date,
            tags=tags,
        )
