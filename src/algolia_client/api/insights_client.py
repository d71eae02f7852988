"""Client for the Algolia Insights API (click, conversion and view events)."""

from typing import Any, Iterable

import httpx

from algolia_client.api.base import BaseApiClient, Options, require
from algolia_client.config import InsightsConfig
from algolia_client.models.insights import (
    EventType,
    InsightsEvent,
    PushEventsResponse,
)
from algolia_client.transport.hosts import HostRanker
from algolia_client.transport.requester import Transport


class InsightsClient(BaseApiClient):
    """Async client for the Insights API."""

    @classmethod
    def create(
        cls,
        app_id: str | None = None,
        api_key: str | None = None,
        region: str = "us",
        **kwargs,
    ) -> "InsightsClient":
        config = InsightsConfig.create(app_id, api_key, region=region, **kwargs)
        return cls.create_with_config(config)

    @classmethod
    def create_with_config(
        cls, config: InsightsConfig, http_client: httpx.AsyncClient | None = None
    ) -> "InsightsClient":
        config = config.model_copy(deep=True)
        hostnames = config.hosts or [f"insights.{config.region}.algolia.io"]
        hosts = HostRanker.from_hostnames(hostnames, ttl=config.host_ttl)
        return cls(Transport(config, hosts, http_client=http_client), config)

    def user(self, user_token: str) -> "UserInsightsClient":
        """Bind a user token for the event shortcuts."""
        return UserInsightsClient(self, user_token)

    async def push_events(
        self,
        events: Iterable[InsightsEvent | dict[str, Any]],
        request_options: Options = None,
    ) -> PushEventsResponse:
        """Send a list of events in one call.

        Args:
            events: Events as models or as dicts with the API field names.

        Raises:
            ValueError: If the list is empty or an event is invalid.
        """
        payload = [
            (
                event
                if isinstance(event, InsightsEvent)
                else InsightsEvent.model_validate(event)
            ).to_payload()
            for event in events
        ]
        require(payload, "events", "push_events")
        response = await self._transport.write(
            "POST", "/1/events", body={"events": payload}, options=request_options
        )
        return PushEventsResponse.model_validate(response)

    async def send_event(
        self, event: InsightsEvent | dict[str, Any], request_options: Options = None
    ) -> PushEventsResponse:
        return await self.push_events([event], request_options)


class UserInsightsClient:
    """Event shortcuts for one user token."""

    def __init__(self, insights_client: InsightsClient, user_token: str):
        require(user_token, "user_token", "user")
        self._client = insights_client
        self.user_token = user_token

    async def _send(self, event_type: EventType, **fields: Any) -> PushEventsResponse:
        event = InsightsEvent(
            event_type=event_type, user_token=self.user_token, **fields
        )
        return await self._client.send_event(event)

    async def clicked_object_ids(
        self, event_name: str, index_name: str, object_ids: list[str]
    ) -> PushEventsResponse:
        return await self._send(
            EventType.CLICK, event_name=event_name, index=index_name, object_ids=object_ids
        )

    async def clicked_object_ids_after_search(
        self,
        event_name: str,
        index_name: str,
        object_ids: list[str],
        positions: list[int],
        query_id: str,
    ) -> PushEventsResponse:
        """Click on search results, linked to the search by its query ID."""
        return await self._send(
            EventType.CLICK,
            event_name=event_name,
            index=index_name,
            object_ids=object_ids,
            positions=positions,
            query_id=query_id,
        )

    async def clicked_filters(
        self, event_name: str, index_name: str, filters: list[str]
    ) -> PushEventsResponse:
        return await self._send(
            EventType.CLICK, event_name=event_name, index=index_name, filters=filters
        )

    async def converted_object_ids(
        self, event_name: str, index_name: str, object_ids: list[str]
    ) -> PushEventsResponse:
        return await self._send(
            EventType.CONVERSION,
            event_name=event_name,
            index=index_name,
            object_ids=object_ids,
        )

    async def converted_object_ids_after_search(
        self,
        event_name: str,
        index_name: str,
        object_ids: list[str],
        query_id: str,
    ) -> PushEventsResponse:
        return await self._send(
            EventType.CONVERSION,
            event_name=event_name,
            index=index_name,
            object_ids=object_ids,
            query_id=query_id,
        )

    async def converted_filters(
        self, event_name: str, index_name: str, filters: list[str]
    ) -> PushEventsResponse:
        return await self._send(
            EventType.CONVERSION, event_name=event_name, index=index_name, filters=filters
        )

    async def viewed_object_ids(
        self, event_name: str, index_name: str, object_ids: list[str]
    ) -> PushEventsResponse:
        return await self._send(
            EventType.VIEW, event_name=event_name, index=index_name, object_ids=object_ids
        )

    async def viewed_filters(
        self, event_name: str, index_name: str, filters: list[str]
    ) -> PushEventsResponse:
        return await self._send(
            EventType.VIEW, event_name=event_name, index=index_name, filters=filters
        )
