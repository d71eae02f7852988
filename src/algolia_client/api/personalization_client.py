"""Client for the Algolia Personalization API."""

from typing import Any

import httpx

from algolia_client.api.base import BaseApiClient, Options, require
from algolia_client.config import PersonalizationConfig
from algolia_client.models.personalization import (
    DeleteUserProfileResponse,
    PersonalizationStrategy,
    SetPersonalizationStrategyResponse,
    UserTokenProfile,
)
from algolia_client.transport.hosts import HostRanker
from algolia_client.transport.requester import Transport
from algolia_client.util.paths import api_path


class PersonalizationClient(BaseApiClient):
    """Async client for the Personalization API.

    The region is mandatory: it must match the region the application's
    profiles are stored in.
    """

    @classmethod
    def create(
        cls,
        app_id: str | None = None,
        api_key: str | None = None,
        region: str | None = None,
        **kwargs,
    ) -> "PersonalizationClient":
        require(region, "region", "PersonalizationClient.create")
        config = PersonalizationConfig.create(app_id, api_key, region=region, **kwargs)
        return cls.create_with_config(config)

    @classmethod
    def create_with_config(
        cls, config: PersonalizationConfig, http_client: httpx.AsyncClient | None = None
    ) -> "PersonalizationClient":
        config = config.model_copy(deep=True)
        hostnames = config.hosts or [f"personalization.{config.region}.algolia.com"]
        hosts = HostRanker.from_hostnames(hostnames, ttl=config.host_ttl)
        return cls(Transport(config, hosts, http_client=http_client), config)

    async def delete_user_profile(
        self, user_token: str, request_options: Options = None
    ) -> DeleteUserProfileResponse:
        """Delete the profile built for a user token."""
        require(user_token, "user_token", "delete_user_profile")
        response = await self._transport.write(
            "DELETE", api_path("/1/profiles/%s", user_token), options=request_options
        )
        return DeleteUserProfileResponse.model_validate(response)

    async def get_personalization_strategy(
        self, request_options: Options = None
    ) -> PersonalizationStrategy:
        response = await self._transport.read(
            "GET", "/1/strategies/personalization", options=request_options
        )
        return PersonalizationStrategy.model_validate(response)

    async def get_user_token_profile(
        self, user_token: str, request_options: Options = None
    ) -> UserTokenProfile:
        require(user_token, "user_token", "get_user_token_profile")
        response = await self._transport.read(
            "GET",
            api_path("/1/profiles/personalization/%s", user_token),
            options=request_options,
        )
        return UserTokenProfile.model_validate(response)

    async def set_personalization_strategy(
        self,
        strategy: PersonalizationStrategy | dict[str, Any],
        request_options: Options = None,
    ) -> SetPersonalizationStrategyResponse:
        """Replace the personalization strategy of the application.

        Args:
            strategy: Event scoring, facet scoring and impact, as a model or
                as a dict with the API field names.
        """
        if not isinstance(strategy, PersonalizationStrategy):
            strategy = PersonalizationStrategy.model_validate(strategy)
        response = await self._transport.write(
            "POST",
            "/1/strategies/personalization",
            body=strategy.to_payload(),
            options=request_options,
        )
        return SetPersonalizationStrategyResponse.model_validate(response)
