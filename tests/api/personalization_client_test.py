"""Tests for the Personalization API client."""

import pytest

from algolia_client.api import PersonalizationClient
from algolia_client.models import PersonalizationStrategy

STRATEGY = {
    "eventScoring": [
        {"score": 42, "eventName": "Add to cart", "eventType": "conversion"},
        {"score": 10, "eventName": "Product viewed", "eventType": "view"},
    ],
    "facetScoring": [{"score": 20, "facetName": "brand"}],
    "personalizationImpact": 75,
}


class TestCreation:
    """Tests for region handling."""

    def test_region_is_required(self):
        with pytest.raises(ValueError, match="'region'"):
            PersonalizationClient.create("my-app", "key")

    def test_region_host(self):
        client = PersonalizationClient.create("my-app", "key", region="us")
        assert [host.hostname for host in client.transport.hosts.hosts] == [
            "personalization.us.algolia.com"
        ]

    def test_unknown_region(self):
        with pytest.raises(ValueError, match="region must be one of: us, eu"):
            PersonalizationClient.create("my-app", "key", region="de")


class TestEndpoints:
    """Tests for the four personalization calls."""

    async def test_get_strategy(self, personalization_client, fake_api):
        fake_api.queue(STRATEGY)

        strategy = await personalization_client.get_personalization_strategy()

        assert strategy.personalization_impact == 75
        assert strategy.event_scoring[0].event_name == "Add to cart"
        assert strategy.facet_scoring[0].facet_name == "brand"
        request = fake_api.requests[0]
        assert request.method == "GET"
        assert request.url.host == "personalization.eu.algolia.com"
        assert request.url.path == "/1/strategies/personalization"

    async def test_set_strategy(self, personalization_client, fake_api):
        """Test that the strategy is sent with its API field names."""
        fake_api.queue({"message": "Strategy was successfully updated"})

        response = await personalization_client.set_personalization_strategy(
            PersonalizationStrategy.model_validate(STRATEGY)
        )

        assert response.message == "Strategy was successfully updated"
        assert fake_api.requests[0].method == "POST"
        assert fake_api.body() == STRATEGY

    async def test_set_strategy_from_dict(self, personalization_client, fake_api):
        await personalization_client.set_personalization_strategy(STRATEGY)
        assert fake_api.body() == STRATEGY

    async def test_get_user_token_profile(self, personalization_client, fake_api):
        fake_api.queue(
            {
                "userToken": "user 1",
                "lastEventAt": "2024-01-01T00:00:00Z",
                "scores": {"type": {"shoes": 10}},
            }
        )

        profile = await personalization_client.get_user_token_profile("user 1")

        assert profile.user_token == "user 1"
        assert profile.scores == {"type": {"shoes": 10}}
        assert (
            fake_api.requests[0].url.raw_path
            == b"/1/profiles/personalization/user%201"
        )

    async def test_delete_user_profile(self, personalization_client, fake_api):
        fake_api.queue({"userToken": "user-1", "deletedUntil": "2024-01-02T00:00:00Z"})

        response = await personalization_client.delete_user_profile("user-1")

        assert response.deleted_until == "2024-01-02T00:00:00Z"
        assert fake_api.requests[0].method == "DELETE"
        assert fake_api.requests[0].url.path == "/1/profiles/user-1"

    @pytest.mark.parametrize(
        "method", ["delete_user_profile", "get_user_token_profile"]
    )
    async def test_user_token_required(self, personalization_client, fake_api, method):
        with pytest.raises(ValueError, match="'user_token'"):
            await getattr(personalization_client, method)("")
        assert fake_api.requests == []
