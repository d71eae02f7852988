"""Pydantic models for the Personalization API."""

from typing import Any, Optional

from pydantic import Field

from algolia_client.models.base import AlgoliaModel


class EventScoring(AlgoliaModel):
    score: int
    event_name: str
    event_type: str


class FacetScoring(AlgoliaModel):
    score: int
    facet_name: str


class PersonalizationStrategy(AlgoliaModel):
    """Weights applied to events and facets when building user profiles."""

    event_scoring: list[EventScoring] = Field(default_factory=list)
    facet_scoring: list[FacetScoring] = Field(default_factory=list)
    personalization_impact: int = 0


class SetPersonalizationStrategyResponse(AlgoliaModel):
    message: str = ""


class UserTokenProfile(AlgoliaModel):
    user_token: str
    last_event_at: Optional[str] = None
    scores: dict[str, Any] = Field(default_factory=dict)


class DeleteUserProfileResponse(AlgoliaModel):
    user_token: str
    deleted_until: Optional[str] = None
