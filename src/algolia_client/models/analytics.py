"""Pydantic models for the Analytics API responses."""

from typing import Optional

from pydantic import Field

from algolia_client.models.base import AlgoliaModel


class DailyCount(AlgoliaModel):
    date: str
    count: int = 0


class AverageClickEvent(AlgoliaModel):
    date: str
    average: Optional[float] = None
    click_count: int = 0


class AverageClickPositionResponse(AlgoliaModel):
    average: Optional[float] = None
    """Average position of clicks; None when no click was tracked."""
    click_count: int = 0
    dates: list[AverageClickEvent] = Field(default_factory=list)


class ClickPosition(AlgoliaModel):
    position: list[int] = Field(default_factory=list)
    """Range of positions, e.g. [3, 4]."""
    click_count: int = 0


class ClickPositionsResponse(AlgoliaModel):
    positions: list[ClickPosition] = Field(default_factory=list)


class ClickThroughRateEvent(AlgoliaModel):
    date: str
    rate: Optional[float] = None
    click_count: int = 0
    tracked_search_count: int = 0


class ClickThroughRateResponse(AlgoliaModel):
    rate: Optional[float] = None
    click_count: int = 0
    tracked_search_count: int = 0
    dates: list[ClickThroughRateEvent] = Field(default_factory=list)


class ConversionRateEvent(AlgoliaModel):
    date: str
    rate: Optional[float] = None
    tracked_search_count: int = 0
    conversion_count: int = 0


class ConversionRateResponse(AlgoliaModel):
    rate: Optional[float] = None
    tracked_search_count: int = 0
    conversion_count: int = 0
    dates: list[ConversionRateEvent] = Field(default_factory=list)


class NoClickRateEvent(AlgoliaModel):
    date: str
    rate: Optional[float] = None
    count: int = 0
    no_click_count: int = 0


class NoClickRateResponse(AlgoliaModel):
    rate: Optional[float] = None
    count: int = 0
    no_click_count: int = 0
    dates: list[NoClickRateEvent] = Field(default_factory=list)


class NoResultsRateEvent(AlgoliaModel):
    date: str
    rate: Optional[float] = None
    count: int = 0
    no_result_count: int = 0


class NoResultsRateResponse(AlgoliaModel):
    rate: Optional[float] = None
    count: int = 0
    no_result_count: int = 0
    dates: list[NoResultsRateEvent] = Field(default_factory=list)


class SearchesCountResponse(AlgoliaModel):
    count: int = 0
    dates: list[DailyCount] = Field(default_factory=list)


class UsersCountResponse(AlgoliaModel):
    count: int = 0
    dates: list[DailyCount] = Field(default_factory=list)


class SearchCount(AlgoliaModel):
    search: str
    count: int = 0
    with_filter_count: Optional[int] = None
    nb_hits: Optional[int] = None


class SearchesNoClicksResponse(AlgoliaModel):
    searches: list[SearchCount] = Field(default_factory=list)


class SearchesNoResultsResponse(AlgoliaModel):
    searches: list[SearchCount] = Field(default_factory=list)


class TopSearchesResponse(AlgoliaModel):
    searches: list[SearchCount] = Field(default_factory=list)


class StatusResponse(AlgoliaModel):
    updated_at: Optional[str] = None
    """When the analytics of the index were last processed."""


class CountryCount(AlgoliaModel):
    country: str
    count: int = 0


class TopCountriesResponse(AlgoliaModel):
    countries: list[CountryCount] = Field(default_factory=list)


class AttributeCount(AlgoliaModel):
    attribute: str
    count: int = 0


class TopFilterAttributesResponse(AlgoliaModel):
    attributes: list[AttributeCount] = Field(default_factory=list)


class FilterValue(AlgoliaModel):
    attribute: str
    operator: str = ":"
    value: str
    count: Optional[int] = None


class TopFilterForAttributeResponse(AlgoliaModel):
    values: list[FilterValue] = Field(default_factory=list)


class FiltersNoResults(AlgoliaModel):
    count: int = 0
    values: list[FilterValue] = Field(default_factory=list)


class TopFiltersNoResultsResponse(AlgoliaModel):
    values: list[FiltersNoResults] = Field(default_factory=list)


class HitCount(AlgoliaModel):
    hit: str
    """Object ID of the record."""
    count: int = 0


class TopHitsResponse(AlgoliaModel):
    hits: list[HitCount] = Field(default_factory=list)
