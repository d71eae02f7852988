"""Pydantic models for the Insights API."""

import enum
from typing import Optional

from pydantic import Field, model_validator

from algolia_client.models.base import AlgoliaModel


class EventType(str, enum.Enum):
    CLICK = "click"
    CONVERSION = "conversion"
    VIEW = "view"


class InsightsEvent(AlgoliaModel):
    """A user event sent to the Insights API."""

    event_type: EventType
    event_name: str
    index: str
    user_token: str
    timestamp: Optional[int] = None
    """Milliseconds since the epoch; the server time is used when unset."""

    object_ids: Optional[list[str]] = Field(default=None, alias="objectIDs")
    positions: Optional[list[int]] = None
    """Positions of the clicked objects, required with a query ID on clicks."""

    query_id: Optional[str] = Field(default=None, alias="queryID")
    filters: Optional[list[str]] = None

    @model_validator(mode="after")
    def _check_targets(self) -> "InsightsEvent":
        if self.object_ids is None and self.filters is None:
            raise ValueError("An event needs either object_ids or filters")
        if self.object_ids is not None and self.filters is not None:
            raise ValueError("An event cannot have both object_ids and filters")
        if self.positions is not None and self.object_ids is not None:
            if len(self.positions) != len(self.object_ids):
                raise ValueError("positions and object_ids must have the same length")
        return self


class PushEventsResponse(AlgoliaModel):
    message: str = ""
    status: int = 200
