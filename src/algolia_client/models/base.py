"""Base model shared by every API response and payload model."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class AlgoliaModel(BaseModel):
    """Pydantic model with camelCase wire names.

    Fields are declared in snake_case and read from / written to their
    camelCase JSON names. Unknown fields returned by the API are kept.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_payload(self) -> dict:
        """JSON-ready dict using wire names, without unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
