"""Base model shared by every Kontent record and projected value."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class KontentModel(BaseModel):
    """Immutable model that reads snake_case or camelCase and writes camelCase.

    The Delivery API speaks snake_case while the generated GraphQL schema
    uses camelCase, so both spellings are accepted on the way in. Unknown
    keys (``rawData``, ``renditions``, pre-resolved linked items) are
    dropped.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    def to_structured(self) -> dict[str, Any]:
        """Dump to plain JSON-compatible data using the externalized key names."""
        return self.model_dump(mode="json", by_alias=True)
