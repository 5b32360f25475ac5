"""Pydantic models for the records read from the Kontent Delivery API."""

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Optional

from pydantic import Field, ValidationError, field_validator, model_validator

from kontent_source.core.exceptions import MalformedContentTypeError, MalformedItemError
from kontent_source.models.base import KontentModel


# =============================================================================
# Content Types
# =============================================================================


class ElementDef(KontentModel):
    """One element declared on a content type."""

    codename: str = Field(..., min_length=1)
    kind: str = Field(
        ..., alias="type", min_length=1, description="Element kind, e.g. text or rich_text"
    )
    name: Optional[str] = None


class ContentTypeSystem(KontentModel):
    codename: str = Field(..., min_length=1)
    id: Optional[str] = None
    name: Optional[str] = None
    last_modified: Optional[datetime] = None


class ContentTypeDef(KontentModel):
    """A content type and its ordered element declarations."""

    system: ContentTypeSystem
    elements: list[ElementDef]

    @field_validator("elements", mode="before")
    @classmethod
    def elements_as_list(cls, value: Any) -> Any:
        """Accept the Delivery API's codename-keyed map as well as a list."""
        if isinstance(value, Mapping):
            return [{"codename": codename, **element} for codename, element in value.items()]
        return value

    @property
    def codename(self) -> str:
        return self.system.codename

    @classmethod
    def from_raw(cls, raw: "ContentTypeDef | Mapping[str, Any]") -> "ContentTypeDef":
        """
        Validate a raw content type record.

        Raises:
            MalformedContentTypeError: If the codename or element list is missing or invalid.
        """
        if isinstance(raw, ContentTypeDef):
            return raw

        codename = None
        if isinstance(raw, Mapping) and isinstance(raw.get("system"), Mapping):
            codename = raw["system"].get("codename")

        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            raise MalformedContentTypeError(
                f"Malformed content type record: {e.error_count()} validation error(s)",
                codename=codename,
            ) from e


# =============================================================================
# Content Items
# =============================================================================


class ContentItemSystem(KontentModel):
    """System attributes of a content item.

    ``type`` and ``id`` are optional here so that a record missing them can
    still be read and reported with its codename; projection rejects it.
    """

    codename: Optional[str] = None
    id: Optional[str] = None
    type: Optional[str] = None
    name: Optional[str] = None
    language: Optional[str] = None
    last_modified: Optional[datetime] = None
    collection: Optional[str] = None
    workflow_step: Optional[str] = None
    sitemap_locations: list[str] = Field(default_factory=list)


class ContentItem(KontentModel):
    """A content item with its raw element records.

    Elements stay raw until projection normalizes them. Records without an
    ``elements`` map (SDK style, elements as top-level properties) keep every
    property except ``system``; projection filters out the ones that are
    not elements.
    """

    system: ContentItemSystem = Field(default_factory=ContentItemSystem)
    elements: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def collect_element_properties(cls, data: Any) -> Any:
        if isinstance(data, Mapping) and "elements" not in data:
            return {
                "system": data.get("system") or {},
                "elements": {key: value for key, value in data.items() if key != "system"},
            }
        return data

    @property
    def codename(self) -> Optional[str]:
        return self.system.codename

    @classmethod
    def from_raw(cls, raw: "ContentItem | Mapping[str, Any]") -> "ContentItem":
        """
        Validate a raw content item record.

        Raises:
            MalformedItemError: If the system attributes do not fit their types.
        """
        if isinstance(raw, ContentItem):
            return raw

        codename = None
        if isinstance(raw, Mapping) and isinstance(raw.get("system"), Mapping):
            codename = raw["system"].get("codename")

        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            raise MalformedItemError(
                f"Malformed content item record: {e.error_count()} validation error(s)",
                codename=codename,
            ) from e


class ContentItemsResponse(KontentModel):
    """Root items plus every item reachable through their links."""

    items: list[ContentItem] = Field(default_factory=list)
    linked_items: list[ContentItem] = Field(default_factory=list)
