"""Element value models, one per Kontent element kind.

Each model keeps only the normalized shape of its kind. Kinds outside the
catalog parse into ``UnknownElement``, a plain string-valued element, so a
content model that grows a new element kind does not break a run.
"""

import json
from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from typing import Any, Union

from pydantic import AliasChoices, Field, field_validator

from kontent_source.models.base import KontentModel


class ElementKind(str, Enum):
    """Closed catalog of Kontent element kinds."""

    TEXT = "text"
    NUMBER = "number"
    DATE_TIME = "date_time"
    ASSET = "asset"
    RICH_TEXT = "rich_text"
    MODULAR_CONTENT = "modular_content"
    TAXONOMY = "taxonomy"
    MULTIPLE_CHOICE = "multiple_choice"
    URL_SLUG = "url_slug"


_element_models: dict[ElementKind, type["KontentElement"]] = {}


def register_element(kind: ElementKind):
    """Decorator to register the value model for an element kind.

    Example:
        @register_element(ElementKind.TEXT)
        class TextElement(KontentElement):
            ...
    """

    def decorator(cls: type["KontentElement"]):
        _element_models[kind] = cls
        return cls

    return decorator


def get_element_model(kind: str) -> type["KontentElement"]:
    """Return the registered model for a kind, or ``UnknownElement`` outside the catalog."""
    try:
        return _element_models[ElementKind(kind)]
    except ValueError:
        return UnknownElement


def list_element_kinds() -> list[ElementKind]:
    """List all element kinds with a registered model."""
    return list(_element_models.keys())


def is_known_kind(kind: str) -> bool:
    return kind in {member.value for member in ElementKind}


def parse_element(raw: Mapping[str, Any]) -> "KontentElement":
    """Build the normalized value for one raw element record.

    Args:
        raw: Element record carrying a ``type`` tag, in Delivery API or SDK shape.

    Returns:
        The matching element model instance.
    """
    return get_element_model(raw["type"]).model_validate(raw)


def _codenames(value: Any) -> Any:
    """Reduce a list of codenames or pre-resolved items to bare codenames."""
    if not isinstance(value, list):
        return value
    codenames = []
    for entry in value:
        if isinstance(entry, Mapping):
            entry = (entry.get("system") or {}).get("codename") or entry.get("codename")
        if entry:
            codenames.append(entry)
    return codenames


def _keyed_records(value: Any, key_field: str) -> Any:
    """Turn an id-keyed map (Delivery API shape) into a list of records."""
    if isinstance(value, Mapping):
        return [{key_field: key, **record} for key, record in value.items()]
    return value


# =============================================================================
# Shared value records
# =============================================================================


class Asset(KontentModel):
    """Asset metadata; binaries are never fetched."""

    name: str
    description: str | None = None
    mime_type: str = Field(alias="type")
    size: int
    url: str
    width: int | None = None
    height: int | None = None


class RichTextImage(KontentModel):
    image_id: str
    description: str | None = None
    url: str
    width: int | None = None
    height: int | None = None


class RichTextLink(KontentModel):
    link_id: str
    codename: str
    link_type: str = Field(alias="type")
    url_slug: str | None = None


class TaxonomyTerm(KontentModel):
    name: str
    codename: str


class MultipleChoiceOption(KontentModel):
    name: str
    codename: str


# =============================================================================
# Element values
# =============================================================================


class KontentElement(KontentModel):
    """Fields common to every element value."""

    name: str
    kind: str = Field(alias="type")


@register_element(ElementKind.TEXT)
class TextElement(KontentElement):
    value: str | None = None


@register_element(ElementKind.URL_SLUG)
class UrlSlugElement(KontentElement):
    value: str | None = None


@register_element(ElementKind.MULTIPLE_CHOICE)
class MultipleChoiceElement(KontentElement):
    """Selected options; the Delivery API sends a list, older payloads a string."""

    value: list[MultipleChoiceOption] | str | None = None


@register_element(ElementKind.NUMBER)
class NumberElement(KontentElement):
    value: float | None = None


@register_element(ElementKind.DATE_TIME)
class DateTimeElement(KontentElement):
    value: datetime | None = None

    @field_validator("value", mode="before")
    @classmethod
    def empty_as_none(cls, value: Any) -> Any:
        return value or None


@register_element(ElementKind.ASSET)
class AssetElement(KontentElement):
    value: list[Asset] = Field(default_factory=list)

    @field_validator("value", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return value or []


@register_element(ElementKind.MODULAR_CONTENT)
class ModularContentElement(KontentElement):
    """Linked items by codename only; the host follows the links."""

    value: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("itemCodenames", "item_codenames", "value"),
        serialization_alias="value",
    )

    @field_validator("value", mode="before")
    @classmethod
    def reduce_to_codenames(cls, value: Any) -> Any:
        return _codenames(value) or []


@register_element(ElementKind.RICH_TEXT)
class RichTextElement(KontentElement):
    """Raw markup plus the images, links, and items embedded in it."""

    value: str | None = None
    images: list[RichTextImage] = Field(default_factory=list)
    links: list[RichTextLink] = Field(default_factory=list)
    linked_items: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices(
            "linkedItemCodenames", "linked_item_codenames", "modular_content"
        ),
        serialization_alias="linkedItems",
    )

    @field_validator("images", mode="before")
    @classmethod
    def images_as_list(cls, value: Any) -> Any:
        return _keyed_records(value, "image_id") or []

    @field_validator("links", mode="before")
    @classmethod
    def links_as_list(cls, value: Any) -> Any:
        return _keyed_records(value, "link_id") or []

    @field_validator("linked_items", mode="before")
    @classmethod
    def reduce_to_codenames(cls, value: Any) -> Any:
        return _codenames(value) or []


@register_element(ElementKind.TAXONOMY)
class TaxonomyElement(KontentElement):
    taxonomy_group: str | None = None
    value: list[TaxonomyTerm] = Field(default_factory=list)

    @field_validator("value", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return value or []


class UnknownElement(KontentElement):
    """Fallback for element kinds outside the catalog; the value is kept as text."""

    value: str | None = None

    @field_validator("value", mode="before")
    @classmethod
    def stringify(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        return json.dumps(value, sort_keys=True, default=str)


ElementValue = Union[
    TextElement,
    NumberElement,
    DateTimeElement,
    AssetElement,
    RichTextElement,
    ModularContentElement,
    TaxonomyElement,
    MultipleChoiceElement,
    UrlSlugElement,
    UnknownElement,
]
