"""Data models for Kontent records, element values, and projected nodes."""

from kontent_source.models.base import KontentModel
from kontent_source.models.elements import (
    Asset,
    AssetElement,
    DateTimeElement,
    ElementKind,
    ElementValue,
    KontentElement,
    ModularContentElement,
    MultipleChoiceElement,
    MultipleChoiceOption,
    NumberElement,
    RichTextElement,
    RichTextImage,
    RichTextLink,
    TaxonomyElement,
    TaxonomyTerm,
    TextElement,
    UnknownElement,
    UrlSlugElement,
    get_element_model,
    is_known_kind,
    list_element_kinds,
    parse_element,
    register_element,
)
from kontent_source.models.graph import ObjectTypeDef, SchemaRegistration
from kontent_source.models.nodes import NodeInternal, ProjectedNode
from kontent_source.models.schemas import (
    ContentItem,
    ContentItemSystem,
    ContentItemsResponse,
    ContentTypeDef,
    ContentTypeSystem,
    ElementDef,
)

__all__ = [
    "KontentModel",
    # Elements
    "Asset",
    "AssetElement",
    "DateTimeElement",
    "ElementKind",
    "ElementValue",
    "KontentElement",
    "ModularContentElement",
    "MultipleChoiceElement",
    "MultipleChoiceOption",
    "NumberElement",
    "RichTextElement",
    "RichTextImage",
    "RichTextLink",
    "TaxonomyElement",
    "TaxonomyTerm",
    "TextElement",
    "UnknownElement",
    "UrlSlugElement",
    "get_element_model",
    "is_known_kind",
    "list_element_kinds",
    "parse_element",
    "register_element",
    # Graph declarations
    "ObjectTypeDef",
    "SchemaRegistration",
    # Nodes
    "NodeInternal",
    "ProjectedNode",
    # CMS records
    "ContentItem",
    "ContentItemSystem",
    "ContentItemsResponse",
    "ContentTypeDef",
    "ContentTypeSystem",
    "ElementDef",
]
