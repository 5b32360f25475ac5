"""Type projection: Kontent content types to GraphQL schema declarations.

Every content type yields two object types, an elements type holding one
field per element and the item type itself:

    type KontentItemBlogPostElements @dontInfer {
      title: KontentTextElement
    }

    type KontentItemBlogPost implements Node & KontentItem @dontInfer {
      system: KontentItemSystem!
      elements: KontentItemBlogPostElements
    }

The output is a pure function of the input list, so projecting the same
content model twice registers identical declarations.
"""

from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from kontent_source.models.elements import ElementKind, is_known_kind
from kontent_source.models.graph import ObjectTypeDef, SchemaRegistration
from kontent_source.models.schemas import ContentTypeDef
from kontent_source.projection.catalog import (
    BASE_TYPE_DEFS,
    ELEMENT_VALUE_TYPES,
    ITEM_INTERFACE,
    NODE_INTERFACE,
    SYSTEM_TYPE,
    generic_element_type,
    generic_element_type_name,
)
from kontent_source.projection.naming import (
    to_elements_type_name,
    to_field_name,
    to_type_name,
)

logger = structlog.get_logger(__name__)


def element_value_type(kind: str) -> str:
    """GraphQL value type referenced by an element of the given kind."""
    if is_known_kind(kind):
        return ELEMENT_VALUE_TYPES[ElementKind(kind)]
    return generic_element_type_name(kind)


def create_type_defs(content_type: ContentTypeDef) -> list[ObjectTypeDef]:
    """Build the elements type and the item type for one content type.

    Two element codenames that map to the same field name (``hero_image``
    and ``heroImage``) collide; the later element wins and the field keeps
    the position of the first one.
    """
    codename = content_type.codename
    fields: dict[str, str] = {}

    for element in content_type.elements:
        field_name = to_field_name(element.codename)
        if field_name in fields:
            logger.warning(
                "element_field_collision",
                content_type=codename,
                field=field_name,
                element=element.codename,
            )
        fields[field_name] = element_value_type(element.kind)

    elements_type = ObjectTypeDef(
        name=to_elements_type_name(codename),
        fields=fields,
        infer=False,
    )
    item_type = ObjectTypeDef(
        name=to_type_name(codename),
        fields={
            "system": f"{SYSTEM_TYPE}!",
            "elements": elements_type.name,
        },
        interfaces=[NODE_INTERFACE, ITEM_INTERFACE],
        infer=False,
    )
    return [elements_type, item_type]


def create_generic_element_types(content_types: list[ContentTypeDef]) -> list[ObjectTypeDef]:
    """Declare a string-valued value type for each element kind outside the catalog."""
    generic: dict[str, ObjectTypeDef] = {}

    for content_type in content_types:
        for element in content_type.elements:
            if is_known_kind(element.kind):
                continue
            type_def = generic_element_type(element.kind)
            if type_def.name in generic:
                continue
            logger.warning(
                "unknown_element_kind",
                kind=element.kind,
                content_type=content_type.codename,
                element=element.codename,
                value_type=type_def.name,
            )
            generic[type_def.name] = type_def

    return list(generic.values())


def project_types(
    content_types: Iterable[ContentTypeDef | Mapping[str, Any]],
) -> SchemaRegistration:
    """Project the full list of content types into one schema registration.

    Args:
        content_types: Content type models or raw Delivery API records.

    Returns:
        Base declarations plus generated object types, ready for ``create_types``.

    Raises:
        MalformedContentTypeError: If any record lacks its codename or elements.
    """
    type_defs = [ContentTypeDef.from_raw(raw) for raw in content_types]

    object_types = create_generic_element_types(type_defs)
    for content_type in type_defs:
        object_types.extend(create_type_defs(content_type))

    logger.info(
        "kontent_types_projected",
        content_types=len(type_defs),
        object_types=len(object_types),
    )

    return SchemaRegistration(base_type_defs=BASE_TYPE_DEFS, object_types=object_types)
