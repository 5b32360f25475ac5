"""Item projection: Kontent content items to host nodes.

Root items and linked items are merged by codename, every element is
normalized into its catalog shape, and each item becomes one node whose id
depends only on (type codename, item id) and whose digest depends only on
the normalized content.
"""

from collections.abc import Iterable, Mapping
from itertools import chain
from typing import Any

import structlog
from pydantic import ValidationError

from kontent_source.core.exceptions import MalformedItemError
from kontent_source.host.base import NodeHost
from kontent_source.models.elements import KontentElement, is_known_kind, parse_element
from kontent_source.models.nodes import NodeInternal, ProjectedNode
from kontent_source.models.schemas import ContentItem
from kontent_source.projection.naming import to_field_name, to_identity_key, to_type_name

logger = structlog.get_logger(__name__)

RawItem = ContentItem | Mapping[str, Any]


def item_key(item: ContentItem) -> str:
    """Deduplication key: the codename, or type and id when there is none."""
    system = item.system
    if system.codename:
        return system.codename
    if system.type and system.id:
        return f"{system.type}:{system.id}"
    raise MalformedItemError("Content item has neither a codename nor a type and id")


def union_items(items: Iterable[RawItem], linked_items: Iterable[RawItem]) -> list[ContentItem]:
    """Merge root and linked items, keeping the first occurrence of each item.

    Order is preserved: root items first, then linked items not seen yet.
    """
    merged: dict[str, ContentItem] = {}
    for raw in chain(items, linked_items):
        item = ContentItem.from_raw(raw)
        merged.setdefault(item_key(item), item)
    return list(merged.values())


def is_element(value: Any) -> bool:
    """Only records carrying a non-empty ``type`` tag are elements."""
    return isinstance(value, Mapping) and isinstance(value.get("type"), str) and bool(value["type"])


def normalize_elements(raw_elements: Mapping[str, Any]) -> dict[str, KontentElement]:
    """Normalize every element record and key it by GraphQL field name.

    Raises:
        ValidationError: If an element record does not fit its kind's shape.
    """
    elements: dict[str, KontentElement] = {}
    for codename, raw in raw_elements.items():
        if not is_element(raw):
            continue
        if not is_known_kind(raw["type"]):
            logger.debug("unknown_element_kind_value", element=codename, kind=raw["type"])
        elements[to_field_name(codename)] = parse_element(raw)
    return elements


def project_item(item: RawItem, host: NodeHost) -> ProjectedNode:
    """
    Build the node for one content item.

    Args:
        item: Content item model or raw record.
        host: Supplies node ids and content digests.

    Returns:
        The projected node; nothing is written to the host.

    Raises:
        MalformedItemError: If ``system.type`` or ``system.id`` is missing or an
            element record is invalid.
    """
    item = ContentItem.from_raw(item)
    system = item.system

    if not system.type or not system.id:
        raise MalformedItemError(
            "Content item is missing system.type or system.id",
            codename=system.codename,
        )

    try:
        elements = normalize_elements(item.elements)
    except ValidationError as e:
        raise MalformedItemError(
            f"Content item has an invalid element: {e}",
            codename=system.codename,
        ) from e

    content = {
        "system": system.to_structured(),
        "elements": {name: element.to_structured() for name, element in elements.items()},
    }

    return ProjectedNode(
        id=host.create_node_id(to_identity_key(system.type, system.id)),
        parent=None,
        children=[],
        system=content["system"],
        elements=content["elements"],
        internal=NodeInternal(
            type=to_type_name(system.type),
            content_digest=host.create_content_digest(content),
        ),
    )


def build_nodes(
    items: Iterable[RawItem],
    linked_items: Iterable[RawItem],
    host: NodeHost,
) -> list[ProjectedNode]:
    """Deduplicate and project every item without writing anything to the host."""
    return [project_item(item, host) for item in union_items(items, linked_items)]


def emit_nodes(nodes: Iterable[ProjectedNode], host: NodeHost) -> None:
    for node in nodes:
        host.create_node(node)


def project_items(
    items: Iterable[RawItem],
    linked_items: Iterable[RawItem],
    host: NodeHost,
) -> list[ProjectedNode]:
    """
    Project root and linked items and hand every node to the host.

    All nodes are built before the first ``create_node`` call, so a
    malformed item aborts the run without a partial graph.

    Returns:
        The created nodes, in union order.
    """
    nodes = build_nodes(items, linked_items, host)
    emit_nodes(nodes, host)

    logger.info("kontent_nodes_created", nodes=len(nodes))
    return nodes
