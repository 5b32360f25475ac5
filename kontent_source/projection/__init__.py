"""
Schema and content projection.

- naming: codename -> type, field, and identity-key names
- catalog: fixed base declarations and element value types
- types: content types -> schema registration
- items: content items -> host nodes

Example:
    registration = project_types(content_types)
    host.create_types(registration)
    nodes = project_items(response.items, response.linked_items, host)
"""

from kontent_source.projection.items import (
    build_nodes,
    emit_nodes,
    item_key,
    normalize_elements,
    project_item,
    project_items,
    union_items,
)
from kontent_source.projection.naming import (
    to_element_value_type_name,
    to_elements_type_name,
    to_field_name,
    to_identity_key,
    to_type_name,
)
from kontent_source.projection.types import (
    create_type_defs,
    element_value_type,
    project_types,
)

__all__ = [
    # Naming
    "to_element_value_type_name",
    "to_elements_type_name",
    "to_field_name",
    "to_identity_key",
    "to_type_name",
    # Types
    "create_type_defs",
    "element_value_type",
    "project_types",
    # Items
    "build_nodes",
    "emit_nodes",
    "item_key",
    "normalize_elements",
    "project_item",
    "project_items",
    "union_items",
]
