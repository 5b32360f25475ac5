"""The externalized node handed to the host node store."""

from typing import Any, Optional

from pydantic import Field

from kontent_source.models.base import KontentModel

NODE_MEDIA_TYPE = "text/html"


class NodeInternal(KontentModel):
    """Host bookkeeping: GraphQL type name and the change-detection digest."""

    type: str
    media_type: str = NODE_MEDIA_TYPE
    content_digest: str


class ProjectedNode(KontentModel):
    """One content item as a host node.

    ``system`` and ``elements`` are already canonical (JSON-compatible) so
    the digest computed over them is reproducible across runs.
    """

    id: str
    parent: Optional[str] = None
    children: list[str] = Field(default_factory=list)
    system: dict[str, Any]
    elements: dict[str, dict[str, Any]]
    internal: NodeInternal

    @property
    def type_name(self) -> str:
        return self.internal.type

    @property
    def content_digest(self) -> str:
        return self.internal.content_digest
