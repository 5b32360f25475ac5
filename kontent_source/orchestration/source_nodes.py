"""Sourcing run: fetch a Kontent project and project it into the host.

The run is two-phase. Types and items are fetched concurrently, then the
schema registration is handed to the host before the first node. Both
phases are projected in memory first, so any fetch or projection error
aborts the run before the host sees anything.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Any, Optional

import structlog

from kontent_source.collectors.base import BaseCollector
from kontent_source.collectors.kontent_delivery import KontentDeliveryCollector
from kontent_source.host.base import NodeHost
from kontent_source.models.graph import SchemaRegistration
from kontent_source.models.nodes import ProjectedNode
from kontent_source.models.schemas import ContentItemsResponse, ContentTypeDef
from kontent_source.projection.items import build_nodes, emit_nodes
from kontent_source.projection.types import project_types

logger = structlog.get_logger(__name__)


@dataclass
class SourceNodesResult:
    """Summary of one sourcing run."""

    project_id: str
    registration: SchemaRegistration
    nodes: list[ProjectedNode] = field(default_factory=list)

    @property
    def type_names(self) -> list[str]:
        return self.registration.type_names

    @property
    def node_ids(self) -> list[str]:
        return [node.id for node in self.nodes]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "project_id": self.project_id,
            "object_types": len(self.registration.object_types),
            "nodes": len(self.nodes),
            "type_names": self.type_names,
            "node_ids": self.node_ids,
        }


async def fetch_content_model(
    collector: BaseCollector,
) -> tuple[list[ContentTypeDef], ContentItemsResponse]:
    """Issue the type and item listings concurrently.

    If either listing fails, the other one is cancelled and awaited before
    the error propagates, so no request outlives the run.
    """
    types_task = asyncio.create_task(collector.list_content_types())
    items_task = asyncio.create_task(collector.list_content_items())
    tasks = (types_task, items_task)

    try:
        await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise

    return types_task.result(), items_task.result()


async def source_nodes(
    host: NodeHost,
    project_id: Optional[str] = None,
    collector: Optional[BaseCollector] = None,
) -> SourceNodesResult:
    """
    Source every content type and item of a project into the host.

    Args:
        host: Receives the schema registration and the nodes.
        project_id: Kontent project id; falls back to settings.
        collector: CMS collector; a ``KontentDeliveryCollector`` is created
            (and closed) for the run when omitted.

    Returns:
        SourceNodesResult with the registration and created nodes.

    Raises:
        CollectorError: If either listing fails.
        ProjectionError: If a type or item record is malformed.
        ConfigurationError: If no project id is available.
    """
    if collector is None:
        async with KontentDeliveryCollector(project_id) as delivery:
            return await source_nodes(host, delivery.project_id, delivery)

    project_id = project_id or collector.config.get("project_id") or ""
    run_logger = logger.bind(component="source_nodes", project_id=project_id)

    run_logger.info("source_nodes_start")
    content_types, response = await fetch_content_model(collector)

    registration = project_types(content_types)
    nodes = build_nodes(response.items, response.linked_items, host)

    host.create_types(registration)
    emit_nodes(nodes, host)

    run_logger.info(
        "source_nodes_complete",
        content_types=len(content_types),
        object_types=len(registration.object_types),
        nodes=len(nodes),
    )
    return SourceNodesResult(project_id=project_id, registration=registration, nodes=nodes)
