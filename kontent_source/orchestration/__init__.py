"""Sourcing run orchestration."""

from kontent_source.orchestration.source_nodes import (
    SourceNodesResult,
    fetch_content_model,
    source_nodes,
)

__all__ = [
    "SourceNodesResult",
    "fetch_content_model",
    "source_nodes",
]
