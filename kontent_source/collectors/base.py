"""Base collector interface for CMS collectors.

The projection only needs two read-only calls from a CMS; every collector
extends BaseCollector and implements them.
"""

from abc import ABC, abstractmethod
from typing import Any

from kontent_source.models.schemas import ContentItemsResponse, ContentTypeDef


class BaseCollector(ABC):
    """Abstract base class for CMS collectors.

    Provides common interface for initialization and health checking.
    """

    def __init__(self, config: dict[str, Any]):
        """Initialize collector with configuration.

        Args:
            config: Configuration dictionary with collector-specific settings.
        """
        self.config = config

    @abstractmethod
    async def list_content_types(self) -> list[ContentTypeDef]:
        """Return every content type of the project."""
        ...

    @abstractmethod
    async def list_content_items(self) -> ContentItemsResponse:
        """Return the root items plus every linked item they reach."""
        ...

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the collector is operational.

        Returns:
            True if the collector can connect and operate successfully.
        """
        ...
