"""
CMS collectors.

Collectors follow a common interface with async methods:
- list_content_types(): every content type of the project
- list_content_items(): root items plus linked items
- health_check(): cheap connectivity probe

Example:
    from kontent_source.collectors import KontentDeliveryCollector

    async with KontentDeliveryCollector(project_id) as collector:
        types = await collector.list_content_types()
        response = await collector.list_content_items()
"""

from kontent_source.collectors.base import BaseCollector
from kontent_source.collectors.kontent_delivery import KontentDeliveryCollector

__all__ = [
    "BaseCollector",
    "KontentDeliveryCollector",
]
