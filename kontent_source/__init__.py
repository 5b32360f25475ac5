"""
kontent-source - project a Kontent content model into typed graph nodes.

This package contains:
- projection: naming layer, type projection, and item projection
- models: Kontent records, element values, schema declarations, nodes
- collectors: Kontent Delivery API client
- host: node store interface and an in-memory implementation
- orchestration: the two-phase sourcing run
- config: Pydantic settings
- core: exceptions and logging setup
"""

__version__ = "0.1.0"
