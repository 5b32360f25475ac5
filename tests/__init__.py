"""
kontent-source Test Suite.

- unit/: naming, element normalization, type and item projection, host store,
  settings and the Delivery API collector
- integration/: full sourcing runs against fake and mocked-HTTP collectors
- conftest.py: Shared fixtures and test configuration

Run tests with: pytest
"""
