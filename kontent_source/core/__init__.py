"""
Core infrastructure modules for kontent-source.

Provides common utilities used across the package:
- exceptions: Standardized exception hierarchy
- logging: structlog configuration
"""

from kontent_source.core.exceptions import (
    KontentSourceError,
    RetryableError,
    PermanentError,
    CollectorError,
    CollectorTimeoutError,
    CollectorAuthError,
    CollectorNotFoundError,
    CollectorUnavailableError,
    ProjectionError,
    MalformedContentTypeError,
    MalformedItemError,
    HostContractError,
    ConfigurationError,
)

from kontent_source.core.logging import configure_logging

__all__ = [
    # Exceptions
    "KontentSourceError",
    "RetryableError",
    "PermanentError",
    "CollectorError",
    "CollectorTimeoutError",
    "CollectorAuthError",
    "CollectorNotFoundError",
    "CollectorUnavailableError",
    "ProjectionError",
    "MalformedContentTypeError",
    "MalformedItemError",
    "HostContractError",
    "ConfigurationError",
    # Logging
    "configure_logging",
]
