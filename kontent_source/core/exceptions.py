"""
Core exception hierarchy for kontent-source.

Provides standardized exception types with categorization for retry logic.
All components should use these exceptions instead of generic Exception.
"""

from typing import Any, Optional


# =============================================================================
# Base Exceptions
# =============================================================================


class KontentSourceError(Exception):
    """Base exception for all kontent-source errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class RetryableError(KontentSourceError):
    """
    Transient errors that may succeed when retried.

    Examples: timeouts, temporary upstream outages.
    """

    pass


class PermanentError(KontentSourceError):
    """
    Errors that won't be fixed by retrying.

    Examples: malformed CMS records, authentication failures, unknown project.
    """

    pass


# =============================================================================
# Collector Errors
# =============================================================================


class CollectorError(KontentSourceError):
    """Base exception for CMS collector errors."""

    def __init__(
        self,
        collector_type: str,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ):
        self.collector_type = collector_type
        super().__init__(f"[{collector_type}] {message}", details)


class CollectorTimeoutError(CollectorError, RetryableError):
    """Raised when a collector operation times out."""

    pass


class CollectorAuthError(CollectorError, PermanentError):
    """Raised when the upstream API rejects the request as unauthorized."""

    pass


class CollectorNotFoundError(CollectorError, PermanentError):
    """Raised when the requested project or resource does not exist."""

    pass


class CollectorUnavailableError(CollectorError, RetryableError):
    """Raised when the upstream service is temporarily unavailable."""

    pass


# =============================================================================
# Projection Errors
# =============================================================================


class ProjectionError(PermanentError):
    """Base exception for schema and item projection failures."""

    pass


class MalformedContentTypeError(ProjectionError):
    """Raised when a content type record lacks its codename or elements."""

    def __init__(self, message: str, codename: Optional[str] = None):
        self.codename = codename
        super().__init__(message, {"codename": codename} if codename else None)


class MalformedItemError(ProjectionError):
    """Raised when a content item lacks the fields needed for its identity."""

    def __init__(self, message: str, codename: Optional[str] = None):
        self.codename = codename
        super().__init__(message, {"codename": codename})


# =============================================================================
# Host Errors
# =============================================================================


class HostContractError(PermanentError):
    """Raised when the host node store is called out of order or inconsistently."""

    pass


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(PermanentError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        self.config_key = config_key
        details = {"config_key": config_key} if config_key else None
        super().__init__(message, details)
