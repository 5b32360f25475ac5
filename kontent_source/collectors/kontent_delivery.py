"""Kontent Delivery API collector for content types and content items.

Reads the published content model of one project. Only public (unsecured)
Delivery API access is supported and each listing is a single request:
no pagination and no rate-limit handling.

API Reference: https://kontent.ai/learn/reference/openapi/delivery-api/
"""

from typing import Any, Optional

import httpx
import structlog
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

from kontent_source.collectors.base import BaseCollector
from kontent_source.config.settings import get_settings
from kontent_source.core.exceptions import (
    CollectorAuthError,
    CollectorError,
    CollectorNotFoundError,
    CollectorTimeoutError,
    CollectorUnavailableError,
)
from kontent_source.models.schemas import ContentItem, ContentItemsResponse, ContentTypeDef

logger = structlog.get_logger(__name__)

COLLECTOR_NAME = "kontent_delivery"


class KontentDeliveryCollector(BaseCollector):
    """Async collector for the Kontent Delivery API.

    Example:
        async with KontentDeliveryCollector(project_id="975bf280-...") as collector:
            types = await collector.list_content_types()
            response = await collector.list_content_items()
    """

    def __init__(
        self,
        project_id: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        depth: Optional[int] = None,
        retry_wait: Optional[wait_base] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the collector.

        Args:
            project_id: Kontent project id. If not provided, loads from settings.
            base_url: Delivery API base URL.
            timeout: Request timeout in seconds.
            max_retries: Attempts for timeouts and 5xx responses.
            depth: Levels of linked items to include with the item listing.
            retry_wait: tenacity wait strategy between attempts.
            transport: httpx transport override, used by tests.

        Raises:
            ConfigurationError: If no project id is configured.
        """
        settings = get_settings()
        self._project_id = settings.require_project_id(project_id)
        self._base_url = (base_url or settings.kontent_delivery_url).rstrip("/")
        self._timeout = timeout if timeout is not None else settings.kontent_request_timeout
        self._max_retries = max_retries or settings.kontent_max_retries
        self._depth = depth if depth is not None else settings.kontent_linked_items_depth
        self._retry_wait = retry_wait or wait_exponential(multiplier=1, min=2, max=10)
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

        super().__init__(
            {
                "project_id": self._project_id,
                "base_url": self._base_url,
                "timeout": self._timeout,
                "max_retries": self._max_retries,
                "depth": self._depth,
            }
        )

    @property
    def project_id(self) -> str:
        return self._project_id

    async def __aenter__(self) -> "KontentDeliveryCollector":
        """Enter async context manager."""
        await self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager."""
        await self.close()

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure HTTP client is initialized."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=f"{self._base_url}/{self._project_id}",
                timeout=httpx.Timeout(self._timeout),
                headers={"Accept": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def _request(self, endpoint: str, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """GET an endpoint, retrying timeouts and 5xx responses.

        Raises:
            CollectorAuthError: On 401/403.
            CollectorNotFoundError: When the project or endpoint does not exist.
            CollectorUnavailableError: On 5xx after the last attempt.
            CollectorTimeoutError: On timeout after the last attempt.
            CollectorError: On other API or transport errors.
        """
        retrying = AsyncRetrying(
            retry=retry_if_exception_type((CollectorUnavailableError, CollectorTimeoutError)),
            stop=stop_after_attempt(self._max_retries),
            wait=self._retry_wait,
            reraise=True,
        )
        return await retrying(self._send, endpoint, params)

    async def _send(self, endpoint: str, params: Optional[dict[str, Any]]) -> dict[str, Any]:
        client = await self._ensure_client()
        details = {"endpoint": endpoint, "project_id": self._project_id}

        try:
            response = await client.get(endpoint, params=params)
        except httpx.TimeoutException as e:
            logger.warning("kontent_delivery_timeout", endpoint=endpoint, error=str(e))
            raise CollectorTimeoutError(COLLECTOR_NAME, f"Request timeout: {e}", details) from e
        except httpx.RequestError as e:
            logger.error("kontent_delivery_request_error", endpoint=endpoint, error=str(e))
            raise CollectorError(
                COLLECTOR_NAME,
                f"Request failed: {e}",
                {**details, "original_error": str(e)},
            ) from e

        if response.status_code in (401, 403):
            raise CollectorAuthError(
                COLLECTOR_NAME,
                "Delivery API rejected the request; secured or preview access is not supported",
                {**details, "status_code": response.status_code},
            )
        elif response.status_code == 404:
            raise CollectorNotFoundError(
                COLLECTOR_NAME,
                f"Project or resource not found: {endpoint}",
                details,
            )
        elif response.status_code >= 500:
            logger.warning(
                "kontent_delivery_unavailable",
                endpoint=endpoint,
                status_code=response.status_code,
            )
            raise CollectorUnavailableError(
                COLLECTOR_NAME,
                f"Delivery API unavailable ({response.status_code})",
                {**details, "status_code": response.status_code},
            )
        elif response.status_code >= 400:
            error_msg = _error_message(response)
            logger.error(
                "kontent_delivery_api_error",
                status_code=response.status_code,
                error=error_msg,
                endpoint=endpoint,
            )
            raise CollectorError(
                COLLECTOR_NAME,
                f"API error {response.status_code}: {error_msg}",
                {**details, "status_code": response.status_code},
            )

        return response.json() if response.content else {}

    # -------------------------------------------------------------------------
    # Public API Methods
    # -------------------------------------------------------------------------

    async def list_content_types(self) -> list[ContentTypeDef]:
        """Fetch every content type of the project.

        Raises:
            MalformedContentTypeError: If a returned type lacks its codename or elements.
        """
        response = await self._request("types")
        types = [ContentTypeDef.from_raw(raw) for raw in response.get("types", [])]
        logger.info("kontent_types_fetched", project_id=self._project_id, count=len(types))
        return types

    async def list_content_items(self) -> ContentItemsResponse:
        """Fetch all content items plus the items they link to.

        Linked items come from the response's ``modular_content`` map, filled
        up to the configured depth.

        Raises:
            MalformedItemError: If an item's system attributes do not fit their types.
        """
        response = await self._request("items", params={"depth": self._depth})
        items = [ContentItem.from_raw(raw) for raw in response.get("items", [])]
        linked_items = [
            ContentItem.from_raw(raw)
            for raw in (response.get("modular_content") or {}).values()
        ]
        logger.info(
            "kontent_items_fetched",
            project_id=self._project_id,
            items=len(items),
            linked_items=len(linked_items),
        )
        return ContentItemsResponse(items=items, linked_items=linked_items)

    async def health_check(self) -> bool:
        """Check that the project answers a minimal type listing."""
        try:
            await self._request("types", params={"limit": 1})
        except CollectorError as e:
            logger.warning("kontent_delivery_health_check_failed", error=str(e))
            return False
        return True


def _error_message(response: httpx.Response) -> str:
    try:
        return response.json().get("message", "Unknown error")
    except (ValueError, AttributeError):
        return response.text or "Unknown error"
