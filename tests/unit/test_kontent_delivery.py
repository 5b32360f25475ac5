"""Unit tests for the Kontent Delivery API collector.

HTTP is served by ``httpx.MockTransport``; retries use ``wait_none`` so
retried requests do not sleep.
"""

import httpx
import pytest
from tenacity import wait_none

from kontent_source.collectors.kontent_delivery import KontentDeliveryCollector
from kontent_source.core.exceptions import (
    CollectorAuthError,
    CollectorError,
    CollectorNotFoundError,
    CollectorTimeoutError,
    CollectorUnavailableError,
    ConfigurationError,
    MalformedContentTypeError,
    MalformedItemError,
    PermanentError,
    RetryableError,
)


def _collector(handler, **kwargs) -> KontentDeliveryCollector:
    kwargs.setdefault("max_retries", 3)
    return KontentDeliveryCollector(
        "p1",
        base_url="https://deliver.test/",
        retry_wait=wait_none(),
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


class TestKontentDeliveryCollector:
    """Test fetching types and items."""

    def test_requires_project_id(self):
        """Without a project id the collector cannot be built."""
        with pytest.raises(ConfigurationError):
            KontentDeliveryCollector()

    def test_project_id_from_environment(self, monkeypatch):
        """The project id falls back to settings."""
        monkeypatch.setenv("KONTENT_PROJECT_ID", "env-project")

        assert KontentDeliveryCollector().project_id == "env-project"

    @pytest.mark.asyncio
    async def test_list_content_types(self, blog_post_type, author_type):
        """Types are read from the project's /types endpoint."""
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"types": [blog_post_type, author_type]})

        async with _collector(handler) as collector:
            types = await collector.list_content_types()

        assert [content_type.codename for content_type in types] == ["blog_post", "author"]
        assert len(types[0].elements) == 9
        assert requests[0].url.path == "/p1/types"

    @pytest.mark.asyncio
    async def test_malformed_type_from_api(self):
        """A type without elements fails with its codename."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"types": [{"system": {"codename": "broken"}}]})

        async with _collector(handler) as collector:
            with pytest.raises(MalformedContentTypeError) as exc_info:
                await collector.list_content_types()

        assert exc_info.value.codename == "broken"

    @pytest.mark.asyncio
    async def test_list_content_items(self, items_response):
        """Linked items come from the modular_content map."""
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json=items_response)

        async with _collector(handler, depth=2) as collector:
            response = await collector.list_content_items()

        assert [item.codename for item in response.items] == ["hello_world"]
        assert [item.codename for item in response.linked_items] == ["jane_doe"]
        assert requests[0].url.path == "/p1/items"
        assert requests[0].url.params["depth"] == "2"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("section", ["items", "modular_content"])
    async def test_malformed_item_from_api(self, items_response, section):
        """An item whose system attributes do not validate fails with its codename."""
        if section == "items":
            record = items_response["items"][0]
        else:
            record = items_response["modular_content"]["jane_doe"]
        record["system"]["last_modified"] = "not-a-date"

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=items_response)

        async with _collector(handler) as collector:
            with pytest.raises(MalformedItemError) as exc_info:
                await collector.list_content_items()

        assert exc_info.value.codename == record["system"]["codename"]

    @pytest.mark.asyncio
    async def test_items_without_linked_items(self):
        """A response with no modular_content has no linked items."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"items": [], "modular_content": {}})

        async with _collector(handler) as collector:
            response = await collector.list_content_items()

        assert response.items == []
        assert response.linked_items == []


class TestErrorMapping:
    """Test HTTP status and transport error mapping."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status_code,error_type",
        [
            (401, CollectorAuthError),
            (403, CollectorAuthError),
            (404, CollectorNotFoundError),
        ],
    )
    async def test_permanent_statuses_are_not_retried(self, status_code, error_type):
        """Auth and not-found errors fail on the first attempt."""
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(status_code, json={"message": "nope"})

        async with _collector(handler) as collector:
            with pytest.raises(error_type) as exc_info:
                await collector.list_content_types()

        assert isinstance(exc_info.value, PermanentError)
        assert exc_info.value.collector_type == "kontent_delivery"
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_client_error_message(self):
        """Other 4xx responses carry the API's message."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"message": "Invalid depth"})

        async with _collector(handler) as collector:
            with pytest.raises(CollectorError) as exc_info:
                await collector.list_content_items()

        assert "Invalid depth" in exc_info.value.message
        assert exc_info.value.details["status_code"] == 400

    @pytest.mark.asyncio
    async def test_server_errors_are_retried(self, blog_post_type):
        """5xx responses are retried until one succeeds."""
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            if len(calls) < 3:
                return httpx.Response(503)
            return httpx.Response(200, json={"types": [blog_post_type]})

        async with _collector(handler) as collector:
            types = await collector.list_content_types()

        assert len(types) == 1
        assert len(calls) == 3

    @pytest.mark.asyncio
    async def test_server_errors_exhaust_retries(self):
        """The last 5xx is raised once attempts run out."""
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(502)

        async with _collector(handler, max_retries=2) as collector:
            with pytest.raises(CollectorUnavailableError) as exc_info:
                await collector.list_content_types()

        assert isinstance(exc_info.value, RetryableError)
        assert len(calls) == 2

    @pytest.mark.asyncio
    async def test_timeouts_are_retried(self):
        """Timeouts map to CollectorTimeoutError after the last attempt."""
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            raise httpx.ReadTimeout("timed out", request=request)

        async with _collector(handler, max_retries=2) as collector:
            with pytest.raises(CollectorTimeoutError):
                await collector.list_content_types()

        assert len(calls) == 2

    @pytest.mark.asyncio
    async def test_connection_error(self):
        """Transport failures other than timeouts are not retried."""
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            raise httpx.ConnectError("refused", request=request)

        async with _collector(handler) as collector:
            with pytest.raises(CollectorError) as exc_info:
                await collector.list_content_types()

        assert "refused" in exc_info.value.details["original_error"]
        assert len(calls) == 1


class TestHealthCheck:
    """Test the health probe."""

    @pytest.mark.asyncio
    async def test_healthy(self):
        """A successful minimal listing is healthy."""

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.params["limit"] == "1"
            return httpx.Response(200, json={"types": []})

        async with _collector(handler) as collector:
            assert await collector.health_check() is True

    @pytest.mark.asyncio
    async def test_unhealthy(self):
        """Any collector error reports unhealthy."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401)

        async with _collector(handler) as collector:
            assert await collector.health_check() is False
