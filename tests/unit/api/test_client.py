"""Unit tests for the Splitwise HTTP client."""

import httpx
import pytest

from splitwise_scripts.api.client import APIClient
from splitwise_scripts.api.schemas import PreparedRequest
from splitwise_scripts.core.exceptions import (
    ExternalServiceError,
    HttpStatusError,
    MalformedResponseError,
)


def _get(path: str = "/get_expenses", **kwargs) -> PreparedRequest:
    return PreparedRequest(method="GET", path=path, headers={"Accept": "application/json"}, **kwargs)


class TestAPIClient:
    """Tests for APIClient class."""

    def test_reads_base_url_and_timeout_from_config(self) -> None:
        client = APIClient()

        assert client.base_url == "https://splitwise.test/api/v3.0"
        assert client.timeout == 5

    def test_explicit_timeout_overrides_config(self) -> None:
        assert APIClient(timeout=1.5).timeout == 1.5

    def test_client_strips_trailing_slash(self) -> None:
        client = APIClient(base_url="https://splitwise.test/api/v3.0/")
        assert client.base_url == "https://splitwise.test/api/v3.0"

    def test_explicit_base_url_without_timeout_means_no_timeout(self) -> None:
        assert APIClient(base_url="https://splitwise.test").timeout is None

    @pytest.mark.asyncio
    async def test_send_returns_decoded_json(self, base_url, transport_factory) -> None:
        transport = transport_factory(200, {"expenses": []})
        client = APIClient(base_url=base_url, transport=transport)

        body = await client.send(_get(params={"limit": "25"}))
        await client.close()

        assert body == {"expenses": []}
        assert transport.calls == 1
        assert str(transport.last.url) == "https://splitwise.test/api/v3.0/get_expenses?limit=25"

    @pytest.mark.asyncio
    async def test_send_posts_form_data(self, base_url, transport_factory) -> None:
        transport = transport_factory(200, {})
        client = APIClient(base_url=base_url, transport=transport)
        prepared = PreparedRequest(
            method="POST",
            path="/create_expense",
            headers={"Content-Type": "application/x-www-form-urlencoded"},
            data={"cost": "22", "description": "Test dinner"},
        )

        await client.send(prepared)
        await client.close()

        request = transport.last
        assert request.method == "POST"
        assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
        assert request.content == b"cost=22&description=Test+dinner"

    @pytest.mark.asyncio
    async def test_non_success_status_raises_without_parsing(self, base_url, transport_factory) -> None:
        transport = transport_factory(401, text="<html>not json</html>")
        client = APIClient(base_url=base_url, transport=transport)

        with pytest.raises(HttpStatusError) as exc_info:
            await client.send(_get())
        await client.close()

        assert exc_info.value.status_code == 401
        assert "401" in str(exc_info.value)
        assert isinstance(exc_info.value, ExternalServiceError)

    @pytest.mark.asyncio
    async def test_malformed_body_raises(self, base_url, transport_factory) -> None:
        client = APIClient(base_url=base_url, transport=transport_factory(200, text="not json"))

        with pytest.raises(MalformedResponseError):
            await client.send(_get())
        await client.close()

    @pytest.mark.asyncio
    async def test_transport_error_is_reraised(self, base_url) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        client = APIClient(base_url=base_url, transport=httpx.MockTransport(refuse))

        with pytest.raises(httpx.ConnectError):
            await client.send(_get())
        await client.close()

    @pytest.mark.asyncio
    async def test_close_client(self, base_url, transport_factory) -> None:
        client = APIClient(base_url=base_url, transport=transport_factory())
        await client._get_client()
        assert client._client is not None

        await client.close()
        assert client._client is None
