"""
HTTP Client for the Splitwise web API.

Async httpx client used by the scripts for their single call. The base URL
and timeout come from config/settings/application.yaml.
"""

from typing import Any

import httpx

from splitwise_scripts.api.schemas import PreparedRequest
from splitwise_scripts.core.config import get_api_base_url
from splitwise_scripts.core.exceptions import HttpStatusError, MalformedResponseError
from splitwise_scripts.core.logging import get_logger, log_with_source

logger = get_logger(__name__)


class APIClient:
    """
    HTTP client for Splitwise API communication.

    Features:
    - Base URL and timeout from settings
    - Structured logging of requests/responses (never headers or cookies)
    - Non-success statuses raised as HttpStatusError before the body is read
    - Injectable transport for tests

    Usage:
        client = APIClient()
        try:
            body = await client.send(prepared)
        finally:
            await client.close()
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the API client.

        Args:
            base_url: API base URL. If None, base URL and timeout are read from
                config/settings/application.yaml.
            timeout: Request timeout in seconds. None means no client-side
                timeout, unless the configured value is being used.
            transport: Optional httpx transport, e.g. httpx.MockTransport.
        """
        if base_url is None:
            base_url, config_timeout = get_api_base_url()
            if timeout is None:
                timeout = config_timeout

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        method: str,
        path: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Make an HTTP request to the API.

        Args:
            method: HTTP method (GET, POST)
            path: API path relative to the base URL (e.g., /get_expenses)
            **kwargs: Additional arguments for httpx

        Returns:
            httpx.Response

        Raises:
            httpx.HTTPError: On transport failure
        """
        client = await self._get_client()

        log_with_source(
            logger,
            "api",
            "debug",
            "API request",
            method=method,
            path=path,
        )

        try:
            response = await client.request(method, path, **kwargs)

            log_with_source(
                logger,
                "api",
                "debug",
                "API response",
                method=method,
                path=path,
                status_code=response.status_code,
            )

            return response

        except httpx.HTTPError as e:
            log_with_source(
                logger,
                "api",
                "error",
                "API request failed",
                method=method,
                path=path,
                error=str(e),
            )
            raise

    async def send(self, prepared: PreparedRequest) -> Any:
        """
        Issue a prepared request and return the decoded JSON body.

        Raises:
            HttpStatusError: If the status is outside the 2xx range.
            MalformedResponseError: If the body is not valid JSON.
            httpx.HTTPError: On transport failure
        """
        response = await self.request(
            prepared.method,
            prepared.path,
            **prepared.to_httpx_kwargs(),
        )

        if not response.is_success:
            raise HttpStatusError(response.status_code)

        try:
            return response.json()
        except ValueError as e:
            log_with_source(
                logger,
                "api",
                "error",
                "API response is not JSON",
                path=prepared.path,
                status_code=response.status_code,
            )
            raise MalformedResponseError(f"Response body is not valid JSON: {e}") from e
