"""
Unit Test Fixtures.

Fixtures for unit tests - the network is always an httpx.MockTransport.
"""

import json
from collections.abc import Callable, Generator
from typing import Any
from unittest.mock import patch

import httpx
import pytest

from splitwise_scripts.api.client import APIClient


class RecordingTransport(httpx.MockTransport):
    """
    Mock transport that answers every request with one canned response
    and keeps the requests it saw.

    Usage:
        transport = RecordingTransport(200, {"expenses": []})
        client = APIClient(base_url=base_url, transport=transport)
        ...
        assert transport.calls == 1
        assert transport.requests[0].url.params["limit"] == "25"
    """

    def __init__(
        self,
        status_code: int = 200,
        json_data: Any = None,
        text: str | None = None,
    ) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.body = text if text is not None else json.dumps({} if json_data is None else json_data)
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(
            self.status_code,
            content=self.body.encode(),
            headers={"Content-Type": "application/json"},
        )

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def transport_factory() -> Callable[..., RecordingTransport]:
    """Build a RecordingTransport: transport_factory(200, {"errors": {}})."""
    return RecordingTransport


@pytest.fixture
def mock_api(base_url: str) -> Generator[Callable[..., RecordingTransport], None, None]:
    """
    Route the scripts' APIClient through a RecordingTransport.

    Usage:
        def test_x(mock_api):
            transport = mock_api(200, {"expenses": []})
            runner.invoke(main, [...])
            assert transport.calls == 1
    """
    patchers = []

    def _install(status_code: int = 200, json_data: Any = None, text: str | None = None) -> RecordingTransport:
        transport = RecordingTransport(status_code, json_data, text)
        patcher = patch(
            "splitwise_scripts.cli.runner.APIClient",
            side_effect=lambda: APIClient(base_url=base_url, transport=transport),
        )
        patcher.start()
        patchers.append(patcher)
        return transport

    yield _install

    for patcher in patchers:
        patcher.stop()
