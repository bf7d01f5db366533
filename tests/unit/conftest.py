"""Shared fixtures for unit tests."""

from __future__ import annotations

import pytest

from laakhay.catalog import CatalogClient, ClientSettings, TokenAuthFlow
from laakhay.catalog.runtime.rest import RequestDescriptor, Response

BASE_URL = "https://api.mendeley.com"


class StubTransport:
    """Transport double that records requests and replays queued outcomes.

    Outcomes are Response objects or exceptions, consumed one per request.
    A request with nothing left in the queue fails the test.
    """

    def __init__(self, *outcomes: Response | BaseException) -> None:
        self.requests: list[RequestDescriptor] = []
        self._outcomes: list[Response | BaseException] = list(outcomes)
        self.closed = False

    def queue(self, *outcomes: Response | BaseException) -> None:
        self._outcomes.extend(outcomes)

    async def send(self, request: RequestDescriptor) -> Response:
        self.requests.append(request)
        if not self._outcomes:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        outcome = self._outcomes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    async def close(self) -> None:
        self.closed = True

    @property
    def last_request(self) -> RequestDescriptor:
        return self.requests[-1]


@pytest.fixture
def stub_transport() -> StubTransport:
    return StubTransport()


@pytest.fixture
def settings() -> ClientSettings:
    return ClientSettings(base_url=BASE_URL, auth_flow=TokenAuthFlow("auth"))


@pytest.fixture
def client(settings: ClientSettings, stub_transport: StubTransport) -> CatalogClient:
    return CatalogClient(settings=settings, transport=stub_transport)
