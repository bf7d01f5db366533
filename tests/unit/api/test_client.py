"""Unit tests for the CatalogClient facade."""

from __future__ import annotations

import pytest

from laakhay.catalog import CatalogClient, ClientSettings, HTTPTransport, TokenAuthFlow
from laakhay.catalog.runtime.rest import Response


def test_defaults():
    client = CatalogClient()
    assert client.settings.base_url == "https://api.mendeley.com"
    assert isinstance(client.transport, HTTPTransport)


def test_resources_share_settings_and_transport(client, stub_transport, settings):
    for resource in (client.catalog, client.documents, client.folders, client.groups):
        assert resource.factory.settings is settings
        assert resource.factory.transport is stub_transport


@pytest.mark.asyncio
async def test_set_auth_flow_applies_to_next_call(client, stub_transport):
    stub_transport.queue(Response(status=200, body=[]), Response(status=200, body=[]))

    await client.groups.list()
    client.set_auth_flow(TokenAuthFlow("refreshed"))
    await client.groups.list()

    first, second = stub_transport.requests
    assert first.headers["Authorization"] == "Bearer auth"
    assert second.headers["Authorization"] == "Bearer refreshed"


@pytest.mark.asyncio
async def test_set_base_url(client, stub_transport):
    stub_transport.queue(Response(status=200, body=[]))

    client.set_base_url("https://api.example.com/")
    await client.catalog.search({"doi": "10.1/x"})

    assert stub_transport.last_request.url == "https://api.example.com/catalog"


@pytest.mark.asyncio
async def test_injected_transport_not_closed(client, stub_transport):
    async with client:
        pass
    assert stub_transport.closed is False


@pytest.mark.asyncio
async def test_owned_transport_closed():
    client = CatalogClient(settings=ClientSettings())
    session = client.transport.session
    async with client:
        pass
    assert session.closed
