"""Transport contract and the aiohttp-backed implementation.

The request pipeline only sees RequestDescriptor in and Response out; any
object with matching ``send`` and ``close`` coroutines can stand in for
HTTPTransport (tests use a recording stub).
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import AsyncIterator, Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

import aiohttp
from multidict import CIMultiDict, CIMultiDictProxy

from ...core.config import DEFAULT_TIMEOUT, LOCATION_HEADER, UPLOAD_CHUNK_SIZE
from ...core.exceptions import TransportFailure

ProgressCallback = Callable[[int, int], Any]


@dataclass(frozen=True)
class RequestDescriptor:
    """Fully resolved representation of one HTTP call."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: str | bytes | None = None
    params: Mapping[str, Any] | None = None
    progress: ProgressCallback | None = None


@dataclass(frozen=True)
class Response:
    """Status, headers and decoded body of a successful call.

    ``links`` maps link relations to absolute URLs, or is None when the
    response carried no Link header at all.
    """

    status: int
    headers: CIMultiDict[str] = field(default_factory=CIMultiDict)
    body: Any = None
    links: Mapping[str, str] | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.headers, (CIMultiDict, CIMultiDictProxy)):
            object.__setattr__(self, "headers", CIMultiDict(self.headers or {}))

    @property
    def location(self) -> str | None:
        return self.headers.get(LOCATION_HEADER)


class Transport(Protocol):
    """Sends request descriptors and returns responses.

    Implementations raise TransportFailure for non-2xx responses and for
    network-level errors.
    """

    async def send(self, request: RequestDescriptor) -> Response: ...

    async def close(self) -> None: ...


def encode_params(params: Mapping[str, Any] | None) -> dict[str, str] | None:
    """Convert query params into the string values aiohttp accepts."""
    if not params:
        return None
    encoded: dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            encoded[key] = "true" if value else "false"
        else:
            encoded[key] = str(value)
    return encoded


async def _stream_body(
    body: bytes, progress: ProgressCallback, chunk_size: int = UPLOAD_CHUNK_SIZE
) -> AsyncIterator[bytes]:
    total = len(body)
    sent = 0
    for offset in range(0, total, chunk_size):
        chunk = body[offset : offset + chunk_size]
        yield chunk
        sent += len(chunk)
        progress(sent, total)


class HTTPTransport:
    """Async HTTP transport over a lazily created aiohttp session."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def send(self, request: RequestDescriptor) -> Response:
        data: Any = request.body
        if isinstance(data, bytes) and request.progress is not None:
            data = _stream_body(data, request.progress)

        try:
            async with self.session.request(
                request.method,
                request.url,
                params=encode_params(request.params),
                headers=request.headers,
                data=data,
            ) as response:
                body = await self._read_body(response)
                if not 200 <= response.status < 300:
                    raise TransportFailure(
                        f"{request.method} {request.url} failed with status {response.status}",
                        status=response.status,
                        body=body,
                    )
                return Response(
                    status=response.status,
                    headers=CIMultiDict(response.headers),
                    body=body,
                    links=self._read_links(response),
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportFailure(f"{request.method} {request.url} failed: {e}") from e

    @staticmethod
    async def _read_body(response: aiohttp.ClientResponse) -> Any:
        raw = await response.read()
        if not raw:
            return None
        try:
            text = raw.decode(response.charset or "utf-8", errors="replace")
        except LookupError:
            text = raw.decode("utf-8", errors="replace")
        if "json" in (response.content_type or ""):
            try:
                return json.loads(text)
            except ValueError:
                return text
        return text

    @staticmethod
    def _read_links(response: aiohttp.ClientResponse) -> dict[str, str] | None:
        if "Link" not in response.headers:
            return None
        return {str(rel): str(link["url"]) for rel, link in response.links.items()}

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPTransport:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
