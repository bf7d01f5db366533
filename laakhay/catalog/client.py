"""CatalogClient facade over the resource collection APIs.

The client owns the process-wide settings (base URL and auth flow) and the
transport, and exposes one ResourceAPI per collection. Each collection keeps
its own pagination cursor.

Architecture:
    Settings are a single mutable ClientSettings object shared by every
    request function. Request functions snapshot it when they build a
    request, so set_auth_flow() and set_base_url() take effect on the next
    call without disturbing calls already in flight.

Design Decisions:
    - Transport injection allows testing with a stub transport
    - The client closes only a transport it created itself
    - Context manager pattern ensures the aiohttp session is closed
"""

from __future__ import annotations

import logging
from typing import Any

from .api import CatalogAPI, DocumentsAPI, FilesAPI, FoldersAPI, GroupsAPI, TrashAPI
from .core.auth import AuthFlow
from .core.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from .core.settings import ClientSettings
from .runtime.rest import HTTPTransport, Transport

logger = logging.getLogger(__name__)


class CatalogClient:
    """Entry point for the document-catalog REST API.

    Example:
        >>> async with CatalogClient(auth_flow=TokenAuthFlow("token")) as client:
        ...     records = await client.catalog.search({"doi": "10.1000/182"})
        ...     documents = await client.documents.list({"limit": 20})
        ...     if client.documents.pagination_links["next"]:
        ...         more = await client.documents.next_page()
    """

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        auth_flow: AuthFlow | None = None,
        settings: ClientSettings | None = None,
        transport: Transport | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API base URL (ignored when settings is given)
            auth_flow: Source of bearer tokens (ignored when settings is given)
            settings: Pre-built settings, e.g. from ClientSettings.from_env()
            transport: Optional transport (creates an HTTPTransport if not provided)
            timeout: Total request timeout for the default transport
        """
        self.settings = settings or ClientSettings(base_url=base_url, auth_flow=auth_flow)
        self._owns_transport = transport is None
        self.transport: Transport = transport or HTTPTransport(timeout=timeout)
        self._closed = False

        self.catalog = CatalogAPI(self.settings, self.transport)
        self.documents = DocumentsAPI(self.settings, self.transport)
        self.files = FilesAPI(self.settings, self.transport)
        self.folders = FoldersAPI(self.settings, self.transport)
        self.groups = GroupsAPI(self.settings, self.transport)
        self.trash = TrashAPI(self.settings, self.transport)

    def set_auth_flow(self, auth_flow: AuthFlow) -> None:
        """Switch the auth flow used by calls started from now on."""
        self.settings.set_auth_flow(auth_flow)

    def set_base_url(self, base_url: str) -> None:
        """Switch the base URL used by calls started from now on."""
        self.settings.set_base_url(base_url)

    # --- Lifecycle -----------------------------------------------------------

    async def close(self) -> None:
        """Close the client and its own transport."""
        if self._closed:
            return
        self._closed = True
        logger.debug("Closing CatalogClient")
        if self._owns_transport:
            await self.transport.close()

    async def __aenter__(self) -> CatalogClient:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
