"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any


class CatalogError(Exception):
    """Base exception for all library errors."""

    pass


class MalformedEndpoint(CatalogError):
    """Endpoint spec is inconsistent with its URI template.

    Raised when an EndpointSpec is constructed, never at call time.
    """

    pass


class MissingTemplateVariable(CatalogError):
    """A URI template placeholder has no value.

    Raised synchronously by the request function, before any network call.
    """

    def __init__(self, variable: str, template: str | None = None) -> None:
        super().__init__(f"Endpoint requires {variable}")
        self.variable = variable
        self.template = template


class NoPaginationLink(CatalogError):
    """The requested pagination relation is not available."""

    def __init__(self, rel: str) -> None:
        super().__init__(f"No pagination link for rel {rel!r}")
        self.rel = rel


class TransportFailure(CatalogError):
    """Non-2xx response or network-level failure from the transport."""

    def __init__(
        self,
        message: str,
        status: int | None = None,
        body: Any = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.body = body


class RedirectFollowFailure(TransportFailure):
    """The GET issued to a returned Location header failed."""

    def __init__(
        self,
        message: str,
        location: str,
        status: int | None = None,
        body: Any = None,
    ) -> None:
        super().__init__(message, status=status, body=body)
        self.location = location
