"""Laakhay Catalog - typed request layer for the document-catalog REST API."""

from .api import (
    CatalogAPI,
    DocumentsAPI,
    FilesAPI,
    FoldersAPI,
    GroupsAPI,
    ResourceAPI,
    TrashAPI,
)
from .client import CatalogClient
from .core import (
    AuthFlow,
    CatalogError,
    ClientSettings,
    MalformedEndpoint,
    MissingTemplateVariable,
    NoAuthFlow,
    NoPaginationLink,
    RedirectFollowFailure,
    TokenAuthFlow,
    TransportFailure,
)
from .models import FileUpload
from .runtime.rest import (
    DerivedHeader,
    EndpointSpec,
    HTTPTransport,
    PaginationState,
    RequestDescriptor,
    RequestFactory,
    Response,
    ResponseFilter,
    StaticHeader,
    Transport,
)

__version__ = "0.1.0"

__all__ = [
    "CatalogClient",
    # Resources
    "ResourceAPI",
    "CatalogAPI",
    "DocumentsAPI",
    "FilesAPI",
    "FoldersAPI",
    "GroupsAPI",
    "TrashAPI",
    # Settings & auth
    "ClientSettings",
    "AuthFlow",
    "TokenAuthFlow",
    "NoAuthFlow",
    # Request pipeline
    "EndpointSpec",
    "ResponseFilter",
    "StaticHeader",
    "DerivedHeader",
    "RequestFactory",
    "RequestDescriptor",
    "Response",
    "PaginationState",
    "Transport",
    "HTTPTransport",
    # Models
    "FileUpload",
    # Errors
    "CatalogError",
    "MalformedEndpoint",
    "MissingTemplateVariable",
    "NoPaginationLink",
    "TransportFailure",
    "RedirectFollowFailure",
]
