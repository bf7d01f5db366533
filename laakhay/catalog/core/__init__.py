"""Core components."""

from .auth import AuthFlow, NoAuthFlow, TokenAuthFlow
from .exceptions import (
    CatalogError,
    MalformedEndpoint,
    MissingTemplateVariable,
    NoPaginationLink,
    RedirectFollowFailure,
    TransportFailure,
)
from .settings import ClientSettings, SettingsSnapshot

__all__ = [
    "AuthFlow",
    "NoAuthFlow",
    "TokenAuthFlow",
    "ClientSettings",
    "SettingsSnapshot",
    "CatalogError",
    "MalformedEndpoint",
    "MissingTemplateVariable",
    "NoPaginationLink",
    "TransportFailure",
    "RedirectFollowFailure",
]
