"""Authorization hooks.

The request pipeline never runs an OAuth flow itself. It reads the current
token from whatever AuthFlow the settings hold at the moment a request is
built.
"""

from __future__ import annotations

from typing import Protocol


class AuthFlow(Protocol):
    """Source of the bearer token sent with every request."""

    def get_token(self) -> str | None:
        """Return the current access token, or None for anonymous calls."""
        ...


class TokenAuthFlow:
    """Auth flow backed by an already acquired access token."""

    def __init__(self, token: str | None = None) -> None:
        self._token = token

    def get_token(self) -> str | None:
        return self._token

    def set_token(self, token: str | None) -> None:
        self._token = token


class NoAuthFlow:
    """Auth flow that never sends credentials."""

    def get_token(self) -> str | None:
        return None
