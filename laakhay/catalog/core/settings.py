"""Process-wide client settings with per-call snapshots."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .auth import AuthFlow, NoAuthFlow, TokenAuthFlow
from .config import BASE_URL_ENV, DEFAULT_BASE_URL, TOKEN_ENV


@dataclass(frozen=True)
class SettingsSnapshot:
    """Settings captured when a request descriptor is built."""

    base_url: str
    auth_flow: AuthFlow


class ClientSettings:
    """Mutable base URL and auth flow shared by every request function.

    Request functions call snapshot() once per call, so reassigning either
    value only affects calls started afterwards.
    """

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        auth_flow: AuthFlow | None = None,
    ) -> None:
        self.base_url = base_url
        self.auth_flow = auth_flow or NoAuthFlow()

    @property
    def base_url(self) -> str:
        return self._base_url

    @base_url.setter
    def base_url(self, value: str) -> None:
        if not value:
            raise ValueError("base_url must be a non-empty string")
        self._base_url = value.rstrip("/")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientSettings:
        """Build settings from LAAKHAY_CATALOG_* environment variables."""
        env = os.environ if environ is None else environ
        token = env.get(TOKEN_ENV)
        return cls(
            base_url=env.get(BASE_URL_ENV) or DEFAULT_BASE_URL,
            auth_flow=TokenAuthFlow(token) if token else None,
        )

    def set_auth_flow(self, auth_flow: AuthFlow) -> None:
        self.auth_flow = auth_flow

    def set_base_url(self, base_url: str) -> None:
        self.base_url = base_url

    def snapshot(self) -> SettingsSnapshot:
        return SettingsSnapshot(base_url=self.base_url, auth_flow=self.auth_flow)
