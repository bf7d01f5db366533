"""Trash API endpoint definitions."""

from __future__ import annotations

from ..core.settings import ClientSettings
from ..runtime.rest import EndpointSpec, Transport
from .base import ResourceAPI

LIST = EndpointSpec(id="trash.list", method="GET", uri_template="/trash/")

RETRIEVE = EndpointSpec(
    id="trash.retrieve",
    method="GET",
    uri_template="/trash/{id}",
    uri_vars=("id",),
)

RESTORE = EndpointSpec(
    id="trash.restore",
    method="POST",
    uri_template="/trash/{id}/restore",
    uri_vars=("id",),
)

DESTROY = EndpointSpec(
    id="trash.destroy",
    method="DELETE",
    uri_template="/trash/{id}",
    uri_vars=("id",),
)


class TrashAPI(ResourceAPI):
    name = "trash"

    def __init__(self, settings: ClientSettings, transport: Transport) -> None:
        super().__init__(settings, transport)
        self.list = self.factory.query(LIST)
        self.retrieve = self.factory.query(RETRIEVE)
        self.restore = self.factory.payload(RESTORE)
        self.destroy = self.factory.query(DESTROY)
