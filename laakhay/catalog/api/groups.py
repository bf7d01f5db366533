"""Groups API endpoint definitions."""

from __future__ import annotations

from ..core.settings import ClientSettings
from ..runtime.rest import EndpointSpec, Transport
from .base import ResourceAPI

LIST = EndpointSpec(id="groups.list", method="GET", uri_template="/groups/")

RETRIEVE = EndpointSpec(
    id="groups.retrieve",
    method="GET",
    uri_template="/groups/{id}",
    uri_vars=("id",),
)


class GroupsAPI(ResourceAPI):
    name = "groups"

    def __init__(self, settings: ClientSettings, transport: Transport) -> None:
        super().__init__(settings, transport)
        self.list = self.factory.query(LIST)
        self.retrieve = self.factory.query(RETRIEVE)
