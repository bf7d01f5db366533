"""Catalog API: search and retrieve canonical document records."""

from __future__ import annotations

from ..core.settings import ClientSettings
from ..runtime.rest import EndpointSpec, Transport
from .base import ResourceAPI

SEARCH = EndpointSpec(id="catalog.search", method="GET", uri_template="/catalog")

RETRIEVE = EndpointSpec(
    id="catalog.retrieve",
    method="GET",
    uri_template="/catalog/{id}",
    uri_vars=("id",),
)


class CatalogAPI(ResourceAPI):
    """Catalog endpoints.

    ``search(params)`` filters by identifiers such as ``doi`` or
    ``filehash``; ``retrieve(id, params)`` fetches one record, with an
    optional ``view`` parameter.
    """

    name = "catalog"

    def __init__(self, settings: ClientSettings, transport: Transport) -> None:
        super().__init__(settings, transport)
        self.search = self.factory.query(SEARCH)
        self.retrieve = self.factory.query(RETRIEVE)
