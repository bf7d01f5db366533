"""Files API endpoint definitions.

Files are attached to an existing document: ``create(file, document_id)``
sends the raw bytes with a Link header pointing at the document.
"""

from __future__ import annotations

from ..core.settings import ClientSettings
from ..runtime.rest import EndpointSpec, Transport
from .base import ResourceAPI

CREATE = EndpointSpec(
    id="files.create",
    method="POST",
    uri_template="/files",
    link_type="document",
)

LIST = EndpointSpec(id="files.list", method="GET", uri_template="/files/")

REMOVE = EndpointSpec(
    id="files.remove",
    method="DELETE",
    uri_template="/files/{id}",
    uri_vars=("id",),
)


class FilesAPI(ResourceAPI):
    name = "files"

    def __init__(self, settings: ClientSettings, transport: Transport) -> None:
        super().__init__(settings, transport)
        self.create = self.factory.upload(CREATE)
        self.list = self.factory.query(LIST)
        self.remove = self.factory.query(REMOVE)
