"""Folders API endpoint definitions."""

from __future__ import annotations

from ..core.config import FOLDER_DOCUMENT_MEDIA_TYPE, FOLDER_MEDIA_TYPE
from ..core.settings import ClientSettings
from ..runtime.rest import EndpointSpec, Transport
from .base import ResourceAPI

CREATE = EndpointSpec(
    id="folders.create",
    method="POST",
    uri_template="/folders",
    header_rules={"Content-Type": FOLDER_MEDIA_TYPE},
    follow_location=True,
)

RETRIEVE = EndpointSpec(
    id="folders.retrieve",
    method="GET",
    uri_template="/folders/{id}",
    uri_vars=("id",),
)

UPDATE = EndpointSpec(
    id="folders.update",
    method="PATCH",
    uri_template="/folders/{id}",
    uri_vars=("id",),
    header_rules={"Content-Type": FOLDER_MEDIA_TYPE},
    follow_location=True,
)

DELETE = EndpointSpec(
    id="folders.delete",
    method="DELETE",
    uri_template="/folders/{id}",
    uri_vars=("id",),
)

LIST = EndpointSpec(id="folders.list", method="GET", uri_template="/folders/")

ADD_DOCUMENT = EndpointSpec(
    id="folders.add_document",
    method="POST",
    uri_template="/folders/{id}/documents",
    uri_vars=("id",),
    header_rules={"Content-Type": FOLDER_DOCUMENT_MEDIA_TYPE},
)

REMOVE_DOCUMENT = EndpointSpec(
    id="folders.remove_document",
    method="DELETE",
    uri_template="/folders/{id}/documents/{docId}",
    uri_vars=("id", "docId"),
)


class FoldersAPI(ResourceAPI):
    """Folders endpoints."""

    name = "folders"

    def __init__(self, settings: ClientSettings, transport: Transport) -> None:
        super().__init__(settings, transport)
        self.create = self.factory.payload(CREATE)
        self.retrieve = self.factory.query(RETRIEVE)
        self.update = self.factory.payload(UPDATE)
        self.delete = self.factory.query(DELETE)
        self.list = self.factory.query(LIST)
        self.add_document = self.factory.payload(ADD_DOCUMENT)
        self.remove_document = self.factory.query(REMOVE_DOCUMENT)
