"""Documents API endpoint definitions.

Documents live in the user's library or in a group. Creation returns a
Location header which is followed to resolve with the full document.
"""

from __future__ import annotations

from collections.abc import Coroutine, Mapping
from typing import Any

from ..core.config import DOCUMENT_MEDIA_TYPE
from ..core.settings import ClientSettings
from ..runtime.rest import EndpointSpec, Transport
from .base import ResourceAPI

CREATE = EndpointSpec(
    id="documents.create",
    method="POST",
    uri_template="/documents",
    header_rules={"Content-Type": DOCUMENT_MEDIA_TYPE},
    follow_location=True,
)

CREATE_FROM_FILE = EndpointSpec(
    id="documents.create_from_file",
    method="POST",
    uri_template="/documents",
)

CREATE_FROM_FILE_IN_GROUP = EndpointSpec(
    id="documents.create_from_file_in_group",
    method="POST",
    uri_template="/documents",
    link_type="group",
)

RETRIEVE = EndpointSpec(
    id="documents.retrieve",
    method="GET",
    uri_template="/documents/{id}",
    uri_vars=("id",),
)

UPDATE = EndpointSpec(
    id="documents.update",
    method="PATCH",
    uri_template="/documents/{id}",
    uri_vars=("id",),
    header_rules={"Content-Type": DOCUMENT_MEDIA_TYPE},
)

CLONE = EndpointSpec(
    id="documents.clone",
    method="POST",
    uri_template="/documents/{id}/actions/cloneTo",
    uri_vars=("id",),
    header_rules={"Content-Type": DOCUMENT_MEDIA_TYPE},
)

LIST = EndpointSpec(id="documents.list", method="GET", uri_template="/documents/")

LIST_FOLDER = EndpointSpec(
    id="documents.list_folder",
    method="GET",
    uri_template="/folders/{id}/documents",
    uri_vars=("id",),
)

TRASH = EndpointSpec(
    id="documents.trash",
    method="POST",
    uri_template="/documents/{id}/trash",
    uri_vars=("id",),
    header_rules={"Content-Type": DOCUMENT_MEDIA_TYPE},
)

# Folder listings only accept a page size
_FOLDER_LIST_PARAMS = ("limit",)


class DocumentsAPI(ResourceAPI):
    """Documents endpoints."""

    name = "documents"

    def __init__(self, settings: ClientSettings, transport: Transport) -> None:
        super().__init__(settings, transport)
        self.create = self.factory.payload(CREATE)
        self.create_from_file = self.factory.upload(CREATE_FROM_FILE)
        self.create_from_file_in_group = self.factory.upload(CREATE_FROM_FILE_IN_GROUP)
        self.retrieve = self.factory.query(RETRIEVE)
        self.update = self.factory.payload(UPDATE)
        self.clone = self.factory.payload(CLONE)
        self.trash = self.factory.payload(TRASH)
        self._list_documents = self.factory.query(LIST)
        self._list_folder = self.factory.query(LIST_FOLDER)

    def list(self, params: Mapping[str, Any] | None = None) -> Coroutine[Any, Any, Any]:
        """List library documents, or a folder's documents.

        Args:
            params: Query parameters. A ``folder_id`` (or ``folderId``) entry
                switches to the folder listing, which keeps only ``limit``.

        Returns:
            Coroutine resolving with the list of documents
        """
        params = dict(params or {})
        folder_keys = [key for key in ("folder_id", "folderId") if key in params]
        if not folder_keys:
            return self._list_documents(params)

        folder_id = params[folder_keys[0]]
        folder_params = {key: params[key] for key in _FOLDER_LIST_PARAMS if key in params}
        return self._list_folder(folder_id, folder_params)
