"""Shared catalog API constants.

This module centralizes the base URL, header names and media types used by
the request pipeline and the resource endpoint tables.
"""

from __future__ import annotations

DEFAULT_BASE_URL = "https://api.mendeley.com"

# Environment overrides read by ClientSettings.from_env()
BASE_URL_ENV = "LAAKHAY_CATALOG_BASE_URL"
TOKEN_ENV = "LAAKHAY_CATALOG_TOKEN"

# Response headers interpreted by the pagination layer
COUNT_HEADER = "mendeley-count"
LOCATION_HEADER = "Location"

# Request media types
DOCUMENT_MEDIA_TYPE = "application/vnd.mendeley-document.1+json"
FOLDER_MEDIA_TYPE = "application/vnd.mendeley-folder.1+json"
FOLDER_DOCUMENT_MEDIA_TYPE = "application/vnd.mendeley-document.1+json"
DEFAULT_UPLOAD_TYPE = "application/octet-stream"

# Link header targets accepted by uploads
LINK_TARGETS = {
    "group": "/groups/",
    "document": "/documents/",
}

DEFAULT_TIMEOUT = 30.0

# Page-follow requests get a single retry on gateway timeout
PAGE_MAX_RETRIES = 1
RETRY_STATUSES = frozenset({504})

# Upload streaming chunk size in bytes
UPLOAD_CHUNK_SIZE = 64 * 1024
