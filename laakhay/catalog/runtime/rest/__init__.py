"""REST runtime abstractions."""

from .factory import (
    PageRequest,
    PayloadRequest,
    QueryRequest,
    RequestFactory,
    RequestFunction,
    UploadRequest,
)
from .headers import DerivedHeader, HeaderRule, StaticHeader, compose_headers, upload_headers
from .pagination import PaginationState
from .policy import RequestOptions, dispatch
from .spec import EndpointSpec, ResponseFilter
from .transport import HTTPTransport, RequestDescriptor, Response, Transport
from .uri import expand_uri_template

__all__ = [
    "EndpointSpec",
    "ResponseFilter",
    "StaticHeader",
    "DerivedHeader",
    "HeaderRule",
    "compose_headers",
    "upload_headers",
    "expand_uri_template",
    "PaginationState",
    "RequestOptions",
    "dispatch",
    "RequestDescriptor",
    "Response",
    "Transport",
    "HTTPTransport",
    "RequestFactory",
    "RequestFunction",
    "QueryRequest",
    "PayloadRequest",
    "UploadRequest",
    "PageRequest",
]
