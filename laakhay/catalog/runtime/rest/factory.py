"""Request function factory.

The factory turns EndpointSpec data into callables for the four request
shapes: query, JSON payload, file upload and pagination-link follow. Calling
one of them builds the RequestDescriptor right away, so template and
pagination errors are raised by the call itself, and returns a coroutine
that sends the request.

Example:
    retrieve = factory.query(
        EndpointSpec("documents.retrieve", "GET", "/documents/{id}", ("id",))
    )
    document = await retrieve("15")

Architecture:
    RequestFactory owns the settings, the transport and the PaginationState
    of one resource collection. Each request function reads a settings
    snapshot at call time, hands the descriptor to the retry/redirect policy
    and, once the response arrives, updates the shared PaginationState before
    applying the endpoint's response filter.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Coroutine, Mapping, Sequence
from typing import Any

from pydantic import BaseModel

from ...core.config import PAGE_MAX_RETRIES
from ...core.exceptions import NoPaginationLink
from ...core.settings import ClientSettings, SettingsSnapshot
from ...models.upload import FileUpload
from .headers import HeaderRule, authorization_header, compose_headers, upload_headers
from .pagination import PaginationState
from .policy import RequestOptions, dispatch
from .spec import EndpointSpec, ResponseFilter
from .transport import ProgressCallback, RequestDescriptor, Transport
from .uri import expand_uri_template


def serialize_payload(payload: Any) -> str | None:
    """Compact JSON body for a payload; None means no body."""
    if payload is None:
        return None
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(mode="json", by_alias=True, exclude_none=True)
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


class RequestFunction(ABC):
    """Callable bound to one endpoint of a resource collection."""

    def __init__(self, factory: RequestFactory, spec: EndpointSpec) -> None:
        self.factory = factory
        self.spec = spec

    def __call__(self, *args: Any, **kwargs: Any) -> Coroutine[Any, Any, Any]:
        request, options = self.build(self.factory.settings.snapshot(), *args, **kwargs)
        return self.factory.execute(request, options, self.spec.response_filter)

    @abstractmethod
    def build(
        self, snapshot: SettingsSnapshot, *args: Any, **kwargs: Any
    ) -> tuple[RequestDescriptor, RequestOptions]:
        """Resolve URL, headers and body into a descriptor and its options."""

    def _url(self, snapshot: SettingsSnapshot, values: Sequence[Any]) -> str:
        path = expand_uri_template(self.spec.uri_template, self.spec.uri_vars, values)
        return snapshot.base_url + path

    def _split_args(self, args: Sequence[Any], name: str, kwargs: dict[str, Any]) -> Any:
        # Positional argument after the path values, else the keyword
        count = len(self.spec.uri_vars)
        if len(args) > count:
            return args[count]
        return kwargs.get(name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.spec.method} {self.spec.uri_template})"


class QueryRequest(RequestFunction):
    """``fn(*path_values, params=None)``: request with query parameters only."""

    def build(
        self, snapshot: SettingsSnapshot, *args: Any, **kwargs: Any
    ) -> tuple[RequestDescriptor, RequestOptions]:
        params = self._split_args(args, "params", kwargs)
        headers = compose_headers(self.spec.header_rules, params)
        headers.update(authorization_header(snapshot.auth_flow))
        request = RequestDescriptor(
            method=self.spec.method,
            url=self._url(snapshot, args),
            headers=headers,
            params=dict(params) if params else None,
        )
        return request, RequestOptions(endpoint_id=self.spec.id)


class PayloadRequest(RequestFunction):
    """``fn(*path_values, payload)``: request with a JSON body."""

    def build(
        self, snapshot: SettingsSnapshot, *args: Any, **kwargs: Any
    ) -> tuple[RequestDescriptor, RequestOptions]:
        payload = self._split_args(args, "payload", kwargs)
        headers = compose_headers(self.spec.header_rules, payload)
        headers.update(authorization_header(snapshot.auth_flow))
        request = RequestDescriptor(
            method=self.spec.method,
            url=self._url(snapshot, args),
            headers=headers,
            body=serialize_payload(payload),
        )
        options = RequestOptions(
            endpoint_id=self.spec.id, follow_location=self.spec.follow_location
        )
        return request, options


class UploadRequest(RequestFunction):
    """``fn(file, link_id=None, progress=None)``: raw file upload.

    A callable last positional argument is taken as the progress callback.
    """

    def build(
        self, snapshot: SettingsSnapshot, *args: Any, **kwargs: Any
    ) -> tuple[RequestDescriptor, RequestOptions]:
        if not args:
            raise TypeError(f"{self.spec.id} requires a file")
        file: FileUpload = args[0]
        rest = list(args[1:])
        progress: ProgressCallback | None = kwargs.get("progress")
        if rest and callable(rest[-1]):
            progress = rest.pop()
        link_id = rest[0] if rest else kwargs.get("link_id")

        headers = upload_headers(
            name=file.name,
            content_type=file.type,
            base_url=snapshot.base_url,
            link_id=link_id,
            link_type=self.spec.link_type,
        )
        headers.update(compose_headers(self.spec.header_rules, file))
        headers.update(authorization_header(snapshot.auth_flow))
        request = RequestDescriptor(
            method=self.spec.method,
            url=self._url(snapshot, ()),
            headers=headers,
            body=file.content,
            progress=progress,
        )
        return request, RequestOptions(endpoint_id=self.spec.id)


class PageRequest(RequestFunction):
    """``fn()``: GET the stored ``next``/``previous``/``last`` link."""

    def __init__(self, factory: RequestFactory, spec: EndpointSpec, rel: str) -> None:
        super().__init__(factory, spec)
        self.rel = rel

    def build(
        self, snapshot: SettingsSnapshot, *args: Any, **kwargs: Any
    ) -> tuple[RequestDescriptor, RequestOptions]:
        url = self.factory.pagination.link(self.rel)
        if not url:
            raise NoPaginationLink(self.rel)
        headers = compose_headers(self.spec.header_rules)
        headers.update(authorization_header(snapshot.auth_flow))
        request = RequestDescriptor(method="GET", url=str(url), headers=headers)
        options = RequestOptions(endpoint_id=self.spec.id, max_retries=PAGE_MAX_RETRIES)
        return request, options

    def __repr__(self) -> str:
        return f"PageRequest({self.rel})"


class RequestFactory:
    """Builds request functions sharing settings, transport and pagination state."""

    def __init__(
        self,
        settings: ClientSettings,
        transport: Transport,
        pagination: PaginationState | None = None,
        *,
        name: str = "resource",
    ) -> None:
        """Initialize the factory.

        Args:
            settings: Client settings, snapshotted at every call
            transport: Transport used to send requests
            pagination: Pagination state of the collection (new one if omitted)
            name: Collection name used in page endpoint ids
        """
        self.settings = settings
        self.transport = transport
        self.pagination = pagination if pagination is not None else PaginationState()
        self.name = name

    def query(self, spec: EndpointSpec) -> QueryRequest:
        return QueryRequest(self, spec)

    def payload(self, spec: EndpointSpec) -> PayloadRequest:
        return PayloadRequest(self, spec)

    def upload(self, spec: EndpointSpec) -> UploadRequest:
        return UploadRequest(self, spec)

    def page(
        self,
        rel: str,
        *,
        header_rules: Mapping[str, HeaderRule | str] | None = None,
        response_filter: ResponseFilter = ResponseFilter.BODY,
    ) -> PageRequest:
        self.pagination.link(rel)  # validates rel
        spec = EndpointSpec(
            id=f"{self.name}.{rel}_page",
            method="GET",
            uri_template="",
            header_rules=header_rules or {},
            response_filter=response_filter,
        )
        return PageRequest(self, spec, rel)

    async def execute(
        self,
        request: RequestDescriptor,
        options: RequestOptions,
        response_filter: ResponseFilter = ResponseFilter.BODY,
    ) -> Any:
        """Send a built request and post-process its response."""
        response = await dispatch(self.transport, request, options)
        self.pagination.update(response)
        if response_filter is ResponseFilter.RAW:
            return response
        return response.body
