"""Retry and follow-location policy around a transport call.

Only page-follow requests are retried, and only once, on gateway timeout.
Follow-location is not a retry: it is a second, mandatory request whenever a
create call returns a Location header, and it is never retried itself.
"""

from __future__ import annotations

from dataclasses import dataclass

from ...core.config import RETRY_STATUSES
from ...core.exceptions import RedirectFollowFailure, TransportFailure
from .telemetry import log_location_follow, log_request_dispatch, log_request_retry
from .transport import RequestDescriptor, Response, Transport


@dataclass(frozen=True)
class RequestOptions:
    """Per-request dispatch options."""

    endpoint_id: str = "unknown"
    max_retries: int = 0
    follow_location: bool = False


async def send_with_retry(
    transport: Transport, request: RequestDescriptor, options: RequestOptions
) -> Response:
    """Send a request, retrying retryable failures up to ``max_retries`` times."""
    attempt = 1
    while True:
        log_request_dispatch(
            endpoint_id=options.endpoint_id,
            method=request.method,
            url=request.url,
            attempt=attempt,
        )
        try:
            return await transport.send(request)
        except TransportFailure as e:
            if e.status not in RETRY_STATUSES or attempt > options.max_retries:
                raise
            log_request_retry(
                endpoint_id=options.endpoint_id,
                url=request.url,
                status=e.status,
                attempt=attempt,
            )
            attempt += 1


async def follow_location(
    transport: Transport, request: RequestDescriptor, response: Response, options: RequestOptions
) -> Response:
    """GET the resource named by the response's Location header.

    Raises:
        RedirectFollowFailure: If the secondary GET fails
    """
    location = response.location
    if not location:
        return response

    log_location_follow(
        endpoint_id=options.endpoint_id, status=response.status, location=location
    )
    headers = {}
    if "Authorization" in request.headers:
        headers["Authorization"] = request.headers["Authorization"]
    redirect = RequestDescriptor(method="GET", url=location, headers=headers)
    try:
        return await transport.send(redirect)
    except TransportFailure as e:
        raise RedirectFollowFailure(
            f"Following location {location} failed: {e}",
            location=location,
            status=e.status,
            body=e.body,
        ) from e


async def dispatch(
    transport: Transport, request: RequestDescriptor, options: RequestOptions
) -> Response:
    """Send a request under the given retry and follow-location options."""
    response = await send_with_retry(transport, request, options)
    if options.follow_location:
        response = await follow_location(transport, request, response, options)
    return response
