"""Structured logging for request dispatch.

Records carry their fields in ``extra`` so any structured log handler can
pick them up. Nothing here swallows errors; failures still reach the caller.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_request_dispatch(*, endpoint_id: str, method: str, url: str, attempt: int) -> None:
    """Log a request handed to the transport.

    Args:
        endpoint_id: Endpoint identifier
        method: HTTP method
        url: Absolute request URL
        attempt: One-based attempt number
    """
    logger.debug(
        "request_dispatch",
        extra={
            "endpoint_id": endpoint_id,
            "method": method,
            "url": url,
            "attempt": attempt,
        },
    )


def log_request_retry(*, endpoint_id: str, url: str, status: int | None, attempt: int) -> None:
    """Log a retry after a retryable failure.

    Args:
        endpoint_id: Endpoint identifier
        url: Absolute request URL
        status: Status of the failed attempt
        attempt: One-based number of the attempt that failed
    """
    logger.warning(
        "request_retry",
        extra={
            "endpoint_id": endpoint_id,
            "url": url,
            "status": status,
            "attempt": attempt,
        },
    )


def log_location_follow(*, endpoint_id: str, status: int, location: str) -> None:
    logger.debug(
        "location_follow",
        extra={
            "endpoint_id": endpoint_id,
            "status": status,
            "location": location,
        },
    )
