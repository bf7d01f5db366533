"""Pagination cursor state for a resource collection."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from ...core.config import COUNT_HEADER

if TYPE_CHECKING:
    from .transport import Response

PAGINATION_RELS = ("next", "previous", "last")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_count(value: str) -> int | None:
    """Leading integer of a count header value, or None if there is none."""
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None


class PaginationState:
    """Cursor links and total count of one resource collection.

    Every request function built for a collection shares the same instance.
    Updates happen in the order responses resolve, so overlapping calls follow
    last-writer-wins semantics.
    """

    def __init__(self) -> None:
        self.links: dict[str, str | bool] = {}
        self.count = 0
        self.reset()

    def reset(self) -> None:
        """Forget all cursor links and the total count."""
        self.links = {rel: False for rel in PAGINATION_RELS}
        self.count = 0

    def link(self, rel: str) -> str | bool:
        if rel not in self.links:
            raise ValueError(f"Unknown pagination rel: {rel!r}")
        return self.links[rel]

    def update(self, response: Response) -> None:
        """Record the count and links carried by a response.

        A missing or unparseable count header keeps the last known count;
        a response without a Link header keeps the current links.
        """
        header = response.headers.get(COUNT_HEADER)
        count = parse_count(header) if header is not None else None
        if count is not None:
            self.count = count

        if response.links is None:
            return

        for rel in PAGINATION_RELS:
            self.links[rel] = response.links.get(rel, False)

    def __repr__(self) -> str:
        return f"PaginationState(count={self.count}, links={self.links!r})"
