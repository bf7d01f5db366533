"""Base class for resource collection APIs."""

from __future__ import annotations

from ..core.settings import ClientSettings
from ..runtime.rest import PageRequest, PaginationState, RequestFactory, Transport


class ResourceAPI:
    """A resource collection with its own pagination cursor.

    Subclasses bind their endpoint specs through ``self.factory`` in
    ``__init__``. Every collection gets ``next_page``, ``previous_page`` and
    ``last_page`` request functions reading the shared PaginationState.
    """

    name = "resource"

    def __init__(self, settings: ClientSettings, transport: Transport) -> None:
        self.pagination = PaginationState()
        self.factory = RequestFactory(settings, transport, self.pagination, name=self.name)
        self.next_page: PageRequest = self.factory.page("next")
        self.previous_page: PageRequest = self.factory.page("previous")
        self.last_page: PageRequest = self.factory.page("last")

    @property
    def pagination_links(self) -> dict[str, str | bool]:
        return self.pagination.links

    @property
    def count(self) -> int:
        return self.pagination.count

    def reset_pagination(self) -> None:
        self.pagination.reset()
