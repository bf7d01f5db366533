"""Unit tests for the documents API."""

from __future__ import annotations

import pytest

from laakhay.catalog import FileUpload
from laakhay.catalog.core import NoPaginationLink, RedirectFollowFailure, TransportFailure
from laakhay.catalog.runtime.rest import Response

BASE_URL = "https://api.mendeley.com"
DOCUMENT_TYPE = "application/vnd.mendeley-document.1+json"
LINK_NEXT = f"{BASE_URL}/documents/?limit=5&reverse=false&sort=created&order=desc&marker=0372"
LINK_PREV = f"{BASE_URL}/documents/?limit=5&reverse=false&sort=created&order=desc&marker=1372"
LINK_LAST = f"{BASE_URL}/documents/?limit=5&reverse=true&sort=created&order=desc"


def page_response(count: int | None = 155, links: bool = True) -> Response:
    headers = {"mendeley-count": str(count)} if count is not None else {}
    return Response(
        status=200,
        headers=headers,
        body=[{"id": "15", "title": "foo"}],
        links={"next": LINK_NEXT, "previous": LINK_PREV, "last": LINK_LAST} if links else None,
    )


class TestCreate:
    @pytest.mark.asyncio
    async def test_create_follows_location(self, client, stub_transport):
        stub_transport.queue(
            Response(status=201, headers={"location": f"{BASE_URL}/documents/123"}),
            Response(status=200, body={"id": "15", "title": "foo"}),
        )

        result = await client.documents.create({"title": "foo"})

        assert result == {"id": "15", "title": "foo"}
        post, get = stub_transport.requests
        assert post.method == "POST"
        assert post.url == f"{BASE_URL}/documents"
        assert post.headers["Content-Type"] == DOCUMENT_TYPE
        assert post.headers["Authorization"] == "Bearer auth"
        assert post.body == '{"title":"foo"}'
        assert get.method == "GET"
        assert get.url == f"{BASE_URL}/documents/123"

    @pytest.mark.asyncio
    async def test_create_failure(self, client, stub_transport):
        stub_transport.queue(TransportFailure("server error", status=500), page_response())

        with pytest.raises(TransportFailure) as exc_info:
            await client.documents.create({"title": "foo"})

        assert exc_info.value.status == 500
        assert len(stub_transport.requests) == 1

    @pytest.mark.asyncio
    async def test_redirect_failure(self, client, stub_transport):
        stub_transport.queue(
            Response(status=201, headers={"location": f"{BASE_URL}/documents/123"}),
            TransportFailure("not found", status=404),
        )

        with pytest.raises(RedirectFollowFailure) as exc_info:
            await client.documents.create({"title": "foo"})

        assert exc_info.value.status == 404


class TestFileUploads:
    @pytest.fixture
    def file(self):
        return FileUpload(name="中文file name(1).pdf", content=b"contents", type="text/plain")

    @pytest.mark.asyncio
    async def test_create_from_file(self, client, stub_transport, file):
        stub_transport.queue(
            Response(
                status=201,
                headers={"location": f"{BASE_URL}/documents/123"},
                body={"id": "15", "title": "foo"},
            )
        )

        result = await client.documents.create_from_file(file)

        assert result == {"id": "15", "title": "foo"}
        assert len(stub_transport.requests) == 1
        request = stub_transport.last_request
        assert request.method == "POST"
        assert request.url == f"{BASE_URL}/documents"
        assert request.headers["Content-Type"] == "text/plain"
        assert request.headers["Content-Disposition"] == (
            "attachment; filename*=UTF-8''%E4%B8%AD%E6%96%87file%20name%281%29.pdf"
        )
        assert request.body == b"contents"

    @pytest.mark.asyncio
    async def test_create_from_file_in_group(self, client, stub_transport, file):
        stub_transport.queue(Response(status=201, body={"id": "15"}))

        await client.documents.create_from_file_in_group(file, 123)

        assert stub_transport.last_request.headers["Link"] == (
            f'<{BASE_URL}/groups/123>; rel="group"'
        )


class TestRequests:
    @pytest.mark.asyncio
    async def test_retrieve(self, client, stub_transport):
        stub_transport.queue(Response(status=200, body={"id": "15", "title": "foo"}))

        await client.documents.retrieve(15)

        request = stub_transport.last_request
        assert request.method == "GET"
        assert request.url == f"{BASE_URL}/documents/15"
        assert "Content-Type" not in request.headers
        assert request.body is None

    @pytest.mark.asyncio
    async def test_update(self, client, stub_transport):
        stub_transport.queue(Response(status=200, body={"id": "15", "title": "bar"}))

        await client.documents.update(15, {"title": "bar"})

        request = stub_transport.last_request
        assert request.method == "PATCH"
        assert request.url == f"{BASE_URL}/documents/15"
        assert request.headers["Content-Type"] == DOCUMENT_TYPE
        assert request.body == '{"title":"bar"}'

    @pytest.mark.asyncio
    async def test_clone(self, client, stub_transport):
        stub_transport.queue(
            Response(status=200, body={"id": "16", "title": "foo", "group_id": "bar"})
        )

        result = await client.documents.clone(15, {"group_id": "bar"})

        assert result == {"id": "16", "title": "foo", "group_id": "bar"}
        request = stub_transport.last_request
        assert request.method == "POST"
        assert request.url == f"{BASE_URL}/documents/15/actions/cloneTo"
        assert request.body == '{"group_id":"bar"}'

    @pytest.mark.asyncio
    async def test_trash(self, client, stub_transport):
        stub_transport.queue(Response(status=204))

        await client.documents.trash(15)

        request = stub_transport.last_request
        assert request.method == "POST"
        assert request.url == f"{BASE_URL}/documents/15/trash"
        assert request.headers["Content-Type"] == DOCUMENT_TYPE
        assert request.body is None

    @pytest.mark.asyncio
    async def test_list(self, client, stub_transport):
        stub_transport.queue(page_response())
        params = {"sort": "created", "order": "desc", "limit": 50}

        await client.documents.list(params)

        request = stub_transport.last_request
        assert request.method == "GET"
        assert request.url == f"{BASE_URL}/documents/"
        assert request.params == params
        assert "Content-Type" not in request.headers

    @pytest.mark.asyncio
    async def test_list_folder(self, client, stub_transport):
        stub_transport.queue(page_response())

        await client.documents.list(
            {"sort": "created", "order": "desc", "limit": 50, "folderId": "xyz"}
        )

        request = stub_transport.last_request
        assert request.url == f"{BASE_URL}/folders/xyz/documents"
        assert request.params == {"limit": 50}

    @pytest.mark.asyncio
    async def test_list_folder_snake_case(self, client, stub_transport):
        stub_transport.queue(page_response())

        await client.documents.list({"folder_id": "xyz"})

        request = stub_transport.last_request
        assert request.url == f"{BASE_URL}/folders/xyz/documents"
        assert request.params is None

    @pytest.mark.asyncio
    async def test_list_folder_with_falsy_id(self, client, stub_transport):
        stub_transport.queue(page_response())

        await client.documents.list({"folder_id": 0, "limit": 5, "sort": "created"})

        request = stub_transport.last_request
        assert request.url == f"{BASE_URL}/folders/0/documents"
        assert request.params == {"limit": 5}

    @pytest.mark.asyncio
    async def test_list_not_retried(self, client, stub_transport):
        stub_transport.queue(TransportFailure("gateway timeout", status=504), page_response())

        with pytest.raises(TransportFailure):
            await client.documents.list()

        assert len(stub_transport.requests) == 1


class TestPagination:
    @pytest.mark.asyncio
    async def test_list_sets_links(self, client, stub_transport):
        documents = client.documents
        documents.pagination_links.update(next="nonsense", previous="nonsense", last="nonsense")
        stub_transport.queue(page_response())

        await documents.list()

        assert documents.pagination_links == {
            "next": LINK_NEXT,
            "previous": LINK_PREV,
            "last": LINK_LAST,
        }

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method, link",
        [("next_page", LINK_NEXT), ("previous_page", LINK_PREV), ("last_page", LINK_LAST)],
    )
    async def test_page_methods(self, client, stub_transport, method, link):
        stub_transport.queue(page_response(), page_response())
        await client.documents.list()

        await getattr(client.documents, method)()

        assert stub_transport.last_request.url == link

    def test_no_link_fails_without_request(self, client, stub_transport):
        client.documents.reset_pagination()

        with pytest.raises(NoPaginationLink):
            client.documents.previous_page()

        assert stub_transport.requests == []

    @pytest.mark.asyncio
    async def test_count_is_last_known(self, client, stub_transport):
        documents = client.documents

        stub_transport.queue(
            page_response(count=155), page_response(count=None), page_response(count=0)
        )
        await documents.list()
        assert documents.count == 155

        await documents.list()
        assert documents.count == 155

        await documents.list()
        assert documents.count == 0

    @pytest.mark.asyncio
    async def test_detail_fetch_keeps_links(self, client, stub_transport):
        documents = client.documents
        stub_transport.queue(page_response())
        await documents.list()

        stub_transport.queue(Response(status=200, body={"id": "155"}))
        await documents.retrieve(155)

        assert documents.pagination_links == {
            "next": LINK_NEXT,
            "previous": LINK_PREV,
            "last": LINK_LAST,
        }

    @pytest.mark.asyncio
    async def test_reset(self, client, stub_transport):
        stub_transport.queue(page_response())
        await client.documents.list()

        client.documents.reset_pagination()

        assert client.documents.pagination_links == {
            "next": False,
            "previous": False,
            "last": False,
        }
        assert client.documents.count == 0

    @pytest.mark.asyncio
    async def test_count_without_links(self, client, stub_transport):
        client.documents.reset_pagination()
        stub_transport.queue(page_response(count=10, links=False))

        await client.documents.list()

        assert client.documents.count == 10
        assert client.documents.pagination_links == {
            "next": False,
            "previous": False,
            "last": False,
        }

    @pytest.mark.asyncio
    async def test_collections_do_not_share_state(self, client, stub_transport):
        stub_transport.queue(page_response())

        await client.documents.list()

        assert client.folders.count == 0
        assert client.folders.pagination_links["next"] is False
