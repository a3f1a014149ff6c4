"""Tests for the FastAPI helpers in pagelist.web."""

from __future__ import annotations

import pytest
from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.testclient import TestClient
from pydantic import ValidationError

from pagelist.metadata import PageMetadata
from pagelist.pager import render_pager
from pagelist.web import (
    PagedResponse,
    PageMetadataModel,
    PageRequest,
    page_request,
    page_url_builder,
    render_request_pager,
)

ITEMS = list(range(1, 96))


def _make_app() -> FastAPI:
    app = FastAPI()

    @app.get("/items", response_class=HTMLResponse)
    def items_page(request: Request, paging: PageRequest = Depends(page_request)) -> HTMLResponse:
        page = paging.slice(ITEMS)
        rows = "".join(f"<li>{item}</li>" for item in page)
        return HTMLResponse(f"<ul>{rows}</ul>{render_request_pager(page, request)}")

    @app.get("/api/items")
    def items_api(paging: PageRequest = Depends(page_request)) -> dict:
        return PagedResponse.from_slice(paging.slice(ITEMS)).model_dump()

    return app


@pytest.fixture()
def client() -> TestClient:
    return TestClient(_make_app())


# ---------------------------------------------------------------------------
# page_url_builder() tests
# ---------------------------------------------------------------------------


class TestPageUrlBuilder:
    def test_page_param(self):
        build = page_url_builder("/v1/items")
        assert build(3) == "/v1/items?page=3"

    def test_extra_params_in_urls(self):
        build = page_url_builder("/v1/items", extra_params={"q": "red shoes"})
        assert build(2) == "/v1/items?q=red+shoes&page=2"

    def test_page_size_and_custom_names(self):
        build = page_url_builder("/v1/items", page_param="p", page_size=25, page_size_param="n")
        assert build(1) == "/v1/items?p=1&n=25"

    def test_used_by_render_pager(self):
        build = page_url_builder("/v1/items", extra_params={"q": "x"})
        result = render_pager(PageMetadata(2, 10, 50), build)
        assert result is not None
        assert 'href="/v1/items?q=x&amp;page=3"' in result


# ---------------------------------------------------------------------------
# PageRequest / page_request dependency
# ---------------------------------------------------------------------------


class TestPageRequest:
    def test_defaults(self):
        paging = PageRequest()
        assert paging.page == 1
        assert paging.page_size == 10

    def test_rejects_page_below_one(self):
        with pytest.raises(ValidationError):
            PageRequest(page=0)

    def test_slice(self):
        page = PageRequest(page=2, page_size=3).slice(["a", "b", "c", "d", "e"])
        assert list(page) == ["d", "e"]

    def test_api_default_page(self, client):
        resp = client.get("/api/items")
        assert resp.status_code == 200
        body = resp.json()
        assert body["items"] == list(range(1, 11))
        assert body["metadata"]["page_count"] == 10
        assert body["metadata"]["is_first_page"] is True

    def test_api_second_page(self, client):
        body = client.get("/api/items", params={"page": 2, "page_size": 20}).json()
        assert body["items"] == list(range(21, 41))
        assert body["metadata"]["first_item_on_page"] == 21
        assert body["metadata"]["last_item_on_page"] == 40

    def test_api_page_beyond_range(self, client):
        body = client.get("/api/items", params={"page": 50}).json()
        assert body["items"] == []
        assert body["metadata"]["has_previous_page"] is False

    def test_api_page_size_capped(self, client):
        body = client.get("/api/items", params={"page_size": 1000}).json()
        assert body["metadata"]["page_size"] == 200
        assert len(body["items"]) == 95

    def test_api_rejects_invalid_page(self, client):
        assert client.get("/api/items", params={"page": 0}).status_code == 422
        assert client.get("/api/items", params={"page_size": 0}).status_code == 422


# ---------------------------------------------------------------------------
# render_request_pager() tests
# ---------------------------------------------------------------------------


class TestRenderRequestPager:
    def test_links_back_to_endpoint(self, client):
        resp = client.get("/items", params={"page": 3})
        assert resp.status_code == 200
        assert "<li>21</li>" in resp.text
        assert '<li class="active"><span>3</span></li>' in resp.text
        assert 'href="/items?page=2"' in resp.text
        assert 'href="/items?page=4"' in resp.text

    def test_keeps_other_query_params(self, client):
        resp = client.get("/items", params={"page": 2, "q": "blue"})
        assert "q=blue" in resp.text
        assert "page=3" in resp.text

    def test_empty_when_single_page(self, client):
        resp = client.get("/items", params={"page_size": 200})
        assert "pagination" not in resp.text


class TestPagedResponse:
    def test_from_slice(self):
        page = PageRequest(page=1, page_size=2).slice([10, 20, 30])
        payload = PagedResponse.from_slice(page)
        assert payload.items == [10, 20]
        assert payload.metadata == PageMetadataModel.from_metadata(page)
        assert payload.metadata.has_next_page is True
