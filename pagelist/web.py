"""FastAPI integration: page request parsing, page URLs and JSON payloads.

Example::

    @app.get("/items", response_class=HTMLResponse)
    async def items(request: Request, paging: PageRequest = Depends(page_request)):
        page = paging.slice(load_items())
        nav = render_request_pager(page, request)
        ...
"""

from __future__ import annotations

import urllib.parse
from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar

from fastapi import Query, Request
from pydantic import BaseModel, ConfigDict, Field

from .config import get_settings
from .metadata import DEFAULT_PAGE_SIZE, PageMetadata
from .options import RenderOptions
from .pager import render_pager
from .slicing import PageSlice, Queryable, to_page_slice

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Page URLs
# ---------------------------------------------------------------------------

def page_url_builder(
    base_url: str,
    extra_params: dict[str, str] | None = None,
    page_param: str = "page",
    page_size: int | None = None,
    page_size_param: str = "page_size",
) -> Callable[[int], str]:
    """Return a callable mapping a page number to ``base_url?...&page=N``."""

    def _build_url(page: int) -> str:
        params: dict[str, str] = {}
        if extra_params:
            params.update(extra_params)
        params[page_param] = str(page)
        if page_size is not None:
            params[page_size_param] = str(page_size)
        qs = urllib.parse.urlencode(params)
        return f"{base_url}?{qs}"

    return _build_url


def request_page_url_builder(request: Request, page_param: str = "page") -> Callable[[int], str]:
    """Page URLs for the current request, keeping its other query parameters."""

    def _build_url(page: int) -> str:
        url = request.url.include_query_params(**{page_param: page})
        return f"{url.path}?{url.query}"

    return _build_url


def render_request_pager(
    metadata: PageMetadata | None,
    request: Request,
    options: RenderOptions | None = None,
    page_param: str = "page",
) -> str:
    """Render a pager linking back to the current endpoint; empty when suppressed."""
    nav = render_pager(metadata, request_page_url_builder(request, page_param), options)
    return nav or ""


# ---------------------------------------------------------------------------
# Request parsing
# ---------------------------------------------------------------------------

class PageRequest(BaseModel):
    """A validated one-based page request."""

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)

    def slice(
        self,
        source: Iterable[T] | Queryable[T] | None,
        total_item_count: int | None = None,
    ) -> PageSlice[T]:
        return to_page_slice(source, self.page, self.page_size, total_item_count)


def page_request(
    page: int = Query(default=1, ge=1),
    page_size: int | None = Query(default=None, ge=1),
) -> PageRequest:
    """FastAPI dependency reading ``?page=`` and ``?page_size=``.

    A missing page size falls back to the configured default; larger sizes
    are capped at the configured maximum.
    """
    settings = get_settings()
    size = page_size if page_size is not None else settings.default_page_size
    return PageRequest(page=page, page_size=min(size, settings.max_page_size))


# ---------------------------------------------------------------------------
# JSON payloads
# ---------------------------------------------------------------------------

class PageMetadataModel(BaseModel):
    """Serialisable view of ``PageMetadata``."""

    page_number: int
    page_size: int
    total_item_count: int
    page_count: int
    has_previous_page: bool
    has_next_page: bool
    is_first_page: bool
    is_last_page: bool
    first_item_on_page: int
    last_item_on_page: int

    @classmethod
    def from_metadata(cls, metadata: PageMetadata) -> PageMetadataModel:
        return cls(**metadata.to_dict())


class PagedResponse(BaseModel, Generic[T]):
    """One page of items plus its metadata, for JSON endpoints."""

    items: list[T]
    metadata: PageMetadataModel

    @classmethod
    def from_slice(cls, page: PageSlice[Any]) -> PagedResponse[Any]:
        return cls(items=list(page.items), metadata=PageMetadataModel.from_metadata(page))
