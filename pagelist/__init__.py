"""pagelist: page slices with metadata, and HTML pager rendering."""

from .errors import (
    InvalidPageNumber,
    InvalidPageSize,
    InvalidTotalItemCount,
    PaginationError,
    SubsetTooLarge,
)
from .metadata import DEFAULT_PAGE_SIZE, PageMetadata
from .options import DisplayMode, GoToFormOptions, RenderOptions, SummaryPosition
from .pager import page_window, render_go_to_page_form, render_pager
from .slicing import (
    PageSlice,
    Queryable,
    map_page_slice,
    partition,
    recast_page_slice,
    single_page_slice,
    split,
    static_page_slice,
    static_page_slice_from,
    to_ordered_page_slice,
    to_page_slice,
)

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "DisplayMode",
    "GoToFormOptions",
    "InvalidPageNumber",
    "InvalidPageSize",
    "InvalidTotalItemCount",
    "PageMetadata",
    "PageSlice",
    "PaginationError",
    "Queryable",
    "RenderOptions",
    "SubsetTooLarge",
    "SummaryPosition",
    "map_page_slice",
    "page_window",
    "partition",
    "recast_page_slice",
    "render_go_to_page_form",
    "render_pager",
    "single_page_slice",
    "split",
    "static_page_slice",
    "static_page_slice_from",
    "to_ordered_page_slice",
    "to_page_slice",
]
