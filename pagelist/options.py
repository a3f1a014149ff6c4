"""Render options for the pager and the "go to page" form."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from .markup import Tag


class DisplayMode(str, Enum):
    """Whether an optional pager element is rendered."""

    ALWAYS = "always"
    NEVER = "never"
    IF_NEEDED = "if_needed"


class SummaryPosition(str, Enum):
    """Where a summary text sits relative to the page-number links."""

    START = "start"
    END = "end"


@dataclass
class RenderOptions:
    """Options for :func:`pagelist.pager.render_pager`.

    The defaults render first/previous/next/last links when they are useful,
    up to ten page-number links with ellipses, and no descriptive text.

    Link templates for first, previous, next, last and the ellipsis are
    trusted HTML. Page numbers and the two summary texts are escaped.
    """

    display: DisplayMode = DisplayMode.IF_NEEDED
    display_link_to_first_page: DisplayMode = DisplayMode.IF_NEEDED
    display_link_to_previous_page: DisplayMode = DisplayMode.IF_NEEDED
    display_link_to_next_page: DisplayMode = DisplayMode.IF_NEEDED
    display_link_to_last_page: DisplayMode = DisplayMode.IF_NEEDED
    display_link_to_individual_pages: bool = True

    # "Page 3 of 8."
    display_page_count_and_current_location: bool = False
    page_count_and_current_location_position: SummaryPosition = SummaryPosition.START
    # "Showing items 21 through 30 of 75."
    display_item_slice_and_total: bool = False
    item_slice_and_total_position: SummaryPosition = SummaryPosition.START

    maximum_page_numbers_to_display: int | None = 10
    display_ellipses_when_not_showing_all_page_numbers: bool = True
    link_ellipses_to_skipped_pages: bool = False

    ellipses_format: str = "&#8230;"
    link_to_first_page_format: str = "&laquo;"
    link_to_previous_page_format: str = "&lsaquo;"
    link_to_individual_page_format: str = "{0}"
    link_to_next_page_format: str = "&rsaquo;"
    link_to_last_page_format: str = "&raquo;"
    page_count_and_current_location_format: str = "Page {0} of {1}."
    item_slice_and_total_format: str = "Showing items {0} through {1} of {2}."

    container_div_classes: list[str] = field(default_factory=lambda: ["pagination-container"])
    ul_element_classes: list[str] = field(default_factory=lambda: ["pagination"])
    ul_element_attributes: dict[str, str] = field(default_factory=dict)
    li_element_classes: list[str] = field(default_factory=list)
    page_classes: list[str] = field(default_factory=list)
    active_li_element_class: str = "active"
    ellipses_element_class: str = "PagedList-ellipses"
    previous_element_class: str = "PagedList-skipToPrevious"
    next_element_class: str = "PagedList-skipToNext"
    class_to_apply_to_first_list_item_in_pager: str | None = None
    class_to_apply_to_last_list_item_in_pager: str | None = None

    delimiter_between_page_numbers: str | None = None

    function_to_display_each_page_number: Callable[[int], str] | None = None
    # (li, link) -> li; see pagelist.ajax for the stock implementation
    function_to_transform_each_page_link: Callable[[Tag, Tag], Tag] | None = None

    def replace(self, **changes: object) -> RenderOptions:
        return dataclasses.replace(self, **changes)  # type: ignore[arg-type]


@dataclass
class GoToFormOptions:
    """Options for :func:`pagelist.pager.render_go_to_page_form`."""

    label_format: str = "Go to page:"
    submit_button_format: str = "Go"
    # query string key the new page number is submitted as
    input_field_name: str = "page"
    input_field_type: str = "number"
    input_field_class: str | None = None
    submit_button_class: str | None = None
    input_width: int | None = None  # px
    submit_button_width: int | None = None  # px
