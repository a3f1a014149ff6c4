"""Server-side HTML rendering of pager controls.

``render_pager`` turns page metadata into::

    <div class="pagination-container">
      <ul class="pagination">
        <li>first</li><li>previous</li> ... page numbers ... <li>next</li><li>last</li>
      </ul>
    </div>

Only the metadata is read; the items of a page are never needed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from .markup import Tag, TagRenderMode
from .metadata import DEFAULT_PAGE_SIZE, PageMetadata
from .options import DisplayMode, GoToFormOptions, RenderOptions, SummaryPosition

logger = logging.getLogger(__name__)

PageUrlGenerator = Callable[[int], str]


@dataclass(frozen=True)
class PageWindow:
    """Contiguous range of page numbers shown as individual links."""

    first: int
    last: int

    @property
    def pages(self) -> range:
        return range(self.first, self.last + 1)


def page_window(metadata: PageMetadata, maximum_page_numbers_to_display: int | None) -> PageWindow:
    """Compute the visible page numbers, keeping the current page centred.

    The window never starts before page 1 and never runs past the last page
    unless there are fewer pages than the window is wide.
    """
    page_count = metadata.page_count
    limit = maximum_page_numbers_to_display
    if limit is None or page_count <= limit:
        return PageWindow(first=1, last=page_count)

    first = max(metadata.page_number - limit // 2, 1)
    last = first + limit - 1
    if last > page_count:
        first = max(page_count - limit + 1, 1)
        last = first + limit - 1
    return PageWindow(first=first, last=last)


def _should_display(mode: DisplayMode, needed: bool) -> bool:
    if mode == DisplayMode.ALWAYS:
        return True
    if mode == DisplayMode.NEVER:
        return False
    return needed


def _resolve_metadata(metadata: PageMetadata | None) -> PageMetadata:
    if metadata is None:
        logger.debug("No page metadata given, rendering an empty page")
        return PageMetadata.empty(DEFAULT_PAGE_SIZE)
    return metadata


# ---------------------------------------------------------------------------
# List items
# ---------------------------------------------------------------------------

def _wrap_text_in_list_item(text: str) -> Tag:
    li = Tag("li")
    li.set_inner_text(text)
    return li


def _wrap_in_list_item(inner: Tag, options: RenderOptions, *classes: str | None) -> Tag:
    li = Tag("li")
    for cls in classes:
        li.add_css_class(cls)
    if options.function_to_transform_each_page_link is not None:
        return options.function_to_transform_each_page_link(li, inner)
    li.append_html(inner.render())
    return li


def _link(options: RenderOptions, inner_html: str, rel: str | None = None) -> Tag:
    a = Tag("a")
    a.append_html(inner_html)
    if rel:
        a.attributes["rel"] = rel
    for cls in options.page_classes:
        a.add_css_class(cls)
    return a


def _first(metadata: PageMetadata, url: PageUrlGenerator, options: RenderOptions) -> Tag:
    target = 1
    first = _link(options, options.link_to_first_page_format.format(target))
    if metadata.is_first_page:
        return _wrap_in_list_item(first, options, "PagedList-skipToFirst", "disabled")
    first.attributes["href"] = url(target)
    return _wrap_in_list_item(first, options, "PagedList-skipToFirst")


def _previous(metadata: PageMetadata, url: PageUrlGenerator, options: RenderOptions) -> Tag:
    target = metadata.page_number - 1
    previous = _link(options, options.link_to_previous_page_format.format(target), rel="prev")
    if not metadata.has_previous_page:
        return _wrap_in_list_item(previous, options, options.previous_element_class, "disabled")
    previous.attributes["href"] = url(target)
    return _wrap_in_list_item(previous, options, options.previous_element_class)


def _page(number: int, metadata: PageMetadata, url: PageUrlGenerator, options: RenderOptions) -> Tag:
    if options.function_to_display_each_page_number is not None:
        text = options.function_to_display_each_page_number(number)
    else:
        text = options.link_to_individual_page_format.format(number)

    current = number == metadata.page_number
    page = Tag("span" if current else "a")
    page.set_inner_text(text)
    for cls in options.page_classes:
        page.add_css_class(cls)

    if current:
        return _wrap_in_list_item(page, options, options.active_li_element_class)
    page.attributes["href"] = url(number)
    return _wrap_in_list_item(page, options)


def _next(metadata: PageMetadata, url: PageUrlGenerator, options: RenderOptions) -> Tag:
    target = metadata.page_number + 1
    nxt = _link(options, options.link_to_next_page_format.format(target), rel="next")
    if not metadata.has_next_page:
        return _wrap_in_list_item(nxt, options, options.next_element_class, "disabled")
    nxt.attributes["href"] = url(target)
    return _wrap_in_list_item(nxt, options, options.next_element_class)


def _last(metadata: PageMetadata, url: PageUrlGenerator, options: RenderOptions) -> Tag:
    target = metadata.page_count
    last = _link(options, options.link_to_last_page_format.format(target))
    if metadata.is_last_page:
        return _wrap_in_list_item(last, options, "PagedList-skipToLast", "disabled")
    last.attributes["href"] = url(target)
    return _wrap_in_list_item(last, options, "PagedList-skipToLast")


def _page_count_and_location_text(metadata: PageMetadata, options: RenderOptions) -> Tag:
    text = Tag("a")
    text.set_inner_text(
        options.page_count_and_current_location_format.format(
            metadata.page_number, metadata.page_count
        )
    )
    return _wrap_in_list_item(text, options, "PagedList-pageCountAndLocation", "disabled")


def _item_slice_and_total_text(metadata: PageMetadata, options: RenderOptions) -> Tag:
    text = Tag("a")
    text.set_inner_text(
        options.item_slice_and_total_format.format(
            metadata.first_item_on_page, metadata.last_item_on_page, metadata.total_item_count
        )
    )
    return _wrap_in_list_item(text, options, "PagedList-pageCountAndLocation", "disabled")


def _ellipsis(
    metadata: PageMetadata,
    url: PageUrlGenerator,
    options: RenderOptions,
    target: int,
    leading: bool,
) -> Tag:
    if not options.link_ellipses_to_skipped_pages:
        a = _link(options, options.ellipses_format)
        return _wrap_in_list_item(a, options, options.ellipses_element_class, "disabled")

    a = _link(options, options.ellipses_format, rel="prev" if leading else "next")
    a.add_css_class(options.previous_element_class if leading else options.next_element_class)
    enabled = metadata.has_previous_page if leading else metadata.has_next_page
    if not enabled:
        return _wrap_in_list_item(a, options, options.ellipses_element_class, "disabled")
    a.attributes["href"] = url(target)
    return _wrap_in_list_item(a, options, options.ellipses_element_class)


def _summary_items(
    metadata: PageMetadata, options: RenderOptions, position: SummaryPosition
) -> list[Tag]:
    items: list[Tag] = []
    if (
        options.display_page_count_and_current_location
        and options.page_count_and_current_location_position == position
    ):
        items.append(_page_count_and_location_text(metadata, options))
    if options.display_item_slice_and_total and options.item_slice_and_total_position == position:
        items.append(_item_slice_and_total_text(metadata, options))
    return items


def pager_list_items(
    metadata: PageMetadata,
    generate_page_url: PageUrlGenerator,
    options: RenderOptions,
) -> list[Tag]:
    """Build the ``li`` elements of the pager, without any suppression check."""
    window = page_window(metadata, options.maximum_page_numbers_to_display)
    page_count = metadata.page_count
    items: list[Tag] = []

    if _should_display(options.display_link_to_first_page, window.first > 1):
        items.append(_first(metadata, generate_page_url, options))

    if _should_display(options.display_link_to_previous_page, not metadata.is_first_page):
        items.append(_previous(metadata, generate_page_url, options))

    items.extend(_summary_items(metadata, options, SummaryPosition.START))

    if options.display_link_to_individual_pages:
        show_ellipses = options.display_ellipses_when_not_showing_all_page_numbers
        if show_ellipses and window.first > 1:
            items.append(
                _ellipsis(metadata, generate_page_url, options, window.first - 1, leading=True)
            )

        delimiter = options.delimiter_between_page_numbers
        for number in window.pages:
            if number > window.first and delimiter and delimiter.strip():
                items.append(_wrap_text_in_list_item(delimiter))
            items.append(_page(number, metadata, generate_page_url, options))

        if show_ellipses and window.last < page_count:
            items.append(
                _ellipsis(metadata, generate_page_url, options, window.last + 1, leading=False)
            )

    items.extend(_summary_items(metadata, options, SummaryPosition.END))

    if _should_display(options.display_link_to_next_page, not metadata.is_last_page):
        items.append(_next(metadata, generate_page_url, options))

    if _should_display(options.display_link_to_last_page, window.last < page_count):
        items.append(_last(metadata, generate_page_url, options))

    if items:
        items[0].add_css_class(options.class_to_apply_to_first_list_item_in_pager)
        items[-1].add_css_class(options.class_to_apply_to_last_list_item_in_pager)
        for li in items:
            for cls in options.li_element_classes:
                li.add_css_class(cls)

    return items


# ---------------------------------------------------------------------------
# Public renderers
# ---------------------------------------------------------------------------

def build_pager(
    metadata: PageMetadata | None,
    generate_page_url: PageUrlGenerator,
    options: RenderOptions | None = None,
) -> Tag | None:
    """Build the pager element tree, or ``None`` when it should be omitted."""
    metadata = _resolve_metadata(metadata)
    options = options or RenderOptions()

    if not _should_display(options.display, metadata.page_count > 1):
        logger.debug(
            "Pager suppressed (display=%s, page_count=%d)",
            options.display.value, metadata.page_count,
        )
        return None

    ul = Tag("ul")
    for li in pager_list_items(metadata, generate_page_url, options):
        ul.append_html(li.render())
    for cls in options.ul_element_classes:
        ul.add_css_class(cls)
    for key, value in options.ul_element_attributes.items():
        ul.merge_attribute(key, value)

    outer = Tag("div")
    for cls in options.container_div_classes:
        outer.add_css_class(cls)
    outer.append_html(ul.render())
    return outer


def render_pager(
    metadata: PageMetadata | None,
    generate_page_url: PageUrlGenerator,
    options: RenderOptions | None = None,
) -> str | None:
    """Render a configurable pager for one page of results.

    Args:
        metadata: Page metadata, e.g. a ``PageSlice``. ``None`` renders as
            page 1 of an empty sequence.
        generate_page_url: Returns the URL that loads the given page number.
        options: Display options; defaults to ``RenderOptions()``.

    Returns:
        The pager HTML, or ``None`` when the display mode suppresses it.
    """
    pager = build_pager(metadata, generate_page_url, options)
    return pager.render() if pager is not None else None


def build_go_to_page_form(
    metadata: PageMetadata | None,
    form_action: str,
    options: GoToFormOptions | None = None,
) -> Tag:
    metadata = _resolve_metadata(metadata)
    options = options or GoToFormOptions()

    form = Tag("form")
    form.add_css_class("PagedList-goToPage")
    form.attributes["action"] = form_action
    form.attributes["method"] = "get"

    label = Tag("label")
    label.attributes["for"] = options.input_field_name
    label.set_inner_text(options.label_format)

    field = Tag("input")
    field.add_css_class(options.input_field_class)
    field.attributes["type"] = options.input_field_type
    field.attributes["name"] = options.input_field_name
    field.attributes["value"] = str(metadata.page_number)
    if options.input_width:
        field.attributes["style"] = f"width: {options.input_width}px"

    submit = Tag("input")
    submit.add_css_class(options.submit_button_class)
    submit.attributes["type"] = "submit"
    submit.attributes["value"] = options.submit_button_format
    if options.submit_button_width:
        submit.attributes["style"] = f"width: {options.submit_button_width}px"

    fieldset = Tag("fieldset")
    fieldset.append_html(label.render())
    fieldset.append_html(field.render(TagRenderMode.SELF_CLOSING))
    fieldset.append_html(submit.render(TagRenderMode.SELF_CLOSING))
    form.append_html(fieldset.render())
    return form


def render_go_to_page_form(
    metadata: PageMetadata | None,
    form_action: str,
    options: GoToFormOptions | None = None,
) -> str:
    """Render a "Go to page" form that submits the page number via GET to *form_action*."""
    return build_go_to_page_form(metadata, form_action, options).render()
