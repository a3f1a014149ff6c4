"""Unobtrusive AJAX support for pager links.

Installs a ``function_to_transform_each_page_link`` hook that adds the
``data-ajax-*`` attributes understood by jquery-ajax-unobtrusive to every
clickable pager link, so following a link swaps the target element's HTML in
place instead of navigating.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from .markup import Tag
from .options import RenderOptions


class InsertionMode(str, Enum):
    REPLACE = "replace"
    INSERT_BEFORE = "before"
    INSERT_AFTER = "after"
    REPLACE_WITH = "replace-with"


@dataclass
class AjaxOptions:
    """Request settings encoded into ``data-ajax-*`` link attributes."""

    http_method: str = "GET"
    insertion_mode: InsertionMode = InsertionMode.REPLACE
    update_target_id: str = ""
    confirm: str | None = None
    loading_element_id: str | None = None
    loading_element_duration: int = 0
    on_begin: str | None = None
    on_complete: str | None = None
    on_failure: str | None = None
    on_success: str | None = None
    url: str | None = None
    allow_cache: bool = False

    def to_unobtrusive_html_attributes(self) -> dict[str, str]:
        attrs = {
            "data-ajax-method": self.http_method,
            "data-ajax-mode": self.insertion_mode.value,
            "data-ajax-update": "#" + self.update_target_id,
            "data-ajax": "true",
        }
        if self.confirm:
            attrs["data-ajax-confirm"] = self.confirm
        if self.loading_element_id:
            attrs["data-ajax-loading"] = self.loading_element_id
        if self.loading_element_duration > 0:
            attrs["data-ajax-loading-duration"] = str(self.loading_element_duration)
        if self.on_begin:
            attrs["data-ajax-begin"] = self.on_begin
        if self.on_complete:
            attrs["data-ajax-complete"] = self.on_complete
        if self.on_failure:
            attrs["data-ajax-failure"] = self.on_failure
        if self.on_success:
            attrs["data-ajax-success"] = self.on_success
        if self.url:
            attrs["data-ajax-url"] = self.url
        if self.allow_cache:
            attrs["data-ajax-cache"] = "true"
        return attrs


def ajax_link_transform(ajax_options: AjaxOptions) -> Callable[[Tag, Tag], Tag]:
    """Build a link transform that adds AJAX attributes to enabled, non-current links."""
    attributes = ajax_options.to_unobtrusive_html_attributes()

    def transform(li: Tag, link: Tag) -> Tag:
        li_class = li.class_attribute
        if "disabled" not in li_class and "active" not in li_class:
            for key, value in attributes.items():
                link.attributes[key] = value
        li.set_inner_html(link.render())
        return li

    return transform


def enable_unobtrusive_ajax(
    options: RenderOptions | None, ajax_options: AjaxOptions
) -> RenderOptions:
    """Return a copy of *options* whose pager links load pages over AJAX."""
    base = options or RenderOptions()
    return base.replace(function_to_transform_each_page_link=ajax_link_transform(ajax_options))


def enable_unobtrusive_ajax_replacing(target_id: str) -> RenderOptions:
    """Default options whose links replace the inner HTML of element *target_id*.

    A leading ``#`` on *target_id* is ignored.
    """
    ajax_options = AjaxOptions(
        http_method="GET",
        insertion_mode=InsertionMode.REPLACE,
        update_target_id=target_id.removeprefix("#"),
    )
    return enable_unobtrusive_ajax(RenderOptions(), ajax_options)
