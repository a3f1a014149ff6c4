"""Tests for pagelist.ajax unobtrusive AJAX links."""

from __future__ import annotations

from pagelist.ajax import (
    AjaxOptions,
    InsertionMode,
    ajax_link_transform,
    enable_unobtrusive_ajax,
    enable_unobtrusive_ajax_replacing,
)
from pagelist.markup import Tag
from pagelist.metadata import PageMetadata
from pagelist.options import DisplayMode, RenderOptions
from pagelist.pager import render_pager


def url(page: int) -> str:
    return f"/p/{page}"


class TestAjaxOptions:
    def test_minimal_attributes(self):
        attrs = AjaxOptions(update_target_id="results").to_unobtrusive_html_attributes()
        assert attrs == {
            "data-ajax-method": "GET",
            "data-ajax-mode": "replace",
            "data-ajax-update": "#results",
            "data-ajax": "true",
        }

    def test_optional_attributes(self):
        options = AjaxOptions(
            http_method="POST",
            insertion_mode=InsertionMode.INSERT_AFTER,
            update_target_id="feed",
            confirm="Sure?",
            loading_element_id="spinner",
            loading_element_duration=250,
            on_begin="begin",
            on_complete="complete",
            on_failure="failure",
            on_success="success",
            url="/fragment",
            allow_cache=True,
        )
        attrs = options.to_unobtrusive_html_attributes()
        assert attrs["data-ajax-method"] == "POST"
        assert attrs["data-ajax-mode"] == "after"
        assert attrs["data-ajax-confirm"] == "Sure?"
        assert attrs["data-ajax-loading"] == "spinner"
        assert attrs["data-ajax-loading-duration"] == "250"
        assert attrs["data-ajax-begin"] == "begin"
        assert attrs["data-ajax-complete"] == "complete"
        assert attrs["data-ajax-failure"] == "failure"
        assert attrs["data-ajax-success"] == "success"
        assert attrs["data-ajax-url"] == "/fragment"
        assert attrs["data-ajax-cache"] == "true"

    def test_zero_duration_omitted(self):
        attrs = AjaxOptions(update_target_id="x").to_unobtrusive_html_attributes()
        assert "data-ajax-loading-duration" not in attrs


class TestAjaxLinkTransform:
    def test_enabled_link_gets_attributes(self):
        li = Tag("li")
        link = Tag("a")
        link.attributes["href"] = "/p/2"
        link.set_inner_text("2")
        result = ajax_link_transform(AjaxOptions(update_target_id="list"))(li, link)
        assert result.render() == (
            '<li><a href="/p/2" data-ajax-method="GET" data-ajax-mode="replace" '
            'data-ajax-update="#list" data-ajax="true">2</a></li>'
        )

    def test_disabled_and_active_untouched(self):
        transform = ajax_link_transform(AjaxOptions(update_target_id="list"))
        for cls in ("disabled", "active"):
            li = Tag("li")
            li.add_css_class(cls)
            link = Tag("a")
            link.set_inner_text("x")
            assert "data-ajax" not in transform(li, link).render()


class TestEnableUnobtrusiveAjax:
    def test_pager_links_carry_ajax_attributes(self):
        options = enable_unobtrusive_ajax_replacing("#results")
        result = render_pager(PageMetadata(2, 1, 3), url, options)
        assert result is not None
        # previous, page 1, page 3, next
        assert result.count('data-ajax-update="#results"') == 4
        assert '<li class="active"><span>2</span></li>' in result

    def test_disabled_links_have_no_ajax_attributes(self):
        options = enable_unobtrusive_ajax(
            RenderOptions(display_link_to_previous_page=DisplayMode.ALWAYS),
            AjaxOptions(update_target_id="results"),
        )
        result = render_pager(PageMetadata(1, 1, 3), url, options)
        assert result is not None
        assert '<li class="PagedList-skipToPrevious disabled"><a rel="prev">&lsaquo;</a></li>' in result
        # page 2, page 3, next
        assert result.count('data-ajax="true"') == 3

    def test_returns_copy(self):
        base = RenderOptions(maximum_page_numbers_to_display=4)
        options = enable_unobtrusive_ajax(base, AjaxOptions(update_target_id="results"))
        assert base.function_to_transform_each_page_link is None
        assert options.function_to_transform_each_page_link is not None
        assert options.maximum_page_numbers_to_display == 4

    def test_none_options_uses_defaults(self):
        options = enable_unobtrusive_ajax(None, AjaxOptions(update_target_id="results"))
        assert options.ul_element_classes == ["pagination"]
