"""Minimal HTML tag builder used by the pager renderers."""

from __future__ import annotations

import html
from enum import Enum


class TagRenderMode(str, Enum):
    NORMAL = "normal"
    SELF_CLOSING = "self_closing"


class Tag:
    """A single HTML element with attributes, CSS classes and inner HTML.

    Inner content is stored as HTML. ``set_inner_text`` escapes its argument;
    ``set_inner_html`` and ``append_html`` trust it.
    """

    def __init__(self, name: str):
        self.name = name
        self.attributes: dict[str, str] = {}
        self._classes: list[str] = []
        self._inner: list[str] = []

    def add_css_class(self, value: str | None) -> None:
        """Append a class; blank values and duplicates are ignored."""
        if value is None or not value.strip():
            return
        for cls in value.split():
            if cls not in self._classes:
                self._classes.append(cls)

    @property
    def css_classes(self) -> tuple[str, ...]:
        return tuple(self._classes)

    @property
    def class_attribute(self) -> str:
        return " ".join(self._classes)

    def merge_attribute(self, key: str, value: str, replace_existing: bool = False) -> None:
        if key == "class":
            self.add_css_class(value)
            return
        if replace_existing or key not in self.attributes:
            self.attributes[key] = value

    def set_inner_text(self, text: str) -> None:
        self._inner = [html.escape(text)]

    def set_inner_html(self, markup: str) -> None:
        self._inner = [markup]

    def append_html(self, markup: str) -> None:
        self._inner.append(markup)

    @property
    def inner_html(self) -> str:
        return "".join(self._inner)

    def _render_attributes(self) -> str:
        parts: list[str] = []
        if self._classes:
            parts.append(' class="{}"'.format(html.escape(self.class_attribute)))
        for key, value in self.attributes.items():
            parts.append(' {}="{}"'.format(key, html.escape(str(value))))
        return "".join(parts)

    def render(self, mode: TagRenderMode = TagRenderMode.NORMAL) -> str:
        if mode is TagRenderMode.SELF_CLOSING:
            return "<{name}{attrs} />".format(name=self.name, attrs=self._render_attributes())
        return "<{name}{attrs}>{inner}</{name}>".format(
            name=self.name,
            attrs=self._render_attributes(),
            inner=self.inner_html,
        )

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Tag({self.name!r}, classes={self._classes!r}, attributes={self.attributes!r})"
