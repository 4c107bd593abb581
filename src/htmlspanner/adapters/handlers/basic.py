"""Paragraphs, line breaks and the attribute-driven generic handlers."""

from __future__ import annotations

import re

from bs4.element import Tag

from htmlspanner.core.context import RenderContext
from htmlspanner.core.rules import TagHandler
from htmlspanner.core.style import Style, TextAlignment, translate_font_size

from ..css import parse_alignment, parse_color, parse_style_attribute
from ._base import StyleHandler, WrappingStyleHandler
from ._helpers import coerce_attribute


_FONT_SIZE_RE = re.compile(r"^\s*[+-]?\d+\s*$")


class AttributeStyleHandler(WrappingStyleHandler):
    """Merge the declarations of an inline ``style`` attribute into the style."""

    def refine(self, node: Tag, context: RenderContext, style: Style) -> Style:
        declared = parse_style_attribute(coerce_attribute(node.get("style")), context.config)
        return style.merge(declared)


class AlignmentAttributeHandler(WrappingStyleHandler):
    """Honour the presentational ``align`` attribute."""

    def refine(self, node: Tag, context: RenderContext, style: Style) -> Style:
        raw = coerce_attribute(node.get("align"))
        alignment = parse_alignment(raw)
        if alignment is None:
            if raw:
                context.report_invalid_attribute(node, "align", raw)
            return style
        return style.with_(text_alignment=alignment)


class NewLineHandler(WrappingStyleHandler):
    """Append a fixed number of newlines after the content of a tag."""

    def __init__(self, count: int, wrapped: StyleHandler | None = None) -> None:
        super().__init__(wrapped or StyleHandler())
        self.count = count

    def handle_styled(
        self, node: Tag, context: RenderContext, start: int, end: int, style: Style
    ) -> None:
        for _ in range(self.count):
            context.append_newline()
        super().handle_styled(node, context, start, end, style)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.count}, {self.wrapped!r})"


class FontHandler(StyleHandler):
    """Legacy ``<font face size color>`` element."""

    def resolve_style(self, node: Tag, context: RenderContext) -> Style:
        style = self.style

        face = coerce_attribute(node.get("face"))
        if face:
            style = style.with_(font_family=context.config.font_for(face))

        size = coerce_attribute(node.get("size"))
        if size is not None:
            if _FONT_SIZE_RE.match(size) is None:
                context.report_invalid_attribute(node, "size", size)
            style = style.with_(relative_font_size=translate_font_size(size))

        color = coerce_attribute(node.get("color"))
        if color:
            value = parse_color(color)
            if value is None:
                context.report_invalid_attribute(node, "color", color)
            else:
                style = style.with_(color=value)

        return style


def block_alignment() -> StyleHandler:
    """Return the generic handler used for block tags with style/align attributes."""
    return AttributeStyleHandler(AlignmentAttributeHandler(StyleHandler()))


_paragraph = NewLineHandler(2, block_alignment())

HANDLERS: dict[str, TagHandler] = {
    "p": _paragraph,
    "div": _paragraph,
    "br": NewLineHandler(1, block_alignment()),
    "center": StyleHandler(Style(text_alignment=TextAlignment.CENTER)),
    "font": AttributeStyleHandler(FontHandler()),
    "span": AttributeStyleHandler(StyleHandler()),
}


__all__ = [
    "HANDLERS",
    "AlignmentAttributeHandler",
    "AttributeStyleHandler",
    "FontHandler",
    "NewLineHandler",
    "block_alignment",
]
