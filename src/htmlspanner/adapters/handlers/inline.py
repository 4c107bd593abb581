"""Inline formatting handlers: emphasis, sizes, monospace and scripts."""

from __future__ import annotations

from bs4.element import Tag

from htmlspanner.core.context import RenderContext
from htmlspanner.core.rules import TagHandler
from htmlspanner.core.style import FontStyle, FontWeight, Style, VerticalAlignment

from ._base import StyleHandler


class MonoSpaceHandler(StyleHandler):
    """Render the content with the configured monospace family."""

    def resolve_style(self, node: Tag, context: RenderContext) -> Style:
        return self.style.with_(font_family=context.config.monospace_font)


_italic = StyleHandler(Style(font_style=FontStyle.ITALIC))
_bold = StyleHandler(Style(font_weight=FontWeight.BOLD))
_monospace = MonoSpaceHandler()

HANDLERS: dict[str, TagHandler] = {
    "i": _italic,
    "em": _italic,
    "cite": _italic,
    "dfn": _italic,
    "b": _bold,
    "strong": _bold,
    "big": StyleHandler(Style(relative_font_size=1.25)),
    "small": StyleHandler(Style(relative_font_size=0.8)),
    "sub": StyleHandler(Style(vertical_alignment=VerticalAlignment.SUB)),
    "sup": StyleHandler(Style(vertical_alignment=VerticalAlignment.SUPER)),
    "tt": _monospace,
    "code": _monospace,
    "kbd": _monospace,
    "samp": _monospace,
}


__all__ = ["HANDLERS", "MonoSpaceHandler"]
