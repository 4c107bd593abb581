"""Block-level handlers: headings, quotes, lists and preformatted text."""

from __future__ import annotations

from bs4.element import Tag

from htmlspanner.core.context import RenderContext
from htmlspanner.core.rules import TagHandler
from htmlspanner.core.style import DisplayStyle, FontWeight, Style

from ._base import StyleHandler
from ._helpers import coerce_attribute, count_ancestors, parent_tag_name, preformatted_text
from .basic import AlignmentAttributeHandler, AttributeStyleHandler


HEADING_SIZES: dict[str, float] = {
    "h1": 1.5,
    "h2": 1.4,
    "h3": 1.3,
    "h4": 1.2,
    "h5": 1.1,
    "h6": 1.0,
}
HEADING_MARGIN_BOTTOM = 0.5

MARGIN_CONTAINERS = ("blockquote", "ul", "ol")
MARGIN_STEP = 2.0

BULLET = "\u2022 "


class HeaderHandler(StyleHandler):
    """Bold block with a relative size and a bottom margin.

    Which heading level is handled is decided by the tag the handler is
    registered for; the size is the only thing that changes between levels.
    """

    def __init__(self, size: float, margin_bottom: float = HEADING_MARGIN_BOTTOM) -> None:
        super().__init__(
            Style(
                relative_font_size=size,
                font_weight=FontWeight.BOLD,
                display_style=DisplayStyle.BLOCK,
                relative_margin_bottom=margin_bottom,
            )
        )
        self.size = size
        self.margin_bottom = margin_bottom

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.size}, {self.margin_bottom})"


class MarginHandler(StyleHandler):
    """Indented block; nested containers indent one more step each."""

    def __init__(self, step: float = MARGIN_STEP) -> None:
        super().__init__(Style(display_style=DisplayStyle.BLOCK))
        self.step = step

    def resolve_style(self, node: Tag, context: RenderContext) -> Style:
        depth = count_ancestors(node, MARGIN_CONTAINERS) + 1
        return self.style.with_(margin_left=self.step * depth)


class ListItemHandler(StyleHandler):
    """List entry prefixed with a bullet, or with its number inside ``<ol>``."""

    def prepare(self, node: Tag, context: RenderContext, style: Style) -> None:
        context.ensure_line_start()
        context.append(self.marker(node))

    def handle_styled(
        self, node: Tag, context: RenderContext, start: int, end: int, style: Style
    ) -> None:
        context.ensure_line_start()
        context.push_style(start, len(context.buffer), style)

    @staticmethod
    def marker(node: Tag) -> str:
        if parent_tag_name(node) != "ol":
            return BULLET
        return f"{list_item_number(node)}. "


def list_item_number(node: Tag) -> int:
    """Return the number displayed for an ``<li>`` inside an ordered list."""
    own_value = _parse_int(coerce_attribute(node.get("value")))
    if own_value is not None:
        return own_value

    steps = 0
    for sibling in node.find_previous_siblings("li"):
        steps += 1
        value = _parse_int(coerce_attribute(sibling.get("value")))
        if value is not None:
            return value + steps

    parent = node.parent
    start = _parse_int(coerce_attribute(parent.get("start"))) if isinstance(parent, Tag) else None
    return (1 if start is None else start) + steps


def _parse_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


class PreHandler(StyleHandler):
    """Preformatted block rendered verbatim in the monospace family."""

    renders_content = True

    def __init__(self) -> None:
        super().__init__(Style(display_style=DisplayStyle.BLOCK))

    def resolve_style(self, node: Tag, context: RenderContext) -> Style:
        return self.style.with_(font_family=context.config.monospace_font)

    def handle_styled(
        self, node: Tag, context: RenderContext, start: int, end: int, style: Style
    ) -> None:
        context.append(preformatted_text(node))
        super().handle_styled(node, context, start, end, style)


_margin = AlignmentAttributeHandler(MarginHandler())

HANDLERS: dict[str, TagHandler] = {
    **{tag: HeaderHandler(size) for tag, size in HEADING_SIZES.items()},
    **dict.fromkeys(MARGIN_CONTAINERS, _margin),
    "li": AttributeStyleHandler(ListItemHandler()),
    "pre": PreHandler(),
}


__all__ = [
    "BULLET",
    "HANDLERS",
    "HEADING_MARGIN_BOTTOM",
    "HEADING_SIZES",
    "HeaderHandler",
    "ListItemHandler",
    "MarginHandler",
    "PreHandler",
    "list_item_number",
]
