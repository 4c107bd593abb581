"""Depth-first walk assembling the text buffer from a BeautifulSoup tree.

Text nodes are whitespace-normalised and appended, separated from the
previous run by a single space. For element nodes the registered handler is
asked to prepare the buffer, the children are rendered in document order
(unless the handler renders the content itself), and the handler then
receives the ``[start, end)`` range the children produced. Elements without a
handler are transparent.
"""

from __future__ import annotations

import re

from bs4.element import NavigableString, PageElement, Tag

from htmlspanner.core.context import RenderContext

from .handlers._helpers import IGNORED_STRINGS


_ASCII_WHITESPACE = " \t\n\r\f\v"
_WHITESPACE_RE = re.compile(r"[ \t\n\r\f\v]+")


def normalise_whitespace(text: str) -> str:
    """Collapse runs of ASCII whitespace and trim both ends.

    Non-breaking spaces are content and survive.
    """
    return _WHITESPACE_RE.sub(" ", text).strip(_ASCII_WHITESPACE)


def render_node(node: PageElement, context: RenderContext) -> None:
    """Render ``node`` and its descendants into the context buffer."""
    if isinstance(node, NavigableString):
        if not isinstance(node, IGNORED_STRINGS):
            render_text(str(node), context)
        return
    if isinstance(node, Tag):
        render_element(node, context)


def render_text(text: str, context: RenderContext) -> None:
    """Append a text run, inserting a separator space when needed."""
    normalised = normalise_whitespace(text)
    if not normalised and context.config.strip_extra_whitespace:
        return
    context.append_separator()
    context.append(normalised)


def render_element(node: Tag, context: RenderContext) -> None:
    handler = context.registry.lookup(node.name)

    if handler is not None:
        handler.before_children(node, context)

    start = len(context.buffer)
    if handler is None or not handler.renders_content:
        for child in list(node.children):
            render_node(child, context)
    end = len(context.buffer)

    if handler is not None:
        handler.handle(node, context, start, end)


__all__ = ["normalise_whitespace", "render_element", "render_node", "render_text"]
