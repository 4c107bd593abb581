"""Hyperlink handling."""

from __future__ import annotations

from bs4.element import Tag

from htmlspanner.core.context import RenderContext
from htmlspanner.core.rules import TagHandler
from htmlspanner.core.text import Annotation, AnnotationKind

from ._base import TagNodeHandler
from ._helpers import coerce_attribute


class LinkHandler(TagNodeHandler):
    """Attach the ``href`` of an anchor to the text it wraps.

    Anchors without a target or without any text are left unannotated.
    """

    def handle(self, node: Tag, context: RenderContext, start: int, end: int) -> None:
        href = coerce_attribute(node.get("href"))
        if not href or not href.strip() or end <= start:
            return
        context.push_annotation(Annotation(AnnotationKind.LINK, start, end, href.strip()))


HANDLERS: dict[str, TagHandler] = {
    "a": LinkHandler(),
}


__all__ = ["HANDLERS", "LinkHandler"]
