"""Image handling.

Images are not loaded: the handler inserts an object replacement character
and annotates it with the image source so the consumer can fetch and draw it.
"""

from __future__ import annotations

from bs4.element import Tag

from htmlspanner.core.context import RenderContext
from htmlspanner.core.rules import TagHandler
from htmlspanner.core.text import Annotation, AnnotationKind, ImageReference

from ._base import TagNodeHandler
from ._helpers import coerce_attribute


OBJECT_REPLACEMENT = "\ufffc"


class ImageHandler(TagNodeHandler):
    """Insert a placeholder character carrying an :class:`ImageReference`."""

    renders_content = True

    def handle(self, node: Tag, context: RenderContext, start: int, end: int) -> None:
        src = coerce_attribute(node.get("src"))
        if not src or not src.strip():
            return
        alt = coerce_attribute(node.get("alt"))
        context.append_separator()
        position = len(context.buffer)
        context.append(OBJECT_REPLACEMENT)
        reference = ImageReference(src=src.strip(), alt=alt or None)
        context.push_annotation(
            Annotation(AnnotationKind.IMAGE, position, position + 1, reference)
        )


HANDLERS: dict[str, TagHandler] = {
    "img": ImageHandler(),
}


__all__ = ["HANDLERS", "OBJECT_REPLACEMENT", "ImageHandler"]
