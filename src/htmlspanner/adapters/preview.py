"""Export annotated text to :class:`rich.text.Text` for terminal previews.

Only the categories with a terminal equivalent are carried over: font weight
and italics, colours and links. Sizes, margins and alignment are layout hints
for a real text widget and are dropped.
"""

from __future__ import annotations

from rich.color import Color
from rich.style import Style as RichStyle
from rich.text import Text

from htmlspanner.core.text import AnnotatedText, Annotation, AnnotationKind, Font


def _color(value: int) -> Color | None:
    if (value >> 24) & 0xFF == 0:
        return None
    return Color.from_rgb((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


def rich_style_for(annotation: Annotation) -> RichStyle | None:
    """Return the rich style equivalent to ``annotation``, if there is one."""
    kind = annotation.kind
    if kind is AnnotationKind.FONT:
        font: Font = annotation.value
        if not (font.bold or font.italic):
            return None
        return RichStyle(bold=font.bold or None, italic=font.italic or None)
    if kind is AnnotationKind.COLOR:
        color = _color(annotation.value)
        return RichStyle(color=color) if color is not None else None
    if kind is AnnotationKind.BACKGROUND_COLOR:
        color = _color(annotation.value)
        return RichStyle(bgcolor=color) if color is not None else None
    if kind is AnnotationKind.LINK:
        return RichStyle(link=annotation.value)
    return None


def to_rich_text(annotated: AnnotatedText) -> Text:
    """Convert ``annotated`` into a rich :class:`~rich.text.Text`."""
    text = Text(annotated.text)
    for annotation in annotated.annotations:
        style = rich_style_for(annotation)
        if style is not None:
            text.stylize(style, annotation.start, annotation.end)
    return text


__all__ = ["rich_style_for", "to_rich_text"]
