"""Conversion core: styles, the span stack, the handler registry and context."""

from __future__ import annotations

from .config import SpannerConfig
from .context import RenderContext
from .diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from .exceptions import HtmlReadError, InvalidNodeError, SpannerError, SpanRenderingError
from .rules import HandlerRegistry, TagHandler
from .stack import SpanEntry, SpanStack, commit_spans
from .style import (
    DisplayStyle,
    FontFamily,
    FontStyle,
    FontWeight,
    Style,
    TextAlignment,
    VerticalAlignment,
    translate_font_size,
)
from .text import AnnotatedText, Annotation, AnnotationKind, Font, ImageReference, TextBuffer


__all__ = [
    "AnnotatedText",
    "Annotation",
    "AnnotationKind",
    "DiagnosticEmitter",
    "DisplayStyle",
    "Font",
    "FontFamily",
    "FontStyle",
    "FontWeight",
    "HandlerRegistry",
    "HtmlReadError",
    "ImageReference",
    "InvalidNodeError",
    "LoggingEmitter",
    "NullEmitter",
    "RenderContext",
    "SpanEntry",
    "SpanRenderingError",
    "SpanStack",
    "SpannerConfig",
    "SpannerError",
    "Style",
    "TagHandler",
    "TextAlignment",
    "TextBuffer",
    "VerticalAlignment",
    "commit_spans",
    "translate_font_size",
]
