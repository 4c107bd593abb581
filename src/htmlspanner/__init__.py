"""Convert HTML trees into plain text with style annotations.

>>> from htmlspanner import HtmlSpanner
>>> annotated = HtmlSpanner().from_html("<p>Hello <b>world</b></p>")
>>> annotated.text
'Hello world\\n\\n'
"""

from __future__ import annotations

from htmlspanner.adapters import HtmlSpanner, to_rich_text
from htmlspanner.adapters.handlers import (
    AlignmentAttributeHandler,
    AttributeStyleHandler,
    FontHandler,
    HeaderHandler,
    ImageHandler,
    LinkHandler,
    ListItemHandler,
    MarginHandler,
    MonoSpaceHandler,
    NewLineHandler,
    PreHandler,
    StyleHandler,
    TagNodeHandler,
    WrappingStyleHandler,
    register_builtin_handlers,
)
from htmlspanner.core import (
    AnnotatedText,
    Annotation,
    AnnotationKind,
    DiagnosticEmitter,
    DisplayStyle,
    Font,
    FontFamily,
    FontStyle,
    FontWeight,
    HandlerRegistry,
    HtmlReadError,
    ImageReference,
    InvalidNodeError,
    LoggingEmitter,
    NullEmitter,
    RenderContext,
    SpannerConfig,
    SpannerError,
    SpanRenderingError,
    SpanStack,
    Style,
    TagHandler,
    TextAlignment,
    VerticalAlignment,
    commit_spans,
    translate_font_size,
)
from htmlspanner.version import get_version


__version__ = get_version()

__all__ = [
    "AlignmentAttributeHandler",
    "AnnotatedText",
    "Annotation",
    "AnnotationKind",
    "AttributeStyleHandler",
    "DiagnosticEmitter",
    "DisplayStyle",
    "Font",
    "FontFamily",
    "FontHandler",
    "FontStyle",
    "FontWeight",
    "HandlerRegistry",
    "HeaderHandler",
    "HtmlReadError",
    "HtmlSpanner",
    "ImageHandler",
    "ImageReference",
    "InvalidNodeError",
    "LinkHandler",
    "ListItemHandler",
    "LoggingEmitter",
    "MarginHandler",
    "MonoSpaceHandler",
    "NewLineHandler",
    "NullEmitter",
    "PreHandler",
    "RenderContext",
    "SpanRenderingError",
    "SpanStack",
    "SpannerConfig",
    "SpannerError",
    "Style",
    "StyleHandler",
    "TagHandler",
    "TagNodeHandler",
    "TextAlignment",
    "VerticalAlignment",
    "WrappingStyleHandler",
    "__version__",
    "commit_spans",
    "register_builtin_handlers",
    "to_rich_text",
]
