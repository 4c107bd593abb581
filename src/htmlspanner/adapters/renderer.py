"""High-level HTML to annotated text converter."""

from __future__ import annotations

from typing import IO

from bs4 import BeautifulSoup, FeatureNotFound
from bs4.element import PageElement

from htmlspanner.core.config import SpannerConfig
from htmlspanner.core.context import RenderContext
from htmlspanner.core.diagnostics import DiagnosticEmitter, ensure_emitter
from htmlspanner.core.exceptions import (
    HtmlReadError,
    InvalidNodeError,
    SpannerError,
    SpanRenderingError,
    format_rendering_error,
)
from htmlspanner.core.rules import HandlerRegistry, TagHandler
from htmlspanner.core.text import AnnotatedText

from .handlers import register_builtin_handlers
from .walker import render_node


HtmlSource = str | bytes | IO[str] | IO[bytes]


class HtmlSpanner:
    """Convert HTML into :class:`~htmlspanner.core.text.AnnotatedText`.

    The configuration and the handler registry are shared by every conversion
    of a spanner. Register custom handlers before converting and do not change
    the registry while a conversion runs on another thread.
    """

    def __init__(
        self,
        config: SpannerConfig | None = None,
        registry: HandlerRegistry | None = None,
        parser: str = "html.parser",
    ) -> None:
        self.config = config or SpannerConfig()
        self.parser_backend = parser
        if registry is None:
            registry = register_builtin_handlers(HandlerRegistry())
        self.registry = registry

    def register_handler(self, tag: str, handler: TagHandler) -> None:
        """Register ``handler`` for ``tag``, replacing any previous handler."""
        self.registry.register(tag, handler)

    def unregister_handler(self, tag: str) -> None:
        """Remove the handler for ``tag`` so the tag becomes transparent."""
        self.registry.unregister(tag)

    def handler_for(self, tag: str) -> TagHandler | None:
        """Return the handler currently registered for ``tag``, e.g. to wrap it."""
        return self.registry.lookup(tag)

    def from_html(
        self,
        source: HtmlSource,
        *,
        emitter: DiagnosticEmitter | None = None,
    ) -> AnnotatedText:
        """Parse ``source`` and convert it.

        ``source`` may be markup or a readable text/binary stream. Read failures
        raise :class:`HtmlReadError`; nothing is converted in that case.
        """
        active_emitter = ensure_emitter(emitter)
        markup = self._read_source(source)
        soup = self.parse(markup, emitter=active_emitter)
        return self.from_tag(soup, emitter=active_emitter)

    def from_tag(
        self,
        node: PageElement,
        *,
        emitter: DiagnosticEmitter | None = None,
    ) -> AnnotatedText:
        """Convert an already parsed tree."""
        if not isinstance(node, PageElement):
            msg = f"Expected a BeautifulSoup node, got {type(node).__name__}"
            raise InvalidNodeError(msg)
        active_emitter = ensure_emitter(emitter)
        context = RenderContext(
            config=self.config,
            registry=self.registry,
            emitter=active_emitter,
        )
        try:
            render_node(node, context)
            text = context.buffer.getvalue()
            annotations = context.stack.resolve(len(text), self.config.default_font)
        except SpannerError:
            raise
        except Exception as exc:
            message = format_rendering_error(exc)
            active_emitter.error(message, exc)
            raise SpanRenderingError(message) from exc
        return AnnotatedText(text=text, annotations=annotations)

    def parse(
        self,
        markup: str | bytes,
        *,
        emitter: DiagnosticEmitter | None = None,
    ) -> BeautifulSoup:
        """Parse markup and prune the configured tags."""
        try:
            soup = BeautifulSoup(markup, self.parser_backend)
        except FeatureNotFound:
            if self.parser_backend == "html.parser":
                raise
            # Fall back to the built-in parser when the preferred backend is missing.
            ensure_emitter(emitter).warning(
                f"HTML parser '{self.parser_backend}' unavailable, using 'html.parser'"
            )
            soup = BeautifulSoup(markup, "html.parser")
            self.parser_backend = "html.parser"

        if self.config.prune_tags:
            for node in soup.find_all(list(self.config.prune_tags)):
                if not node.decomposed:
                    node.decompose()
        return soup

    @staticmethod
    def _read_source(source: HtmlSource) -> str | bytes:
        if isinstance(source, (str, bytes)):
            return source
        read = getattr(source, "read", None)
        if not callable(read):
            msg = f"Cannot read HTML from {type(source).__name__}"
            raise TypeError(msg)
        try:
            data = read()
        except (OSError, UnicodeDecodeError) as exc:
            raise HtmlReadError("Unable to read HTML source") from exc
        if not isinstance(data, (str, bytes)):
            msg = f"HTML stream returned {type(data).__name__}, expected str or bytes"
            raise HtmlReadError(msg)
        return data


__all__ = ["HtmlSource", "HtmlSpanner"]
