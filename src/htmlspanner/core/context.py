"""Rendering context shared by the handlers of a single conversion."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .diagnostics import DiagnosticEmitter, NullEmitter
from .stack import SpanStack
from .text import Annotation, TextBuffer


if TYPE_CHECKING:  # pragma: no cover - typing only
    from bs4.element import Tag

    from .config import SpannerConfig
    from .rules import HandlerRegistry
    from .style import Style


@dataclass
class RenderContext:
    """Mutable state owned by one conversion call.

    The buffer and the span stack are created per conversion and never shared;
    the configuration and the registry are read-only for the duration of the
    walk.
    """

    config: SpannerConfig
    registry: HandlerRegistry
    buffer: TextBuffer = field(default_factory=TextBuffer)
    stack: SpanStack = field(default_factory=SpanStack)
    emitter: DiagnosticEmitter = field(default_factory=NullEmitter)

    _reported: set[tuple[int, str]] = field(default_factory=set, init=False, repr=False)

    def append(self, text: str) -> None:
        self.buffer.append(text)

    def append_separator(self) -> None:
        """Append one space unless the buffer is empty or already ends in whitespace."""
        if self.buffer and not self.buffer.ends_with_whitespace():
            self.buffer.append(" ")

    def append_newline(self) -> None:
        """Append a newline, capped at two in a row when stripping whitespace."""
        if self.config.strip_extra_whitespace and self.buffer.newline_run() >= 2:
            return
        self.buffer.append("\n")

    def ensure_line_start(self) -> None:
        """Start a new line unless the buffer is empty or already at one."""
        if self.buffer and not self.buffer.ends_with("\n"):
            self.buffer.append("\n")

    def push_style(self, start: int, end: int, style: Style) -> None:
        self.stack.push(start, end, style)

    def push_annotation(self, annotation: Annotation) -> None:
        self.stack.push_annotation(annotation)

    def report_invalid_attribute(self, node: Tag, attribute: str, value: Any) -> None:
        """Report a malformed attribute that was replaced by a fallback, once per node."""
        key = (id(node), attribute)
        if key in self._reported:
            return
        self._reported.add(key)
        self.emitter.event(
            "invalid_attribute", {"tag": node.name, "attribute": attribute, "value": value}
        )
