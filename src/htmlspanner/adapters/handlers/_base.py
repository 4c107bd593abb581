"""Base classes for the built-in tag handlers.

:class:`StyleHandler` resolves a :class:`~htmlspanner.core.style.Style` for the
node it handles and pushes it over the text the node produced. Block styles
start on a fresh line and end with a newline.

:class:`WrappingStyleHandler` decorates another styled handler. It refines the
style the wrapped handler resolves (for instance from the node's attributes)
and then lets the wrapped handler do its work with the refined style. Wrappers
can be stacked.
"""

from __future__ import annotations

from bs4.element import Tag

from htmlspanner.core.context import RenderContext
from htmlspanner.core.style import Style


class TagNodeHandler:
    """No-op handler; subclasses override the hooks they need."""

    renders_content: bool = False

    def before_children(self, node: Tag, context: RenderContext) -> None:
        return None

    def handle(self, node: Tag, context: RenderContext, start: int, end: int) -> None:
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class StyleHandler(TagNodeHandler):
    """Apply a fixed style to the text produced by a tag."""

    def __init__(self, style: Style | None = None) -> None:
        self._style = style or Style()

    @property
    def style(self) -> Style:
        return self._style

    def resolve_style(self, node: Tag, context: RenderContext) -> Style:
        """Return the style used for ``node``; subclasses may consult the context."""
        return self._style

    def before_children(self, node: Tag, context: RenderContext) -> None:
        self.prepare(node, context, self.resolve_style(node, context))

    def handle(self, node: Tag, context: RenderContext, start: int, end: int) -> None:
        self.handle_styled(node, context, start, end, self.resolve_style(node, context))

    def prepare(self, node: Tag, context: RenderContext, style: Style) -> None:
        if style.is_block:
            context.ensure_line_start()

    def handle_styled(
        self, node: Tag, context: RenderContext, start: int, end: int, style: Style
    ) -> None:
        if style.is_block:
            context.append_newline()
        context.push_style(start, len(context.buffer), style)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._style.describe()})"


class WrappingStyleHandler(StyleHandler):
    """Refine the style of a wrapped handler before delegating to it."""

    def __init__(self, wrapped: StyleHandler) -> None:
        super().__init__(wrapped.style)
        self.wrapped = wrapped

    @property
    def renders_content(self) -> bool:  # type: ignore[override]
        return self.wrapped.renders_content

    def refine(self, node: Tag, context: RenderContext, style: Style) -> Style:
        return style

    def resolve_style(self, node: Tag, context: RenderContext) -> Style:
        return self.refine(node, context, self.wrapped.resolve_style(node, context))

    def prepare(self, node: Tag, context: RenderContext, style: Style) -> None:
        self.wrapped.prepare(node, context, style)

    def handle_styled(
        self, node: Tag, context: RenderContext, start: int, end: int, style: Style
    ) -> None:
        self.wrapped.handle_styled(node, context, start, end, style)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.wrapped!r})"
