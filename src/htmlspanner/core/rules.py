"""Tag handler protocol and the dispatch table that selects handlers by tag.

Dispatch is a flat, exact-match lookup: each tag name maps to at most one
handler and the most recent registration wins. There are no selectors and no
specificity rules.

A handler takes part in the walk at two points:

`before_children`
: called before the element's children are rendered; block handlers use it to
  start a fresh line.

`handle`
: called once the children are rendered with the ``[start, end)`` range they
  produced; this is where a handler pushes its style onto the span stack or
  appends content of its own.

Handlers whose ``renders_content`` flag is set take care of their subtree
themselves and the walker does not descend into it.

One handler instance serves every occurrence of its tags, possibly across
concurrent conversions, so handlers must not keep per-call state on ``self``.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
import logging
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable


if TYPE_CHECKING:  # pragma: no cover - typing only
    from bs4.element import Tag

    from .context import RenderContext


logger = logging.getLogger(__name__)


@runtime_checkable
class TagHandler(Protocol):
    """Behaviour attached to a tag name."""

    renders_content: bool

    def before_children(self, node: Tag, context: RenderContext) -> None: ...

    def handle(self, node: Tag, context: RenderContext, start: int, end: int) -> None: ...


class HandlerRegistry:
    """Mapping from tag names to handlers.

    Configure the registry before the first conversion; mutating it while a
    conversion runs on another thread is not supported.
    """

    def __init__(self, handlers: dict[str, TagHandler] | None = None) -> None:
        self._handlers: dict[str, TagHandler] = {}
        for tag, handler in (handlers or {}).items():
            self.register(tag, handler)

    def __contains__(self, tag: object) -> bool:
        return isinstance(tag, str) and _normalise(tag) in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    def __iter__(self) -> Iterator[str]:
        return iter(self.tags())

    def register(self, tag: str, handler: TagHandler) -> None:
        """Register ``handler`` for ``tag``, replacing any previous handler."""
        if not isinstance(handler, TagHandler):
            msg = f"Handler for '{tag}' must implement before_children() and handle()"
            raise TypeError(msg)
        key = _normalise(tag)
        if not key:
            msg = "Tag name must not be empty"
            raise ValueError(msg)
        previous = self._handlers.get(key)
        self._handlers[key] = handler
        if previous is not None and previous is not handler:
            logger.debug(
                "Replacing handler for <%s>: %s -> %s",
                key,
                type(previous).__name__,
                type(handler).__name__,
            )

    def collect_from(self, owner: Any) -> None:
        """Register every entry of the ``HANDLERS`` mapping exposed by ``owner``."""
        handlers = getattr(owner, "HANDLERS", None)
        if not isinstance(handlers, Mapping):
            msg = f"{owner!r} does not expose a HANDLERS mapping"
            raise TypeError(msg)
        for tag, handler in handlers.items():
            self.register(tag, handler)

    def unregister(self, tag: str) -> None:
        """Remove the handler for ``tag``; unknown tags are ignored."""
        self._handlers.pop(_normalise(tag), None)

    def lookup(self, tag: str | None) -> TagHandler | None:
        """Return the handler registered for ``tag`` or ``None``."""
        if not tag:
            return None
        return self._handlers.get(_normalise(tag))

    def tags(self) -> list[str]:
        return sorted(self._handlers)

    def copy(self) -> HandlerRegistry:
        """Return an independent registry holding the same handler instances."""
        clone = HandlerRegistry()
        clone._handlers = dict(self._handlers)
        return clone

    def describe(self) -> list[dict[str, object]]:
        """Return a serialisable snapshot of the registered handlers."""
        return [
            {
                "tag": tag,
                "handler": type(self._handlers[tag]).__name__,
                "renders_content": bool(self._handlers[tag].renders_content),
            }
            for tag in self.tags()
        ]


def _normalise(tag: str) -> str:
    return tag.strip().lower()


__all__ = ["HandlerRegistry", "TagHandler"]
