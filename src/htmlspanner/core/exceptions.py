"""Custom exception hierarchy for the HTML to annotated text pipeline."""

from __future__ import annotations


class SpannerError(RuntimeError):
    """Base exception for conversion failures."""


class HtmlReadError(SpannerError):
    """Raised when the HTML source cannot be read or decoded."""


class SpanRenderingError(SpannerError):
    """Raised when walking the tree fails unexpectedly."""


class InvalidNodeError(SpannerError):
    """Raised when a conversion is handed something that is not a tree node."""


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


def exception_hint(exc: BaseException) -> str | None:
    """Return the most specific message available for an exception chain."""
    messages = exception_messages(exc)
    return messages[-1] if messages else None


def format_rendering_error(exc: BaseException) -> str:
    """Return a one-line summary of a rendering failure and its root cause."""
    summary = "HTML span rendering failed"
    hint = exception_hint(exc)
    if hint:
        summary = f"{summary}: {hint}"
    return summary.rstrip(".")


__all__ = [
    "HtmlReadError",
    "InvalidNodeError",
    "SpanRenderingError",
    "SpannerError",
    "exception_hint",
    "exception_messages",
    "format_rendering_error",
]
