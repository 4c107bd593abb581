"""Internal helpers shared across handler modules."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from bs4.element import Comment, Declaration, Doctype, NavigableString, ProcessingInstruction, Tag


IGNORED_STRINGS = (Comment, Declaration, Doctype, ProcessingInstruction)


def coerce_attribute(value: Any) -> str | None:
    """Normalise a BeautifulSoup attribute value to a string when possible."""
    if isinstance(value, str):
        return value
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError:
            return None
    if isinstance(value, Iterable):
        for item in value:
            if isinstance(item, str):
                return item
    return None


def parent_tag_name(node: Tag) -> str | None:
    """Return the lower-cased name of the closest parent element."""
    parent = node.parent
    name = getattr(parent, "name", None)
    return name.lower() if isinstance(name, str) else None


def count_ancestors(node: Tag, names: Iterable[str]) -> int:
    """Count the ancestors of ``node`` whose tag is one of ``names``."""
    wanted = set(names)
    return sum(1 for parent in node.parents if getattr(parent, "name", None) in wanted)


def preformatted_text(node: Tag) -> str:
    """Return the text of ``node`` with its whitespace untouched.

    ``<br>`` elements become newlines; comments and declarations are dropped.
    """
    pieces: list[str] = []
    for descendant in node.descendants:
        if isinstance(descendant, NavigableString):
            if not isinstance(descendant, IGNORED_STRINGS):
                pieces.append(str(descendant))
        elif isinstance(descendant, Tag) and descendant.name == "br":
            pieces.append("\n")
    text = "".join(pieces)
    # A newline directly after the opening tag is not content.
    if text.startswith("\r\n"):
        return text[2:]
    if text.startswith("\n"):
        return text[1:]
    return text
