"""Style stack accumulated during the walk and the committer that resolves it.

Resolution happens in two phases. While the tree is walked, handlers push
``(start, end, style)`` entries in the order their tags close, which is a
post-order: descendants land on the stack before their ancestors. Once the
text is complete, :func:`commit_spans` replays the entries in that order
against a per-category index of character positions:

- a position claimed by a descendant keeps its value when an ancestor later
  covers it, so the most deeply nested value wins;
- the font category is tracked per sub-attribute (family, bold, italic), so
  an ancestor still contributes the parts a descendant left unset;
- bottom margins are paragraph markers and only claim the last character of
  their range.

The committer never looks at the buffer, which keeps the merge rule a pure
function of the entry list.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
import logging
from typing import Any

from .style import FontFamily, FontStyle, FontWeight, Style
from .text import Annotation, AnnotationKind, Font


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SpanEntry:
    """Style intent recorded for the text a tag produced."""

    start: int
    end: int
    style: Style


StackItem = SpanEntry | Annotation


_STYLE_CATEGORIES: tuple[tuple[str, AnnotationKind], ...] = (
    ("relative_font_size", AnnotationKind.RELATIVE_SIZE),
    ("absolute_font_size", AnnotationKind.ABSOLUTE_SIZE),
    ("color", AnnotationKind.COLOR),
    ("background_color", AnnotationKind.BACKGROUND_COLOR),
    ("text_alignment", AnnotationKind.ALIGNMENT),
    ("margin_left", AnnotationKind.MARGIN_LEFT),
    ("vertical_alignment", AnnotationKind.VERTICAL_ALIGNMENT),
)


class SpanStack:
    """Ordered collection of pending span entries for one conversion."""

    def __init__(self) -> None:
        self._entries: list[StackItem] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[StackItem]:
        return iter(self._entries)

    @property
    def entries(self) -> tuple[StackItem, ...]:
        return tuple(self._entries)

    def push(self, start: int, end: int, style: Style) -> None:
        """Record ``style`` for ``[start, end)``; empty ranges or styles are dropped."""
        if start < 0 or end < start:
            msg = f"Invalid span range [{start}, {end})"
            raise ValueError(msg)
        if end == start or style.is_empty():
            return
        self._entries.append(SpanEntry(start, end, style))

    def push_annotation(self, annotation: Annotation) -> None:
        """Record an annotation that bypasses style resolution (links, images)."""
        self._entries.append(annotation)

    def resolve(self, length: int, default_font: FontFamily) -> tuple[Annotation, ...]:
        """Commit every entry against a text of ``length`` characters."""
        return commit_spans(self._entries, length, default_font)


class _CategoryIndex:
    """First-writer-wins assignment of values to character positions."""

    __slots__ = ("_coalesce", "_slots")

    def __init__(self, length: int, *, coalesce: bool = True) -> None:
        self._slots: list[Any] = [None] * length
        self._coalesce = coalesce

    def claim(self, start: int, end: int, value: Any) -> None:
        slots = self._slots
        for position in range(start, end):
            if slots[position] is None:
                slots[position] = value

    def runs(self) -> Iterator[tuple[int, int, Any]]:
        """Yield maximal ``(start, end, value)`` runs of equal assigned values."""
        if not self._coalesce:
            for position, value in enumerate(self._slots):
                if value is not None:
                    yield position, position + 1, value
            return
        run_start = 0
        current: Any = None
        for position, value in enumerate(self._slots):
            if value == current:
                continue
            if current is not None:
                yield run_start, position, current
            run_start = position
            current = value
        if current is not None:
            yield run_start, len(self._slots), current


class _FontIndex:
    """Per-position font state where family, bold and italic fill in independently."""

    __slots__ = ("_slots",)

    def __init__(self, length: int) -> None:
        self._slots: list[tuple[FontFamily | None, bool | None, bool | None] | None] = [
            None
        ] * length

    def claim(self, start: int, end: int, style: Style) -> None:
        family = style.font_family
        bold = None if style.font_weight is None else style.font_weight is FontWeight.BOLD
        italic = None if style.font_style is None else style.font_style is FontStyle.ITALIC
        slots = self._slots
        for position in range(start, end):
            existing = slots[position]
            if existing is None:
                slots[position] = (family, bold, italic)
                continue
            current_family, current_bold, current_italic = existing
            slots[position] = (
                family if current_family is None else current_family,
                bold if current_bold is None else current_bold,
                italic if current_italic is None else current_italic,
            )

    def runs(self, default_font: FontFamily) -> Iterator[tuple[int, int, Font]]:
        resolved = _CategoryIndex(len(self._slots))
        for position, slot in enumerate(self._slots):
            if slot is None:
                continue
            family, bold, italic = slot
            font = Font(family=family or default_font, bold=bool(bold), italic=bool(italic))
            resolved.claim(position, position + 1, font)
        yield from resolved.runs()


def commit_spans(
    entries: Iterable[StackItem],
    length: int,
    default_font: FontFamily,
) -> tuple[Annotation, ...]:
    """Resolve stack entries into non-overlapping annotations per category.

    ``entries`` must be in the order tags finished (descendants first). Direct
    :class:`Annotation` items are passed through untouched.
    """
    fonts = _FontIndex(length)
    margins = _CategoryIndex(length, coalesce=False)
    categories = {kind: _CategoryIndex(length) for _, kind in _STYLE_CATEGORIES}
    passthrough: list[Annotation] = []
    count = 0

    for item in entries:
        count += 1
        if isinstance(item, Annotation):
            _check_range(item.start, item.end, length)
            passthrough.append(item)
            continue

        start, end, style = item.start, item.end, item.style
        _check_range(start, end, length)
        if start == end:
            continue

        if style.has_font():
            fonts.claim(start, end, style)

        for attribute, kind in _STYLE_CATEGORIES:
            value = getattr(style, attribute)
            if value is not None:
                categories[kind].claim(start, end, value)

        if style.relative_margin_bottom is not None:
            margins.claim(end - 1, end, style.relative_margin_bottom)

    annotations: list[Annotation] = list(passthrough)
    annotations.extend(
        Annotation(AnnotationKind.FONT, start, end, font)
        for start, end, font in fonts.runs(default_font)
    )
    for kind, index in categories.items():
        annotations.extend(Annotation(kind, start, end, value) for start, end, value in index.runs())
    annotations.extend(
        Annotation(AnnotationKind.MARGIN_BOTTOM, start, end, value)
        for start, end, value in margins.runs()
    )

    annotations.sort(key=Annotation.sort_key)
    logger.debug(
        "Committed %d stack entries into %d annotations over %d characters",
        count,
        len(annotations),
        length,
    )
    return tuple(annotations)


def _check_range(start: int, end: int, length: int) -> None:
    if start < 0 or end < start or end > length:
        msg = f"Span [{start}, {end}) does not fit a text of {length} characters"
        raise ValueError(msg)


__all__ = ["SpanEntry", "SpanStack", "StackItem", "commit_spans"]
