"""Text buffer used during the walk and the annotated text it turns into."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .style import FontFamily


class AnnotationKind(Enum):
    """Independent dimensions a range of text can be annotated with."""

    FONT = "font"
    RELATIVE_SIZE = "relative_size"
    ABSOLUTE_SIZE = "absolute_size"
    COLOR = "color"
    BACKGROUND_COLOR = "background_color"
    ALIGNMENT = "alignment"
    MARGIN_BOTTOM = "margin_bottom"
    MARGIN_LEFT = "margin_left"
    VERTICAL_ALIGNMENT = "vertical_alignment"
    LINK = "link"
    IMAGE = "image"


KIND_ORDER: dict[AnnotationKind, int] = {kind: index for index, kind in enumerate(AnnotationKind)}


@dataclass(frozen=True, slots=True)
class Font:
    """Concrete value of a :attr:`AnnotationKind.FONT` annotation."""

    family: FontFamily
    bold: bool = False
    italic: bool = False


@dataclass(frozen=True, slots=True)
class ImageReference:
    """Concrete value of an :attr:`AnnotationKind.IMAGE` annotation."""

    src: str
    alt: str | None = None


@dataclass(frozen=True, slots=True)
class Annotation:
    """A value attached to the half-open character range ``[start, end)``."""

    kind: AnnotationKind
    start: int
    end: int
    value: Any

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            msg = f"Invalid annotation range [{self.start}, {self.end})"
            raise ValueError(msg)

    def covers(self, offset: int) -> bool:
        return self.start <= offset < self.end

    def sort_key(self) -> tuple[int, int, int]:
        return (self.start, self.end, KIND_ORDER[self.kind])


class TextBuffer:
    """Append-only character builder shared by the handlers of one conversion.

    Offsets handed out while walking stay valid: text is only ever added at
    the tail.
    """

    __slots__ = ("_length", "_parts", "_tail")

    _TAIL_SIZE = 2

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._length = 0
        self._tail = ""

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return self._length > 0

    def append(self, text: str) -> None:
        if not text:
            return
        self._parts.append(text)
        self._length += len(text)
        self._tail = (self._tail + text)[-self._TAIL_SIZE :]

    @property
    def last_char(self) -> str | None:
        return self._tail[-1] if self._tail else None

    def ends_with(self, *suffixes: str) -> bool:
        last = self.last_char
        return last is not None and last in suffixes

    def ends_with_whitespace(self) -> bool:
        last = self.last_char
        return last is not None and last.isspace()

    def newline_run(self) -> int:
        """Return how many newlines (at most two) close the buffer."""
        count = 0
        for char in reversed(self._tail):
            if char != "\n":
                break
            count += 1
        return count

    def getvalue(self) -> str:
        if len(self._parts) > 1:
            self._parts[:] = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""


@dataclass(frozen=True, slots=True)
class AnnotatedText:
    """Final artifact handed to whatever widget draws the styled text."""

    text: str
    annotations: tuple[Annotation, ...] = ()

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self.text)

    def __iter__(self) -> Iterator[Annotation]:
        return iter(self.annotations)

    def annotations_of(self, kind: AnnotationKind) -> list[Annotation]:
        """Return the annotations of a single category in document order."""
        return [annotation for annotation in self.annotations if annotation.kind is kind]

    def annotations_at(self, offset: int) -> list[Annotation]:
        """Return every annotation covering the character at ``offset``."""
        return [annotation for annotation in self.annotations if annotation.covers(offset)]

    def value_at(self, kind: AnnotationKind, offset: int) -> Any:
        """Return the value of ``kind`` at ``offset`` or ``None`` when unset."""
        for annotation in self.annotations:
            if annotation.kind is kind and annotation.covers(offset):
                return annotation.value
        return None

    def slice(self, annotation: Annotation) -> str:
        """Return the characters covered by ``annotation``."""
        return self.text[annotation.start : annotation.end]


__all__ = [
    "KIND_ORDER",
    "AnnotatedText",
    "Annotation",
    "AnnotationKind",
    "Font",
    "ImageReference",
    "TextBuffer",
]
