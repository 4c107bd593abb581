"""Style values accumulated while walking the HTML tree.

A :class:`Style` records the formatting intent of a single tag. Every attribute
is optional: ``None`` means the tag has no opinion and the value is inherited
from the enclosing tags (or from the configured defaults once the spans are
committed).

Styles are frozen. Handlers derive new values through :meth:`Style.with_` and
:meth:`Style.merge` instead of mutating shared instances, which keeps a single
handler instance safe to reuse for every occurrence of its tag.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any


class FontWeight(Enum):
    NORMAL = "normal"
    BOLD = "bold"


class FontStyle(Enum):
    NORMAL = "normal"
    ITALIC = "italic"


class TextAlignment(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class DisplayStyle(Enum):
    INLINE = "inline"
    BLOCK = "block"


class VerticalAlignment(Enum):
    SUB = "sub"
    SUPER = "super"


@dataclass(frozen=True, slots=True)
class FontFamily:
    """Logical font family.

    ``handle`` is opaque to the converter; the consumer of the annotated text
    decides what it refers to (a font file, a platform typeface name, ...).
    """

    name: str
    handle: Any = None

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Style:
    """Partial set of formatting attributes attached to a text range."""

    font_family: FontFamily | None = None
    font_weight: FontWeight | None = None
    font_style: FontStyle | None = None
    relative_font_size: float | None = None
    absolute_font_size: float | None = None
    color: int | None = None
    background_color: int | None = None
    text_alignment: TextAlignment | None = None
    display_style: DisplayStyle | None = None
    relative_margin_bottom: float | None = None
    margin_left: float | None = None
    vertical_alignment: VerticalAlignment | None = None

    def with_(self, **changes: Any) -> Style:
        """Return a copy with the given attributes replaced."""
        return replace(self, **changes)

    def merge(self, child: Style) -> Style:
        """Combine with a more deeply nested style, the child winning on conflicts.

        Attributes are merged one by one, so a child that only sets the weight
        keeps this style's family and italic flag.
        """
        changes = {
            item.name: getattr(child, item.name)
            for item in fields(child)
            if getattr(child, item.name) is not None
        }
        return replace(self, **changes) if changes else self

    def is_empty(self) -> bool:
        return all(getattr(self, item.name) is None for item in fields(self))

    def has_font(self) -> bool:
        """Return True when any font sub-attribute (family, weight, italic) is set."""
        return (
            self.font_family is not None
            or self.font_weight is not None
            or self.font_style is not None
        )

    @property
    def is_block(self) -> bool:
        return self.display_style is DisplayStyle.BLOCK

    def describe(self) -> dict[str, object]:
        """Return the attributes that are set, for logging and debugging."""
        payload: dict[str, object] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if value is None:
                continue
            payload[item.name] = value.value if isinstance(value, Enum) else value
        return payload


BASE_FONT_LEVEL = 3

LEGACY_FONT_SIZES: dict[int, float] = {
    1: 0.6,
    2: 0.8,
    3: 1.0,
    4: 1.2,
    5: 1.4,
    6: 1.6,
    7: 1.8,
}


def translate_font_size(value: int | str | None) -> float:
    """Map a legacy ``<font size>`` level (1-7) to a relative size multiplier.

    Signed values such as ``+1`` or ``-2`` are relative to the base level 3 and
    are clamped to the 1-7 range. Unsigned values outside the range and
    anything that does not parse as an integer resolve to ``1.0``.
    """
    if isinstance(value, str):
        text = value.strip()
        try:
            level = int(text)
        except ValueError:
            return 1.0
        if text[:1] in ("+", "-"):
            level = min(max(BASE_FONT_LEVEL + level, 1), 7)
    elif isinstance(value, int) and not isinstance(value, bool):
        level = value
    else:
        return 1.0
    return LEGACY_FONT_SIZES.get(level, 1.0)


__all__ = [
    "BASE_FONT_LEVEL",
    "LEGACY_FONT_SIZES",
    "DisplayStyle",
    "FontFamily",
    "FontStyle",
    "FontWeight",
    "Style",
    "TextAlignment",
    "VerticalAlignment",
    "translate_font_size",
]
