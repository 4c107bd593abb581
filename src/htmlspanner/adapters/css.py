"""Inline ``style`` attribute parsing.

Only the declarations that map onto :class:`~htmlspanner.core.style.Style`
attributes are understood; everything else is ignored. There is no cascade
and no selector matching.
"""

from __future__ import annotations

from functools import lru_cache
import logging
import re

from htmlspanner.core.config import SpannerConfig
from htmlspanner.core.style import (
    DisplayStyle,
    FontStyle,
    FontWeight,
    Style,
    TextAlignment,
    VerticalAlignment,
)

from ._colors import NAMED_COLORS


logger = logging.getLogger(__name__)

# Prefer 6-digit hex-colors over 3-digit ones
_HEX_COLOR_RE = re.compile(r"^#([a-f0-9]{6}|[a-f0-9]{3})$")
_RGB_RE = re.compile(r"^rgba?\((?P<body>[^)]*)\)$")
_DIMENSION_RE = re.compile(r"^(?P<number>[-+]?(?:\d+\.?\d*|\.\d+))\s*(?P<unit>[a-z%]*)$")

_OPAQUE = 0xFF000000

_FONT_SIZE_KEYWORDS: dict[str, float] = {
    "xx-small": 0.6,
    "x-small": 0.75,
    "small": 0.8,
    "medium": 1.0,
    "large": 1.2,
    "x-large": 1.5,
    "xx-large": 2.0,
    "smaller": 0.8,
    "larger": 1.2,
}

_ALIGNMENTS: dict[str, TextAlignment] = {
    "left": TextAlignment.LEFT,
    "start": TextAlignment.LEFT,
    "center": TextAlignment.CENTER,
    "right": TextAlignment.RIGHT,
    "end": TextAlignment.RIGHT,
}


def argb(red: int, green: int, blue: int, alpha: int = 0xFF) -> int:
    """Pack colour channels into an ARGB integer."""
    return (alpha & 0xFF) << 24 | (red & 0xFF) << 16 | (green & 0xFF) << 8 | (blue & 0xFF)


@lru_cache(maxsize=256)
def parse_color(value: str) -> int | None:
    """Return the ARGB value of a CSS colour or ``None`` when it is not understood.

    Accepts ``#rgb``, ``#rrggbb``, ``rgb()``/``rgba()``, ``transparent`` and the
    named colours of CSS Color Level 4.
    """
    candidate = value.strip().lower()
    if not candidate:
        return None
    if candidate == "transparent":
        return 0

    if match := _HEX_COLOR_RE.match(candidate):
        hexes = match.group(1)
        if len(hexes) == 3:
            hexes = "".join(2 * char for char in hexes)
        return _OPAQUE | int(hexes, 16)

    if match := _RGB_RE.match(candidate):
        return _parse_rgb(match.group("body"))

    if (named := NAMED_COLORS.get(candidate)) is not None:
        return _OPAQUE | named

    logger.debug("Unknown colour %r", value)
    return None


def _parse_rgb(body: str) -> int | None:
    parts = [part for part in re.split(r"[\s,/]+", body.strip()) if part]
    if len(parts) not in (3, 4):
        return None
    channels: list[int] = []
    for part in parts[:3]:
        try:
            if part.endswith("%"):
                channel = round(float(part[:-1]) * 255 / 100)
            else:
                channel = round(float(part))
        except ValueError:
            return None
        channels.append(max(0, min(255, channel)))
    alpha = 0xFF
    if len(parts) == 4:
        try:
            raw = parts[3]
            fraction = float(raw[:-1]) / 100 if raw.endswith("%") else float(raw)
        except ValueError:
            return None
        alpha = round(max(0.0, min(1.0, fraction)) * 255)
    return argb(*channels, alpha=alpha)


def parse_dimension(value: str) -> tuple[float, str] | None:
    """Split a CSS length such as ``1.5em`` into ``(1.5, "em")``."""
    match = _DIMENSION_RE.match(value.strip().lower())
    if match is None:
        return None
    return float(match.group("number")), match.group("unit")


def parse_font_size(value: str) -> Style:
    """Translate a ``font-size`` value into an absolute or relative size."""
    lowered = value.strip().lower()
    if lowered in _FONT_SIZE_KEYWORDS:
        return Style(relative_font_size=_FONT_SIZE_KEYWORDS[lowered])
    dimension = parse_dimension(lowered)
    if dimension is None:
        return Style()
    number, unit = dimension
    if unit in ("", "px"):
        return Style(absolute_font_size=number)
    if unit == "pt":
        return Style(absolute_font_size=number * 4 / 3)
    if unit in ("em", "rem"):
        return Style(relative_font_size=number)
    if unit == "%":
        return Style(relative_font_size=number / 100)
    return Style()


def _parse_em(value: str) -> float | None:
    dimension = parse_dimension(value)
    if dimension is None:
        return None
    number, unit = dimension
    if unit == "em" or (number == 0 and unit in ("", "px")):
        return number
    return None


def _parse_weight(value: str) -> FontWeight | None:
    if value in ("bold", "bolder"):
        return FontWeight.BOLD
    if value in ("normal", "lighter"):
        return FontWeight.NORMAL
    if value.isdigit():
        return FontWeight.BOLD if int(value) >= 600 else FontWeight.NORMAL
    return None


def iter_declarations(content: str) -> list[tuple[str, str]]:
    """Split a declaration block into ``(name, value)`` pairs."""
    declarations: list[tuple[str, str]] = []
    for declaration in content.split(";"):
        name, _, value = declaration.partition(":")
        name = name.strip().lower()
        value = value.replace("!important", "").strip()
        if name and value:
            declarations.append((name, value))
    return declarations


def parse_style_attribute(content: str | None, config: SpannerConfig) -> Style:
    """Convert the declarations of an inline ``style`` attribute into a Style."""
    style = Style()
    if not content:
        return style

    for name, value in iter_declarations(content):
        lowered = value.lower()

        if name == "color":
            color = parse_color(value)
            if color is not None:
                style = style.with_(color=color)

        elif name in ("background-color", "background"):
            for part in value.split() if name == "background" else (value,):
                color = parse_color(part)
                if color is not None:
                    style = style.with_(background_color=color)
                    break

        elif name == "font-weight":
            weight = _parse_weight(lowered)
            if weight is not None:
                style = style.with_(font_weight=weight)

        elif name == "font-style":
            if lowered in ("italic", "oblique"):
                style = style.with_(font_style=FontStyle.ITALIC)
            elif lowered == "normal":
                style = style.with_(font_style=FontStyle.NORMAL)

        elif name == "font-family":
            style = style.with_(font_family=config.font_for(value))

        elif name == "font-size":
            style = style.merge(parse_font_size(value))

        elif name == "text-align":
            alignment = _ALIGNMENTS.get(lowered)
            if alignment is not None:
                style = style.with_(text_alignment=alignment)

        elif name == "display":
            if lowered == "block":
                style = style.with_(display_style=DisplayStyle.BLOCK)
            elif lowered == "inline":
                style = style.with_(display_style=DisplayStyle.INLINE)

        elif name == "margin-bottom":
            margin = _parse_em(lowered)
            if margin is not None:
                style = style.with_(relative_margin_bottom=margin)

        elif name == "margin-left":
            margin = _parse_em(lowered)
            if margin is not None:
                style = style.with_(margin_left=margin)

        elif name == "vertical-align":
            if lowered == "sub":
                style = style.with_(vertical_alignment=VerticalAlignment.SUB)
            elif lowered == "super":
                style = style.with_(vertical_alignment=VerticalAlignment.SUPER)

        else:
            logger.debug("Ignoring unsupported declaration %s: %s", name, value)

    return style


def parse_alignment(value: str | None) -> TextAlignment | None:
    """Translate a presentational ``align`` attribute."""
    if not value:
        return None
    return _ALIGNMENTS.get(value.strip().lower())


__all__ = [
    "argb",
    "iter_declarations",
    "parse_alignment",
    "parse_color",
    "parse_dimension",
    "parse_font_size",
    "parse_style_attribute",
]
