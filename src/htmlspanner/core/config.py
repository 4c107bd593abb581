"""Configuration model used by the HTML spanner.

SpannerConfig

`default_font` (`FontFamily`)
: Family applied to any text whose font attributes were touched by a tag but
  which never received an explicit family. Plain strings are accepted and
  turned into a family of that name.

`serif_font` / `sans_serif_font` / `monospace_font` (`FontFamily`)
: Families substituted for the CSS generic names ``serif``, ``sans-serif`` and
  ``monospace``. The monospace family is also used by ``<tt>``, ``<code>`` and
  ``<pre>``.

`strip_extra_whitespace` (`bool`)
: Collapse inter-tag whitespace more aggressively. Newline helpers never emit
  more than two consecutive newlines and whitespace-only text nodes produce
  no separator space.

`prune_tags` (`tuple[str, ...]`)
: Tags removed from the parsed tree, together with their content, before the
  walk starts.

The configuration is frozen: build a new one with ``model_copy(update=...)``
instead of mutating it between conversions.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .style import FontFamily


class SpannerConfig(BaseModel):
    """Immutable settings shared by every conversion of a spanner."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    default_font: FontFamily = Field(default_factory=lambda: FontFamily("default"))
    serif_font: FontFamily = Field(default_factory=lambda: FontFamily("serif"))
    sans_serif_font: FontFamily = Field(default_factory=lambda: FontFamily("sans-serif"))
    monospace_font: FontFamily = Field(default_factory=lambda: FontFamily("monospace"))
    strip_extra_whitespace: bool = False
    prune_tags: tuple[str, ...] = ("script", "style", "title")

    @field_validator(
        "default_font", "serif_font", "sans_serif_font", "monospace_font", mode="before"
    )
    @classmethod
    def _coerce_family(cls, value: Any) -> Any:
        if isinstance(value, str):
            return FontFamily(value)
        return value

    @field_validator("prune_tags", mode="before")
    @classmethod
    def _normalise_tags(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.split(",")
        if isinstance(value, (list, tuple, set, frozenset)):
            return tuple(sorted({str(tag).strip().lower() for tag in value if str(tag).strip()}))
        return value

    def font_for(self, name: str) -> FontFamily:
        """Resolve a ``face``/``font-family`` value to a configured family.

        Comma separated lists resolve to their first entry; generic names map
        to the configured aliases.
        """
        first = name.split(",", 1)[0].strip().strip("'\"").strip()
        lowered = first.lower()
        if lowered == "serif":
            return self.serif_font
        if lowered == "sans-serif":
            return self.sans_serif_font
        if lowered == "monospace":
            return self.monospace_font
        if not first:
            return self.default_font
        return FontFamily(first)


__all__ = ["SpannerConfig"]
