"""BeautifulSoup-facing adapters: CSS parsing, the walker, handlers and exports."""

from __future__ import annotations

from .preview import to_rich_text
from .renderer import HtmlSource, HtmlSpanner


__all__ = ["HtmlSource", "HtmlSpanner", "to_rich_text"]
