"""Built-in tag handlers.

Each module exposes a ``HANDLERS`` mapping from tag names to handler
instances; :func:`register_builtin_handlers` installs all of them.
"""

from __future__ import annotations

from htmlspanner.core.rules import HandlerRegistry

from . import basic, blocks, inline, links, media
from ._base import StyleHandler, TagNodeHandler, WrappingStyleHandler
from .basic import AlignmentAttributeHandler, AttributeStyleHandler, FontHandler, NewLineHandler
from .blocks import HeaderHandler, ListItemHandler, MarginHandler, PreHandler
from .inline import MonoSpaceHandler
from .links import LinkHandler
from .media import ImageHandler


BUILTIN_MODULES = (basic, inline, blocks, links, media)


def register_builtin_handlers(registry: HandlerRegistry) -> HandlerRegistry:
    """Install every built-in handler into ``registry`` and return it."""
    for module in BUILTIN_MODULES:
        registry.collect_from(module)
    return registry


__all__ = [
    "BUILTIN_MODULES",
    "AlignmentAttributeHandler",
    "AttributeStyleHandler",
    "FontHandler",
    "HeaderHandler",
    "ImageHandler",
    "LinkHandler",
    "ListItemHandler",
    "MarginHandler",
    "MonoSpaceHandler",
    "NewLineHandler",
    "PreHandler",
    "StyleHandler",
    "TagNodeHandler",
    "WrappingStyleHandler",
    "register_builtin_handlers",
]
