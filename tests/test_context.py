from bs4 import BeautifulSoup

from htmlspanner.core.config import SpannerConfig
from htmlspanner.core.context import RenderContext
from htmlspanner.core.rules import HandlerRegistry

from .conftest import RecordingEmitter


def _context(**config: object) -> RenderContext:
    return RenderContext(config=SpannerConfig(**config), registry=HandlerRegistry())


def test_ensure_line_start_skips_empty_and_fresh_lines() -> None:
    context = _context()
    context.ensure_line_start()
    assert context.buffer.getvalue() == ""

    context.append("a")
    context.ensure_line_start()
    context.ensure_line_start()
    assert context.buffer.getvalue() == "a\n"


def test_append_separator() -> None:
    context = _context()
    context.append_separator()
    context.append("a")
    context.append_separator()
    context.append_separator()
    assert context.buffer.getvalue() == "a "


def test_append_newline_caps_only_when_stripping() -> None:
    loose = _context()
    strict = _context(strip_extra_whitespace=True)
    for context in (loose, strict):
        context.append("a")
        for _ in range(4):
            context.append_newline()

    assert loose.buffer.getvalue() == "a\n\n\n\n"
    assert strict.buffer.getvalue() == "a\n\n"


def test_invalid_attributes_are_reported_once_per_node() -> None:
    soup = BeautifulSoup('<font size="x">a</font><font size="y">b</font>', "html.parser")
    first, second = soup.find_all("font")
    emitter = RecordingEmitter()
    context = RenderContext(
        config=SpannerConfig(), registry=HandlerRegistry(), emitter=emitter
    )

    context.report_invalid_attribute(first, "size", "x")
    context.report_invalid_attribute(first, "size", "x")
    context.report_invalid_attribute(second, "size", "y")

    assert [payload["value"] for _, payload in emitter.events] == ["x", "y"]
