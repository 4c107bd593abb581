from __future__ import annotations

import io

import pytest

from htmlspanner import HtmlSpanner
from htmlspanner.adapters.handlers import TagNodeHandler
from htmlspanner.core.exceptions import (
    HtmlReadError,
    InvalidNodeError,
    SpannerError,
    SpanRenderingError,
    exception_hint,
    exception_messages,
    format_rendering_error,
)

from .conftest import RecordingEmitter


class BrokenStream:
    def read(self) -> str:
        raise OSError("disk unplugged")


class NumberStream:
    def read(self) -> int:
        return 42


class ExplodingHandler(TagNodeHandler):
    def handle(self, node, context, start, end) -> None:  # type: ignore[no-untyped-def]
        raise RuntimeError("kaboom")


class RejectingHandler(TagNodeHandler):
    def handle(self, node, context, start, end) -> None:  # type: ignore[no-untyped-def]
        raise InvalidNodeError("unsupported blink")


def test_text_and_binary_streams_are_read(spanner: HtmlSpanner) -> None:
    assert spanner.from_html(io.StringIO("<b>x</b>")).text == "x"
    assert spanner.from_html(io.BytesIO(b"<i>bytes</i>")).text == "bytes"
    assert spanner.from_html(b"<p>bytes</p>").text == "bytes\n\n"


def test_read_failure_raises_html_read_error(spanner: HtmlSpanner) -> None:
    with pytest.raises(HtmlReadError) as excinfo:
        spanner.from_html(BrokenStream())  # type: ignore[arg-type]
    assert isinstance(excinfo.value.__cause__, OSError)


def test_stream_returning_non_text_is_rejected(spanner: HtmlSpanner) -> None:
    with pytest.raises(HtmlReadError, match="returned int"):
        spanner.from_html(NumberStream())  # type: ignore[arg-type]


def test_unreadable_source_type(spanner: HtmlSpanner) -> None:
    with pytest.raises(TypeError):
        spanner.from_html(42)  # type: ignore[arg-type]


def test_from_tag_rejects_non_nodes(spanner: HtmlSpanner) -> None:
    with pytest.raises(InvalidNodeError):
        spanner.from_tag("<b>x</b>")  # type: ignore[arg-type]


def test_from_tag_accepts_parsed_fragment(spanner: HtmlSpanner) -> None:
    soup = spanner.parse("<div><b>skip</b><p>keep</p></div>")
    assert spanner.from_tag(soup.find("p")).text == "keep\n\n"


def test_handler_failure_is_wrapped(spanner: HtmlSpanner, emitter: RecordingEmitter) -> None:
    spanner.register_handler("blink", ExplodingHandler())

    with pytest.raises(SpanRenderingError) as excinfo:
        spanner.from_html("<blink>x</blink>", emitter=emitter)

    assert str(excinfo.value) == "HTML span rendering failed: kaboom"
    assert isinstance(excinfo.value.__cause__, RuntimeError)
    assert emitter.errors[0][0] == "HTML span rendering failed: kaboom"


def test_spanner_errors_propagate_unchanged(spanner: HtmlSpanner) -> None:
    spanner.register_handler("blink", RejectingHandler())

    with pytest.raises(InvalidNodeError, match="unsupported blink"):
        spanner.from_html("<blink>x</blink>")


def test_exception_hierarchy() -> None:
    for error in (HtmlReadError, SpanRenderingError, InvalidNodeError):
        assert issubclass(error, SpannerError)
    assert issubclass(SpannerError, RuntimeError)


def _nested_failure() -> SpanRenderingError:
    try:
        try:
            raise ValueError("bad offset.\nsecond line")
        except ValueError as exc:
            raise SpanRenderingError("walk failed") from exc
    except SpanRenderingError as error:
        return error
    raise AssertionError("unreachable")


def test_exception_helpers_follow_the_chain() -> None:
    error = _nested_failure()

    assert exception_messages(error) == ["walk failed", "bad offset."]
    assert exception_hint(error) == "bad offset."
    assert format_rendering_error(error) == "HTML span rendering failed: bad offset"
    assert exception_hint(RuntimeError()) is None
    assert format_rendering_error(RuntimeError()) == "HTML span rendering failed"
