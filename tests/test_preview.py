from rich.text import Text

from htmlspanner import HtmlSpanner, to_rich_text
from htmlspanner.adapters.preview import rich_style_for
from htmlspanner.core.text import AnnotatedText, Annotation, AnnotationKind


def _spans(text: Text) -> dict[tuple[int, int], list[object]]:
    spans: dict[tuple[int, int], list[object]] = {}
    for span in text.spans:
        spans.setdefault((span.start, span.end), []).append(span.style)
    return spans


def test_bold_and_link_are_exported(spanner: HtmlSpanner) -> None:
    text = to_rich_text(spanner.from_html('<b>x</b><a href="https://example.com">y</a>'))

    assert text.plain == "x y"
    spans = _spans(text)
    assert any(style.bold for style in spans[(0, 1)])
    assert any(style.link == "https://example.com" for style in spans[(1, 3)])


def test_colours_are_exported(spanner: HtmlSpanner) -> None:
    text = to_rich_text(
        spanner.from_html('<span style="color: #ff0000; background-color: #0000ff">r</span>')
    )

    styles = _spans(text)[(0, 1)]
    assert any(style.color and style.color.get_truecolor() == (255, 0, 0) for style in styles)
    assert any(
        style.bgcolor and style.bgcolor.get_truecolor() == (0, 0, 255) for style in styles
    )


def test_layout_categories_have_no_terminal_style() -> None:
    assert rich_style_for(Annotation(AnnotationKind.RELATIVE_SIZE, 0, 1, 1.5)) is None
    assert rich_style_for(Annotation(AnnotationKind.MARGIN_LEFT, 0, 1, 2.0)) is None
    assert rich_style_for(Annotation(AnnotationKind.COLOR, 0, 1, 0)) is None


def test_plain_font_has_no_style(spanner: HtmlSpanner) -> None:
    text = to_rich_text(spanner.from_html("<code>x</code>"))
    assert text.spans == []


def test_empty_text_exports_empty_rich_text() -> None:
    assert to_rich_text(AnnotatedText("")).plain == ""
