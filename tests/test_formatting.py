import pytest

from htmlspanner import HtmlSpanner, SpannerConfig
from htmlspanner.core.style import FontFamily, TextAlignment, VerticalAlignment
from htmlspanner.core.text import Annotation, AnnotationKind, Font


DEFAULT = FontFamily("default")


def test_strong_tag_is_bold(spanner: HtmlSpanner) -> None:
    result = spanner.from_html("<strong>Important</strong>")

    assert result.text == "Important"
    assert result.annotations == (
        Annotation(AnnotationKind.FONT, 0, 9, Font(DEFAULT, bold=True)),
    )


@pytest.mark.parametrize("tag", ["i", "em", "cite", "dfn"])
def test_italic_tags(spanner: HtmlSpanner, tag: str) -> None:
    result = spanner.from_html(f"<{tag}>word</{tag}>")
    assert result.annotations == (
        Annotation(AnnotationKind.FONT, 0, 4, Font(DEFAULT, italic=True)),
    )


def test_nested_bold_and_italic_combine(spanner: HtmlSpanner) -> None:
    result = spanner.from_html("<i><b>x</b></i>")

    assert result.annotations == (
        Annotation(AnnotationKind.FONT, 0, 1, Font(DEFAULT, bold=True, italic=True)),
    )


def test_removing_one_level_keeps_the_other(spanner: HtmlSpanner) -> None:
    italic_only = spanner.from_html("<i>x</i>")
    bold_only = spanner.from_html("<b>x</b>")

    assert italic_only.value_at(AnnotationKind.FONT, 0) == Font(DEFAULT, italic=True)
    assert bold_only.value_at(AnnotationKind.FONT, 0) == Font(DEFAULT, bold=True)


def test_nested_strong_inside_emphasis(spanner: HtmlSpanner) -> None:
    result = spanner.from_html("<em>Very <strong>important</strong></em>")

    assert result.text == "Very important"
    assert result.annotations_of(AnnotationKind.FONT) == [
        Annotation(AnnotationKind.FONT, 0, 4, Font(DEFAULT, italic=True)),
        Annotation(AnnotationKind.FONT, 4, 14, Font(DEFAULT, bold=True, italic=True)),
    ]


def test_big_and_small_sizes(spanner: HtmlSpanner) -> None:
    result = spanner.from_html("<big>A</big> and <small>B</small>")

    assert result.text == "A and B"
    assert result.value_at(AnnotationKind.RELATIVE_SIZE, 0) == pytest.approx(1.25)
    assert result.value_at(AnnotationKind.RELATIVE_SIZE, 2) is None
    assert result.value_at(AnnotationKind.RELATIVE_SIZE, 6) == pytest.approx(0.8)


def test_superscript_and_subscript(spanner: HtmlSpanner) -> None:
    result = spanner.from_html("x<sup>2</sup> and H<sub>2</sub>")

    assert result.value_at(AnnotationKind.VERTICAL_ALIGNMENT, result.text.index("2")) is (
        VerticalAlignment.SUPER
    )
    assert result.value_at(AnnotationKind.VERTICAL_ALIGNMENT, len(result.text) - 1) is (
        VerticalAlignment.SUB
    )


@pytest.mark.parametrize("tag", ["tt", "code", "kbd", "samp"])
def test_monospace_tags_use_configured_family(tag: str) -> None:
    spanner = HtmlSpanner(config=SpannerConfig(monospace_font="Courier"), parser="html.parser")

    result = spanner.from_html(f"<{tag}>print()</{tag}>")

    assert result.annotations == (
        Annotation(AnnotationKind.FONT, 0, 7, Font(FontFamily("Courier"))),
    )


def test_center_tag(spanner: HtmlSpanner) -> None:
    result = spanner.from_html("<center>x</center>")
    assert result.annotations == (
        Annotation(AnnotationKind.ALIGNMENT, 0, 1, TextAlignment.CENTER),
    )


def test_unknown_tags_are_transparent(spanner: HtmlSpanner) -> None:
    result = spanner.from_html("<u>under</u> <blink>line</blink>")

    assert result.text == "under line"
    assert result.annotations == ()


def test_span_style_attribute(spanner: HtmlSpanner) -> None:
    result = spanner.from_html(
        '<span style="color: #ff0000; background-color: #00ff00; font-weight: bold">x</span>'
    )

    assert result.value_at(AnnotationKind.COLOR, 0) == 0xFFFF0000
    assert result.value_at(AnnotationKind.BACKGROUND_COLOR, 0) == 0xFF00FF00
    assert result.value_at(AnnotationKind.FONT, 0) == Font(DEFAULT, bold=True)


def test_inner_colour_wins(spanner: HtmlSpanner) -> None:
    result = spanner.from_html(
        '<span style="color: red">a <span style="color: blue">b</span> c</span>'
    )

    assert result.text == "a b c"
    assert result.annotations_of(AnnotationKind.COLOR) == [
        Annotation(AnnotationKind.COLOR, 0, 1, 0xFFFF0000),
        Annotation(AnnotationKind.COLOR, 1, 3, 0xFF0000FF),
        Annotation(AnnotationKind.COLOR, 3, 5, 0xFFFF0000),
    ]


def test_child_weight_overrides_ancestor(spanner: HtmlSpanner) -> None:
    result = spanner.from_html('<b>A <span style="font-weight: normal">b</span> C</b>')

    assert result.annotations_of(AnnotationKind.FONT) == [
        Annotation(AnnotationKind.FONT, 0, 1, Font(DEFAULT, bold=True)),
        Annotation(AnnotationKind.FONT, 1, 3, Font(DEFAULT)),
        Annotation(AnnotationKind.FONT, 3, 5, Font(DEFAULT, bold=True)),
    ]


def test_font_tag_attributes(spanner: HtmlSpanner) -> None:
    result = spanner.from_html('<font face="serif" size="5" color="#00ff00">x</font>')

    assert result.annotations == (
        Annotation(AnnotationKind.FONT, 0, 1, Font(spanner.config.serif_font)),
        Annotation(AnnotationKind.RELATIVE_SIZE, 0, 1, 1.4),
        Annotation(AnnotationKind.COLOR, 0, 1, 0xFF00FF00),
    )


def test_font_tag_with_unparseable_size(spanner: HtmlSpanner) -> None:
    result = spanner.from_html('<font size="xl">big</font>')

    assert result.text == "big"
    assert result.annotations == (Annotation(AnnotationKind.RELATIVE_SIZE, 0, 3, 1.0),)


def test_signed_font_size_is_relative_to_base_level(spanner: HtmlSpanner) -> None:
    bigger = spanner.from_html('<font size="+1">x</font>')
    smaller = spanner.from_html('<font size="-2">x</font>')

    assert bigger.value_at(AnnotationKind.RELATIVE_SIZE, 0) == pytest.approx(1.2)
    assert smaller.value_at(AnnotationKind.RELATIVE_SIZE, 0) == pytest.approx(0.6)


def test_extended_css_colour_names(spanner: HtmlSpanner) -> None:
    result = spanner.from_html(
        '<font color="violet">a</font><span style="color: darkblue">b</span>'
    )

    assert result.value_at(AnnotationKind.COLOR, 0) == 0xFFEE82EE
    assert result.value_at(AnnotationKind.COLOR, 2) == 0xFF00008B


def test_font_style_attribute_overrides_size(spanner: HtmlSpanner) -> None:
    result = spanner.from_html('<font size="7" style="font-size: 0.5em">x</font>')
    assert result.value_at(AnnotationKind.RELATIVE_SIZE, 0) == pytest.approx(0.5)


def test_conversion_is_deterministic(spanner: HtmlSpanner) -> None:
    html = "<h2>Title</h2><p>Some <b>bold</b> and <a href='/x'>linked</a> text</p>"
    assert spanner.from_html(html) == spanner.from_html(html)
