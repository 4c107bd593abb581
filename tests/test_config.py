import pytest
from pydantic import ValidationError

from htmlspanner.core.config import SpannerConfig
from htmlspanner.core.style import FontFamily


def test_defaults() -> None:
    config = SpannerConfig()

    assert config.default_font == FontFamily("default")
    assert config.monospace_font == FontFamily("monospace")
    assert config.strip_extra_whitespace is False
    assert config.prune_tags == ("script", "style", "title")


def test_strings_are_coerced_to_font_families() -> None:
    config = SpannerConfig(default_font="Helvetica", serif_font=FontFamily("Times", handle=1))

    assert config.default_font == FontFamily("Helvetica")
    assert config.serif_font.handle == 1


def test_prune_tags_are_normalised() -> None:
    assert SpannerConfig(prune_tags="Script, STYLE").prune_tags == ("script", "style")
    assert SpannerConfig(prune_tags=["nav", "nav", " aside "]).prune_tags == ("aside", "nav")
    assert SpannerConfig(prune_tags=()).prune_tags == ()


def test_config_is_frozen() -> None:
    config = SpannerConfig()
    with pytest.raises(ValidationError):
        config.strip_extra_whitespace = True  # type: ignore[misc]

    updated = config.model_copy(update={"strip_extra_whitespace": True})
    assert updated.strip_extra_whitespace is True
    assert config.strip_extra_whitespace is False


def test_unknown_fields_are_rejected() -> None:
    with pytest.raises(ValidationError):
        SpannerConfig(bogus=True)  # type: ignore[call-arg]


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("serif", FontFamily("Georgia")),
        ("Sans-Serif", FontFamily("sans-serif")),
        ("monospace", FontFamily("monospace")),
        ("'Fira Code', monospace", FontFamily("Fira Code")),
        ("  ", FontFamily("default")),
    ],
)
def test_font_for(name: str, expected: FontFamily) -> None:
    config = SpannerConfig(serif_font="Georgia")
    assert config.font_for(name) == expected
