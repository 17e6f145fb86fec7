import pytest

from oranda.themes import DEFAULT_ORANDA_THEME, OrandaTheme, SyntaxTheme


def test_parse_lowercase_and_alias():
    assert OrandaTheme.parse("axolight") is OrandaTheme.AXO_LIGHT
    assert OrandaTheme.parse("axo_light") is OrandaTheme.AXO_LIGHT
    assert OrandaTheme.parse("axo_dark") is OrandaTheme.AXO_DARK
    assert OrandaTheme.parse("cupcake") is OrandaTheme.CUPCAKE


def test_parse_rejects_unknown():
    with pytest.raises(ValueError):
        OrandaTheme.parse("Cupcake")


def test_css_classes():
    assert OrandaTheme.AXO_DARK.as_css_classes() == "dark axo"
    assert OrandaTheme.AXO_LIGHT.as_css_classes() == "axo"
    assert OrandaTheme.CUPCAKE.as_css_classes() == "cupcake"


def test_every_theme_round_trips():
    for theme in OrandaTheme:
        assert OrandaTheme.parse(theme.value) is theme
        assert theme.as_css_classes()


def test_default_is_dark():
    assert OrandaTheme.parse("dark") is DEFAULT_ORANDA_THEME
    assert DEFAULT_ORANDA_THEME.as_css_classes() == "dark"


def test_syntax_theme_parse_and_str():
    theme = SyntaxTheme.parse("MaterialTheme")
    assert theme is SyntaxTheme.MaterialTheme
    assert str(theme) == "MaterialTheme"
    with pytest.raises(ValueError):
        SyntaxTheme.parse("materialtheme")