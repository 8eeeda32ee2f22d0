import pytest

from floxdbg.theme import Style, Theme


def test_plain_style_has_no_escape():
    assert Style().sgr() == ""


def test_purple_uses_truecolor():
    assert Theme().flox_purple.sgr() == "\x1b[38;2;175;135;255m"


def test_dim_style():
    theme = Theme()
    assert theme.fg_dim.dim
    assert theme.fg_dim.sgr() == "\x1b[2m"


def test_default_fg_is_plain():
    assert Theme().fg == Style()


def test_selected_tab_style():
    tab = Theme().selected_tab
    assert (tab.fg, tab.bold, tab.underlined) == ("white", True, True)
    assert tab.sgr().startswith("\x1b[")
    assert tab.sgr().endswith("m")


def test_highlighted_text_inverts_colors():
    hl = Theme().highlighted_text
    assert (hl.fg, hl.bg) == ("black", "white")


def test_background_and_foreground_codes_differ():
    assert Style(fg="white").sgr() != Style(bg="white").sgr()
    assert Style(fg=(1, 2, 3)).sgr().replace("38;", "48;", 1) == Style(bg=(1, 2, 3)).sgr()


def test_unknown_color_rejected():
    with pytest.raises(ValueError, match="unknown color"):
        Style(fg="chartreuse").sgr()