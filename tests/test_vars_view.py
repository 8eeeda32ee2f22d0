import os

from floxdbg.app import App
from floxdbg.canvas import Canvas
from floxdbg.events import NavEvent, Shell, VarsEvent
from floxdbg.ui.vars_view import detail_title, render_vars_screen
from floxdbg.vars import Env, SplitDetail

PATH_VALUE = os.pathsep.join(["/a", "/b"])


def _text(spans):
    return "".join(s if isinstance(s, str) else s[0] for s in spans)


def _underlined(spans):
    return [s[0] for s in spans if not isinstance(s, str) and s[1].underlined]


def test_raw_title():
    spans = detail_title(None)
    assert _text(spans) == " Raw / Split "
    assert _underlined(spans) == ["Raw", "S"]


def test_split_title():
    spans = detail_title(SplitDetail.from_items(["x"]))
    assert _text(spans) == detail_title(None) and False or _text(spans) == " Raw / Split "
    assert _underlined(spans) == ["R", "Split"]


def _app(names=("HOME", "PATH"), values=("/home/user", PATH_VALUE)):
    return App(shell=Shell.BASH, env=Env(list(names), list(values)))


def _render(app):
    canvas = Canvas(100, 30)
    render_vars_screen(app, canvas, canvas.area)
    return canvas


def _rows_text(canvas):
    return "\n".join(canvas.rows())


def test_list_and_selected_value_are_shown():
    text = _rows_text(_render(_app()))
    assert " Variables " in text
    assert "HOME" in text
    assert "PATH" in text
    assert " Name " in text
    assert "/home/user" in text


def test_split_view_shows_entries():
    app = _app()
    app.env.handle_event(NavEvent.DOWN)
    app.env.handle_event(VarsEvent.SPLIT_DETAIL)
    text = _rows_text(_render(app))
    assert " Selected " in text
    rows = text.split("\n")
    assert any(row.rstrip().endswith("/b │") or "/b" in row for row in rows)
    assert app.env.selected_detail_item() == "/a"


def test_empty_environment_reports_no_selection():
    text = _rows_text(_render(_app(names=(), values=())))
    assert "<No variable selected>" in text


def test_focused_list_has_purple_border():
    app = _app()
    purple = app.theme.flox_purple.sgr()
    assert _render(app).to_ansi().startswith(purple + "┌")
    app.env.handle_event(NavEvent.RIGHT)
    assert not _render(app).to_ansi().startswith(purple)