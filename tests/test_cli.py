import io

import pytest
from blessed.keyboard import Keystroke

from floxdbg.app import App
from floxdbg.cli import main, parse_args, run_app, translate_key
from floxdbg.events import Screen, Shell
from floxdbg.keybindings import KeyCode, KeyEvent, Modifiers
from floxdbg.vars import Env


class FakeTerminal:
    def __init__(self, keys, width=80, height=24):
        self.width = width
        self.height = height
        self.home = ""
        self.stream = io.StringIO()
        self._keys = list(keys)

    def inkey(self):
        return self._keys.pop(0)


def named(name, sequence="\x1b[X"):
    return Keystroke(sequence, 1, name)


def make_app():
    return App(shell=Shell.BASH, env=Env.from_environ({"HOME": "/home/user"}))


EXIT_KEYS = [Keystroke("q"), named("KEY_LEFT"), named("KEY_ENTER", "\r")]


def test_parse_args_shell_only():
    args = parse_args(["--shell", "bash"])
    assert args.shell is Shell.BASH
    assert args.tracepoint is None
    assert args.call_stack is None


def test_parse_args_all_options():
    args = parse_args(
        ["--shell", "fish", "--tracepoint", "hook", "--call-stack", "a:1:f"]
    )
    assert args.shell is Shell.FISH
    assert args.tracepoint == "hook"
    assert args.call_stack == "a:1:f"


def test_parse_args_requires_shell():
    with pytest.raises(SystemExit):
        parse_args([])


def test_parse_args_rejects_unknown_shell(capsys):
    with pytest.raises(SystemExit):
        parse_args(["--shell", "tcsh"])
    assert "unrecognized shell: tcsh" in capsys.readouterr().err


def test_translate_plain_char():
    assert translate_key(Keystroke("q")) == KeyEvent.char("q")


def test_translate_upper_char_has_shift():
    assert translate_key(Keystroke("Q")) == KeyEvent.char("Q", Modifiers.SHIFT)


def test_translate_control_char():
    assert translate_key(Keystroke("\x03")) == KeyEvent.char("c", Modifiers.CONTROL)


@pytest.mark.parametrize(
    "name, code",
    [
        ("KEY_LEFT", KeyCode.LEFT),
        ("KEY_RIGHT", KeyCode.RIGHT),
        ("KEY_UP", KeyCode.UP),
        ("KEY_DOWN", KeyCode.DOWN),
        ("KEY_TAB", KeyCode.TAB),
        ("KEY_ENTER", KeyCode.ENTER),
        ("KEY_ESCAPE", KeyCode.ESC),
    ],
)
def test_translate_named_keys(name, code):
    assert translate_key(named(name)) == KeyEvent(code)


def test_translate_raw_tab():
    assert translate_key(Keystroke("\t")) == KeyEvent(KeyCode.TAB)


def test_translate_function_key():
    assert translate_key(named("KEY_F5")) == KeyEvent(KeyCode.F, 5)


def test_translate_nothing():
    assert translate_key(Keystroke("")) is None
    assert translate_key(named("KEY_UNKNOWN_THING")) is None


def test_run_app_exits_after_confirmation():
    app = make_app()
    term = FakeTerminal(EXIT_KEYS)
    run_app(app, term)
    assert app.exit_state is None
    assert "Exit?" in term.stream.getvalue()
    assert term._keys == []


def test_run_app_cancel_keeps_running():
    app = make_app()
    keys = [Keystroke("q"), named("KEY_ENTER", "\r"), named("KEY_TAB", "\t")]
    term = FakeTerminal(keys + EXIT_KEYS)
    run_app(app, term)
    assert app.screen is Screen.PROMPT


def test_run_app_ignores_unbound_keys():
    app = make_app()
    term = FakeTerminal([Keystroke("x"), Keystroke("")] + EXIT_KEYS)
    run_app(app, term)
    assert app.screen is Screen.HOME
    assert term._keys == []


def test_main_reports_bad_call_stack(capsys):
    assert main(["--shell", "bash", "--call-stack", "garbage"]) == 1
    captured = capsys.readouterr()
    assert "failed to load call stack" in captured.err
    assert captured.out == ""