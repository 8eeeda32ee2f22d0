"""Command-line entry point and the terminal event loop."""

from __future__ import annotations

import argparse
import re
import sys
from typing import List, Optional

import blessed

from floxdbg.app import App
from floxdbg.canvas import Canvas
from floxdbg.events import Shell
from floxdbg.keybindings import KeyCode, KeyEvent, Modifiers
from floxdbg.trace import StackTraceError
from floxdbg.ui.draw import draw_ui

_NAMED_KEYS = {
    "KEY_BACKSPACE": KeyCode.BACKSPACE,
    "KEY_ENTER": KeyCode.ENTER,
    "KEY_LEFT": KeyCode.LEFT,
    "KEY_RIGHT": KeyCode.RIGHT,
    "KEY_UP": KeyCode.UP,
    "KEY_DOWN": KeyCode.DOWN,
    "KEY_HOME": KeyCode.HOME,
    "KEY_END": KeyCode.END,
    "KEY_PGUP": KeyCode.PAGE_UP,
    "KEY_PGDOWN": KeyCode.PAGE_DOWN,
    "KEY_TAB": KeyCode.TAB,
    "KEY_BTAB": KeyCode.BACK_TAB,
    "KEY_DELETE": KeyCode.DELETE,
    "KEY_INSERT": KeyCode.INSERT,
    "KEY_ESCAPE": KeyCode.ESC,
}

_RAW_KEYS = {
    "\t": KeyCode.TAB,
    "\r": KeyCode.ENTER,
    "\n": KeyCode.ENTER,
    "\x1b": KeyCode.ESC,
    "\x7f": KeyCode.BACKSPACE,
    "\x08": KeyCode.BACKSPACE,
}

_FUNCTION_KEY = re.compile(r"KEY_F(\d+)")


def _shell(value: str) -> Shell:
    try:
        return Shell.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse the command line; exits with a usage message on bad input."""
    parser = argparse.ArgumentParser(prog="flox-debugger")
    parser.add_argument(
        "--shell",
        required=True,
        type=_shell,
        help="Which shell the debugger was invoked from",
    )
    parser.add_argument(
        "--tracepoint",
        default=None,
        help="The name of the tracepoint the debugger paused at",
    )
    parser.add_argument(
        "--call-stack",
        dest="call_stack",
        default=None,
        help="A call stack of shell execution",
    )
    return parser.parse_args(argv)


def translate_key(keystroke) -> Optional[KeyEvent]:
    """Turn a terminal keystroke into a key event, or None if it has no meaning."""
    name = getattr(keystroke, "name", None)
    if name:
        if name in _NAMED_KEYS:
            return KeyEvent(_NAMED_KEYS[name])
        match = _FUNCTION_KEY.fullmatch(name)
        if match:
            return KeyEvent(KeyCode.F, int(match.group(1)))
        return None

    text = str(keystroke)
    if len(text) != 1:
        return None
    if text in _RAW_KEYS:
        return KeyEvent(_RAW_KEYS[text])
    code = ord(text)
    if 1 <= code <= 26:
        return KeyEvent.char(chr(code + 96), Modifiers.CONTROL)
    if code < 32:
        return None
    if text.isupper():
        return KeyEvent.char(text, Modifiers.SHIFT)
    return KeyEvent.char(text)


def run_app(app: App, term) -> None:
    """Draw and react to key presses until the user confirms exiting."""
    while True:
        canvas = Canvas(term.width, term.height)
        draw_ui(app, canvas)
        term.stream.write(term.home + canvas.to_ansi())
        term.stream.flush()

        key = translate_key(term.inkey())
        if key is None:
            continue
        keymap = app.key_bindings.current_keymap(app.screen, app.exit_state)
        event = keymap.get(key)
        if event is not None and app.handle_event(event):
            return


def main(argv: Optional[List[str]] = None) -> int:
    """Run the debugger, then print the commands the shell should source."""
    args = parse_args(argv)
    try:
        app = App.from_args(args.shell, args.tracepoint, args.call_stack)
    except StackTraceError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    # The interface goes to stderr; stdout carries the commands to source.
    term = blessed.Terminal(stream=sys.stderr)
    try:
        with term.fullscreen(), term.cbreak(), term.hidden_cursor():
            run_app(app, term)
    except KeyboardInterrupt:
        return 130
    app.write_output()
    return 0


if __name__ == "__main__":
    sys.exit(main())