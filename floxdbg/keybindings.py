"""Key events and the key bindings of each screen."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

from floxdbg.events import (
    AppEvent,
    Event,
    ExitModal,
    ExitState,
    NavEvent,
    Screen,
    VarsEvent,
)


class KeyCode(enum.Enum):
    """Keys that can be pressed."""

    BACKSPACE = enum.auto()
    ENTER = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    HOME = enum.auto()
    END = enum.auto()
    PAGE_UP = enum.auto()
    PAGE_DOWN = enum.auto()
    TAB = enum.auto()
    BACK_TAB = enum.auto()
    DELETE = enum.auto()
    INSERT = enum.auto()
    ESC = enum.auto()
    F = enum.auto()
    CHAR = enum.auto()


class Modifiers(enum.Flag):
    """Modifier keys held during a key press."""

    NONE = 0
    SHIFT = enum.auto()
    CONTROL = enum.auto()
    ALT = enum.auto()
    SUPER = enum.auto()


_KEY_NAMES = {
    KeyCode.BACKSPACE: "Backspace",
    KeyCode.ENTER: "Enter",
    KeyCode.LEFT: "←",
    KeyCode.RIGHT: "→",
    KeyCode.UP: "↑",
    KeyCode.DOWN: "↓",
    KeyCode.HOME: "Home",
    KeyCode.END: "End",
    KeyCode.PAGE_UP: "PgUp",
    KeyCode.PAGE_DOWN: "PgDown",
    KeyCode.TAB: "Tab",
    KeyCode.BACK_TAB: "⇧+Tab",
    KeyCode.DELETE: "Del",
    KeyCode.ESC: "Esc",
}

_MODIFIER_NAMES = (
    (Modifiers.SHIFT, "⇧"),
    (Modifiers.CONTROL, "Ctrl"),
    (Modifiers.ALT, "Alt"),
    (Modifiers.SUPER, "Super"),
)


@dataclass(frozen=True)
class KeyEvent:
    """A key press; value holds the character or the function key number."""

    code: KeyCode
    value: Optional[Union[str, int]] = None
    modifiers: Modifiers = Modifiers.NONE

    @classmethod
    def char(cls, c: str, modifiers: Modifiers = Modifiers.NONE) -> "KeyEvent":
        """A press of a character key."""
        return cls(KeyCode.CHAR, c, modifiers)

    def display_key_combo(self) -> str:
        """A user-facing representation of the key combination."""
        parts = [name for flag, name in _MODIFIER_NAMES if flag in self.modifiers]
        if self.code is KeyCode.F:
            key = f"F{self.value}"
        elif self.code is KeyCode.CHAR:
            key = str(self.value).upper()
        else:
            key = _KEY_NAMES.get(self.code, "")
        parts.append(key)
        return "+".join(parts)


Displayable = List[Tuple[str, str]]


def _key(code: KeyCode) -> KeyEvent:
    return KeyEvent(code)


@dataclass(frozen=True)
class GlobalKeyBindings:
    """Bindings available on every screen."""

    exit: KeyEvent = KeyEvent.char("q")
    next_tab: KeyEvent = _key(KeyCode.TAB)

    def displayable(self) -> Displayable:
        return [
            (self.exit.display_key_combo(), "Exit"),
            (self.next_tab.display_key_combo(), "Next Tab"),
        ]


@dataclass(frozen=True)
class HomeKeyBindings:
    """Bindings of the home screen."""

    def displayable(self) -> Displayable:
        return []


@dataclass(frozen=True)
class PromptKeyBindings:
    """Bindings of the prompt screen."""

    def displayable(self) -> Displayable:
        return []


@dataclass(frozen=True)
class VarsKeyBindings:
    """Bindings of the variables screen."""

    next_var: KeyEvent = _key(KeyCode.DOWN)
    previous_var: KeyEvent = _key(KeyCode.UP)
    focus_var_list: KeyEvent = _key(KeyCode.LEFT)
    focus_var_detail: KeyEvent = _key(KeyCode.RIGHT)
    raw_detail: KeyEvent = KeyEvent.char("r")
    split_detail: KeyEvent = KeyEvent.char("s")

    def displayable(self) -> Displayable:
        return [("↑↓←→", "Nav")]


@dataclass(frozen=True)
class TraceKeyBindings:
    """Bindings of the trace screen."""

    next_frame: KeyEvent = _key(KeyCode.DOWN)
    previous_frame: KeyEvent = _key(KeyCode.UP)

    def displayable(self) -> Displayable:
        return [("↑↓", "Nav")]


@dataclass(frozen=True)
class OutputKeyBindings:
    """Bindings of the output screen."""

    def displayable(self) -> Displayable:
        return []


ScreenBindings = Union[
    HomeKeyBindings,
    PromptKeyBindings,
    VarsKeyBindings,
    TraceKeyBindings,
    OutputKeyBindings,
]


@dataclass(frozen=True)
class KeyBindings:
    """The complete set of configured key bindings."""

    global_: GlobalKeyBindings = field(default_factory=GlobalKeyBindings)
    home: HomeKeyBindings = field(default_factory=HomeKeyBindings)
    prompt: PromptKeyBindings = field(default_factory=PromptKeyBindings)
    vars: VarsKeyBindings = field(default_factory=VarsKeyBindings)
    trace: TraceKeyBindings = field(default_factory=TraceKeyBindings)
    output: OutputKeyBindings = field(default_factory=OutputKeyBindings)

    def screen_bindings(self, screen: Screen) -> ScreenBindings:
        """The bindings specific to a screen."""
        return {
            Screen.HOME: self.home,
            Screen.PROMPT: self.prompt,
            Screen.VARS: self.vars,
            Screen.TRACE: self.trace,
            Screen.OUTPUT: self.output,
        }[screen]

    def current_keymap(
        self, screen: Screen, exit_state: ExitState
    ) -> Dict[KeyEvent, Event]:
        """Map key presses to events for the current screen and exit state."""
        if isinstance(exit_state, ExitModal):
            # Only modal navigation works while the exit modal is shown.
            return {
                _key(KeyCode.LEFT): NavEvent.LEFT,
                _key(KeyCode.RIGHT): NavEvent.RIGHT,
                _key(KeyCode.ENTER): NavEvent.SELECT,
            }

        keymap: Dict[KeyEvent, Event] = {
            self.global_.exit: AppEvent.EXIT_REQUESTED,
            self.global_.next_tab: AppEvent.NEXT_TAB,
        }
        if screen is Screen.VARS:
            v = self.vars
            keymap.update(
                {
                    v.next_var: NavEvent.DOWN,
                    v.previous_var: NavEvent.UP,
                    v.focus_var_list: NavEvent.LEFT,
                    v.focus_var_detail: NavEvent.RIGHT,
                    v.raw_detail: VarsEvent.RAW_DETAIL,
                    v.split_detail: VarsEvent.SPLIT_DETAIL,
                }
            )
        elif screen is Screen.TRACE:
            t = self.trace
            keymap.update(
                {
                    t.next_frame: NavEvent.DOWN,
                    t.previous_frame: NavEvent.UP,
                }
            )
        return keymap