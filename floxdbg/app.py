"""Application state and event handling of the debugger."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from typing import Mapping, Optional, TextIO

from floxdbg.events import (
    AppEvent,
    Event,
    ExitModal,
    ExitOption,
    ExitState,
    NavEvent,
    Screen,
    Shell,
)
from floxdbg.keybindings import KeyBindings
from floxdbg.theme import Theme
from floxdbg.trace import StackTraceError, TraceState, load_call_stack
from floxdbg.vars import Env

TRACEPOINT_VAR_NAME = "FLOX_DBG_TRACEPOINT"


def initial_output(shell: Shell, tracepoint_var_value: str) -> str:
    """Commands to source on exit, given the tracepoint variable's value."""
    if tracepoint_var_value in ("all", ""):
        return ""
    if shell is Shell.FISH:
        return f"set -e {TRACEPOINT_VAR_NAME}\n"
    return f"unset {TRACEPOINT_VAR_NAME}\n"


@dataclass
class App:
    """The whole state of the debugger."""

    shell: Shell
    env: Env
    trace: TraceState = field(default_factory=TraceState)
    screen: Screen = Screen.HOME
    output: str = ""
    theme: Theme = field(default_factory=Theme)
    key_bindings: KeyBindings = field(default_factory=KeyBindings)
    exit_state: ExitState = None

    @classmethod
    def from_args(
        cls,
        shell: Shell,
        tracepoint: Optional[str] = None,
        call_stack: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "App":
        """Build the application from command-line values and an environment."""
        if environ is None:
            environ = os.environ
        stack = None
        if call_stack is not None:
            try:
                stack = load_call_stack(call_stack, shell)
            except StackTraceError as exc:
                raise StackTraceError(f"failed to load call stack: {exc}") from exc
        return cls(
            shell=shell,
            env=Env.from_environ(environ),
            trace=TraceState(tracepoint, stack),
            output=initial_output(shell, environ.get(TRACEPOINT_VAR_NAME, "")),
        )

    def next_tab(self) -> None:
        """Switch to the next tab."""
        self.screen = self.screen.next_tab()

    def is_displaying_exit_modal(self) -> bool:
        """Whether the exit confirmation modal is shown."""
        return isinstance(self.exit_state, ExitModal)

    def handle_event(self, event: Event) -> bool:
        """Update the state for an event; True means the application should exit."""
        if isinstance(self.exit_state, ExitModal):
            return self._handle_exit_modal(self.exit_state, event)
        if event is AppEvent.EXIT_REQUESTED:
            self.exit_state = ExitModal(ExitOption.CANCEL)
        elif event is AppEvent.NEXT_TAB:
            self.next_tab()
        elif self.screen is Screen.VARS:
            self.env.handle_event(event)
        elif self.screen is Screen.TRACE:
            self.trace.handle_event(event)
        return False

    def _handle_exit_modal(self, modal: ExitModal, event: Event) -> bool:
        if event in (NavEvent.LEFT, NavEvent.RIGHT):
            modal.highlighted_option = modal.highlighted_option.toggled()
        elif event is NavEvent.SELECT:
            self.exit_state = None
            return modal.highlighted_option is ExitOption.OK
        return False

    def write_output(self, stream: Optional[TextIO] = None) -> None:
        """Write the commands the shell should source after the debugger exits."""
        (sys.stdout if stream is None else stream).write(self.output)