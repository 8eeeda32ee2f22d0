"""Parsing shell stack traces and the state of the trace screen."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from floxdbg.events import Event, NavEvent, Shell
from floxdbg.liststate import ListState

_UNSIGNED = re.compile(r"\+?[0-9]+")


class StackTraceError(ValueError):
    """A stack trace could not be parsed."""


@dataclass(frozen=True)
class CallCtx:
    """The call site of a function in the shell's execution trace."""

    file: Path
    line: int
    function: str


@dataclass
class CallFrame:
    """A call site together with the lines of its file, if they could be read."""

    ctx: CallCtx
    lines: Optional[List[str]] = None


@dataclass
class CallStack:
    """The frames of a shell stack trace, innermost first."""

    frames: List[CallFrame] = field(default_factory=list)


@dataclass
class TraceState:
    """The tracepoint, the call stack and which frame is selected."""

    tracepoint: Optional[str] = None
    call_stack: Optional[CallStack] = None
    list_state: Optional[ListState] = field(default=None, init=False)

    def __post_init__(self) -> None:
        if self.call_stack is not None:
            self.list_state = ListState()
            self.list_state.select_first()

    def handle_event(self, event: Event) -> None:
        """Move the frame selection in response to navigation."""
        if self.list_state is None or self.call_stack is None:
            return
        idx = self.list_state.selected
        if idx is None:
            return
        if event is NavEvent.UP and idx > 0:
            self.list_state.select_previous()
        elif event is NavEvent.DOWN and idx < len(self.call_stack.frames) - 1:
            self.list_state.select_next()

    def selected_frame(self) -> Optional[CallFrame]:
        """The highlighted frame, or None when there is none."""
        if self.call_stack is None or self.list_state is None:
            return None
        idx = self.list_state.selected
        if idx is None or idx >= len(self.call_stack.frames):
            return None
        return self.call_stack.frames[idx]


def _parse_line_number(text: str, what: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise StackTraceError(f"failed to parse {what}: {text!r}")
    return int(text)


def _absolute(path: str) -> Path:
    if not path:
        raise StackTraceError("failed to get absolute path of file")
    return Path.cwd() / path


def _nonempty_pieces(text: str, separator: str) -> List[str]:
    return [piece.strip() for piece in text.split(separator) if piece.strip()]


def parse_bash_or_zsh_stack_trace(text: str) -> List[CallCtx]:
    """Parse lines of the form ``<file>:<line>:<function>``."""
    frames = []
    for line in _nonempty_pieces(text, "\n"):
        parts = line.split(":")
        if len(parts) != 3:
            raise StackTraceError("failed to parse stack trace")
        file, number, function = parts
        frames.append(
            CallCtx(
                file=Path(file),
                line=_parse_line_number(number, "line number"),
                function=function,
            )
        )
    return frames


def parse_fish_stack_trace(text: str) -> List[CallCtx]:
    """Parse the fish stack trace format with newlines replaced by ';'."""
    lines = _nonempty_pieces(text, ";")
    if len(lines) % 2:
        raise StackTraceError("uneven number of lines in fish stack trace")
    frames = []
    for func_line, callsite_line in zip(lines[::2], lines[1::2]):
        quoted = func_line.split("'")
        if len(quoted) < 2:
            raise StackTraceError("failed to extract function name")
        words = callsite_line.split(" ")
        if len(words) < 4:
            raise StackTraceError("failed to extract line number")
        number = _parse_line_number(words[3], "line number")
        if len(words) < 7:
            raise StackTraceError("failed to extract file path")
        frames.append(
            CallCtx(file=_absolute(words[6]), line=number, function=quoted[1])
        )
    return frames


def _read_lines(path: Path) -> Optional[List[str]]:
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            return handle.read().split("\n")
    except (OSError, UnicodeDecodeError):
        return None


def load_call_stack(text: str, shell: Shell) -> CallStack:
    """Parse a stack trace in the given shell's format and read its files."""
    if shell is Shell.FISH:
        callsites = parse_fish_stack_trace(text)
    else:
        callsites = parse_bash_or_zsh_stack_trace(text)
    return CallStack(
        frames=[CallFrame(ctx=call, lines=_read_lines(call.file)) for call in callsites]
    )