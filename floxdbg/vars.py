"""State of the environment variables screen."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from floxdbg.events import Event, NavEvent, VarsEvent
from floxdbg.liststate import ListState


def _initial_list_state(items: List[str]) -> ListState:
    state = ListState()
    if items:
        state.select_first()
    return state


def _item(items: List[str], state: ListState) -> Optional[str]:
    idx = state.selected
    if idx is None:
        return None
    return items[idx]


def _split_paths(value: str) -> List[str]:
    """Split a search-path string the way the platform does."""
    if os.name != "nt":
        return value.split(os.pathsep)
    parts = []
    current = []
    quoted = False
    for ch in value:
        if ch == '"':
            quoted = not quoted
        elif ch == os.pathsep and not quoted:
            parts.append("".join(current))
            current = []
        else:
            current.append(ch)
    parts.append("".join(current))
    return parts


@dataclass
class SplitDetail:
    """The selected variable's value shown as a list of path entries."""

    items: List[str]
    list_state: ListState = field(default_factory=ListState)

    @classmethod
    def from_items(cls, items: List[str]) -> "SplitDetail":
        """Build the split view, selecting the first entry if there is one."""
        items = list(items)
        return cls(items, _initial_list_state(items))

    def selected_item(self) -> Optional[str]:
        """The highlighted entry, if any."""
        return _item(self.items, self.list_state)

    def _move(self, event: NavEvent) -> None:
        _move_selection(self.list_state, len(self.items), event)


def _move_selection(state: ListState, length: int, event: NavEvent) -> None:
    idx = state.selected
    if idx is None:
        return
    if event is NavEvent.UP and idx > 0:
        state.select_previous()
    elif event is NavEvent.DOWN and idx < length - 1:
        state.select_next()


# None means the raw value is shown.
VarDetailState = Optional[SplitDetail]


@dataclass
class Env:
    """Environment variables, their values and how they are being viewed."""

    vars: List[str]
    values: List[str]
    var_list_focused: bool = True
    detail_state: VarDetailState = None
    var_list_state: ListState = field(init=False)

    def __post_init__(self) -> None:
        if len(self.vars) != len(self.values):
            raise ValueError("every variable needs exactly one value")
        self.var_list_state = _initial_list_state(self.vars)

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "Env":
        """Read variables from a mapping, or the process environment, by name."""
        if environ is None:
            environ = os.environ
        pairs = sorted(environ.items(), key=lambda pair: pair[0])
        return cls([name for name, _ in pairs], [value for _, value in pairs])

    def selected_var(self) -> Optional[str]:
        """Name of the selected variable."""
        return _item(self.vars, self.var_list_state)

    def selected_var_value(self) -> Optional[str]:
        """Value of the selected variable."""
        return _item(self.values, self.var_list_state)

    def selected_var_split_value(self) -> Optional[List[str]]:
        """Value of the selected variable split into path entries."""
        value = self.selected_var_value()
        return None if value is None else _split_paths(value)

    def selected_detail_item(self) -> Optional[str]:
        """Highlighted entry of the split view, if it is shown."""
        if self.detail_state is None:
            return None
        return self.detail_state.selected_item()

    def handle_event(self, event: Event) -> None:
        """Update focus, selection or detail view in response to an event."""
        if event in (NavEvent.UP, NavEvent.DOWN):
            if self.var_list_focused:
                _move_selection(self.var_list_state, len(self.vars), event)
            elif self.detail_state is not None:
                self.detail_state._move(event)
        elif event is NavEvent.LEFT:
            self.var_list_focused = True
        elif event is NavEvent.RIGHT:
            self.var_list_focused = False
        elif event is VarsEvent.RAW_DETAIL:
            self.detail_state = None
        elif event is VarsEvent.SPLIT_DETAIL:
            values = self.selected_var_split_value()
            if values is None:
                raise LookupError("no variable selected to split")
            self.detail_state = SplitDetail.from_items(values)