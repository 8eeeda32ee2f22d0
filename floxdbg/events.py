"""Screens, shells and the events that drive the debugger."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Union


class Screen(enum.Enum):
    """The tabs of the debugger, in display order."""

    HOME = "Home"
    PROMPT = "Prompt"
    VARS = "Vars"
    TRACE = "Trace"
    OUTPUT = "Output"

    def tab_index(self) -> int:
        """Position of this screen in the tab bar."""
        return list(type(self)).index(self)

    def next_tab(self) -> "Screen":
        """The screen that follows this one, wrapping around at the end."""
        screens = list(type(self))
        return screens[(self.tab_index() + 1) % len(screens)]

    def __str__(self) -> str:
        return self.value


class Shell(enum.Enum):
    """Shell dialects the debugger can emit commands for."""

    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"

    @classmethod
    def parse(cls, value: str) -> "Shell":
        """Parse a shell name, raising ValueError for unknown shells."""
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"unrecognized shell: {value}") from None


class NavEvent(enum.Enum):
    """Navigation directions for UI elements."""

    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    SELECT = enum.auto()


class AppEvent(enum.Enum):
    """Application-wide requests."""

    NEXT_TAB = enum.auto()
    EXIT_REQUESTED = enum.auto()


class VarsEvent(enum.Enum):
    """Requests specific to the variables screen."""

    RAW_DETAIL = enum.auto()
    SPLIT_DETAIL = enum.auto()


Event = Union[AppEvent, NavEvent, VarsEvent]


class ExitOption(enum.Enum):
    """The buttons of the exit confirmation modal."""

    OK = enum.auto()
    CANCEL = enum.auto()

    def toggled(self) -> "ExitOption":
        """The other option."""
        return ExitOption.CANCEL if self is ExitOption.OK else ExitOption.OK


@dataclass
class ExitModal:
    """State of the exit confirmation modal while it is shown."""

    highlighted_option: ExitOption = ExitOption.CANCEL


# None means the application is not exiting.
ExitState = Optional[ExitModal]