"""Text styles and the colour theme of the debugger."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

Color = Union[str, Tuple[int, int, int]]

_FG_CODES = {
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "gray": 37,
    "darkgray": 90,
    "white": 97,
}


def _color_codes(color: Color, background: bool) -> list:
    if isinstance(color, tuple):
        r, g, b = color
        return [48 if background else 38, 2, r, g, b]
    try:
        code = _FG_CODES[color]
    except KeyError:
        raise ValueError(f"unknown color: {color}") from None
    return [code + 10 if background else code]


@dataclass(frozen=True)
class Style:
    """Foreground, background and text modifiers of a span of text."""

    fg: Optional[Color] = None
    bg: Optional[Color] = None
    bold: bool = False
    dim: bool = False
    italic: bool = False
    underlined: bool = False

    def sgr(self) -> str:
        """The ANSI escape sequence that turns this style on; empty if plain."""
        codes = [
            code
            for code, active in (
                (1, self.bold),
                (2, self.dim),
                (3, self.italic),
                (4, self.underlined),
            )
            if active
        ]
        if self.fg is not None:
            codes += _color_codes(self.fg, background=False)
        if self.bg is not None:
            codes += _color_codes(self.bg, background=True)
        if not codes:
            return ""
        return "\x1b[" + ";".join(str(c) for c in codes) + "m"


@dataclass(frozen=True)
class Theme:
    """The styles used throughout the interface."""

    flox_purple: Style = field(default_factory=lambda: Style(fg=(175, 135, 255)))
    fg: Style = field(default_factory=Style)
    fg_dim: Style = field(default_factory=lambda: Style(dim=True))
    selected_tab: Style = field(
        default_factory=lambda: Style(fg="white", underlined=True, bold=True)
    )
    highlighted_text: Style = field(
        default_factory=lambda: Style(fg="black", bg="white")
    )