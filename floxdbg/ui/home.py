"""The home screen: a banner and a description of the debugger's tabs."""

from __future__ import annotations

from floxdbg.canvas import Canvas, Constraint, Rect, split
from floxdbg.theme import Style

_RULE = "─" * 33

_DESCRIPTION = [
    "This debugger allows you to pause the activation of an environment, "
    "inspect its state, *modify* its state, and determine whether/where to "
    "pause execution when the debugger closes.",
    "",
    "The debugger has capabilities separated out into different tabs:",
    "- Home: you are here",
    "- Prompt: run commands to set breakpoints, etc",
    "- Vars: inspect and modify environment variables",
    "- Trace: see a stack trace of shell execution",
    "- Output: see the commands that will be sourced when the debugger exits",
]


def _row(area: Rect, index: int) -> Rect:
    if index >= area.height:
        return Rect(area.x, area.y, area.width, 0)
    return Rect(area.x, area.y + index, area.width, 1)


def render_home_screen(app, canvas: Canvas, area: Rect) -> None:
    """Draw the banner, the short description and the list of tabs."""
    theme = app.theme
    canvas.draw_box(area)
    _blank, splash_area, info_area, description_area = split(
        area,
        [
            Constraint("length", 1),
            Constraint("length", 7),
            Constraint("length", 5),
            Constraint("percentage", 100),
        ],
        margin=1,
    )

    banner_style = Style(fg=theme.flox_purple.fg, bold=True)
    banner = splash_area.centered(splash_area.width, 3)
    canvas.draw_line(_row(banner, 0), [("flox-", banner_style)], align="center")
    canvas.draw_line(_row(banner, 2), [("debugger", banner_style)], align="center")

    canvas.draw_line(
        _row(info_area, 0), "Debug and inspect a Flox environment", align="center"
    )
    canvas.draw_line(_row(info_area, 1), [(_RULE, theme.fg_dim)], align="center")

    prose_area = description_area.inner(2)
    canvas.draw_paragraph(prose_area, _DESCRIPTION, wrap=True)