"""Drawing the whole interface: header, footer, current screen and exit modal."""

from __future__ import annotations

from typing import List, Tuple

from floxdbg.canvas import Canvas, Constraint, Rect, Span, split
from floxdbg.events import ExitModal, ExitOption, Screen
from floxdbg.theme import Style
from floxdbg.ui.home import render_home_screen
from floxdbg.ui.output import render_output_screen
from floxdbg.ui.trace_view import render_trace_screen
from floxdbg.ui.vars_view import render_vars_screen

_NAME = "flox-debugger"
_VERSION = "0.1.0"
_BOLD = Style(bold=True)
_OK_BUTTON = "[   Ok   ]"
_CANCEL_BUTTON = "[ Cancel ]"


def footer_bindings(app) -> List[Tuple[str, str]]:
    """The (keys, description) pairs shown in the footer for the current screen."""
    bindings = app.key_bindings
    return bindings.global_.displayable() + bindings.screen_bindings(
        app.screen
    ).displayable()


def render_header(app, canvas: Canvas, area: Rect) -> None:
    """Draw the titled header box holding the tab bar."""
    theme = app.theme
    title = [" ", (_NAME, _BOLD), "-", (_VERSION, _BOLD), " "]
    canvas.draw_box(area, title, centered_title=True)

    tabs_area = area.inner(1)
    if tabs_area.height <= 0:
        return
    y = tabs_area.y
    right = tabs_area.x + tabs_area.width
    screens = list(Screen)
    x = tabs_area.x
    for position, screen in enumerate(screens):
        x = canvas.put(x, y, " ", clip=tabs_area)
        name = str(screen)
        start = x
        x = canvas.put(x, y, name, theme.flox_purple, clip=tabs_area)
        if screen is app.screen:
            width = max(min(len(name), right - start), 0)
            canvas.fill(Rect(start, y, width, 1), theme.selected_tab)
        x = canvas.put(x, y, " ", clip=tabs_area)
        if position < len(screens) - 1:
            x = canvas.put(x, y, "|", theme.fg_dim, clip=tabs_area)


def render_footer(app, canvas: Canvas, area: Rect) -> None:
    """Draw the footer box listing the applicable key bindings."""
    theme = app.theme
    spans: List[Span] = []
    for keys, description in footer_bindings(app):
        spans += [
            (" [", theme.fg_dim),
            (keys, theme.flox_purple),
            (": ", theme.fg_dim),
            (description, theme.fg),
            ("]", theme.fg_dim),
        ]
    spans.append((" ", Style()))
    canvas.draw_box(area)
    canvas.draw_line(area.inner(1), spans, align="center")


def render_exit_modal(app, canvas: Canvas) -> None:
    """Clear the screen and draw the exit confirmation popup."""
    modal = app.exit_state
    if not isinstance(modal, ExitModal):
        raise RuntimeError("tried to draw exit modal in wrong state")
    theme = app.theme

    canvas.clear()
    popup = canvas.area.centered(30, 5)
    canvas.draw_box(popup)

    desc_area, buttons_area = split(
        popup,
        [Constraint("length", 1), Constraint("length", 3)],
        margin=1,
        spacing=1,
    )
    canvas.draw_line(desc_area, "Exit?", align="center")

    ok_area, cancel_area = split(
        buttons_area,
        [Constraint("percentage", 50), Constraint("percentage", 50)],
        vertical=False,
        spacing=1,
    )
    if modal.highlighted_option is ExitOption.OK:
        ok_style, cancel_style = theme.highlighted_text, theme.fg
    else:
        ok_style, cancel_style = theme.fg, theme.highlighted_text
    canvas.draw_line(ok_area, [(_OK_BUTTON, ok_style)], align="center")
    canvas.draw_line(cancel_area, [(_CANCEL_BUTTON, cancel_style)], align="center")


def _render_placeholder_screen(name: str, canvas: Canvas, area: Rect) -> None:
    canvas.draw_line(area, name, align="center")


def draw_ui(app, canvas: Canvas) -> None:
    """Draw the complete interface for the application's current state."""
    header_area, body_area, footer_area = split(
        canvas.area,
        [Constraint("length", 3), Constraint("min", 0), Constraint("length", 3)],
        margin=1,
    )
    render_header(app, canvas, header_area)
    render_footer(app, canvas, footer_area)

    screen = app.screen
    if screen is Screen.HOME:
        render_home_screen(app, canvas, body_area)
    elif screen is Screen.PROMPT:
        _render_placeholder_screen("Prompt Screen", canvas, body_area)
    elif screen is Screen.VARS:
        render_vars_screen(app, canvas, body_area)
    elif screen is Screen.TRACE:
        render_trace_screen(app, canvas, body_area)
    else:
        render_output_screen(app, canvas, body_area)

    if app.is_displaying_exit_modal():
        render_exit_modal(app, canvas)