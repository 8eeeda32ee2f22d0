"""The variables screen: a list of names beside the selected value."""

from __future__ import annotations

from typing import List

from floxdbg.canvas import Canvas, Constraint, Rect, SpanLike, split
from floxdbg.theme import Style
from floxdbg.vars import VarDetailState

_UNDERLINED = Style(underlined=True)
_NO_VARIABLE = "<No variable selected>"
_NO_ITEM = "<No item selected>"


def detail_title(detail_state: VarDetailState) -> List[SpanLike]:
    """Title of the detail box, underlining the active view and the key letter."""
    if detail_state is None:
        return [" ", ("Raw", _UNDERLINED), " / ", ("S", _UNDERLINED), "plit", " "]
    return [" ", ("R", _UNDERLINED), "aw", " / ", ("Split", _UNDERLINED), " "]


def render_vars_screen(app, canvas: Canvas, area: Rect) -> None:
    """Draw the variable list and the detail of the selected variable."""
    var_list_area, detail_area = split(
        area,
        [Constraint("percentage", 33), Constraint("percentage", 67)],
        vertical=False,
        spacing=1,
    )
    _render_var_list(app, canvas, var_list_area)
    _render_var_detail(app, canvas, detail_area)


def _render_var_list(app, canvas: Canvas, area: Rect) -> None:
    env = app.env
    theme = app.theme
    border = theme.flox_purple if env.var_list_focused else None
    canvas.draw_box(area, " Variables ", style=border)
    canvas.draw_list(
        area.inner(1), env.vars, env.var_list_state, theme.highlighted_text
    )


def _render_var_detail(app, canvas: Canvas, area: Rect) -> None:
    env = app.env
    theme = app.theme
    name_area, detail_sub_area = split(
        area,
        [Constraint("length", 3), Constraint("percentage", 100)],
        spacing=1,
    )

    selected_var = env.selected_var()
    canvas.draw_box(name_area, " Name ")
    canvas.draw_paragraph(
        name_area.inner(1), selected_var if selected_var is not None else _NO_VARIABLE
    )

    title = detail_title(env.detail_state)
    border = None if env.var_list_focused else theme.flox_purple
    detail = env.detail_state

    if detail is None:
        value = env.selected_var_value()
        canvas.draw_box(detail_sub_area, title, style=border)
        canvas.draw_paragraph(
            detail_sub_area.inner(1),
            value if value is not None else _NO_VARIABLE,
            wrap=True,
        )
        return

    list_area, value_area = split(
        detail_sub_area,
        [Constraint("fill", 1), Constraint("length", 4)],
        spacing=1,
    )
    canvas.draw_box(list_area, title, style=border)
    canvas.draw_list(
        list_area.inner(1), detail.items, detail.list_state, theme.highlighted_text
    )

    item = env.selected_detail_item()
    canvas.draw_box(value_area, " Selected ")
    canvas.draw_paragraph(
        value_area.inner(1), item if item is not None else _NO_ITEM, wrap=True
    )