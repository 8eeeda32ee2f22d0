"""The output screen: the commands sourced when the debugger exits."""

from __future__ import annotations

from floxdbg.canvas import Canvas, Constraint, Rect, split

_DESCRIPTION = "These commands will be sourced by your shell when the debugger exits."


def render_output_screen(app, canvas: Canvas, area: Rect) -> None:
    """Draw an explanation followed by a box holding the pending commands."""
    desc_area, output_area = split(
        area,
        [Constraint("max", 2), Constraint("fill", 1)],
        margin=1,
        spacing=1,
    )
    canvas.draw_paragraph(desc_area, _DESCRIPTION, wrap=True)
    canvas.draw_box(output_area, " Output ")
    canvas.draw_paragraph(output_area.inner(1), app.output)