"""The trace screen: the tracepoint, the call stack and the call site source."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from floxdbg.canvas import Canvas, Constraint, Rect, split

_NO_TRACEPOINT = "<no tracepoint provided>"
_NO_CALL_STACK = "<no call stack provided>"
_NO_SOURCE = "<source unavailable>"


def source_window(
    lines: Sequence[str], line_number: int, visible_lines: int
) -> Tuple[List[str], Optional[int]]:
    """The lines to show around a call site and the index of the one to highlight."""
    if visible_lines <= 0:
        return [], None
    half = visible_lines // 2
    if line_number < half:
        return list(lines[:visible_lines]), line_number
    offset = line_number - half
    return list(lines[offset : offset + visible_lines]), half - 1


def _row(area: Rect, index: int) -> Rect:
    return Rect(area.x, area.y + index, area.width, 1 if index < area.height else 0)


def render_trace_screen(app, canvas: Canvas, area: Rect) -> None:
    """Draw the tracepoint box and, if present, the call stack with its source."""
    trace = app.trace
    theme = app.theme
    tracepoint_area, call_stack_area = split(
        area,
        [Constraint("length", 3), Constraint("percentage", 100)],
        margin=1,
        spacing=1,
    )

    tracepoint = trace.tracepoint if trace.tracepoint is not None else _NO_TRACEPOINT
    canvas.draw_box(tracepoint_area)
    canvas.draw_paragraph(
        tracepoint_area.inner(1), f"Current tracepoint: {tracepoint}"
    )

    if trace.call_stack is None or trace.list_state is None:
        canvas.draw_box(call_stack_area, " Call Stack ", centered_title=True)
        box = call_stack_area.centered(len(_NO_CALL_STACK) + 2, call_stack_area.height)
        inner = box.inner(1)
        canvas.draw_line(inner.centered(inner.width, 1), _NO_CALL_STACK)
        return

    list_area, call_site_area = split(
        call_stack_area,
        [Constraint("percentage", 25), Constraint("percentage", 75)],
        vertical=False,
        spacing=1,
    )
    titles = [f"Frame #{i}" for i in range(len(trace.call_stack.frames))]
    canvas.draw_box(list_area, " Call Stack ")
    canvas.draw_list(
        list_area.inner(1), titles, trace.list_state, theme.highlighted_text
    )

    info_area, source_area = split(
        call_site_area,
        [Constraint("length", 5), Constraint("fill", 1)],
        spacing=1,
    )
    canvas.draw_box(info_area, " Call Site Info ")
    canvas.draw_box(source_area, " Call Site ")

    stack_frame = trace.selected_frame()
    if stack_frame is None:
        return
    info_inner = info_area.inner(1)
    ctx = stack_frame.ctx
    canvas.draw_line(_row(info_inner, 0), f"File: {ctx.file}")
    canvas.draw_line(_row(info_inner, 1), f"Line: {ctx.line}")
    canvas.draw_line(_row(info_inner, 2), f"Function: {ctx.function}")

    source_inner = source_area.inner(1)
    if stack_frame.lines is None:
        canvas.draw_paragraph(source_inner, _NO_SOURCE)
        return
    window, call_line = source_window(stack_frame.lines, ctx.line, source_inner.height)
    rendered = [
        [(line, theme.highlighted_text)] if i == call_line else line
        for i, line in enumerate(window)
    ]
    canvas.draw_paragraph(source_inner, rendered)