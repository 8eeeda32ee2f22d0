"""A character grid with layout helpers for drawing the interface."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from floxdbg.liststate import ListState
from floxdbg.theme import Style

Span = Tuple[str, Style]
SpanLike = Union[str, Span]
Spans = Union[str, Sequence[SpanLike]]

_KINDS = ("length", "min", "max", "percentage", "fill")
_RESET = "\x1b[0m"
_PLAIN = Style()
_BLANK = (" ", _PLAIN)


@dataclass(frozen=True)
class Constraint:
    """A size rule for one part of a layout: length, min, max, percentage or fill."""

    kind: str
    value: int

    def __post_init__(self) -> None:
        if self.kind not in _KINDS:
            raise ValueError(f"unknown constraint kind: {self.kind}")
        if self.value < 0:
            raise ValueError(f"constraint value must not be negative: {self.value}")
        if self.kind == "percentage" and self.value > 100:
            raise ValueError(f"percentage above 100: {self.value}")


@dataclass(frozen=True)
class Rect:
    """A rectangular area of the canvas."""

    x: int
    y: int
    width: int
    height: int

    def inner(self, margin: int) -> "Rect":
        """The area left after removing a margin on every side."""
        width = max(self.width - 2 * margin, 0)
        height = max(self.height - 2 * margin, 0)
        return Rect(
            self.x + min(margin, self.width // 2),
            self.y + min(margin, self.height // 2),
            width,
            height,
        )

    def centered(self, width: int, height: int) -> "Rect":
        """An area of the given size centred in this one, clamped to fit."""
        width = min(width, self.width)
        height = min(height, self.height)
        return Rect(
            self.x + (self.width - width) // 2,
            self.y + (self.height - height) // 2,
            width,
            height,
        )


def _intersect(a: Rect, b: Rect) -> Rect:
    x0, y0 = max(a.x, b.x), max(a.y, b.y)
    x1 = min(a.x + a.width, b.x + b.width)
    y1 = min(a.y + a.height, b.y + b.height)
    return Rect(x0, y0, max(x1 - x0, 0), max(y1 - y0, 0))


def _base_size(constraint: Constraint, available: int) -> int:
    if constraint.kind in ("length", "min"):
        return constraint.value
    if constraint.kind == "max":
        return min(constraint.value, available)
    if constraint.kind == "percentage":
        return available * constraint.value // 100
    return 0


def _shrink(sizes: List[int], constraints: List[Constraint], excess: int) -> None:
    indices = list(range(len(sizes)))[::-1]
    order = [i for i in indices if constraints[i].kind != "length"]
    order += [i for i in indices if constraints[i].kind == "length"]
    for i in order:
        if excess <= 0:
            break
        cut = min(sizes[i], excess)
        sizes[i] -= cut
        excess -= cut


def _distribute(sizes: List[int], indices: List[int], weights: List[int], extra: int) -> None:
    total = sum(weights)
    if total == 0:
        weights = [1] * len(indices)
        total = len(indices)
    given = 0
    for i, weight in zip(indices, weights):
        share = extra * weight // total
        sizes[i] += share
        given += share
    sizes[indices[-1]] += extra - given


def _grow(sizes: List[int], constraints: List[Constraint], extra: int) -> None:
    fills = [i for i, c in enumerate(constraints) if c.kind == "fill"]
    if fills:
        _distribute(sizes, fills, [constraints[i].value for i in fills], extra)
        return
    mins = [i for i, c in enumerate(constraints) if c.kind == "min"]
    if mins:
        _distribute(sizes, mins, [1] * len(mins), extra)
        return
    for i, c in enumerate(constraints):
        if c.kind == "max" and extra > 0:
            room = min(c.value - sizes[i], extra)
            sizes[i] += room
            extra -= room
    if extra > 0:
        sizes[-1] += extra


def split(
    area: Rect,
    constraints: Iterable[Constraint],
    vertical: bool = True,
    spacing: int = 0,
    margin: int = 0,
) -> List[Rect]:
    """Divide an area into consecutive parts sized by the constraints."""
    constraints = list(constraints)
    if not constraints:
        return []
    inner = area.inner(margin)
    total = inner.height if vertical else inner.width
    available = max(total - spacing * (len(constraints) - 1), 0)
    sizes = [_base_size(c, available) for c in constraints]
    difference = sum(sizes) - available
    if difference > 0:
        _shrink(sizes, constraints, difference)
    elif difference < 0:
        _grow(sizes, constraints, -difference)

    start = inner.y if vertical else inner.x
    end = start + total
    rects = []
    pos = start
    for size in sizes:
        pos = min(pos, end)
        size = min(size, end - pos)
        if vertical:
            rects.append(Rect(inner.x, pos, inner.width, size))
        else:
            rects.append(Rect(pos, inner.y, size, inner.height))
        pos += size + spacing
    return rects


def _merge(base: Style, over: Optional[Style]) -> Style:
    if over is None:
        return base
    return Style(
        fg=over.fg if over.fg is not None else base.fg,
        bg=over.bg if over.bg is not None else base.bg,
        bold=base.bold or over.bold,
        dim=base.dim or over.dim,
        italic=base.italic or over.italic,
        underlined=base.underlined or over.underlined,
    )


def _spans(value: Optional[Spans]) -> List[Span]:
    if value is None:
        return []
    if isinstance(value, str):
        return [(value, _PLAIN)]
    return [(item, _PLAIN) if isinstance(item, str) else item for item in value]


def _styled_chars(spans: List[Span], base: Optional[Style]) -> List[Tuple[str, Style]]:
    base_style = base if base is not None else _PLAIN
    return [(ch, _merge(base_style, style)) for text, style in spans for ch in text]


def _wrap(cells: List[Tuple[str, Style]], width: int) -> List[List[Tuple[str, Style]]]:
    rows = []
    while len(cells) > width:
        head = "".join(ch for ch, _ in cells[: width + 1])
        cut = head.rfind(" ")
        if cut > 0:
            rows.append(cells[:cut])
            cells = cells[cut + 1 :]
        else:
            rows.append(cells[:width])
            cells = cells[width:]
    rows.append(cells)
    return rows


class Canvas:
    """A grid of styled characters that the screens draw into."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"canvas size must not be negative: {width}x{height}")
        self.width = width
        self.height = height
        self.area = Rect(0, 0, width, height)
        self._cells = [[_BLANK] * width for _ in range(height)]

    def put(
        self,
        x: int,
        y: int,
        text: str,
        style: Optional[Style] = None,
        clip: Optional[Rect] = None,
    ) -> int:
        """Write text at a position, clipped; returns the column after the text."""
        bounds = self.area if clip is None else _intersect(clip, self.area)
        end = x + len(text)
        if not bounds.y <= y < bounds.y + bounds.height:
            return end
        row = self._cells[y]
        left, right = bounds.x, bounds.x + bounds.width
        for cx, ch in enumerate(text, start=x):
            if left <= cx < right:
                char = " " if ord(ch) < 32 else ch
                row[cx] = (char, _merge(row[cx][1], style))
        return end

    def fill(self, area: Rect, style: Style) -> None:
        """Apply a style to every cell of an area, keeping the characters."""
        region = _intersect(area, self.area)
        for row in self._cells[region.y : region.y + region.height]:
            for cx in range(region.x, region.x + region.width):
                ch, old = row[cx]
                row[cx] = (ch, _merge(old, style))

    def clear(self, area: Optional[Rect] = None) -> None:
        """Reset an area, or the whole canvas, to blank cells."""
        region = _intersect(self.area if area is None else area, self.area)
        for row in self._cells[region.y : region.y + region.height]:
            row[region.x : region.x + region.width] = [_BLANK] * region.width

    def draw_box(
        self,
        area: Rect,
        title: Optional[Spans] = None,
        style: Optional[Style] = None,
        centered_title: bool = False,
    ) -> None:
        """Draw a border around an area with an optional title in its top edge."""
        if area.width < 2 or area.height < 2:
            return
        inner_width = area.width - 2
        bottom = area.y + area.height - 1
        self.put(area.x, area.y, "┌" + "─" * inner_width + "┐", style)
        for y in range(area.y + 1, bottom):
            self.put(area.x, y, "│", style)
            self.put(area.x + area.width - 1, y, "│", style)
        self.put(area.x, bottom, "└" + "─" * inner_width + "┘", style)

        spans = _spans(title)
        if not spans:
            return
        length = sum(len(text) for text, _ in spans)
        start = area.x + 1
        if centered_title:
            start = area.x + max((area.width - length) // 2, 1)
        clip = Rect(area.x + 1, area.y, inner_width, 1)
        for text, span_style in spans:
            start = self.put(start, area.y, text, span_style, clip)

    def draw_line(self, area: Rect, spans: Spans, align: str = "left") -> None:
        """Draw one line of spans in the first row of an area."""
        spans = _spans(spans)
        length = sum(len(text) for text, _ in spans)
        free = max(area.width - length, 0)
        if align == "left":
            x = area.x
        elif align == "center":
            x = area.x + free // 2
        elif align == "right":
            x = area.x + free
        else:
            raise ValueError(f"unknown alignment: {align}")
        if area.height <= 0:
            return
        for text, style in spans:
            x = self.put(x, area.y, text, style, area)

    def draw_paragraph(
        self,
        area: Rect,
        text: Union[str, Sequence[Spans]],
        style: Optional[Style] = None,
        wrap: bool = False,
    ) -> None:
        """Draw lines of text into an area, wrapping at spaces if asked."""
        lines = text.split("\n") if isinstance(text, str) else list(text)
        rows: List[List[Tuple[str, Style]]] = []
        for line in lines:
            cells = _styled_chars(_spans(line), style)
            rows.extend(_wrap(cells, area.width) if wrap and area.width > 0 else [cells])
        for y, cells in enumerate(rows[: area.height], start=area.y):
            for x, (ch, cell_style) in enumerate(cells, start=area.x):
                self.put(x, y, ch, cell_style, area)

    def draw_list(
        self,
        area: Rect,
        items: Iterable[str],
        state: ListState,
        highlight_style: Optional[Style] = None,
    ) -> None:
        """Draw a scrolling list, keeping the selected item in view."""
        items = list(items)
        if not items:
            state.select(None)
            return
        if state.selected is not None and state.selected >= len(items):
            state.select(len(items) - 1)
        if area.height <= 0:
            return
        selected = state.selected
        offset = min(state.offset, len(items) - 1)
        if selected is not None:
            if selected < offset:
                offset = selected
            elif selected >= offset + area.height:
                offset = selected - area.height + 1
        state.offset = offset
        visible = items[offset : offset + area.height]
        for index, item in enumerate(visible, start=offset):
            y = area.y + index - offset
            if index == selected and highlight_style is not None:
                self.fill(Rect(area.x, y, area.width, 1), highlight_style)
            self.put(area.x, y, item, clip=area)

    def rows(self) -> List[str]:
        """The characters of each row, without styling."""
        return ["".join(ch for ch, _ in row) for row in self._cells]

    def to_ansi(self) -> str:
        """The canvas as text with ANSI styling, rows separated by newlines."""
        lines = []
        for row in self._cells:
            parts = []
            for style, group in itertools.groupby(row, key=lambda cell: cell[1]):
                text = "".join(ch for ch, _ in group)
                sgr = style.sgr()
                parts.append(f"{sgr}{text}{_RESET}" if sgr else text)
            lines.append("".join(parts))
        return "\n".join(lines)