"""Selection state of a scrollable list."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional

# Selecting "before" an empty selection picks the last item; the renderer
# clamps this index to the list length.
_LAST = sys.maxsize


@dataclass
class ListState:
    """Which list item is selected and how far the list is scrolled."""

    selected: Optional[int] = None
    offset: int = 0

    def select(self, index: Optional[int]) -> None:
        """Select an item, or clear the selection with None."""
        if index is not None and index < 0:
            raise ValueError(f"list index must not be negative: {index}")
        self.selected = index
        if index is None:
            self.offset = 0

    def select_first(self) -> None:
        """Select the first item."""
        self.select(0)

    def select_next(self) -> None:
        """Select the following item, or the first when nothing is selected."""
        self.select(0 if self.selected is None else min(self.selected + 1, _LAST))

    def select_previous(self) -> None:
        """Select the preceding item, or the last when nothing is selected."""
        self.select(_LAST if self.selected is None else max(self.selected - 1, 0))