from typing import Optional

Position = tuple[int, int]


def clamp_cursor(requested: Position, column_count: int, row_count: int) -> Optional[Position]:
    if column_count <= 0 or row_count <= 0:
        return None
    x, y = requested
    return (
        max(0, min(x, column_count - 1)),
        max(0, min(y, row_count - 1)),
    )


class CursorState:
    """Focused cell plus the selected-cell set, kept inside the table extents.

    The cursor is never patched in place: ``position`` is recomputed from the
    last requested coordinates and the current counts.
    """

    def __init__(self):
        self.requested: Position = (0, 0)
        self.column_count = 0
        self.row_count = 0
        self.column_select = False
        self._selected: set[Position] = set()

    # ---------- extents ----------
    def update_extents(self, column_count: int, row_count: int):
        self.column_count = max(0, column_count)
        self.row_count = max(0, row_count)
        self._selected = {
            (c, r)
            for (c, r) in self._selected
            if c < self.column_count and r < self.row_count
        }

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.column_count and 0 <= row < self.row_count

    # ---------- cursor ----------
    @property
    def position(self) -> Optional[Position]:
        return clamp_cursor(self.requested, self.column_count, self.row_count)

    @property
    def is_absent(self) -> bool:
        return self.position is None

    def set_cursor(self, x: int, y: int) -> Optional[Position]:
        self.requested = (max(0, x), max(0, y))
        return self.position

    # ---------- selection ----------
    def add(self, col: int, row: int) -> bool:
        if not self.in_bounds(col, row) or (col, row) in self._selected:
            return False
        self._selected.add((col, row))
        return True

    def remove(self, col: int, row: int) -> bool:
        if (col, row) not in self._selected:
            return False
        self._selected.discard((col, row))
        return True

    def contains(self, col: int, row: int) -> bool:
        return (col, row) in self._selected

    def clear_selection(self):
        self._selected.clear()

    def selected(self) -> list[Position]:
        return sorted(self._selected)

    @property
    def selection_size(self) -> int:
        return len(self._selected)
