import logging

logger = logging.getLogger(__name__)


class ViewSelection:
    """Turns select intents into concrete ``(col, row)`` pairs.

    In column-select mode a single intent covers every row of the column.
    Range selection works like a visual-mode rectangle between an anchor and
    the cursor.
    """

    def __init__(self, ctx):
        self.ctx = ctx
        self.anchor = None

    def _gated(self, action: str) -> bool:
        if not self.ctx.enabled:
            logger.debug("selection %s ignored: view disabled", action)
            return True
        return False

    def _expand(self, col: int, row: int):
        cursor = self.ctx.cursor
        if cursor.column_select:
            if not (0 <= col < cursor.column_count):
                return []
            return [(col, r) for r in range(cursor.row_count)]
        return [(col, row)]

    # ---------- mode ----------
    def toggle_column_select(self) -> bool:
        self.ctx.cursor.column_select = not self.ctx.cursor.column_select
        return self.ctx.cursor.column_select

    def set_column_select(self, flag: bool):
        self.ctx.cursor.column_select = bool(flag)

    # ---------- cell intents ----------
    def add(self, col: int, row: int) -> bool:
        if self._gated("add"):
            return False
        return self.ctx.cursor.add(col, row)

    def remove(self, col: int, row: int) -> bool:
        if self._gated("remove"):
            return False
        return self.ctx.cursor.remove(col, row)

    def select_at(self, col: int, row: int) -> int:
        if self._gated("select"):
            return 0
        return sum(1 for c, r in self._expand(col, row) if self.ctx.cursor.add(c, r))

    def deselect_at(self, col: int, row: int) -> int:
        if self._gated("deselect"):
            return 0
        return sum(
            1 for c, r in self._expand(col, row) if self.ctx.cursor.remove(c, r)
        )

    def toggle_at(self, col: int, row: int) -> int:
        if self.ctx.cursor.contains(col, row):
            return -self.deselect_at(col, row)
        return self.select_at(col, row)

    def select_all(self) -> int:
        if self._gated("select_all"):
            return 0
        cursor = self.ctx.cursor
        added = 0
        for c in range(cursor.column_count):
            for r in range(cursor.row_count):
                if cursor.add(c, r):
                    added += 1
        return added

    def clear(self):
        if self._gated("clear"):
            return
        self.ctx.cursor.clear_selection()
        self.anchor = None

    # ---------- range (visual) ----------
    def rect(self, anchor, head):
        (ac, ar), (hc, hr) = anchor, head
        c0, c1 = sorted((ac, hc))
        r0, r1 = sorted((ar, hr))
        return (c0, c1, r0, r1)

    def select_range(self, anchor, head) -> int:
        if self._gated("select_range"):
            return 0
        cursor = self.ctx.cursor
        c0, c1, r0, r1 = self.rect(anchor, head)
        added = 0
        for c in range(max(0, c0), min(c1, cursor.column_count - 1) + 1):
            for r in range(max(0, r0), min(r1, cursor.row_count - 1) + 1):
                if cursor.add(c, r):
                    added += 1
        return added

    def start_range(self):
        if self._gated("start_range"):
            return None
        self.anchor = self.ctx.cursor.position
        return self.anchor

    def extend_range(self) -> int:
        head = self.ctx.cursor.position
        if self.anchor is None or head is None:
            return 0
        return self.select_range(self.anchor, head)

    def exit_range(self):
        self.anchor = None
