class NavigationController:
    """Relative cursor moves expressed as absolute ``set_cursor`` requests."""

    def __init__(self, ctx, set_cursor_cb):
        self.ctx = ctx
        self._set_cursor = set_cursor_cb

    def _current(self):
        pos = self.ctx.cursor.position
        return pos if pos is not None else (0, 0)

    def _total_cols(self):
        return len(self.ctx.columns)

    def _total_rows(self):
        return len(self.ctx.records)

    def move_left(self, count: int = 1):
        col, row = self._current()
        return self._set_cursor(max(0, col - max(1, count)), row)

    def move_right(self, count: int = 1):
        col, row = self._current()
        return self._set_cursor(col + max(1, count), row)

    def move_up(self, count: int = 1):
        col, row = self._current()
        return self._set_cursor(col, max(0, row - max(1, count)))

    def move_down(self, count: int = 1):
        col, row = self._current()
        return self._set_cursor(col, row + max(1, count))

    def jump_first_col(self):
        _, row = self._current()
        return self._set_cursor(0, row)

    def jump_last_col(self):
        _, row = self._current()
        return self._set_cursor(max(0, self._total_cols() - 1), row)

    def jump_first_row(self):
        col, _ = self._current()
        return self._set_cursor(col, 0)

    def jump_last_row(self):
        col, _ = self._current()
        return self._set_cursor(col, max(0, self._total_rows() - 1))

    def jump_rows_percent(self, pct=None, direction="down"):
        total_rows = self._total_rows()
        if total_rows == 0:
            return None
        pct = self.ctx.row_jump_percent if pct is None else pct
        jump = max(1, int(total_rows * pct))
        if direction == "down":
            return self.move_down(jump)
        return self.move_up(jump)

    def jump_cols_percent(self, pct=None, direction="right"):
        total_cols = self._total_cols()
        if total_cols == 0:
            return None
        pct = self.ctx.col_jump_percent if pct is None else pct
        jump = max(1, int(total_cols * pct))
        if direction == "right":
            return self.move_right(jump)
        return self.move_left(jump)
