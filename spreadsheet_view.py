import logging

from column_registry import Alignment, ColumnDef, WidthPolicy
from config_paths import merge_config
from frame_io import records_from_frame, records_to_frame
from navigation import NavigationController
from record_store import unknown_keys
from sort_engine import Ordering, extend_chain, refine_store, sort_store_by_columns
from view_context import ViewContext
from view_selection import ViewSelection

logger = logging.getLogger(__name__)


class SpreadsheetView:
    """Data and cursor state behind a tabular view.

    The host owns drawing and input; it calls these methods in response to
    user actions and re-renders from ``columns()``, ``records()``,
    ``cursor`` and ``selected_cells()`` afterwards. Every structural change
    re-clamps the cursor and prunes the selection to the new extents.
    """

    def __init__(self, config=None, adapter=None):
        cfg = merge_config(config or {})
        self.config = cfg

        self.ctx = ViewContext(
            read_only=cfg["READ_ONLY"],
            row_jump_percent=cfg["ROW_JUMP_PERCENT"],
            col_jump_percent=cfg["COL_JUMP_PERCENT"],
        )
        if adapter is not None:
            self.ctx.adapter = adapter
        self.ctx.cursor.column_select = cfg["COLUMN_SELECT"]
        self.default_alignment = Alignment.parse(cfg["DEFAULT_ALIGNMENT"])

        self.nav = NavigationController(self.ctx, self.set_cursor)
        self.selection = ViewSelection(self.ctx)

    @classmethod
    def from_frame(cls, df, config=None, adapter=None):
        view = cls(config=config, adapter=adapter)
        columns, records = records_from_frame(df, alignment=view.default_alignment)
        for column in columns:
            view.ctx.columns.insert(column)
        view.ctx.records.extend(records)
        view._refresh()
        return view

    def to_frame(self):
        return records_to_frame(self.ctx.columns.keys(), self.ctx.records)

    # ---------- helpers ----------
    def _refresh(self):
        self.ctx.sync_extents()

    # ---------- columns ----------
    def add_column(self, key, title=None, width=None, align=None) -> ColumnDef:
        column = ColumnDef(
            key=key,
            title=key if title is None else title,
            width_policy=width if width is not None else WidthPolicy.auto(),
            alignment=Alignment.parse(align, self.default_alignment),
        )
        self.insert_column(column)
        return column

    def insert_column(self, column: ColumnDef):
        self.ctx.columns.insert(column)
        self._refresh()

    def remove_column(self, key):
        removed = self.ctx.columns.remove(key)
        if removed is None:
            logger.debug("remove_column: no column %r", key)
            return None
        self._refresh()
        return removed

    def remove_last_column(self):
        removed = self.ctx.columns.remove_last()
        if removed is not None:
            self._refresh()
        return removed

    def columns(self):
        return list(self.ctx.columns)

    def column(self, key):
        return self.ctx.columns.get(key)

    @property
    def column_count(self) -> int:
        return len(self.ctx.columns)

    # ---------- records ----------
    def _check_keys(self, record):
        extra = unknown_keys(record, self.ctx.columns)
        if extra:
            logger.debug("record has keys without columns: %s", sorted(extra))

    def push_record(self, record):
        self._check_keys(record)
        self.ctx.records.push(record)
        self._refresh()

    def insert_record(self, index: int, record) -> int:
        self._check_keys(record)
        index = self.ctx.records.insert_at(index, record)
        self._refresh()
        return index

    def extend_records(self, records):
        for record in records:
            self._check_keys(record)
            self.ctx.records.push(record)
        self._refresh()

    def pop_record(self):
        record = self.ctx.records.pop()
        if record is not None:
            self._refresh()
        return record

    def remove_record(self, index: int):
        record = self.ctx.records.remove_at(index)
        if record is None:
            logger.debug("remove_record: index %s out of range", index)
            return None
        self._refresh()
        return record

    def clear_records(self):
        self.ctx.records.clear()
        self._refresh()

    def record(self, index: int):
        return self.ctx.records.get(index)

    def records(self):
        return list(self.ctx.records)

    @property
    def record_count(self) -> int:
        return len(self.ctx.records)

    def cell_text(self, row: int, key) -> str:
        return self.ctx.adapter.render(self.ctx.records.value(row, key), key)

    def set_cell(self, row: int, key, value) -> bool:
        if self.ctx.read_only:
            logger.debug("set_cell ignored: view is read-only")
            return False
        return self.ctx.records.set_value(row, key, value)

    def clear_cell(self, row: int, key) -> bool:
        if self.ctx.read_only:
            logger.debug("clear_cell ignored: view is read-only")
            return False
        return self.ctx.records.clear_value(row, key)

    def content_width(self, key):
        column = self.ctx.columns.get(key)
        if column is None:
            return None
        width = len(column.display_title)
        for record in self.ctx.records:
            width = max(width, len(self.ctx.adapter.render(record.get(key), key)))
        return column.width_policy.clamp(width)

    # ---------- sorting ----------
    @property
    def sort_keys(self):
        return list(self.ctx.sort_keys)

    @property
    def sort_order(self):
        """Primary ``(key, ascending)`` of the sort chain, or ``None``."""
        return self.ctx.sort_keys[0] if self.ctx.sort_keys else None

    def _finish_sort(self, chain, key, ascending, context):
        self.ctx.sort_keys = chain
        self._refresh()
        self.ctx.callbacks.emit_sort(context, key, Ordering.from_ascending(ascending))

    def sort_by_column(self, key, ascending: bool = True, context=None) -> bool:
        """Sort by ``key`` within the ties left by earlier sorts.

        Rows equal on ``key`` keep their relative order. Unknown keys are
        ignored. Call ``clear_sort`` first to make ``key`` the only sort key.
        """
        if key not in self.ctx.columns:
            logger.debug("sort_by_column: unknown column %r", key)
            return False
        chain = extend_chain(self.ctx.sort_keys, key, ascending)
        refine_store(self.ctx.records, chain[:-1], key, ascending, self.ctx.adapter)
        self._finish_sort(chain, key, ascending, context)
        return True

    def sort_by_columns(self, sort_keys, context=None) -> bool:
        known = []
        for key, ascending in sort_keys:
            if key not in self.ctx.columns:
                logger.debug("sort_by_columns: skipping unknown column %r", key)
            elif all(key != k for k, _ in known):
                known.append((key, ascending))
        if not known:
            return False
        sort_store_by_columns(self.ctx.records, known, self.ctx.adapter)
        key, ascending = known[0]
        self._finish_sort(known, key, ascending, context)
        return True

    def toggle_sort(self, key, context=None) -> bool:
        """Header-click sort: ``key`` alone, flipping direction on repeat."""
        if key not in self.ctx.columns:
            logger.debug("toggle_sort: unknown column %r", key)
            return False
        ascending = True
        if self.ctx.sort_keys and self.ctx.sort_keys[0][0] == key:
            ascending = not self.ctx.sort_keys[0][1]
        chain = [(key, ascending)]
        sort_store_by_columns(self.ctx.records, chain, self.ctx.adapter)
        self._finish_sort(chain, key, ascending, context)
        return True

    def clear_sort(self):
        self.ctx.sort_keys = []

    # ---------- cursor ----------
    @property
    def cursor(self):
        return self.ctx.cursor.position

    def set_cursor(self, x: int, y: int):
        if not self.ctx.enabled:
            logger.debug("set_cursor ignored: view disabled")
            return self.ctx.cursor.position
        return self.ctx.cursor.set_cursor(x, y)

    def focused_record(self):
        pos = self.ctx.cursor.position
        if pos is None:
            return None
        return self.ctx.records.get(pos[1])

    def focused_key(self):
        pos = self.ctx.cursor.position
        if pos is None:
            return None
        return self.ctx.columns.key_at(pos[0])

    # ---------- selection ----------
    @property
    def column_select(self) -> bool:
        return self.ctx.cursor.column_select

    def toggle_column_select(self) -> bool:
        return self.selection.toggle_column_select()

    def set_column_select(self, flag: bool):
        self.selection.set_column_select(flag)

    def add_selection(self, col: int, row: int) -> bool:
        return self.selection.add(col, row)

    def remove_selection(self, col: int, row: int) -> bool:
        return self.selection.remove(col, row)

    def is_selected(self, col: int, row: int) -> bool:
        return self.ctx.cursor.contains(col, row)

    def selected_cells(self):
        return self.ctx.cursor.selected()

    def clear_selection(self):
        self.selection.clear()

    def select(self, context=None) -> bool:
        """Select at the cursor (expanded per mode) and notify ``on_select``."""
        if not self.ctx.enabled:
            logger.debug("select ignored: view disabled")
            return False
        pos = self.ctx.cursor.position
        if pos is None:
            return False
        col, row = pos
        self.selection.select_at(col, row)
        self.ctx.callbacks.emit_select(context, row, col)
        return True

    # ---------- submit ----------
    def submit(self, context=None) -> bool:
        if not self.ctx.enabled:
            logger.debug("submit ignored: view disabled")
            return False
        pos = self.ctx.cursor.position
        if pos is None:
            return False
        col, row = pos
        self.ctx.callbacks.emit_submit(context, row, col)
        return True

    # ---------- gates ----------
    def enable(self):
        self.ctx.enabled = True

    def disable(self):
        self.ctx.enabled = False

    def set_enabled(self, flag: bool):
        self.ctx.enabled = bool(flag)

    def is_enabled(self) -> bool:
        return self.ctx.enabled

    def set_read_only(self, flag: bool):
        self.ctx.read_only = bool(flag)

    def is_read_only(self) -> bool:
        return self.ctx.read_only

    # ---------- callbacks ----------
    def set_on_sort(self, cb):
        self.ctx.callbacks.set_on_sort(cb)

    def set_on_submit(self, cb):
        self.ctx.callbacks.set_on_submit(cb)

    def set_on_select(self, cb):
        self.ctx.callbacks.set_on_select(cb)
