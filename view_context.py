from dataclasses import dataclass, field

from callbacks import CallbackRegistry
from cell_values import CellAdapter
from column_registry import ColumnRegistry
from cursor_state import CursorState
from record_store import RecordStore


@dataclass
class ViewContext:
    columns: ColumnRegistry = field(default_factory=ColumnRegistry)
    records: RecordStore = field(default_factory=RecordStore)
    cursor: CursorState = field(default_factory=CursorState)
    callbacks: CallbackRegistry = field(default_factory=CallbackRegistry)
    adapter: CellAdapter = field(default_factory=CellAdapter)

    enabled: bool = True
    read_only: bool = True

    # Applied sort chain, most significant first: [(column key, ascending)]
    sort_keys: list = field(default_factory=list)

    row_jump_percent: float = 0.05
    col_jump_percent: float = 0.20

    def sync_extents(self):
        self.cursor.update_extents(len(self.columns), len(self.records))
        self.sort_keys = [(k, asc) for k, asc in self.sort_keys if k in self.columns]

