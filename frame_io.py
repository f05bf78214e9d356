import numpy as np
import pandas as pd

from cell_values import is_absent
from column_registry import ColumnDef


def _python_scalar(value):
    if isinstance(value, np.generic):
        return value.item()
    return value


def records_from_frame(df: pd.DataFrame, alignment=None):
    """Split a DataFrame into column definitions and sparse records.

    Missing cells are left out of the records; numpy scalars become plain
    Python values so they compare against values pushed by the host.
    """
    columns = []
    for col in df.columns:
        key = str(col)
        if alignment is None:
            columns.append(ColumnDef(key=key, title=key))
        else:
            columns.append(ColumnDef(key=key, title=key, alignment=alignment))

    keys = [str(col) for col in df.columns]
    records = []
    for row in df.itertuples(index=False, name=None):
        record = {}
        for key, val in zip(keys, row):
            if is_absent(val):
                continue
            record[key] = _python_scalar(val)
        records.append(record)
    return columns, records


def records_to_frame(keys, records) -> pd.DataFrame:
    """Build a DataFrame in column order; absent cells become NaN."""
    keys = list(keys)
    rows = []
    for record in records:
        rows.append([np.nan if is_absent(record.get(k)) else record.get(k) for k in keys])
    if not rows:
        return pd.DataFrame(columns=keys)
    return pd.DataFrame(rows, columns=keys)
