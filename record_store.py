from typing import Iterator, Optional


class RecordStore:
    """Ordered sequence of sparse records (column key -> cell value).

    A record's position is its row index; there is no other row identity.
    """

    def __init__(self, records=None):
        self._records: list[dict] = []
        if records is not None:
            self.extend(records)

    # ---------- structural mutation ----------
    def push(self, record) -> None:
        self._records.append(dict(record))

    def insert_at(self, index: int, record) -> int:
        index = max(0, min(index, len(self._records)))
        self._records.insert(index, dict(record))
        return index

    def extend(self, records) -> None:
        for record in records:
            self.push(record)

    def pop(self) -> Optional[dict]:
        if not self._records:
            return None
        return self._records.pop()

    def remove_at(self, index: int) -> Optional[dict]:
        if index < 0 or index >= len(self._records):
            return None
        return self._records.pop(index)

    def clear(self) -> None:
        self._records.clear()

    def sort(self, key) -> None:
        # list.sort is stable; equal keys keep their relative order
        self._records.sort(key=key)

    def reorder(self, records) -> None:
        self._records = list(records)

    # ---------- cell edits ----------
    def set_value(self, index: int, key, value) -> bool:
        record = self.get(index)
        if record is None or not isinstance(key, str):
            return False
        record[key] = value
        return True

    def clear_value(self, index: int, key) -> bool:
        record = self.get(index)
        if record is None or not isinstance(key, str) or key not in record:
            return False
        del record[key]
        return True

    # ---------- read access ----------
    def get(self, index: int) -> Optional[dict]:
        if index < 0 or index >= len(self._records):
            return None
        return self._records[index]

    def value(self, index: int, key, default=None):
        record = self.get(index)
        if record is None or not isinstance(key, str):
            return default
        return record.get(key, default)

    def count(self) -> int:
        return len(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, index: int) -> dict:
        return self._records[index]

    def __iter__(self) -> Iterator[dict]:
        return iter(list(self._records))


def unknown_keys(record, registry) -> set:
    """Keys of ``record`` that have no column in ``registry``."""
    return {key for key in record if key not in registry}
