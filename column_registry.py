from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional


class Alignment(Enum):
    START = "start"
    CENTER = "center"
    END = "end"

    @classmethod
    def parse(cls, value, default=None):
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return default if default is not None else cls.START


@dataclass(frozen=True)
class WidthPolicy:
    """Column width constraint, resolved to a ``(min_width, max_width)`` pair.

    ``max_width`` of ``None`` means unbounded. Build instances through the
    classmethods rather than the constructor.
    """

    kind: str = "auto"
    min_width: int = 0
    max_width: Optional[int] = None

    def __post_init__(self):
        if self.min_width < 0:
            raise ValueError(f"Width cannot be negative: {self.min_width}")
        if self.max_width is not None and self.max_width < self.min_width:
            raise ValueError(
                f"max_width {self.max_width} is below min_width {self.min_width}"
            )

    @classmethod
    def auto(cls):
        return cls("auto")

    @classmethod
    def min(cls, n: int):
        return cls("min", min_width=n)

    @classmethod
    def max(cls, n: int):
        if n < 0:
            raise ValueError(f"Width cannot be negative: {n}")
        return cls("max", max_width=n)

    @classmethod
    def bounded(cls, min_width: int, delta: int):
        if delta < 0:
            raise ValueError(f"Bounded width delta cannot be negative: {delta}")
        return cls("bounded", min_width=min_width, max_width=min_width + delta)

    @classmethod
    def fixed(cls, n: int):
        return cls("fixed", min_width=n, max_width=n)

    def resolve(self) -> tuple[int, Optional[int]]:
        return self.min_width, self.max_width

    def clamp(self, width: int) -> int:
        width = max(self.min_width, width)
        if self.max_width is not None:
            width = min(self.max_width, width)
        return width


@dataclass(frozen=True)
class ColumnDef:
    key: str
    title: str = ""
    width_policy: WidthPolicy = field(default_factory=WidthPolicy.auto)
    alignment: Alignment = Alignment.START

    @property
    def display_title(self) -> str:
        return self.title if self.title else self.key


class ColumnRegistry:
    """Insertion-ordered, uniquely keyed set of column definitions.

    Backed by a plain dict: lookups are hashed, iteration follows insertion
    order, replacing a key keeps its slot and deleting a key leaves the
    relative order of the others untouched.
    """

    def __init__(self, columns=None):
        self._columns: dict[str, ColumnDef] = {}
        for column in columns or ():
            self.insert(column)

    def insert(self, column: ColumnDef) -> None:
        if not isinstance(column, ColumnDef):
            raise TypeError(f"Expected ColumnDef, got {type(column).__name__}")
        if not isinstance(column.key, str):
            raise TypeError(f"Column key must be str, got {type(column.key).__name__}")
        self._columns[column.key] = column

    def remove(self, key) -> Optional[ColumnDef]:
        if not isinstance(key, str):
            return None
        return self._columns.pop(key, None)

    def remove_last(self) -> Optional[tuple[str, ColumnDef]]:
        if not self._columns:
            return None
        return self._columns.popitem()

    def clear(self) -> None:
        self._columns.clear()

    def get(self, key) -> Optional[ColumnDef]:
        if not isinstance(key, str):
            return None
        return self._columns.get(key)

    def contains(self, key) -> bool:
        return isinstance(key, str) and key in self._columns

    def count(self) -> int:
        return len(self._columns)

    def keys(self) -> list[str]:
        return list(self._columns)

    def index_of(self, key) -> Optional[int]:
        if not self.contains(key):
            return None
        for idx, existing in enumerate(self._columns):
            if existing == key:
                return idx
        return None

    def key_at(self, index: int) -> Optional[str]:
        if index < 0 or index >= len(self._columns):
            return None
        for idx, key in enumerate(self._columns):
            if idx == index:
                return key
        return None

    def __contains__(self, key) -> bool:
        return self.contains(key)

    def __len__(self) -> int:
        return len(self._columns)

    def __iter__(self) -> Iterator[tuple[str, ColumnDef]]:
        return iter(list(self._columns.items()))
