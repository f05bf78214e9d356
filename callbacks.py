from typing import Any, Callable, Optional

OnSortCallback = Callable[[Any, str, Any], None]
IndexCallback = Callable[[Any, int, int], None]


class CallbackRegistry:
    """Single-slot host handlers for sort, submit and select events.

    Handlers are called in-line with the host's context object; whatever they
    raise reaches the caller of the triggering operation.
    """

    def __init__(self):
        self.on_sort: Optional[OnSortCallback] = None
        self.on_submit: Optional[IndexCallback] = None
        self.on_select: Optional[IndexCallback] = None

    def set_on_sort(self, cb: Optional[OnSortCallback]):
        self.on_sort = cb

    def set_on_submit(self, cb: Optional[IndexCallback]):
        self.on_submit = cb

    def set_on_select(self, cb: Optional[IndexCallback]):
        self.on_select = cb

    def clear(self):
        self.on_sort = None
        self.on_submit = None
        self.on_select = None

    def emit_sort(self, context, column_key: str, ordering) -> bool:
        if self.on_sort is None:
            return False
        self.on_sort(context, column_key, ordering)
        return True

    def emit_submit(self, context, row: int, col: int) -> bool:
        if self.on_submit is None:
            return False
        self.on_submit(context, row, col)
        return True

    def emit_select(self, context, row: int, col: int) -> bool:
        if self.on_select is None:
            return False
        self.on_select(context, row, col)
        return True
