import pandas as pd


def is_absent(value) -> bool:
    if value is None:
        return True
    if not pd.api.types.is_scalar(value):
        return False
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


class CellAdapter:
    """Default item contract: how cell values render and compare per column.

    Hosts with richer cell types subclass this and pass an instance to the
    view. ``compare`` must be a total order for the values of one column.
    """

    def render(self, value, key) -> str:
        if is_absent(value):
            return ""
        return str(value)

    def compare(self, a, b, key) -> int:
        try:
            if a < b:
                return -1
            if a > b:
                return 1
            return 0
        except TypeError:
            # mixed types in one column: order by type name, then text
            left = (type(a).__name__, self.render(a, key))
            right = (type(b).__name__, self.render(b, key))
            return (left > right) - (left < right)
