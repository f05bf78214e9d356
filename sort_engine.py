"""Stable, comparator-driven row ordering.

Sorts are incremental: the view keeps the chain of ``(key, ascending)`` pairs
applied so far and every new ``sort_by_column`` call refines it, reordering
only inside runs of adjacent rows the earlier keys left tied. Each pass is
Python's stable list sort, so rows equal on the new key never swap.
"""

from enum import Enum
from functools import cmp_to_key

from cell_values import CellAdapter, is_absent


class Ordering(Enum):
    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def from_ascending(cls, ascending: bool):
        return cls.LESS if ascending else cls.GREATER


def record_comparator(key, ascending: bool = True, adapter=None):
    """Build a ``cmp(a, b)`` over records for column ``key``.

    Absent cells sort below present ones in both directions; only the
    comparison between present values is reversed for descending order.
    """
    adapter = adapter or CellAdapter()

    def compare(a, b):
        va = a.get(key)
        vb = b.get(key)
        a_absent = is_absent(va)
        b_absent = is_absent(vb)
        if a_absent and b_absent:
            return 0
        if a_absent:
            return -1
        if b_absent:
            return 1
        result = adapter.compare(va, vb, key)
        return result if ascending else -result

    return compare


def chain_comparator(sort_keys, adapter=None):
    """Lexicographic ``cmp`` over several ``(key, ascending)`` pairs."""
    comparators = [record_comparator(k, asc, adapter) for k, asc in sort_keys]

    def compare(a, b):
        for cmp in comparators:
            result = cmp(a, b)
            if result:
                return result
        return 0

    return compare


def sort_store_by_columns(store, sort_keys, adapter=None) -> list:
    """Sort by several ``(key, ascending)`` pairs, first pair most significant.

    Returns the pairs that were applied, in the order given.
    """
    applied = list(sort_keys)
    if applied:
        store.sort(key=cmp_to_key(chain_comparator(applied, adapter)))
    return applied


def refine_store(store, prefix, key, ascending: bool = True, adapter=None) -> None:
    """Sort by ``key`` inside each run of adjacent rows tied on ``prefix``.

    Runs stay where they are and rows are never compared across a run
    boundary, so two rows equal on ``key`` keep their relative order even
    when the store drifted out of ``prefix`` order since the last sort.
    """
    tied = chain_comparator(prefix, adapter)
    by_key = cmp_to_key(record_comparator(key, ascending, adapter))
    ordered = []
    run = []
    for record in store:
        if run and tied(run[-1], record) != 0:
            ordered.extend(sorted(run, key=by_key))
            run = []
        run.append(record)
    ordered.extend(sorted(run, key=by_key))
    store.reorder(ordered)


def extend_chain(sort_keys, key, ascending: bool) -> list:
    """Add ``key`` to a sort chain.

    A key already in the chain keeps its precedence; the keys after it are
    dropped since the new pass regroups their rows.
    """
    chain = []
    for existing, asc in sort_keys:
        if existing == key:
            break
        chain.append((existing, asc))
    chain.append((key, ascending))
    return chain
