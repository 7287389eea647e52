"""Reference equality by sorting the raw entries.

These never consult a hash, so they are the ground truth the hash-based
engines are checked against.
"""

from __future__ import annotations

from typing import Iterable

from .digest import Entry
from .execution import SEQUENTIAL, ExecutionMode, get_mode


def equal_by_sorting(
    x: Iterable[Entry],
    y: Iterable[Entry],
    mode: str | ExecutionMode = SEQUENTIAL,
) -> bool:
    """Multiset equality: sort copies of both collections and compare."""
    mode = get_mode(mode)
    left = [bytes(e) for e in x]
    right = [bytes(e) for e in y]
    if len(left) != len(right):
        return False
    with mode.pool() as pooled:
        return pooled.sort(left) == pooled.sort(right)


def equal_as_sets(x: Iterable[Entry], y: Iterable[Entry]) -> bool:
    """Set equality, ignoring how many times each entry occurs."""
    return {bytes(e) for e in x} == {bytes(e) for e in y}
