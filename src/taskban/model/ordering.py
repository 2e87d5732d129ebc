"""Pure reordering primitives.

Both functions assume valid indices. Callers check bounds first.
"""

from __future__ import annotations

from typing import Sequence, TypeVar

T = TypeVar("T")


def reorder(sequence: Sequence[T], from_index: int, to_index: int) -> tuple[T, ...]:
    """Move the element at from_index to to_index, returning a new tuple."""
    result = list(sequence)
    item = result.pop(from_index)
    result.insert(to_index, item)
    return tuple(result)


def move_between(
    source: Sequence[T],
    dest: Sequence[T],
    source_index: int,
    dest_index: int,
) -> tuple[tuple[T, ...], tuple[T, ...]]:
    """Move an element from source to dest. Returns (new_source, new_dest)."""
    new_source = list(source)
    new_dest = list(dest)
    item = new_source.pop(source_index)
    new_dest.insert(dest_index, item)
    return tuple(new_source), tuple(new_dest)
