"""
Display ordering for content records.

Albums carry an optional numeric ``index`` in their front matter. Records
with an index come first in ascending order; records without one follow in
the order they were encountered.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from functools import cmp_to_key
from typing import Any, TypeVar

T = TypeVar("T")


def index_of(item: Any) -> int | float | None:
    """Return the display index of a record, mapping, or object.

    Anything that is not an int or float (``None``, strings, booleans)
    counts as absent.
    """
    if isinstance(item, Mapping):
        value = item.get("index")
    else:
        value = getattr(item, "index", None)

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if value != value:  # NaN
        return None
    return value


def compare_by_index(a: Any, b: Any) -> int:
    """Three-way comparison on display index, missing indexes last."""
    a_index = index_of(a)
    b_index = index_of(b)

    if a_index is None and b_index is None:
        return 0
    if a_index is None:
        return 1
    if b_index is None:
        return -1
    if a_index < b_index:
        return -1
    if a_index > b_index:
        return 1
    return 0


def sort_by_index(items: Iterable[T]) -> list[T]:
    """Return a new list of *items* in display order.

    ``sorted`` is stable, so equal and missing indexes keep their input order.
    """
    return sorted(items, key=cmp_to_key(compare_by_index))
