"""Generic helpers over finite iterables.

Every helper accepts any finite iterable, never mutates it, and returns a new
``list`` (or an Option / plain value for lookups). Index arguments may be
negative to count from the end.
"""

from __future__ import annotations

import functools
import random
from collections.abc import Callable, Iterable
from typing import Any

from klaw_struct.guards import is_array
from klaw_struct.option import Nothing, NothingType, Some

__all__ = [
    'append',
    'at',
    'compact',
    'concat',
    'drop',
    'each',
    'filter_',
    'find',
    'find_index',
    'find_last',
    'find_last_index',
    'first',
    'flat',
    'flat_map',
    'includes',
    'insert',
    'last',
    'map_',
    'move',
    'prepend',
    'reduce',
    'reduce_right',
    'remove',
    'reverse',
    'shuffle',
    'sort',
    'swap',
    'take',
    'to_list',
    'unique',
]


def _resolve_index(length: int, index: int) -> int | None:
    """Normalize a possibly negative index, or None if it is out of bounds."""
    if index < 0:
        index += length
    if 0 <= index < length:
        return index
    return None


def to_list[T](iterable: Iterable[T]) -> list[T]:
    """Copy an iterable into a new list."""
    return list(iterable)


def each[T](iterable: Iterable[T], f: Callable[[T], Any]) -> None:
    """Call f on every element."""
    for item in iterable:
        f(item)


def map_[T, U](iterable: Iterable[T], f: Callable[[T], U]) -> list[U]:
    return [f(item) for item in iterable]


def filter_[T](iterable: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    return [item for item in iterable if predicate(item)]


def find[T](iterable: Iterable[T], predicate: Callable[[T], bool]) -> Some[T] | NothingType:
    """Return the first element matching the predicate as an Option."""
    for item in iterable:
        if predicate(item):
            return Some(item)
    return Nothing


def find_last[T](iterable: Iterable[T], predicate: Callable[[T], bool]) -> Some[T] | NothingType:
    """Return the last element matching the predicate as an Option."""
    return find(reverse(iterable), predicate)


def find_index[T](iterable: Iterable[T], predicate: Callable[[T], bool]) -> Some[int] | NothingType:
    """Return the index of the first matching element as an Option."""
    for index, item in enumerate(iterable):
        if predicate(item):
            return Some(index)
    return Nothing


def find_last_index[T](iterable: Iterable[T], predicate: Callable[[T], bool]) -> Some[int] | NothingType:
    """Return the index of the last matching element as an Option."""
    items = to_list(iterable)
    for index in range(len(items) - 1, -1, -1):
        if predicate(items[index]):
            return Some(index)
    return Nothing


def flat(iterable: Iterable[Any], depth: int = 1) -> list[Any]:
    """Concatenate nested lists and tuples into one list, up to ``depth`` levels."""
    result: list[Any] = []
    for item in iterable:
        if depth > 0 and is_array(item):
            result.extend(flat(item, depth - 1))
        else:
            result.append(item)
    return result


def flat_map[T, U](iterable: Iterable[T], f: Callable[[T], U | Iterable[U]]) -> list[U]:
    """Map each element then flatten the results one level."""
    return flat(map_(iterable, f), 1)


def concat[T](iterable: Iterable[T], *others: Iterable[T]) -> list[T]:
    result = to_list(iterable)
    for other in others:
        result.extend(other)
    return result


def at[T](iterable: Iterable[T], index: int) -> Some[T] | NothingType:
    """Return the element at ``index`` as an Option."""
    items = to_list(iterable)
    resolved = _resolve_index(len(items), index)
    if resolved is None:
        return Nothing
    return Some(items[resolved])


def reduce[T, U](iterable: Iterable[T], initial: U, f: Callable[[U, T], U]) -> U:
    """Fold elements left to right starting from ``initial``."""
    return functools.reduce(f, iterable, initial)


def reduce_right[T, U](iterable: Iterable[T], initial: U, f: Callable[[U, T], U]) -> U:
    """Fold elements right to left starting from ``initial``."""
    return functools.reduce(f, reverse(iterable), initial)


def first[T](iterable: Iterable[T]) -> Some[T] | NothingType:
    return at(iterable, 0)


def last[T](iterable: Iterable[T]) -> Some[T] | NothingType:
    return at(iterable, -1)


def compact[T](iterable: Iterable[T | None]) -> list[T]:
    """Drop every ``None`` element."""
    return [item for item in iterable if item is not None]


def unique[T](iterable: Iterable[T]) -> list[T]:
    """Remove duplicates, keeping the first occurrence of each element."""
    items = to_list(iterable)
    try:
        return list(dict.fromkeys(items))
    except TypeError:
        # unhashable elements
        result: list[T] = []
        for item in items:
            if item not in result:
                result.append(item)
        return result


def shuffle[T](iterable: Iterable[T]) -> list[T]:
    """Return the elements in random order (Fisher-Yates)."""
    items = to_list(iterable)
    random.shuffle(items)
    return items


def append[T](iterable: Iterable[T], *items: T) -> list[T]:
    return [*iterable, *items]


def prepend[T](iterable: Iterable[T], *items: T) -> list[T]:
    return [*items, *iterable]


def take[T](iterable: Iterable[T], count: int) -> list[T]:
    """Return the first ``count`` elements. A negative count takes nothing."""
    if count < 0:
        return []
    return to_list(iterable)[:count]


def drop[T](iterable: Iterable[T], count: int) -> list[T]:
    """Return everything after the first ``count`` elements. A negative count keeps nothing."""
    if count < 0:
        return []
    return to_list(iterable)[count:]


def insert[T](iterable: Iterable[T], item: T, index: int) -> list[T]:
    """Insert ``item`` before ``index``. Out-of-bounds indexes are skipped."""
    items = to_list(iterable)
    resolved = _resolve_index(len(items), index)
    if resolved is not None:
        items.insert(resolved, item)
    return items


def remove[T](iterable: Iterable[T], index: int) -> list[T]:
    """Remove the element at ``index``. Out-of-bounds indexes are skipped."""
    items = to_list(iterable)
    resolved = _resolve_index(len(items), index)
    if resolved is not None:
        del items[resolved]
    return items


def swap[T](iterable: Iterable[T], a: int, b: int) -> list[T]:
    """Swap two elements. Skipped if either index is out of bounds."""
    items = to_list(iterable)
    i = _resolve_index(len(items), a)
    j = _resolve_index(len(items), b)
    if i is not None and j is not None:
        items[i], items[j] = items[j], items[i]
    return items


def move[T](iterable: Iterable[T], src: int, dst: int) -> list[T]:
    """Move the element at ``src`` so it ends up at ``dst``. Skipped if either is out of bounds."""
    items = to_list(iterable)
    i = _resolve_index(len(items), src)
    j = _resolve_index(len(items), dst)
    if i is not None and j is not None:
        items.insert(j, items.pop(i))
    return items


def sort[T](iterable: Iterable[T], key: Callable[[T], Any] | None = None, *, reverse: bool = False) -> list[T]:
    return sorted(iterable, key=key, reverse=reverse)  # type: ignore[type-var, arg-type]


def reverse[T](iterable: Iterable[T]) -> list[T]:
    items = to_list(iterable)
    items.reverse()
    return items


def includes[T](iterable: Iterable[T], item: T, start: int = 0) -> bool:
    """Return True if ``item`` occurs at or after position ``start``."""
    return item in to_list(iterable)[start:]
