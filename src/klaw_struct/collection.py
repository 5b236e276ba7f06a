"""List: an owned, mutable sequence with a fluent functional API.

Methods fall into two families. Pure operations leave the list untouched and
return a new ``List`` (or a plain value / Option). In-place operations mutate
the backing store and return ``self`` for chaining, except ``pop`` and
``shift`` which return the removed element as an Option.

A ``List`` is not safe for concurrent mutation; it belongs to whoever holds
the reference.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Self

from klaw_struct import iterable as it
from klaw_struct.option import Nothing, NothingType, Some

__all__ = ['List']


class List[T]:
    """Ordered, zero-indexed, resizable container.

    Examples:
        >>> items = List.of([3, 1, 2])
        >>> items.sort().to_list()
        [1, 2, 3]
        >>> items.append(4).to_list()
        [3, 1, 2, 4]
        >>> items.pop()
        Some(value=4)
    """

    __slots__ = ('_items',)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    @classmethod
    def empty(cls) -> List[T]:
        """Create an empty List."""
        return cls()

    @classmethod
    def of(cls, items: Iterable[T]) -> List[T]:
        """Create a List holding a copy of ``items``."""
        return cls(items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, List):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f'List({self._items!r})'

    # --- Pure operations ---

    def map[U](self, f: Callable[[T], U]) -> List[U]:
        return List(it.map_(self._items, f))

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        return List(it.filter_(self._items, predicate))

    def find(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return the first element matching the predicate as an Option."""
        return it.find(self._items, predicate)

    def find_last(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return the last element matching the predicate as an Option."""
        return it.find_last(self._items, predicate)

    def find_index(self, predicate: Callable[[T], bool]) -> Some[int] | NothingType:
        return it.find_index(self._items, predicate)

    def find_last_index(self, predicate: Callable[[T], bool]) -> Some[int] | NothingType:
        return it.find_last_index(self._items, predicate)

    def flat(self, depth: int = 1) -> List[Any]:
        """Flatten nested lists and tuples up to ``depth`` levels."""
        return List(it.flat(self._items, depth))

    def flat_map[U](self, f: Callable[[T], U | Iterable[U]]) -> List[U]:
        """Map then flatten one level."""
        return List(it.flat_map(self._items, f))

    def concat(self, *others: Iterable[T]) -> List[T]:
        return List(it.concat(self._items, *others))

    def at(self, index: int) -> Some[T] | NothingType:
        """Return the element at ``index`` (negative counts from the end) as an Option."""
        return it.at(self._items, index)

    def reduce[U](self, initial: U, f: Callable[[U, T], U]) -> U:
        return it.reduce(self._items, initial, f)

    def reduce_right[U](self, initial: U, f: Callable[[U, T], U]) -> U:
        return it.reduce_right(self._items, initial, f)

    def first(self) -> Some[T] | NothingType:
        return it.first(self._items)

    def last(self) -> Some[T] | NothingType:
        return it.last(self._items)

    def unique(self) -> List[T]:
        return List(it.unique(self._items))

    def shuffle(self) -> List[T]:
        return List(it.shuffle(self._items))

    def take(self, count: int) -> List[T]:
        return List(it.take(self._items, count))

    def drop(self, count: int) -> List[T]:
        return List(it.drop(self._items, count))

    def sort(self, key: Callable[[T], Any] | None = None, *, reverse: bool = False) -> List[T]:
        """Return a new sorted List."""
        return List(it.sort(self._items, key, reverse=reverse))

    def reverse(self) -> List[T]:
        """Return a new reversed List."""
        return List(it.reverse(self._items))

    def includes(self, item: T, start: int = 0) -> bool:
        return it.includes(self._items, item, start)

    def compact(self) -> List[T]:
        """Return a new List without ``None`` elements."""
        return List(it.compact(self._items))

    def clone(self) -> List[T]:
        """Return a shallow copy."""
        return List(self._items)

    def to_list(self) -> list[T]:
        """Return the elements as a new builtin list."""
        return it.to_list(self._items)

    # --- Observation ---

    def each(self, f: Callable[[T], Any]) -> Self:
        it.each(self._items, f)
        return self

    def inspect(self, f: Callable[[List[T]], Any]) -> Self:
        """Call f with a snapshot of the List and return self."""
        f(self.clone())
        return self

    # --- In-place mutation ---

    def append(self, *items: T) -> Self:
        self._items.extend(items)
        return self

    def prepend(self, *items: T) -> Self:
        self._items[:0] = items
        return self

    def insert(self, item: T, index: int) -> Self:
        """Insert before ``index``. Out-of-bounds indexes leave the List unchanged."""
        self._items = it.insert(self._items, item, index)
        return self

    def remove(self, index: int) -> Self:
        """Remove the element at ``index``. Out-of-bounds indexes leave the List unchanged."""
        self._items = it.remove(self._items, index)
        return self

    def swap(self, a: int, b: int) -> Self:
        self._items = it.swap(self._items, a, b)
        return self

    def move(self, src: int, dst: int) -> Self:
        self._items = it.move(self._items, src, dst)
        return self

    def clear(self) -> Self:
        self._items.clear()
        return self

    def pop(self) -> Some[T] | NothingType:
        """Remove and return the last element as an Option."""
        if not self._items:
            return Nothing
        return Some(self._items.pop())

    def shift(self) -> Some[T] | NothingType:
        """Remove and return the first element as an Option."""
        if not self._items:
            return Nothing
        return Some(self._items.pop(0))
