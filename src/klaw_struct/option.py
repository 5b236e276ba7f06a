"""Option: a value that may be absent, as ``Some[T] | NothingType``.

Lookups in this package (``List.first``, ``List.at``, ``List.pop``, the
``find`` helpers) return an Option instead of ``None`` so that a stored
``None`` and a missing element stay distinguishable.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

if TYPE_CHECKING:
    from klaw_struct.result import Err, Ok

__all__ = ['Nothing', 'NothingType', 'Option', 'Some', 'from_optional']


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """A present value.

    ``Some(None)`` is present: it is a value that happens to be ``None``.

    Examples:
        >>> Some(3).map(lambda x: x + 1).unwrap_or(0)
        4
        >>> Some(None) == Nothing
        False
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Always True; narrows the Option to ``Some[T]`` for type checkers."""
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Always False for a present value."""
        return False

    def is_some_and(self, pred: Callable[[T], bool]) -> bool:
        """Test the held value against ``pred``.

        Args:
            pred: Predicate applied to the value.

        Returns:
            Whatever ``pred(value)`` returns.
        """
        return pred(self.value)

    def match[O](self, *, some: Callable[[T], O], none: Callable[[], O]) -> O:  # noqa: ARG002
        """Call ``some(value)``; ``none`` is ignored."""
        return some(self.value)

    def unwrap(self) -> T:
        """Return the held value. Never raises on Some."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the held value; ``default`` is only used by Nothing."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the held value without calling ``f``."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the held value; the message is only used by Nothing."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Wrap ``f(value)``. A ``None`` result stays present as ``Some(None)``.

        Args:
            f: Transformation for the held value.

        Returns:
            A new Some holding the transformed value.
        """
        return Some(f(self.value))

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return ``f(value)``; ``default`` is not used."""
        return f(self.value)

    def map_or_else[U](self, default: Callable[[], U], f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return ``f(value)`` without calling ``default``."""
        return f(self.value)

    def inspect(self, f: Callable[[T], Any]) -> Some[T]:
        """Pass the value to ``f`` for its side effect, then return this Some."""
        f(self.value)
        return self

    def and_then[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Chain a lookup that may itself come back empty.

        Args:
            f: Step returning an Option for the held value.

        Returns:
            The Option produced by ``f``, not re-wrapped.
        """
        return f(self.value)

    def or_else(self, _f: Callable[[], Some[T] | NothingType]) -> Some[T]:
        """Keep this Some; the recovery step is skipped."""
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Keep the value only while ``predicate`` holds for it."""
        return self if predicate(self.value) else Nothing

    def ok_or[E](self, _err: E) -> Ok[T]:
        """Move the value into ``Ok``."""
        from klaw_struct.result import Ok

        return Ok(self.value)

    def ok_or_else[E](self, _f: Callable[[], E]) -> Ok[T]:
        """Move the value into ``Ok`` without building an error."""
        from klaw_struct.result import Ok

        return Ok(self.value)

    def and_[U](self, other: Some[U] | NothingType) -> Some[U] | NothingType:
        """Give back ``other``, since this side is present."""
        return other

    def or_(self, _other: Some[T] | NothingType) -> Some[T]:
        """Keep this Some and ignore ``other``."""
        return self


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """The absent variant. Use the module-level ``Nothing`` instance.

    Every operation that would need a value either returns ``Nothing`` again,
    falls back to the caller's default, or raises ``RuntimeError`` (``unwrap``
    and ``expect``). Callbacks meant for a value are never invoked.
    """

    def is_some(self) -> TypeIs[Some[object]]:
        """Always False for the absent variant."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Always True; narrows the Option to ``NothingType``."""
        return True

    def is_some_and(self, _pred: Callable[[Any], bool]) -> bool:
        """False, and the predicate is never called."""
        return False

    def match[O](self, *, some: Callable[[Any], O], none: Callable[[], O]) -> O:  # noqa: ARG002
        """Call ``none()``; ``some`` is ignored."""
        return none()

    def unwrap(self) -> NoReturn:
        """Always raise ``RuntimeError``; use ``unwrap_or`` when absence is expected."""
        raise RuntimeError('Called unwrap on Nothing')

    def unwrap_or[T](self, default: T) -> T:
        """Return ``default``."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Build the fallback lazily with ``f()``."""
        return f()

    def expect(self, msg: str) -> NoReturn:
        """Raise ``RuntimeError(msg)``.

        Raises:
            RuntimeError: Always, with ``msg`` as its text.
        """
        raise RuntimeError(msg)

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Stay Nothing; ``f`` is not called."""
        return self

    def map_or[U](self, default: U, _f: Callable[[Any], U]) -> U:
        """Return ``default`` since nothing can be mapped."""
        return default

    def map_or_else[U](self, default: Callable[[], U], _f: Callable[[Any], U]) -> U:
        """Return ``default()`` since nothing can be mapped."""
        return default()

    def inspect(self, _f: Callable[[Any], Any]) -> NothingType:
        """Stay Nothing; ``f`` is not called."""
        return self

    def and_then[T, U](self, _f: Callable[[T], Some[U] | NothingType]) -> NothingType:
        """Short-circuit the chain."""
        return self

    def or_else[T](self, f: Callable[[], Some[T] | NothingType]) -> Some[T] | NothingType:
        """Recover by asking ``f`` for a replacement Option.

        Args:
            f: Zero-argument step producing the replacement.

        Returns:
            The Option produced by ``f``.
        """
        return f()

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        """Stay Nothing; the predicate is not called."""
        return self

    def ok_or[E](self, err: E) -> Err[E]:
        """Turn absence into ``Err(err)``."""
        from klaw_struct.result import Err

        return Err(err)

    def ok_or_else[E](self, f: Callable[[], E]) -> Err[E]:
        """Turn absence into ``Err(f())``, building the error lazily."""
        from klaw_struct.result import Err

        return Err(f())

    def and_[T](self, _other: Some[T] | NothingType) -> NothingType:
        """Stay Nothing whatever ``other`` is."""
        return self

    def or_[T](self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Fall back to ``other``."""
        return other


Nothing: NothingType = NothingType()
"""The shared absent value."""

type Option[T] = Some[T] | NothingType


def from_optional[T](value: T | None) -> Some[T] | NothingType:
    """Lift a nullable value: ``None`` becomes Nothing, anything else Some.

    Falsy values (``0``, ``''``, ``False``) are present.

    Examples:
        >>> from_optional({'a': 0}.get('a'))
        Some(value=0)
        >>> from_optional({'a': 0}.get('b'))
        NothingType()
    """
    if value is None:
        return Nothing
    return Some(value)
