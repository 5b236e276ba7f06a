"""Result: success or failure as data, ``Ok[T] | Err[E]``.

Every struct returns a Result whose error side is a ``StructError``. When an
``Err`` is unwrapped, the wrapped error is chained as ``__cause__`` of the
``RuntimeError``: exceptions directly, struct errors via ``to_exception()``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

if TYPE_CHECKING:
    from klaw_struct.option import NothingType, Some

__all__ = ['Err', 'Ok', 'Result', 'collect']


def _as_cause(error: object) -> BaseException | None:
    if isinstance(error, BaseException):
        return error
    to_exception = getattr(error, 'to_exception', None)
    if callable(to_exception):
        return to_exception()
    return None


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """The success variant.

    Examples:
        >>> Ok(2).map(lambda x: x * 10)
        Ok(value=20)
        >>> Ok(2).and_then(lambda x: Err('odd') if x % 2 else Ok(x))
        Ok(value=2)
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Always True; narrows the Result to ``Ok[T]`` for type checkers."""
        return True

    def is_err(self) -> TypeIs[Err[object]]:
        """Always False for a success."""
        return False

    def is_ok_and(self, pred: Callable[[T], bool]) -> bool:
        """Test the success value against ``pred``.

        Args:
            pred: Predicate applied to the value.

        Returns:
            Whatever ``pred(value)`` returns.
        """
        return pred(self.value)

    def is_err_and(self, _pred: Callable[[Any], bool]) -> bool:
        """False, and the predicate is never called."""
        return False

    def match[O](self, *, ok: Callable[[T], O], err: Callable[[Any], O]) -> O:  # noqa: ARG002
        """Call ``ok(value)``; ``err`` is ignored."""
        return ok(self.value)

    def unwrap(self) -> T:
        """Return the success value. Never raises on Ok."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the success value; ``default`` is only used by Err."""
        return self.value

    def unwrap_or_else(self, f: Callable[[Any], T]) -> T:  # noqa: ARG002
        """Return the success value without calling ``f``."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the success value; the message is only used by Err."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise, since a success carries no error.

        Raises:
            RuntimeError: Always, naming the success value.
        """
        raise RuntimeError(f'Called unwrap_err on Ok: {self.value!r}')

    def expect_err(self, msg: str) -> NoReturn:
        """Raise ``RuntimeError`` reading ``'<msg>: <value!r>'``."""
        raise RuntimeError(f'{msg}: {self.value!r}')

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Transform the success value.

        Args:
            f: Transformation for the value.

        Returns:
            A new Ok holding ``f(value)``.
        """
        return Ok(f(self.value))

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return ``f(value)``; ``default`` is not used."""
        return f(self.value)

    def map_or_else[U](self, default: Callable[[Any], U], f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return ``f(value)`` without calling ``default``."""
        return f(self.value)

    def map_err[F](self, _f: Callable[[Any], F]) -> Ok[T]:
        """Keep this Ok; there is no error to rewrite."""
        return self

    def inspect(self, f: Callable[[T], Any]) -> Ok[T]:
        """Pass the value to ``f`` for its side effect, then return this Ok."""
        f(self.value)
        return self

    def inspect_err(self, _f: Callable[[Any], Any]) -> Ok[T]:
        """Keep this Ok; ``f`` is not called."""
        return self

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Feed the value into the next fallible step.

        Args:
            f: Step returning a Result for the value.

        Returns:
            The Result produced by ``f``, not re-wrapped.
        """
        return f(self.value)

    def or_else[F](self, _f: Callable[[Any], Ok[T] | Err[F]]) -> Ok[T]:
        """Keep this Ok; the recovery step is skipped."""
        return self

    def ok(self) -> Some[T]:
        """Keep the success side as ``Some(value)``."""
        from klaw_struct.option import Some

        return Some(self.value)

    def err(self) -> NothingType:
        """Nothing, since there is no error side."""
        from klaw_struct.option import Nothing

        return Nothing

    def and_[U, E](self, other: Ok[U] | Err[E]) -> Ok[U] | Err[E]:
        """Give back ``other``, since this side succeeded."""
        return other

    def or_[F](self, _other: Ok[T] | Err[F]) -> Ok[T]:
        """Keep this Ok and ignore ``other``."""
        return self


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """The failure variant.

    Recovery goes through ``or_else`` (return a new Result), ``unwrap_or_else``
    (compute a plain value) or ``map_or_else``; each hands the error to the
    callback. ``unwrap`` and ``expect`` raise ``RuntimeError``.

    Examples:
        >>> Err('missing').unwrap_or_else(len)
        7
        >>> Err('missing').or_else(lambda e: Ok(e.upper()))
        Ok(value='MISSING')
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[object]]:
        """Always False for a failure."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Always True; narrows the Result to ``Err[E]`` for type checkers."""
        return True

    def is_ok_and(self, _pred: Callable[[Any], bool]) -> bool:
        """False, and the predicate is never called."""
        return False

    def is_err_and(self, pred: Callable[[E], bool]) -> bool:
        """Test the error against ``pred``, e.g. to check its kind."""
        return pred(self.error)

    def match[O](self, *, ok: Callable[[Any], O], err: Callable[[E], O]) -> O:  # noqa: ARG002
        """Call ``err(error)``; ``ok`` is ignored."""
        return err(self.error)

    def unwrap(self) -> NoReturn:
        """Raise ``RuntimeError`` chained to the wrapped error when possible.

        Raises:
            RuntimeError: Always, naming the error.
        """
        raise RuntimeError(f'Called unwrap on Err: {self.error!r}') from _as_cause(self.error)

    def unwrap_or[T](self, default: T) -> T:
        """Return ``default``."""
        return default

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute the fallback from the error with ``f(error)``."""
        return f(self.error)

    def expect(self, msg: str) -> NoReturn:
        """Raise ``RuntimeError`` reading ``'<msg>: <error!r>'``, chained like ``unwrap``."""
        raise RuntimeError(f'{msg}: {self.error!r}') from _as_cause(self.error)

    def unwrap_err(self) -> E:
        """Return the wrapped error."""
        return self.error

    def expect_err(self, _msg: str) -> E:
        """Return the wrapped error; the message is only used by Ok."""
        return self.error

    def map[T, U](self, _f: Callable[[T], U]) -> Err[E]:
        """Stay Err; ``f`` is not called."""
        return self

    def map_or[U](self, default: U, _f: Callable[[Any], U]) -> U:
        """Return ``default`` since there is no value to map."""
        return default

    def map_or_else[U](self, default: Callable[[E], U], _f: Callable[[Any], U]) -> U:
        """Return ``default(error)``."""
        return default(self.error)

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Rewrite the error, e.g. to attach context for the caller.

        Args:
            f: Transformation for the error.

        Returns:
            A new Err holding ``f(error)``.
        """
        return Err(f(self.error))

    def inspect(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Stay Err; ``f`` is not called."""
        return self

    def inspect_err(self, f: Callable[[E], Any]) -> Err[E]:
        """Pass the error to ``f`` for its side effect, then return this Err."""
        f(self.error)
        return self

    def and_then[T, U](self, _f: Callable[[T], Ok[U] | Err[E]]) -> Err[E]:
        """Short-circuit the chain."""
        return self

    def or_else[T, F](self, f: Callable[[E], Ok[T] | Err[F]]) -> Ok[T] | Err[F]:
        """Recover by handing the error to ``f``.

        Args:
            f: Step receiving the error and returning a new Result.

        Returns:
            The Result produced by ``f``.
        """
        return f(self.error)

    def ok(self) -> NothingType:
        """Nothing, since there is no success side."""
        from klaw_struct.option import Nothing

        return Nothing

    def err(self) -> Some[E]:
        """Keep the failure side as ``Some(error)``."""
        from klaw_struct.option import Some

        return Some(self.error)

    def and_[U](self, _other: Ok[U] | Err[E]) -> Err[E]:
        """Stay Err whatever ``other`` is."""
        return self

    def or_[T, F](self, other: Ok[T] | Err[F]) -> Ok[T] | Err[F]:
        """Fall back to ``other``."""
        return other


type Result[T, E = Exception] = Ok[T] | Err[E]


def collect[T, E](results: Iterable[Ok[T] | Err[E]]) -> Ok[list[T]] | Err[E]:
    """Turn many Results into one, stopping at the first Err.

    Results after the first failure are not consumed.

    Examples:
        >>> from klaw_struct import number
        >>> collect(number(x) for x in [1, 2]).unwrap()
        [1, 2]
        >>> collect(number(x) for x in [1, 'a']).unwrap_err().message
        "Type 'string' is not assignable to type 'number'."
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)
