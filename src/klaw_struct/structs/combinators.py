"""Combinator structs: build larger structs out of smaller ones.

Combinators are fail-fast. The first failing child is returned at once, with
the child's key or index prepended to its path, so the final path reads
root-to-leaf. Inputs are never mutated; outputs are fresh containers.
"""

from __future__ import annotations

from typing import Any

from klaw_struct._config import logging_enabled
from klaw_struct._logging import get_logger
from klaw_struct.collection import List
from klaw_struct.guards import is_array, is_object
from klaw_struct.result import Err, Ok
from klaw_struct.structs.core import Shape, Struct
from klaw_struct.structs.error import ErrorKind, StructError, create_error

__all__ = ['array', 'defaulted', 'list_', 'object_']


def array[T](element: Struct[T]) -> Struct[list[T]]:
    """Build a struct for a list or tuple whose elements all pass ``element``.

    Examples:
        >>> from klaw_struct import number
        >>> array(number)([1, 2])
        Ok(value=[1, 2])
        >>> array(number)([1, 'x']).unwrap_err().path
        ('1',)
    """

    def validate(input: Any) -> Ok[list[T]] | Err[StructError]:  # noqa: A002
        if not is_array(input):
            return Err(create_error(ErrorKind.ASSIGNMENT, input, expected='array'))
        output: list[T] = []
        for index, item in enumerate(input):
            result = element(item)
            if isinstance(result, Err):
                return Err(result.error.with_parent(str(index)))
            output.append(result.value)
        return Ok(output)

    return validate


def list_[T](element: Struct[T]) -> Struct[List[T]]:
    """Like :func:`array`, but the output is wrapped in a ``List``."""
    struct = array(element)

    def validate(input: Any) -> Ok[List[T]] | Err[StructError]:  # noqa: A002
        return struct(input).map(List.of)

    return validate


def object_(shape: Shape) -> Struct[dict[str, Any]]:
    """Build a struct for a dict with the keys declared in ``shape``.

    Keys are checked in declaration order. A missing key is read as ``None``,
    so optional fields need a child struct that accepts ``None`` (for example
    :func:`defaulted`). Undeclared keys are dropped from the output.

    Examples:
        >>> from klaw_struct import number, string
        >>> point = object_({'name': string, 'x': number})
        >>> point({'name': 'a', 'x': 1, 'extra': True})
        Ok(value={'name': 'a', 'x': 1})
    """
    entries = tuple(shape.items())

    def validate(input: Any) -> Ok[dict[str, Any]] | Err[StructError]:  # noqa: A002
        if not is_object(input):
            return Err(create_error(ErrorKind.ASSIGNMENT, input, expected='object'))
        output: dict[str, Any] = {}
        for key, struct in entries:
            result = struct(input.get(key))
            if isinstance(result, Err):
                return Err(result.error.with_parent(key))
            output[key] = result.value
        return Ok(output)

    return validate


def defaulted[T](struct: Struct[T], default: T) -> Struct[T]:
    """Run ``struct`` and substitute ``default`` on any failure.

    Every error kind is replaced, including a present value of the wrong
    type, not only a missing one.

    Examples:
        >>> from klaw_struct import number
        >>> defaulted(number, 0)(None)
        Ok(value=0)
    """

    def fallback(error: StructError) -> Ok[T]:
        if logging_enabled():
            get_logger(__name__).debug(
                'struct.defaulted',
                kind=error.kind.value,
                path=error.dotted_path,
                message=error.message,
            )
        return Ok(default)

    def validate(input: Any) -> Ok[T] | Err[StructError]:  # noqa: A002
        return struct(input).or_else(fallback)

    return validate
