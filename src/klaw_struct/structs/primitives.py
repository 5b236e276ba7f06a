"""Primitive structs: validate and narrow a single scalar value.

Strict structs check the runtime type as-is. The ``as_*`` variants coerce the
input first, then hand the coerced value to the strict struct.
"""

from __future__ import annotations

import datetime
import math
from collections.abc import Sequence
from typing import Any

from klaw_struct.guards import is_boolean, is_date, is_number, is_string
from klaw_struct.result import Err, Ok
from klaw_struct.structs.core import Struct
from klaw_struct.structs.error import ErrorKind, StructError, create_error

__all__ = [
    'as_date',
    'as_number',
    'as_string',
    'boolean',
    'date',
    'enums',
    'number',
    'string',
    'unknown',
]

_INVALID_DATE = "The broader type is 'date' but it is actually invalid."


def _is_numeric(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def string(input: Any) -> Ok[str] | Err[StructError]:  # noqa: A002
    if is_string(input):
        return Ok(input)
    return Err(create_error(ErrorKind.ASSIGNMENT, input, expected='string'))


def as_string(input: Any) -> Ok[str] | Err[StructError]:  # noqa: A002
    """Coerce with ``str()``.

    An object whose ``__str__`` raises yields a generic error instead of
    propagating the exception.
    """
    try:
        text = str(input)
    except Exception as exc:  # noqa: BLE001
        return Err(create_error(ErrorKind.GENERIC, input, message=f"Cannot convert to string: {exc!r}"))
    return string(text)


def number(input: Any) -> Ok[int | float] | Err[StructError]:  # noqa: A002
    """Accept finite ints and floats. ``bool`` is not a number."""
    if not _is_numeric(input):
        return Err(create_error(ErrorKind.ASSIGNMENT, input, expected='number'))
    if isinstance(input, float) and not math.isfinite(input):
        return Err(
            create_error(
                ErrorKind.VALIDATION,
                input,
                message=f"The broader type is 'number' but the narrower type is '{input}'.",
            )
        )
    return Ok(input)


def _coerce_number(value: Any) -> int | float:
    if isinstance(value, bool):
        return int(value)
    if _is_numeric(value):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        return math.nan


def as_number(input: Any) -> Ok[int | float] | Err[StructError]:  # noqa: A002
    """Coerce bools, numeric strings and ``float()``-convertible objects.

    Anything that cannot be converted becomes NaN and fails validation.
    """
    return number(_coerce_number(input))


def boolean(input: Any) -> Ok[bool] | Err[StructError]:  # noqa: A002
    if is_boolean(input):
        return Ok(input)
    return Err(create_error(ErrorKind.ASSIGNMENT, input, expected='boolean'))


def date(input: Any) -> Ok[datetime.date] | Err[StructError]:  # noqa: A002
    """Accept ``datetime.date`` and ``datetime.datetime`` instances."""
    if is_date(input):
        return Ok(input)
    return Err(create_error(ErrorKind.ASSIGNMENT, input, expected='date'))


def as_date(input: Any) -> Ok[datetime.date] | Err[StructError]:  # noqa: A002
    """Parse ISO 8601 strings and POSIX timestamps (UTC) before checking.

    Non-finite numbers and other inputs are checked as-is, so they fail as
    assignment errors.
    """
    try:
        if is_string(input):
            return date(datetime.datetime.fromisoformat(input))
        if is_number(input):
            return date(datetime.datetime.fromtimestamp(input, tz=datetime.UTC))
    except (ValueError, OverflowError, OSError):
        return Err(create_error(ErrorKind.VALIDATION, input, message=_INVALID_DATE))
    return date(input)


def enums[T: (str, int, float)](values: Sequence[T]) -> Struct[T]:
    """Build a struct accepting only the given strings or numbers.

    Examples:
        >>> color = enums(['red', 'green'])
        >>> color('red')
        Ok(value='red')
        >>> color('blue').unwrap_err().message
        'Expecting one of red | green'
    """
    allowed = tuple(values)
    message = f'Expecting one of {" | ".join(str(v) for v in allowed)}'

    def validate(input: Any) -> Ok[T] | Err[StructError]:  # noqa: A002
        if not (is_string(input) or is_number(input)):
            return Err(create_error(ErrorKind.ASSIGNMENT, input, expected='string | number'))
        if input in allowed:
            return Ok(input)
        return Err(create_error(ErrorKind.VALIDATION, input, message=message))

    return validate


def unknown(input: Any) -> Ok[Any]:  # noqa: A002
    """Accept anything unchanged."""
    return Ok(input)
