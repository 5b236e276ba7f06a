"""Runtime type guards.

Each guard is a plain predicate that narrows ``value`` for the type checker.
``None`` is the only absent value; ``bool`` is never treated as a number.
"""

from __future__ import annotations

import datetime
import math
import re
from collections.abc import Callable
from typing import Any, TypeIs

__all__ = [
    'is_array',
    'is_boolean',
    'is_date',
    'is_function',
    'is_integer',
    'is_none',
    'is_number',
    'is_object',
    'is_present',
    'is_primitive',
    'is_regexp',
    'is_string',
    'type_of',
]

_PRIMITIVE_TYPES = (str, bytes, int, float, complex, bool)


def is_string(value: Any) -> TypeIs[str]:
    """Narrow value to ``str``."""
    return isinstance(value, str)


def is_number(value: Any) -> TypeIs[int | float]:
    """Narrow value to a finite ``int`` or ``float``. NaN and infinities are not numbers."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def is_integer(value: Any) -> TypeIs[int]:
    """Narrow value to an arbitrary precision ``int`` (excluding ``bool``)."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_boolean(value: Any) -> TypeIs[bool]:
    """Narrow value to ``bool``."""
    return isinstance(value, bool)


def is_none(value: Any) -> TypeIs[None]:
    """Narrow value to ``None``."""
    return value is None


def is_present[T](value: T | None) -> TypeIs[T]:
    """Narrow value to ``T``, excluding ``None``."""
    return value is not None


def is_primitive(value: Any) -> bool:
    """Return True for scalar builtins (str, bytes, numbers, bool) and None."""
    return value is None or isinstance(value, _PRIMITIVE_TYPES)


def is_array(value: Any) -> TypeIs[list[Any] | tuple[Any, ...]]:
    """Narrow value to an ordered sequence (``list`` or ``tuple``)."""
    return isinstance(value, list | tuple)


def is_object(value: Any) -> TypeIs[dict[Any, Any]]:
    """Narrow value to a plain mapping: exactly ``dict``.

    Subclasses such as ``OrderedDict``, ``Counter`` or a user model deriving
    from ``dict`` are class instances, not plain objects.
    """
    return type(value) is dict


def is_date(value: Any) -> TypeIs[datetime.date]:
    """Narrow value to ``datetime.date`` (``datetime.datetime`` included)."""
    return isinstance(value, datetime.date)


def is_function(value: Any) -> TypeIs[Callable[..., Any]]:
    """Narrow value to a callable."""
    return callable(value)


def is_regexp(value: Any) -> TypeIs[re.Pattern[Any]]:
    """Narrow value to a compiled regular expression."""
    return isinstance(value, re.Pattern)


def type_of(value: Any) -> str:
    """Return the canonical lowercase type tag of a value.

    Examples:
        >>> type_of(None)
        'null'
        >>> type_of([1, 2])
        'array'
        >>> type_of(3.5)
        'number'
    """
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, int | float):
        return 'number'
    if isinstance(value, str):
        return 'string'
    if isinstance(value, list | tuple):
        return 'array'
    if isinstance(value, dict):
        return 'object'
    if isinstance(value, datetime.date):
        return 'date'
    if isinstance(value, re.Pattern):
        return 'regexp'
    if callable(value) and not isinstance(value, type):
        return 'function'
    return type(value).__name__.lower()
