"""Struct signature and the raise-based entry points."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from klaw_struct._config import logging_enabled
from klaw_struct._logging import get_logger
from klaw_struct.result import Err, Ok
from klaw_struct.structs.error import StructError, StructValidationError

__all__ = ['Shape', 'Struct', 'is_valid', 'parse']

type Struct[O] = Callable[[Any], Ok[O] | Err[StructError]]
"""A pure validating function from an arbitrary value to a Result."""

type Shape = Mapping[str, Struct[Any]]


def parse[O](struct: Struct[O], value: Any) -> O:
    """Validate value and return the typed output.

    Args:
        struct: The struct to run.
        value: Untrusted input.

    Returns:
        The validated value.

    Raises:
        StructValidationError: If the struct rejects the value.

    Examples:
        >>> from klaw_struct import number
        >>> parse(number, 3)
        3
    """
    result = struct(value)
    if isinstance(result, Ok):
        return result.value
    error = result.error
    if logging_enabled():
        get_logger(__name__).debug('struct.parse_failed', kind=error.kind.value, path=error.dotted_path)
    raise error.to_exception()


def is_valid(struct: Struct[Any], value: Any) -> bool:
    """Return True if the struct accepts value."""
    return struct(value).is_ok()
