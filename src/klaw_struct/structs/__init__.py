"""Struct validators: functions from untrusted input to Result[T, StructError]."""

from klaw_struct.structs.combinators import array, defaulted, list_, object_
from klaw_struct.structs.core import Shape, Struct, is_valid, parse
from klaw_struct.structs.error import (
    AssignmentError,
    ErrorKind,
    GenericError,
    StructError,
    StructValidationError,
    ValidationError,
    create_error,
)
from klaw_struct.structs.primitives import (
    as_date,
    as_number,
    as_string,
    boolean,
    date,
    enums,
    number,
    string,
    unknown,
)

__all__ = [
    'AssignmentError',
    'ErrorKind',
    'GenericError',
    'Shape',
    'Struct',
    'StructError',
    'StructValidationError',
    'ValidationError',
    'array',
    'as_date',
    'as_number',
    'as_string',
    'boolean',
    'create_error',
    'date',
    'defaulted',
    'enums',
    'is_valid',
    'list_',
    'number',
    'object_',
    'parse',
    'string',
    'unknown',
]
