"""Struct error types: dual struct+exception for Result and raise-based code."""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar

import msgspec

from klaw_struct.guards import type_of

__all__ = [
    'AssignmentError',
    'ErrorKind',
    'GenericError',
    'StructError',
    'StructValidationError',
    'ValidationError',
    'create_error',
]


class ErrorKind(Enum):
    """Category of a struct failure."""

    ASSIGNMENT = 'assignment'
    VALIDATION = 'validation'
    GENERIC = 'generic'


class _BaseError(msgspec.Struct, frozen=True, kw_only=True, tag_field='kind'):
    """Fields shared by every struct error.

    Attributes:
        input: The raw offending value.
        message: Human-readable description.
        path: Keys and indices from the root input down to the failure.
    """

    kind: ClassVar[ErrorKind]

    input: Any
    message: str
    path: tuple[str, ...] = ()

    @property
    def dotted_path(self) -> str:
        """The path joined with dots, empty at the root."""
        return '.'.join(self.path)

    def with_parent(self, key: str) -> Any:
        """Return a copy located one level deeper, under ``key``."""
        return msgspec.structs.replace(self, path=(key, *self.path))

    def to_exception(self) -> StructValidationError:
        """Convert to exception for raise-based code."""
        return StructValidationError(self)  # type: ignore[arg-type]


class AssignmentError(_BaseError, frozen=True, kw_only=True, tag='assignment'):
    """Runtime type of the input does not match the expected type."""

    kind: ClassVar[ErrorKind] = ErrorKind.ASSIGNMENT

    expected: str
    actual: str


class ValidationError(_BaseError, frozen=True, kw_only=True, tag='validation'):
    """Input has the right type but violates a constraint."""

    kind: ClassVar[ErrorKind] = ErrorKind.VALIDATION


class GenericError(_BaseError, frozen=True, kw_only=True, tag='generic'):
    """Validator-defined failure outside the other two kinds."""

    kind: ClassVar[ErrorKind] = ErrorKind.GENERIC


type StructError = AssignmentError | ValidationError | GenericError


class StructValidationError(Exception):
    """Struct validation failed - exception variant."""

    def __init__(self, error: StructError) -> None:
        self.error = error
        where = error.dotted_path
        super().__init__(f'{where}: {error.message}' if where else error.message)

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind

    @property
    def path(self) -> tuple[str, ...]:
        return self.error.path

    def to_struct(self) -> StructError:
        """Convert to struct for Result-based code."""
        return self.error


def create_error(
    kind: ErrorKind,
    input: Any,  # noqa: A002
    *,
    expected: str | None = None,
    message: str | None = None,
) -> StructError:
    """Build a root-level struct error of the given kind.

    Assignment errors derive ``actual`` from the input's type tag and, unless
    a message is given, describe the mismatch.

    Raises:
        ValueError: If an assignment error is requested without ``expected``.
    """
    if kind is ErrorKind.ASSIGNMENT:
        if expected is None:
            msg = 'Assignment errors require an expected type'
            raise ValueError(msg)
        actual = type_of(input)
        return AssignmentError(
            input=input,
            expected=expected,
            actual=actual,
            message=message or f"Type '{actual}' is not assignable to type '{expected}'.",
        )
    if kind is ErrorKind.VALIDATION:
        return ValidationError(input=input, message=message or '')
    return GenericError(input=input, message=message or '')
