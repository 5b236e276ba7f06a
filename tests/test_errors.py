"""Tests for the struct error model."""

import msgspec
import pytest
from klaw_struct import (
    AssignmentError,
    ErrorKind,
    GenericError,
    StructValidationError,
    ValidationError,
    create_error,
)


class TestErrorKind:
    """Tests for the ErrorKind enum."""

    def test_values(self) -> None:
        assert ErrorKind.ASSIGNMENT.value == 'assignment'
        assert ErrorKind.VALIDATION.value == 'validation'
        assert ErrorKind.GENERIC.value == 'generic'

    def test_from_string(self) -> None:
        assert ErrorKind('generic') is ErrorKind.GENERIC


class TestCreateError:
    """Tests for create_error()."""

    def test_assignment(self) -> None:
        error = create_error(ErrorKind.ASSIGNMENT, [1], expected='string')
        assert isinstance(error, AssignmentError)
        assert error.kind is ErrorKind.ASSIGNMENT
        assert error.actual == 'array'
        assert error.expected == 'string'
        assert error.message == "Type 'array' is not assignable to type 'string'."
        assert error.path == ()

    def test_assignment_custom_message(self) -> None:
        error = create_error(ErrorKind.ASSIGNMENT, 1, expected='x', message='nope')
        assert error.message == 'nope'

    def test_assignment_requires_expected(self) -> None:
        with pytest.raises(ValueError, match='expected type'):
            create_error(ErrorKind.ASSIGNMENT, 1)

    def test_validation(self) -> None:
        error = create_error(ErrorKind.VALIDATION, 5, message='too big')
        assert isinstance(error, ValidationError)
        assert error.kind is ErrorKind.VALIDATION
        assert error.input == 5

    def test_generic_default_message(self) -> None:
        error = create_error(ErrorKind.GENERIC, None)
        assert isinstance(error, GenericError)
        assert error.message == ''


class TestErrorPath:
    """Tests for with_parent() and dotted_path."""

    def test_with_parent_prepends(self) -> None:
        error = create_error(ErrorKind.VALIDATION, 1, message='m')
        nested = error.with_parent('b').with_parent('a')
        assert nested.path == ('a', 'b')
        assert nested.dotted_path == 'a.b'

    def test_with_parent_leaves_original_untouched(self) -> None:
        error = create_error(ErrorKind.VALIDATION, 1, message='m')
        error.with_parent('a')
        assert error.path == ()

    def test_with_parent_keeps_variant_fields(self) -> None:
        error = create_error(ErrorKind.ASSIGNMENT, 1, expected='string').with_parent('0')
        assert isinstance(error, AssignmentError)
        assert error.expected == 'string'

    def test_errors_are_frozen(self) -> None:
        error = create_error(ErrorKind.GENERIC, 1, message='m')
        with pytest.raises(AttributeError):
            error.message = 'other'  # type: ignore[misc]


class TestErrorEncoding:
    """Tests for JSON encoding of the tagged union."""

    def test_kind_tag_is_encoded(self) -> None:
        error = create_error(ErrorKind.ASSIGNMENT, 1, expected='string').with_parent('a')
        payload = msgspec.json.decode(msgspec.json.encode(error))
        assert payload == {
            'kind': 'assignment',
            'input': 1,
            'message': "Type 'number' is not assignable to type 'string'.",
            'path': ['a'],
            'expected': 'string',
            'actual': 'number',
        }

    def test_decode_union(self) -> None:
        error = create_error(ErrorKind.VALIDATION, 'x', message='bad').with_parent('k')
        decoded = msgspec.json.decode(
            msgspec.json.encode(error),
            type=AssignmentError | ValidationError | GenericError,
        )
        assert decoded == error


class TestStructValidationError:
    """Tests for the exception variant."""

    def test_round_trip(self) -> None:
        error = create_error(ErrorKind.GENERIC, 1, message='broken')
        exc = error.to_exception()
        assert isinstance(exc, StructValidationError)
        assert exc.to_struct() is error
        assert exc.kind is ErrorKind.GENERIC

    def test_message_at_root(self) -> None:
        error = create_error(ErrorKind.GENERIC, 1, message='broken')
        assert str(error.to_exception()) == 'broken'

    def test_message_with_path(self) -> None:
        error = create_error(ErrorKind.GENERIC, 1, message='broken').with_parent('1').with_parent('items')
        assert str(error.to_exception()) == 'items.1: broken'
