"""Tests for Result type (Ok and Err)."""

import pytest
from hypothesis import given
from hypothesis import strategies as st
from klaw_struct import Err, ErrorKind, Nothing, NothingType, Ok, Result, Some, StructValidationError, collect, create_error

from tests.strategies import exceptions


class TestConstruction:
    """Variants, immutability and equality."""

    def test_fields(self, sample_ok, sample_err):
        assert sample_ok.value == 42
        assert isinstance(sample_err.error, ValueError)
        assert Ok(None).value is None

    @pytest.mark.parametrize('result', [Ok(1), Err('e')])
    def test_frozen(self, result):
        with pytest.raises(AttributeError):
            result.value = 2  # type: ignore[union-attr, misc]

    def test_equality_is_per_variant(self):
        assert Ok('x') == Ok('x')
        assert Err('x') == Err('x')
        assert Ok('x') != Err('x')
        assert {Ok(1): 'one'}[Ok(1)] == 'one'


class TestResultQuerying:
    """Tests for is_ok(), is_err(), is_ok_and(), is_err_and()."""

    def test_is_ok_is_err(self):
        assert Ok(42).is_ok() is True
        assert Ok(42).is_err() is False
        assert Err('error').is_ok() is False
        assert Err('error').is_err() is True

    def test_is_ok_and(self):
        assert Ok(2).is_ok_and(lambda x: x > 1) is True
        assert Ok(0).is_ok_and(lambda x: x > 1) is False
        assert Err(2).is_ok_and(lambda x: True) is False

    def test_is_err_and(self):
        assert Err('boom').is_err_and(lambda e: e == 'boom') is True
        assert Err('boom').is_err_and(lambda e: e == 'other') is False
        assert Ok('boom').is_err_and(lambda e: True) is False


class TestResultUnwrap:
    """Tests for unwrap, unwrap_or, unwrap_or_else, expect and their err twins."""

    def test_ok_unwrap(self):
        assert Ok(42).unwrap() == 42

    def test_err_unwrap_raises(self):
        with pytest.raises(RuntimeError, match='Called unwrap on Err'):
            Err('error').unwrap()

    def test_err_unwrap_chains_exception_cause(self):
        """The wrapped exception becomes the cause of the unwrap failure."""
        exc = ValueError('root cause')
        with pytest.raises(RuntimeError) as exc_info:
            Err(exc).unwrap()
        assert exc_info.value.__cause__ is exc

    def test_err_unwrap_chains_struct_error_cause(self):
        """A struct error is chained through its exception variant."""
        error = create_error(ErrorKind.VALIDATION, 'x', message='bad')
        with pytest.raises(RuntimeError) as exc_info:
            Err(error).unwrap()
        cause = exc_info.value.__cause__
        assert isinstance(cause, StructValidationError)
        assert cause.to_struct() == error

    def test_err_unwrap_plain_value_has_no_cause(self):
        with pytest.raises(RuntimeError) as exc_info:
            Err('plain').unwrap()
        assert exc_info.value.__cause__ is None

    def test_unwrap_or(self):
        assert Ok(42).unwrap_or(0) == 42
        assert Err('error').unwrap_or(0) == 0

    def test_unwrap_or_else_receives_error(self):
        """Err.unwrap_or_else() computes the fallback from the error."""
        assert Err('abc').unwrap_or_else(len) == 3
        assert Ok(42).unwrap_or_else(len) == 42

    def test_expect(self):
        assert Ok(42).expect('should not fail') == 42
        with pytest.raises(RuntimeError, match="custom message: 'error'"):
            Err('error').expect('custom message')

    def test_unwrap_err(self):
        assert Err('e').unwrap_err() == 'e'
        with pytest.raises(RuntimeError, match='Called unwrap_err on Ok'):
            Ok(1).unwrap_err()

    def test_expect_err(self):
        assert Err('e').expect_err('unused') == 'e'
        with pytest.raises(RuntimeError, match='wanted failure: 1'):
            Ok(1).expect_err('wanted failure')

    @given(st.integers(), st.integers())
    def test_unwrap_or_never_raises(self, value: int, default: int):
        """unwrap_or() returns the default on Err and never raises."""
        assert Err(value).unwrap_or(default) == default


class TestResultMap:
    """Tests for map, map_err, map_or, map_or_else."""

    def test_ok_map(self):
        assert Ok(1).map(lambda x: x + 1).unwrap() == 2

    def test_err_map_untouched(self):
        """map() never touches Err."""
        assert Err('e').map(lambda x: x + 1).unwrap_err() == 'e'

    def test_map_err(self):
        assert Err('e').map_err(str.upper) == Err('E')
        assert Ok(1).map_err(str.upper) == Ok(1)

    def test_map_or(self):
        assert Ok(5).map_or(0, lambda x: x * 2) == 10
        assert Err('e').map_or(0, lambda x: x * 2) == 0

    def test_map_or_else(self):
        assert Ok(5).map_or_else(len, lambda x: x * 2) == 10
        assert Err('err').map_or_else(len, lambda x: x * 2) == 3


class TestResultInspect:
    """Tests for inspect() and inspect_err()."""

    def test_ok_inspect(self):
        seen = []
        ok = Ok(1)
        assert ok.inspect(seen.append) is ok
        assert ok.inspect_err(seen.append) is ok
        assert seen == [1]

    def test_err_inspect(self):
        seen = []
        err = Err('e')
        assert err.inspect(seen.append) is err
        assert err.inspect_err(seen.append) is err
        assert seen == ['e']


class TestResultChaining:
    """Tests for and_then, or_else, and_, or_."""

    def test_and_then(self):
        assert Ok(5).and_then(lambda x: Ok(x * 2)) == Ok(10)
        assert Ok(5).and_then(lambda x: Err('no')) == Err('no')
        assert Err('e').and_then(lambda x: Ok(x * 2)) == Err('e')

    def test_or_else(self):
        assert Ok(1).or_else(lambda e: Ok(0)) == Ok(1)
        assert Err('e').or_else(lambda e: Ok(len(e))) == Ok(1)
        assert Err('e').or_else(lambda e: Err(e * 2)) == Err('ee')

    def test_and(self):
        assert Ok(1).and_(Ok(2)) == Ok(2)
        assert Ok(1).and_(Err('x')) == Err('x')
        assert Err('e').and_(Ok(2)) == Err('e')

    def test_or(self):
        assert Ok(1).or_(Ok(2)) == Ok(1)
        assert Err('e').or_(Ok(2)) == Ok(2)
        assert Err('e').or_(Err('f')) == Err('f')


class TestResultToOption:
    """Tests for ok() and err() bridges to Option."""

    def test_ok_side(self):
        assert Ok(1).ok() == Some(1)
        assert Err('e').ok() is Nothing

    def test_err_side(self):
        assert Ok(1).err() is Nothing
        assert Err('e').err() == Some('e')


class TestResultMatch:
    """Tests for match() dispatch and structural pattern matching."""

    def test_match(self):
        assert Ok(2).match(ok=lambda v: v * 2, err=lambda e: -1) == 4
        assert Err('e').match(ok=lambda v: v * 2, err=lambda e: -1) == -1

    def test_structural_match(self):
        result: Result[int, str] = Err('bad')
        match result:
            case Ok(_):
                pytest.fail('Should not match Ok')
            case Err(error):
                assert error == 'bad'


class TestCollect:
    """Tests for collect()."""

    def test_collect_all_ok(self):
        assert collect([Ok(1), Ok(2), Ok(3)]) == Ok([1, 2, 3])

    def test_collect_first_err(self):
        assert collect([Ok(1), Err('a'), Err('b')]) == Err('a')

    def test_collect_empty(self):
        assert collect([]) == Ok([])

    @given(exceptions)
    def test_collect_short_circuits(self, exc):
        """Results after the first Err are never consumed."""
        consumed = []

        def gen():
            for result in (Ok(1), Err(exc), Ok(2)):
                consumed.append(result)
                yield result

        assert collect(gen()) == Err(exc)
        assert len(consumed) == 2


class TestLaws:
    """Property-based tests for monad laws."""

    @given(st.integers())
    def test_left_identity(self, value: int):
        def f(x: int) -> Ok[int] | Err[str]:
            return Ok(x * 2)

        assert Ok(value).and_then(f) == f(value)

    @given(st.integers())
    def test_right_identity(self, value: int):
        assert Ok(value).and_then(Ok) == Ok(value)


class TestDocumentation:
    """Every public method on the four variants carries a docstring."""

    @pytest.mark.parametrize('variant', [Ok, Err, Some, NothingType])
    def test_public_methods_documented(self, variant):
        undocumented = [
            name
            for name, member in vars(variant).items()
            if callable(member) and not name.startswith('_') and not (member.__doc__ or '').strip()
        ]
        assert undocumented == []
