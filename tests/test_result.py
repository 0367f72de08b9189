"""Tests for Result type (Ok and Err)."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ferrum import (
    Err,
    NotAnOptionError,
    NotAResultError,
    Nothing,
    Ok,
    Some,
    UnwrapError,
)
from tests.strategies import exceptions, results, texts, values


class TestOkCreation:
    """Tests for Ok instantiation and basic properties."""

    def test_ok_creation(self):
        """Ok wraps a value."""
        assert Ok(42).value == 42

    def test_ok_with_none(self):
        """Ok can wrap None."""
        assert Ok(None).value is None

    def test_void_ok(self):
        """Ok() is the void success."""
        assert Ok() == Ok(None)
        assert Ok().unwrap() is None

    def test_ok_is_frozen(self):
        """Ok instances are immutable."""
        ok = Ok(42)
        with pytest.raises(AttributeError):
            ok.value = 100  # type: ignore[misc]
        with pytest.raises(AttributeError):
            ok.map = None  # type: ignore[method-assign,assignment]
        assert ok.map(lambda x: x + 1) == Ok(43)


class TestErrCreation:
    """Tests for Err instantiation and basic properties."""

    def test_err_creation(self):
        """Err wraps an error value."""
        assert Err('error message').error == 'error message'

    def test_err_with_exception(self):
        """Err can wrap exception objects."""
        exc = ValueError('something went wrong')
        assert Err(exc).error is exc

    def test_err_is_frozen(self):
        """Err instances are immutable."""
        err = Err('error')
        with pytest.raises(AttributeError):
            err.error = 'new error'  # type: ignore[misc]
        with pytest.raises(AttributeError):
            err.unwrap_err = lambda: 'x'  # type: ignore[method-assign]
        assert err.unwrap_err() == 'error'


class TestResultEquality:
    """Tests for Result equality, hashing and eq()."""

    def test_ok_equality(self):
        assert Ok(42) == Ok(42)
        assert Ok(42) != Ok(43)

    def test_err_equality(self):
        assert Err('error') == Err('error')
        assert Err('error1') != Err('error2')

    def test_ok_not_equal_to_err(self):
        assert Ok(42) != Err(42)

    def test_hashable(self):
        assert hash(Ok(42)) == hash(Ok(42))
        assert {Err('e'): 'value'}[Err('e')] == 'value'

    @given(values)
    def test_eq_ok(self, v):
        assert Ok(v).eq(Ok(v)) is True
        assert Ok(v).eq(Err(v)) is False

    def test_eq_err(self):
        exc = ValueError('x')
        assert Err(exc).eq(Err(exc)) is True
        assert Err('a').eq(Err('a')) is True
        assert Err('a').eq(Ok('a')) is False

    def test_eq_rejects_non_result(self):
        with pytest.raises(NotAResultError):
            Ok(1).eq(Some(1))  # type: ignore[arg-type]
        with pytest.raises(NotAResultError):
            Err(1).eq(1)  # type: ignore[arg-type]


class TestResultQuerying:
    """Tests for is_ok(), is_err() and the predicate forms."""

    def test_variants(self):
        assert Ok(1).is_ok() is True
        assert Ok(1).is_err() is False
        assert Err(1).is_ok() is False
        assert Err(1).is_err() is True

    def test_is_ok_and(self, spy):
        assert Ok(2).is_ok_and(lambda x: x == 2) is True
        pred = spy(True)
        assert Err(2).is_ok_and(pred) is False
        assert pred.count == 0

    def test_is_err_and(self, spy):
        assert Err('boom').is_err_and(lambda e: e == 'boom') is True
        pred = spy(True)
        assert Ok(2).is_err_and(pred) is False
        assert pred.count == 0

    @given(results)
    def test_variant_is_exclusive(self, result):
        assert result.is_ok() != result.is_err()


class TestResultExtraction:
    """Tests for expect, unwrap and the error-side extractors."""

    def test_ok_unwrap(self):
        assert Ok(42).unwrap() == 42

    def test_err_unwrap_raises(self):
        with pytest.raises(UnwrapError, match='boom'):
            Err('boom').unwrap()

    def test_err_expect_appends_error(self):
        with pytest.raises(UnwrapError) as exc_info:
            Err('disk full').expect('could not save')
        assert str(exc_info.value) == 'could not save: disk full'

    def test_ok_expect_err_appends_value(self):
        with pytest.raises(UnwrapError) as exc_info:
            Ok(5).expect_err('expected failure')
        assert str(exc_info.value) == 'expected failure: 5'

    def test_expect_err_on_err(self):
        assert Err('e').expect_err('unused') == 'e'

    def test_unwrap_err(self):
        assert Err('e').unwrap_err() == 'e'
        with pytest.raises(UnwrapError):
            Ok(1).unwrap_err()

    def test_unwrap_or(self):
        assert Ok(1).unwrap_or(0) == 1
        assert Err('e').unwrap_or(0) == 0

    def test_unwrap_or_else(self, spy):
        fallback = spy(0)
        assert Ok(1).unwrap_or_else(fallback) == 1
        assert fallback.count == 0
        assert Err('e').unwrap_or_else(lambda e: len(e)) == 1

    def test_into_ok_and_into_err(self):
        assert Ok(3).into_ok() == 3
        assert Err('x').into_err() == 'x'
        with pytest.raises(UnwrapError):
            Err('x').into_ok()
        with pytest.raises(UnwrapError):
            Ok(3).into_err()

    def test_unprintable_error_does_not_mask_unwrap(self):
        class Hostile:
            def __str__(self):
                raise RuntimeError('no str')

            def __repr__(self):
                raise RuntimeError('no repr')

        with pytest.raises(UnwrapError, match='unprintable Hostile'):
            Err(Hostile()).expect('context')


class TestResultConversion:
    """Tests for ok, err and transpose."""

    @given(values)
    def test_ok_and_err(self, v):
        assert Ok(v).ok() == Some(v)
        assert Ok(v).err() is Nothing
        assert Err(v).ok() is Nothing
        assert Err(v).err() == Some(v)

    def test_void_ok_converts_to_nothing(self):
        assert Ok().ok() is Nothing

    @given(values)
    def test_transpose(self, v):
        assert Ok(Some(v)).transpose() == Some(Ok(v))

    def test_transpose_nothing(self):
        assert Ok(Nothing).transpose() is Nothing

    @given(texts)
    def test_transpose_err(self, e):
        assert Err(e).transpose() == Some(Err(e))

    def test_transpose_round_trip(self):
        assert Ok(Some(1)).transpose().transpose() == Ok(Some(1))
        assert Some(Err('e')).transpose().transpose() == Some(Err('e'))

    def test_transpose_requires_option_payload(self):
        with pytest.raises(NotAnOptionError):
            Ok(5).transpose()


class TestResultTransformation:
    """Tests for map, map_err, map_or, map_or_else and flatten."""

    @given(st.integers())
    def test_map_fusion(self, v):
        def f(x):
            return x - 3

        def g(x):
            return x * 7

        assert Ok(v).map(f).map(g) == Ok(v).map(lambda x: g(f(x)))

    def test_err_map_keeps_instance(self, spy):
        f = spy(0)
        err = Err('e')
        assert err.map(f) is err
        assert f.count == 0

    def test_map_err(self):
        assert Err('e').map_err(str.upper) == Err('E')
        ok = Ok(1)
        assert ok.map_err(str.upper) is ok

    def test_map_or(self):
        assert Ok(2).map_or(0, lambda x: x + 1) == 3
        assert Err('e').map_or(0, lambda x: x + 1) == 0

    def test_map_or_else_passes_error(self):
        assert Err('abc').map_or_else(len, lambda x: x + 1) == 3
        assert Ok(2).map_or_else(len, lambda x: x + 1) == 3

    def test_flatten(self):
        assert Ok(Ok(5)).flatten().unwrap() == 5
        assert Ok(Err('x')).flatten().unwrap_err() == 'x'

    def test_flatten_err_is_same_instance(self):
        err = Err('x')
        assert err.flatten() is err

    def test_flatten_requires_result_payload(self):
        with pytest.raises(NotAResultError):
            Ok(5).flatten()


class TestResultBoolean:
    """Tests for and_, or_, and_then and or_else."""

    def test_and(self):
        assert Ok(1).and_(Ok(2)) == Ok(2)
        assert Ok(1).and_(Err('e')) == Err('e')
        err = Err('first')
        assert err.and_(Ok(2)) is err

    def test_and_rejects_non_result(self):
        with pytest.raises(NotAResultError):
            Ok(1).and_(2)  # type: ignore[arg-type]

    def test_or(self):
        ok = Ok(1)
        assert ok.or_(Ok(2)) is ok
        assert Err('e').or_(Ok(2)) == Ok(2)
        assert Err('e').or_(Err('f')) == Err('f')

    def test_or_rejects_non_result(self):
        with pytest.raises(NotAResultError):
            Err('e').or_(Some(1))  # type: ignore[arg-type]

    def test_and_then(self):
        def positive(v):
            return Ok(v * 2) if v > 0 else Err('negative')

        assert Ok(5).and_then(positive).unwrap() == 10
        assert Ok(-1).and_then(positive) == Err('negative')
        assert Err('boom').and_then(lambda v: Ok(v)).unwrap_err() == 'boom'

    def test_err_and_then_keeps_instance(self, spy):
        f = spy(Ok(1))
        err = Err('boom')
        assert err.and_then(f) is err
        assert f.count == 0

    def test_and_then_requires_result_return(self):
        with pytest.raises(NotAResultError):
            Ok(1).and_then(lambda v: v)

    @given(st.integers())
    def test_and_then_associativity(self, v):
        def f(x):
            return Ok(x // 2) if x % 3 else Err('div3')

        def g(x):
            return Ok(x + 10) if x >= 0 else Err('neg')

        assert Ok(v).and_then(f).and_then(g) == Ok(v).and_then(lambda x: f(x).and_then(g))

    def test_or_else(self, spy):
        recover = spy(Ok(0))
        ok = Ok(1)
        assert ok.or_else(recover) is ok
        assert recover.count == 0
        assert Err('e').or_else(recover) == Ok(0)
        assert recover.calls == [('e',)]

    def test_or_else_requires_result_return(self):
        with pytest.raises(NotAResultError):
            Err('e').or_else(lambda e: e)


class TestResultCasts:
    """Tests for as_ok and as_err."""

    def test_as_ok_returns_self(self):
        ok = Ok(1)
        assert ok.as_ok() is ok

    def test_as_err_returns_self(self):
        err = Err('e')
        assert err.as_err() is err

    def test_wrong_variant_raises(self):
        with pytest.raises(UnwrapError):
            Ok(1).as_err()
        with pytest.raises(UnwrapError):
            Err('e').as_ok()


class TestResultInspectAndProtocols:
    """Tests for inspect, inspect_err, iteration and rendering."""

    def test_inspect(self, spy):
        f = spy()
        ok = Ok(1)
        assert ok.inspect(f) is ok
        assert f.calls == [(1,)]
        err = Err('e')
        assert err.inspect(f) is err
        assert f.count == 1

    def test_inspect_err(self, spy):
        f = spy()
        err = Err('e')
        assert err.inspect_err(f) is err
        assert f.calls == [('e',)]
        assert Ok(1).inspect_err(f) == Ok(1)
        assert f.count == 1

    def test_iteration(self):
        assert list(Ok(1)) == [1]
        assert list(Err('e')) == []

    def test_str(self):
        assert str(Ok(1)) == 'Ok(1)'
        assert str(Err('boom')) == 'Err(boom)'

    def test_repr(self):
        assert repr(Ok('a')) == "Ok('a')"
        assert repr(Err(ValueError('x'))) == "Err(ValueError('x'))"

    @given(exceptions)
    def test_err_keeps_exception_identity(self, exc):
        assert Err(exc).unwrap_err() is exc
