"""Tests for Option type (Some and Nothing)."""

import copy
import threading

import pytest
from hypothesis import given
from hypothesis import strategies as st

from kettle_result import (
    CloneError,
    Err,
    Nothing,
    NothingType,
    Ok,
    Some,
    UnwrapError,
    from_nullable,
)
from tests.strategies import integers, option_of_results, options


class TestSomeCreation:
    """Tests for Some instantiation and basic properties."""

    def test_some_creation(self):
        """Some wraps a value."""
        some = Some(42)
        assert some.value == 42

    def test_some_with_none(self):
        """Some can wrap None (Some(None) is not Nothing)."""
        some = Some(None)
        assert some.value is None
        assert some != Nothing
        assert some.is_some()

    def test_some_is_frozen(self):
        """Some instances are immutable."""
        some = Some(42)
        with pytest.raises(AttributeError):
            some.value = 100  # type: ignore[misc]


class TestNothingCreation:
    """Tests for Nothing singleton."""

    def test_nothing_is_singleton(self):
        assert Nothing is Nothing
        assert isinstance(Nothing, NothingType)

    def test_nothing_type_instances_equal(self):
        """Multiple NothingType instances are equal."""
        assert NothingType() == Nothing

    def test_nothing_has_no_payload(self):
        """Nothing carries no value attribute to read."""
        assert not hasattr(Nothing, 'value')


class TestOptionEquality:
    """Tests for Option equality and hashing."""

    def test_some_equality(self):
        assert Some(42) == Some(42)
        assert Some(42) != Some(43)

    def test_some_not_equal_to_nothing(self):
        assert Some(42) != Nothing

    def test_some_hashable(self):
        assert {Some(1): 'x'}[Some(1)] == 'x'
        assert hash(Nothing) == hash(NothingType())


class TestOptionQuerying:
    """Tests for is_some, is_none and their predicate forms."""

    def test_discriminants(self):
        assert Some(2).is_some() is True
        assert Some(2).is_none() is False
        assert Nothing.is_some() is False
        assert Nothing.is_none() is True

    def test_is_some_and(self):
        assert Some(2).is_some_and(lambda x: x > 1) is True
        assert Some(0).is_some_and(lambda x: x > 1) is False
        assert Nothing.is_some_and(lambda x: x > 1) is False

    def test_is_none_or(self):
        assert Some(2).is_none_or(lambda x: x > 1) is True
        assert Some(0).is_none_or(lambda x: x > 1) is False
        assert Nothing.is_none_or(lambda x: x > 1) is True

    def test_contains(self):
        assert Some(2).contains(2) is True
        assert Some(3).contains(2) is False
        assert Nothing.contains(2) is False

    @given(integers)
    def test_variants_are_exclusive(self, value: int):
        some = Some(value)
        assert some.is_some() != some.is_none()
        assert Nothing.is_some() != Nothing.is_none()


class TestOptionUnwrap:
    """Tests for unwrap, expect and defaults."""

    def test_some_unwrap(self):
        assert Some(42).unwrap() == 42

    def test_nothing_unwrap_raises(self):
        with pytest.raises(UnwrapError, match='called `unwrap\\(\\)` on a `Nothing` value'):
            Nothing.unwrap()

    def test_unwrap_error_is_runtime_error(self):
        with pytest.raises(RuntimeError):
            Nothing.unwrap()

    def test_some_expect(self):
        assert Some(2).expect('foo') == 2

    def test_nothing_expect_raises_with_message(self):
        with pytest.raises(UnwrapError, match='^foo$'):
            Nothing.expect('foo')

    def test_unwrap_or(self):
        assert Some('car').unwrap_or('bike') == 'car'
        assert Nothing.unwrap_or('bike') == 'bike'

    def test_unwrap_or_else(self):
        calls = []

        def factory():
            calls.append(1)
            return 20

        assert Some(4).unwrap_or_else(factory) == 4
        assert calls == []
        assert Nothing.unwrap_or_else(factory) == 20
        assert calls == [1]

    @given(integers)
    def test_some_unwrap_returns_value(self, value: int):
        assert Some(value).unwrap() == value


class TestOptionMap:
    """Tests for map, map_or, map_or_else and inspect."""

    def test_some_map(self):
        assert Some('foo').map(len) == Some(3)

    def test_nothing_map(self):
        assert Nothing.map(len) is Nothing

    def test_map_or(self):
        assert Some('foo').map_or(12, len) == 3
        assert Nothing.map_or(12, len) == 12

    def test_map_or_else(self):
        assert Some('foo').map_or_else(lambda: 12, len) == 3
        assert Nothing.map_or_else(lambda: 12, len) == 12

    def test_inspect(self):
        seen = []
        assert Some('foo').inspect(seen.append) == Some('foo')
        assert Nothing.inspect(seen.append) is Nothing
        assert seen == ['foo']


class TestOptionChaining:
    """Tests for and_, and_then, filter, or_, or_else, xor."""

    def test_and(self):
        assert Some(2).and_(Nothing) is Nothing
        assert Nothing.and_(Some('foo')) is Nothing
        assert Some(2).and_(Some('foo')) == Some('foo')
        assert Nothing.and_(Nothing) is Nothing

    def test_and_then(self):
        def sq_then_to_string(x: int):
            return Some(str(x * x))

        assert Some(2).and_then(sq_then_to_string) == Some('4')
        assert Nothing.and_then(sq_then_to_string) is Nothing

    def test_nothing_and_then_does_not_call(self):
        def boom(_):
            raise AssertionError('should not be called')

        assert Nothing.and_then(boom) is Nothing

    def test_filter(self):
        def is_even(n: int) -> bool:
            return n % 2 == 0

        assert Nothing.filter(is_even) is Nothing
        assert Some(3).filter(is_even) is Nothing
        assert Some(4).filter(is_even) == Some(4)

    def test_or(self):
        assert Some(2).or_(Nothing) == Some(2)
        assert Nothing.or_(Some(100)) == Some(100)
        assert Some(2).or_(Some(100)) == Some(2)
        assert Nothing.or_(Nothing) is Nothing

    def test_or_else(self):
        assert Some('barbarians').or_else(lambda: Some('vikings')) == Some('barbarians')
        assert Nothing.or_else(lambda: Some('vikings')) == Some('vikings')
        assert Nothing.or_else(lambda: Nothing) is Nothing

    def test_xor(self):
        assert Some(2).xor(Nothing) == Some(2)
        assert Nothing.xor(Some(2)) == Some(2)
        assert Some(2).xor(Some(2)) is Nothing
        assert Nothing.xor(Nothing) is Nothing


class TestOptionZip:
    """Tests for zip, zip_with and unzip."""

    def test_zip(self):
        assert Some(1).zip(Some('hi')) == Some((1, 'hi'))
        assert Some(1).zip(Nothing) is Nothing
        assert Nothing.zip(Some('hi')) is Nothing

    def test_zip_with(self):
        assert Some(17.5).zip_with(Some(42.7), lambda x, y: (x, y)) == Some((17.5, 42.7))
        assert Some(17.5).zip_with(Nothing, lambda x, y: (x, y)) is Nothing
        assert Nothing.zip_with(Some(1), lambda x, y: (x, y)) is Nothing

    def test_unzip(self):
        assert Some((1, 'hi')).unzip() == (Some(1), Some('hi'))
        assert Nothing.unzip() == (Nothing, Nothing)


class TestOptionConversion:
    """Tests for ok_or, ok_or_else, transpose and flatten."""

    def test_ok_or(self):
        assert Some('foo').ok_or(0) == Ok('foo')
        assert Nothing.ok_or(0) == Err(0)

    def test_ok_or_else(self):
        assert Some('foo').ok_or_else(lambda: 0) == Ok('foo')
        assert Nothing.ok_or_else(lambda: 0) == Err(0)

    def test_transpose(self):
        assert Some(Ok(5)).transpose() == Ok(Some(5))
        assert Some(Err('bad')).transpose() == Err('bad')
        assert Nothing.transpose() == Ok(Nothing)

    def test_flatten(self):
        assert Some(Some('foo')).flatten() == Some('foo')
        assert Some(Nothing).flatten() is Nothing
        assert Nothing.flatten() is Nothing

    def test_flatten_removes_one_level(self):
        nested = Some(Some(Some(6)))
        assert nested.flatten() == Some(Some(6))
        assert nested.flatten().flatten() == Some(6)

    @given(option_of_results)
    def test_transpose_round_trip(self, value):
        """Transposing twice gives back the original Option[Result]."""
        assert value.transpose().transpose() == value

    def test_from_nullable(self):
        assert from_nullable(None) is Nothing
        assert from_nullable(0) == Some(0)


class TestOptionIteration:
    """Tests for iteration over Options."""

    def test_some_yields_value_once(self):
        assert list(Some(4)) == [4]

    def test_nothing_yields_nothing(self):
        assert list(Nothing) == []

    def test_iteration_is_restartable(self):
        some = Some(4)
        assert list(some.iter()) == [4]
        assert list(some.iter()) == [4]

    def test_sum_over_options(self):
        total = 1
        for value in Some(4):
            total += value
        assert total == 5


class TestOptionClone:
    """Tests for clone."""

    def test_clone_is_deep(self):
        original = Some({'a': 1})
        cloned = original.clone()
        original.unwrap()['a'] = 2
        cloned.unwrap().unwrap()['a'] = 3
        assert original == Some({'a': 2})
        assert cloned.unwrap() == Some({'a': 3})

    def test_nothing_clone(self):
        assert Nothing.clone() == Ok(Nothing)

    def test_clone_failure_is_err(self):
        result = Some(threading.Lock()).clone()
        assert result.is_err()
        assert isinstance(result.unwrap_err(), CloneError)
        assert isinstance(result.unwrap_err().__cause__, TypeError)


class TestOptionMatch:
    """Tests for the match method and pattern matching."""

    def test_match_method(self):
        handlers = {'some': lambda v: 'Some' + v, 'none': lambda: 'None'}
        assert Some('value').match(**handlers) == 'Somevalue'
        assert Nothing.match(**handlers) == 'None'

    def test_structural_pattern_matching(self):
        match Some(42):
            case Some(value):
                assert value == 42
            case NothingType():
                pytest.fail('Should not match Nothing')


class TestOptionCopy:
    def test_some_copy(self):
        some = Some(42)
        copied = copy.copy(some)
        assert copied == some


class TestOptionMonadLaws:
    """Property-based tests for monad and functor laws."""

    @given(options)
    def test_map_identity(self, option):
        assert option.map(lambda x: x) == option

    @given(integers)
    def test_left_identity(self, value: int):
        def f(x: int):
            return Some(x * 2)

        assert Some(value).and_then(f) == f(value)

    @given(options)
    def test_right_identity(self, option):
        assert option.and_then(Some) == option

    @given(options)
    def test_associativity(self, option):
        def f(x: int):
            return Some(x + 1) if x % 3 else Nothing

        def g(x: int):
            return Some(str(x))

        assert option.and_then(f).and_then(g) == option.and_then(lambda x: f(x).and_then(g))

    @given(options, st.integers())
    def test_ok_or_preserves_presence(self, option, err: int):
        assert option.ok_or(err).is_ok() == option.is_some()
