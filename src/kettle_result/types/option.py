"""Option type: Some[T] | Nothing for optional values."""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from kettle_result.errors import CloneError, UnwrapError

if TYPE_CHECKING:
    from kettle_result.types.result import Err, Ok

__all__ = ['Nothing', 'NothingType', 'Option', 'Some', 'from_nullable']


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value. It wraps a value that can be
    extracted, transformed, or passed through a chain of Option-returning
    operations. `Some(None)` is a present value and is not `Nothing`.

    Examples:
        >>> some = Some(42)
        >>> some.unwrap()
        42
        >>> some.map(lambda x: x * 2)
        Some(value=84)
        >>> list(some)
        [42]
    """

    value: T

    def __iter__(self) -> Iterator[T]:
        """Yield the contained value once."""
        yield self.value

    def iter(self) -> Iterator[T]:
        """Return a fresh iterator over the (single) contained value."""
        return iter(self)

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True if the option is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def is_some_and(self, predicate: Callable[[T], bool]) -> bool:
        """Return True if the option is Some and the value matches the predicate."""
        return predicate(self.value)

    def is_none_or(self, predicate: Callable[[T], bool]) -> bool:
        """Return True if the option is Nothing or the value matches the predicate."""
        return predicate(self.value)

    def unwrap(self) -> T:
        """Return the contained Some value.

        Since this is Some, this always succeeds.
        """
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the fallback function."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Some value, ignoring the message."""
        return self.value

    def contains(self, x: object) -> bool:
        """Return True if the contained value equals x."""
        return self.value == x

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Apply f to the contained value, ignoring the default."""
        return f(self.value)

    def map_or_else[U](self, default: Callable[[], U], f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Apply f to the contained value, ignoring the default factory."""
        return f(self.value)

    def inspect(self, f: Callable[[T], Any]) -> Some[T]:
        """Call f with the contained value and return self unchanged."""
        f(self.value)
        return self

    def and_[U](self, other: Some[U] | NothingType) -> Some[U] | NothingType:
        """Return other if self is Some, else return Nothing.

        Since this is Some, returns other.
        """
        return other

    def and_then[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Apply a function that returns an Option to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return Some if the predicate is satisfied, else Nothing.

        Args:
            predicate: Function that returns True to keep the value.

        Returns:
            Some(value) if predicate(value) is True, else Nothing.
        """
        if predicate(self.value):
            return self
        return Nothing

    def or_(self, _other: Some[T] | NothingType) -> Some[T]:
        """Return self if Some, else return other.

        Since this is Some, returns self.
        """
        return self

    def or_else(self, _f: Callable[[], Some[T] | NothingType]) -> Some[T]:
        """Return self unchanged since this is Some."""
        return self

    def xor(self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return Some if exactly one of self and other is Some.

        Since this is Some, returns self when other is Nothing and
        Nothing otherwise.
        """
        if isinstance(other, NothingType):
            return self
        return Nothing

    def zip[U](self, other: Some[U] | NothingType) -> Some[tuple[T, U]] | NothingType:
        """Combine two Some values into a tuple.

        If both are Some, returns Some((self.value, other.value)).
        If either is Nothing, returns Nothing.
        """
        if isinstance(other, Some):
            return Some((self.value, other.value))
        return Nothing

    def zip_with[U, R](self, other: Some[U] | NothingType, f: Callable[[T, U], R]) -> Some[R] | NothingType:
        """Combine two Some values with f.

        Returns Some(f(self.value, other.value)) if other is Some, else Nothing.
        """
        if isinstance(other, Some):
            return Some(f(self.value, other.value))
        return Nothing

    def unzip[A, B](self: Some[tuple[A, B]]) -> tuple[Some[A], Some[B]]:
        """Split an option holding a pair into a pair of options."""
        first, second = self.value
        return Some(first), Some(second)

    def ok_or[E](self, _err: E) -> Ok[T]:
        """Convert to Result, returning Ok(value).

        Args:
            _err: Ignored error value.

        Returns:
            Ok containing the value.
        """
        from kettle_result.types.result import Ok

        return Ok(self.value)

    def ok_or_else[E](self, _f: Callable[[], E]) -> Ok[T]:
        """Convert to Result, returning Ok(value).

        Args:
            _f: Ignored error factory function.

        Returns:
            Ok containing the value.
        """
        from kettle_result.types.result import Ok

        return Ok(self.value)

    def transpose[U, E](self: Some[Ok[U] | Err[E]]) -> Ok[Some[U]] | Err[E]:
        """Swap an Option of a Result into a Result of an Option.

        Some(Ok(u)) becomes Ok(Some(u)) and Some(Err(e)) becomes Err(e).
        """
        from kettle_result.types.result import Ok

        inner = self.value
        if isinstance(inner, Ok):
            return Ok(Some(inner.value))
        return inner

    def flatten[U](self: Some[Some[U] | NothingType]) -> Some[U] | NothingType:
        """Flatten a nested Option.

        Converts Option[Option[T]] into Option[T], removing one level.
        """
        return self.value  # type: ignore[return-value]

    def clone(self) -> Ok[Some[T]] | Err[CloneError]:
        """Return a deep copy of this option wrapped in Ok.

        Returns:
            Ok(Some(copy)) on success, Err(CloneError) if the value
            cannot be deep-copied.
        """
        from kettle_result.types.result import Err, Ok

        try:
            return Ok(Some(copy.deepcopy(self.value)))
        except Exception as e:
            return Err(CloneError(e))

    def match[R](self, *, some: Callable[[T], R], none: Callable[[], R]) -> R:  # noqa: ARG002
        """Dispatch on the variant, calling some(value)."""
        return some(self.value)


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    Nothing represents the absence of a value. Operations on Nothing
    typically return Nothing or a default value.

    This is a singleton - use the `Nothing` constant instead of
    instantiating directly.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
    """

    def __iter__(self) -> Iterator[Any]:
        """Yield nothing."""
        return iter(())

    def iter(self) -> Iterator[Any]:
        """Return an empty iterator."""
        return iter(())

    def is_some(self) -> TypeIs[Some[object]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True if the option is Nothing.

        This method provides type narrowing - after checking is_none(),
        the type checker knows the option is Nothing.
        """
        return True

    def is_some_and(self, _predicate: Callable[[Any], bool]) -> bool:
        return False

    def is_none_or(self, _predicate: Callable[[Any], bool]) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Nothing.

        Raises:
            UnwrapError: Always, since Nothing has no value to unwrap.
        """
        raise UnwrapError('called `unwrap()` on a `Nothing` value')

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Nothing."""
        return f()

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Args:
            msg: Custom error message.

        Raises:
            UnwrapError: Always, with the custom message.
        """
        raise UnwrapError(msg)

    def contains(self, _x: object) -> bool:
        return False

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def map_or[U](self, default: U, _f: Callable[[Any], U]) -> U:
        """Return the default since there's no value to map."""
        return default

    def map_or_else[U](self, default: Callable[[], U], _f: Callable[[Any], U]) -> U:
        """Compute the default since there's no value to map."""
        return default()

    def inspect(self, _f: Callable[[Any], Any]) -> NothingType:
        return self

    def and_[T](self, _other: Some[T] | NothingType) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def and_then[T, U](self, _f: Callable[[T], Some[U] | NothingType]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def or_[T](self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return other since self is Nothing."""
        return other

    def or_else[T](self, f: Callable[[], Some[T] | NothingType]) -> Some[T] | NothingType:
        """Apply a recovery function since this is Nothing.

        Args:
            f: Function that returns a new Option.

        Returns:
            The Option returned by f.
        """
        return f()

    def xor[T](self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return other: Some if other is Some, Nothing otherwise."""
        return other

    def zip[U](self, _other: Some[U] | NothingType) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def zip_with(self, _other: Some[Any] | NothingType, _f: Callable[[Any, Any], Any]) -> NothingType:
        return self

    def unzip(self) -> tuple[NothingType, NothingType]:
        """Return a pair of Nothing."""
        return self, self

    def ok_or[E](self, err: E) -> Err[E]:
        """Convert to Result, returning Err(err).

        Args:
            err: The error value to wrap.

        Returns:
            Err containing the error.
        """
        from kettle_result.types.result import Err

        return Err(err)

    def ok_or_else[E](self, f: Callable[[], E]) -> Err[E]:
        """Convert to Result, computing the error.

        Args:
            f: Function that produces the error value.

        Returns:
            Err containing the computed error.
        """
        from kettle_result.types.result import Err

        return Err(f())

    def transpose(self) -> Ok[NothingType]:
        """Return Ok(Nothing)."""
        from kettle_result.types.result import Ok

        return Ok(self)

    def flatten(self) -> NothingType:
        """Return Nothing since there's nothing to flatten."""
        return self

    def clone(self) -> Ok[NothingType]:
        """Return Ok(Nothing); there is no value to copy."""
        from kettle_result.types.result import Ok

        return Ok(self)

    def match[R](self, *, some: Callable[[Any], R], none: Callable[[], R]) -> R:  # noqa: ARG002
        """Dispatch on the variant, calling none()."""
        return none()


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def from_nullable[T](x: T | None) -> Some[T] | NothingType:
    """Wrap a possibly-None value: Nothing for None, Some(x) otherwise.

    Examples:
        >>> from_nullable(None)
        NothingType()
        >>> from_nullable(0)
        Some(value=0)
    """
    if x is None:
        return Nothing
    return Some(x)
