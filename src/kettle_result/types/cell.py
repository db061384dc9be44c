"""OptionCell: a mutable slot owning an Option.

Some and Nothing are immutable, so the in-place operations (take, replace,
insert, get_or_insert) live on a cell that owns the current Option and
hands back the previous contents by value.
"""

from __future__ import annotations

from collections.abc import Callable

from kettle_result.types.option import Nothing, NothingType, Some

__all__ = ['OptionCell']


class OptionCell[T]:
    """A slot holding exactly one Option[T] that can be updated in place.

    Not synchronized: a cell is meant to have a single owner at a time.

    Examples:
        >>> cell: OptionCell[int] = OptionCell()
        >>> cell.get_or_insert_with(lambda: 8)
        8
        >>> cell.option
        Some(value=8)
        >>> cell.take()
        Some(value=8)
        >>> cell.option
        NothingType()
    """

    __slots__ = ('_option',)

    def __init__(self, option: Some[T] | NothingType = Nothing) -> None:
        self._option: Some[T] | NothingType = option

    @classmethod
    def some(cls, value: T) -> OptionCell[T]:
        """Create a cell holding Some(value)."""
        return cls(Some(value))

    @property
    def option(self) -> Some[T] | NothingType:
        """The Option currently held by the cell."""
        return self._option

    def is_some(self) -> bool:
        return isinstance(self._option, Some)

    def is_none(self) -> bool:
        return not isinstance(self._option, Some)

    def take(self) -> Some[T] | NothingType:
        """Move the contents out, leaving Nothing in the cell.

        Returns:
            The Option held before the call.
        """
        old = self._option
        self._option = Nothing
        return old

    def replace(self, value: T) -> Some[T] | NothingType:
        """Store Some(value), returning the previous contents."""
        old = self._option
        self._option = Some(value)
        return old

    def insert(self, value: T) -> T:
        """Store Some(value) regardless of the current contents and return value."""
        self._option = Some(value)
        return value

    def get_or_insert(self, value: T) -> T:
        """Return the held value, storing `value` first if the cell is empty."""
        if isinstance(self._option, NothingType):
            self._option = Some(value)
        return self._option.value

    def get_or_insert_with(self, f: Callable[[], T]) -> T:
        """Return the held value, storing f() first if the cell is empty.

        f is only called when the cell holds Nothing.
        """
        if isinstance(self._option, NothingType):
            self._option = Some(f())
        return self._option.value

    def __repr__(self) -> str:
        return f'OptionCell({self._option!r})'

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OptionCell):
            return self._option == other._option
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]
