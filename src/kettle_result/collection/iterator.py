"""CollectionIter: peekable iterator yielding Option-wrapped entries."""

from __future__ import annotations

from collections.abc import Iterator

from kettle_result.types.option import Nothing, NothingType, Some

__all__ = ['CollectionIter']


class CollectionIter[K, V]:
    """One-shot, peekable iterator over a Collection's entries.

    next() returns Some((key, value)) for each entry in insertion order
    and then Nothing on every later call, so callers can match on the end
    instead of catching StopIteration. The Python iterator protocol is
    also supported and yields the same Some items.

    Like dict iteration, adding or removing keys of the underlying
    collection while iterating raises RuntimeError.

    Examples:
        >>> c = Collection.from_iterable([('foo', 1)])
        >>> it = c.iter()
        >>> it.next()
        Some(value=('foo', 1))
        >>> it.next()
        NothingType()
    """

    __slots__ = ('_entries', '_peeked')

    def __init__(self, entries: Iterator[tuple[K, V]]) -> None:
        self._entries = entries
        self._peeked: Some[tuple[K, V]] | NothingType | None = None

    def _advance(self) -> Some[tuple[K, V]] | NothingType:
        try:
            return Some(next(self._entries))
        except StopIteration:
            return Nothing

    def next(self) -> Some[tuple[K, V]] | NothingType:
        """Consume and return the next entry, or Nothing when exhausted."""
        if self._peeked is not None:
            item, self._peeked = self._peeked, None
            return item
        return self._advance()

    def peek(self) -> Some[tuple[K, V]] | NothingType:
        """Return the next entry without consuming it."""
        if self._peeked is None:
            self._peeked = self._advance()
        return self._peeked

    def is_exhausted(self) -> bool:
        """Return True once no entries remain."""
        return self.peek().is_none()

    def __iter__(self) -> CollectionIter[K, V]:
        return self

    def __next__(self) -> Some[tuple[K, V]]:
        item = self.next()
        if isinstance(item, NothingType):
            raise StopIteration
        return item

    def __repr__(self) -> str:
        return f'<CollectionIter peeked={self._peeked!r}>'
